#!/usr/bin/env python3
"""
Arith - Command Line Interface

Usage:
    python arith_cli.py <file>           Evaluate each line of a file
    python arith_cli.py -                Evaluate each line read from stdin
    python arith_cli.py --repl           Interactive REPL mode
    python arith_cli.py --json <file>    Output JSON reports
"""

import sys
import argparse
import json
from typing import Any, Dict, List

from arith_ast import parse_term, to_dict, to_int
from arith_errors import ArithError, UnknownRuleError
from arith_eval import eval_ast
from arith_metrics import depth, size


def colorize(text: str, color: str) -> str:
    """Add ANSI color to text."""
    colors = {
        'green': '\033[92m',
        'red': '\033[91m',
        'yellow': '\033[93m',
        'blue': '\033[94m',
        'bold': '\033[1m',
        'reset': '\033[0m'
    }
    return f"{colors.get(color, '')}{text}{colors['reset']}"


def analyze(source: str) -> Dict[str, Any]:
    """Parse a term, measure it and evaluate it.

    Parse and build errors propagate. A stuck term does not: the report
    keeps the parsed input and metrics, with the UnknownRuleError under
    "error" and "output" set to None.
    """
    term = parse_term(source)
    report = {
        "source": source,
        "input": term,
        "depth": depth(term),
        "size": size(term),
        "output": None,
        "error": None,
    }
    try:
        report["output"] = eval_ast(term)
    except UnknownRuleError as e:
        report["error"] = e
    return report


def report_to_json(report: Dict[str, Any]) -> Dict[str, Any]:
    """JSON-ready form of an analyze() report."""
    output = report["output"]
    result = {
        "source": report["source"],
        "input": to_dict(report["input"]),
        "depth": report["depth"],
        "size": report["size"],
        "output": to_dict(output) if output is not None else None,
        "value": to_int(output) if output is not None else None,
    }
    if report["error"] is not None:
        result["error"] = repr(report["error"])
    return result


def print_report(report: Dict[str, Any], quiet: bool = False):
    """Print a report in the Input/Depth/Size/Output layout."""
    if not quiet:
        print(f"Input: {report['input']!r}")
        print(f"Depth: {report['depth']}")
        print(f"Size: {report['size']}")

    if report["error"] is not None:
        print(colorize(f"Error: {report['error']!r}", "red"), file=sys.stderr)
    elif quiet:
        print(repr(report["output"]))
    else:
        print(f"Output: {report['output']!r}")


def read_lines(filename: str) -> List[str]:
    if filename == '-':
        return sys.stdin.read().splitlines()
    with open(filename, 'r') as f:
        return f.read().splitlines()


def run_file(filename: str, quiet: bool = False, json_output: bool = False) -> bool:
    """Evaluate every non-blank line of a file. Returns True if all evaluated."""
    try:
        lines = [line.strip() for line in read_lines(filename)]
    except OSError as e:
        print(colorize(f"Cannot read {filename}: {e}", "red"), file=sys.stderr)
        return False

    success = True
    reports = []

    for line in lines:
        if not line:
            continue
        try:
            report = analyze(line)
        except (ArithError, RecursionError) as e:
            success = False
            if json_output:
                reports.append({"source": line, "error": repr(e)})
            else:
                print(colorize(f"Error: {e!r}", "red"), file=sys.stderr)
            continue

        if report["error"] is not None:
            success = False
        if json_output:
            reports.append(report_to_json(report))
        else:
            print_report(report, quiet)

    if json_output:
        print(json.dumps(reports, indent=2))
    return success


def repl():
    """Interactive REPL for evaluating terms."""
    import readline  # noqa: F401  history/editing for input()

    print(colorize("Arith REPL", "bold"))
    print("Enter a term to evaluate. Type 'help' for commands, 'quit' to exit.")
    print()

    def show_help():
        print("""
Terms:
    true, false, 0
    succ <term>, pred <term>, iszero <term>
    if <term> then <term> else <term>

Commands:
    help                 Show this help
    quit, exit           Exit the REPL

Examples:
    pred pred succ succ succ 0
    if iszero succ 0 then true else false
        """)

    while True:
        try:
            line = input(colorize("arith> ", "blue")).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            break

        if not line:
            continue

        if line in ('quit', 'exit'):
            print("Goodbye!")
            break

        if line == 'help':
            show_help()
            continue

        try:
            report = analyze(line)
        except ArithError as e:
            print(colorize(f"Error: {e!r}", "red"))
            continue
        except RecursionError:
            print(colorize("Error: term is nested too deeply", "red"))
            continue

        print(f"  {report['input']!r}  (depth {report['depth']}, size {report['size']})")
        if report["error"] is not None:
            print(colorize(f"  stuck: {report['error']!r}", "yellow"))
        else:
            print(colorize(f"  => {report['output']!r}", "green"))


def main():
    parser = argparse.ArgumentParser(
        description="Arith CLI - Evaluate untyped arithmetic terms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python arith_cli.py terms.txt         Evaluate each line of a file
    echo "succ pred 0" | python arith_cli.py -
    python arith_cli.py --repl            Start interactive mode
    python arith_cli.py --json terms.txt  Output JSON reports
        """
    )

    parser.add_argument('file', nargs='?', help="File of terms, one per line ('-' for stdin)")
    parser.add_argument('--repl', action='store_true', help='Start interactive REPL')
    parser.add_argument('--json', action='store_true', help='Output JSON reports')
    parser.add_argument('-q', '--quiet', action='store_true', help='Quiet mode (only print results)')

    args = parser.parse_args()

    if args.repl:
        repl()
    elif args.file:
        success = run_file(args.file, quiet=args.quiet, json_output=args.json)
        sys.exit(0 if success else 1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
