#!/usr/bin/env python3
import sys
import os

# Add the python directory to the start of sys.path
python_dir = os.path.join(os.path.dirname(__file__), "python")
if python_dir not in sys.path:
    sys.path.insert(0, python_dir)

from arith_ast import parse_term
from arith_errors import ArithError
from arith_eval import eval_ast
from arith_metrics import depth, size


def main():
    source = sys.stdin.readline().rstrip("\r\n")

    try:
        term = parse_term(source)
        print(f"Input: {term!r}")
        print(f"Depth: {depth(term)}")
        print(f"Size: {size(term)}")
        output = eval_ast(term)
        print(f"Output: {output!r}")
    except ArithError as e:
        print(f"Error: {e!r}", file=sys.stderr)
        sys.exit(1)
    except RecursionError:
        print("Error: term is nested too deeply", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
