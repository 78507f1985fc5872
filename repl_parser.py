#!/usr/bin/env python3
import sys
import os

# Add the python directory to the start of sys.path
python_dir = os.path.join(os.path.dirname(__file__), "python")
if python_dir not in sys.path:
    sys.path.insert(0, python_dir)

from arith_parser import parse
from arith_ast import from_pair
from arith_errors import ArithError, ParseError

def main():
    print("Arith Parser REPL")
    print("Type a term (e.g., 'succ pred 0', 'if true then 0 else succ 0') or 'exit' to quit.")
    print("-" * 50)

    while True:
        try:
            line = input("parser> ").strip()
            if not line:
                continue
            if line.lower() in ("exit", "quit"):
                break

            pairs = parse(line)
            for pair in pairs:
                print(pair.format_tree())

            print(f"AST: {from_pair(pairs.try_take())!r}")

        except ParseError as e:
            print(f"Parse Error: {e}")
        except ArithError as e:
            print(f"Error: {e!r}")
        except EOFError:
            break

if __name__ == "__main__":
    main()
