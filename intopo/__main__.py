import argparse
import logging
import sys
from typing import Optional

from .errors import InfixError, RPNError
from .infix2postfix import infix2postfix, trace
from .postfix2infix import postfix2infix
from .tree import render

SAMPLES = {
    "A+B*C": "ABC*+",
    "A*B+C": "AB*C+",
    "A*B+C*D": "AB*CD*+",
    "(A+B)/(C-D)": "AB+CD-/",
    "A*B/C": "AB*C/",
    "((A+B)*C+D)/(E+F+G)": "AB+C*D+EF+G+/",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intopo",
        description="Convert infix expressions to postfix (reverse Polish) notation.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions to convert; runs the sample table when omitted",
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="convert postfix expressions to infix instead",
    )
    parser.add_argument(
        "-t",
        "--trace",
        action="store_true",
        help="print the scanned operator tokens and the expression tree",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every tree link"
    )
    return parser


def run_samples() -> bool:
    all_passed = True
    for infix, expected in SAMPLES.items():
        actual = infix2postfix(infix)
        equal = actual == expected
        all_passed = all_passed and equal
        print(f'{infix} => "{actual}" [{expected}] [{"true" if equal else "false"}]')
    return all_passed


def convert(expression: str, reverse: bool, show_trace: bool):
    if reverse:
        print(f"{expression} => {postfix2infix(expression)}")
        return

    if not show_trace:
        print(f"{expression} => {infix2postfix(expression)}")
        return

    result = trace(expression)
    print(f"{expression} => {result.postfix}")
    print(f"  operands  {result.operands}")
    print(f"  operators {', '.join(str(t) for t in result.tokens)}")
    print("  tree")
    for line in render(result.root).split("\n"):
        print(f"    {line}")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr
        )

    if not args.expressions:
        return 0 if run_samples() else 1

    status = 0
    for expression in args.expressions:
        try:
            convert(expression, args.reverse, args.trace)
        except (InfixError, RPNError) as e:
            print(f"Error: {e}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
