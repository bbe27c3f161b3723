# circsum/tools/solve_cli.py
#
# Implements the command-line interface for `circsum`. This tool reads a
# digit file from disk and prints the circular matching-digit sum.

import argparse
import sys

from .. import profiler
from ..kernel import CircsumError, sum_matching_circular
from ..source import read_digits

def _solve(path, start, end, p=None):
    if p is None:
        return sum_matching_circular(read_digits(path), start, end)

    with p.section("read"):
        digits = read_digits(path)
    with p.section("sum"):
        return sum_matching_circular(digits, start, end)

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="circsum",
        description="Sum the digits of a file that match the next digit, wrapping around at the end."
    )
    parser.add_argument(
        "input_path",
        help="Path to a file containing a single line of decimal digits."
    )
    parser.add_argument("--start", type=int, default=None,
                        help="First index of the range to scan (default: 0).")
    parser.add_argument("--end", type=int, default=None,
                        help="One past the last index to scan (default: end of input).")
    parser.add_argument("--profile", action="store_true",
                        help="Time the read and sum steps and print a report.")
    args = parser.parse_args(argv)

    try:
        if args.profile:
            with profiler.profile(args.input_path) as p:
                result = _solve(args.input_path, args.start, args.end, p)
        else:
            result = _solve(args.input_path, args.start, args.end)
    except (CircsumError, UnicodeDecodeError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(result)
    if args.profile:
        print()
        p.print_report()
    return 0

if __name__ == "__main__":
    sys.exit(main())
