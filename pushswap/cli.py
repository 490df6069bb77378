"""Print a list of operations that sorts the integers given as arguments."""

from __future__ import annotations

import sys

from pushswap.parsing import ArgumentError, parse_arguments
from pushswap.sorting import solve


def main(argv: list[str] | None = None) -> int:
    """Parse the integers, print one operation per line, return the exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ArgumentError:
        print("Error", file=sys.stderr)
        return 255
    for operation in solve(values):
        print(operation.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())