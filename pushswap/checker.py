"""Check that a list of instructions sorts the given integers."""

from __future__ import annotations

import sys
from typing import Iterable

from pushswap.parsing import parse_arguments
from pushswap.stacks import Machine, parse_operation


def execute_line(machine: Machine, line: str) -> None:
    """Apply one newline-terminated instruction line to the machine.

    Raises ValueError when the line is not a valid instruction.
    """
    machine.apply(parse_operation(line))


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Run the instruction lines on ``values``; True if the result is solved."""
    machine = Machine(values)
    for line in lines:
        execute_line(machine, line)
    return machine.is_solved()


def main(argv: list[str] | None = None) -> int:
    """Read instructions from standard input and report OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        solved = check(values, sys.stdin)
    except ValueError:
        print("Error", file=sys.stderr)
        return 255
    if solved:
        print("OK")
    else:
        print("KO", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())