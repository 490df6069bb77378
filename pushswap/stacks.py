"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator


class Stack:
    """A stack whose top is position 0."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, position: int) -> int:
        return self._items[position]

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stack):
            return self._items == other._items
        return NotImplemented

    def push_back(self, value: int) -> None:
        """Append a value at the bottom."""
        self._items.append(value)

    def swap(self) -> bool:
        """Swap the two top values; return whether anything moved."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top value to the bottom; return whether anything moved."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom value to the top; return whether anything moved."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True

    def push_from(self, other: Stack) -> bool:
        """Take the top of ``other`` onto this stack; return whether it moved."""
        if not other._items:
            return False
        self._items.appendleft(other._items.popleft())
        return True

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        items = self._items
        return all(items[i] <= items[i + 1] for i in range(len(items) - 1))


class Operation(Enum):
    """The instructions understood by the machine, named as they are written."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


def parse_operation(line: str) -> Operation:
    """Read one newline-terminated instruction line.

    Raises ValueError when the line is not a known instruction followed by
    a newline.
    """
    if not line.endswith("\n"):
        raise ValueError(f"unterminated instruction: {line!r}")
    try:
        return Operation(line[:-1])
    except ValueError:
        raise ValueError(f"unknown instruction: {line!r}") from None


@dataclass
class Machine:
    """Stacks a and b; optionally records every operation that takes effect."""

    a: Stack
    b: Stack
    record: bool
    log: list[Operation] = field(default_factory=list)

    def __init__(self, values: Iterable[int] = (), record: bool = False) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.record = record
        self.log = []

    def apply(self, operation: Operation) -> bool:
        """Perform an operation; return whether it was recorded as done."""
        a, b = self.a, self.b
        if operation is Operation.SA:
            done = a.swap()
        elif operation is Operation.SB:
            done = b.swap()
        elif operation is Operation.PA:
            done = a.push_from(b)
        elif operation is Operation.PB:
            done = b.push_from(a)
        elif operation is Operation.RA:
            done = a.rotate()
        elif operation is Operation.RB:
            done = b.rotate()
        elif operation is Operation.RRA:
            done = a.reverse_rotate()
        elif operation is Operation.RRB:
            done = b.reverse_rotate()
        elif operation is Operation.SS:
            a.swap()
            b.swap()
            done = True
        elif operation is Operation.RR:
            a.rotate()
            b.rotate()
            done = True
        else:
            a.reverse_rotate()
            b.reverse_rotate()
            done = True
        if done and self.record:
            self.log.append(operation)
        return done

    def is_solved(self) -> bool:
        """True when a is in ascending order and b is empty."""
        return self.a.is_sorted() and len(self.b) == 0