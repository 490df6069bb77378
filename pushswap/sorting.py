"""Strategies that sort stack a with the fewest practical operations."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from enum import Enum
from math import isqrt
from typing import Iterable

from pushswap.stacks import Machine, Operation, Stack

RUN = 32


class Order(Enum):
    """How far a stack is from ascending order."""

    UNSORTED = 0
    SORTED = 1
    NEAR_SORTED = 2


def order_of(stack: Stack) -> Order:
    """Classify a stack.

    NEAR_SORTED means every pair is ascending except the bottom one.
    """
    items = list(stack)
    if len(items) < 2:
        return Order.SORTED
    pairs = list(zip(items, items[1:]))
    if any(upper > lower for upper, lower in pairs[:-1]):
        return Order.UNSORTED
    upper, lower = pairs[-1]
    return Order.NEAR_SORTED if upper > lower else Order.SORTED


def insertion_sort(values: list[int], left: int, right: int) -> None:
    """Sort ``values[left..right]`` (inclusive) in place."""
    for i in range(left + 1, right + 1):
        item = values[i]
        position = bisect_right(values, item, left, i)
        values[position + 1 : i + 1] = values[position:i]
        values[position] = item


def merge(values: list[int], left: int, right: int, middle: int) -> None:
    """Merge the sorted runs ``[left..middle]`` and ``[middle+1..right]`` in place."""
    first = values[left : middle + 1]
    second = values[middle + 1 : right + 1]
    values[left : right + 1] = list(heapq.merge(first, second))


def timsort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using insertion-sorted runs merged pairwise."""
    result = list(values)
    n = len(result)
    for start in range(0, n, RUN):
        insertion_sort(result, start, min(start + RUN - 1, n - 1))
    width = RUN
    while width < n:
        for left in range(0, n, 2 * width):
            middle = left + width - 1
            right = min(left + 2 * width - 1, n - 1)
            if middle < right:
                merge(result, left, right, middle)
        width *= 2
    return result


def compute_indexes(values: Iterable[int]) -> dict[int, int]:
    """Map every value to its rank in ascending order, starting at 0."""
    ranks: dict[int, int] = {}
    for rank, value in enumerate(timsort(values)):
        ranks.setdefault(value, rank)
    return ranks


def sort_three(machine: Machine) -> None:
    """Sort a stack a of exactly three values."""
    a = machine.a
    if a[0] > a[1] and a[0] > a[2]:
        machine.apply(Operation.RA)
    elif a[1] > a[0] and a[1] > a[2]:
        machine.apply(Operation.RRA)
    if a[0] > a[1]:
        machine.apply(Operation.SA)


def sort_four(machine: Machine) -> None:
    """Sort the top four values of a into place, using b for one value."""
    a, b = machine.a, machine.b
    machine.apply(Operation.PB)
    sort_three(machine)
    if b[0] > a[-1]:
        machine.apply(Operation.PA)
        machine.apply(Operation.RA)
    elif b[0] > a[-2]:
        machine.apply(Operation.RRA)
        machine.apply(Operation.PA)
        machine.apply(Operation.RA)
        machine.apply(Operation.RA)
    elif b[0] > a[0]:
        machine.apply(Operation.PA)
        machine.apply(Operation.SA)
    else:
        machine.apply(Operation.PA)


def sort_five_to_eight(machine: Machine, indexes: dict[int, int], limit: int) -> None:
    """Push the smallest values to b until ``limit`` remain, sort, push back."""
    a, b = machine.a, machine.b
    count = 0
    while len(a) > limit:
        if indexes[a[0]] == count:
            machine.apply(Operation.PB)
            count += 1
        elif indexes[a[-1]] == count:
            machine.apply(Operation.RRA)
            machine.apply(Operation.PB)
            count += 1
        else:
            machine.apply(Operation.RA)
    if len(a) == 3:
        sort_three(machine)
    else:
        sort_four(machine)
    while len(b) > 0:
        machine.apply(Operation.PA)


def _push_in_chunks(machine: Machine, indexes: dict[int, int]) -> None:
    a = machine.a
    pushed = 0
    window = isqrt(len(a)) * 13 // 10
    while len(a) > 0:
        rank = indexes[a[0]]
        if rank <= pushed:
            machine.apply(Operation.PB)
            pushed += 1
        elif rank <= pushed + window:
            machine.apply(Operation.PB)
            pushed += 1
            if not indexes[a[0]] <= pushed + window:
                machine.apply(Operation.RR)
            else:
                machine.apply(Operation.RB)
        else:
            machine.apply(Operation.RA)


def _distance_to(stack: Stack, indexes: dict[int, int], rank: int) -> int:
    for distance, value in enumerate(stack):
        if indexes[value] == rank:
            return distance
    return len(stack)


def _pull_back_largest(machine: Machine, indexes: dict[int, int], size: int) -> None:
    b = machine.b
    for target in range(size - 1, -1, -1):
        forward = _distance_to(b, indexes, target)
        backward = len(b) - forward
        step = Operation.RB if forward <= backward else Operation.RRB
        while indexes[b[0]] != target:
            machine.apply(step)
        machine.apply(Operation.PA)


def k_sort(machine: Machine, indexes: dict[int, int]) -> None:
    """Sort a larger stack a by chunked pushes to b and pulling back the largest."""
    size = len(machine.a)
    _push_in_chunks(machine, indexes)
    _pull_back_largest(machine, indexes, size)


def _sort_large(machine: Machine, indexes: dict[int, int]) -> None:
    size = len(machine.a)
    if 5 <= size <= 8:
        sort_five_to_eight(machine, indexes, 4 if size == 8 else 3)
    else:
        k_sort(machine, indexes)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` (top of stack a first)."""
    machine = Machine(values, record=True)
    a = machine.a
    if len(a) <= 1:
        return machine.log
    order = order_of(a)
    if order is Order.SORTED:
        return machine.log
    if order is Order.NEAR_SORTED:
        machine.apply(Operation.RRA)
    if order_of(a) is not Order.UNSORTED:
        return machine.log
    if len(a) == 3:
        sort_three(machine)
    elif len(a) == 4:
        sort_four(machine)
    else:
        _sort_large(machine, compute_indexes(a))
    return machine.log