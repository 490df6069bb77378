import pytest

from pushswap.stacks import Machine, Operation, Stack, parse_operation


def test_stack_basic_access():
    stack = Stack([4, 7, 9])
    assert len(stack) == 3
    assert list(stack) == [4, 7, 9]
    assert stack[0] == 4
    assert stack[-1] == 9


def test_push_back_appends_at_bottom():
    stack = Stack()
    stack.push_back(5)
    stack.push_back(8)
    assert list(stack) == [5, 8]


def test_swap_exchanges_top_two():
    stack = Stack([1, 2, 3])
    assert stack.swap() is True
    assert list(stack) == [2, 1, 3]


@pytest.mark.parametrize("values", [[], [42]])
def test_swap_small_stack_does_nothing(values):
    stack = Stack(values)
    assert stack.swap() is False
    assert list(stack) == values


def test_rotate_moves_top_to_bottom():
    stack = Stack([1, 2, 3])
    assert stack.rotate() is True
    assert list(stack) == [2, 3, 1]


def test_reverse_rotate_moves_bottom_to_top():
    stack = Stack([1, 2, 3])
    assert stack.reverse_rotate() is True
    assert list(stack) == [3, 1, 2]


def test_rotate_and_reverse_rotate_are_inverse():
    values = [5, -1, 8, 3, 0]
    stack = Stack(values)
    stack.rotate()
    stack.reverse_rotate()
    assert list(stack) == values


def test_rotate_full_cycle_returns_original():
    values = [9, 4, 6, 1]
    stack = Stack(values)
    for _ in values:
        stack.rotate()
    assert list(stack) == values


@pytest.mark.parametrize("values", [[], [7]])
def test_rotations_on_small_stack_do_nothing(values):
    stack = Stack(values)
    assert stack.rotate() is False
    assert stack.reverse_rotate() is False
    assert list(stack) == values


def test_push_from_moves_top():
    a = Stack([1, 2])
    b = Stack([3])
    assert a.push_from(b) is True
    assert list(a) == [3, 1, 2]
    assert len(b) == 0


def test_push_from_empty_does_nothing():
    a = Stack([1])
    assert a.push_from(Stack()) is False
    assert list(a) == [1]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([3], True),
        ([1, 2, 3], True),
        ([1, 3, 2], False),
        ([2, 1], False),
    ],
)
def test_is_sorted(values, expected):
    assert Stack(values).is_sorted() is expected


def test_parse_operation_all_names():
    for op in Operation:
        assert parse_operation(op.value + "\n") is op


def test_parse_operation_requires_newline():
    with pytest.raises(ValueError):
        parse_operation("sa")


@pytest.mark.parametrize("line", ["xx\n", "rrrr\n", "\n", "SA\n"])
def test_parse_operation_rejects_unknown(line):
    with pytest.raises(ValueError):
        parse_operation(line)


def test_machine_push_and_push_back_roundtrip():
    values = [3, 1, 2]
    machine = Machine(values)
    machine.apply(Operation.PB)
    machine.apply(Operation.PB)
    assert list(machine.b) == [1, 3]
    machine.apply(Operation.PA)
    machine.apply(Operation.PA)
    assert list(machine.a) == values
    assert len(machine.b) == 0


def test_machine_records_only_effective_single_operations():
    machine = Machine([2, 1], record=True)
    assert machine.apply(Operation.SB) is False
    assert machine.apply(Operation.PA) is False
    assert machine.apply(Operation.SA) is True
    assert machine.log == [Operation.SA]


def test_machine_combined_operations_always_recorded():
    machine = Machine([1], record=True)
    machine.apply(Operation.SS)
    machine.apply(Operation.RR)
    machine.apply(Operation.RRR)
    assert machine.log == [Operation.SS, Operation.RR, Operation.RRR]
    assert list(machine.a) == [1]


def test_machine_without_record_keeps_empty_log():
    machine = Machine([2, 1])
    machine.apply(Operation.SA)
    assert machine.log == []
    assert list(machine.a) == [1, 2]


def test_machine_combined_act_on_both():
    machine = Machine([1, 2, 3, 4])
    machine.apply(Operation.PB)
    machine.apply(Operation.PB)
    machine.apply(Operation.SS)
    assert list(machine.a) == [4, 3]
    assert list(machine.b) == [1, 2]
    machine.apply(Operation.RR)
    machine.apply(Operation.RRR)
    assert list(machine.a) == [4, 3]
    assert list(machine.b) == [1, 2]


def test_machine_is_solved():
    machine = Machine([1, 2, 3])
    assert machine.is_solved() is True
    machine.apply(Operation.PB)
    assert machine.is_solved() is False
    machine.apply(Operation.PA)
    assert machine.is_solved() is True


def test_machine_unsorted_is_not_solved():
    machine = Machine([2, 1, 3])
    assert machine.is_solved() is False
    machine.apply(Operation.SA)
    assert machine.is_solved() is True


def test_machine_preserves_multiset():
    values = [5, 2, 9, 1, 7]
    machine = Machine(values)
    for op in [Operation.PB, Operation.RA, Operation.PB, Operation.RRB,
               Operation.SS, Operation.RRR, Operation.PA]:
        machine.apply(op)
    assert sorted(list(machine.a) + list(machine.b)) == sorted(values)
    assert len(machine.a) + len(machine.b) == len(values)