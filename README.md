# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations, printing the operations that do it. A companion
checker reads a list of operations and tells you whether they sort the input.

## Operations

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up: the top goes to the bottom         |
| `rb`  | rotate `b` up                                     |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` down: the bottom goes to the top       |
| `rrb` | rotate `b` down                                   |
| `rrr` | `rra` and `rrb` together                          |

An operation on a stack with too few elements does nothing.

## Installation

```
pip install .
```

## Usage

Numbers are given as arguments, separately or several in one quoted
argument separated by spaces. The first number is the top of stack `a`.

```
push_swap 3 2 1
```

prints one operation per line that sorts the stack in ascending order; an
input that is already sorted prints nothing. Invalid input (non-numeric
tokens, values outside the 32-bit signed range, duplicates, empty or
blank arguments) prints `Error` to standard error and exits with status
255. With no arguments nothing happens and the exit status is 0.

Three and four values are sorted directly; five to eight values by moving
the smallest to `b` first; larger inputs by pushing values to `b` in
rank-ordered chunks and pulling the largest back one at a time.

To verify a solution, feed operations to the checker on standard input,
one per line:

```
push_swap 4 1 3 2 | checker 4 1 3 2
```

The checker prints `OK` on standard output when stack `a` ends sorted and
stack `b` empty, and `KO` on standard error otherwise. Invalid arguments,
or an instruction line that is not one of the operations above followed
by a newline, print `Error` to standard error with exit status 255.

## Library use

```python
from pushswap.sorting import solve
from pushswap.checker import check

ops = solve([5, 1, 4, 2, 3])
assert check([5, 1, 4, 2, 3], [f"{op.value}\n" for op in ops])
```

- `pushswap.stacks`: `Stack`, the `Operation` enum, `parse_operation`,
  and `Machine`, which applies operations to a pair of stacks and, with
  `record=True`, keeps the operations that took effect in `log`.
- `pushswap.parsing`: `parse_arguments` turns argument strings into a
  list of integers, raising `ArgumentError` (a `ValueError`) on bad input;
  also `is_valid_arguments`, `is_number`, `parse_int` and `is_space`.
- `pushswap.sorting`: `solve` returns the list of operations; the
  strategies it uses (`sort_three`, `sort_four`, `sort_five_to_eight`,
  `k_sort`) and helpers such as `order_of`, `timsort` and
  `compute_indexes` are available too.
- `pushswap.checker`: `check` and `execute_line`.

Both commands can also be run as `python -m pushswap.cli` and
`python -m pushswap.checker`.

## Tests

```
pip install .[test]
pytest
```