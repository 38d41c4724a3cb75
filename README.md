# pushswap

pushswap sorts a list of distinct integers. It uses two stacks, `a` and `b`, and a fixed set of instructions. It can also check whether a sequence of instructions sorts a given list.

## Instructions

| Name  | Effect                                                        |
|-------|---------------------------------------------------------------|
| `sa`  | swap the first two elements of `a`                            |
| `sb`  | swap the first two elements of `b`                            |
| `ss`  | `sa` and `sb` together, only if both stacks hold two or more  |
| `pa`  | move the top of `b` onto `a`                                  |
| `pb`  | move the top of `a` onto `b`                                  |
| `ra`  | rotate `a` up, so the first element goes last                 |
| `rb`  | rotate `b` up                                                 |
| `rr`  | `ra` and `rb` together                                        |
| `rra` | rotate `a` down, so the last element goes first               |
| `rrb` | rotate `b` down                                               |
| `rrr` | `rra` and `rrb` together                                      |

An instruction on a stack that has too few elements does nothing.

## Installation

```
pip install .
```

## Command line

Print a sequence of instructions, one per line, that sorts the numbers:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The numbers can be given as separate arguments, or as space-separated words inside one argument. The program prints nothing when the input is already sorted or no numbers are given.

It writes a red `Error` on standard error and exits with status 1 when:

- an argument is empty or holds only whitespace,
- a word is not an integer (an optional sign followed by digits),
- a number is outside the 32-bit signed range, or
- a number is repeated.

Check an instruction sequence against a list of numbers. The instructions are read from standard input, one per line, each ending with a newline:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker prints:

- `OK` when stack `a` ends up non-empty and sorted and stack `b` ends up empty,
- `KO` otherwise.

It exits with status 1 and prints nothing when given no arguments. It writes `Error` on standard error and exits with status 1 for bad numbers (same rules as above) or for a line that is not exactly a known instruction.

## Library use

```python
from pushswap.sorting import solve
from pushswap.checker import check

values = [3, 2, 5, 1, 4]
ops = solve(values)
assert check(values, (f"{op}\n" for op in ops))
```

`check` takes instruction lines as strings with their trailing newline, as they come from standard input.

Other parts of the library:

- `pushswap.parsing.parse_arguments` turns command-line strings into integers and raises `ParseError` on bad input.
- `pushswap.stack.Stack`, `pushswap.stack.Operation` and `pushswap.stack.apply` let you run instructions by hand.
- `pushswap.sorting.Sorter` runs the sorting strategy on a pair of stacks whose elements have been ranked with `assign_indices`, and records the operations it used.
- `pushswap.checker.parse_instruction` and `execute` read and apply instruction lines, raising `InstructionError` on an unknown one.

## Tests

```
pip install .[test]
pytest
```