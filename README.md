# pushswap

This package sorts a list of distinct integers with two stacks, `a` and `b`,
and a fixed set of instructions. It can also check whether an instruction
list sorts a given list.

## Instructions

| Instruction | Effect |
|---|---|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top element of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

An instruction that cannot act does nothing. For example, a swap on a stack
with fewer than two elements has no effect, and so does a push from an empty
stack.

A list counts as sorted when `a` holds every number in ascending order from
top to bottom and `b` is empty.

## Installing

```
pip install .
```

## Command line

To print an instruction list that sorts the numbers, one instruction per line:

```
push-swap 3 2 5 1 4
push-swap "3 2 5" 1 4
```

You can give the numbers as separate arguments, or together in one argument
separated by spaces. Each number must be a whole number in the 32-bit signed
range, and no number may appear twice. Empty arguments, and arguments that
hold only spaces, are also rejected. On invalid input the command prints
`Error` on standard error. If the list is already sorted, it prints nothing.
If you give no arguments, it does nothing.

To check an instruction list read from standard input:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker reads one instruction per line. It prints `OK` when the
instructions sort the numbers and `KO` otherwise. On invalid numbers or an
unknown instruction it prints `Error` on standard error. Matching of a line
is lenient: a line is accepted when it is a prefix of an instruction followed
by a newline. So the last line may lack its newline.

Both commands exit with status 0 in every case.

## Library

```python
from pushswap.checker import check
from pushswap.parsing import parse_arguments
from pushswap.sorter import sort_operations

values = parse_arguments(["3 2 5", "1", "4"])
operations = sort_operations(values)
print(check(values, [f"{op}\n" for op in operations]))  # True
```

The modules:

- `pushswap.parsing`
  - `parse_arguments` turns argument strings into a list of distinct
    integers. It raises `ArgumentError`, a `ValueError`, on bad input.
  - The helpers `atoi`, `is_number`, `split_words` and `merge_arguments` are
    also available.
- `pushswap.stacks`
  - `Stacks` holds the two stacks as lists, index 0 being the top.
  - Its methods `swap`, `push`, `rotate` and `reverse_rotate` act on a stack
    named `"a"` or `"b"`. Each returns whether anything moved.
  - `apply` carries out one `Operation` or its name.
  - `is_sorted` tells whether the stacks are sorted.
  - `lowest_index` and `highest_index` locate the extremes of a sequence.
- `pushswap.sorter`
  - `sort_stacks` sorts a `Stacks` in place and returns the operations it
    used. It raises `ValueError` if the values are not distinct.
  - `sort_operations` does the same for a plain iterable of integers.
- `pushswap.checker`
  - `parse_instruction` maps a line to an `Operation` or raises
    `InvalidInstruction`.
  - `execute` applies lines to a `Stacks`.
  - `check` tells whether lines sort the given values.

## Tests

```
pip install .[test]
pytest
```