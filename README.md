# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. The package gives you two commands. One prints an
instruction sequence that sorts the numbers. The other checks whether a
sequence really does sort them.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

An instruction with nothing to act on leaves the stacks unchanged. Examples
are swapping a stack with fewer than two elements and pushing from an empty
stack.

## Installation

```
pip install .
```

## Solving

```
push-swap 3 2 5 1 4
```

The numbers may be given as separate arguments or in one quoted string, and
may be separated by spaces, tabs or newlines. The command prints one
instruction per line.

- With no arguments, or numbers that are already in ascending order, it
  prints nothing.
- Two numbers are sorted with a single swap.
- Up to twelve numbers are sorted by moving the smallest ones to `b`,
  sorting the last three and pushing the rest back.
- Larger inputs use a windowed distribution into `b`, followed by pulling
  back the largest element each time.

Bad input prints `Error` to standard error and exits with status 1. Bad input
is any of the following:

- a character other than a digit, sign or whitespace
- a sign that is not followed by a digit, or that directly follows a digit
- a number longer than ten digits after its leading zeros
- a value outside the 32-bit signed range
- a duplicate value

## Checking

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker reads instructions from standard input, one per line, and applies
them to the numbers.

- If stack `a` ends in ascending order and stack `b` ends empty, it prints `OK`
  and exits with status 0.
- Otherwise it prints `KO` and exits with status 1.
- An unknown instruction, a last line without a newline, or bad numbers print
  `Error` to standard error and exit with status 1.

The checker accepts signs in any position that the number conversion itself
accepts. With no arguments it does nothing.

## Library use

```python
from pushswap.sort import solve
from pushswap.checker import check

ops = solve([3, 2, 5, 1, 4])
assert check([3, 2, 5, 1, 4], [f"{op}\n" for op in ops])
```

`solve` returns a list of `pushswap.stacks.Op` values.

`check` expects every instruction line to end with a newline. This is the form
that `pushswap.checker.read_lines` yields from a stream.

`pushswap.stacks.Stacks` holds the two stacks. It has one method per
instruction, plus `apply` to run an `Op` or an instruction name. It records
each change that takes effect in `history`, and `is_sorted` reports whether
the puzzle is solved.

`pushswap.parse.parse_arguments` turns command-line arguments into integers
and raises `pushswap.parse.ParseError` on bad input.

`pushswap.indexing.rank` gives each value's position in sorted order.

## Tests

```
pip install .[test]
pytest
```