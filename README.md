# pushswap

Sorts a list of distinct integers on a pair of stacks, `a` and `b`, using
only eleven operations, and checks whether a given sequence of operations
sorts a given list.

## Operations

| name  | effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top goes to the bottom     |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down: the bottom goes to the top   |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

## Installing

    pip install .

## Sorting

Give the numbers either as separate arguments or as a single argument in
which they are separated by spaces. The first number is the top of stack `a`.

    push-swap 3 2 1 5 4
    push-swap "3 2 1 5 4"

One operation is printed on each line. The command prints `Error` and exits
with status 1 when an argument is not a decimal integer (an optional `+` or
`-` followed by digits), lies outside the 32-bit signed range, or appears
more than once. With no numbers it prints nothing and exits with status 1.

The strategy depends on the count: two or three numbers are sorted in place,
four or five are sorted by parking extras on `b`, and larger lists keep a
longest increasing run in `a`, move the rest to `b` and insert each element
back at its cheapest point.

## Checking

`push-swap-checker` takes the same arguments and reads operations from
standard input, one on each line. It prints `OK` if they leave `a` in strictly
ascending order from the top with `b` empty, and `KO` otherwise. An unknown
operation, or one that needs a stack that is empty at that point, makes it
print `Error` and exit with status 255; bad numbers do the same.

    push-swap 3 2 1 5 4 | push-swap-checker 3 2 1 5 4

## Using it from Python

```python
from pushswap.parsing import parse_arguments
from pushswap.stack import Stacks
from pushswap.strategy import push_swap

stacks = Stacks(parse_arguments(["3", "2", "1", "5", "4"]), record=True)
push_swap(stacks)
print(stacks.is_sorted())                       # True
print([str(op) for op in stacks.operations])    # the operations carried out
```

- `pushswap.stack.Stacks` holds both stacks and has one method per
  operation (`sa`, `pb`, `rra`, ...) plus `apply(operation)`; each returns
  whether the operation took effect. `values_a()` and `values_b()` give the
  numbers top first.
- `pushswap.stack.Operation` is an enum of the eleven operations.
- `pushswap.parsing.parse_arguments` turns command-line arguments into the
  numbers to sort and raises `InputError` on bad input.
- `pushswap.checker.run_commands` replays lines of operations on a `Stacks`
  object; `pushswap.checker.parse_command` turns a single line into an
  `Operation` and raises `CommandError` when the line is not one.

## Running the tests

    pip install ".[test]"
    pytest