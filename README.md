# pushswap

Sort a list of integers with two stacks, `a` and `b`, using only a fixed set of moves. The package provides two commands. `push-swap` prints a short sequence of moves that sorts the numbers. `push-swap-checker` checks whether a given sequence of moves sorts them.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## The moves

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

A move that cannot take effect does nothing. For example, a swap or rotation on a stack with fewer than two elements, or a push from an empty stack, leaves both stacks unchanged.

The first number given is the top of stack `a`. The numbers are sorted when `a` holds them in ascending order from top to bottom. Stack `b` is not checked.

## Generating moves

```
push-swap 3 2 5 1 4
```

The command prints one move per line. You can spread the numbers across several arguments or put several in one argument separated by spaces, for example `push-swap "3 2 5" 1 4`.

- If the numbers are already sorted, or none are given, nothing is printed.
- Two numbers out of order give a single `sa`.

## Checking moves

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker reads moves from standard input, one per line, and applies them to the numbers in its arguments. It prints `OK` if stack `a` ends up sorted, and `KO` otherwise. Given no arguments, it does nothing and exits with status 0.

Input lines are handled as follows:

- A line made of a single character is skipped, and so is an empty line.
- Every other line must be exactly one of the moves above, followed by a newline.

## Number format

Each number is read as follows:

- Leading whitespace is skipped.
- An optional `+` or `-` may follow.
- After that comes at most twelve decimal digits.
- The value must fit in a 32-bit signed integer.

## Errors

Both commands print `Error` to standard error and exit with status 1 when:

- a number is not in the format above or lies outside the 32-bit signed range,
- a number appears more than once, or
- an argument holds no numbers at all.

The checker also fails this way on any input line that is not a move.

## Library use

```python
from pushswap.sorter import sort_operations
from pushswap.checker import run_checker

moves = sort_operations([3, 2, 5, 1, 4])
print(run_checker([3, 2, 5, 1, 4], (f"{m}\n" for m in moves)))
```

### `pushswap.parsing`

- `parse_number(token)` reads one token.
- `parse_arguments(args)` reads a list of arguments.
- `check_duplicates(values)` checks the values for repeats.
- `is_sorted(values)` tells whether the values are in ascending order.

Bad input raises `InputError`, which is a subclass of `ValueError`.

### `pushswap.stacks`

- The `Operation` enum lists the moves. `Operation.parse(line)` reads one newline-terminated line.
- `Stacks(values)` holds stacks `a` and `b`. It provides `apply(operation)` and `is_sorted()`.

### `pushswap.sorter`

- `sort_operations(values)` returns the list of moves.
- `sort_three(values)` sorts exactly three values.
- `final_cost(a, b)` counts the moves needed for two signed rotation counts, sharing rotations that go the same way.

### `pushswap.checker`

- `run_checker(values, lines)` applies instruction lines and returns whether `a` ends sorted.