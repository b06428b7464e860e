# pushswap

`pushswap` sorts a list of distinct integers using two stacks, **a** and
**b**, and a small set of moves. It prints the moves it makes, one per line,
to standard output. The integers start on stack **a**, with the first one on
top. Stack **b** starts empty.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments:

```
pushswap 3 2 1
```

You can also pass them as one quoted argument, separated by spaces:

```
pushswap "4 67 3 87 23"
```

Each number is an optional `+` or `-` followed by digits, at most 11
characters long, within the 32-bit signed range. If the numbers are already
sorted, nothing is printed and the exit status is 0. If an argument is not a
valid integer, is out of range, or the same number appears twice, the command
writes `Error` to standard error and exits with status 1. With no arguments it
exits with status 1 and prints nothing.

Two numbers are sorted with a single `sa`, three with at most two moves;
longer lists push elements onto **b**, choosing each time the element that is
cheapest to place, sort the last three on **a**, push everything back, and
finally rotate the smallest number to the top.

## Moves

| Move  | Effect                                      |
|-------|---------------------------------------------|
| `sa`  | swap the top two elements of a              |
| `sb`  | swap the top two elements of b              |
| `pa`  | move the top of b onto a                    |
| `pb`  | move the top of a onto b                    |
| `ra`  | rotate a upwards (top goes to bottom)       |
| `rb`  | rotate b upwards                            |
| `rr`  | `ra` and `rb` together                      |
| `rra` | rotate a downwards (bottom goes to top)     |
| `rrb` | rotate b downwards                          |
| `rrr` | `rra` and `rrb` together                    |

## Library use

```python
from pushswap.sort import solve

moves = solve([3, 2, 1])   # the list of moves that sorts stack a
```

- `pushswap.sort` — `solve`, `is_sorted`, `sort_three` and `sort_big`.
- `pushswap.stacks.Stacks` — the two stacks as deques `a` and `b` (top
  first), one method per move, and the list `moves` of the moves made. A move
  that changes nothing is not recorded, except `rr` and `rrr`, which always
  are.
- `pushswap.args` — `is_number`, `int_in_range`, `has_duplicate`,
  `check_args` and `split_args`; rejected input raises
  `pushswap.args.ArgumentError`.
- `pushswap.cli` — `parse_arguments` and `main`, the function behind the
  `pushswap` command; `main` returns the exit status.

The package also carries small helper modules:

- `pushswap.numbers` — `atoi` and `atoi_longlong`, which parse a leading
  integer with 32-bit and 64-bit overflow behaviour, and `itoa`.
- `pushswap.chars` — ASCII classification and case conversion.
- `pushswap.strings` — splitting, searching, trimming and indexed mapping of
  strings.
- `pushswap.memory` — zeroing, copying, comparing and filling `bytearray`
  buffers, plus `strlcpy` and `strlcat`.
- `pushswap.linked.LinkedList` — a singly linked list with `add_front`,
  `add_back`, `clear`, `for_each`, `last` and `map`.
- `pushswap.output` — `put_char`, `put_str`, `put_endl` and `put_nbr`, writing
  to a stream (standard output by default).
- `pushswap.lines.LineReader` — reads lines from a text or binary stream a
  fixed number of units at a time.
- `pushswap.printf` — `format_string` and `print_formatted`, a printf with the
  conversions `c`, `s`, `p`, `d`, `i`, `u`, `x`, `X` and `%`.

## Tests

```
pip install ".[test]"
pytest
```