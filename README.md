# aocutils

Small, dependency-free helpers for solving programming puzzles: integer
helpers, sequence and mapping utilities, grid coordinates with eight
directions, a doubly linked list, a set type and simple call timing.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `aocutils.intutils`: `absolute`, `equals`, `diff`, `length` (number of decimal
  digits, sign ignored), `power` (raises `ValueError` for a negative exponent),
  `product`, `quotient` (integer division truncated toward zero) and `add`.
- `aocutils.combinatorics`: `cartesian_product(elements, length)` returns every
  list of `length` items drawn from `elements`, the first position varying
  slowest; a length of 0 gives `[[]]`.
- `aocutils.stringutils`: `atoi` (strict decimal integers within the signed
  64-bit range, otherwise `ValueError`), `rune_to_int` (value of one digit
  character), `is_digit`, `is_empty` and `is_integer`.
- `aocutils.common`: `add_flag(parser, name, default, usage)` registers
  `--name` and `-n` (the first letter) on an `argparse` parser, as an
  on/off flag when the default is a `bool`; `list_folders(path)` returns the
  directory names in `path` sorted in reverse; `quit_if_error(err, message)`
  prints the message and error and exits with status 1 when `err` is set.
  `FIRST_YEAR` is `2015`.
- `aocutils.maputils`: helpers over dictionaries: `append_to`, `contains`,
  `for_each`, `keys`, `map_items`, `map_values`, `merge` (the second mapping
  wins), `sum_values`, `values`, `occurrences` and `add_occurrence`.
- `aocutils.sliceutils`: helpers over lists: `any_match`, `contains`, `copy`,
  `count`, `filter_items`, `find`, `find_index` (-1 when not found), `first`,
  `last`, `middle`, `maximum`, `max_index`, `minimum`, `min_index`, `generate`,
  `for_each`, `update_each` (in place), `is_empty`, `is_in_bounds`,
  `map_items`, `map_indexed`, `product`, `total`, `reduce`, `reduce_indexed`,
  `remove_nth`, `repeat`, `swap`, `to_map` and `zip_with`. Functions that need
  an element of an empty sequence, or an index outside it, raise `IndexError`;
  `to_map` raises `ValueError` when the lengths differ.
- `aocutils.hashset`: `HashSet`, a `set` subclass with `from_iterable`,
  `contains`, `delete`, `map`, `merge` and `to_list`.
- `aocutils.coordinate`: `Coordinate2D` (a frozen dataclass with `x` and `y`,
  where `y` grows downwards) and the `Direction` enum of eight directions
  numbered clockwise from `UP`. Directions can turn by 45 or 90 degrees, give
  their opposite and their unit step; coordinates can move, find neighbours and
  check limits. Direction names for `str()` and `parse` come from a
  configurable format (`set_format`, `current_format`), with ready-made
  formats such as `DEFAULT`, `SHORT`, `COMPASS` and `CHARACTERS`. `parse`
  raises `ValueError` for an unknown name.
- `aocutils.linkedlist`: `LinkedList` and `Node`, a doubly linked list with
  index-based `get`, `get_node`, `insert`, `remove`, `replace` and `set`
  (out-of-range indexes raise `IndexError`), iteration helpers including
  `for_each_offset`, `len()`, iteration, equality and `to_list`.
- `aocutils.timing`: `start`, `time_single_call`, `print_single_call` and
  `TimeRepeatedCalls`, which records durations as `timedelta` values and
  reports `average`, `maximum`, `minimum` and `total`.

## Examples

```python
from aocutils.combinatorics import cartesian_product
from aocutils.coordinate import Coordinate2D, parse, straights

cartesian_product([1, 2], 2)
# [[1, 1], [1, 2], [2, 1], [2, 2]]

origin = Coordinate2D(1, 2)
origin.go(parse("up"))            # Coordinate2D(x=1, y=1)
origin.neighbors(straights())     # dict of Direction to Coordinate2D
```

```python
from aocutils.linkedlist import LinkedList

items = LinkedList.from_iterable([1, 3])
items.insert(1, 2)
str(items)      # "1 -> 2 -> 3"
items.to_list() # [1, 2, 3]
```

```python
from aocutils.timing import TimeRepeatedCalls, start

stats = TimeRepeatedCalls()
for _ in range(3):
    begin = start()
    sum(range(10_000))
    stats.call(begin)
stats.print_stats()
```

## What it does not do

This is a library only. It has no command-line program and does not fetch,
store or solve puzzles itself; it provides building blocks for code that does.