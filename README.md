# coursekit

A collection of small, self-contained teaching examples for an introductory
programming course. Each module can be imported as a library and also has a
short demonstration command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `coursekit.sorting`: `selection_sort`, `insertion_sort`, `bubble_sort`,
  `merge_sort` and `quick_sort` sort a mutable sequence in place;
  `is_sorted` checks that no element is greater than the one after it.
  `merge_sort` is stable; `quick_sort` uses the last element as its pivot.
- `coursekit.searching`: `Searcher`, with `linear_search(data, target, low,
  high)` and `binary_search(data, target)`. Each returns the value found or
  `None`, and leaves the number of comparisons it made in
  `Searcher.comparisons`.
- `coursekit.fraction`: `Fraction(numerator, denominator)`, which is not
  reduced. `str()` gives `"8/3"`; `to_mixed_number()` gives `"2 2/3"`,
  leaving out a zero whole part or remainder, and raises `ZeroDivisionError`
  for a zero denominator.
- `coursekit.countdown`: `bottles_of_beer(start)` prints
  `"<n> bottles of beer on the wall"` for each count from `start` down to 1,
  and raises `ValueError` for a negative start.
- `coursekit.train`: `Train` and `TrainCar`. A new train holds an engine and a
  caboose; `add_car(name)` puts a car just ahead of the caboose. `len()` counts
  the cars, iteration yields them in order, and `str()` draws the train, with
  the engine shown as `[#Engine#]`.
- `coursekit.die`: `Die(sides=6, rng=None)`, showing face 1 until rolled.
  `roll()` shows and returns a random face; `face_value` can be set, but values
  outside 1..`sides` are ignored. `str()` gives `"[3]"`.
- `coursekit.pen`: `FourColorPen` and the `PenColor` enum. `click(name)`
  selects a colour ignoring case (unknown names select `NONE`); `write(message)`
  prints `<BLUE>message<BLUE>`, or nothing while the colour is `NONE`.
- `coursekit.formatting`: `format_general` (six significant digits),
  `format_fixed(value, places)`, `format_grouped(value, places)` (commas between
  thousands), `format_money` (`$1442.31`) and `format_percent` (`0.2` gives
  `20%`).

## Example

```python
from coursekit.sorting import merge_sort, is_sorted
from coursekit.searching import Searcher
from coursekit.train import Train

data = [5, 3, 9, 1]
merge_sort(data)
assert is_sorted(data)

searcher = Searcher()
found = searcher.binary_search(list(range(0, 100, 2)), 42)
print(found, searcher.comparisons)

train = Train()
train.add_car("Passenger")
print(train, len(train))
```

## Commands

| Command | What it shows |
| --- | --- |
| `coursekit-sorting [--seed N]` | each sorting algorithm on ten random numbers, with a pass/fail summary |
| `coursekit-searching [--seed N]` | binary search results and comparison counts on uniform and non-uniform data |
| `coursekit-fraction` | reads a numerator and denominator and prints the mixed number |
| `coursekit-countdown` | reads a starting count and counts the bottles down |
| `coursekit-train` | builds a train car by car |
| `coursekit-snakeeyes [--seed N]` | rolls two dice 720 times and counts snake eyes |
| `coursekit-pen` | writes with two four-colour pens |
| `coursekit-formatting` | number, money, percent and aligned formatting examples |

`coursekit-fraction` and `coursekit-countdown` print an error and exit with
status 1 on input that is not a whole number, a zero denominator or a negative
count.

## Limits

The searching module offers linear and binary search only; there is no
interpolation search, and `coursekit-searching` reports binary search alone.