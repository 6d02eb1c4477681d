"""Classic comparison sorts that reorder a mutable sequence in place."""

from __future__ import annotations

import argparse
import heapq
import random
from collections.abc import Callable, MutableSequence, Sequence
from enum import Enum
from itertools import pairwise
from typing import Any


def is_sorted(items: Sequence[Any]) -> bool:
    """Return True when no element is greater than the one after it."""
    return not any(left > right for left, right in pairwise(items))


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly selecting the smallest remaining element."""
    size = len(items)
    for start in range(size - 1):
        smallest = min(range(start, size), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by inserting each element into the sorted prefix."""
    for position in range(1, len(items)):
        key = items[position]
        slot = position
        while slot > 0 and items[slot - 1] > key:
            items[slot] = items[slot - 1]
            slot -= 1
        items[slot] = key


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place, stopping early once a pass makes no swap."""
    size = len(items)
    for done in range(size - 1):
        swapped = False
        for index in range(size - done - 1):
            if items[index] > items[index + 1]:
                items[index], items[index + 1] = items[index + 1], items[index]
                swapped = True
        if not swapped:
            break


def _merge_sorted(values: list[Any]) -> list[Any]:
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    left = _merge_sorted(values[:middle])
    right = _merge_sorted(values[middle:])
    # heapq.merge prefers the left run on ties, which keeps the sort stable.
    return list(heapq.merge(left, right))


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with a stable top-down merge sort."""
    items[:] = _merge_sorted(list(items))


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for index in range(low, high):
        if items[index] < pivot:
            boundary += 1
            items[boundary], items[index] = items[index], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort using the last element as pivot."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))


class SortType(Enum):
    SELECTION = "Selection Sort"
    INSERTION = "Insertion Sort"
    BUBBLE = "Bubble Sort"
    MERGE = "Merge Sort"
    QUICK = "Quick Sort"


_SORTERS: dict[SortType, Callable[[MutableSequence[Any]], None]] = {
    SortType.SELECTION: selection_sort,
    SortType.INSERTION: insertion_sort,
    SortType.BUBBLE: bubble_sort,
    SortType.MERGE: merge_sort,
    SortType.QUICK: quick_sort,
}

_SAMPLE_SIZE = 10


def _row(values: Sequence[Any]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort a fresh random list with each algorithm and report any failures."""
    parser = argparse.ArgumentParser(description="Exercise each sorting algorithm.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    failures = 0
    for sort_type in SortType:
        values = [rng.randrange(1000) for _ in range(_SAMPLE_SIZE)]
        print(f"\nTesting {sort_type.value}:")
        print(f"Unsorted: {_row(values)}")
        _SORTERS[sort_type](values)
        print(f"  Sorted: {_row(values)}")
        if not is_sorted(values):
            print("Fail!")
            failures += 1

    print()
    if failures == 0:
        print(f"All tests successful! ({failures} failures)")
    else:
        print(f"Tests unsuccessful! ({failures} failures)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())