"""Linear and binary search that count the comparisons they make."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Any

_TEST_VALUES = (-1, 1, 4, 41, 440, 8800, 9990, 1000000)
_DATA_SIZE = 5000


@dataclass
class Searcher:
    """Searches sequences, recording the comparisons of the latest search."""

    comparisons: int = 0

    def linear_search(
        self,
        data: Sequence[Any],
        target: Any,
        low: int = 0,
        high: int | None = None,
    ) -> Any | None:
        """Scan ``data[low:high + 1]`` for ``target``; return it or None."""
        if high is None:
            high = len(data) - 1
        self.comparisons = 0
        for value in islice(data, low, max(high + 1, low)):
            self.comparisons += 1
            if value == target:
                return value
        return None

    def binary_search(self, data: Sequence[Any], target: Any) -> Any | None:
        """Search sorted ``data`` for ``target``; return it or None."""
        self.comparisons = 0
        low, high = 0, len(data) - 1
        while low <= high:
            middle = low + (high - low) // 2
            self.comparisons += 1
            value = data[middle]
            if value == target:
                return value
            if value > target:
                high = middle - 1
            else:
                low = middle + 1
        return None


def _uniform_data() -> list[int]:
    return [index * 2 for index in range(_DATA_SIZE)]


def _non_uniform_data(rng: random.Random) -> list[int]:
    data = [1]
    for index in range(1, _DATA_SIZE):
        data.append(data[-1] + rng.randint(0, 19) + index * index * 2)
    return data


def _describe(result: Any | None) -> str:
    return "null" if result is None else str(result)


def main(argv: Sequence[str] | None = None) -> int:
    """Run binary searches over uniform and non-uniform data and report costs."""
    parser = argparse.ArgumentParser(description="Compare search costs.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    searcher = Searcher()
    uniform = _uniform_data()
    non_uniform = _non_uniform_data(rng)

    print("UNIFORM DISTRIBUTION")
    print("Binary Search:")
    for target in _TEST_VALUES:
        result = searcher.binary_search(uniform, target)
        print(
            f"  Searching for ({target}):  binary: "
            f"{_describe(result)} in {searcher.comparisons}"
        )

    print("\nNON-UNIFORM DISTRIBUTION")
    for target in _TEST_VALUES:
        result = searcher.binary_search(non_uniform, target)
        print(
            f"  Searching for ({target}): \tbinary: "
            f"{_describe(result)} in {searcher.comparisons}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())