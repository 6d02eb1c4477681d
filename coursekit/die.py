"""A die with a configurable number of sides."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

_SHARED_RNG = random.Random()
_ROLLS = 720


class Die:
    """A die showing a face from 1 to ``sides``."""

    def __init__(self, sides: int = 6, rng: random.Random | None = None) -> None:
        if sides < 1:
            raise ValueError(f"a die needs at least one side, not {sides}")
        self._sides = sides
        self._face_value = 1
        self._rng = rng if rng is not None else _SHARED_RNG

    @property
    def sides(self) -> int:
        return self._sides

    @property
    def face_value(self) -> int:
        return self._face_value

    @face_value.setter
    def face_value(self, value: int) -> None:
        # Values that no face shows are ignored.
        if 0 < value <= self._sides:
            self._face_value = value

    def roll(self) -> int:
        """Show a random face and return its value."""
        self.face_value = self._rng.randint(1, self._sides)
        return self._face_value

    def __str__(self) -> str:
        return f"[{self._face_value}]"


def main(argv: Sequence[str] | None = None) -> int:
    """Roll two dice many times and count the snake eyes."""
    parser = argparse.ArgumentParser(description="Count snake eyes.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    first, second = Die(6, rng), Die(6, rng)
    count = 0
    for _ in range(_ROLLS):
        first.roll()
        second.roll()
        print(f"{first} {second}")
        if first.face_value == 1 and second.face_value == 1:
            count += 1

    print(f"\nNumber of rolls: {_ROLLS}")
    print(f"Number of snake eyes: {count}")
    print(f"Ratio: {count / _ROLLS:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())