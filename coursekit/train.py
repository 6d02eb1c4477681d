"""A train of cars kept in order: the engine first, then cargo, then the caboose."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

_ENGINE = "Engine"
_CABOOSE = "Caboose"


@dataclass
class TrainCar:
    """One car of a train carrying a payload; engines are drawn with ``#`` marks."""

    payload: Any = ""
    engine: bool = False

    def __str__(self) -> str:
        mark = "#" if self.engine else ""
        return f"[{mark}{self.payload}{mark}]"


class Train:
    """A train that starts as an engine and a caboose."""

    def __init__(self) -> None:
        self._cars: list[TrainCar] = [TrainCar(_ENGINE, engine=True)]
        self.add_car(_CABOOSE)

    def add_car(self, name: Any) -> None:
        """Insert a car just ahead of the caboose, or at the end if there is none."""
        car = TrainCar(name)
        position = next(
            (
                index
                for index, existing in enumerate(self._cars)
                if index > 0 and existing.payload == _CABOOSE
            ),
            len(self._cars),
        )
        self._cars.insert(position, car)

    def __iter__(self) -> Iterator[TrainCar]:
        return iter(self._cars)

    def __len__(self) -> int:
        return len(self._cars)

    def __str__(self) -> str:
        body = "".join(f" | {car}" for car in self._cars)
        return f"_____<{body} |+______"


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small train car by car, printing it after each addition."""
    parser = argparse.ArgumentParser(description="Assemble a train.")
    parser.parse_args(argv)

    train = Train()
    print(train)
    for name in ("Passenger", "Boxcar", "Dining"):
        train.add_car(name)
        print(train)
    print(f"\nThe train has {len(train)} cars.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())