"""A countdown of bottles of beer on the wall."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def bottles_of_beer(start: int) -> None:
    """Print one line per bottle from ``start`` down to 1."""
    if start < 0:
        raise ValueError(f"a countdown from {start} never reaches zero")
    for count in range(start, 0, -1):
        print(f"{count} bottles of beer on the wall")


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a starting count and print the countdown."""
    try:
        start = int(input("How many bottles of beer to start with?  "))
        bottles_of_beer(start)
    except (ValueError, EOFError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())