"""A simple integer fraction that can be shown as a mixed number."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


@dataclass
class Fraction:
    """A numerator over a denominator, not reduced."""

    numerator: int = 1
    denominator: int = 1

    def to_mixed_number(self) -> str:
        """Return the fraction as ``"whole rem/den"``, dropping zero parts."""
        if self.denominator == 0:
            raise ZeroDivisionError("fraction has a zero denominator")
        whole = _truncating_divide(self.numerator, self.denominator)
        remainder = self.numerator - whole * self.denominator
        parts = []
        if whole != 0:
            parts.append(f"{whole} ")
        if remainder != 0:
            parts.append(f"{remainder}/{abs(self.denominator)}")
        return "".join(parts)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a numerator and denominator and print the mixed number."""
    fraction = Fraction(8, 3)
    try:
        fraction.numerator = int(input("Enter the numerator:  "))
        fraction.denominator = int(input("Enter the denominator:  "))
        mixed = fraction.to_mixed_number()
    except (ValueError, EOFError, ZeroDivisionError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"The fraction {fraction} is equal to {mixed}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())