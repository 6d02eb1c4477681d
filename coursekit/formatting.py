"""Number formatting helpers: general, fixed, grouped, money and percent."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_INCOME_TAX_RATE = 0.20


def format_general(value: float) -> str:
    """Format with six significant digits, switching to exponent form as needed."""
    return f"{value:g}"


def format_fixed(value: float, places: int) -> str:
    """Format with exactly ``places`` digits after the decimal point."""
    if places < 0:
        raise ValueError("places must not be negative")
    return f"{value:.{places}f}"


def format_grouped(value: float, places: int) -> str:
    """Format like :func:`format_fixed` with commas between thousands."""
    if places < 0:
        raise ValueError("places must not be negative")
    return f"{value:,.{places}f}"


def format_money(amount: float) -> str:
    """Format an amount as dollars with two decimal places."""
    return f"${format_fixed(amount, 2)}"


def format_percent(value: float) -> str:
    """Format a ratio as a whole percentage."""
    return f"{format_fixed(value * 100, 0)}%"


def _doubles_demo() -> None:
    numbers = (12.3456789, 98.7654321, 1234567890.555, 0.0000000000000009)
    sections = (
        ("No formatting: ", format_general),
        ("fmt1 # - no decimal places: ", lambda n: format_fixed(n, 0)),
        ("fmt2 #.## - 2 decimal places: ", lambda n: format_fixed(n, 2)),
        (
            "fmt3 #,###.## - Comma-separated, 2 decimal places: ",
            lambda n: format_grouped(n, 2),
        ),
    )
    for index, (title, formatter) in enumerate(sections):
        if index:
            print()
        print(title)
        for number in numbers:
            print(f"  {formatter(number)}")


def _money_demo() -> None:
    salary = 75000
    weekly_wage = salary / 52.0
    taxes = weekly_wage * _INCOME_TAX_RATE
    print(f"Yearly salary: {format_money(salary)}")
    print(f"Weekly pay: {format_money(weekly_wage)}")
    print(f"Taxes: {format_money(taxes)} at {format_percent(_INCOME_TAX_RATE)}")


def _aligned_demo() -> None:
    name = "Kendra Sorenson"
    age = 13
    number = 1234.5678
    print(f"{name} is {age} years old, number={format_general(number)}")
    print(f"{name} is {age} years old, number={format_fixed(number, 2)}")
    aligned = f"{name:>20} is {age:>10} years old, number={format_fixed(number, 2):>10}"
    print(aligned)
    print(aligned)


def main(argv: Sequence[str] | None = None) -> int:
    """Print examples of each formatting style."""
    parser = argparse.ArgumentParser(description="Show number formatting styles.")
    parser.parse_args(argv)

    _doubles_demo()
    print()
    _money_demo()
    print()
    _aligned_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())