"""Small teaching examples: sorting, searching, fractions, a countdown, a train, dice, a pen and number formatting."""

__version__ = "0.1.0"