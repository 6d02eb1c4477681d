"""A pen that writes in one of four colours, or not at all."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum


class PenColor(Enum):
    NONE = "NONE"
    BLACK = "BLACK"
    BLUE = "BLUE"
    GREEN = "GREEN"
    RED = "RED"


class FourColorPen:
    """A pen whose colour is chosen by name; it writes nothing until one is picked."""

    def __init__(self) -> None:
        self.color = PenColor.NONE

    def click(self, color: str) -> None:
        """Select a colour by name, ignoring case; unknown names retract the pen."""
        try:
            self.color = PenColor[color.upper()]
        except KeyError:
            self.color = PenColor.NONE

    def write(self, message: str) -> None:
        """Print ``message`` wrapped in colour tags, unless no colour is selected."""
        if self.color is not PenColor.NONE:
            tag = f"<{self.color.value}>"
            print(f"{tag}{message}{tag}")

    def __str__(self) -> str:
        return f"FourColorPen [color={self.color.value}]"


def main(argv: Sequence[str] | None = None) -> int:
    """Click two pens through a few colours and write with them."""
    parser = argparse.ArgumentParser(description="Write with four-colour pens.")
    parser.parse_args(argv)

    my_pen, pen2 = FourColorPen(), FourColorPen()
    print("After instantiating:")
    print(f"  myPen: {my_pen}")
    print(f"  pen2: {pen2}")
    print()

    my_pen.write("You shouldn't see this")
    pen2.write("You shouldn't see this, either!")

    my_pen.click("blue")
    my_pen.write("Hello, world!")
    pen2.click("GrEeN")
    pen2.write("The end!")
    my_pen.click("RED")
    my_pen.write("Goodbye!")

    print()
    print("End of main:")
    print(f"  myPen: {my_pen}")
    print(f"  pen2: {pen2}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())