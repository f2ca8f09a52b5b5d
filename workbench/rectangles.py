"""Rectangles with an area and a containment test."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle with non-negative integer sides."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if not 0 <= value <= _U32_MAX:
                raise ValueError(f"{name} must be between 0 and {_U32_MAX}")

    @property
    def area(self) -> int:
        """Width times height."""
        return self.width * self.height

    def has_width(self) -> bool:
        """Whether the width is non-zero."""
        return self.width > 0

    def can_hold(self, other: Rectangle) -> bool:
        """Whether ``other`` fits strictly inside this rectangle."""
        return self.width > other.width and self.height > other.height

    @classmethod
    def square(cls, size: int) -> Rectangle:
        """A rectangle whose sides are both ``size``."""
        return cls(width=size, height=size)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a few facts about some sample rectangles."""
    del argv
    rect1 = Rectangle(width=30, height=50)
    rect2 = Rectangle(width=10, height=40)
    rect3 = Rectangle(width=60, height=45)

    print(f"The area of rectangle is {rect1.area} square pixels")
    print(f"The width of the rectangle is not zero? {str(rect1.has_width()).lower()}")
    print(f"Rectangle rect1 = {rect1!r}")
    print(f"Can rect1 hold rect2? {str(rect1.can_hold(rect2)).lower()}")
    print(f"Can rect1 hold rect3? {str(rect1.can_hold(rect3)).lower()}")
    print(f"This is a square: {Rectangle.square(40)!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())