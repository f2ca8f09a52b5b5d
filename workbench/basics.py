"""Small functions on numbers and strings, with a demonstration command."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def five() -> int:
    """Return five."""
    return 5


def plus_one(x: int) -> int:
    """Return ``x + 1``; the result must fit in a signed 32-bit integer."""
    result = x + 1
    if not _I32_MIN <= result <= _I32_MAX:
        raise OverflowError("attempt to add with overflow")
    return result


def labeled_measurement(value: int, unit_label: str) -> str:
    """Describe a measurement with its unit."""
    return f"The measurement is: {value}{unit_label}"


def add_suffix(name: str) -> str:
    """Return ``name`` followed by `` Wheel``."""
    return f"{name} Wheel"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration values."""
    del argv
    print(f"The value of x is {5}")
    print(labeled_measurement(5, "h"))

    x = 3
    y = x + 1
    print(f"The value of y is {y}")
    print(f"The value of x is {five()}")
    print(f"The value of BB is {plus_one(67)}")

    flag = False
    if flag:
        print("y is true")
    else:
        print("y aint true")

    first = "Ferris"
    full = add_suffix(first)
    print(f"{full}, originally {first}")
    return 0


if __name__ == "__main__":
    sys.exit(main())