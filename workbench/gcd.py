"""Greatest common divisor of numbers given on the command line."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from functools import reduce

_U64_MAX = 2**64 - 1
_U64_PATTERN = re.compile(r"\+?[0-9]+")


def gcd(n: int, m: int) -> int:
    """Return the greatest common divisor of two non-zero numbers."""
    if n == 0 or m == 0:
        raise ValueError("gcd is only defined here for non-zero numbers")
    while m != 0:
        if m < n:
            n, m = m, n
        m %= n
    return n


def gcd_all(numbers: Iterable[int]) -> int:
    """Return the greatest common divisor of every number in ``numbers``."""
    values = list(numbers)
    if not values:
        raise ValueError("at least one number is required")
    return reduce(gcd, values)


def _parse_u64(text: str) -> int:
    if not _U64_PATTERN.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greatest common divisor of the numbers in ``argv``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = [_parse_u64(arg) for arg in args]
    except ValueError as exc:
        print(f"error parsing argument: {exc}", file=sys.stderr)
        return 1

    if not numbers:
        print("Usage: gcd NUMBER ...", file=sys.stderr)
        return 1

    try:
        result = gcd_all(numbers)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"The greatest common divisor of {numbers} is {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())