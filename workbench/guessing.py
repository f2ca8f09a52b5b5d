"""A number guessing game played on standard input."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Iterable, Iterator, Sequence

_U32_MAX = 2**32 - 1
_U32_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_guess(line: str) -> int | None:
    text = line.strip()
    if not _U32_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def play(secret: int, lines: Iterable[str]) -> Iterator[str]:
    """Run a game against ``secret``, reading guesses from ``lines``.

    Yields each message the game prints. Lines that are not unsigned
    integers are ignored. Raises :class:`EOFError` if the input ends
    before the secret is guessed.
    """
    source = iter(lines)
    while True:
        yield "Please input your guess."
        try:
            line = next(source)
        except StopIteration:
            raise EOFError("input ended before the number was guessed") from None
        guess = _parse_guess(line)
        if guess is None:
            continue
        yield f"You guessed: {guess}"
        if guess < secret:
            yield "Too small!"
        elif guess > secret:
            yield "Too large!"
        else:
            yield "You win!"
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game on standard input with a random number from 1 to 100."""
    del argv
    print("Guess the number!")
    secret = random.randint(1, 100)
    try:
        for message in play(secret, sys.stdin):
            print(message, flush=True)
    except EOFError as exc:
        print(f"Failed to read line: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())