"""Replace every match of a regular expression in a file, writing the result elsewhere."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

# A replacement reference: "$$", "${name}" or "$name" (name made of word characters).
_REFERENCE = re.compile(r"\$(?:(\$)|\{([_0-9A-Za-z]+)\}|([_0-9A-Za-z]+))")


class UsageError(ValueError):
    """Raised when the command line does not have the expected shape."""


@dataclass(frozen=True)
class Arguments:
    """The four positional arguments of the command."""

    target: str
    replacement: str
    filename: str
    output: str


def parse_args(argv: Sequence[str] | None = None) -> Arguments:
    """Build :class:`Arguments` from exactly four command-line values."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        raise UsageError(
            f"wrong number of arguments: expected 4, got {len(args)}."
        )
    target, replacement, filename, output = args
    return Arguments(target, replacement, filename, output)


def _group_text(match: re.Match[str], name: str) -> str:
    if name.isdigit():
        index = int(name)
        if index > match.re.groups:
            return ""
        return match.group(index) or ""
    try:
        return match.group(name) or ""
    except IndexError:
        return ""


def _expand(match: re.Match[str], replacement: str) -> str:
    def substitute(ref: re.Match[str]) -> str:
        dollar, braced, bare = ref.groups()
        if dollar:
            return "$"
        return _group_text(match, braced or bare)

    return _REFERENCE.sub(substitute, replacement)


def replace(target: str, replacement: str, text: str) -> str:
    """Replace every match of the pattern ``target`` in ``text``.

    ``replacement`` may refer to capture groups as ``$1``, ``$name`` or
    ``${name}``; ``$$`` stands for a literal dollar sign. Unknown groups
    expand to nothing. An invalid pattern raises :class:`re.error`.
    """
    pattern = re.compile(target)
    return pattern.sub(lambda match: _expand(match, replacement), text)


def _styled(text: str, code: str, stream: TextIO) -> str:
    if stream.isatty():
        return f"\x1b[{code}m{text}\x1b[0m"
    return text


def _error_label() -> str:
    return _styled("Error:", "1;31", sys.stderr)


def _print_usage() -> None:
    name = _styled("quickreplace", "32", sys.stderr)
    print(f"{name} - change occurrences of one string into another", file=sys.stderr)
    print("Usage: quickreplace <target> <replacement> <INPUT> <OUTPUT>", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    try:
        args = parse_args(argv)
    except UsageError as exc:
        _print_usage()
        print(f"{_error_label()} {exc}", file=sys.stderr)
        return 1

    try:
        with open(args.filename, encoding="utf-8", newline="") as source:
            data = source.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(
            f"{_error_label()} failed to read from file '{args.filename}': {exc!r}",
            file=sys.stderr,
        )
        return 1

    try:
        replaced = replace(args.target, args.replacement, data)
    except re.error as exc:
        print(f"{_error_label()} failed to replace text: {exc!r}", file=sys.stderr)
        return 1

    try:
        with open(args.output, "w", encoding="utf-8", newline="") as destination:
            destination.write(replaced)
    except OSError as exc:
        print(
            f"{_error_label()} failed to write to file '{args.output}': {exc!r}",
            file=sys.stderr,
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())