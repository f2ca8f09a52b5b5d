"""A small catalogue of artists and their works."""

from __future__ import annotations

import sys
from collections.abc import Sequence

Table = dict[str, list[str]]


def sort_works(table: Table) -> None:
    """Sort each artist's list of works in place."""
    for works in table.values():
        works.sort()


def show(table: Table) -> None:
    """Print every artist followed by their works, indented."""
    for artist, works in table.items():
        print(f"Works by {artist}")
        for work in works:
            print(f"  {work}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample catalogue with each artist's works sorted."""
    del argv
    table: Table = {
        "Gesualdo": ["Many Madrigals", "Tenabrae Responsario"],
        "Caraviggio": ["The Musicians", "The Calling of St. Matthew"],
        "Cellini": ["Perseus with the head of Medusa", "A Salt Cellar"],
    }
    sort_works(table)
    show(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())