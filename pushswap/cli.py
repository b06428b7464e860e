"""Command line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .args import ArgumentError, check_args, split_args
from .numbers import atoi
from .sort import solve


def parse_arguments(argv: Sequence[str]) -> list[int]:
    """Turn the arguments into integers.

    A single argument is split on spaces; several are taken one number each.
    Raises ArgumentError for anything that is not a list of distinct integers.
    """
    words = split_args(argv[0]) if len(argv) == 1 else check_args(argv)
    return [atoi(word) for word in words]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 1
    try:
        values = parse_arguments(argv)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    for move in solve(values):
        sys.stdout.write(move + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())