"""Validation of the numbers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .numbers import atoi, atoi_longlong
from .strings import split

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_MAX_TEXT_LENGTH = 11
_NUMBER = re.compile(r"[+-]?[0-9]+")


class ArgumentError(ValueError):
    """Raised when the arguments are not a list of distinct integers."""


def is_number(arg: str) -> bool:
    """True when arg is an optional sign followed by one or more digits."""
    return _NUMBER.fullmatch(arg) is not None


def int_in_range(arg: str) -> bool:
    """True when arg fits a 32-bit signed integer and is at most 11 characters."""
    value = atoi_longlong(arg)
    return _INT_MIN <= value <= _INT_MAX and len(arg) <= _MAX_TEXT_LENGTH


def has_duplicate(args: Sequence[str]) -> bool:
    """True when two arguments parse to the same integer."""
    seen: set[int] = set()
    for arg in args:
        value = atoi(arg)
        if value in seen:
            return True
        seen.add(value)
    return False


def check_args(args: Sequence[str]) -> list[str]:
    """Return the arguments as a list, raising ArgumentError if any is invalid."""
    if has_duplicate(args):
        raise ArgumentError("duplicate number")
    for arg in args:
        if not is_number(arg) or not int_in_range(arg):
            raise ArgumentError(f"invalid number {arg!r}")
    return list(args)


def split_args(arg: str) -> list[str]:
    """Split a single space-separated argument into validated numbers."""
    words = split(arg, " ")
    if not words:
        raise ArgumentError("no numbers given")
    return check_args(words)