"""Integer parsing and formatting with fixed-width overflow behaviour."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement integer of the given width."""
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(text: str, bits: int) -> int:
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] == "-":
        sign = -1
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]
    result = 0
    for ch in takewhile(lambda ch: ch in _DIGITS, body):
        previous = result
        result = _wrap(result * 10 + int(ch), bits)
        if sign == 1 and previous > result:
            return -1
        if sign == -1 and previous > _wrap(result + 1, bits):
            return 0
    return _wrap(result * sign, bits)


def atoi(text: str) -> int:
    """Parse a leading integer the way a 32-bit C ``int`` would hold it.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. A value overflowing 64 bits gives -1 when positive
    and 0 when negative; anything else is truncated to 32 bits.
    """
    return _wrap(_parse(text, 64), 32)


def atoi_longlong(text: str) -> int:
    """Parse a leading integer as a 64-bit value, with the same rules as atoi."""
    return _parse(text, 64)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return f"{n:d}"