"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO, Union

_CONVERSIONS = "cspdiuxX%"
_UINT_MASK = (1 << 32) - 1
_PTR_MASK = (1 << 64) - 1


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n >= 1 << 31 else n


def format_char(c: Union[str, int]) -> str:
    """Render one character; an integer gives the character of its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def format_str(s: Optional[str]) -> str:
    """Render a string; None is shown as (null)."""
    return "(null)" if s is None else s


def format_int(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    return f"{_to_int32(n):d}"


def format_uint(n: int) -> str:
    """Render an unsigned 32-bit integer in decimal."""
    return f"{n & _UINT_MASK:d}"


def format_hex(n: int, conversion: str = "x") -> str:
    """Render an unsigned value in hexadecimal, lower case for 'x', upper for 'X'."""
    if conversion == "x":
        return f"{n & _PTR_MASK:x}"
    if conversion == "X":
        return f"{n & _PTR_MASK:X}"
    raise ValueError(f"unknown hexadecimal conversion {conversion!r}")


def format_pointer(ptr: Optional[int]) -> str:
    """Render an address as 0x followed by lower-case hex; zero is (nil)."""
    if not ptr:
        return "(nil)"
    return "0x" + format_hex(ptr, "x")


def _convert(conversion: str, args: list[Any]) -> str:
    if conversion == "%":
        return "%"
    if not args:
        raise TypeError(f"not enough arguments for %{conversion}")
    value = args.pop(0)
    if conversion == "c":
        return format_char(value)
    if conversion == "s":
        return format_str(value)
    if conversion == "p":
        return format_pointer(value)
    if conversion in "di":
        return format_int(value)
    if conversion == "u":
        return format_uint(value)
    return format_hex(value & _UINT_MASK, conversion)


def format_string(fmt: str, *args: Any) -> str:
    """Expand fmt with args.

    A '%' not followed by a known conversion is kept as text. Extra
    arguments are ignored; too few raise TypeError.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    remaining = list(args)
    parts: list[str] = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch == "%" and i + 1 < len(fmt) and fmt[i + 1] in _CONVERSIONS:
            parts.append(_convert(fmt[i + 1], remaining))
            i += 2
        else:
            parts.append(ch)
            i += 1
    return "".join(parts)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of fmt to stream (stdout by default); return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)