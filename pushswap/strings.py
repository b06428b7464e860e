"""String helpers: splitting, searching, trimming and character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional


def _single(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def length(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def split(s: str, sep: str) -> list[str]:
    """Split s on the character sep, dropping empty words."""
    _single(sep)
    return [word for word in s.split(sep) if word]


def find_char(s: str, c: str) -> Optional[int]:
    """Index of the first c in s; the NUL character matches at len(s)."""
    _single(c)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> Optional[int]:
    """Index of the last c in s; the NUL character matches at len(s)."""
    _single(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def duplicate(s: str) -> str:
    """Return a string equal to s."""
    return "".join(s)


def iter_indexed(
    chars: MutableSequence[str],
    func: Callable[[int, str], Optional[str]],
) -> None:
    """Call func(index, char) on every element of chars.

    A result other than None replaces the element in place.
    """
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def compare_prefix(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference of the first mismatch.

    A string that ends early compares as if followed by NUL characters.
    """
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def find_substring(big: str, little: str, limit: int) -> Optional[int]:
    """Index of little within the first limit characters of big, or None.

    An empty little matches at index 0.
    """
    if not little:
        return 0
    index = big[:max(limit, 0)].find(little)
    return None if index < 0 else index


def trim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def substring(s: str, start: int, size: int) -> str:
    """Return at most size characters of s beginning at start.

    A start at or past the end gives the empty string.
    """
    if start < 0 or size < 0:
        raise ValueError("start and size must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + size]