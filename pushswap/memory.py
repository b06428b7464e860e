"""Byte-buffer operations over mutable ``bytearray`` objects."""

from __future__ import annotations

from typing import Optional

_SIZE_MAX = (1 << 64) - 1


def _cstrlen(buf: bytes | bytearray) -> int:
    """Length of the NUL-terminated string at the start of buf."""
    end = buf.find(0)
    return len(buf) if end < 0 else end


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    Raises OverflowError when the product would not fit in a size_t.
    """
    if nmemb == 0 or size == 0:
        return bytearray()
    product = nmemb * size
    if product > _SIZE_MAX:
        raise OverflowError("allocation size overflows")
    return bytearray(product)


def memchr(buf: bytes | bytearray, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c (as unsigned char) in buf[:n], or None."""
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first unequal bytes within n, or 0 if all are equal."""
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes of src to the start of dest and return dest."""
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dest, overlap allowed."""
    if n:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with c (as unsigned char) and return buf."""
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy the string src into dst, writing at most size bytes with the NUL.

    Returns the length of src.
    """
    src_len = _cstrlen(src)
    if size == 0:
        return src_len
    count = min(size - 1, src_len)
    if len(dst) < count + 1:
        raise ValueError("destination buffer too small")
    dst[:count] = src[:count]
    dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append the string src to the string in dst, keeping the total under size.

    Returns the length the combined string would have had; when size does not
    exceed the current length of dst, returns len(src) + size and leaves dst alone.
    """
    src_len = _cstrlen(src)
    if size == 0:
        return src_len
    dst_len = _cstrlen(dst)
    if size <= dst_len:
        return src_len + size
    count = min(size - 1 - dst_len, src_len)
    end = dst_len + count
    if len(dst) < end + 1:
        raise ValueError("destination buffer too small")
    dst[dst_len:end] = src[:count]
    dst[end] = 0
    return src_len + dst_len