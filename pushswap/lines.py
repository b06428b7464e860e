"""Line-by-line reading from a stream using fixed-size reads."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, Optional, Union

Chunk = Union[str, bytes]


class LineReader:
    """Read lines, newline included, from a text or binary stream.

    Data is pulled from the stream buffer_size units at a time; whatever
    follows a returned line is kept for the next call.
    """

    def __init__(self, stream: IO, buffer_size: int = 10) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[Chunk] = None

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None when the stream is exhausted."""
        while True:
            if self._stash:
                newline = "\n" if isinstance(self._stash, str) else b"\n"
                index = self._stash.find(newline)
                if index >= 0:
                    line = self._stash[:index + 1]
                    self._stash = self._stash[index + 1:]
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                line, self._stash = self._stash, None
                return line or None
            self._stash = chunk if self._stash is None else self._stash + chunk

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.read_line, None)