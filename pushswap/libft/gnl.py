"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 8


class LineReader:
    """Reads lines from a file descriptor, buffer_size bytes per read."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._saved = b""

    def next_line(self) -> Optional[bytes]:
        """Return the next line, newline included, or None when nothing is left.

        The last line of the input is returned without a newline if it has none.
        A read error discards the buffered text and propagates.
        """
        while b"\n" not in self._saved:
            try:
                chunk = os.read(self._fd, self._buffer_size)
            except OSError:
                self._saved = b""
                raise
            if not chunk:
                break
            self._saved += chunk
        if not self._saved:
            return None
        end = self._saved.find(b"\n")
        if end < 0:
            line, self._saved = self._saved, b""
        else:
            line, self._saved = self._saved[: end + 1], self._saved[end + 1 :]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.next_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of fd, keeping unread text between calls.

    Returns None when the input is exhausted, after which the state for
    fd is forgotten.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.next_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line