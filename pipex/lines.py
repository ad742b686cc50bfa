"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional, Union

DEFAULT_BUFFER_SIZE = 42

Source = Union[IO[str], IO[bytes], int]


class LineReader(Generic[AnyStr]):
    """Yield lines from a file object or file descriptor.

    Lines keep their trailing newline; the last line may lack one.  Data is
    read ``buffer_size`` units at a time.  Lines are ``bytes`` for binary
    streams and descriptors, ``str`` for text streams.
    """

    def __init__(self, stream: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(stream, int) and not isinstance(stream, bool) and stream < 0:
            raise ValueError(f"invalid file descriptor {stream}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None

    def _read(self) -> AnyStr:
        if isinstance(self.stream, int):
            return os.read(self.stream, self.buffer_size)
        return self.stream.read(self.buffer_size)

    def _newline_index(self) -> int:
        buffer = self._buffer
        if buffer is None:
            return -1
        if isinstance(buffer, bytes):
            return buffer.find(b"\n")
        return buffer.find("\n")

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream has no more data."""
        while self._newline_index() < 0:
            chunk = self._read()
            if not chunk:
                break
            self._buffer = chunk if self._buffer is None else self._buffer + chunk
        if not self._buffer:
            return None
        index = self._newline_index()
        if index < 0:
            line, self._buffer = self._buffer, self._buffer[:0]
        else:
            line, self._buffer = self._buffer[: index + 1], self._buffer[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def iter_lines(stream: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator:
    """Iterate over the lines of ``stream``."""
    return iter(LineReader(stream, buffer_size))