"""Writing characters, strings and numbers to a stream or file descriptor."""

from __future__ import annotations

import os
import sys
from typing import IO, Optional, Union

Stream = Union[IO[str], int, None]


def _write(text: str, stream: Stream) -> None:
    if stream is None:
        stream = sys.stdout
    if isinstance(stream, int) and not isinstance(stream, bool):
        data = text.encode()
        while data:
            written = os.write(stream, data)
            data = data[written:]
        return
    stream.write(text)


def put_char(c: Union[str, int], stream: Stream = None) -> None:
    """Write one character; an integer is taken as its code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c)
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    _write(ch, stream)


def put_str(text: Optional[str], stream: Stream = None) -> None:
    """Write ``text``; a missing text writes nothing."""
    if text is None:
        return
    _write(text, stream)


def put_endl(text: Optional[str], stream: Stream = None) -> None:
    """Write ``text`` followed by a newline; a missing text writes nothing."""
    if text is None:
        return
    _write(text + "\n", stream)


def put_nbr(n: int, stream: Stream = None) -> None:
    """Write an integer in decimal."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _write(str(n), stream)