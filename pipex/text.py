"""String helpers: splitting, joining, bounded copies, searches and trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Tuple, Union

Char = Union[str, int]


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string; integers are taken as code points."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: Char) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    return [word for word in text.split(_char(sep)) if word]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent.

    Returns None only when both are None.
    """
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``.  With a size of
    zero nothing is copied.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` so that the result fits a buffer of ``size``.

    Returns the resulting text and the length the full concatenation would
    have had.  When ``size`` does not exceed the length of ``dest``, ``dest``
    is returned unchanged together with ``len(src) + size``.
    """
    _check_non_negative("size", size)
    if size <= len(dest):
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of differing character codes,
    with the end of a string counting as code 0, or 0 if none differ.
    """
    _check_non_negative("n", n)
    limit = min(n, max(len(first), len(second)))
    for index in range(limit):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0; None when there is no match.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of ``c``; the NUL character matches the end."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of ``c``; the NUL character matches the end."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strtrim(text: Optional[str], charset: Optional[str]) -> str:
    """Remove characters in ``charset`` from both ends of ``text``.

    A missing text yields an empty string; a missing charset leaves the text
    as it is.
    """
    if text is None:
        return ""
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each item of a mutable character sequence.

    A non-None return value replaces the item in place.
    """
    if isinstance(text, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence of characters")
    for index, ch in enumerate(list(text)):
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = replacement