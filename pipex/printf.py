"""Formatted output supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional, Union

from pipex.output import Stream, put_str

_UINT_MOD = 1 << 32
_INT_MIN = -(1 << 31)
_POINTER_MOD = 1 << 64


def _to_unsigned(value: int) -> int:
    """Reduce an integer to the range of a 32-bit unsigned int."""
    return value % _UINT_MOD


def _to_signed(value: int) -> int:
    """Reduce an integer to the range of a 32-bit signed int."""
    value = _to_unsigned(value)
    return value - _UINT_MOD if value >= -_INT_MIN else value


def _check_int(value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def format_hex(value: int, spec: str = "x") -> str:
    """Render ``value`` as an unsigned 32-bit hexadecimal number.

    ``spec`` selects lower-case (``"x"``) or upper-case (``"X"``) digits.
    """
    if spec not in ("x", "X"):
        raise ValueError(f"hex specifier must be 'x' or 'X', got {spec!r}")
    return format(_to_unsigned(_check_int(value)), spec)


def format_unsigned(value: int) -> str:
    """Render ``value`` as an unsigned 32-bit decimal number."""
    return str(_to_unsigned(_check_int(value)))


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x`` followed by lower-case hex; None counts as 0."""
    if address is None:
        address = 0
    return "0x" + format(_check_int(address) % _POINTER_MOD, "x")


def format_number(value: int) -> str:
    """Render ``value`` as a signed 32-bit decimal number."""
    return str(_to_signed(_check_int(value)))


def format_string(text: Optional[str]) -> str:
    """Return ``text``, or ``(null)`` when it is missing."""
    return "(null)" if text is None else text


def _format_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_check_int(value) & 0xFF)


_CONVERSIONS: dict[str, Callable[[Any, str], str]] = {
    "c": lambda value, _spec: _format_char(value),
    "s": lambda value, _spec: format_string(value),
    "p": lambda value, _spec: format_pointer(value),
    "d": lambda value, _spec: format_number(value),
    "i": lambda value, _spec: format_number(value),
    "u": lambda value, _spec: format_unsigned(value),
    "x": format_hex,
    "X": format_hex,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end of the format is ignored.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(f"not enough arguments for format {fmt!r}") from None
        pieces.append(convert(value, spec))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Stream = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` and return its length."""
    text = sprintf(fmt, *args)
    put_str(text, stream)
    return len(text)