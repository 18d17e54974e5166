"""A small printf supporting the c, s, d, i, p, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_INT_BITS = 32
_POINTER_BITS = 64


def _to_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _to_unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_decimal(value: Any) -> str:
    return str(_to_signed(int(value), _INT_BITS))


def _format_pointer(value: Any) -> str:
    if not value:
        return "0x0"
    return "0x" + format(_to_unsigned(int(value), _POINTER_BITS), "x")


def _format_unsigned(value: Any) -> str:
    return str(_to_unsigned(int(value), _INT_BITS))


def _format_hex_lower(value: Any) -> str:
    return format(_to_unsigned(int(value), _INT_BITS), "x")


def _format_hex_upper(value: Any) -> str:
    return format(_to_unsigned(int(value), _INT_BITS), "X")


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "d": _format_decimal,
    "i": _format_decimal,
    "p": _format_pointer,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _next_argument(pending: Iterator[Any], spec: str) -> Any:
    try:
        return next(pending)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    An unknown conversion produces nothing and consumes no argument.
    """
    pending = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            parts.append("%")
        elif spec in _CONVERTERS:
            parts.append(_CONVERTERS[spec](_next_argument(pending, spec)))
    return "".join(parts)


def printf(fmt: str, *args: Any, out: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``out`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if out is None else out
    stream.write(text)
    return len(text)