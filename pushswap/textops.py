"""Building new strings out of existing ones: slicing, joining, trimming, splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def trim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each element of ``chars`` in place.

    A non-None result replaces the element at that index.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one of which holds the terminator.

    Returns the copied text and the full length of ``src``; a size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length that was attempted. When the
    buffer is already shorter than ``dst`` nothing is appended and the
    attempted length is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if len(dst) > size:
        return dst, size + len(src)
    room = max(size - 1 - len(dst), 0)
    return dst + src[:room], len(dst) + len(src)