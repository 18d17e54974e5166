"""String searching, comparison and integer conversion helpers.

Strings behave as if terminated by a NUL character: searching for ``"\\0"``
finds the position just past the last character, and a ``"\\0"`` inside a
string ends it for comparison purposes.
"""

from __future__ import annotations

from typing import Optional

_WHITESPACE = frozenset(" \t\n\v\f\r")
_NUL = "\0"


def atoi(text: str) -> int:
    """Parse a leading integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; no digits gives 0.
    """
    chars = iter(text)
    current = next(chars, _NUL)
    while current in _WHITESPACE:
        current = next(chars, _NUL)
    sign = 1
    if current in "+-":
        if current == "-":
            sign = -1
        current = next(chars, _NUL)
    result = 0
    while "0" <= current <= "9":
        result = result * 10 + (ord(current) - ord("0"))
        current = next(chars, _NUL)
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; ``"\\0"`` matches the end."""
    if char == _NUL:
        end = text.find(_NUL)
        return len(text) if end < 0 else end
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; ``"\\0"`` matches the end."""
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def compare_prefix(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    Zero means the compared prefixes are equal.
    """
    for index in range(n):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b or a == 0:
            return a - b
    return 0


def find_in_prefix(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    end = haystack.find(_NUL)
    window = haystack if end < 0 else haystack[:end]
    index = window[: max(length, 0)].find(needle)
    return None if index < 0 else index