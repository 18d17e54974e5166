"""Parsing and checking the integers given on the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.chars import is_digit
from pushswap.textops import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """The arguments are not a list of distinct integers in range."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(token: str) -> int:
    """Parse an optional sign followed by digits into a 32-bit integer.

    The token must start with a sign or a digit; parsing stops at the first
    non-digit. A value outside the 32-bit range raises ArgumentError.
    """
    if not token or not (token[0] in "+-" or is_digit(token[0])):
        raise ArgumentError()
    sign = -1 if token[0] == "-" else 1
    digits = token[1:] if token[0] in "+-" else token
    result = 0
    for char in digits:
        if not is_digit(char):
            break
        result = result * 10 + int(char)
        if not INT_MIN <= sign * result <= INT_MAX:
            raise ArgumentError()
    return sign * result


def join_args(args: Iterable[str]) -> str:
    """Join the arguments with single spaces."""
    return " ".join(args)


def check_duplicates(numbers: Sequence[int]) -> None:
    """Raise ArgumentError if any number occurs more than once."""
    if len(set(numbers)) != len(numbers):
        raise ArgumentError()


def validate_args(args: Iterable[str]) -> list[int]:
    """Split the arguments on spaces, parse every token and reject duplicates."""
    numbers = [parse_int(token) for token in split(join_args(args), " ")]
    check_duplicates(numbers)
    return numbers