"""Sortedness checks and replacing numbers by their rank in sorted order."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.validation import validate_args


def is_sorted(values: Sequence[int]) -> bool:
    """True when ``values`` never decreases; empty and single-element sequences count."""
    return all(left <= right for left, right in zip(values, values[1:]))


def index_of(sorted_values: Sequence[int], value: int) -> int:
    """Position of the first occurrence of ``value``, or -1 when it is absent."""
    for index, candidate in enumerate(sorted_values):
        if candidate == value:
            return index
    return -1


def rank_values(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in the sorted order of ``values``.

    Equal values share the position of their first occurrence in that order.
    """
    positions: dict[int, int] = {}
    for index, value in enumerate(sorted(values)):
        positions.setdefault(value, index)
    return [positions[value] for value in values]


def fill_stack(args: Iterable[str]) -> list[int]:
    """Validate the arguments and return their ranks, top of the stack first.

    Raises ArgumentError for anything that is not a list of distinct
    32-bit integers.
    """
    return rank_values(validate_args(args))