import pytest

from pushswap.ranking import fill_stack, index_of, is_sorted, rank_values
from pushswap.validation import ArgumentError


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([5], True),
        ([1, 2, 3], True),
        ([1, 1, 2], True),
        ([2, 1], False),
        ([1, 3, 2], False),
        ([-5, 0, 5], True),
    ],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


def test_index_of_finds_position():
    values = [1, 5, 9]
    assert index_of(values, 1) == 0
    assert index_of(values, 9) == 2


def test_index_of_returns_first_occurrence():
    assert index_of([4, 4, 6], 4) == 0


def test_index_of_missing_value():
    assert index_of([1, 5, 9], 7) == -1
    assert index_of([], 0) == -1


def test_index_of_handles_zero():
    assert index_of([-1, 0, 3], 0) == 1


def test_rank_values_is_a_permutation():
    values = [42, -7, 13, 0, 99]
    ranks = rank_values(values)
    assert sorted(ranks) == list(range(len(values)))


def test_rank_values_preserves_order():
    values = [42, -7, 13, 0, 99, -100]
    ranks = rank_values(values)
    for i, first in enumerate(values):
        for j, second in enumerate(values):
            assert (first < second) == (ranks[i] < ranks[j])


def test_rank_values_of_sorted_input_is_identity():
    values = [-3, 0, 8, 21]
    assert rank_values(values) == list(range(4))


def test_rank_values_consistent_with_index_of():
    values = [10, 3, 7]
    ordered = sorted(values)
    assert rank_values(values) == [index_of(ordered, v) for v in values]


def test_rank_values_empty():
    assert rank_values([]) == []


def test_fill_stack_ranks_arguments():
    assert fill_stack(["3 1", "2"]) == [2, 0, 1]


def test_fill_stack_sorted_input():
    ranks = fill_stack(["-5", "0", "5"])
    assert ranks == [0, 1, 2]
    assert is_sorted(ranks)


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["1 2 1"],
        ["abc"],
        ["2147483648"],
        ["-2147483649"],
    ],
)
def test_fill_stack_rejects_bad_arguments(args):
    with pytest.raises(ArgumentError):
        fill_stack(args)