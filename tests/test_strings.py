import pytest

from pushswap.strings import (
    atoi,
    compare_prefix,
    find_char,
    find_in_prefix,
    itoa,
    rfind_char,
)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_of_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_no_digits_gives_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_accepts_only_one_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_find_char_first_occurrence():
    text = "hello world"
    index = find_char(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_find_char_missing():
    assert find_char("abc", "z") is None


def test_find_char_terminator_is_end():
    assert find_char("abc", "\0") == len("abc")


def test_rfind_char_last_occurrence():
    text = "hello world"
    index = rfind_char(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]


def test_rfind_char_missing_and_terminator():
    assert rfind_char("abc", "z") is None
    assert rfind_char("abc", "\0") == len("abc")


def test_compare_prefix_equal_within_n():
    assert compare_prefix("abc", "abd", 2) == 0


def test_compare_prefix_difference_sign():
    assert compare_prefix("abc", "abd", 3) < 0
    assert compare_prefix("abd", "abc", 3) > 0


def test_compare_prefix_antisymmetric():
    assert compare_prefix("apple", "apply", 5) == -compare_prefix("apply", "apple", 5)


def test_compare_prefix_zero_length():
    assert compare_prefix("x", "y", 0) == 0


def test_compare_prefix_shorter_string_sorts_first():
    assert compare_prefix("ab", "abc", 5) == -ord("c")


def test_compare_prefix_identical_strings_past_end():
    assert compare_prefix("same", "same", 100) == 0


def test_find_in_prefix_found():
    haystack = "lorem ipsum dolor"
    index = find_in_prefix(haystack, "ipsum", len(haystack))
    assert haystack[index:index + len("ipsum")] == "ipsum"


def test_find_in_prefix_must_fit_within_length():
    haystack = "lorem ipsum"
    assert find_in_prefix(haystack, "ipsum", len(haystack)) is not None
    assert find_in_prefix(haystack, "ipsum", len(haystack) - 1) is None


def test_find_in_prefix_empty_needle():
    assert find_in_prefix("anything", "", 0) == 0


def test_find_in_prefix_missing():
    assert find_in_prefix("abc", "zz", 3) is None