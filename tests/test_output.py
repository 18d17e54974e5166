import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_character():
    stream = io.StringIO()
    put_char("x", stream)
    assert stream.getvalue() == "x"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_writes_text_unchanged():
    stream = io.StringIO()
    text = "hello world"
    put_str(text, stream)
    assert stream.getvalue() == text


def test_put_str_empty_writes_nothing():
    stream = io.StringIO()
    put_str("", stream)
    assert stream.getvalue() == ""


def test_put_endl_appends_newline():
    stream = io.StringIO()
    put_endl("line", stream)
    assert stream.getvalue() == "line\n"


def test_put_nbr_int_min():
    stream = io.StringIO()
    put_nbr(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 42, -1, 2147483647])
def test_put_nbr_round_trips_through_int(n):
    stream = io.StringIO()
    put_nbr(n, stream)
    assert int(stream.getvalue()) == n


def test_writes_accumulate_in_order():
    stream = io.StringIO()
    put_str("a", stream)
    put_nbr(1, stream)
    put_char("b", stream)
    assert stream.getvalue() == "a1b"