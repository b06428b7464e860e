import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char():
    out = io.StringIO()
    put_char("z", out)
    assert out.getvalue() == "z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_none():
    out = io.StringIO()
    put_str("hello", out)
    put_str(None, out)
    assert out.getvalue() == "hello"


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("Error", out)
    assert out.getvalue() == "Error\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_min_int_text():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("pa\n")
    assert capsys.readouterr().out == "pa\n"