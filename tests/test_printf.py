import io

import pytest

from pushswap.printf import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_str,
    format_string,
    format_uint,
    print_formatted,
)


def test_format_char_from_str_and_int():
    assert format_char("a") == "a"
    assert format_char(ord("Z")) == "Z"


def test_format_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_format_str_none():
    assert format_str(None) == "(null)"
    assert format_str("hello") == "hello"


def test_format_int_edge_values():
    assert format_int(-2147483648) == "-2147483648"
    assert format_int(0) == "0"
    assert format_int(-42) == "-42"


def test_format_int_wraps_to_32_bits():
    assert format_int(2147483648) == "-2147483648"


def test_format_uint_wraps_negative():
    assert int(format_uint(-1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 1, 9, 10, 15, 16, 255, 4096, 0xDEADBEEF])
def test_format_hex_round_trip(n):
    assert int(format_hex(n, "x"), 16) == n
    assert format_hex(n, "X") == format_hex(n, "x").upper()


def test_format_hex_cases():
    assert format_hex(255, "x") == "ff"
    assert format_hex(255, "X") == "FF"


def test_format_hex_bad_conversion():
    with pytest.raises(ValueError):
        format_hex(1, "d")


def test_format_pointer():
    assert format_pointer(0) == "(nil)"
    assert format_pointer(None) == "(nil)"
    text = format_pointer(0x1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234


def test_format_string_mixed():
    out = format_string("%s=%d %c%%", "x", 42, "!")
    assert out == "x=42 !%"


def test_format_string_unsigned_and_hex():
    assert format_string("%u %x %X", 7, 10, 11) == "7 a B"


def test_format_string_unknown_conversion_kept():
    assert format_string("%q") == "%q"


def test_format_string_trailing_percent():
    assert format_string("100%") == "100%"


def test_format_string_missing_argument():
    with pytest.raises(TypeError):
        format_string("%d")


def test_format_string_none_format():
    with pytest.raises(TypeError):
        format_string(None)


def test_format_string_null_string_argument():
    assert format_string("[%s]", None) == "[(null)]"


def test_print_formatted_writes_and_counts():
    buf = io.StringIO()
    count = print_formatted("pa\n", stream=buf)
    assert buf.getvalue() == "pa\n"
    assert count == len("pa\n")


def test_print_formatted_with_args():
    buf = io.StringIO()
    count = print_formatted("%i-%s", -5, "end", stream=buf)
    assert buf.getvalue() == "-5-end"
    assert count == len(buf.getvalue())