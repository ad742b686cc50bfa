import io

import pytest

from pipex.printf import (
    format_hex,
    format_number,
    format_pointer,
    format_string,
    format_unsigned,
    printf,
    sprintf,
)


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 4096, 2**32 - 1])
def test_format_hex_round_trip(value):
    assert int(format_hex(value, "x"), 16) == value


@pytest.mark.parametrize("value", [10, 171, 2**31 + 12345])
def test_format_hex_case(value):
    lower = format_hex(value, "x")
    assert format_hex(value, "X") == lower.upper()
    assert lower == lower.lower()


def test_format_hex_negative_wraps_to_unsigned():
    assert int(format_hex(-1, "x"), 16) == 2**32 - 1


def test_format_hex_bad_spec():
    with pytest.raises(ValueError):
        format_hex(1, "d")


def test_format_unsigned_wraps():
    assert format_unsigned(-1) == str(2**32 - 1)
    assert format_unsigned(0) == "0"
    assert format_unsigned(2**32 + 7) == "7"


def test_format_number_limits():
    assert format_number(-2147483648) == "-2147483648"
    assert format_number(2147483647) == "2147483647"
    assert format_number(2**31) == "-2147483648"


def test_format_number_type_error():
    with pytest.raises(TypeError):
        format_number("12")


def test_format_pointer_null():
    assert format_pointer(0) == "0x0"
    assert format_pointer(None) == "0x0"


@pytest.mark.parametrize("address", [1, 0xDEADBEEF, 2**48 + 3])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_format_string_null():
    assert format_string(None) == "(null)"
    assert format_string("word") == "word"


def test_sprintf_conversions():
    assert sprintf("%d and %i", 42, -7) == "42 and -7"
    assert sprintf("%s!", "hello") == "hello!"
    assert sprintf("%c%c", "q", 65) == "q" + chr(65)
    assert sprintf("%s", None) == "(null)"


def test_sprintf_percent_literal():
    assert sprintf("100%%") == "100%"


def test_sprintf_unknown_conversion_is_dropped():
    assert sprintf("a%zb") == "ab"


def test_sprintf_trailing_percent_ignored():
    assert sprintf("end%") == "end"


def test_sprintf_hex_matches_helpers():
    assert sprintf("%x|%X|%u|%p", 300, 300, 5, 16) == "|".join(
        [format_hex(300, "x"), format_hex(300, "X"), format_unsigned(5), format_pointer(16)]
    )


def test_sprintf_missing_argument():
    with pytest.raises(ValueError):
        sprintf("%d %d", 1)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d\n", "key", 9, stream=stream)
    assert stream.getvalue() == "key=9\n"
    assert count == len(stream.getvalue())