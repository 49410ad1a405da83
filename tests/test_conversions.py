import pytest

from pctfmt.conversions import (
    format_alternate_hex,
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_signed_int,
    format_str,
    format_unsigned,
    is_flag_char,
)


def test_char_from_string():
    assert format_char("q") == "q"


@pytest.mark.parametrize("code", [0, 65, 122, 255])
def test_char_from_code_round_trip(code):
    assert ord(format_char(code)) == code


def test_char_code_is_truncated_to_byte():
    assert format_char(256 + 66) == format_char(66)


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_str_none():
    assert format_str(None) == "(null)"


def test_str_plain():
    assert format_str("hello") == "hello"


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_int_round_trip(value):
    assert int(format_int(value)) == value


def test_int_min():
    assert format_int(-2147483648) == "-2147483648"


def test_int_wraps_to_32_bits():
    assert int(format_int(2**31)) == -(2**31)


@pytest.mark.parametrize("value", [0, 9, 10, 4294967295])
def test_unsigned_round_trip(value):
    assert int(format_unsigned(value)) == value


def test_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 0xDEADBEEF, 2**64 - 1])
def test_hex_round_trip(value):
    assert int(format_hex(value, False), 16) == value


@pytest.mark.parametrize("value", [10, 0xABCDEF, 2**40 + 11])
def test_hex_upper_matches_lower(value):
    upper = format_hex(value, True)
    assert upper == format_hex(value, False).upper()
    assert upper == upper.upper()


def test_hex_lower_has_no_uppercase():
    text = format_hex(0xABCDEF, False)
    assert text == text.lower()


def test_pointer_zero():
    assert format_pointer(0) == "(nil)"


def test_pointer_none():
    assert format_pointer(None) == "(nil)"


@pytest.mark.parametrize("value", [1, 0x7FFF1234, 2**63])
def test_pointer_round_trip(value):
    text = format_pointer(value)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value


def test_signed_zero_space():
    assert format_signed_int(0, " ") == " 0"


def test_signed_zero_plus():
    assert format_signed_int(0, "+") == "+0"


@pytest.mark.parametrize("sign", [" ", "+"])
@pytest.mark.parametrize("value", [1, 42, 2147483647])
def test_signed_positive_prefix(sign, value):
    text = format_signed_int(value, sign)
    assert text[0] == sign
    assert int(text[1:]) == value


@pytest.mark.parametrize("sign", [" ", "+"])
def test_signed_negative(sign):
    text = format_signed_int(-7, sign)
    assert text.startswith("-")
    assert int(text) == -7


def test_signed_int_min():
    assert format_signed_int(-2147483648, "+") == "-2147483648"


def test_signed_rejects_other_sign():
    with pytest.raises(ValueError):
        format_signed_int(3, "-")


def test_alternate_hex_zero():
    assert format_alternate_hex(0, False) == "0"
    assert format_alternate_hex(0, True) == "0"


@pytest.mark.parametrize("value", [1, 255, 0xCAFE])
def test_alternate_hex_prefixes(value):
    lower = format_alternate_hex(value, False)
    upper = format_alternate_hex(value, True)
    assert lower.startswith("0x")
    assert upper.startswith("0X")
    assert int(lower[2:], 16) == value
    assert upper[2:] == lower[2:].upper()


def test_alternate_hex_truncates_to_32_bits():
    assert format_alternate_hex(2**32 + 5, False) == format_alternate_hex(5, False)


@pytest.mark.parametrize("char", list("+ #0.-%"))
def test_flag_chars(char):
    assert is_flag_char(char) is True


@pytest.mark.parametrize("char", list("dxs5a"))
def test_non_flag_chars(char):
    assert is_flag_char(char) is False