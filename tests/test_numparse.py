import pytest

from fractscope.numparse import (
    NumberFormatError,
    format_int,
    parse_float,
    parse_int,
    validate_number,
)


@pytest.mark.parametrize("text", ["0", "1.5", "-0.75", "+3.25", "42", "-7", "0.001"])
def test_parse_float_matches_builtin(text):
    assert parse_float(text) == pytest.approx(float(text))


def test_parse_float_skips_leading_whitespace():
    assert parse_float(" \t\n\v\f\r2.5") == parse_float("2.5")


def test_parse_float_accepts_comma_separator():
    assert parse_float("1,25") == parse_float("1.25")


def test_parse_float_stops_at_garbage():
    assert parse_float("3.5abc") == parse_float("3.5")


def test_parse_float_empty_is_zero():
    assert parse_float("") == 0.0
    assert parse_float("abc") == 0.0


def test_parse_float_negative_fraction_only():
    assert parse_float("-.5") == pytest.approx(-float(".5"))


@pytest.mark.parametrize("text", ["0", "17", "-17", "+99", "2147483647", "-2147483648"])
def test_parse_int_matches_builtin(text):
    assert parse_int(text) == int(text)


def test_parse_int_whitespace_and_trailing():
    assert parse_int("  \t\n42xyz") == parse_int("42")


def test_parse_int_single_sign_only():
    assert parse_int("+-5") == 0


@pytest.mark.parametrize("number", [0, 10, -123456, 2147483647, -2147483648])
def test_format_int_round_trip(number):
    assert format_int(number) == str(number)
    assert parse_int(format_int(number)) == number


def test_format_int_rejects_float():
    with pytest.raises(TypeError):
        format_int(1.5)


@pytest.mark.parametrize("text", ["0.285", "-0.01", " +1,5", "12"])
def test_validate_number_returns_value(text):
    assert validate_number(text) == parse_float(text)


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_validate_number_no_number(text):
    with pytest.raises(NumberFormatError, match="no number found"):
        validate_number(text)


@pytest.mark.parametrize(
    "text, bad",
    [("1.2.3", "."), ("12a", "a"), ("--1", "-"), ("1 ", " "), ("0x1", "x")],
)
def test_validate_number_reports_bad_char(text, bad):
    with pytest.raises(NumberFormatError) as info:
        validate_number(text)
    assert info.value.char == bad
    assert f"'{bad}'" in str(info.value)


def test_number_format_error_is_value_error():
    with pytest.raises(ValueError):
        validate_number("abc")