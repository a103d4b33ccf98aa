"""Lenient number parsing and strict command-line number validation."""

from __future__ import annotations

import operator

_SPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")
_SEPARATORS = frozenset(".,")
_SIGNS = frozenset("+-")


class NumberFormatError(ValueError):
    """Raised when a string is not a well-formed decimal number."""

    def __init__(self, message: str, char: str | None = None) -> None:
        super().__init__(message)
        self.char = char


def _skip_space(text: str, pos: int = 0) -> int:
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    return pos


def _take_digits(text: str, pos: int) -> tuple[str, int]:
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return text[pos:end], end


def _take_sign(text: str, pos: int) -> tuple[bool, int]:
    if pos < len(text) and text[pos] in _SIGNS:
        return text[pos] == "-", pos + 1
    return False, pos


def parse_float(text: str) -> float:
    """Parse a leading decimal number, accepting '.' or ',' as separator.

    Leading whitespace is skipped and parsing stops at the first character
    that cannot belong to the number; an empty prefix yields 0.0.
    """
    pos = _skip_space(text)
    negative, pos = _take_sign(text, pos)
    whole, pos = _take_digits(text, pos)
    fraction = ""
    if pos < len(text) and text[pos] in _SEPARATORS:
        fraction, pos = _take_digits(text, pos + 1)
    value = int(whole + fraction or "0") / 10 ** len(fraction)
    return -value if negative else value


def parse_int(text: str) -> int:
    """Parse a leading signed integer; stops at the first non-digit."""
    pos = _skip_space(text)
    negative, pos = _take_sign(text, pos)
    digits, _ = _take_digits(text, pos)
    value = int(digits or "0")
    return -value if negative else value


def format_int(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(operator.index(number))


def validate_number(text: str) -> float:
    """Check that text is exactly one decimal number and return its value.

    Accepted form: optional whitespace, optional sign, digits, an optional
    '.' or ',' separator and more digits, and nothing after that.
    """
    pos = _skip_space(text)
    if pos == len(text):
        raise NumberFormatError("no number found.")
    _, pos = _take_sign(text, pos)
    _, pos = _take_digits(text, pos)
    if pos < len(text) and text[pos] in _SEPARATORS:
        pos += 1
    _, pos = _take_digits(text, pos)
    if pos != len(text):
        bad = text[pos]
        raise NumberFormatError(
            f"Wrong number semantic, bad use of '{bad}'.", bad
        )
    return parse_float(text)