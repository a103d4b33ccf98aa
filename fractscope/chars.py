"""ASCII character classification and case conversion.

Every function accepts either an integer code or a one-character string.
Case conversions return a value of the same kind as their argument.
"""

from __future__ import annotations

from typing import overload


def _code(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        return ord(value)
    return int(value)


def is_alpha(code: int | str) -> bool:
    """True for ASCII letters."""
    c = _code(code)
    return ord("a") <= c <= ord("z") or ord("A") <= c <= ord("Z")


def is_digit(code: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(code) <= ord("9")


def is_alnum(code: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(code) <= 127


def is_print(code: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(code) <= 126


def _shift_case(code: int | str, low: str, high: str, delta: int) -> int | str:
    c = _code(code)
    if ord(low) <= c <= ord(high):
        c += delta
    return chr(c) if isinstance(code, str) else c


@overload
def to_lower(code: int) -> int: ...
@overload
def to_lower(code: str) -> str: ...
def to_lower(code):
    """Map an ASCII upper-case letter to lower case; others unchanged."""
    return _shift_case(code, "A", "Z", 32)


@overload
def to_upper(code: int) -> int: ...
@overload
def to_upper(code: str) -> str: ...
def to_upper(code):
    """Map an ASCII lower-case letter to upper case; others unchanged."""
    return _shift_case(code, "a", "z", -32)