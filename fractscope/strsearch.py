"""Searching and comparing within text strings.

Text is treated as a terminated character string: the terminator ``"\\0"``
may be searched for and is found at the position just past the last
character.
"""

from __future__ import annotations

from collections.abc import Iterable

_TERMINATOR = "\0"


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char


def text_length(text: str | None) -> int:
    """Number of characters in text; a missing text has length 0."""
    return 0 if text is None else len(text)


def find_char(text: str, char: str) -> int | None:
    """Index of the first occurrence of char, or None.

    Searching for the terminator yields the length of the text.
    """
    if _single(char) == _TERMINATOR:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def find_last_char(text: str, char: str) -> int | None:
    """Index of the last occurrence of char, or None.

    Searching for the terminator yields the length of the text.
    """
    if _single(char) == _TERMINATOR:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def find_substring(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of needle; an empty needle is found at 0."""
    index = haystack.find(needle)
    return None if index < 0 else index


def find_substring_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Like find_substring, but the match must lie within the first length characters.

    An empty needle is always found at 0; otherwise a zero length finds nothing.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most count characters of two strings.

    Returns the difference of the first pair of unequal character codes,
    treating the end of a string as code 0, or 0 when the compared parts
    are equal. A count of 0 compares nothing and returns 1.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return 1
    for index in range(count):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def first_containing(strings: Iterable[str], needle: str) -> str | None:
    """The first string that contains needle, or None."""
    return next((s for s in strings if needle in s), None)