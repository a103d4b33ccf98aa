"""Building new strings: bounded copies, joins, slices, trimming and splitting."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size slots, one kept for the terminator.

    Returns the copied text and the full length of src, so truncation
    happened exactly when the length is not smaller than size.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size slots.

    Returns the resulting text and the length the full result would have
    had. When dst already fills the buffer, dst is returned unchanged and
    the length reported is len(src) + size.
    """
    _non_negative(size, "size")
    if size == 0 or len(dst) >= size:
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(src) + len(dst)


def duplicate(text: str | None, count: int | None = None) -> str | None:
    """A copy of text, or of its first count characters; None stays None."""
    if text is None:
        return None
    if count is None:
        return text[:]
    return text[: _non_negative(count, "count")]


def join(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent.

    Returns None only when both are missing.
    """
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def substring(text: str | None, start: int, length: int) -> str | None:
    """At most length characters of text beginning at start.

    A start past the end gives an empty string; None stays None.
    """
    if text is None:
        return None
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start : start + length]


def trim(text: str | None, charset: str | None) -> str | None:
    """Remove characters found in charset from both ends of text.

    A missing charset returns text unchanged; None text stays None.
    """
    if text is None:
        return None
    if charset is None:
        return text[:]
    return text.strip(charset)


def split(text: str | None, separator: str) -> list[str] | None:
    """The non-empty pieces of text between occurrences of separator."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    if text is None:
        return None
    return [piece for piece in text.split(separator) if piece]


def map_chars(
    text: str | None, func: Callable[[int, str], str]
) -> str | None:
    """A new string made of func(index, char) for every character."""
    if text is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_chars(text: str | None, func: Callable[[int, str], Any]) -> None:
    """Call func(index, char) for every character of text, in order."""
    if text is None:
        return
    for index, char in enumerate(text):
        func(index, char)