"""Byte-buffer primitives: fill, copy, overlapping move, search, compare."""

from __future__ import annotations


def _check(buffer_len: int, count: int, offset: int = 0) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if offset < 0 or offset + count > buffer_len:
        raise IndexError("range exceeds buffer")


def zero(buffer: bytearray, count: int) -> bytearray:
    """Set the first count bytes to zero."""
    return fill(buffer, 0, count)


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first count bytes to the low byte of value."""
    _check(len(buffer), count)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def copy(dest: bytearray, src: bytes, count: int) -> bytearray:
    """Copy count bytes from the start of src to the start of dest."""
    _check(len(dest), count)
    _check(len(src), count)
    dest[:count] = src[:count]
    return dest


def move(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Copy count bytes within buffer; the two ranges may overlap."""
    _check(len(buffer), count, dest_offset)
    _check(len(buffer), count, src_offset)
    buffer[dest_offset:dest_offset + count] = bytes(
        buffer[src_offset:src_offset + count]
    )
    return buffer


def find_byte(buffer: bytes, value: int, count: int) -> int | None:
    """Index of the first byte equal to value within count bytes, or None."""
    _check(len(buffer), count)
    index = bytes(buffer[:count]).find(value & 0xFF)
    return None if index < 0 else index


def compare(first: bytes, second: bytes, count: int) -> int:
    """Difference of the first unequal bytes within count, else 0."""
    _check(len(first), count)
    _check(len(second), count)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0