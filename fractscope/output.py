"""Writing characters, strings, numbers and string lists to text streams."""

from __future__ import annotations

import operator
import sys
from collections.abc import Sequence
from typing import TextIO


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write a single character (to stdout by default)."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    (stream or sys.stdout).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write text; None writes nothing."""
    if text is not None:
        (stream or sys.stdout).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write text followed by a newline; None writes nothing."""
    if text is not None:
        (stream or sys.stdout).write(text + "\n")


def put_number(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of an integer."""
    (stream or sys.stdout).write(str(operator.index(number)))


def print_matrix(rows: Sequence[str] | None, stream: TextIO | None = None) -> None:
    """Write each row on its own line, then an empty line (to stderr by default)."""
    if rows is None:
        return
    out = stream or sys.stderr
    for row in rows:
        out.write(row + "\n")
    out.write("\n")


def matrix_length(rows: Sequence[str] | None) -> int:
    """Number of rows; None counts as none."""
    return 0 if rows is None else len(rows)