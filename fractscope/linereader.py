"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import AnyStr, IO

BUFFER_SIZE = 42


def _newline(chunk: AnyStr) -> AnyStr:
    return "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[return-value]


class LineReader:
    """Split a text or binary stream into lines, newline kept.

    The stream is read in chunks of buffer_size; characters past the end of
    a returned line are kept for the next call.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._size = buffer_size
        self._pending: str | bytes | None = None

    def read_line(self) -> str | bytes | None:
        """The next line including its newline, the unterminated tail, or None at the end."""
        pending = self._pending
        while True:
            if pending:
                index = pending.find(_newline(pending))
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[: index + 1]
            chunk = self._stream.read(self._size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        self._pending = None
        return pending or None

    def __iter__(self) -> Iterator[str | bytes]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO, buffer_size: int = BUFFER_SIZE) -> list[str | bytes]:
    """All remaining lines of stream."""
    return list(LineReader(stream, buffer_size))