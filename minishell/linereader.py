"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line of a stream that
    does not end in a newline is returned without one.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _fill(self) -> None:
        """Read chunks until one holds a newline or the stream is exhausted."""
        while True:
            chunk = self.stream.read(self.buffer_size)
            if chunk is None:
                chunk = b"" if self._pending is None else self._pending[:0]
            if self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk
            if not chunk:
                return
            newline = "\n" if isinstance(chunk, str) else b"\n"
            if newline in chunk:
                return

    def read_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        newline = "\n" if isinstance(pending, str) else b"\n"
        index = pending.find(newline)
        if index < 0:
            self._pending = None
            return pending
        line = pending[: index + 1]
        rest = pending[index + 1:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line