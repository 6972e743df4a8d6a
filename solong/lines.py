"""Line-by-line reading from a stream with a fixed read size."""

from __future__ import annotations

from typing import IO, Iterator, List, Optional

BUFFER_SIZE = 100


class LineReader:
    """Read a text stream one line at a time, keeping the newline."""

    def __init__(self, stream: IO[str], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def next_line(self) -> Optional[str]:
        """Return the next line, newline included, or None at end of input."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        cut = self._pending.find("\n")
        if cut < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: cut + 1], self._pending[cut + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[str]) -> List[str]:
    """Return every line of the stream, newlines kept."""
    return list(LineReader(stream))


def count_lines(stream: IO[str]) -> int:
    """Return the number of lines left in the stream."""
    return sum(1 for _ in LineReader(stream))