"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 6


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one.
    The stream is read ``buffer_size`` units at a time.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self._buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None

    def _find_newline(self) -> int:
        """Return the index of the first newline in the buffer, or -1."""
        buffer = self._buffer
        if buffer is None:
            return -1
        if isinstance(buffer, (bytes, bytearray)):
            return buffer.find(b"\n")
        return buffer.find("\n")

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while self._find_newline() < 0:
            chunk = self.stream.read(self._buffer_size)
            if not chunk:
                break
            self._buffer = chunk if self._buffer is None else self._buffer + chunk
        if not self._buffer:
            return None
        index = self._find_newline()
        if index < 0:
            line, self._buffer = self._buffer, self._buffer[:0]
        else:
            line = self._buffer[: index + 1]
            self._buffer = self._buffer[index + 1 :]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


_shared: Optional[LineReader] = None


def get_next_line(stream: IO[AnyStr]) -> Optional[AnyStr]:
    """Return the next line of ``stream``, keeping unread data between calls.

    Only one stream is followed at a time; switching streams discards
    whatever was buffered from the previous one.
    """
    global _shared
    if _shared is None or _shared.stream is not stream:
        _shared = LineReader(stream)
    line = _shared.read_line()
    if line is None:
        _shared = None
    return line