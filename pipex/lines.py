"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import weakref
from typing import IO, AnyStr, Generic, Iterator

__all__ = ["LineReader", "get_next_line"]

_INT_MAX = 2**31 - 1


def _check_buffer_size(buffer_size: int) -> int:
    if not 0 < buffer_size <= _INT_MAX:
        raise ValueError(f"buffer size must be between 1 and {_INT_MAX}, got {buffer_size}")
    return buffer_size


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Data is pulled from the stream in chunks of buffer_size.  Each line
    keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        self._stream = stream
        self._buffer_size = _check_buffer_size(buffer_size)
        self._pending: AnyStr | None = None

    @property
    def buffer_size(self) -> int:
        return self._buffer_size

    @buffer_size.setter
    def buffer_size(self, value: int) -> None:
        self._buffer_size = _check_buffer_size(value)

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while True:
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)
                if index >= 0:
                    self._pending = pending[index + 1 :]
                    return pending[: index + 1]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        self._pending = None
        return pending or None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


_readers: "weakref.WeakKeyDictionary[IO, LineReader]" = weakref.WeakKeyDictionary()


def get_next_line(stream: IO[AnyStr], buffer_size: int = 1) -> AnyStr | None:
    """Return the next line of stream, remembering unread data between calls.

    Returns None at the end of the stream, after which the remembered
    state for that stream is dropped.
    """
    _check_buffer_size(buffer_size)
    reader = _readers.get(stream)
    if reader is None:
        reader = LineReader(stream, buffer_size)
        _readers[stream] = reader
    else:
        reader.buffer_size = buffer_size
    try:
        line = reader.read_line()
    except Exception:
        _readers.pop(stream, None)
        raise
    if line is None:
        _readers.pop(stream, None)
    return line