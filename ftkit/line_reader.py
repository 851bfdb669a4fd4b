"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, AnyStr, Iterator, List, Optional

__all__ = ["LineReader"]

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Return successive lines from a text or binary stream.

    The stream is read ``buffer_size`` characters (or bytes) at a time.
    Whatever follows a newline in the last chunk read is kept for the next
    call, so several readers on one stream would interfere with each other.
    Lines keep their trailing newline; the last line of a stream that does
    not end with a newline comes back without one.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @property
    def buffer_size(self) -> int:
        """The number of characters or bytes requested per read."""
        return self._buffer_size

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        pieces: List[AnyStr] = []
        chunk = self._pending
        self._pending = None
        while True:
            if not chunk:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
            newline = "\n" if isinstance(chunk, str) else b"\n"
            cut = chunk.find(newline)
            if cut >= 0:
                pieces.append(chunk[: cut + 1])
                rest = chunk[cut + 1:]
                self._pending = rest if rest else None
                break
            pieces.append(chunk)
            chunk = None
        if not pieces:
            return None
        return pieces[0][:0].join(pieces)

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line