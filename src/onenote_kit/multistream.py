"""A read-only stream that concatenates several binary streams.

Reading the pages of a section yields one content stream per page;
ConcatStream presents them to callers as a single document without
joining them into one buffer first.
"""

from __future__ import annotations

import io
from collections import deque
from typing import BinaryIO, Iterable


def _stream_length(stream: BinaryIO) -> int:
    if not stream.seekable():
        raise io.UnsupportedOperation("length of a non-seekable source is unknown")
    here = stream.tell()
    end = stream.seek(0, io.SEEK_END)
    stream.seek(here)
    return end


class ConcatStream(io.RawIOBase):
    """Read from each source in turn, closing each one once it is exhausted.

    The stream takes ownership of the sources it is given. Every source is
    closed exactly once: when a read finds it empty, or when the
    ConcatStream itself is closed, whichever comes first.

    A single read returns bytes from one source only. Empty sources at the
    front are skipped within the same call.
    """

    def __init__(self, sources: Iterable[BinaryIO]) -> None:
        super().__init__()
        self._sources: deque[BinaryIO] = deque(sources)
        self._position = 0

    @property
    def pending(self) -> int:
        """Number of sources not yet released."""
        return len(self._sources)

    @property
    def length(self) -> int:
        """Total size of the sources that have not been released yet."""
        return sum(_stream_length(s) for s in self._sources)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def writable(self) -> bool:
        return False

    def write(self, b) -> int:
        raise io.UnsupportedOperation("write")

    def tell(self) -> int:
        self._checkClosed()
        return self._position

    def readinto(self, buffer) -> int:
        self._checkClosed()
        view = memoryview(buffer).cast("B")
        if not len(view):
            return 0

        while self._sources:
            read = self._sources[0].readinto(view)
            if read:
                self._position += read
                return read
            # Dequeue before closing so a failing close() cannot leave it queued.
            self._sources.popleft().close()
        return 0

    def close(self) -> None:
        if not self.closed:
            try:
                while self._sources:
                    self._sources.popleft().close()
            finally:
                super().close()
