"""Line sources: where command text comes from.

Every source answers ``next_line()`` with a line (newline stripped) or
None at end of input, and releases its resources on ``close()``.
Read failures surface as ``OSError`` and are fatal to a run.
"""

from __future__ import annotations

import sys
from pathlib import Path
from types import TracebackType
from typing import IO, Protocol, Self


class LineSource(Protocol):
    """Contract consumed by the simulation loop."""

    def next_line(self) -> str | None: ...

    def close(self) -> None: ...


class StreamLineSource:
    """Read lines from an already-open text stream.

    The stream is only closed on ``close()`` when *owns_stream* is True,
    so wrapping ``sys.stdin`` leaves the process stdin usable.
    """

    def __init__(self, stream: IO[str], *, owns_stream: bool = False) -> None:
        self._stream = stream
        self._owns_stream = owns_stream
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def next_line(self) -> str | None:
        if self._closed:
            return None
        line = self._stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_stream:
            self._stream.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class FileLineSource(StreamLineSource):
    """Read lines from a UTF-8 text file.

    The file is opened on construction; a missing or unreadable path
    raises ``OSError`` immediately.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(path.open(encoding="utf-8"), owns_stream=True)


def open_source(path: Path | None) -> StreamLineSource:
    """File source for *path*, or a standard-input source when None."""
    if path is None:
        return StreamLineSource(sys.stdin)
    return FileLineSource(path)
