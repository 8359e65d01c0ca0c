"""Sink state shared between a handler and every handler derived from it."""

from __future__ import annotations

import io
import threading
from typing import Callable

from lib_slogger.application.ports.sink import SinkPort
from lib_slogger.domain.errors import SinkWriteError


class SharedSink:
    """Serialise buffer-fill-and-write cycles onto one stream.

    Examples
    --------
    >>> stream = io.StringIO()
    >>> SharedSink(stream).emit(lambda buf: buf.write("hello"))
    >>> stream.getvalue()
    'hello\\n'
    """

    def __init__(self, stream: SinkPort) -> None:
        self.stream = stream
        self._lock = threading.Lock()
        self._buffer = io.StringIO()

    def emit(self, render: Callable[[io.StringIO], object]) -> None:
        """Render one line into the scratch buffer and write it in one call."""

        with self._lock:
            buffer = self._buffer
            buffer.seek(0)
            buffer.truncate()
            render(buffer)
            buffer.write("\n")
            try:
                self.stream.write(buffer.getvalue())
                flush = getattr(self.stream, "flush", None)
                if flush is not None:
                    flush()
            except Exception as exc:
                raise SinkWriteError(f"failed to write log record: {exc}") from exc


__all__ = ["SharedSink"]
