"""Error raised when a handler cannot write to its sink."""

from __future__ import annotations


class SinkWriteError(OSError):
    """The configured sink rejected a write; the record was not emitted."""


__all__ = ["SinkWriteError"]
