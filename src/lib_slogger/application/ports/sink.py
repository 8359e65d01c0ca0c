"""Sink port: the text stream handlers write rendered lines to."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Destination stream; files, terminals and ``io.StringIO`` qualify."""

    def write(self, data: str) -> Any: ...


__all__ = ["SinkPort"]
