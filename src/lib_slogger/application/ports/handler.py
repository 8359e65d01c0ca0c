"""Handler port describing the record consumer contract.

Purpose
-------
Define the protocol both the colourised text handler and the JSON encoder
implement, so the runtime façade and the stdlib bridge depend on a narrow
abstraction rather than a concrete renderer.

Contents
--------
* :class:`HandlerPort` – runtime-checkable protocol with ``enabled``,
  ``handle``, ``with_attrs`` and ``with_group``.
* :data:`ReplaceAttr` – signature of attribute rewrite hooks.
"""

from __future__ import annotations

from typing import Callable, Protocol, Sequence, runtime_checkable

from lib_slogger.domain.attrs import Attr
from lib_slogger.domain.records import LogRecord

ReplaceAttr = Callable[[Sequence[str], Attr], Attr]
"""Hook invoked per attribute with the current group path."""


@runtime_checkable
class HandlerPort(Protocol):
    """Consume log records and write them to a sink."""

    def enabled(self, level: int) -> bool:
        """Return ``True`` when records at ``level`` should be built."""

    def handle(self, record: LogRecord) -> None:
        """Render ``record`` and write it; raise on sink failure."""

    def with_attrs(self, attrs: Sequence[Attr]) -> "HandlerPort":
        """Return a handler that prepends ``attrs`` to every record."""

    def with_group(self, name: str) -> "HandlerPort":
        """Return a handler that nests future attributes under ``name``."""


__all__ = ["HandlerPort", "ReplaceAttr"]
