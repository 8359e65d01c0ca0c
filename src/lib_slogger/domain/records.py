"""Immutable record describing a single structured log event.

Purpose
-------
Provide the value object handlers consume: timestamp, level, message and the
ordered attribute sequence supplied at the call site.

System Role
-----------
Built by :class:`lib_slogger.runtime.Logger` (or the stdlib bridge) once a
handler reports the level as enabled, then passed unchanged to
:meth:`HandlerPort.handle`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any

from .attrs import Attr
from .colors import Color
from .levels import Level


_CANONICAL = frozenset(int(member) for member in Level)


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Immutable log record.

    Attributes
    ----------
    timestamp:
        Time of the event in timezone-aware UTC.
    level:
        :class:`Level` or a plain integer for custom levels.
    message:
        Rendered message passed by the caller.
    attrs:
        Ordered attributes supplied with this call.
    color:
        Explicit colour override for text rendering (``success`` lines).
    """

    timestamp: datetime
    level: int
    message: str
    attrs: tuple[Attr, ...] = ()
    color: Color | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        object.__setattr__(self, "attrs", tuple(self.attrs))
        if not isinstance(self.level, Level) and self.level in _CANONICAL:
            object.__setattr__(self, "level", Level(self.level))

    def add_attrs(self, *attrs: Attr) -> "LogRecord":
        """Return a copy with ``attrs`` appended after the existing ones."""

        return replace(self, attrs=self.attrs + tuple(attrs))

    def replace(self, **changes: Any) -> "LogRecord":
        """Return a copied record with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["LogRecord"]
