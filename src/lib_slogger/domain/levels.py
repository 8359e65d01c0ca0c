"""Log level abstraction mirroring the host facility's ordered tiers.

Purpose
-------
Offer a small, totally ordered representation of log severities that keeps
compatibility with plain integers so custom levels (e.g. ``25``) can travel
through the pipeline without being rejected.

Contents
--------
* :class:`Level` enum with conversion helpers.
* :func:`label_of` rendering the native label for any numeric level.

System Role
-----------
Used by handlers to gate records (``level >= minimum``) and by the severity
translator to resolve arbitrary values onto the four named tiers.
"""

from __future__ import annotations

import logging
from enum import IntEnum


class Level(IntEnum):
    """Enumerated logging levels; ordered ``DEBUG < INFO < WARN < ERROR``."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def label(self) -> str:
        """Return the native uppercase label used by the JSON encoder."""

        return self.name

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return logging.WARNING if self is Level.WARN else getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "Level":
        normalized = name.strip().upper()
        if normalized == "WARNING":
            return cls.WARN
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def widen(cls, level: int) -> "Level":
        """Return the nearest named tier at or below ``level``.

        Values below :attr:`DEBUG` resolve to :attr:`DEBUG` and values above
        :attr:`ERROR` to :attr:`ERROR`.

        Examples
        --------
        >>> Level.widen(25) is Level.INFO
        True
        >>> Level.widen(5) is Level.DEBUG
        True
        >>> Level.widen(50) is Level.ERROR
        True
        """
        resolved = cls.DEBUG
        for member in cls:
            if member <= level:
                resolved = member
        return resolved


def label_of(level: int) -> str:
    """Render ``level`` as ``NAME`` or ``NAME+offset`` for custom values.

    Examples
    --------
    >>> label_of(Level.WARN)
    'WARN'
    >>> label_of(25)
    'INFO+5'
    >>> label_of(8)
    'DEBUG-2'
    """
    if level < Level.DEBUG:
        base = Level.DEBUG
    else:
        base = Level.widen(level)
    offset = int(level) - int(base)
    if offset == 0:
        return base.label
    return f"{base.label}{offset:+d}"


__all__ = ["Level", "label_of"]
