"""Logger façade that builds records and hands them to a handler."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from lib_slogger.application.ports import ClockPort, HandlerPort
from lib_slogger.domain import Attr, Color, Level, LogRecord, collect


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class Logger:
    """Lightweight facade for structured logging calls.

    Enablement is decided by the handler before a record is built; disabled
    calls cost one comparison. Keyword fields become attributes after any
    positional :class:`Attr` values, in call order.

    Examples
    --------
    >>> from io import StringIO
    >>> from lib_slogger.adapters import TextHandler
    >>> stream = StringIO()
    >>> log = Logger(TextHandler(stream, no_color=True))
    >>> log.debug("hidden")
    >>> log.info("shown", user="ada")
    >>> stream.getvalue().split(" ", 1)[1]
    'INFO shown user=ada\\n'
    """

    def __init__(self, handler: HandlerPort, *, clock: ClockPort | None = None) -> None:
        self._handler = handler
        self._clock = clock or SystemClock()

    @property
    def handler(self) -> HandlerPort:
        """Handler receiving this logger's records."""
        return self._handler

    def enabled(self, level: int) -> bool:
        return self._handler.enabled(level)

    def log(self, level: int, message: str, *attrs: Attr, **fields: Any) -> None:
        """Emit ``message`` at an arbitrary (possibly custom) ``level``."""
        self._emit(level, message, attrs, fields, None)

    def debug(self, message: str, *attrs: Attr, **fields: Any) -> None:
        self._emit(Level.DEBUG, message, attrs, fields, None)

    def info(self, message: str, *attrs: Attr, **fields: Any) -> None:
        self._emit(Level.INFO, message, attrs, fields, None)

    def warn(self, message: str, *attrs: Attr, **fields: Any) -> None:
        self._emit(Level.WARN, message, attrs, fields, None)

    warning = warn

    def error(self, message: str, *attrs: Attr, **fields: Any) -> None:
        self._emit(Level.ERROR, message, attrs, fields, None)

    def success(self, message: str, *attrs: Attr, **fields: Any) -> None:
        """Emit an ``INFO`` record rendered green by the text handler."""
        self._emit(Level.INFO, message, attrs, fields, Color.GREEN)

    def with_attrs(self, *attrs: Attr, **fields: Any) -> "Logger":
        """Return a logger whose records always carry ``attrs`` first."""
        return Logger(self._handler.with_attrs(collect(attrs, fields)), clock=self._clock)

    bind = with_attrs

    def with_group(self, name: str) -> "Logger":
        """Return a logger nesting subsequent attributes under ``name``."""
        return Logger(self._handler.with_group(name), clock=self._clock)

    def _emit(
        self,
        level: int,
        message: str,
        attrs: Iterable[Attr],
        fields: Mapping[str, Any],
        color: Color | None,
    ) -> None:
        if not self._handler.enabled(level):
            return
        record = LogRecord(
            timestamp=self._clock.now(),
            level=level,
            message=message,
            attrs=collect(attrs, fields),
            color=color,
        )
        self._handler.handle(record)


__all__ = ["Logger", "SystemClock"]
