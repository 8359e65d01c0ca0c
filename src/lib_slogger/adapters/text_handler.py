"""Colourised single-line text handler for terminals.

Purpose
-------
Render log records as ``timestamp LEVEL message key=value ...`` lines with the
level label wrapped in ANSI colour escapes.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`TextHandler` - :class:`HandlerPort` implementation returned by
  :func:`lib_slogger.new_slogger` for the text format.

System Role
-----------
Primary human-facing handler. Level labels come from
:func:`~lib_slogger.adapters.severity.severity_of` so text and JSON output name
levels identically; colours are Rich style names rendered with the standard
8-colour palette.
"""

from __future__ import annotations

import copy
import json
import sys
from datetime import datetime
from typing import Any, Mapping, MutableMapping, Sequence

from lib_slogger.application.ports.handler import HandlerPort
from lib_slogger.application.ports.sink import SinkPort
from lib_slogger.domain.attrs import Attr
from lib_slogger.domain.colors import Color, colorize
from lib_slogger.domain.levels import Level
from lib_slogger.domain.records import LogRecord

from ._shared import SharedSink
from .severity import severity_of


_STYLE_MAP: Mapping[Level, str] = {
    Level.DEBUG: Color.BLUE.value,
    Level.INFO: Color.GREEN.value,
    Level.WARN: Color.YELLOW.value,
    Level.ERROR: Color.RED.value,
}

#: Default Rich styles keyed by :class:`Level`.


def _format_time(ts: datetime) -> str:
    return f"{ts:%Y-%m-%dT%H:%M:%S}.{ts.microsecond // 1000:03d}Z"


def _needs_quoting(text: str) -> bool:
    if not text:
        return True
    return any(ch.isspace() or ch in '"=' or not ch.isprintable() for ch in text)


def _escape(text: str) -> str:
    """Replace non-printable characters with their JSON escape.

    Examples
    --------
    >>> _escape("a\\nb\\x1b[31m")
    'a\\\\nb\\\\u001b[31m'
    """
    if text.isprintable():
        return text
    return "".join(ch if ch.isprintable() else json.dumps(ch)[1:-1] for ch in text)


def _quote(text: str) -> str:
    return _escape(json.dumps(text, ensure_ascii=False)) if _needs_quoting(text) else text


def _stringify(value: Any) -> str:
    """Best-effort text for ``value``; never raises."""
    try:
        if isinstance(value, str):
            return value
        if isinstance(value, Level):
            return value.name
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8", errors="replace")
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _flatten(attrs: Sequence[Attr], groups: tuple[str, ...], out: list[tuple[str, Any]]) -> None:
    """Append dot-qualified ``(key, value)`` pairs for ``attrs`` to ``out``."""
    for attr in attrs:
        if attr.is_empty:
            continue
        if attr.is_group:
            _flatten(attr.value, groups + (attr.key,) if attr.key else groups, out)
        else:
            out.append((".".join(groups + (attr.key,)), attr.value))


class TextHandler(HandlerPort):
    """Render records as colourised lines and write them under a lock.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from io import StringIO
    >>> stream = StringIO()
    >>> handler = TextHandler(stream, no_color=True).with_attrs([Attr("svc", "api")])
    >>> record = LogRecord(datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), Level.WARN, "disk low", (Attr("free", "2 GB"),))
    >>> handler.handle(record)
    >>> stream.getvalue()
    '2025-09-30T12:00:00.000Z WARNING disk low svc=api free="2 GB"\\n'
    """

    def __init__(
        self,
        sink: SinkPort | None = None,
        *,
        level: int = Level.INFO,
        styles: MutableMapping[Level | str, str] | None = None,
        no_color: bool = False,
    ) -> None:
        """Configure the sink, minimum level and colour overrides."""
        self._shared = SharedSink(sink if sink is not None else sys.stderr)
        self._level = level
        self._no_color = no_color
        if styles:
            merged = dict(_STYLE_MAP)
            for key, value in styles.items():
                resolved = Level.from_name(key) if isinstance(key, str) else Level.widen(key)
                merged[resolved] = value
            self._style_map: Mapping[Level, str] = merged
        else:
            self._style_map = dict(_STYLE_MAP)
        self._groups: tuple[str, ...] = ()
        self._prefix: tuple[tuple[str, Any], ...] = ()

    @property
    def level(self) -> int:
        """Minimum level this handler accepts."""
        return self._level

    @property
    def sink(self) -> SinkPort:
        return self._shared.stream

    def enabled(self, level: int) -> bool:
        return level >= self._level

    def handle(self, record: LogRecord) -> None:
        """Render ``record`` and write it as one line.

        Raises
        ------
        SinkWriteError
            When the sink write fails; the original error is chained.
        """
        label = self._render_label(record)
        pairs = list(self._prefix)
        _flatten(record.attrs, self._groups, pairs)
        # Values are stringified outside the lock; a __str__ may log itself.
        fields = [f"{_quote(key)}={_quote(_stringify(value))}" for key, value in pairs]
        head = f"{_format_time(record.timestamp)} {label} {_escape(record.message)}"

        def _render(buffer: Any) -> None:
            buffer.write(head)
            for field in fields:
                buffer.write(" ")
                buffer.write(field)

        self._shared.emit(_render)

    def with_attrs(self, attrs: Sequence[Attr]) -> "TextHandler":
        if not attrs:
            return self
        pairs: list[tuple[str, Any]] = []
        _flatten(attrs, self._groups, pairs)
        derived = copy.copy(self)
        derived._prefix = self._prefix + tuple(pairs)
        return derived

    def with_group(self, name: str) -> "TextHandler":
        if not name:
            return self
        derived = copy.copy(self)
        derived._groups = self._groups + (name,)
        return derived

    def _render_label(self, record: LogRecord) -> str:
        label = severity_of(record.level)
        if self._no_color:
            return label
        style = record.color if record.color is not None else self._style_map.get(Level.widen(record.level), "")
        return colorize(style, label) if style else label


__all__ = ["TextHandler"]
