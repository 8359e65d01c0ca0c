"""Machine-readable JSON handler with an attribute rewrite hook.

Purpose
-------
Emit one JSON object per record (``time``, ``level``, ``msg`` followed by the
record attributes, groups nested as objects). A ``replace_attr`` hook may
rewrite or drop any attribute before it is serialised; the runtime installs
:func:`~lib_slogger.adapters.severity.marshal_level` there for the JSON format.

Contents
--------
* :class:`JSONHandler` - :class:`HandlerPort` implementation.
"""

from __future__ import annotations

import copy
import json
import sys
from datetime import datetime
from typing import Any, Sequence

from lib_slogger.application.ports.handler import HandlerPort, ReplaceAttr
from lib_slogger.application.ports.sink import SinkPort
from lib_slogger.domain.attrs import Attr
from lib_slogger.domain.levels import Level, label_of
from lib_slogger.domain.records import LogRecord

from ._shared import SharedSink

TIME_KEY = "time"
LEVEL_KEY = "level"
MESSAGE_KEY = "msg"
EXTRA_PREFIX = "extra_"

_BUILTIN_KEYS = frozenset({TIME_KEY, LEVEL_KEY, MESSAGE_KEY})
#: Keys reserved for the record itself; user attributes using them are
#: emitted as ``extra_<key>``.


def _default(value: Any) -> Any:
    try:
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8", errors="replace")
        if isinstance(value, (set, frozenset)):
            return list(value)
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _sanitise(value: Any, seen: frozenset[int] = frozenset()) -> Any:
    """Return ``value`` with string keys and without reference cycles.

    Examples
    --------
    >>> _sanitise({(1, 2): 3})
    {'(1, 2)': 3}
    >>> loop = []
    >>> loop.append(loop)
    >>> _sanitise(loop)
    ['<circular list>']
    """
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        if id(value) in seen:
            return f"<circular {type(value).__name__}>"
        seen = seen | {id(value)}
        if isinstance(value, dict):
            return {
                key if isinstance(key, str) else str(_default(key)): _sanitise(item, seen)
                for key, item in value.items()
            }
        return [_sanitise(item, seen) for item in value]
    return value


def _encode(payload: dict[str, Any]) -> str:
    try:
        return json.dumps(payload, ensure_ascii=False, default=_default)
    except (TypeError, ValueError):
        return json.dumps(_sanitise(payload), ensure_ascii=False, default=_default)


class JSONHandler(HandlerPort):
    """Serialise records as JSON lines.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from io import StringIO
    >>> stream = StringIO()
    >>> handler = JSONHandler(stream).with_group("http")
    >>> record = LogRecord(datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), Level.INFO, "served", (Attr("status", 200),))
    >>> handler.handle(record)
    >>> stream.getvalue()
    '{"time": "2025-09-30T12:00:00+00:00", "level": "INFO", "msg": "served", "http": {"status": 200}}\\n'
    """

    def __init__(
        self,
        sink: SinkPort | None = None,
        *,
        level: int = Level.INFO,
        replace_attr: ReplaceAttr | None = None,
    ) -> None:
        self._shared = SharedSink(sink if sink is not None else sys.stderr)
        self._level = level
        self._replace_attr = replace_attr
        self._groups: tuple[str, ...] = ()
        self._bound: tuple[tuple[tuple[str, ...], Attr], ...] = ()

    @property
    def level(self) -> int:
        return self._level

    @property
    def replace_attr(self) -> ReplaceAttr | None:
        return self._replace_attr

    @property
    def sink(self) -> SinkPort:
        return self._shared.stream

    def enabled(self, level: int) -> bool:
        return level >= self._level

    def handle(self, record: LogRecord) -> None:
        """Serialise ``record`` and write it as one line.

        User attributes never replace the record's own fields: a key equal to
        ``time``, ``level`` or ``msg`` (at any depth), or to a top-level key a
        built-in was rewritten to (``severity``), is emitted as
        ``extra_<key>``.
        """
        payload: dict[str, Any] = {}
        builtins = (
            Attr(TIME_KEY, record.timestamp),
            Attr(LEVEL_KEY, record.level),
            Attr(MESSAGE_KEY, record.message),
        )
        for attr in builtins:
            self._insert(payload, (), attr, None)
        reserved = frozenset(payload) | _BUILTIN_KEYS
        for groups, attr in self._bound:
            self._insert(payload, groups, attr, reserved)
        for attr in record.attrs:
            self._insert(payload, self._groups, attr, reserved)
        line = _encode(payload)
        self._shared.emit(lambda buffer: buffer.write(line))

    def with_attrs(self, attrs: Sequence[Attr]) -> "JSONHandler":
        if not attrs:
            return self
        derived = copy.copy(self)
        derived._bound = self._bound + tuple((self._groups, attr) for attr in attrs)
        return derived

    def with_group(self, name: str) -> "JSONHandler":
        if not name:
            return self
        derived = copy.copy(self)
        derived._groups = self._groups + (name,)
        return derived

    def _insert(
        self,
        payload: dict[str, Any],
        groups: tuple[str, ...],
        attr: Attr,
        reserved: frozenset[str] | None,
    ) -> None:
        """Place ``attr`` into ``payload`` below the ``groups`` path.

        ``reserved`` is ``None`` for the built-in fields and the set of keys
        user attributes must not take otherwise.
        """
        if attr.is_empty:
            return
        if reserved is not None and attr.key in _BUILTIN_KEYS:
            attr = Attr(EXTRA_PREFIX + attr.key, attr.value)
        if attr.is_group:
            nested = groups + (attr.key,) if attr.key else groups
            for member in attr.value:
                self._insert(payload, nested, member, reserved)
            return
        if self._replace_attr is not None:
            attr = self._replace_attr(groups, attr)
            if not attr.key:
                return
        self._insert_raw(payload, groups, attr, reserved)

    @staticmethod
    def _insert_raw(
        payload: dict[str, Any],
        groups: tuple[str, ...],
        attr: Attr,
        reserved: frozenset[str] | None,
    ) -> None:
        if attr.is_group:
            for member in attr.value:
                JSONHandler._insert_raw(payload, groups + (attr.key,), member, reserved)
            return
        key = attr.key
        if reserved is not None:
            if groups and groups[0] in reserved:
                groups = (EXTRA_PREFIX + groups[0],) + groups[1:]
            elif not groups and key in reserved:
                key = EXTRA_PREFIX + key
        target = payload
        for name in groups:
            child = target.get(name)
            if not isinstance(child, dict):
                child = {}
                target[name] = child
            target = child
        value = attr.value
        if isinstance(value, Level) or (key == LEVEL_KEY and not groups and isinstance(value, int)):
            value = label_of(value)
        target[key] = value


__all__ = ["EXTRA_PREFIX", "JSONHandler", "LEVEL_KEY", "MESSAGE_KEY", "TIME_KEY"]
