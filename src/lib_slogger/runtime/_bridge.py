"""Bridge routing stdlib :mod:`logging` records into a :class:`Logger`.

Installing the default logger with ``capture_stdlib=True`` attaches a
:class:`StdlibBridgeHandler` to the root logger so libraries that log through
``logging.getLogger(...)`` end up on the same handler and sink.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from lib_slogger.domain import Attr, Level, LogRecord, SinkWriteError

from ._logger import Logger

_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}
#: Attributes every stdlib record carries; anything else came from ``extra=``.


class StdlibBridgeHandler(logging.Handler):
    """Convert :class:`logging.LogRecord` objects and forward them."""

    def __init__(self, logger: Logger) -> None:
        super().__init__()
        self._logger = logger
        self._formatter = logging.Formatter()

    def emit(self, record: logging.LogRecord) -> None:
        if not self._logger.enabled(record.levelno):
            return
        attrs = [Attr("logger", record.name)]
        attrs.extend(Attr(key, value) for key, value in vars(record).items() if key not in _RESERVED)
        if record.exc_info:
            attrs.append(Attr("exc_info", self._formatter.formatException(record.exc_info)))
        converted = LogRecord(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
            level=record.levelno,
            message=record.getMessage(),
            attrs=tuple(attrs),
        )
        try:
            self._logger.handler.handle(converted)
        except SinkWriteError:
            self.handleError(record)


def install_bridge(logger: Logger, target: logging.Logger | None = None) -> StdlibBridgeHandler:
    """Attach a bridge handler to ``target`` (the root logger by default).

    The target's level is lowered to the lowest tier ``logger`` accepts so the
    stdlib does not filter records the handler would render; callers keep the
    previous level to restore it when detaching.
    """
    target = target if target is not None else logging.getLogger()
    handler = StdlibBridgeHandler(logger)
    target.addHandler(handler)
    lowest = next((level for level in Level if logger.enabled(level)), Level.ERROR)
    target.setLevel(lowest.to_python_level())
    return handler


__all__ = ["StdlibBridgeHandler", "install_bridge"]
