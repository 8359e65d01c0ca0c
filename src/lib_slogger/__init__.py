"""Public package surface for the structured logging handlers.

``new_slogger`` builds a :class:`Logger` backed by either the colourised
:class:`TextHandler` or the :class:`JSONHandler` whose level field is
translated to ``severity`` by :func:`marshal_level`.
"""

from __future__ import annotations

from .adapters import JSONHandler, TextHandler, marshal_level, severity_of
from .domain import Attr, Color, Level, LogRecord, SinkWriteError, colorize, group
from .runtime import (
    Format,
    Logger,
    current_logger,
    debug,
    error,
    info,
    init,
    is_initialised,
    new_slogger,
    shutdown,
    success,
    warn,
    with_debug,
    with_format,
    with_level,
    with_no_color,
    with_output,
    with_styles,
)

__all__ = [
    "Attr",
    "Color",
    "Format",
    "JSONHandler",
    "Level",
    "LogRecord",
    "Logger",
    "SinkWriteError",
    "TextHandler",
    "colorize",
    "current_logger",
    "debug",
    "error",
    "group",
    "info",
    "init",
    "is_initialised",
    "marshal_level",
    "new_slogger",
    "severity_of",
    "shutdown",
    "success",
    "warn",
    "with_debug",
    "with_format",
    "with_level",
    "with_no_color",
    "with_output",
    "with_styles",
]
