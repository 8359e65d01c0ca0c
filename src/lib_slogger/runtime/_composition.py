"""Composition root turning options into a configured :class:`Logger`.

The factory reads ``SLOG_*`` environment overrides first, applies explicit
options on top, then selects exactly one handler:

* :attr:`Format.TEXT` - :class:`TextHandler` (colourised lines);
* :attr:`Format.JSON` - :class:`JSONHandler` with :func:`marshal_level`
  installed as its ``replace_attr`` hook.
"""

from __future__ import annotations

from lib_slogger.adapters import JSONHandler, TextHandler, marshal_level
from lib_slogger.application.ports import ClockPort, HandlerPort

from ._logger import Logger
from ._options import Format, LoggerConfig, LoggerOption


def build_config(*options: LoggerOption) -> LoggerConfig:
    """Resolve environment overrides and apply ``options`` in order."""

    config = LoggerConfig.from_env()
    for option in options:
        option(config)
    return config


def build_handler(config: LoggerConfig) -> HandlerPort:
    """Return the handler selected by ``config.format``."""

    if config.format is Format.JSON:
        return JSONHandler(config.sink, level=config.level, replace_attr=marshal_level())
    return TextHandler(config.sink, level=config.level, styles=config.styles, no_color=config.no_color)


def new_slogger(*options: LoggerOption, clock: ClockPort | None = None) -> Logger:
    """Build a logger from ``options``.

    Examples
    --------
    >>> from lib_slogger.runtime import with_debug, with_format
    >>> isinstance(new_slogger(with_format("json")).handler, JSONHandler)
    True
    >>> new_slogger(with_debug()).enabled(10)
    True
    """
    return Logger(build_handler(build_config(*options)), clock=clock)


__all__ = ["build_config", "build_handler", "new_slogger"]
