"""Construction options and environment overrides for :func:`new_slogger`.

Purpose
-------
Each option is an independent toggle applied to a mutable
:class:`LoggerConfig`; the composition root reads the resulting configuration
once and builds the handler.

Contents
--------
* :class:`Format` - output encoding selector.
* :class:`LoggerConfig` - resolved configuration with :meth:`from_env`.
* Option factories: :func:`with_debug`, :func:`with_format`,
  :func:`with_level`, :func:`with_output`, :func:`with_styles`,
  :func:`with_no_color`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from lib_slogger.application.ports.sink import SinkPort
from lib_slogger.domain.levels import Level


class Format(str, Enum):
    """Output encodings understood by the composition root."""

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_name(cls, name: str) -> "Format":
        normalized = name.strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown log format: {name!r}") from exc


@dataclass(slots=True)
class LoggerConfig:
    """Mutable configuration assembled from environment and options.

    Defaults: minimum level :attr:`Level.INFO`, :attr:`Format.TEXT`, output to
    ``sys.stderr``.
    """

    level: int = Level.INFO
    format: Format = Format.TEXT
    sink: SinkPort | None = None
    styles: dict[Level | str, str] | None = None
    no_color: bool = False

    @classmethod
    def from_env(cls) -> "LoggerConfig":
        """Return defaults overridden by ``SLOG_*`` environment variables.

        Examples
        --------
        >>> import os
        >>> _ = os.environ.pop('SLOG_DEBUG', None)
        >>> os.environ['SLOG_FORMAT'] = 'json'
        >>> LoggerConfig.from_env().format is Format.JSON
        True
        >>> _ = os.environ.pop('SLOG_FORMAT')
        """
        config = cls()
        level = os.getenv("SLOG_LEVEL")
        if level:
            config.level = Level.from_name(level)
        if _env_bool("SLOG_DEBUG", False):
            config.level = Level.DEBUG
        fmt = os.getenv("SLOG_FORMAT")
        if fmt:
            config.format = Format.from_name(fmt)
        config.no_color = _env_bool("SLOG_NO_COLOR", config.no_color)
        return config


LoggerOption = Callable[[LoggerConfig], None]


def with_debug() -> LoggerOption:
    """Lower the minimum enabled level to :attr:`Level.DEBUG`."""

    def _apply(config: LoggerConfig) -> None:
        config.level = Level.DEBUG

    return _apply


def with_format(fmt: Format | str) -> LoggerOption:
    """Select the colourised text handler or the JSON handler."""

    resolved = fmt if isinstance(fmt, Format) else Format.from_name(fmt)

    def _apply(config: LoggerConfig) -> None:
        config.format = resolved

    return _apply


def with_level(level: int | str) -> LoggerOption:
    resolved = Level.from_name(level) if isinstance(level, str) else level

    def _apply(config: LoggerConfig) -> None:
        config.level = resolved

    return _apply


def with_output(sink: SinkPort) -> LoggerOption:
    """Write rendered lines to ``sink`` instead of ``sys.stderr``."""

    def _apply(config: LoggerConfig) -> None:
        config.sink = sink

    return _apply


def with_styles(styles: Mapping[Level | str, str]) -> LoggerOption:
    """Override level colours of the text handler with Rich style names."""

    def _apply(config: LoggerConfig) -> None:
        merged = dict(config.styles or {})
        merged.update(styles)
        config.styles = merged

    return _apply


def with_no_color() -> LoggerOption:
    def _apply(config: LoggerConfig) -> None:
        config.no_color = True

    return _apply


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('SLOG_EXAMPLE_BOOL', None)
    >>> _env_bool('SLOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['SLOG_EXAMPLE_BOOL'] = '0'
    >>> _env_bool('SLOG_EXAMPLE_BOOL', default=True)
    False
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


__all__ = [
    "Format",
    "LoggerConfig",
    "LoggerOption",
    "with_debug",
    "with_format",
    "with_level",
    "with_no_color",
    "with_output",
    "with_styles",
]
