"""Runtime façade: logger construction and the process-wide default.

Purpose
-------
Expose a stable entry point (``new_slogger``, ``init``, ``current_logger``,
``shutdown`` and level helpers) that host applications use instead of
importing the handlers directly.

Contents
--------
* ``new_slogger`` and the option factories - build a :class:`Logger`.
* ``init`` / ``shutdown`` - install and remove the process default, optionally
  bridging the stdlib :mod:`logging` tree.
* ``debug`` / ``info`` / ``warn`` / ``error`` / ``success`` - delegate to the
  default logger.
"""

from __future__ import annotations

import logging
from typing import Any

from lib_slogger.domain import Attr

from ._bridge import StdlibBridgeHandler, install_bridge
from ._composition import build_config, build_handler, new_slogger
from ._logger import Logger, SystemClock
from ._options import (
    Format,
    LoggerConfig,
    LoggerOption,
    with_debug,
    with_format,
    with_level,
    with_no_color,
    with_output,
    with_styles,
)
from ._state import clear_default, current_logger, is_initialised, set_bridge, set_default


def init(*options: LoggerOption, capture_stdlib: bool = False) -> Logger:
    """Build a logger from ``options`` and install it as the process default.

    Call once during startup. ``capture_stdlib`` additionally routes records of
    the stdlib root logger through the same handler.

    Raises
    ------
    RuntimeError
        When a default logger is already installed.
    """
    logger = new_slogger(*options)
    set_default(logger)
    if capture_stdlib:
        root = logging.getLogger()
        previous_level = root.level
        set_bridge(root, install_bridge(logger, root), previous_level)
    return logger


def shutdown() -> None:
    """Remove the default logger and undo the stdlib bridge.

    The root logger gets back the level it had before :func:`init`. Safe to
    call when nothing is installed.
    """

    clear_default()


def debug(message: str, *attrs: Attr, **fields: Any) -> None:
    current_logger().debug(message, *attrs, **fields)


def info(message: str, *attrs: Attr, **fields: Any) -> None:
    current_logger().info(message, *attrs, **fields)


def warn(message: str, *attrs: Attr, **fields: Any) -> None:
    current_logger().warn(message, *attrs, **fields)


def error(message: str, *attrs: Attr, **fields: Any) -> None:
    current_logger().error(message, *attrs, **fields)


def success(message: str, *attrs: Attr, **fields: Any) -> None:
    current_logger().success(message, *attrs, **fields)


__all__ = [
    "Format",
    "Logger",
    "LoggerConfig",
    "LoggerOption",
    "StdlibBridgeHandler",
    "SystemClock",
    "build_config",
    "build_handler",
    "current_logger",
    "debug",
    "error",
    "info",
    "init",
    "install_bridge",
    "is_initialised",
    "new_slogger",
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
