"""Process-wide default logger and access helpers.

The default is installed once during startup (:func:`set_default`) and read
thereafter (:func:`current_logger`); all access goes through the lock.
"""

from __future__ import annotations

import logging
from threading import RLock

from ._logger import Logger

_STATE: Logger | None = None
_BRIDGE: tuple[logging.Logger, logging.Handler, int] | None = None
_STATE_LOCK = RLock()


def set_default(logger: Logger) -> None:
    """Install ``logger`` as the process default; refuses to overwrite one."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is not None:
            raise RuntimeError("a default logger is already installed; call lib_slogger.shutdown() first")
        _STATE = logger


def set_bridge(target: logging.Logger, handler: logging.Handler, previous_level: int) -> None:
    """Remember the bridge so :func:`clear_default` can undo it."""

    with _STATE_LOCK:
        global _BRIDGE
        _BRIDGE = (target, handler, previous_level)


def clear_default() -> None:
    """Remove the default logger; detach the stdlib bridge and restore its level."""

    with _STATE_LOCK:
        global _STATE, _BRIDGE
        if _BRIDGE is not None:
            target, handler, previous_level = _BRIDGE
            target.removeHandler(handler)
            target.setLevel(previous_level)
            _BRIDGE = None
        _STATE = None


def current_logger() -> Logger:
    """Return the default logger or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_slogger.init() must be called before using the default logger")
        return _STATE


def is_initialised() -> bool:
    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "clear_default",
    "current_logger",
    "is_initialised",
    "set_bridge",
    "set_default",
]
