"""Domain values shared by handlers and the runtime façade."""

from __future__ import annotations

from .attrs import Attr, collect, group
from .colors import Color, colorize
from .errors import SinkWriteError
from .levels import Level, label_of
from .records import LogRecord

__all__ = [
    "Attr",
    "Color",
    "Level",
    "LogRecord",
    "SinkWriteError",
    "collect",
    "colorize",
    "group",
    "label_of",
]
