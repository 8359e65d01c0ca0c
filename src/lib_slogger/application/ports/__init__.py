"""Protocols describing the seams between the runtime and handlers."""

from __future__ import annotations

from .handler import HandlerPort, ReplaceAttr
from .sink import SinkPort
from .time import ClockPort

__all__ = ["ClockPort", "HandlerPort", "ReplaceAttr", "SinkPort"]
