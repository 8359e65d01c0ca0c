"""Concrete handlers and the level translator."""

from __future__ import annotations

from .json_handler import JSONHandler
from .severity import SEVERITY_TABLE, marshal_level, severity_of
from .text_handler import TextHandler

__all__ = [
    "JSONHandler",
    "SEVERITY_TABLE",
    "TextHandler",
    "marshal_level",
    "severity_of",
]
