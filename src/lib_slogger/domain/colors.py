"""ANSI colour helpers backed by Rich styles.

``colorize`` brackets text with the "set foreground" escape of the standard
8-colour palette and the reset escape; nothing else is inserted.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from rich.color import ColorSystem
from rich.style import Style


class Color(str, Enum):
    """Foreground colours available to the text handler."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"


@lru_cache(maxsize=64)
def _parse(style: str) -> Style:
    return Style.parse(style)


def colorize(color: Color | str, text: str) -> str:
    """Wrap ``text`` in the ANSI escapes for ``color``.

    ``color`` may be a :class:`Color` or any Rich style name (``"dim"``,
    ``"bold red"``). Empty text is returned unchanged.

    Examples
    --------
    >>> colorize(Color.RED, "error")
    '\\x1b[31merror\\x1b[0m'
    >>> colorize("green", "success")
    '\\x1b[32msuccess\\x1b[0m'
    """
    name = color.value if isinstance(color, Color) else color
    return _parse(name).render(text, color_system=ColorSystem.STANDARD)


__all__ = ["Color", "colorize"]
