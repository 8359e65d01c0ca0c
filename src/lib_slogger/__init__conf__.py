"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_slogger"
title = "Colourised text and severity-mapped JSON handlers for structured logging"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_slogger"

_FIELDS = ("name", "title", "version", "author", "shell_command")


def print_info(writer: Callable[[str], object] = print) -> None:
    """Write the metadata banner through ``writer``, one field per line.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_slogger:\\n\\n'
    """
    values = {field: globals()[field] for field in _FIELDS}
    pad = max(len(field) for field in _FIELDS)
    writer(f"Info for {name}:\n\n")
    for field, value in values.items():
        writer(f"    {field:<{pad}} = {value}\n")


__all__ = ["print_info", "version", "shell_command"]
