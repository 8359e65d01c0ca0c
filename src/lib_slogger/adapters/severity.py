"""Level-to-severity translation for machine-readable output.

Purpose
-------
Rename the native ``level`` attribute to ``severity`` and re-value it with the
vocabulary log-ingestion pipelines expect (``DEBUG``, ``INFO``, ``WARNING``,
``ERROR``).

Contents
--------
* :data:`SEVERITY_TABLE` - fixed level-to-string mapping.
* :func:`severity_of` - resolve any level value to its severity string.
* :func:`marshal_level` - build the ``(groups, attr) -> Attr`` rewrite hook
  installed into :class:`~lib_slogger.adapters.json_handler.JSONHandler`.

System Role
-----------
Leaf component; the text handler reuses :func:`severity_of` so both encodings
name levels identically.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Sequence

from lib_slogger.application.ports.handler import ReplaceAttr
from lib_slogger.domain.attrs import Attr
from lib_slogger.domain.levels import Level

LEVEL_KEY = "level"
SEVERITY_KEY = "severity"

SEVERITY_TABLE: Mapping[Level, str] = MappingProxyType(
    {
        Level.DEBUG: "DEBUG",
        Level.INFO: "INFO",
        Level.WARN: "WARNING",
        Level.ERROR: "ERROR",
    }
)
#: Severity strings keyed by :class:`Level`; total over the four tiers.


def severity_of(level: Any) -> str:
    """Return the severity string for ``level``.

    Integers between tiers resolve to the nearest named tier at or below them.
    Values that are neither levels nor level names are stringified.

    Examples
    --------
    >>> severity_of(Level.WARN)
    'WARNING'
    >>> severity_of(35)
    'WARNING'
    >>> severity_of("error")
    'ERROR'
    >>> severity_of("verbose")
    'verbose'
    """
    if isinstance(level, str):
        try:
            level = Level.from_name(level)
        except ValueError:
            return level
    if isinstance(level, bool) or not isinstance(level, int):
        return str(level)
    return SEVERITY_TABLE[Level.widen(level)]


def marshal_level(chain: ReplaceAttr | None = None) -> ReplaceAttr:
    """Return a rewrite hook translating the ``level`` attribute.

    Parameters
    ----------
    chain:
        Optional downstream hook receiving every attribute this hook does not
        rewrite.

    Examples
    --------
    >>> hook = marshal_level()
    >>> hook((), Attr("level", Level.WARN))
    Attr(key='severity', value='WARNING')
    >>> hook(("http",), Attr("path", "/"))
    Attr(key='path', value='/')
    """

    def _replace(groups: Sequence[str], attr: Attr) -> Attr:
        if attr.key == LEVEL_KEY:
            return Attr(SEVERITY_KEY, severity_of(attr.value))
        if chain is not None:
            return chain(groups, attr)
        return attr

    return _replace


__all__ = ["LEVEL_KEY", "SEVERITY_KEY", "SEVERITY_TABLE", "marshal_level", "severity_of"]
