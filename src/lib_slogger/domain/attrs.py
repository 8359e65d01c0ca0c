"""Key/value attributes attached to log records.

An :class:`Attr` whose value is a tuple of attributes is a *group*; handlers
qualify the keys of its members with the group name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping


@dataclass(slots=True, frozen=True)
class Attr:
    """Single structured attribute."""

    key: str
    value: Any

    @property
    def is_group(self) -> bool:
        return isinstance(self.value, tuple) and all(isinstance(item, Attr) for item in self.value)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` for attributes handlers should skip entirely."""

        if self.is_group:
            return not self.value
        return not self.key and self.value is None


def group(name: str, *attrs: Attr) -> Attr:
    """Return a group attribute nesting ``attrs`` under ``name``."""

    return Attr(name, tuple(attrs))


def collect(attrs: Iterable[Any] = (), fields: Mapping[str, Any] | None = None) -> tuple[Attr, ...]:
    """Normalise positional attributes and keyword fields into a tuple.

    Positional values must already be :class:`Attr` instances; keyword fields
    follow them in insertion order.

    Examples
    --------
    >>> collect([Attr("a", 1)], {"b": 2})
    (Attr(key='a', value=1), Attr(key='b', value=2))
    """
    collected: list[Attr] = []
    for item in attrs:
        if not isinstance(item, Attr):
            raise TypeError(f"expected Attr, got {type(item).__name__}")
        collected.append(item)
    if fields:
        collected.extend(Attr(key, value) for key, value in fields.items())
    return tuple(collected)


__all__ = ["Attr", "collect", "group"]
