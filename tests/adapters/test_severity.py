from __future__ import annotations

import pytest

from lib_slogger.adapters.severity import SEVERITY_TABLE, marshal_level, severity_of
from lib_slogger.domain import Attr, Level


@pytest.mark.parametrize(
    "level, expected",
    [
        (Level.DEBUG, "DEBUG"),
        (Level.INFO, "INFO"),
        (Level.WARN, "WARNING"),
        (Level.ERROR, "ERROR"),
    ],
)
def test_marshal_level_renames_key_and_maps_value(level: Level, expected: str) -> None:
    result = marshal_level()(None, Attr("level", level))

    assert result.key == "severity"
    assert result.value == expected


def test_severity_table_is_total_over_levels() -> None:
    assert set(SEVERITY_TABLE) == set(Level)


@pytest.mark.parametrize("groups", [None, (), ("http",), ("a", "b")])
def test_marshal_level_ignores_groups(groups) -> None:
    assert marshal_level()(groups, Attr("level", Level.ERROR)) == Attr("severity", "ERROR")


@pytest.mark.parametrize(
    "value, expected",
    [
        (25, "INFO"),
        (35, "WARNING"),
        (5, "DEBUG"),
        (50, "ERROR"),
        ("warning", "WARNING"),
        ("custom", "custom"),
        (3.5, "3.5"),
        (None, "None"),
    ],
)
def test_marshal_level_never_fails_on_unusual_values(value: object, expected: str) -> None:
    assert marshal_level()((), Attr("level", value)) == Attr("severity", expected)


def test_marshal_level_passes_other_attrs_unchanged() -> None:
    attr = Attr("msg", "hello")
    assert marshal_level()((), attr) is attr


def test_marshal_level_delegates_other_attrs_to_chain() -> None:
    seen: list[tuple[tuple[str, ...], Attr]] = []

    def _chain(groups, attr):
        seen.append((tuple(groups), attr))
        return Attr(attr.key.upper(), attr.value)

    hook = marshal_level(_chain)

    assert hook(("g",), Attr("user", "ada")) == Attr("USER", "ada")
    assert hook((), Attr("level", Level.INFO)) == Attr("severity", "INFO")
    assert seen == [(("g",), Attr("user", "ada"))]


def test_severity_of_booleans_are_not_levels() -> None:
    assert severity_of(True) == "True"
