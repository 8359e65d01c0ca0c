from __future__ import annotations

import logging

import pytest

from lib_slogger.domain.levels import Level, label_of


def test_levels_are_totally_ordered() -> None:
    assert Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR
    assert sorted([Level.ERROR, Level.DEBUG, Level.WARN, Level.INFO]) == list(Level)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", Level.DEBUG),
        ("INFO", Level.INFO),
        ("Warn", Level.WARN),
        ("warning", Level.WARN),
        (" error ", Level.ERROR),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: Level) -> None:
    assert Level.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        Level.from_name("verbose")


@pytest.mark.parametrize(
    "number, expected",
    [
        (-8, Level.DEBUG),
        (10, Level.DEBUG),
        (15, Level.DEBUG),
        (20, Level.INFO),
        (25, Level.INFO),
        (30, Level.WARN),
        (39, Level.WARN),
        (40, Level.ERROR),
        (50, Level.ERROR),
    ],
)
def test_widen_resolves_nearest_lower_tier(number: int, expected: Level) -> None:
    assert Level.widen(number) is expected


@pytest.mark.parametrize(
    "number, label",
    [
        (Level.DEBUG, "DEBUG"),
        (Level.INFO, "INFO"),
        (Level.WARN, "WARN"),
        (Level.ERROR, "ERROR"),
        (25, "INFO+5"),
        (6, "DEBUG-4"),
        (50, "ERROR+10"),
    ],
)
def test_label_of_renders_native_labels(number: int, label: str) -> None:
    assert label_of(number) == label


@pytest.mark.parametrize(
    "level, expected",
    [
        (Level.DEBUG, logging.DEBUG),
        (Level.INFO, logging.INFO),
        (Level.WARN, logging.WARNING),
        (Level.ERROR, logging.ERROR),
    ],
)
def test_to_python_level_returns_logging_constant(level: Level, expected: int) -> None:
    assert level.to_python_level() == expected
