from __future__ import annotations

import json
from io import StringIO

import pytest

from lib_slogger import Format, JSONHandler, Level, TextHandler, new_slogger, with_debug, with_format
from lib_slogger.runtime import build_config, with_level, with_no_color, with_output, with_styles


@pytest.mark.parametrize(
    "options, want_level, want_type",
    [
        ((), Level.INFO, TextHandler),
        ((with_debug(),), Level.DEBUG, TextHandler),
        ((with_format(Format.JSON),), Level.INFO, JSONHandler),
        ((with_format("text"),), Level.INFO, TextHandler),
    ],
)
def test_new_slogger_selects_level_and_handler(options, want_level: Level, want_type: type) -> None:
    handler = new_slogger(*options).handler

    assert handler.enabled(want_level)
    assert type(handler) is want_type


def test_default_logger_disables_debug_only() -> None:
    logger = new_slogger()
    assert [logger.enabled(level) for level in Level] == [False, True, True, True]


def test_debug_option_enables_every_level() -> None:
    logger = new_slogger(with_debug())
    assert all(logger.enabled(level) for level in Level)


def test_json_format_installs_severity_hook() -> None:
    stream = StringIO()
    new_slogger(with_format(Format.JSON), with_output(stream)).warn("careful", code=7)
    payload = json.loads(stream.getvalue())
    assert payload["severity"] == "WARNING"
    assert payload["code"] == 7
    assert "level" not in payload


def test_environment_overrides_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLOG_DEBUG", "yes")
    monkeypatch.setenv("SLOG_FORMAT", "JSON")
    config = build_config()
    assert config.level == Level.DEBUG
    assert config.format is Format.JSON


def test_explicit_options_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLOG_FORMAT", "json")
    monkeypatch.setenv("SLOG_LEVEL", "error")
    config = build_config(with_format(Format.TEXT), with_level("warning"))
    assert config.format is Format.TEXT
    assert config.level == Level.WARN


def test_no_color_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLOG_NO_COLOR", "1")
    stream = StringIO()
    new_slogger(with_output(stream)).error("plain")
    assert "\x1b[" not in stream.getvalue()


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log format"):
        with_format("xml")


def test_style_options_accumulate() -> None:
    config = build_config(with_styles({"info": "cyan"}), with_styles({Level.ERROR: "bold red"}), with_no_color())
    assert config.styles == {"info": "cyan", Level.ERROR: "bold red"}
    assert config.no_color is True
