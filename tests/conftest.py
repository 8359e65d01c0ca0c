from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO
from typing import Any, Callable

import pytest

import lib_slogger
from lib_slogger.domain import Attr, Level, LogRecord

FIXED_TS = datetime(2025, 9, 30, 12, 0, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SLOG_DEBUG", "SLOG_LEVEL", "SLOG_FORMAT", "SLOG_NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_default_logger() -> None:
    lib_slogger.shutdown()
    yield
    lib_slogger.shutdown()


@pytest.fixture
def stream() -> StringIO:
    return StringIO()


class FixedClock:
    def __init__(self, ts: datetime = FIXED_TS) -> None:
        self.ts = ts

    def now(self) -> datetime:
        return self.ts


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def record_factory() -> Callable[..., LogRecord]:
    def _factory(
        message: str = "hello",
        level: int = Level.INFO,
        attrs: tuple[Attr, ...] = (),
        **overrides: Any,
    ) -> LogRecord:
        return LogRecord(timestamp=overrides.pop("timestamp", FIXED_TS), level=level, message=message, attrs=attrs, **overrides)

    return _factory
