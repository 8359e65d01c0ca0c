from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

import lib_slogger
from lib_slogger.runtime import StdlibBridgeHandler, install_bridge, with_output


def test_current_logger_requires_init() -> None:
    assert not lib_slogger.is_initialised()
    with pytest.raises(RuntimeError, match="init"):
        lib_slogger.current_logger()


def test_init_installs_default_once() -> None:
    stream = StringIO()
    logger = lib_slogger.init(with_output(stream), lib_slogger.with_no_color())

    assert lib_slogger.is_initialised()
    assert lib_slogger.current_logger() is logger
    with pytest.raises(RuntimeError, match="already installed"):
        lib_slogger.init()


def test_module_helpers_delegate_to_default() -> None:
    stream = StringIO()
    lib_slogger.init(with_output(stream), lib_slogger.with_format("json"), lib_slogger.with_debug())

    lib_slogger.debug("d")
    lib_slogger.info("i", user="ada")
    lib_slogger.warn("w")
    lib_slogger.error("e")
    lib_slogger.success("s")

    payloads = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert [payload["severity"] for payload in payloads] == ["DEBUG", "INFO", "WARNING", "ERROR", "INFO"]
    assert payloads[1]["user"] == "ada"


def test_shutdown_allows_reinitialisation() -> None:
    lib_slogger.init(with_output(StringIO()))
    lib_slogger.shutdown()
    assert not lib_slogger.is_initialised()
    lib_slogger.init(with_output(StringIO()))
    assert lib_slogger.is_initialised()


def test_capture_stdlib_routes_root_records() -> None:
    stream = StringIO()
    lib_slogger.init(with_output(stream), lib_slogger.with_format("json"), capture_stdlib=True)

    logging.getLogger("payments").info("charged %s", "42", extra={"order": "o-1"})
    logging.getLogger("payments").debug("filtered")

    (payload,) = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert payload["msg"] == "charged 42"
    assert payload["severity"] == "INFO"
    assert payload["logger"] == "payments"
    assert payload["order"] == "o-1"

    lib_slogger.shutdown()
    assert not any(isinstance(handler, StdlibBridgeHandler) for handler in logging.getLogger().handlers)


def test_bridge_maps_critical_to_error_and_keeps_exceptions() -> None:
    stream = StringIO()
    logger = lib_slogger.new_slogger(with_output(stream), lib_slogger.with_no_color())
    target = logging.getLogger("tests.bridge")
    target.propagate = False
    handler = install_bridge(logger, target)
    try:
        try:
            raise ValueError("boom")
        except ValueError:
            target.critical("failed", exc_info=True)
    finally:
        target.removeHandler(handler)
        target.setLevel(logging.NOTSET)
        target.propagate = True

    line = stream.getvalue()
    assert " ERROR failed logger=tests.bridge exc_info=" in line
    assert "ValueError: boom" in line
    assert line.count("\n") == 1


def test_shutdown_restores_root_level() -> None:
    root = logging.getLogger()
    original = root.level
    root.setLevel(logging.ERROR)
    try:
        lib_slogger.init(with_output(StringIO()), lib_slogger.with_debug(), capture_stdlib=True)
        assert root.level == logging.DEBUG

        lib_slogger.shutdown()

        assert root.level == logging.ERROR
    finally:
        root.setLevel(original)


def test_shutdown_restores_notset_root_level() -> None:
    root = logging.getLogger()
    original = root.level
    root.setLevel(logging.NOTSET)
    try:
        lib_slogger.init(with_output(StringIO()), capture_stdlib=True)
        assert root.level == logging.INFO

        lib_slogger.shutdown()

        assert root.level == logging.NOTSET
    finally:
        root.setLevel(original)
