#!/usr/bin/env python3
"""
Tests for sweep-dir logging setup
"""

import io
import logging

from sweepdir.logger import (
    ColoredFormatter,
    StderrHandler,
    get_logger,
    set_debug_mode,
    setup_logger,
)


def make_record(level=logging.INFO, msg="hello"):
    return logging.LogRecord("sweepdir.test", level, __file__, 1, msg, None, None)


def test_colored_formatter_plain_when_disabled():
    formatter = ColoredFormatter("%(levelname)s - %(message)s", use_colors=False)

    assert formatter.format(make_record()) == "INFO - hello"


def test_colored_formatter_wraps_level_name():
    formatter = ColoredFormatter("%(levelname)s - %(message)s", use_colors=True)

    line = formatter.format(make_record(logging.ERROR))

    assert line == "\033[31mERROR\033[0m - hello"


def test_setup_logger_with_explicit_stream_and_level():
    stream = io.StringIO()
    logger = setup_logger("sweepdir_test_stream", level="info", stream=stream)

    logger.info("scan started")
    logger.debug("not shown")

    output = stream.getvalue()
    assert "scan started" in output
    assert "not shown" not in output
    assert setup_logger("sweepdir_test_stream") is logger
    assert len(logger.handlers) == 1


def test_level_comes_from_environment(monkeypatch):
    monkeypatch.setenv("SWEEPDIR_LOG_LEVEL", "error")

    logger = setup_logger("sweepdir_test_env", stream=io.StringIO())

    assert logger.level == logging.ERROR


def test_stderr_handler_follows_current_stderr(monkeypatch):
    handler = StderrHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    replacement = io.StringIO()
    monkeypatch.setattr("sys.stderr", replacement)

    handler.handle(make_record(msg="to the new stderr"))

    assert replacement.getvalue() == "to the new stderr\n"


def test_stderr_handler_set_stream_pins_the_stream(monkeypatch):
    handler = StderrHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    pinned = io.StringIO()
    handler.setStream(pinned)
    other = io.StringIO()
    monkeypatch.setattr("sys.stderr", other)

    handler.handle(make_record(msg="kept"))

    assert pinned.getvalue() == "kept\n"
    assert other.getvalue() == ""


def test_set_debug_mode_toggles_package_logger(monkeypatch):
    monkeypatch.delenv("SWEEPDIR_LOG_LEVEL", raising=False)
    child = get_logger("sweepdir.scanner")
    package = logging.getLogger("sweepdir")

    set_debug_mode(True)
    assert package.level == logging.DEBUG
    assert child.isEnabledFor(logging.DEBUG)

    set_debug_mode(False)
    assert package.level == logging.WARNING
    assert not child.isEnabledFor(logging.INFO)
