# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import io
import logging
from datetime import datetime

from rich.console import Console

from batchelor_lib.core.logger import CFG, SingleLineRichHandler, get_logger


def test_logger_debug_mode(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.debug_mode, "1")
    logger = get_logger("test_debug")

    assert logger.level == logging.DEBUG


def test_logger_non_debug_mode(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    logger = get_logger("test_info")

    assert logger.level == logging.INFO


def test_logger_does_not_duplicate_handlers():
    logging.getLogger("test_handlers").handlers.clear()
    logger = get_logger("test_handlers")
    logger = get_logger("test_handlers")

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def _make_stringio_logger(monkeypatch, name, *, show_time=False):
    """Return a logger writing into a StringIO buffer."""
    buf = io.StringIO()

    monkeypatch.setitem(
        get_logger.__globals__,
        "Console",
        lambda **kwargs: Console(file=buf, force_terminal=False, **kwargs),
    )

    logging.getLogger(name).handlers.clear()
    logger = get_logger(name, show_time=show_time)
    return logger, buf


def test_logger_outputs_time_in_debug_mode(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.debug_mode, "1")
    logger, buf = _make_stringio_logger(monkeypatch, "test_time_debug")
    logger.info("hello")

    # ignore seconds
    timestamp = datetime.now().strftime(CFG.date_formats.standard)[:-3]
    assert timestamp in buf.getvalue()


def test_logger_does_not_output_time_by_default(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    logger, buf = _make_stringio_logger(monkeypatch, "test_time_default")
    logger.info("hello")
    output = buf.getvalue()

    timestamp = datetime.now().strftime(CFG.date_formats.standard)[:-3]
    assert "hello" in output
    assert timestamp not in output


def test_logger_long_message_stays_on_one_line(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    monkeypatch.setenv("COLUMNS", "40")
    logger, buf = _make_stringio_logger(monkeypatch, "test_single_line")

    message = "false failed for '" + "x" * 120 + "/batch-0001.batch.sh': "
    logger.error(message)

    lines = buf.getvalue().splitlines()
    assert len(lines) == 1
    assert "ERROR" in lines[0]
    assert message.rstrip() in lines[0]


def test_logger_long_message_with_time_stays_on_one_line(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.debug_mode, "1")
    monkeypatch.setenv("COLUMNS", "40")
    logger, buf = _make_stringio_logger(monkeypatch, "test_single_line_time")

    logger.info("y" * 100)

    lines = buf.getvalue().splitlines()
    assert len(lines) == 1
    assert "y" * 100 in lines[0]
    assert datetime.now().strftime(CFG.date_formats.standard)[:-3] in lines[0]


def test_logger_handler_is_single_line():
    logging.getLogger("test_handler_type").handlers.clear()
    logger = get_logger("test_handler_type")

    assert isinstance(logger.handlers[0], SingleLineRichHandler)
