"""Tests for the coloured log setup."""

from __future__ import annotations

import logging

from chatrelay.logging_config import ColoredFormatter, setup_logging


def make_record(level: int) -> logging.LogRecord:
    return logging.LogRecord("chatrelay.api", level, __file__, 1, "relay failed", None, None)


def test_formatter_colours_level_name() -> None:
    formatter = ColoredFormatter("%(levelname)s: %(message)s")

    line = formatter.format(make_record(logging.WARNING))

    assert line == "\033[33mWARNING\033[0m: relay failed"


def test_formatter_leaves_record_untouched() -> None:
    record = make_record(logging.ERROR)

    ColoredFormatter("%(levelname)s").format(record)

    assert record.levelname == "ERROR"


def test_setup_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        logger = setup_logging("debug")

        assert logger.name == "chatrelay"
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ColoredFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
