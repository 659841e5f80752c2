"""Tests for the driver logging setup."""

from __future__ import annotations

import logging

from ...logging_config import DevelopmentFormatter, setup_logging


def test_formatter_without_colour() -> None:
    record = logging.LogRecord("pegboard.engine.game", logging.DEBUG, __file__, 1, "Transitioning to %s", ("PEGGING",), None)
    line = DevelopmentFormatter(use_color=False).format(record)
    assert "DEBUG" in line
    assert "pegboard.engine.game - Transitioning to PEGGING" in line
    assert "\033[" not in line


def test_setup_logging_configures_package_logger() -> None:
    setup_logging("debug", use_color=False)
    logger = logging.getLogger("pegboard")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, DevelopmentFormatter)
    setup_logging("WARNING", use_color=False)
    assert logger.level == logging.WARNING
