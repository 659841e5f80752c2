"""Logging configuration for Pegboard drivers.

The engine modules only create module loggers; the benchmark script and the
Streamlit app call :func:`setup_logging` once at start-up.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime

__all__ = ["DevelopmentFormatter", "setup_logging"]


class DevelopmentFormatter(logging.Formatter):
    """Human-readable formatter with coloured level names."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "") if self.use_color else ""
        reset = self.RESET if color else ""
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        output = f"{timestamp} {color}{record.levelname:8}{reset} {record.name} - {record.getMessage()}"
        if record.exc_info:
            output += "\n" + self.formatException(record.exc_info)
        return output


def setup_logging(level: str = "INFO", use_color: bool | None = None) -> None:
    """Configure the ``pegboard`` logger hierarchy.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        use_color: Force colours on or off; defaults to whether stderr is a tty.
    """

    log_level = getattr(logging, level.upper(), logging.INFO)
    if use_color is None:
        use_color = sys.stderr.isatty()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(DevelopmentFormatter(use_color=use_color))

    package_logger = logging.getLogger("pegboard")
    package_logger.handlers = [handler]
    package_logger.setLevel(log_level)
    package_logger.propagate = False
    package_logger.info("Logging configured: level=%s", level)
