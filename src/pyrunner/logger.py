"""Logging setup for pyrunner."""

from __future__ import annotations

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    COLORS = {
        "DEBUG": "\033[90m",     # grey
        "INFO": "\033[36m",      # cyan
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("pyrunner.", "")
        msg = record.getMessage()
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"
        return f"{color}{ts} [{record.levelname[0]}] {name}: {msg}{self.RESET}"


def setup_logging(level: str = "info") -> None:
    """Configure the pyrunner root logger."""
    root = logging.getLogger("pyrunner")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the pyrunner namespace."""
    return logging.getLogger(f"pyrunner.{name}")
