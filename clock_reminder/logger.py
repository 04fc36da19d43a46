"""
loguru setup shared by the tray app, the scheduler and the clock tracker.

Reminder ticks log at DEBUG, so the file sink keeps the full history while
the console only shows activation changes and failures unless
CLOCK_REMINDER_LOG_LEVEL asks for more.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
LOG_DIR_ENV = "CLOCK_REMINDER_LOG_DIR"
LOG_LEVEL_ENV = "CLOCK_REMINDER_LOG_LEVEL"
DEFAULT_LOG_DIR = Path.home() / ".local" / "state" / "clock-reminder"
DEFAULT_CONSOLE_LEVEL = "INFO"
LOG_FILE_NAME = "reminder.log"


def default_log_path() -> Path:
    """Resolve the reminder log file, honouring CLOCK_REMINDER_LOG_DIR."""
    override = os.environ.get(LOG_DIR_ENV)
    base = Path(override) if override else DEFAULT_LOG_DIR
    return base / LOG_FILE_NAME


def console_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_CONSOLE_LEVEL


def configure(log_path: Optional[Path] = None) -> None:
    """Install the console and reminder.log sinks on first call only."""
    global _LOG_INITIALISED
    if _LOG_INITIALISED:
        return
    target = log_path or default_log_path()
    target.parent.mkdir(parents=True, exist_ok=True)

    _logger.remove()
    # pythonw and frozen tray builds run without a stderr.
    if sys.stderr is not None:
        _logger.add(sys.stderr, level=console_level(), enqueue=True)
    _logger.add(
        target,
        level="DEBUG",
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )
    _LOG_INITIALISED = True


def get_logger():
    configure()
    return _logger
