"""
Activity source used to answer "what is being worked on right now?".
"""

from __future__ import annotations

import time
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, Signal

from clock_reminder import logger as app_logger


class ActivitySource(Protocol):
    def is_active(self) -> bool: ...

    def current_label(self) -> str: ...

    def elapsed_minutes(self) -> float: ...


class NoActiveClockError(LookupError):
    """Raised when clock details are requested while nothing is clocked in."""


class ClockTracker(QObject):
    """
    In-process clock that records the current task label and its start time.

    Emits clockedIn/clockedOut so the reminder lifecycle can follow along.
    """

    clockedIn = Signal(str)
    clockedOut = Signal()

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__()
        self._logger = app_logger.get_logger()
        self._clock = clock or time.monotonic
        self._label: Optional[str] = None
        self._started_at: Optional[float] = None

    def clock_in(self, label: str) -> None:
        """Start clocking *label*, clocking out of any running task first."""
        label = label.strip()
        if not label:
            raise ValueError("Task label must be a non-empty string.")
        if self.is_active():
            self.clock_out()
        self._label = label
        self._started_at = self._clock()
        self._logger.info("Clocked in: {}", label)
        self.clockedIn.emit(label)

    def clock_out(self) -> None:
        if not self.is_active():
            return
        self._logger.info("Clocked out of {} after {:.1f} minutes", self._label, self.elapsed_minutes())
        self._label = None
        self._started_at = None
        self.clockedOut.emit()

    def is_active(self) -> bool:
        return self._label is not None

    def current_label(self) -> str:
        if self._label is None:
            raise NoActiveClockError("No task is currently clocked in.")
        return self._label

    def elapsed_minutes(self) -> float:
        if self._started_at is None:
            raise NoActiveClockError("No task is currently clocked in.")
        return max(0.0, self._clock() - self._started_at) / 60.0
