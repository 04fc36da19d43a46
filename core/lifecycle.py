"""
Lifecycle bookkeeping for the reminder subsystem.

DORMANT      no timer running, nothing tracked
CLOCKED_OUT  timer running, no task clocked in
CLOCKED_IN   timer running, a task is clocked in
"""

from __future__ import annotations

from enum import Enum

from PySide6.QtCore import QObject, Signal

from core.errors import StateTransitionError
from clock_reminder import logger as app_logger


class LifecycleState(Enum):
    DORMANT = "Dormant"
    CLOCKED_OUT = "ClockedOut"
    CLOCKED_IN = "ClockedIn"


_TRANSITIONS = {
    (LifecycleState.DORMANT, LifecycleState.CLOCKED_OUT),
    (LifecycleState.CLOCKED_OUT, LifecycleState.CLOCKED_IN),
    (LifecycleState.CLOCKED_IN, LifecycleState.CLOCKED_OUT),
    (LifecycleState.CLOCKED_OUT, LifecycleState.DORMANT),
    (LifecycleState.CLOCKED_IN, LifecycleState.DORMANT),
}


class ReminderLifecycle(QObject):
    """Tracks the reminder state and notifies observers of every change."""

    stateChanged = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self._logger = app_logger.get_logger()
        self._state = LifecycleState.DORMANT

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def is_dormant(self) -> bool:
        return self._state is LifecycleState.DORMANT

    def activate(self) -> None:
        if not self.is_dormant:
            return
        self._request(LifecycleState.CLOCKED_OUT)

    def deactivate(self) -> None:
        if self.is_dormant:
            return
        self._request(LifecycleState.DORMANT)

    def on_activity_started(self, *_args) -> None:
        if self.is_dormant:
            self._logger.debug("Ignoring clock-in while reminders are dormant.")
            return
        self._request(LifecycleState.CLOCKED_IN)

    def on_activity_stopped(self, *_args) -> None:
        if self.is_dormant:
            self._logger.debug("Ignoring clock-out while reminders are dormant.")
            return
        self._request(LifecycleState.CLOCKED_OUT)

    def _request(self, target: LifecycleState) -> None:
        try:
            self._advance(target)
        except StateTransitionError as exc:
            self._logger.warning("Lifecycle contract violation ignored: {}", exc)

    def _advance(self, target: LifecycleState) -> None:
        if (self._state, target) not in _TRANSITIONS:
            raise StateTransitionError(self._state.value, target.value)
        previous = self._state
        self._state = target
        self._logger.debug("Lifecycle {} -> {}", previous.value, target.value)
        self.stateChanged.emit(target)
