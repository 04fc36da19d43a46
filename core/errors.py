"""
Error types raised by the reminder runtime.
"""

from __future__ import annotations

from typing import Any


class ReminderError(Exception):
    """Base class for reminder runtime failures."""


class ConfigurationError(ReminderError, ValueError):
    """Raised when a reminder configuration cannot be activated."""


class DirectiveEvaluationError(ReminderError):
    """Raised when a format directive's expression fails during rendering."""

    def __init__(self, char: str, message: str) -> None:
        super().__init__(f"Directive %{char} failed: {message}")
        self.char = char


class SinkDeliveryError(ReminderError):
    """Wraps a failure raised by a single notification sink."""

    def __init__(self, sink: Any, message: str) -> None:
        super().__init__(f"Sink {_describe(sink)} failed: {message}")
        self.sink = sink


class StateTransitionError(ReminderError):
    """Raised for a lifecycle transition outside the allowed table."""

    def __init__(self, current: Any, requested: Any) -> None:
        super().__init__(f"Invalid lifecycle transition {current} -> {requested}")
        self.current = current
        self.requested = requested


def _describe(sink: Any) -> str:
    return getattr(sink, "__qualname__", None) or type(sink).__name__
