"""
Recurring reminder scheduler driven by a single QTimer.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from PySide6.QtCore import QObject, QTimer

from core.activity import ActivitySource
from core.errors import ConfigurationError, DirectiveEvaluationError
from core.formatter import render
from core.lifecycle import LifecycleState, ReminderLifecycle
from core.settings import ReminderConfig
from core.sinks import SinkChain
from clock_reminder import logger as app_logger

# QTimer stores its interval as a signed 32-bit millisecond count.
MAX_INTERVAL_MS = 2**31 - 1


class ReminderScheduler(QObject):
    """
    Owns at most one recurring timer. Each tick checks the activity source and,
    when appropriate, renders a reminder and pushes it through the sink chain.

    The lifecycle only follows clock changes reported through
    bind_activity_signals(). A source without clockedIn/clockedOut signals
    must call lifecycle.on_activity_started()/on_activity_stopped() itself.
    """

    def __init__(
        self,
        config: ReminderConfig,
        source: ActivitySource,
        lifecycle: Optional[ReminderLifecycle] = None,
    ) -> None:
        super().__init__()
        self._logger = app_logger.get_logger()
        self._config = config
        self._source = source
        self._lifecycle = lifecycle or ReminderLifecycle()
        self._timer: Optional[QTimer] = None
        self._timer_interval: Optional[timedelta] = None

    @property
    def config(self) -> ReminderConfig:
        return self._config

    @config.setter
    def config(self, value: ReminderConfig) -> None:
        self._config = value
        if self._timer is not None and value.interval != self._timer_interval:
            self._logger.info(
                "Reminder interval changed to {}; it takes effect after reactivation.",
                value.interval,
            )

    @property
    def lifecycle(self) -> ReminderLifecycle:
        return self._lifecycle

    @property
    def state(self) -> LifecycleState:
        return self._lifecycle.state

    @property
    def is_active(self) -> bool:
        return self._timer is not None

    def bind_activity_signals(self, tracker: QObject) -> None:
        """Follow any source exposing clockedIn/clockedOut Qt signals."""
        tracker.clockedIn.connect(self._lifecycle.on_activity_started)
        tracker.clockedOut.connect(self._lifecycle.on_activity_stopped)

    def activate(self) -> None:
        """Start the reminder timer. Does nothing if already running."""
        if self._timer is not None:
            return

        interval = self._config.interval
        interval_ms = int(interval.total_seconds() * 1000)
        if interval_ms <= 0:
            raise ConfigurationError(f"Reminder interval must be positive, got {interval}.")
        if interval_ms > MAX_INTERVAL_MS:
            raise ConfigurationError(
                f"Reminder interval {interval} exceeds the maximum of {timedelta(milliseconds=MAX_INTERVAL_MS)}."
            )

        timer = QTimer(self)
        timer.setInterval(interval_ms)
        timer.timeout.connect(self._on_tick)  # type: ignore[arg-type]
        timer.start()
        self._timer = timer
        self._timer_interval = interval
        self._logger.info("Reminders activated; every {}.", interval)

        self._lifecycle.activate()
        if self._source.is_active():
            self._lifecycle.on_activity_started()

    def deactivate(self) -> None:
        """Stop the reminder timer. Does nothing if not running."""
        if self._timer is None:
            return
        timer = self._timer
        self._timer = None
        self._timer_interval = None
        timer.stop()
        timer.deleteLater()
        self._lifecycle.deactivate()
        self._logger.info("Reminders deactivated.")

    def _on_tick(self) -> None:
        try:
            self._remind()
        except Exception:
            self._logger.exception("Reminder tick failed; the timer keeps running.")

    def _remind(self) -> None:
        config = self._config
        active = self._source.is_active()
        if not active and not config.remind_on_inactivity:
            self._logger.debug("Nothing clocked in and inactivity reminders are off; skipping tick.")
            return

        template = config.message_template if active else config.empty_text
        try:
            body = render(template, config.directives)
        except DirectiveEvaluationError as exc:
            self._logger.error("Skipping reminder; could not render message: {}", exc)
            return

        self._logger.debug("Sending reminder: {}", body)
        SinkChain(config.sinks).notify(config.title, body)
