"""
Application coordinator wiring the clock tracker, reminder scheduler and tray UI.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from PySide6.QtCore import QObject, QTimer
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QApplication, QInputDialog, QMenu, QStyle, QSystemTrayIcon

from core.activity import ClockTracker
from core.directives import default_directives
from core.errors import ConfigurationError
from core.lifecycle import LifecycleState
from core.notification_popup import NotificationPopup
from core.scheduler import ReminderScheduler
from core.settings import ReminderConfig, ReminderSettings, ReminderSettingsManager
from core.sinks import NotificationSink
from clock_reminder import logger as app_logger

APP_NAME = "Clock Reminder"
APP_VERSION = "1.0.0"
SETTINGS_REFRESH_INTERVAL_MS = 15000

_STATE_LABELS = {
    LifecycleState.DORMANT: "reminders off",
    LifecycleState.CLOCKED_OUT: "nothing clocked in",
    LifecycleState.CLOCKED_IN: "clocked in",
}


@dataclass
class ReminderCoordinator(QObject):
    tracker: ClockTracker = field(default_factory=ClockTracker)
    settings_manager: ReminderSettingsManager = field(default_factory=ReminderSettingsManager)

    def __post_init__(self) -> None:
        super().__init__()
        self._logger = app_logger.get_logger()
        self._manual_shutdown_requested = False

        self._settings = self.settings_manager.read_settings()
        self._popup = NotificationPopup(display_seconds=self._settings.popup_seconds)
        self._scheduler = ReminderScheduler(self._build_config(self._settings), self.tracker)
        self._scheduler.bind_activity_signals(self.tracker)
        self._scheduler.lifecycle.stateChanged.connect(self._on_status_changed)
        self.tracker.clockedIn.connect(self._on_status_changed)
        self.tracker.clockedOut.connect(self._on_status_changed)

        self._tray = QSystemTrayIcon(self)
        tray_icon = QApplication.style().standardIcon(QStyle.StandardPixmap.SP_ComputerIcon)
        self._tray.setIcon(tray_icon)

        menu = QMenu()
        self._start_action = QAction("Start reminders", menu)
        self._stop_action = QAction("Stop reminders", menu)
        self._clock_in_action = QAction("Clock in...", menu)
        self._clock_out_action = QAction("Clock out", menu)
        exit_action = QAction("Exit", menu)
        menu.addAction(self._start_action)
        menu.addAction(self._stop_action)
        menu.addSeparator()
        menu.addAction(self._clock_in_action)
        menu.addAction(self._clock_out_action)
        menu.addSeparator()
        menu.addAction(exit_action)
        self._tray.setContextMenu(menu)
        self._menu = menu

        self._start_action.triggered.connect(self.activate)
        self._stop_action.triggered.connect(self.deactivate)
        self._clock_in_action.triggered.connect(self._prompt_clock_in)
        self._clock_out_action.triggered.connect(self.tracker.clock_out)
        exit_action.triggered.connect(self.shutdown)

        self._settings_timer = QTimer(self)
        self._settings_timer.setInterval(SETTINGS_REFRESH_INTERVAL_MS)
        self._settings_timer.timeout.connect(self._reload_settings)

    def start(self) -> None:
        self._logger.info("Starting {} v{}", APP_NAME, APP_VERSION)
        self._tray.show()
        if self._settings.activate_on_startup:
            self.activate()
        self._refresh_tray()
        self._settings_timer.start()

    def shutdown(self) -> None:
        self._logger.info("Shutting down application on user request.")
        self._manual_shutdown_requested = True
        self._settings_timer.stop()
        self._scheduler.deactivate()
        self._popup.hide()
        self._tray.hide()
        QApplication.instance().quit()

    @property
    def manual_shutdown_requested(self) -> bool:
        return self._manual_shutdown_requested

    def activate(self) -> None:
        try:
            self._scheduler.activate()
        except ConfigurationError as exc:
            self._logger.error("Cannot start reminders: {}", exc)
            self._tray.showMessage(APP_NAME, str(exc), QSystemTrayIcon.MessageIcon.Warning)

    def deactivate(self) -> None:
        self._scheduler.deactivate()

    def _build_config(self, settings: ReminderSettings) -> ReminderConfig:
        sink = NotificationSink(
            deliver=self._popup.show_message,
            source=self.tracker,
            show_icons=settings.show_icons,
            active_icon=settings.active_icon,
            inactive_icon=settings.inactive_icon,
        )
        return settings.to_config(directives=default_directives(self.tracker), sinks=(sink,))

    def _reload_settings(self) -> None:
        new_settings = self.settings_manager.read_settings()
        if new_settings == self._settings:
            return
        self._logger.info("Detected settings change. Applying updates.")
        self._settings = new_settings
        self._popup.set_display_seconds(new_settings.popup_seconds)
        self._scheduler.config = self._build_config(new_settings)

    def _prompt_clock_in(self) -> None:
        label, accepted = QInputDialog.getText(None, APP_NAME, "What are you working on?")
        if not accepted or not label.strip():
            return
        self.tracker.clock_in(label)

    def _on_status_changed(self, *_args) -> None:
        self._refresh_tray()

    def _refresh_tray(self) -> None:
        state = self._scheduler.state
        running = state is not LifecycleState.DORMANT
        clocked_in = self.tracker.is_active()
        self._start_action.setEnabled(not running)
        self._stop_action.setEnabled(running)
        self._clock_out_action.setEnabled(clocked_in)
        tooltip = f"{APP_NAME} v{APP_VERSION} ({_STATE_LABELS[state]})"
        if clocked_in:
            tooltip += f": {self.tracker.current_label()}"
        self._tray.setToolTip(tooltip)
