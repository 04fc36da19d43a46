"""
Reminder configuration and its QSettings-backed loader.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from PySide6.QtCore import QSettings

from core.directives import DEFAULT_EMPTY_TEXT, DEFAULT_MESSAGE_TEMPLATE
from core.formatter import DirectiveSet, Expression, directive_map
from core.sinks import Sink
from clock_reminder import logger as app_logger

_LOGGER = app_logger.get_logger()

ORGANIZATION_NAME = "ClockReminder"
APPLICATION_NAME = "Reminder"
_GROUP = "Reminder"

ASSETS_DIR = Path(__file__).resolve().parent / "Assets"
DEFAULT_ACTIVE_ICON = ASSETS_DIR / "active.svg"
DEFAULT_INACTIVE_ICON = ASSETS_DIR / "inactive.svg"
DEFAULT_INTERVAL_MINUTES = 10.0
DEFAULT_TITLE = "Clock reminder"
DEFAULT_POPUP_SECONDS = 8
_MIN_POPUP_SECONDS = 1
_MAX_POPUP_SECONDS = 120
_MAX_INTERVAL_MINUTES = timedelta.max.days * 24 * 60

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class ReminderConfig:
    """Snapshot read by the scheduler on every tick."""

    interval: timedelta = timedelta(minutes=DEFAULT_INTERVAL_MINUTES)
    remind_on_inactivity: bool = True
    title: str = DEFAULT_TITLE
    message_template: str = DEFAULT_MESSAGE_TEMPLATE
    empty_text: str = DEFAULT_EMPTY_TEXT
    show_icons: bool = True
    active_icon: Optional[Path] = DEFAULT_ACTIVE_ICON
    inactive_icon: Optional[Path] = DEFAULT_INACTIVE_ICON
    directives: Mapping[str, Expression] = field(default_factory=dict)
    sinks: Tuple[Sink, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "directives", MappingProxyType(directive_map(self.directives)))
        object.__setattr__(self, "sinks", tuple(self.sinks))


@dataclass(eq=True)
class ReminderSettings:
    interval_minutes: float = DEFAULT_INTERVAL_MINUTES
    remind_on_inactivity: bool = True
    title: str = DEFAULT_TITLE
    message_template: str = DEFAULT_MESSAGE_TEMPLATE
    empty_text: str = DEFAULT_EMPTY_TEXT
    show_icons: bool = True
    active_icon: Optional[Path] = DEFAULT_ACTIVE_ICON
    inactive_icon: Optional[Path] = DEFAULT_INACTIVE_ICON
    activate_on_startup: bool = True
    popup_seconds: int = DEFAULT_POPUP_SECONDS

    def to_config(self, directives: DirectiveSet = (), sinks: Tuple[Sink, ...] = ()) -> ReminderConfig:
        return ReminderConfig(
            interval=timedelta(minutes=self.interval_minutes),
            remind_on_inactivity=self.remind_on_inactivity,
            title=self.title,
            message_template=self.message_template,
            empty_text=self.empty_text,
            show_icons=self.show_icons,
            active_icon=self.active_icon,
            inactive_icon=self.inactive_icon,
            directives=directive_map(directives),
            sinks=tuple(sinks),
        )


class ReminderSettingsManager:
    """Loads persisted settings, falling back to defaults on malformed values."""

    def __init__(self, settings: Optional[Any] = None) -> None:
        self._settings = settings if settings is not None else QSettings(ORGANIZATION_NAME, APPLICATION_NAME)

    def read_settings(self) -> ReminderSettings:
        defaults = ReminderSettings()
        return ReminderSettings(
            interval_minutes=self._read_interval("IntervalMinutes", defaults.interval_minutes),
            remind_on_inactivity=self._read_bool("RemindOnInactivity", defaults.remind_on_inactivity),
            title=self._read_str("Title", defaults.title),
            message_template=self._read_str("MessageTemplate", defaults.message_template),
            empty_text=self._read_str("EmptyText", defaults.empty_text),
            show_icons=self._read_bool("ShowIcons", defaults.show_icons),
            active_icon=self._read_path("ActiveIcon", defaults.active_icon),
            inactive_icon=self._read_path("InactiveIcon", defaults.inactive_icon),
            activate_on_startup=self._read_bool("ActivateOnStartup", defaults.activate_on_startup),
            popup_seconds=self._read_popup_seconds(),
        )

    def _read_raw(self, name: str) -> Any:
        key = f"{_GROUP}/{name}"
        if not self._settings.contains(key):
            return None
        return self._settings.value(key)

    def _read_bool(self, name: str, default: bool) -> bool:
        raw = self._read_raw(name)
        if raw is None:
            return default
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, int):
            return bool(raw)
        if isinstance(raw, str):
            lowered = raw.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        _LOGGER.warning("Setting {} has unexpected value {!r}; using default.", name, raw)
        return default

    def _read_str(self, name: str, default: str) -> str:
        raw = self._read_raw(name)
        if raw is None:
            return default
        if not isinstance(raw, str):
            _LOGGER.warning("Setting {} has unexpected type {}; using default.", name, type(raw).__name__)
            return default
        return raw

    def _read_path(self, name: str, default: Optional[Path]) -> Optional[Path]:
        raw = self._read_raw(name)
        if raw is None:
            return default
        if not isinstance(raw, str) or not raw.strip():
            _LOGGER.warning("Setting {} is not a usable path; using default.", name)
            return default
        return Path(raw.strip()).expanduser()

    def _read_number(self, name: str) -> Optional[float]:
        raw = self._read_raw(name)
        if raw is None or isinstance(raw, bool):
            return None
        try:
            value = float(raw)
        except (TypeError, ValueError):
            _LOGGER.warning("Setting {} has non-numeric value {!r}; using default.", name, raw)
            return None
        if not math.isfinite(value):
            _LOGGER.warning("Setting {} has non-finite value {!r}; using default.", name, raw)
            return None
        return value

    def _read_interval(self, name: str, default: float) -> float:
        # Non-positive intervals are passed through and rejected at activation.
        value = self._read_number(name)
        if value is None:
            return default
        if abs(value) > _MAX_INTERVAL_MINUTES:
            _LOGGER.warning("Setting {} is out of range ({}); using default.", name, value)
            return default
        return value

    def _read_popup_seconds(self) -> int:
        value = self._read_number("PopupSeconds")
        if value is None:
            return DEFAULT_POPUP_SECONDS
        seconds = int(value)
        if seconds < _MIN_POPUP_SECONDS or seconds > _MAX_POPUP_SECONDS:
            _LOGGER.warning(
                "Invalid popup duration {} found in settings. Clamping to safe bounds.",
                seconds,
            )
        return max(_MIN_POPUP_SECONDS, min(_MAX_POPUP_SECONDS, seconds))
