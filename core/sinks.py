"""
Notification sinks and the ordered chain that invokes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from core.activity import ActivitySource
from core.errors import SinkDeliveryError
from clock_reminder import logger as app_logger

Sink = Callable[[str, str], None]
Deliver = Callable[[str, str, Optional[Path]], None]


class SinkChain:
    """
    Invokes every registered sink in order. A failing sink is logged and
    skipped; later sinks still run.
    """

    def __init__(self, sinks: Iterable[Sink] = ()) -> None:
        self._logger = app_logger.get_logger()
        self._sinks: List[Sink] = list(sinks)

    @property
    def sinks(self) -> List[Sink]:
        return list(self._sinks)

    def register(self, sink: Sink) -> None:
        self._sinks.append(sink)

    def notify(self, title: str, body: str) -> None:
        for sink in self._sinks:
            try:
                sink(title, body)
            except Exception as exc:
                error = SinkDeliveryError(sink, str(exc) or type(exc).__name__)
                self._logger.opt(exception=exc).error("{}", error)


@dataclass(frozen=True)
class NotificationPayload:
    title: str
    body: str
    icon: Optional[Path] = None


@dataclass
class NotificationSink:
    """Default sink handing a title/body/icon payload to the host notifier."""

    deliver: Deliver
    source: ActivitySource
    show_icons: bool = True
    active_icon: Optional[Path] = None
    inactive_icon: Optional[Path] = None

    def build_payload(self, title: str, body: str) -> NotificationPayload:
        return NotificationPayload(title=title, body=body, icon=self._select_icon())

    def _select_icon(self) -> Optional[Path]:
        if not self.show_icons:
            return None
        if self.source.is_active():
            return self.active_icon
        return self.inactive_icon

    def __call__(self, title: str, body: str) -> None:
        payload = self.build_payload(title, body)
        self.deliver(payload.title, payload.body, payload.icon)
