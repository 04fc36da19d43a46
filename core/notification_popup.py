"""
Reminder popup presented in the bottom-right corner of the primary screen.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QPoint, QSize, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPixmap
from PySide6.QtWidgets import (
    QApplication,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QSizePolicy,
    QStyle,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from core.settings import DEFAULT_POPUP_SECONDS

_ICON_SIZE = 48


class NotificationPopup(QWidget):
    clicked = Signal()
    closed = Signal()

    def __init__(self, parent: QWidget | None = None, *, display_seconds: int = DEFAULT_POPUP_SECONDS) -> None:
        flags = Qt.WindowType.Tool | Qt.WindowType.FramelessWindowHint | Qt.WindowType.WindowStaysOnTopHint
        super().__init__(parent)
        self.setWindowFlags(flags)
        self.setObjectName("NotificationPopup")
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)
        self.setWindowOpacity(0.90)

        self._container = QWidget(self)
        self._container.setObjectName("PopupCard")
        shadow = QGraphicsDropShadowEffect(self._container)
        shadow.setBlurRadius(24)
        shadow.setColor(QColor(0, 0, 0, 140))
        shadow.setOffset(0, 10)
        self._container.setGraphicsEffect(shadow)

        self._icon_label = QLabel()
        self._icon_label.setFixedSize(_ICON_SIZE, _ICON_SIZE)
        self._icon_label.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

        icon = self.style().standardIcon(QStyle.StandardPixmap.SP_MessageBoxInformation)
        self._default_pixmap = icon.pixmap(_ICON_SIZE, _ICON_SIZE)
        self._icon_label.setPixmap(self._default_pixmap)

        self._title_label = QLabel()
        self._title_label.setObjectName("NotificationTitle")
        self._title_label.setStyleSheet("font-weight: bold; font-size: 14px;")

        self._message_label = QLabel()
        self._message_label.setWordWrap(True)
        self._message_label.setObjectName("NotificationMessage")
        self._message_label.setMaximumWidth(360)

        self._dismiss_button = QToolButton()
        self._dismiss_button.setAutoRaise(True)
        self._dismiss_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._dismiss_button.setToolTip("Dismiss")
        self._dismiss_button.setIconSize(QSize(16, 16))
        self._dismiss_button.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_TitleBarCloseButton))
        self._dismiss_button.clicked.connect(self.hide)  # type: ignore[arg-type]

        header_layout = QHBoxLayout()
        header_layout.setSpacing(6)
        header_layout.addWidget(self._title_label)
        header_layout.addStretch()
        header_layout.addWidget(self._dismiss_button)

        text_layout = QVBoxLayout()
        text_layout.setSpacing(4)
        text_layout.addLayout(header_layout)
        text_layout.addWidget(self._message_label)

        base_layout = QHBoxLayout(self)
        base_layout.setContentsMargins(0, 0, 0, 0)
        base_layout.addWidget(self._container)

        layout = QHBoxLayout(self._container)
        layout.addWidget(self._icon_label)
        layout.addLayout(text_layout)
        layout.setContentsMargins(12, 10, 12, 12)
        layout.setSpacing(10)
        self.setMinimumWidth(340)
        self.setMaximumWidth(460)

        self.setStyleSheet(
            """
            QWidget#PopupCard {
                background-color: rgba(24, 24, 28, 0.78);
                color: white;
                border-radius: 12px;
                border: 1px solid rgba(255, 255, 255, 0.10);
            }
            QWidget#PopupCard QLabel#NotificationTitle {
                color: white;
            }
            QWidget#PopupCard QLabel#NotificationMessage {
                color: rgba(255, 255, 255, 0.85);
                margin-top: 2px;
            }
            """
        )

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self.hide)  # type: ignore[arg-type]
        self.set_display_seconds(display_seconds)

    def set_display_seconds(self, seconds: int) -> None:
        self._hide_timer.setInterval(max(1, seconds) * 1000)

    def show_message(self, title: str, body: str, icon: Optional[Path] = None) -> None:
        """Populate the popup and display it until dismissed or timed out."""
        self._title_label.setText(title)
        self._message_label.setText(body)
        self._apply_icon(icon)
        self.adjustSize()
        self._position_bottom_right()
        self.show()
        self._hide_timer.start()

    def _apply_icon(self, icon: Optional[Path]) -> None:
        if icon is None:
            self._icon_label.hide()
            return
        self._icon_label.show()
        pixmap = QPixmap(str(icon)) if icon.exists() else QPixmap()
        if pixmap.isNull():
            self._icon_label.setPixmap(self._default_pixmap)
            return
        self._icon_label.setPixmap(
            pixmap.scaled(
                _ICON_SIZE,
                _ICON_SIZE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )

    def _position_bottom_right(self) -> None:
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geometry = screen.availableGeometry()
        x = geometry.right() - self.width() - 20
        y = geometry.bottom() - self.height() - 20
        self.move(QPoint(x, y))

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        super().mousePressEvent(event)
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
            self.hide()

    def hideEvent(self, event) -> None:  # noqa: N802
        self._hide_timer.stop()
        self.closed.emit()
        super().hideEvent(event)
