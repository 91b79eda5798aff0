"""Transient notice shown at the bottom of a window."""

from __future__ import annotations

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel, QWidget

from voxmind.constants.ui_constants import NOTICE_DURATION_MS
from voxmind.styling.styles import Styles


class NoticeLabel(QLabel):
    """Short-lived message; a new notice replaces the visible one and restarts the timer."""

    def __init__(self, parent: QWidget | None = None, duration_ms: int = NOTICE_DURATION_MS) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet(Styles.get_notice_style())
        self.setVisible(False)

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.setInterval(duration_ms)
        self._hide_timer.timeout.connect(self.dismiss)

    def show_notice(self, message: str) -> None:
        self.setText(message)
        self.setVisible(True)
        self._hide_timer.start()

    def dismiss(self) -> None:
        self._hide_timer.stop()
        self.setVisible(False)
        self.clear()
