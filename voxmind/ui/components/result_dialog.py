"""Modal dialog summarising a finished quiz."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QLabel, QProgressBar, QPushButton, QVBoxLayout, QWidget

from voxmind.constants.ui_constants import (
    BUTTON_FINISH,
    RESULT_DIALOG_TITLE,
    RESULT_FAILED_TITLE,
    RESULT_PASSED_TITLE,
    RESULT_SUBTITLE_TEMPLATE,
)
from voxmind.core.models import QuizResult
from voxmind.styling.styles import Styles


def result_title(result: QuizResult) -> str:
    return RESULT_PASSED_TITLE if result.passed else RESULT_FAILED_TITLE


def result_subtitle(result: QuizResult) -> str:
    return RESULT_SUBTITLE_TEMPLATE.format(score=result.score, total=result.total)


class ResultDialog(QDialog):
    """Shows percentage, pass/fail title and raw score; Finish is the only way out."""

    def __init__(self, result: QuizResult, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(RESULT_DIALOG_TITLE)
        self.setModal(True)
        self.setMinimumWidth(320)
        self.setWindowFlag(Qt.WindowCloseButtonHint, False)
        self.result_data = result

        layout = QVBoxLayout()
        self.setLayout(layout)

        color = Styles.get_result_color(result.passed)

        self.score_progress = QProgressBar(self)
        self.score_progress.setRange(0, 100)
        self.score_progress.setValue(result.percentage)
        self.score_progress.setFormat("%p%")
        self.score_progress.setStyleSheet(Styles.get_result_bar_style(result.passed))
        layout.addWidget(self.score_progress)

        self.score_title = QLabel(result_title(result), self)
        self.score_title.setAlignment(Qt.AlignCenter)
        self.score_title.setStyleSheet(f"{Styles.get_large_label_style()} color: {color};")
        layout.addWidget(self.score_title)

        self.score_subtitle = QLabel(result_subtitle(result), self)
        self.score_subtitle.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_subtitle)

        self.finish_button = QPushButton(BUTTON_FINISH, self)
        self.finish_button.setDefault(True)
        self.finish_button.clicked.connect(self.accept)
        layout.addWidget(self.finish_button)

    def reject(self) -> None:
        # Escape must not dismiss the summary; only Finish closes it.
        return
