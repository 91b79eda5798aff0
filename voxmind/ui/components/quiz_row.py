"""List row widget and binding for the quiz list."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QListWidget, QListWidgetItem, QHBoxLayout, QVBoxLayout, QWidget

from voxmind.constants.ui_constants import QUIZ_TIME_TEMPLATE
from voxmind.core.models import Quiz
from voxmind.styling.styles import Styles

QUIZ_ROLE = Qt.UserRole


def format_quiz_time(quiz: Quiz) -> str:
    return QUIZ_TIME_TEMPLATE.format(time=quiz.time)


class QuizRowWidget(QWidget):
    """Shows title, subtitle and time limit of one quiz."""

    def __init__(self, quiz: Quiz, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout()
        layout.setContentsMargins(12, 8, 12, 8)
        self.setLayout(layout)

        text_column = QVBoxLayout()
        self.title_label = QLabel(quiz.title, self)
        self.title_label.setTextFormat(Qt.PlainText)
        self.title_label.setStyleSheet("font-size: 13pt; font-weight: bold; background: transparent;")
        text_column.addWidget(self.title_label)

        self.subtitle_label = QLabel(quiz.subtitle, self)
        self.subtitle_label.setTextFormat(Qt.PlainText)
        self.subtitle_label.setStyleSheet(Styles.get_secondary_label_style() + " background: transparent;")
        self.subtitle_label.setWordWrap(True)
        text_column.addWidget(self.subtitle_label)
        layout.addLayout(text_column, stretch=1)

        self.time_label = QLabel(format_quiz_time(quiz), self)
        self.time_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.time_label.setStyleSheet("background: transparent;")
        layout.addWidget(self.time_label)


def bind_quiz_rows(list_widget: QListWidget, quizzes: list[Quiz]) -> None:
    """Replace the rows of ``list_widget`` with one row per quiz, in order."""
    list_widget.clear()
    for quiz in quizzes:
        item = QListWidgetItem(list_widget)
        item.setData(QUIZ_ROLE, quiz)
        row = QuizRowWidget(quiz, list_widget)
        item.setSizeHint(row.sizeHint())
        list_widget.setItemWidget(item, row)


def quiz_for_item(item: QListWidgetItem) -> Quiz | None:
    quiz = item.data(QUIZ_ROLE)
    return quiz if isinstance(quiz, Quiz) else None
