"""Main window listing the quizzes available in the store."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from voxmind.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from voxmind.constants.ui_constants import (
    BUTTON_ABOUT,
    BUTTON_HELP,
    BUTTON_RETRY,
    BUTTON_SETTINGS,
    EMPTY_LIST_MESSAGE,
    FETCH_FAILED_TEMPLATE,
    LIST_WINDOW_TITLE,
    LOADING_MESSAGE,
)
from voxmind.core.models import Quiz, QuizLaunch
from voxmind.core.services.quiz_repository import QuizRepository
from voxmind.styling.styles import Styles
from voxmind.ui.components.quiz_row import bind_quiz_rows, quiz_for_item
from voxmind.ui.dialog_helpers import show_info
from voxmind.ui.quiz_fetcher import QuizFetcher
from voxmind.ui.quiz_window import QuizWindow
from voxmind.ui.settings_dialog import QuizPreferences, SettingsDialog

logger = logging.getLogger(__name__)


class QuizListWindow(QMainWindow):
    """Fetches the quiz collection once on start and opens the chosen quiz."""

    def __init__(self, repository: QuizRepository) -> None:
        super().__init__()
        self.setWindowTitle(LIST_WINDOW_TITLE)
        self.resize(480, 600)

        self.preferences = QuizPreferences()
        self._quiz_window: QuizWindow | None = None

        self.fetcher = QuizFetcher(repository, self)
        self.fetcher.quizzes_loaded.connect(self._handle_quizzes_loaded)
        self.fetcher.fetch_failed.connect(self._handle_fetch_failed)

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self.load_quizzes()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.about_button = QPushButton(BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton(BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)
        root_layout.addLayout(button_row)

        self.heading_label = QLabel(APP_NAME, self)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        root_layout.addWidget(self.heading_label)

        # Loading state
        self.loading_label = QLabel(LOADING_MESSAGE, self)
        self.loading_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.loading_label)

        self.loading_progress = QProgressBar(self)
        self.loading_progress.setRange(0, 0)
        self.loading_progress.setTextVisible(False)
        root_layout.addWidget(self.loading_progress)

        # Error state
        error_row = QHBoxLayout()
        self.error_label = QLabel("", self)
        self.error_label.setWordWrap(True)
        error_row.addWidget(self.error_label, stretch=1)
        self.retry_button = QPushButton(BUTTON_RETRY, self)
        self.retry_button.clicked.connect(self.load_quizzes)
        error_row.addWidget(self.retry_button)
        root_layout.addLayout(error_row)

        # Loaded state
        self.quiz_list = QListWidget(self)
        self.quiz_list.setSelectionMode(QListWidget.SingleSelection)
        self.quiz_list.itemActivated.connect(self._handle_item_activated)
        self.quiz_list.itemClicked.connect(self._handle_item_activated)
        root_layout.addWidget(self.quiz_list, stretch=1)

        self.empty_label = QLabel(EMPTY_LIST_MESSAGE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.empty_label)

        self._show_loading()

    # --- Loading states ---

    def _show_loading(self) -> None:
        self.loading_label.setVisible(True)
        self.loading_progress.setVisible(True)
        self.error_label.setVisible(False)
        self.retry_button.setVisible(False)
        self.empty_label.setVisible(False)

    def _hide_loading(self) -> None:
        self.loading_label.setVisible(False)
        self.loading_progress.setVisible(False)

    def load_quizzes(self) -> None:
        """Start a fetch of the whole quiz collection."""
        self._show_loading()
        self.fetcher.start()

    def _handle_quizzes_loaded(self, quizzes: list[Quiz]) -> None:
        self._hide_loading()
        bind_quiz_rows(self.quiz_list, quizzes)
        self.empty_label.setVisible(not quizzes)
        logger.info("Showing %d quiz(zes)", len(quizzes))

    def _handle_fetch_failed(self, message: str) -> None:
        self._hide_loading()
        self.error_label.setText(FETCH_FAILED_TEMPLATE.format(error=message))
        self.error_label.setVisible(True)
        self.retry_button.setVisible(True)

    # --- Navigation ---

    def _handle_item_activated(self, item: QListWidgetItem) -> None:
        quiz = quiz_for_item(item)
        if quiz is None:
            return
        self.open_quiz(quiz)

    def open_quiz(self, quiz: Quiz) -> QuizWindow:
        if self._quiz_window is not None:
            return self._quiz_window
        logger.info("Starting quiz %r (%s min, %d questions)", quiz.title, quiz.time, len(quiz.questions))
        window = QuizWindow(QuizLaunch.from_quiz(quiz), self.preferences, self)
        window.destroyed.connect(self._clear_quiz_window)
        self._quiz_window = window
        window.show()
        return window

    def _clear_quiz_window(self) -> None:
        self._quiz_window = None

    # --- Buttons ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self.preferences)
        if dialog.exec():
            self.preferences = dialog.get_preferences()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.fetcher.cancel()
        super().closeEvent(event)
