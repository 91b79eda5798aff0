"""Window that runs one timed attempt at a quiz."""

from __future__ import annotations

import logging

from PySide6.QtCore import QEvent, Qt, QTimer
from PySide6.QtGui import QCloseEvent, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from voxmind.constants.quiz_constants import OPTION_SLOT_COUNT
from voxmind.constants.ui_constants import (
    BUTTON_NEXT,
    COUNTDOWN_INTERVAL_MS,
    FIRST_QUESTION_NOTICE,
    NEXT_QUESTION_NOTICE,
    NO_MORE_QUESTIONS_NOTICE,
    OPTION_PLACEHOLDERS,
    PREVIOUS_QUESTION_NOTICE,
    QUESTION_INDICATOR_TEMPLATE,
    QUIZ_WINDOW_TITLE,
    SELECT_ANSWER_NOTICE,
    SHAKE_LEFT_SHORTCUT,
    SHAKE_RIGHT_SHORTCUT,
)
from voxmind.core.models import QuizLaunch
from voxmind.core.services.countdown import Countdown
from voxmind.core.services.quiz_session import AdvanceOutcome, NavigationOutcome, QuizSession
from voxmind.styling.styles import Styles
from voxmind.ui.components.notice_label import NoticeLabel
from voxmind.ui.components.result_dialog import ResultDialog
from voxmind.ui.question_renderer import render_question
from voxmind.ui.settings_dialog import QuizPreferences
from voxmind.ui.shake_sensor import ShakeSensor

logger = logging.getLogger(__name__)


class QuizWindow(QWidget):
    """Question sequencing, scoring, countdown and shake navigation for one quiz.

    The countdown timer and the accelerometer listener belong to this window:
    the sensor only listens while the window is active, and both are stopped
    when the window closes.
    """

    def __init__(
        self,
        launch: QuizLaunch,
        preferences: QuizPreferences | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent, Qt.Window)
        self.setAttribute(Qt.WA_DeleteOnClose)
        self.setWindowModality(Qt.ApplicationModal)
        self.setWindowTitle(f"{QUIZ_WINDOW_TITLE} - {launch.title}" if launch.title else QUIZ_WINDOW_TITLE)
        self.setMinimumSize(520, 480)

        self.launch = launch
        self.preferences = preferences or QuizPreferences()
        self.session = QuizSession(launch.questions)
        self.countdown = Countdown.from_minutes(launch.time)
        self._selected_button_index: int | None = None
        self._finished_shown: bool = False

        self._build_ui()
        self._configure_countdown_timer()
        self._configure_shake_navigation()
        self._apply_font_size()

        if self.session.is_finished() or self.countdown.is_expired():
            QTimer.singleShot(0, self._finish_quiz)
        else:
            self._load_question()
            self.countdown_timer.start()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Indicator row: question counter and countdown
        indicator_row = QHBoxLayout()
        self.question_indicator_label = QLabel("", self)
        indicator_row.addWidget(self.question_indicator_label)
        indicator_row.addStretch()
        self.timer_label = QLabel(self.countdown.label(), self)
        indicator_row.addWidget(self.timer_label)
        layout.addLayout(indicator_row)

        self.question_progress = QProgressBar(self)
        self.question_progress.setRange(0, 100)
        self.question_progress.setTextVisible(False)
        self.question_progress.setFixedHeight(8)
        layout.addWidget(self.question_progress)

        self.question_label = QLabel("", self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        layout.addWidget(self.question_label, stretch=1)

        # Options
        option_grid = QGridLayout()
        self.option_buttons: list[QPushButton] = []
        for idx in range(OPTION_SLOT_COUNT):
            button = QPushButton(OPTION_PLACEHOLDERS[idx], self)
            button.clicked.connect(lambda _checked=False, i=idx: self._handle_option_clicked(i))
            option_grid.addWidget(button, idx, 0)
            self.option_buttons.append(button)
        layout.addLayout(option_grid)

        self.next_button = QPushButton(BUTTON_NEXT, self)
        self.next_button.clicked.connect(self._handle_next)
        layout.addWidget(self.next_button)

        self.notice_label = NoticeLabel(self)
        layout.addWidget(self.notice_label)

    def _configure_countdown_timer(self) -> None:
        self.countdown_timer = QTimer(self)
        self.countdown_timer.setInterval(COUNTDOWN_INTERVAL_MS)
        self.countdown_timer.timeout.connect(self._tick_countdown)

    def _configure_shake_navigation(self) -> None:
        self.shake_sensor = ShakeSensor(self.preferences.shake_threshold, self)
        self.shake_sensor.shaken_right.connect(self._handle_shake_right)
        self.shake_sensor.shaken_left.connect(self._handle_shake_left)

        self.shake_right_shortcut = QShortcut(QKeySequence(SHAKE_RIGHT_SHORTCUT), self)
        self.shake_right_shortcut.activated.connect(self._handle_shake_right)
        self.shake_left_shortcut = QShortcut(QKeySequence(SHAKE_LEFT_SHORTCUT), self)
        self.shake_left_shortcut.activated.connect(self._handle_shake_left)

    # --- Question display ---

    def _load_question(self) -> None:
        question = self.session.current_question()
        if question is None:
            return

        total = self.session.total_questions
        self.question_indicator_label.setText(
            QUESTION_INDICATOR_TEMPLATE.format(number=self.session.index + 1, total=total)
        )
        self.question_progress.setValue(self.session.progress_percent())
        self.question_label.setText(render_question(question.question))

        for idx, button in enumerate(self.option_buttons):
            if idx < len(question.options):
                button.setText(question.options[idx])
                button.setEnabled(True)
            else:
                button.setText(OPTION_PLACEHOLDERS[idx])
                button.setEnabled(False)

        self._selected_button_index = None
        self._reset_button_colors()

    def _reset_button_colors(self) -> None:
        for idx, button in enumerate(self.option_buttons):
            selected = idx == self._selected_button_index
            button.setStyleSheet(Styles.get_option_button_style(selected, self.preferences.game_font_size))

    # --- Input handlers ---

    def _handle_option_clicked(self, index: int) -> None:
        question = self.session.current_question()
        if question is None or index >= len(question.options):
            return
        self.session.select_option(question.options[index])
        self._selected_button_index = index
        self._reset_button_colors()

    def _handle_next(self) -> None:
        if self.session.is_finished():
            return
        outcome = self.session.advance()
        if outcome is AdvanceOutcome.NO_SELECTION:
            self.notice_label.show_notice(SELECT_ANSWER_NOTICE)
        elif outcome is AdvanceOutcome.NEXT_QUESTION:
            self._load_question()
        else:
            self._finish_quiz()

    def _handle_shake_right(self) -> None:
        if self.session.is_finished():
            return
        if self.session.navigate_forward() is NavigationOutcome.MOVED:
            self._load_question()
            self.notice_label.show_notice(NEXT_QUESTION_NOTICE)
        else:
            self.notice_label.show_notice(NO_MORE_QUESTIONS_NOTICE)

    def _handle_shake_left(self) -> None:
        if self.session.is_finished():
            return
        if self.session.navigate_back() is NavigationOutcome.MOVED:
            self._load_question()
            self.notice_label.show_notice(PREVIOUS_QUESTION_NOTICE)
        else:
            self.notice_label.show_notice(FIRST_QUESTION_NOTICE)

    def _tick_countdown(self) -> None:
        reached_zero = self.countdown.tick()
        self.timer_label.setText(self.countdown.label())
        if reached_zero:
            self.countdown_timer.stop()
            if self.session.expire():
                self._finish_quiz()

    # --- Completion ---

    def _finish_quiz(self) -> None:
        if self._finished_shown:
            return
        self._finished_shown = True
        self._release_resources()
        self.session.expire()
        for button in (*self.option_buttons, self.next_button):
            button.setEnabled(False)
        self.question_progress.setValue(100)

        dialog = ResultDialog(self.session.result(), self)
        dialog.exec()
        self.close()

    def _release_resources(self) -> None:
        self.countdown_timer.stop()
        self.shake_sensor.stop()

    # --- Qt events ---

    def changeEvent(self, event: QEvent) -> None:
        if event.type() == QEvent.ActivationChange:
            self._update_sensor_listener()
        super().changeEvent(event)

    def _update_sensor_listener(self) -> None:
        listen = (
            self.isActiveWindow()
            and self.preferences.shake_enabled
            and not self.session.is_finished()
        )
        if listen:
            self.shake_sensor.start()
        else:
            self.shake_sensor.stop()

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.debug("Closing quiz window for %r", self.launch.title)
        self._release_resources()
        super().closeEvent(event)

    def _apply_font_size(self) -> None:
        font_size = self.preferences.game_font_size
        self.question_label.setStyleSheet(f"font-size: {font_size + 2}pt;")
        self.question_indicator_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.timer_label.setStyleSheet(f"font-size: {font_size}pt; font-weight: bold;")
        self.next_button.setStyleSheet(f"font-size: {font_size}pt;")
        self._reset_button_colors()
