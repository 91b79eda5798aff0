"""Service for sequencing one user's attempt at a quiz."""

from __future__ import annotations

from enum import Enum, auto
import logging

from voxmind.constants.quiz_constants import PASS_THRESHOLD_PERCENT
from voxmind.core.models import Question, QuizResult

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle of a quiz session."""

    ANSWERING = auto()
    FINISHED = auto()


class AdvanceOutcome(Enum):
    """Result of pressing Next."""

    NO_SELECTION = auto()
    NEXT_QUESTION = auto()
    FINISHED = auto()


class NavigationOutcome(Enum):
    """Result of a shake navigation request."""

    MOVED = auto()
    AT_BOUNDARY = auto()


def calculate_result(score: int, total: int) -> QuizResult:
    """Percentage is truncated; an empty quiz counts as 0% and fails."""
    percentage = (score * 100) // total if total > 0 else 0
    return QuizResult(
        score=score,
        total=total,
        percentage=percentage,
        passed=percentage > PASS_THRESHOLD_PERCENT,
    )


class QuizSession:
    """Tracks the current question, the pending answer and the score.

    Next-button advances validate and score the selection; shake navigation
    moves freely within the question list without scoring.
    """

    def __init__(self, questions: tuple[Question, ...] | list[Question]) -> None:
        self._questions: tuple[Question, ...] = tuple(questions)
        self._index: int = 0
        self._selected_answer: str = ""
        self._score: int = 0
        self._state = SessionState.ANSWERING
        if not self._questions:
            logger.info("Quiz has no questions; finishing immediately")
            self._state = SessionState.FINISHED

    # --- Read access ---

    @property
    def state(self) -> SessionState:
        return self._state

    def is_finished(self) -> bool:
        return self._state is SessionState.FINISHED

    @property
    def index(self) -> int:
        return self._index

    @property
    def score(self) -> int:
        return self._score

    @property
    def selected_answer(self) -> str:
        return self._selected_answer

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    def current_question(self) -> Question | None:
        if self.is_finished():
            return None
        return self._questions[self._index]

    def progress_percent(self) -> int:
        if not self._questions:
            return 0
        return int(self._index / len(self._questions) * 100)

    def result(self) -> QuizResult:
        return calculate_result(self._score, len(self._questions))

    # --- Input handlers ---

    def select_option(self, option_text: str) -> None:
        question = self._require_question()
        if option_text not in question.options:
            raise ValueError(f"{option_text!r} is not an option of the current question")
        self._selected_answer = option_text

    def advance(self) -> AdvanceOutcome:
        question = self._require_question()
        if not self._selected_answer:
            return AdvanceOutcome.NO_SELECTION

        if question.is_correct(self._selected_answer):
            self._score += 1
            logger.info("Score: %d", self._score)

        self._index += 1
        self._selected_answer = ""
        if self._index >= len(self._questions):
            self._finish()
            return AdvanceOutcome.FINISHED
        return AdvanceOutcome.NEXT_QUESTION

    def navigate_forward(self) -> NavigationOutcome:
        self._require_question()
        if self._index >= len(self._questions) - 1:
            return NavigationOutcome.AT_BOUNDARY
        self._index += 1
        self._selected_answer = ""
        return NavigationOutcome.MOVED

    def navigate_back(self) -> NavigationOutcome:
        self._require_question()
        if self._index <= 0:
            return NavigationOutcome.AT_BOUNDARY
        self._index -= 1
        self._selected_answer = ""
        return NavigationOutcome.MOVED

    def expire(self) -> bool:
        """Finish because time ran out. Returns False when already finished."""
        if self.is_finished():
            return False
        logger.info("Time is up at question %d of %d", self._index + 1, len(self._questions))
        self._finish()
        return True

    # --- Internals ---

    def _require_question(self) -> Question:
        if self.is_finished():
            raise RuntimeError("Quiz session has already finished.")
        return self._questions[self._index]

    def _finish(self) -> None:
        self._state = SessionState.FINISHED
        self._selected_answer = ""
        result = self.result()
        logger.info(
            "Final Score: %d/%d (%d%%, %s)",
            result.score,
            result.total,
            result.percentage,
            "passed" if result.passed else "failed",
        )
