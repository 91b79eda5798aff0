"""Tests for the quiz session state machine."""

from __future__ import annotations

import pytest

from voxmind.core.models import Question
from voxmind.core.services.quiz_session import (
    AdvanceOutcome,
    NavigationOutcome,
    QuizSession,
    SessionState,
    calculate_result,
)


def _question(text: str, options: list[str], correct: str) -> Question:
    return Question(question=text, options=tuple(options), correct=correct)


@pytest.fixture
def two_questions() -> list[Question]:
    return [
        _question("Capital of France?", ["Berlin", "Madrid", "Paris", "Rome"], "Paris"),
        _question("2 + 2?", ["3", "4", "5", "22"], "4"),
    ]


@pytest.fixture
def five_questions() -> list[Question]:
    return [_question(f"Q{n}", ["a", "b", "c", "d"], "a") for n in range(5)]


def test_starts_answering_first_question(two_questions):
    session = QuizSession(two_questions)

    assert session.state is SessionState.ANSWERING
    assert session.index == 0
    assert session.score == 0
    assert session.selected_answer == ""
    assert session.current_question() == two_questions[0]


def test_all_correct_scenario_passes_with_full_marks(two_questions):
    session = QuizSession(two_questions)

    session.select_option("Paris")
    assert session.advance() is AdvanceOutcome.NEXT_QUESTION
    assert session.score == 1

    session.select_option("4")
    assert session.advance() is AdvanceOutcome.FINISHED
    assert session.score == 2

    result = session.result()
    assert session.is_finished()
    assert result.percentage == 100
    assert result.passed


def test_advance_without_selection_changes_nothing(two_questions):
    session = QuizSession(two_questions)

    assert session.advance() is AdvanceOutcome.NO_SELECTION
    assert session.index == 0
    assert session.score == 0
    assert session.state is SessionState.ANSWERING


def test_wrong_answer_advances_without_scoring(two_questions):
    session = QuizSession(two_questions)

    session.select_option("Rome")
    session.advance()

    assert session.index == 1
    assert session.score == 0


def test_selection_is_cleared_after_advance(two_questions):
    session = QuizSession(two_questions)

    session.select_option("Paris")
    session.advance()

    assert session.selected_answer == ""
    assert session.advance() is AdvanceOutcome.NO_SELECTION


def test_last_selection_before_advance_is_the_one_scored(two_questions):
    session = QuizSession(two_questions)

    session.select_option("Berlin")
    session.select_option("Paris")
    session.advance()

    assert session.score == 1


def test_selecting_text_outside_the_options_is_rejected(two_questions):
    session = QuizSession(two_questions)

    with pytest.raises(ValueError):
        session.select_option("London")
    assert session.selected_answer == ""


def test_correct_answer_is_matched_by_text_not_position():
    question = _question("Pick the duplicate", ["same", "same", "other", "x"], "same")
    session = QuizSession([question])

    session.select_option("same")
    session.advance()

    assert session.score == 1


def test_score_counts_matching_advances(five_questions):
    session = QuizSession(five_questions)
    picks = ["a", "b", "a", "c", "a"]

    for pick in picks:
        session.select_option(pick)
        session.advance()

    assert session.score == picks.count("a")
    assert session.is_finished()


def test_shake_forward_moves_without_scoring(two_questions):
    session = QuizSession(two_questions)
    session.select_option("Paris")

    assert session.navigate_forward() is NavigationOutcome.MOVED
    assert session.index == 1
    assert session.score == 0
    assert session.selected_answer == ""


def test_shake_forward_is_clamped_at_last_question(two_questions):
    session = QuizSession(two_questions)
    session.navigate_forward()

    assert session.navigate_forward() is NavigationOutcome.AT_BOUNDARY
    assert session.index == 1
    assert session.state is SessionState.ANSWERING


def test_shake_back_is_clamped_at_first_question(two_questions):
    session = QuizSession(two_questions)

    assert session.navigate_back() is NavigationOutcome.AT_BOUNDARY
    assert session.index == 0


def test_shake_back_returns_to_previous_question(two_questions):
    session = QuizSession(two_questions)
    session.navigate_forward()

    assert session.navigate_back() is NavigationOutcome.MOVED
    assert session.index == 0


def test_shake_navigation_stays_in_bounds_and_keeps_score(five_questions):
    session = QuizSession(five_questions)
    session.select_option("a")
    session.advance()
    moves = [1, 1, 1, 1, 1, -1, -1, -1, -1, -1, -1, 1, 1]

    for move in moves:
        if move > 0:
            session.navigate_forward()
        else:
            session.navigate_back()
        assert 0 <= session.index <= 4
        assert session.score == 1


def test_expiry_finishes_from_any_index_with_accumulated_score(five_questions):
    session = QuizSession(five_questions)
    session.select_option("a")
    session.advance()
    session.navigate_forward()

    assert session.expire() is True
    assert session.is_finished()
    assert session.current_question() is None
    assert session.result().score == 1
    assert session.result().total == 5


def test_expiry_after_finishing_is_a_no_op(two_questions):
    session = QuizSession(two_questions)
    session.expire()

    assert session.expire() is False


def test_input_after_finishing_raises(two_questions):
    session = QuizSession(two_questions)
    session.expire()

    with pytest.raises(RuntimeError):
        session.advance()
    with pytest.raises(RuntimeError):
        session.navigate_forward()
    with pytest.raises(RuntimeError):
        session.select_option("Paris")


def test_empty_quiz_finishes_immediately_and_fails():
    session = QuizSession([])

    assert session.is_finished()
    result = session.result()
    assert result.total == 0
    assert result.percentage == 0
    assert not result.passed


def test_progress_percent_tracks_index(five_questions):
    session = QuizSession(five_questions)
    assert session.progress_percent() == 0

    session.navigate_forward()
    session.navigate_forward()

    assert session.progress_percent() == 40


@pytest.mark.parametrize(
    ("score", "total", "percentage", "passed"),
    [
        (3, 5, 60, False),
        (4, 5, 80, True),
        (2, 3, 66, True),
        (1, 3, 33, False),
        (0, 4, 0, False),
        (5, 5, 100, True),
    ],
)
def test_calculate_result_truncates_and_needs_more_than_sixty(score, total, percentage, passed):
    result = calculate_result(score, total)

    assert result.percentage == percentage
    assert result.passed is passed
    assert (result.score, result.total) == (score, total)
