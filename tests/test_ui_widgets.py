"""Tests for the Qt-side fetch relay, quiz list rows and quiz window lifecycle."""

from __future__ import annotations

import threading
import time

import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import Qt  # noqa: E402
from PySide6.QtWidgets import QListWidget  # noqa: E402

from voxmind.core.models import Question, Quiz, QuizLaunch  # noqa: E402
from voxmind.core.services.quiz_repository import QuizFetchError  # noqa: E402
from voxmind.ui.components.quiz_row import QuizRowWidget, bind_quiz_rows, quiz_for_item  # noqa: E402
from voxmind.ui.quiz_fetcher import QuizFetcher  # noqa: E402
from voxmind.ui.quiz_window import QuizWindow  # noqa: E402
from voxmind.ui.settings_dialog import QuizPreferences  # noqa: E402


def _quiz(title: str) -> Quiz:
    question = Question(question="2 + 2?", options=("3", "4", "5", "22"), correct="4")
    return Quiz(id=title.lower(), title=title, subtitle="", time="1", questions=(question,))


def wait_until(app, predicate, timeout: float = 3.0) -> bool:
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        app.processEvents()
        time.sleep(0.01)
    app.processEvents()
    return predicate()


class FakeRepository:
    """Hands out queued outcomes; a ``threading.Event`` outcome blocks until set."""

    def __init__(self, *outcomes) -> None:
        self._outcomes = list(outcomes)
        self._lock = threading.Lock()
        self.calls = 0

    def fetch_quizzes(self):
        with self._lock:
            outcome = self._outcomes.pop(0)
            self.calls += 1
        if isinstance(outcome, tuple):
            gate, quizzes = outcome
            gate.wait(timeout=5)
            return quizzes
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def recorded(qapp):
    def attach(fetcher: QuizFetcher) -> dict:
        events = {"loaded": [], "failed": [], "delivered": []}
        fetcher.quizzes_loaded.connect(events["loaded"].append)
        fetcher.fetch_failed.connect(events["failed"].append)
        fetcher._relay.done.connect(lambda generation, *_: events["delivered"].append(generation))
        return events

    return attach


def test_fetcher_emits_loaded_quizzes(qapp, recorded):
    quizzes = [_quiz("Capitals")]
    fetcher = QuizFetcher(FakeRepository(quizzes))
    events = recorded(fetcher)

    fetcher.start()

    assert wait_until(qapp, lambda: events["loaded"])
    assert events["loaded"] == [quizzes]
    assert events["failed"] == []


def test_fetcher_reports_fetch_error(qapp, recorded):
    fetcher = QuizFetcher(FakeRepository(QuizFetchError("connection refused")))
    events = recorded(fetcher)

    fetcher.start()

    assert wait_until(qapp, lambda: events["failed"])
    assert events["failed"] == ["connection refused"]
    assert events["loaded"] == []


def test_fetcher_reports_unexpected_error(qapp, recorded):
    fetcher = QuizFetcher(FakeRepository(RuntimeError("boom")))
    events = recorded(fetcher)

    fetcher.start()

    assert wait_until(qapp, lambda: events["failed"])
    assert events["failed"] == ["boom"]


def test_superseded_fetch_result_is_dropped(qapp, recorded):
    gate = threading.Event()
    stale, fresh = [_quiz("Stale")], [_quiz("Fresh")]
    repository = FakeRepository((gate, stale), fresh)
    fetcher = QuizFetcher(repository)
    events = recorded(fetcher)

    fetcher.start()
    assert wait_until(qapp, lambda: repository.calls == 1)
    fetcher.start()
    assert wait_until(qapp, lambda: events["loaded"])
    gate.set()

    assert wait_until(qapp, lambda: len(events["delivered"]) == 2)
    assert events["loaded"] == [fresh]


def test_cancelled_fetch_result_is_dropped(qapp, recorded):
    gate = threading.Event()
    fetcher = QuizFetcher(FakeRepository((gate, [_quiz("Late")])))
    events = recorded(fetcher)

    fetcher.start()
    fetcher.cancel()
    gate.set()

    assert wait_until(qapp, lambda: events["delivered"])
    assert events["loaded"] == []
    assert events["failed"] == []


def test_bind_quiz_rows_keeps_order(qapp):
    list_widget = QListWidget()
    quizzes = [_quiz("Capitals"), _quiz("Maths"), _quiz("Python")]

    bind_quiz_rows(list_widget, quizzes)

    assert list_widget.count() == 3
    assert [quiz_for_item(list_widget.item(row)).title for row in range(3)] == ["Capitals", "Maths", "Python"]

    bind_quiz_rows(list_widget, quizzes[:1])
    assert list_widget.count() == 1


def test_quiz_row_shows_remote_text_verbatim(qapp):
    quiz = Quiz(id="1", title="<b>Bold</b>", subtitle="<i>x</i>", time="3", questions=())

    row = QuizRowWidget(quiz)

    assert row.title_label.textFormat() == Qt.PlainText
    assert row.subtitle_label.textFormat() == Qt.PlainText
    assert row.title_label.text() == "<b>Bold</b>"


def test_quiz_window_releases_timer_and_sensor_on_close(qapp):
    quiz = _quiz("Capitals")
    window = QuizWindow(QuizLaunch.from_quiz(quiz), QuizPreferences(shake_enabled=False))
    stops = []
    window.shake_sensor.stop = lambda: stops.append(True)

    assert window.countdown_timer.isActive()

    window.close()

    assert not window.countdown_timer.isActive()
    assert stops
