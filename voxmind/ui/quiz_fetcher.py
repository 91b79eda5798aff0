"""Runs the quiz fetch off the GUI thread and reports back through Qt signals."""

from __future__ import annotations

import logging
from threading import Thread

from PySide6.QtCore import QObject, Signal

from voxmind.core.services.quiz_repository import QuizFetchError, QuizRepository

logger = logging.getLogger(__name__)


class _FetchRelay(QObject):
    # Lives on the GUI thread; emitting from the worker thread queues delivery.
    done = Signal(int, object, str)


class QuizFetcher(QObject):
    """One fetch at a time; results of superseded or cancelled fetches are dropped."""

    quizzes_loaded = Signal(list)
    fetch_failed = Signal(str)

    def __init__(self, repository: QuizRepository, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._repository = repository
        self._generation: int = 0
        self._running: bool = False
        self._relay = _FetchRelay()
        self._relay.done.connect(self._deliver)

    def start(self) -> None:
        self._generation += 1
        self._running = True
        generation = self._generation
        relay = self._relay
        repository = self._repository

        def run_fetch() -> None:
            try:
                quizzes = repository.fetch_quizzes()
            except QuizFetchError as exc:
                relay.done.emit(generation, None, str(exc))
                return
            except Exception as exc:
                logger.exception("Unexpected error while fetching quizzes")
                relay.done.emit(generation, None, str(exc))
                return
            relay.done.emit(generation, quizzes, "")

        Thread(target=run_fetch, name="QuizFetch", daemon=True).start()

    def cancel(self) -> None:
        """Forget the in-flight fetch; its result will be ignored when it arrives."""
        if self._running:
            logger.debug("Cancelling in-flight quiz fetch")
        self._generation += 1
        self._running = False

    def _deliver(self, generation: int, quizzes: list | None, error: str) -> None:
        if generation != self._generation:
            logger.debug("Ignoring result of superseded fetch %d", generation)
            return
        self._running = False
        if quizzes is None:
            self.fetch_failed.emit(error)
        else:
            self.quizzes_loaded.emit(quizzes)
