"""Service for reading the quiz collection from the realtime database."""

from __future__ import annotations

import logging
from typing import Any

import requests

from voxmind.constants.network_constants import (
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    ROOT_DOCUMENT_PATH,
)
from voxmind.core.models import Quiz
from voxmind.core.quiz_records import parse_quizzes

logger = logging.getLogger(__name__)


class QuizFetchError(Exception):
    """Raised when the quiz collection cannot be read from the store."""


class QuizRepository:
    """Reads every quiz stored under the database root in a single request."""

    def __init__(
        self,
        database_url: str,
        auth_token: str | None = None,
        timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        if not database_url:
            raise ValueError("A database URL is required.")
        self._database_url = database_url.rstrip("/")
        self._auth_token = auth_token
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    @property
    def root_url(self) -> str:
        return f"{self._database_url}{ROOT_DOCUMENT_PATH}"

    def fetch_quizzes(self) -> list[Quiz]:
        """Fetch and parse all quizzes; malformed children are dropped."""
        document = self._fetch_root_document()
        try:
            return parse_quizzes(document)
        except (TypeError, ValueError) as exc:
            logger.error("Quiz store returned an unusable document: %s", exc)
            raise QuizFetchError("The quiz store returned an unusable document.") from exc

    def _fetch_root_document(self) -> Any:
        params = {"auth": self._auth_token} if self._auth_token else None
        logger.info("Fetching quizzes from %s", self.root_url)
        try:
            response = self._session.get(self.root_url, params=params, timeout=self._timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Quiz fetch failed: %s", exc)
            raise QuizFetchError(str(exc)) from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Quiz store returned a non-JSON body")
            raise QuizFetchError("The quiz store returned an unreadable response.") from exc

    def close(self) -> None:
        self._session.close()
