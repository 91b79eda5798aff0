"""Conversion of raw realtime-database payloads into quiz models.

The store returns the root document as JSON. Children arrive either as an
object keyed by push id / index, or as an array when every key is a small
integer (array slots for deleted children come back as ``null``). Each child
is read through the pydantic record schemas below; children that are null or
do not fit the schema are skipped and logged, they never abort the load.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from voxmind.core.models import Question, Quiz

logger = logging.getLogger(__name__)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INTEGER_KEY = re.compile(r"-?[0-9]+")


class QuestionRecord(BaseModel):
    """Wire form of a single question."""

    model_config = ConfigDict(extra="ignore")

    question: str = ""
    options: list[str] = []
    correct: str = ""

    @field_validator("options", mode="before")
    @classmethod
    def _options_in_key_order(cls, value: Any) -> Any:
        if isinstance(value, dict):
            value = [item for _, item in ordered_children(value)]
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    def to_model(self) -> Question:
        return Question(
            question=self.question,
            options=tuple(self.options),
            correct=self.correct,
        )


class QuizRecord(BaseModel):
    """Wire form of a quiz child under the database root."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str = ""
    subtitle: str = ""
    time: str
    questionList: list[QuestionRecord] = []

    @field_validator("time", mode="before")
    @classmethod
    def _time_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("time")
    @classmethod
    def _time_is_whole_minutes(cls, value: str) -> str:
        cleaned = value.strip()
        if not (cleaned.isascii() and cleaned.isdecimal()):
            raise ValueError("time must be a whole number of minutes")
        return cleaned

    @field_validator("questionList", mode="before")
    @classmethod
    def _questions_in_key_order(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, dict):
            value = [item for _, item in ordered_children(value)]
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    def to_model(self) -> Quiz:
        return Quiz(
            id=self.id,
            title=self.title,
            subtitle=self.subtitle,
            time=self.time,
            questions=tuple(record.to_model() for record in self.questionList),
        )


def _key_sort_order(key: str) -> tuple[int, int, str]:
    # Integer-like keys sort first numerically, everything else lexicographically.
    if _INTEGER_KEY.fullmatch(key) and key == str(int(key)):
        number = int(key)
        if _INT32_MIN <= number <= _INT32_MAX:
            return (0, number, "")
    return (1, 0, key)


def ordered_children(node: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(key, value)`` pairs of a JSON node in realtime-database order."""
    if isinstance(node, dict):
        for key in sorted(node, key=_key_sort_order):
            yield key, node[key]
    elif isinstance(node, list):
        for index, value in enumerate(node):
            yield str(index), value


def parse_quizzes(payload: Any) -> list[Quiz]:
    """Build the ordered list of quizzes contained in a root document."""
    quizzes: list[Quiz] = []
    skipped = 0
    for key, child in ordered_children(payload):
        if child is None:
            continue
        try:
            record = QuizRecord.model_validate(child)
        except ValidationError as exc:
            skipped += 1
            logger.warning("Skipping malformed quiz record %r: %s", key, exc.errors(include_url=False))
            continue
        quizzes.append(record.to_model())

    if skipped:
        logger.warning("Skipped %d malformed quiz record(s)", skipped)
    logger.info("Parsed %d quiz(zes)", len(quizzes))
    return quizzes
