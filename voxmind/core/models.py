"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question; the correct option is identified by its text."""

    question: str
    options: tuple[str, ...]
    correct: str

    def is_correct(self, answer: str) -> bool:
        return answer == self.correct


@dataclass(frozen=True, slots=True)
class Quiz:
    """A named, timed collection of ordered questions."""

    id: str
    title: str
    subtitle: str
    time: str  # time limit in whole minutes, kept in its wire form
    questions: tuple[Question, ...]

    @property
    def time_limit_minutes(self) -> int:
        return int(self.time)


@dataclass(frozen=True, slots=True)
class QuizLaunch:
    """Everything the quiz screen needs, handed over when a quiz is opened."""

    title: str
    time: str
    questions: tuple[Question, ...]

    @classmethod
    def from_quiz(cls, quiz: Quiz) -> "QuizLaunch":
        return cls(title=quiz.title, time=quiz.time, questions=quiz.questions)


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Final outcome of a quiz session."""

    score: int
    total: int
    percentage: int
    passed: bool
