"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

from quiz_challenge.constants.quiz_constants import QUESTION_TIME_LIMIT_SECONDS


class QuizPhase(Enum):
    """Phase of a quiz session."""

    ANSWERING = auto()
    FEEDBACK = auto()
    COMPLETED = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice quiz question with exactly four options."""

    prompt: str
    options: tuple[str, ...]
    correct_answer: str


@dataclass(frozen=True, slots=True)
class AnswerFeedback:
    """Outcome recorded once a question's answer has been submitted."""

    question_index: int
    selected_option: str | None  # None when the timer ran out with nothing chosen
    correct_answer: str
    is_correct: bool
    message: str


def _empty_feedback() -> Mapping[int, AnswerFeedback]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class SessionState:
    """Snapshot of one quiz attempt. Transitions return a new snapshot."""

    current_question_index: int = 0
    score: int = 0
    selected_option: str | None = None
    time_remaining: int = QUESTION_TIME_LIMIT_SECONDS
    phase: QuizPhase = QuizPhase.ANSWERING
    feedback_by_question: Mapping[int, AnswerFeedback] = field(default_factory=_empty_feedback)

    def with_feedback(self, feedback: AnswerFeedback) -> Mapping[int, AnswerFeedback]:
        """Return a read-only copy of the feedback mapping with ``feedback`` added."""
        updated = dict(self.feedback_by_question)
        updated[feedback.question_index] = feedback
        return MappingProxyType(updated)


def initial_state() -> SessionState:
    """Fresh session positioned on the first question."""
    return SessionState()
