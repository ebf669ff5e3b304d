"""Derived view data computed from a session snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from quiz_challenge.constants.quiz_constants import (
    CELEBRATION_SCORE_THRESHOLD,
    QUESTION_TIME_LIMIT_SECONDS,
    RESULT_NEEDS_IMPROVEMENT,
    RESULT_WELL_DONE,
)
from quiz_challenge.core.models import AnswerFeedback, Question, QuizPhase, SessionState


@dataclass(frozen=True, slots=True)
class SessionView:
    """Immutable snapshot handed to the presentation layer."""

    phase: QuizPhase
    question_index: int
    question_number: int
    question_count: int
    prompt: str
    options: tuple[str, ...]
    selected_option: str | None
    time_remaining: int
    time_fraction: float
    score: int
    is_final_question: bool
    feedback: AnswerFeedback | None = None
    classification: str | None = None
    celebrate: bool = False


def shows_results(state: SessionState) -> bool:
    return state.phase is QuizPhase.COMPLETED


def should_celebrate(state: SessionState) -> bool:
    return shows_results(state) and state.score > CELEBRATION_SCORE_THRESHOLD


def classify_score(score: int) -> str:
    # Strictly greater: 8 correct still needs improvement.
    if score > CELEBRATION_SCORE_THRESHOLD:
        return RESULT_WELL_DONE
    return RESULT_NEEDS_IMPROVEMENT


def build_view(state: SessionState, bank: Sequence[Question]) -> SessionView:
    """Project ``state`` onto everything a screen needs to render."""
    question = bank[state.current_question_index]
    feedback = None
    if state.phase is QuizPhase.FEEDBACK:
        feedback = state.feedback_by_question.get(state.current_question_index)

    completed = shows_results(state)
    return SessionView(
        phase=state.phase,
        question_index=state.current_question_index,
        question_number=state.current_question_index + 1,
        question_count=len(bank),
        prompt=question.prompt,
        options=question.options,
        selected_option=state.selected_option,
        time_remaining=state.time_remaining,
        time_fraction=max(0.0, min(1.0, state.time_remaining / QUESTION_TIME_LIMIT_SECONDS)),
        score=state.score,
        is_final_question=state.current_question_index == len(bank) - 1,
        feedback=feedback,
        classification=classify_score(state.score) if completed else None,
        celebrate=should_celebrate(state),
    )
