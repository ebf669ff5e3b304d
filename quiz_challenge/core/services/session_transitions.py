"""Pure state transitions for a quiz session.

Every user action and timer tick is modelled as an event object. ``apply_event``
maps ``(SessionState, event)`` to the next ``SessionState`` without touching
anything else, so the controller only has to manage the timer and listeners.
An event that is not valid for the current phase returns the state unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Sequence, Union

from quiz_challenge.constants.quiz_constants import (
    CORRECT_ANSWER_MESSAGE,
    INCORRECT_ANSWER_MESSAGE,
    QUESTION_TIME_LIMIT_SECONDS,
    UNMARKED_ANSWER_MESSAGE,
)
from quiz_challenge.core.models import (
    AnswerFeedback,
    Question,
    QuizPhase,
    SessionState,
    initial_state,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectOption:
    option: str


@dataclass(frozen=True, slots=True)
class Tick:
    pass


@dataclass(frozen=True, slots=True)
class SubmitAnswer:
    pass


@dataclass(frozen=True, slots=True)
class NextQuestion:
    pass


@dataclass(frozen=True, slots=True)
class Restart:
    pass


SessionEvent = Union[SelectOption, Tick, SubmitAnswer, NextQuestion, Restart]


def apply_event(state: SessionState, event: SessionEvent, bank: Sequence[Question]) -> SessionState:
    """Return the state that follows ``event``."""
    if isinstance(event, SelectOption):
        return select_option(state, event.option, bank)
    if isinstance(event, Tick):
        return tick(state, bank)
    if isinstance(event, SubmitAnswer):
        return submit_answer(state, bank)
    if isinstance(event, NextQuestion):
        return next_question(state, bank)
    if isinstance(event, Restart):
        return restart(state)
    raise TypeError(f"Unsupported session event: {event!r}")


def select_option(state: SessionState, option: str, bank: Sequence[Question]) -> SessionState:
    if state.phase is not QuizPhase.ANSWERING:
        logger.debug("Ignoring option selection outside of answering phase (%s).", state.phase.name)
        return state
    if option not in bank[state.current_question_index].options:
        logger.debug("Ignoring unknown option %r for question %d.", option, state.current_question_index)
        return state
    return replace(state, selected_option=option)


def tick(state: SessionState, bank: Sequence[Question]) -> SessionState:
    """Count down one second and submit automatically when time runs out."""
    if state.phase is not QuizPhase.ANSWERING:
        logger.debug("Discarding tick delivered in %s phase.", state.phase.name)
        return state
    remaining = max(state.time_remaining - 1, 0)
    ticked = replace(state, time_remaining=remaining)
    if remaining == 0:
        logger.info("Time is up for question %d.", state.current_question_index)
        return submit_answer(ticked, bank)
    return ticked


def submit_answer(state: SessionState, bank: Sequence[Question]) -> SessionState:
    if state.phase is not QuizPhase.ANSWERING:
        logger.debug("Ignoring submission in %s phase.", state.phase.name)
        return state
    index = state.current_question_index
    if index in state.feedback_by_question:
        logger.debug("Question %d already has recorded feedback.", index)
        return state

    correct_answer = bank[index].correct_answer
    selected = state.selected_option
    score = state.score
    if selected is None:
        is_correct, message = False, UNMARKED_ANSWER_MESSAGE
    elif selected == correct_answer:
        is_correct, message = True, CORRECT_ANSWER_MESSAGE
        score += 1
    else:
        is_correct, message = False, INCORRECT_ANSWER_MESSAGE

    feedback = AnswerFeedback(
        question_index=index,
        selected_option=selected,
        correct_answer=correct_answer,
        is_correct=is_correct,
        message=message,
    )
    logger.info("Question %d answered %s.", index, "correctly" if is_correct else "incorrectly")
    return replace(
        state,
        score=score,
        phase=QuizPhase.FEEDBACK,
        feedback_by_question=state.with_feedback(feedback),
    )


def next_question(state: SessionState, bank: Sequence[Question]) -> SessionState:
    if state.phase is not QuizPhase.FEEDBACK:
        logger.debug("Ignoring advance request in %s phase.", state.phase.name)
        return state
    if state.current_question_index < len(bank) - 1:
        return replace(
            state,
            current_question_index=state.current_question_index + 1,
            selected_option=None,
            time_remaining=QUESTION_TIME_LIMIT_SECONDS,
            phase=QuizPhase.ANSWERING,
        )
    logger.info("Quiz completed with score %d/%d.", state.score, len(bank))
    return replace(state, phase=QuizPhase.COMPLETED)


def restart(state: SessionState) -> SessionState:
    logger.info("Restarting quiz from %s phase.", state.phase.name)
    return initial_state()
