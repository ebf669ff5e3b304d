"""Tests for derived view data."""

from dataclasses import replace

import pytest

from conftest import SMALL_BANK
from quiz_challenge.core.models import QuizPhase, initial_state
from quiz_challenge.core.services.result_summary import (
    build_view,
    classify_score,
    should_celebrate,
    shows_results,
)
from quiz_challenge.core.services.session_transitions import SelectOption, SubmitAnswer, apply_event


@pytest.mark.parametrize(
    "score, expected",
    [(10, "Well Done!"), (9, "Well Done!"), (8, "Needs Improvement."), (0, "Needs Improvement.")],
)
def test_classify_score(score, expected):
    assert classify_score(score) == expected


def test_celebration_requires_completion():
    answering = replace(initial_state(), score=10)
    assert not shows_results(answering)
    assert not should_celebrate(answering)

    completed = replace(answering, phase=QuizPhase.COMPLETED)
    assert shows_results(completed)
    assert should_celebrate(completed)


def test_eight_correct_does_not_celebrate():
    completed = replace(initial_state(), score=8, phase=QuizPhase.COMPLETED)
    assert not should_celebrate(completed)


def test_answering_view():
    state = replace(initial_state(), time_remaining=6)
    view = build_view(state, SMALL_BANK)
    assert view.phase is QuizPhase.ANSWERING
    assert view.question_number == 1
    assert view.question_count == 3
    assert view.prompt == "2 + 2?"
    assert view.options == ("3", "4", "5", "22")
    assert view.time_fraction == pytest.approx(6 / 15)
    assert view.feedback is None
    assert view.classification is None
    assert not view.is_final_question


def test_feedback_view_carries_current_feedback():
    state = initial_state()
    for event in (SelectOption("4"), SubmitAnswer()):
        state = apply_event(state, event, SMALL_BANK)
    view = build_view(state, SMALL_BANK)
    assert view.feedback is not None
    assert view.feedback.message == "Correct! 🎉"
    assert view.feedback.correct_answer == "4"


def test_completed_view():
    state = replace(initial_state(), current_question_index=2, score=2, phase=QuizPhase.COMPLETED)
    view = build_view(state, SMALL_BANK)
    assert view.is_final_question
    assert view.classification == "Needs Improvement."
    assert view.celebrate is False
    assert view.feedback is None
