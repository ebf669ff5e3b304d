"""Tests for the pure session reducer."""

from dataclasses import replace

import pytest

from conftest import SMALL_BANK
from quiz_challenge.constants.quiz_constants import (
    CORRECT_ANSWER_MESSAGE,
    INCORRECT_ANSWER_MESSAGE,
    QUESTION_TIME_LIMIT_SECONDS,
    UNMARKED_ANSWER_MESSAGE,
)
from quiz_challenge.core.models import QuizPhase, initial_state
from quiz_challenge.core.services.session_transitions import (
    NextQuestion,
    Restart,
    SelectOption,
    SubmitAnswer,
    Tick,
    apply_event,
)


def run(state, *events):
    for event in events:
        state = apply_event(state, event, SMALL_BANK)
    return state


def assert_score_matches_feedback(state):
    correct = sum(1 for feedback in state.feedback_by_question.values() if feedback.is_correct)
    assert state.score == correct


def test_initial_state():
    state = initial_state()
    assert state.phase is QuizPhase.ANSWERING
    assert state.current_question_index == 0
    assert state.score == 0
    assert state.selected_option is None
    assert state.time_remaining == QUESTION_TIME_LIMIT_SECONDS == 15
    assert dict(state.feedback_by_question) == {}


def test_select_option_does_not_submit():
    state = run(initial_state(), SelectOption("4"))
    assert state.selected_option == "4"
    assert state.phase is QuizPhase.ANSWERING
    assert dict(state.feedback_by_question) == {}


def test_select_option_can_change_choice():
    state = run(initial_state(), SelectOption("3"), SelectOption("4"))
    assert state.selected_option == "4"


def test_select_unknown_option_ignored():
    start = initial_state()
    assert run(start, SelectOption("not an option")) is start


def test_correct_submission_increments_score_once():
    state = run(initial_state(), SelectOption("4"), SubmitAnswer())
    assert state.score == 1
    assert state.phase is QuizPhase.FEEDBACK
    feedback = state.feedback_by_question[0]
    assert feedback.is_correct is True
    assert feedback.message == CORRECT_ANSWER_MESSAGE
    assert feedback.selected_option == "4"
    assert feedback.correct_answer == "4"

    again = run(state, SubmitAnswer())
    assert again is state
    assert again.score == 1


def test_wrong_submission():
    state = run(initial_state(), SelectOption("22"), SubmitAnswer())
    feedback = state.feedback_by_question[0]
    assert state.score == 0
    assert feedback.is_correct is False
    assert feedback.message == INCORRECT_ANSWER_MESSAGE == "Incorrect! ❌"


def test_unmarked_submission_is_incorrect():
    state = run(initial_state(), SubmitAnswer())
    feedback = state.feedback_by_question[0]
    assert feedback.is_correct is False
    assert feedback.selected_option is None
    assert feedback.message == UNMARKED_ANSWER_MESSAGE == "Oops! The answer is unmarked."
    assert state.score == 0


def test_select_ignored_in_feedback_phase():
    state = run(initial_state(), SelectOption("4"), SubmitAnswer())
    assert run(state, SelectOption("3")) is state


def test_tick_counts_down():
    state = run(initial_state(), Tick(), Tick())
    assert state.time_remaining == 13
    assert state.phase is QuizPhase.ANSWERING


def test_tick_to_zero_submits_exactly_once():
    state = run(initial_state(), *[Tick()] * QUESTION_TIME_LIMIT_SECONDS)
    assert state.time_remaining == 0
    assert state.phase is QuizPhase.FEEDBACK
    assert len(state.feedback_by_question) == 1
    assert state.feedback_by_question[0].message == UNMARKED_ANSWER_MESSAGE

    after = run(state, Tick())
    assert after is state


def test_timeout_keeps_selected_option():
    state = run(initial_state(), SelectOption("4"), *[Tick()] * QUESTION_TIME_LIMIT_SECONDS)
    assert state.score == 1
    assert state.feedback_by_question[0].is_correct is True


def test_tick_never_goes_negative():
    state = replace(initial_state(), time_remaining=0)
    state = run(state, Tick())
    assert state.time_remaining == 0
    assert state.phase is QuizPhase.FEEDBACK


def test_next_question_only_from_feedback():
    start = initial_state()
    assert run(start, NextQuestion()) is start


def test_next_question_resets_selection_and_time():
    state = run(initial_state(), SelectOption("4"), Tick(), Tick(), SubmitAnswer(), NextQuestion())
    assert state.current_question_index == 1
    assert state.selected_option is None
    assert state.time_remaining == 15
    assert state.phase is QuizPhase.ANSWERING
    assert state.score == 1


def test_next_on_final_question_completes():
    state = initial_state()
    for _ in SMALL_BANK:
        state = run(state, SubmitAnswer(), NextQuestion())
    assert state.phase is QuizPhase.COMPLETED
    assert state.current_question_index == len(SMALL_BANK) - 1
    assert len(state.feedback_by_question) == len(SMALL_BANK)


def test_completed_ignores_everything_but_restart():
    state = initial_state()
    for _ in SMALL_BANK:
        state = run(state, SubmitAnswer(), NextQuestion())
    for event in (SelectOption("4"), Tick(), SubmitAnswer(), NextQuestion()):
        assert run(state, event) is state

    restarted = run(state, Restart())
    assert restarted.phase is QuizPhase.ANSWERING
    assert restarted.score == 0
    assert dict(restarted.feedback_by_question) == {}


@pytest.mark.parametrize("steps", [0, 1, 2])
def test_restart_from_any_phase(steps):
    state = run(initial_state(), SelectOption("4"), Tick())
    if steps >= 1:
        state = run(state, SubmitAnswer())
    if steps >= 2:
        state = run(state, NextQuestion(), SelectOption("Paris"))
    state = run(state, Restart())
    assert state.phase is QuizPhase.ANSWERING
    assert state.current_question_index == 0
    assert state.score == 0
    assert state.selected_option is None
    assert state.time_remaining == 15
    assert dict(state.feedback_by_question) == {}


def test_feedback_is_never_overwritten():
    state = run(initial_state(), SelectOption("4"), SubmitAnswer())
    first = state.feedback_by_question[0]
    # Force the phase back to answering to simulate a duplicate submission.
    forced = replace(state, phase=QuizPhase.ANSWERING, selected_option="3")
    assert run(forced, SubmitAnswer()) is forced
    assert forced.feedback_by_question[0] is first


def test_feedback_mapping_is_read_only():
    state = run(initial_state(), SubmitAnswer())
    with pytest.raises(TypeError):
        state.feedback_by_question[1] = state.feedback_by_question[0]


def test_score_always_matches_feedback():
    state = initial_state()
    answers = ["4", "Rome", None]
    for answer in answers:
        if answer is not None:
            state = run(state, SelectOption(answer))
        state = run(state, SubmitAnswer())
        assert_score_matches_feedback(state)
        state = run(state, NextQuestion())
        assert_score_matches_feedback(state)
    assert state.score == 1


def test_unknown_event_type():
    with pytest.raises(TypeError):
        apply_event(initial_state(), object(), SMALL_BANK)
