"""Tests for the QTimer-backed countdown timer."""

import pytest

from quiz_challenge.core.quiz_controller import QuizController
from quiz_challenge.ui.countdown_timer import CountdownTimer


@pytest.fixture
def countdown(qt_app):
    timer = CountdownTimer()
    yield timer
    timer.stop()


def test_default_interval_is_one_second(countdown):
    assert countdown.interval_ms() == 1000
    assert not countdown.is_active()


def test_start_and_stop(countdown):
    calls = []
    countdown.start(lambda: calls.append(1))
    assert countdown.is_active()
    countdown.stop()
    assert not countdown.is_active()


def test_timeout_invokes_current_callback(countdown):
    calls = []
    countdown.start(lambda: calls.append("tick"))
    countdown._handle_timeout()
    assert calls == ["tick"]


def test_timeout_after_stop_is_ignored(countdown):
    calls = []
    countdown.start(lambda: calls.append("tick"))
    countdown.stop()
    countdown._handle_timeout()
    assert calls == []


def test_drives_controller(countdown):
    controller = QuizController(timer=countdown)
    assert countdown.is_active()
    countdown._handle_timeout()
    assert controller.state.time_remaining == 14
    controller.submit_answer()
    assert not countdown.is_active()
    controller.shutdown()
