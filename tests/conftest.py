"""Shared fixtures for the quiz tests."""

import os
from typing import Callable, List, Optional

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from quiz_challenge.core.models import Question  # noqa: E402
from quiz_challenge.core.quiz_controller import QuizController  # noqa: E402


class FakeTimer:
    """In-memory stand-in for the Qt countdown timer."""

    def __init__(self):
        self.callbacks: List[Callable[[], None]] = []
        self.active = False
        self.start_count = 0
        self.stop_count = 0

    def start(self, callback: Callable[[], None]) -> None:
        self.callbacks.append(callback)
        self.active = True
        self.start_count += 1

    def stop(self) -> None:
        self.active = False
        self.stop_count += 1

    def is_active(self) -> bool:
        return self.active

    @property
    def current_callback(self) -> Optional[Callable[[], None]]:
        return self.callbacks[-1] if self.callbacks else None

    def fire(self, times: int = 1) -> None:
        """Deliver ticks the way the Qt event loop would while running."""
        for _ in range(times):
            if not self.active:
                return
            self.callbacks[-1]()


SMALL_BANK = (
    Question(prompt="2 + 2?", options=("3", "4", "5", "22"), correct_answer="4"),
    Question(prompt="Capital of France?", options=("Rome", "Paris", "Oslo", "Bern"), correct_answer="Paris"),
    Question(prompt="Red planet?", options=("Earth", "Mars", "Venus", "Jupiter"), correct_answer="Mars"),
)


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def controller(timer):
    """Controller over the built-in ten-question bank."""
    ctrl = QuizController(timer=timer)
    yield ctrl
    ctrl.shutdown()


@pytest.fixture
def small_controller(timer):
    ctrl = QuizController(timer=timer, questions=SMALL_BANK)
    yield ctrl
    ctrl.shutdown()


def answer_current(ctrl: QuizController, correct: bool = True) -> None:
    """Select an option for the current question and submit it."""
    question = ctrl.current_question()
    if correct:
        option = question.correct_answer
    else:
        option = next(o for o in question.options if o != question.correct_answer)
    ctrl.select_option(option)
    ctrl.submit_answer()


@pytest.fixture(scope="session")
def qt_app():
    """Single QApplication shared by every Qt test."""
    app = QApplication.instance() or QApplication([])
    yield app
