"""Quiz session controller shared by the UI panels."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Protocol

from quiz_challenge.core.models import AnswerFeedback, Question, QuizPhase, SessionState, initial_state
from quiz_challenge.core.question_bank import DEFAULT_QUESTION_BANK, validate_question_bank
from quiz_challenge.core.services.result_summary import SessionView, build_view
from quiz_challenge.core.services.session_transitions import (
    NextQuestion,
    Restart,
    SelectOption,
    SessionEvent,
    SubmitAnswer,
    Tick,
    apply_event,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState], None]


class TickTimer(Protocol):
    """Repeating timer resource that drives the countdown."""

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...

    def is_active(self) -> bool: ...


class QuizController:
    """Owns the session state and the countdown timer for one quiz widget."""

    def __init__(
        self,
        timer: TickTimer,
        questions: Iterable[Question] = DEFAULT_QUESTION_BANK,
    ) -> None:
        self._bank = validate_question_bank(questions)
        self._timer = timer
        self._state = initial_state()
        self._listeners: list[StateListener] = []
        self._timer_generation: int = 0
        self._start_countdown()

    # --- Inputs ---

    def select_option(self, option: str) -> None:
        self._dispatch(SelectOption(option))

    def submit_answer(self) -> None:
        self._dispatch(SubmitAnswer())

    def next_question(self) -> None:
        self._dispatch(NextQuestion())

    def restart(self) -> None:
        self._dispatch(Restart())

    def tick(self) -> None:
        self._dispatch(Tick())

    def shutdown(self) -> None:
        """Release the timer; further ticks from it are ignored."""
        self._stop_countdown()
        self._listeners.clear()

    # --- Outputs ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._bank

    def question_count(self) -> int:
        return len(self._bank)

    def current_question(self) -> Question:
        return self._bank[self._state.current_question_index]

    def current_feedback(self) -> AnswerFeedback | None:
        if self._state.phase is not QuizPhase.FEEDBACK:
            return None
        return self._state.feedback_by_question.get(self._state.current_question_index)

    def view(self) -> SessionView:
        return build_view(self._state, self._bank)

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Internals ---

    def _dispatch(self, event: SessionEvent) -> None:
        previous = self._state
        current = apply_event(previous, event, self._bank)
        if current is previous:
            return

        self._state = current
        left_answering = previous.phase is QuizPhase.ANSWERING and current.phase is not QuizPhase.ANSWERING
        entered_question = current.phase is QuizPhase.ANSWERING and (
            previous.phase is not QuizPhase.ANSWERING
            or isinstance(event, Restart)
            or current.current_question_index != previous.current_question_index
        )
        if left_answering:
            self._stop_countdown()
        if entered_question:
            self._start_countdown()
        if previous.phase is not current.phase:
            logger.info(
                "Phase %s -> %s at question %d.",
                previous.phase.name,
                current.phase.name,
                current.current_question_index,
            )
        self._notify()

    def _start_countdown(self) -> None:
        self._stop_countdown()
        generation = self._timer_generation
        self._timer.start(lambda: self._handle_timer_tick(generation))

    def _stop_countdown(self) -> None:
        # Bumping the generation invalidates callbacks from any earlier start.
        self._timer_generation += 1
        if self._timer.is_active():
            self._timer.stop()

    def _handle_timer_tick(self, generation: int) -> None:
        if generation != self._timer_generation:
            logger.debug("Discarding stale tick from timer generation %d.", generation)
            return
        self.tick()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
