"""Qt UI components for the quiz widget."""

from .countdown_timer import CountdownTimer
from .dialog_helpers import confirm_restart_quiz, show_error, show_info
from .question_renderer import render_correct_answer, render_prompt
from .quiz_main_window import QuizMainWindow

__all__ = [
    "CountdownTimer",
    "QuizMainWindow",
    "confirm_restart_quiz",
    "render_correct_answer",
    "render_prompt",
    "show_error",
    "show_info",
]
