"""Application entry point for Quiz Challenge."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_challenge.core.question_bank import DEFAULT_QUESTION_BANK, QuestionBankError
from quiz_challenge.core.quiz_controller import QuizController
from quiz_challenge.ui.countdown_timer import CountdownTimer
from quiz_challenge.ui.dialog_helpers import show_error
from quiz_challenge.ui.quiz_main_window import QuizMainWindow
from quiz_challenge.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the quiz controller, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Quiz Challenge…")

    app = QApplication(sys.argv)
    timer = CountdownTimer(app)
    try:
        controller = QuizController(timer=timer, questions=DEFAULT_QUESTION_BANK)
    except QuestionBankError as exc:
        logger.error("Question bank rejected: %s", exc)
        show_error(None, "Quiz unavailable", str(exc))
        sys.exit(1)

    logger.info("Loaded %d questions.", controller.question_count())
    window = QuizMainWindow(controller=controller)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
