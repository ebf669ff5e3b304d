"""Component showing the outcome of the question just submitted."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_challenge.constants.ui_constants import (
    FEEDBACK_TITLE,
    NEXT_QUESTION_BUTTON,
    SHOW_RESULTS_BUTTON,
)
from quiz_challenge.core.quiz_controller import QuizController
from quiz_challenge.core.services.result_summary import SessionView
from quiz_challenge.styling.color_palette import ColorPalette, Theme
from quiz_challenge.styling.styles import Styles
from quiz_challenge.ui.question_renderer import render_correct_answer


class FeedbackPanel(QFrame):
    """Displays the feedback message and the correct answer."""

    def __init__(self, controller: QuizController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.controller = controller
        self._font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(FEEDBACK_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.message_label)

        self.correct_answer_label = QLabel("", self)
        self.correct_answer_label.setTextFormat(Qt.RichText)
        self.correct_answer_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.correct_answer_label)

        self.next_button = QPushButton(NEXT_QUESTION_BUTTON, self)
        self.next_button.clicked.connect(self.controller.next_question)
        layout.addWidget(self.next_button, alignment=Qt.AlignCenter)

        layout.addStretch()

    def render(self, view: SessionView) -> None:
        feedback = view.feedback
        if feedback is None:
            return
        color = ColorPalette.SUCCESS if feedback.is_correct else ColorPalette.ERROR
        self.message_label.setText(feedback.message)
        self.message_label.setStyleSheet(Styles.get_status_label_style(color, self._theme, self._font_size))
        self.correct_answer_label.setText(render_correct_answer(feedback.correct_answer))
        self.next_button.setText(SHOW_RESULTS_BUTTON if view.is_final_question else NEXT_QUESTION_BUTTON)

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        self.title_label.setStyleSheet(f"font-size: {font_size + 4}pt; font-weight: bold;")
        self.correct_answer_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.next_button.setStyleSheet(f"font-size: {font_size}pt;")
