"""Component for answering the current question against the countdown."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_challenge.constants.quiz_constants import (
    OPTIONS_PER_QUESTION,
    TIME_LIMIT_TICKING_WINDOW_SECONDS,
)
from quiz_challenge.constants.ui_constants import (
    QUESTION_PROGRESS_TEMPLATE,
    SUBMIT_BUTTON,
    TIME_REMAINING_TEMPLATE,
)
from quiz_challenge.core.quiz_controller import QuizController
from quiz_challenge.core.services.result_summary import SessionView
from quiz_challenge.styling.color_palette import Theme
from quiz_challenge.styling.styles import Styles
from quiz_challenge.ui.question_renderer import render_prompt


class QuestionPanel(QFrame):
    """Shows the prompt, the option buttons and the countdown."""

    def __init__(self, controller: QuizController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.controller = controller

        self._font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._emphasize_final_seconds: bool = True
        self._options: tuple[str, ...] = ()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Progress and countdown row
        status_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        status_row.addWidget(self.progress_label)
        status_row.addStretch()
        self.time_label = QLabel("", self)
        self.time_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        status_row.addWidget(self.time_label)
        layout.addLayout(status_row)

        self.time_progress = QProgressBar(self)
        self.time_progress.setRange(0, 1000)
        self.time_progress.setTextVisible(False)
        layout.addWidget(self.time_progress)

        self.prompt_label = QLabel("", self)
        self.prompt_label.setTextFormat(Qt.RichText)
        self.prompt_label.setWordWrap(True)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.prompt_label)

        self.option_buttons: list[QPushButton] = []
        for idx in range(OPTIONS_PER_QUESTION):
            button = QPushButton("", self)
            button.setObjectName("option")
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, idx=idx: self._handle_option_clicked(idx))
            self.option_buttons.append(button)
            layout.addWidget(button)

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.setObjectName("submit")
        self.submit_button.clicked.connect(self._handle_submit)
        layout.addWidget(self.submit_button, alignment=Qt.AlignCenter)

        layout.addStretch()

    def _handle_option_clicked(self, idx: int) -> None:
        if idx < len(self._options):
            self.controller.select_option(self._options[idx])

    def _handle_submit(self) -> None:
        self.controller.submit_answer()

    def render(self, view: SessionView) -> None:
        self._options = view.options
        self.progress_label.setText(
            QUESTION_PROGRESS_TEMPLATE.format(number=view.question_number, total=view.question_count)
        )
        self.prompt_label.setText(render_prompt(view.prompt, self._font_size))

        for idx, button in enumerate(self.option_buttons):
            option = view.options[idx] if idx < len(view.options) else ""
            button.setText(option)
            button.setVisible(bool(option))
            button.setChecked(bool(option) and option == view.selected_option)

        self.submit_button.setEnabled(view.selected_option is not None)
        self._render_countdown(view.time_remaining, view.time_fraction)

    def _render_countdown(self, seconds_left: int, fraction: float) -> None:
        self.time_label.setText(TIME_REMAINING_TEMPLATE.format(seconds=seconds_left))
        self.time_progress.setValue(int(fraction * 1000))
        emphasized = (
            self._emphasize_final_seconds
            and 0 < seconds_left <= TIME_LIMIT_TICKING_WINDOW_SECONDS
        )
        self.time_label.setStyleSheet(
            Styles.get_timer_style(
                self._theme,
                self._font_size,
                emphasized=emphasized,
                blink_state=(seconds_left % 2 == 0),
            )
        )

    def set_emphasize_final_seconds(self, enabled: bool) -> None:
        self._emphasize_final_seconds = enabled

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        game_label_style = f"font-size: {font_size}pt;"
        self.progress_label.setStyleSheet(game_label_style)
        for button in self.option_buttons:
            button.setStyleSheet(game_label_style)
        self.submit_button.setStyleSheet(game_label_style)
