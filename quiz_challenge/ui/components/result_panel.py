"""Component for the final results screen."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_challenge.constants.ui_constants import (
    CELEBRATION_BANNER,
    CELEBRATION_SUFFIX,
    RESTART_BUTTON,
    RESULT_SCORE_TEMPLATE,
    RESULT_TITLE,
)
from quiz_challenge.core.services.result_summary import SessionView
from quiz_challenge.styling.color_palette import ColorPalette, Theme
from quiz_challenge.styling.styles import Styles


class ResultPanel(QFrame):
    """Shows the final score, its classification and a restart button."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.on_restart = on_restart
        self._font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.celebration_label = QLabel(CELEBRATION_BANNER, self)
        self.celebration_label.setAlignment(Qt.AlignCenter)
        self.celebration_label.setVisible(False)
        layout.addWidget(self.celebration_label)

        self.title_label = QLabel(RESULT_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.classification_label = QLabel("", self)
        self.classification_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.classification_label)

        self.restart_button = QPushButton(RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button, alignment=Qt.AlignCenter)

        layout.addStretch()

    def render(self, view: SessionView) -> None:
        self.score_label.setText(RESULT_SCORE_TEMPLATE.format(score=view.score, total=view.question_count))
        classification = view.classification or ""
        if view.celebrate:
            classification += CELEBRATION_SUFFIX
        color = ColorPalette.SUCCESS if view.celebrate else ColorPalette.WARNING
        self.classification_label.setText(classification)
        self.classification_label.setStyleSheet(
            Styles.get_status_label_style(color, self._theme, self._font_size)
        )
        self.celebration_label.setVisible(view.celebrate)

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        self.title_label.setStyleSheet(f"font-size: {font_size + 4}pt; font-weight: bold;")
        self.score_label.setStyleSheet(f"font-size: {font_size}pt; font-weight: 600;")
        self.celebration_label.setStyleSheet(f"font-size: {font_size * 2}pt;")
        self.restart_button.setStyleSheet(f"font-size: {font_size}pt;")
