"""Settings dialog for configuring Quiz Challenge display preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSpinBox,
    QPushButton,
    QGroupBox,
    QCheckBox,
)

from quiz_challenge.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        game_font_size: int = 14,
        emphasize_final_seconds: bool = True,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(360)

        self._game_font_size = game_font_size
        self._emphasize_final_seconds = emphasize_final_seconds
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Size")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        game_font_row = QHBoxLayout()
        game_font_label = QLabel("Quiz Font Size (questions, feedback):")
        game_font_label.setToolTip("Font size for questions, options, feedback and results")
        self.game_font_spinbox = QSpinBox()
        self.game_font_spinbox.setRange(10, 32)
        self.game_font_spinbox.setValue(self._game_font_size)
        self.game_font_spinbox.setSuffix(" pt")
        game_font_row.addWidget(game_font_label)
        game_font_row.addStretch()
        game_font_row.addWidget(self.game_font_spinbox)
        font_layout.addLayout(game_font_row)

        layout.addWidget(font_group)

        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.emphasize_checkbox = QCheckBox("Highlight the countdown in the final seconds")
        self.emphasize_checkbox.setChecked(self._emphasize_final_seconds)
        display_layout.addWidget(self.emphasize_checkbox)

        self.dark_theme_checkbox = QCheckBox("Use dark theme")
        self.dark_theme_checkbox.setChecked(self._theme == Theme.DARK)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_game_font_size(self) -> int:
        """Get the selected quiz font size."""
        return self.game_font_spinbox.value()

    def get_emphasize_final_seconds(self) -> bool:
        """Get whether the countdown is highlighted near zero."""
        return self.emphasize_checkbox.isChecked()

    def get_theme(self) -> Theme:
        return Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT
