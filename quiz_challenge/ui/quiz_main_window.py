"""Qt main window hosting the answering, feedback and results screens."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_challenge.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
)
from quiz_challenge.constants.ui_constants import (
    DEFAULT_WINDOW_SIZE,
    FOOTER_TEXT,
    HEADER_TEXT,
    MENU_ABOUT,
    MENU_QUIT,
    MENU_QUIZ,
    MENU_RESTART,
    MENU_SETTINGS,
    WINDOW_TITLE,
)
from quiz_challenge.core.models import QuizPhase, SessionState
from quiz_challenge.core.quiz_controller import QuizController
from quiz_challenge.styling.color_palette import Theme
from quiz_challenge.styling.styles import Styles
from quiz_challenge.ui.components.feedback_panel import FeedbackPanel
from quiz_challenge.ui.components.question_panel import QuestionPanel
from quiz_challenge.ui.components.result_panel import ResultPanel
from quiz_challenge.ui.dialog_helpers import confirm_restart_quiz, show_info
from quiz_challenge.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class QuizMainWindow(QMainWindow):
    """Main Qt window switching between the three quiz phases."""

    def __init__(self, controller: QuizController) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*DEFAULT_WINDOW_SIZE)

        self.controller = controller

        self._game_font_size: int = 14
        self._emphasize_final_seconds: bool = True
        self._theme: Theme = Theme.LIGHT

        self._build_ui()
        self._build_menu()
        self._apply_styles()
        self.controller.add_listener(self._handle_state_changed)
        self._refresh()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.header_label = QLabel(HEADER_TEXT, self)
        self.header_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.header_label)

        self.phase_stack = QStackedWidget(self)
        self.question_panel = QuestionPanel(self.controller, self)
        self.feedback_panel = FeedbackPanel(self.controller, self)
        self.result_panel = ResultPanel(on_restart=self.controller.restart, parent=self)

        self.phase_stack.addWidget(self.question_panel)
        self.phase_stack.addWidget(self.feedback_panel)
        self.phase_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.phase_stack, stretch=1)

        self.footer_label = QLabel(FOOTER_TEXT, self)
        self.footer_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.footer_label)

    def _build_menu(self) -> None:
        quiz_menu = self.menuBar().addMenu(MENU_QUIZ)

        self.restart_action = QAction(MENU_RESTART, self)
        self.restart_action.setShortcut(QKeySequence("Ctrl+R"))
        self.restart_action.triggered.connect(self._handle_restart_requested)
        quiz_menu.addAction(self.restart_action)

        settings_action = QAction(MENU_SETTINGS, self)
        settings_action.triggered.connect(self._handle_settings)
        quiz_menu.addAction(settings_action)

        about_action = QAction(MENU_ABOUT, self)
        about_action.triggered.connect(self._handle_about)
        quiz_menu.addAction(about_action)

        quiz_menu.addSeparator()
        quit_action = QAction(MENU_QUIT, self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        quiz_menu.addAction(quit_action)

    def _handle_state_changed(self, _state: SessionState) -> None:
        self._refresh()

    def _refresh(self) -> None:
        view = self.controller.view()
        index_map = {
            QuizPhase.ANSWERING: 0,
            QuizPhase.FEEDBACK: 1,
            QuizPhase.COMPLETED: 2,
        }
        if view.phase is QuizPhase.ANSWERING:
            self.question_panel.render(view)
        elif view.phase is QuizPhase.FEEDBACK:
            self.feedback_panel.render(view)
        else:
            self.result_panel.render(view)
        self.phase_stack.setCurrentIndex(index_map[view.phase])

    def _handle_restart_requested(self) -> None:
        state = self.controller.state
        in_progress = state.phase is not QuizPhase.COMPLETED and (
            state.current_question_index > 0 or state.feedback_by_question or state.selected_option
        )
        if in_progress and not confirm_restart_quiz(self):
            return
        self.controller.restart()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._game_font_size,
            self._emphasize_final_seconds,
            self._theme,
        )
        if dialog.exec():
            self._game_font_size = dialog.get_game_font_size()
            self._emphasize_final_seconds = dialog.get_emphasize_final_seconds()
            self._theme = dialog.get_theme()
            logger.info(
                "Settings applied: font=%dpt emphasize=%s theme=%s",
                self._game_font_size,
                self._emphasize_final_seconds,
                self._theme.name,
            )
            self._apply_styles()
            self._refresh()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.header_label.setStyleSheet(Styles.get_header_style(self._theme))
        self.footer_label.setStyleSheet(Styles.get_footer_style(self._theme))

        self.question_panel.set_theme(self._theme)
        self.question_panel.set_emphasize_final_seconds(self._emphasize_final_seconds)
        self.question_panel.apply_font_size(self._game_font_size)
        self.feedback_panel.set_theme(self._theme)
        self.feedback_panel.apply_font_size(self._game_font_size)
        self.result_panel.set_theme(self._theme)
        self.result_panel.apply_font_size(self._game_font_size)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        self.controller.remove_listener(self._handle_state_changed)
        self.controller.shutdown()
        super().closeEvent(event)
