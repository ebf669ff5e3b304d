"""Helper functions for common dialog patterns in the quiz UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from quiz_challenge.constants.ui_constants import CONFIRM_RESTART_MESSAGE, CONFIRM_RESTART_TITLE


def confirm_restart_quiz(parent: QWidget) -> bool:
    """Show confirmation dialog for abandoning the current attempt.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        CONFIRM_RESTART_TITLE,
        CONFIRM_RESTART_MESSAGE,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Show error dialog."""
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show information dialog."""
    QMessageBox.information(parent, title, message)
