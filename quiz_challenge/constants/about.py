"""Static metadata describing Quiz Challenge."""

APP_NAME = "Quiz Challenge"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quiz Challenge is a small desktop quiz built with Qt. "
    "Answer ten multiple-choice questions, each against a 15 second countdown, "
    "and see how you scored at the end."
)
