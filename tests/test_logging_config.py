"""Tests for logging configuration."""

import logging

from quiz_challenge.utils.logging_config import LOG_LEVEL_ENV_VAR, configure_logging


def test_returns_package_logger():
    logger = configure_logging("info")
    assert logger.name == "quiz_challenge"
    assert logger.level == logging.INFO


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
    logger = configure_logging()
    assert logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    logger = configure_logging("chatty")
    assert logger.level == logging.INFO
