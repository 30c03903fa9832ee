"""Unit tests for functions defined in src/log.py."""

import logging

import pytest

from log import LOG_LEVEL_ENV_VAR, get_logger


def test_get_logger():
    """Check the function to retrieve logger."""
    logger_name = "foo"
    logger = get_logger(logger_name)
    assert logger is not None
    assert logger.name == logger_name

    # at least one handler need to be set
    assert len(logger.handlers) >= 1


def test_get_logger_default_level(monkeypatch: pytest.MonkeyPatch):
    """Check that everything is logged by default."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    logger = get_logger("foo")
    assert logger.level == logging.DEBUG


@pytest.mark.parametrize(
    "value, expected",
    [("warning", logging.WARNING), ("ERROR", logging.ERROR), ("foo", logging.DEBUG)],
)
def test_get_logger_level_from_environment(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int
):
    """Check that log level can be overridden by environment variable."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    logger = get_logger("foo")
    assert logger.level == expected
