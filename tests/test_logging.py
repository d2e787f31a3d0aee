"""Tests for logging setup."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from todolist.config import Settings
from todolist.logging import LOGGER_NAME, level_for, setup_logging


@pytest.fixture(autouse=True)
def logger() -> Iterator[logging.Logger]:
    """Drop handlers installed by setup_logging after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield logger
    setup_logging(Settings(verbose=0, log_file=None))
    logger.setLevel(level)


def stream_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


class TestLevelFor:
    def test_levels(self):
        assert level_for(0) == logging.INFO
        assert level_for(1) == logging.INFO
        assert level_for(2) == logging.DEBUG
        assert level_for(5) == logging.DEBUG


class TestSetupLogging:
    def test_disabled_by_default(self, logger: logging.Logger):
        """No verbosity and no file means no handlers."""
        assert setup_logging(Settings(verbose=0, log_file=None)) is None
        assert logger.handlers == []

    def test_verbose_adds_stderr_handler(self, logger: logging.Logger):
        result = setup_logging(Settings(verbose=1, log_file=None))

        assert result is logger
        assert logger.level == logging.INFO
        assert len(stream_handlers(logger)) == 1

    def test_double_verbose_is_debug(self, logger: logging.Logger):
        setup_logging(Settings(verbose=2, log_file=None))
        assert logger.level == logging.DEBUG

    def test_second_call_replaces_handlers(self, logger: logging.Logger):
        """Calling twice does not stack duplicate handlers."""
        setup_logging(Settings(verbose=1, log_file=None))
        setup_logging(Settings(verbose=2, log_file=None))

        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG

    def test_turning_off_removes_handlers(self, logger: logging.Logger):
        setup_logging(Settings(verbose=1, log_file=None))
        setup_logging(Settings(verbose=0, log_file=None))
        assert logger.handlers == []

    def test_log_file_written(self, tmp_path: Path, logger: logging.Logger):
        """File logging works without verbosity and creates parent dirs."""
        log_file = tmp_path / "logs" / "todo.log"

        setup_logging(Settings(verbose=0, log_file=log_file))
        logging.getLogger("todolist.services").info("hello from test")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "todolist 0.1.0 starting" in content
        assert str(log_file) in content
        assert "hello from test" in content
        assert stream_handlers(logger) == []
