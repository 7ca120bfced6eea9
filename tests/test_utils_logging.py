"""
Тесты настройки логгера.
"""

import io
import logging

import pytest

from benchtimer.utils.logging import format_timer_prefix, setup_logger


@pytest.fixture
def logger_name():
    name = "benchtimer-test-logger"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


class TestSetupLogger:
    def test_writes_to_stream(self, logger_name):
        stream = io.StringIO()
        logger = setup_logger(logger_name, logging.DEBUG, stream=stream)
        logger.debug("calibrating")
        assert logger.name == logger_name
        assert logger.propagate is False
        assert "DEBUG: calibrating" in stream.getvalue()

    def test_level_filters(self, logger_name):
        stream = io.StringIO()
        logger = setup_logger(logger_name, logging.INFO, stream=stream)
        logger.debug("hidden")
        assert stream.getvalue() == ""

    def test_repeated_setup_replaces_stream(self, logger_name):
        """Повторный вызов не дублирует обработчик и меняет поток."""
        first, second = io.StringIO(), io.StringIO()
        setup_logger(logger_name, stream=first)
        logger = setup_logger(logger_name, stream=second)
        logger.info("once")
        assert len(logger.handlers) == 1
        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1

    def test_default_stream_is_stderr(self, logger_name, capsys):
        setup_logger(logger_name).warning("to stderr")
        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert captured.out == ""


def test_format_timer_prefix():
    assert format_timer_prefix("load") == "[timer=load]"
