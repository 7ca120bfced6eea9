"""
Тесты конфигурации таймеров.
"""

import io

import pytest

from benchtimer.config import DEFAULT_LABEL, TimerConfig, TimerStyle
from benchtimer.metrics.formatting import big, simple
from benchtimer.metrics.timers import AutoStopwatch, Stopwatch


class TestTimerStyle:
    def test_formatters(self):
        assert TimerStyle.SIMPLE.formatter is simple
        assert TimerStyle("big").formatter is big

    def test_unknown(self):
        with pytest.raises(ValueError):
            TimerStyle("boxed")


class TestTimerConfig:
    def test_defaults(self):
        config = TimerConfig()
        assert config.label == DEFAULT_LABEL == "Timer"
        assert config.style is TimerStyle.SIMPLE
        assert config.target_seconds == 1.0

    def test_make_stopwatch(self, clock):
        sw = TimerConfig(label="run", style=TimerStyle.BIG).make_stopwatch()
        assert isinstance(sw, Stopwatch)
        assert sw.label == "run"
        assert sw.formatter is big

    def test_make_auto_stopwatch(self, clock):
        stream = io.StringIO()
        with TimerConfig(label="run").make_auto_stopwatch(stream=stream) as sw:
            clock.advance(2.5)
        assert isinstance(sw, AutoStopwatch)
        assert stream.getvalue() == "run: 2.5 s\n"
