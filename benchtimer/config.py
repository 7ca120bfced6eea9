from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from benchtimer.metrics.formatting import Formatter
    from benchtimer.metrics.timers import AutoStopwatch, Stopwatch

DEFAULT_LABEL = "Timer"
DEFAULT_TARGET_SECONDS = 1.0

# Верхняя граница числа вызовов в цикле калибровки
MAX_TRIES = 100


class TimerStyle(str, Enum):
    SIMPLE = "simple"
    BIG = "big"

    @property
    def formatter(self) -> Formatter:
        """Встроенная функция печати с тем же именем, что и стиль."""
        from benchtimer.metrics import formatting

        return getattr(formatting, self.value)


@dataclass
class TimerConfig:
    label: str = DEFAULT_LABEL
    style: TimerStyle = TimerStyle.SIMPLE
    target_seconds: float = DEFAULT_TARGET_SECONDS

    def make_stopwatch(self, logger: logging.Logger | None = None) -> Stopwatch:
        from benchtimer.metrics.timers import Stopwatch

        return Stopwatch(self.label, self.style, logger=logger)

    def make_auto_stopwatch(
        self,
        logger: logging.Logger | None = None,
        stream: TextIO | None = None,
    ) -> AutoStopwatch:
        from benchtimer.metrics.timers import AutoStopwatch

        return AutoStopwatch(self.label, self.style, logger=logger, stream=stream)
