"""
Секундомер для быстрых замеров производительности.
"""

from .config import TimerConfig, TimerStyle
from .metrics import (
    AutoStopwatch,
    CalibrationResult,
    Stopwatch,
    big,
    format_duration,
    simple,
)

__all__ = [
    "AutoStopwatch",
    "CalibrationResult",
    "Stopwatch",
    "TimerConfig",
    "TimerStyle",
    "big",
    "format_duration",
    "simple",
]
