from .formatting import Formatter, format_duration, simple, big
from .timers import Stopwatch, AutoStopwatch, CalibrationResult

__all__ = [
    "Formatter",
    "format_duration",
    "simple",
    "big",
    "Stopwatch",
    "AutoStopwatch",
    "CalibrationResult",
]
