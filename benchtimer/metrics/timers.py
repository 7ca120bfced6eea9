"""
Таймеры для измерения и печати времени выполнения.

Модуль предоставляет секундомер Stopwatch, который запоминает момент
создания и по запросу печатает прошедшее время, а также умеет
калибровать стоимость одного вызова функции повторными запусками.
AutoStopwatch печатает результат при выходе из блока with.

Все измерения используют time.perf_counter().
"""
from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, TextIO

from benchtimer.config import (
    DEFAULT_LABEL,
    DEFAULT_TARGET_SECONDS,
    MAX_TRIES,
    TimerStyle,
)
from benchtimer.metrics import formatting
from benchtimer.metrics.formatting import Formatter
from benchtimer.utils.logging import format_timer_prefix


def _resolve_formatter(formatter: Formatter | TimerStyle | str) -> Formatter:
    """
    Приводит функцию печати, стиль или имя стиля к функции печати.

    Raises:
        ValueError: Если имя стиля неизвестно
    """
    if isinstance(formatter, str):
        # TimerStyle тоже str, поэтому TimerStyle(TimerStyle.BIG) вернёт сам член
        return TimerStyle(formatter).formatter
    return formatter


@dataclass(frozen=True)
class CalibrationResult:
    """Итог калибровки: суммарное время и число выполненных вызовов."""

    total_seconds: float
    tries: int

    @property
    def per_try_seconds(self) -> float:
        return self.total_seconds / self.tries

    def __str__(self) -> str:
        return (
            f"{formatting.format_duration(self.per_try_seconds)} "
            f"for {self.tries} tries"
        )


class Stopwatch:
    """
    Секундомер, запущенный в момент создания.

    Пример использования:
        sw = Stopwatch("load")
        load_data()
        print(sw)  # load: 12.346 ms

    Экземпляр не потокобезопасен.
    """

    def __init__(
        self,
        label: str = DEFAULT_LABEL,
        formatter: Formatter | TimerStyle | str = formatting.simple,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Args:
            label: Название таймера в выводе
            formatter: Функция печати (label, time) -> str либо имя стиля
                ("simple", "big")
            logger: Логгер для отладочных сообщений калибровки

        Raises:
            ValueError: Если имя стиля неизвестно
        """
        self._label = label
        self._formatter: Formatter = _resolve_formatter(formatter)
        self.logger = logger
        self._start: float = time.perf_counter()

    @property
    def label(self) -> str:
        return self._label

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    @property
    def start(self) -> float:
        """Момент начала отсчёта (значение time.perf_counter())."""
        return self._start

    @property
    def elapsed(self) -> float:
        """Время в секундах, прошедшее с момента start."""
        return time.perf_counter() - self._start

    def format_duration(self, seconds: float) -> str:
        """Длительность в секундах в виде строки с единицей измерения."""
        return formatting.format_duration(seconds)

    def render(self) -> str:
        """Строка с прошедшим временем, оформленная функцией печати."""
        return self._formatter(self._label, self.format_duration(self.elapsed))

    def measure(
        self,
        operation: Callable[[], Any],
        target_seconds: float = DEFAULT_TARGET_SECONDS,
    ) -> CalibrationResult:
        """
        Повторяет operation, пока суммарное время не достигнет target_seconds.

        Функция вызывается хотя бы один раз и не более MAX_TRIES раз.
        Отсчёт ведётся от собственной точки старта, поэтому start
        секундомера не меняется. Исключения из operation не перехватываются.

        Args:
            operation: Функция без аргументов
            target_seconds: Целевое суммарное время в секундах

        Returns:
            CalibrationResult с суммарным временем и числом вызовов
        """
        begin = time.perf_counter()
        tries = 0
        while True:
            operation()
            tries += 1
            total = time.perf_counter() - begin
            if tries >= MAX_TRIES or total >= target_seconds:
                break

        result = CalibrationResult(total_seconds=total, tries=tries)
        if self.logger:
            self.logger.debug(
                f"{format_timer_prefix(self._label)} Calibration: "
                f"tries={tries}, total={total:.6f}s, "
                f"target={target_seconds:.6f}s"
            )
        return result

    def calibrate(
        self,
        operation: Callable[[], Any],
        target_seconds: float = DEFAULT_TARGET_SECONDS,
    ) -> str:
        """Среднее время одного вызова operation, например "12.3 ms for 45 tries"."""
        return str(self.measure(operation, target_seconds))

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        return format(self.render(), format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self._label!r}, elapsed={self.elapsed:.6f})"


class AutoStopwatch:
    """
    Секундомер, который печатает результат при выходе из блока.

    Пример использования:
        with AutoStopwatch("fit"):
            model.fit(X)
        # fit: 1.2346 s

    Вместо with можно явно вызвать close(). Печать выполняется ровно
    один раз, повторные close() ничего не делают.
    """

    def __init__(
        self,
        label: str = DEFAULT_LABEL,
        formatter: Formatter | TimerStyle | str = formatting.simple,
        logger: logging.Logger | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.stopwatch = Stopwatch(label, formatter, logger=logger)
        # None означает sys.stdout на момент печати
        self._stream = stream
        self._closed = False

    @property
    def label(self) -> str:
        return self.stopwatch.label

    @property
    def formatter(self) -> Formatter:
        return self.stopwatch.formatter

    @property
    def start(self) -> float:
        return self.stopwatch.start

    @property
    def elapsed(self) -> float:
        return self.stopwatch.elapsed

    @property
    def closed(self) -> bool:
        return self._closed

    def render(self) -> str:
        return self.stopwatch.render()

    def measure(
        self,
        operation: Callable[[], Any],
        target_seconds: float = DEFAULT_TARGET_SECONDS,
    ) -> CalibrationResult:
        return self.stopwatch.measure(operation, target_seconds)

    def calibrate(
        self,
        operation: Callable[[], Any],
        target_seconds: float = DEFAULT_TARGET_SECONDS,
    ) -> str:
        return self.stopwatch.calibrate(operation, target_seconds)

    def close(self) -> None:
        """Печатает результат в поток вывода, если это ещё не сделано."""
        if self._closed:
            return
        self._closed = True
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(self.render() + "\n")
        stream.flush()

    def __enter__(self) -> AutoStopwatch:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        return format(self.render(), format_spec)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(label={self.label!r}, "
            f"elapsed={self.elapsed:.6f}, closed={self._closed})"
        )
