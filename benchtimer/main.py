from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Any, Callable, List, Optional

from benchtimer.config import (
    DEFAULT_TARGET_SECONDS,
    TimerConfig,
    TimerStyle,
)
from benchtimer.utils.logging import format_timer_prefix, setup_logger


def resolve_target(spec: str) -> Callable[[], Any]:
    """
    Находит функцию по строке вида ``module:function``.

    Имя после двоеточия может содержать точки (``datetime:datetime.now``).

    Raises:
        ValueError: Если строка некорректна, модуль или атрибут не найден,
            либо найденный объект нельзя вызвать
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected 'module:function', got {spec!r}")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import module {module_name!r}: {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ValueError(f"{spec!r} has no attribute {attr!r}") from e

    if not callable(obj):
        raise ValueError(f"{spec!r} is not callable")
    return obj


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchtimer",
        description="Оценка среднего времени вызова функции без аргументов.",
    )
    parser.add_argument(
        "target",
        type=str,
        help="Функция для замеров в виде module:function.",
    )
    parser.add_argument(
        "--label",
        type=str,
        default=None,
        help="Название таймера в выводе (по умолчанию — target).",
    )
    parser.add_argument(
        "--style",
        type=str,
        choices=[s.value for s in TimerStyle],
        default=TimerStyle.SIMPLE.value,
        help="Оформление результата (simple или big).",
    )
    parser.add_argument(
        "--target-seconds",
        type=float,
        default=DEFAULT_TARGET_SECONDS,
        help="Целевое суммарное время замеров в секундах "
        "(не более 100 запусков, минимум один).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Печатать отладочные сообщения калибровки в stderr.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Результат идёт в stdout, сообщения логгера — в stderr
    logger = setup_logger(
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
    )

    try:
        operation = resolve_target(args.target)
    except ValueError as e:
        parser.error(str(e))

    config = TimerConfig(
        label=args.label or args.target,
        style=TimerStyle(args.style),
        target_seconds=args.target_seconds,
    )

    stopwatch = config.make_stopwatch(logger=logger)
    logger.debug(
        f"{format_timer_prefix(config.label)} Calibrating for "
        f"{config.target_seconds:.3f}s"
    )
    result = stopwatch.calibrate(operation, config.target_seconds)
    print(stopwatch.formatter(stopwatch.label, result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
