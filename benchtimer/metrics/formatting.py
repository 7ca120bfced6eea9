"""
Форматирование длительностей для вывода таймеров.

Модуль переводит время в секундах в строку с подходящей единицей
измерения (ns, us, ms, s) и предоставляет встроенные функции печати
для таймеров: простую строку и «баннер» с рамкой.
"""

from __future__ import annotations

from typing import Callable

# Функция печати: (название таймера, строка времени) -> итоговая строка
Formatter = Callable[[str, str], str]

BORDER = "-" * 41


def format_duration(seconds: float) -> str:
    """
    Форматирует длительность с точностью 5 значащих цифр.

    Единица выбирается по строгим порогам: < 1e-6 — ns, < 1e-3 — us,
    < 1 — ms, иначе s. Ровно 1e-6 секунд печатается в микросекундах.

    Args:
        seconds: Длительность в секундах

    Returns:
        Строка вида "12.346 ms"
    """
    if seconds < 1e-6:
        return _with_unit(seconds * 1e9, "ns")
    elif seconds < 1e-3:
        return _with_unit(seconds * 1e6, "us")
    elif seconds < 1:
        return _with_unit(seconds * 1e3, "ms")
    return _with_unit(seconds, "s")


def _with_unit(value: float, unit: str) -> str:
    return f"{value:.5g} {unit}"


def simple(label: str, time: str) -> str:
    """Стандартная функция печати: "label: time"."""
    return f"{label}: {time}"


def big(label: str, time: str) -> str:
    """Функция печати с рамкой из дефисов сверху и снизу."""
    return "\n".join([BORDER, f"| {label} | Time = {time}", BORDER])
