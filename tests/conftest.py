"""
Общие фикстуры для всех тестов.
"""

import types

import pytest

from benchtimer.metrics import timers


class FakeClock:
    """Управляемая замена time.perf_counter()."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock(monkeypatch):
    """Фикстура, подменяющая часы в модуле таймеров."""
    fake = FakeClock()
    monkeypatch.setattr(timers, "time", types.SimpleNamespace(perf_counter=fake))
    return fake


@pytest.fixture
def make_operation(clock):
    """Фикстура-фабрика: операция, которая «длится» step секунд и считает вызовы."""

    def factory(step: float):
        calls = []

        def operation():
            calls.append(clock.now)
            clock.advance(step)

        operation.calls = calls
        return operation

    return factory
