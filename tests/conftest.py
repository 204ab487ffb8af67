from __future__ import annotations

from collections.abc import Iterable

import pytest

from lottery import create_app
from lottery.services.lottery_machine import LotteryMachine


class ScriptedRandom:
    """Random source that hands out a fixed sequence of numbers."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        try:
            value = next(self._values)
        except StopIteration:
            raise AssertionError("ScriptedRandom ran out of numbers") from None
        assert a <= value <= b, f"scripted value {value} outside {a}..{b}"
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def make_machine():
    def _make(values: Iterable[int] = (), **kwargs) -> LotteryMachine:
        return LotteryMachine(rng=ScriptedRandom(values), **kwargs)

    return _make


@pytest.fixture
def make_client():
    def _make(values: Iterable[int] = (), **config):
        settings = {"LOTTERY_NUM_BALLS": 50, "LOTTERY_PRIZE_SCHEDULE": "", **config}
        app = create_app({"TESTING": True, "LOTTERY_RANDOM_SOURCE": ScriptedRandom(values), **settings})
        return app.test_client()

    return _make
