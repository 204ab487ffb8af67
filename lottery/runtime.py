"""Lottery machine lifecycle for the Flask app.

One machine per application, shared by every request.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask, current_app

from lottery.config import parse_prize_schedule
from lottery.services.lottery_machine import NUM_BALLS, LotteryMachine
from lottery.services.random_source import default_random_source


def build_machine(config: Mapping[str, Any]) -> LotteryMachine:
    """Build a machine from ``LOTTERY_*`` config values.

    Raises ``InvalidPrizeSchedule`` when the configured schedule is unusable.
    """

    schedule = parse_prize_schedule(config.get("LOTTERY_PRIZE_SCHEDULE"))
    num_balls = config.get("LOTTERY_NUM_BALLS")
    num_balls = NUM_BALLS if num_balls is None else int(num_balls)
    rng = config.get("LOTTERY_RANDOM_SOURCE")
    if rng is None:
        rng = default_random_source(config.get("LOTTERY_RANDOM_SEED"))
    return LotteryMachine(schedule, num_balls=num_balls, rng=rng)


def init_machine(app: Flask) -> None:
    """Create the application's machine and register it as an extension."""

    app.extensions["lottery_machine"] = build_machine(app.config)


def get_machine() -> LotteryMachine:
    """Get the current application's lottery machine."""

    machine: LotteryMachine | None = current_app.extensions.get("lottery_machine")
    if machine is None:
        raise RuntimeError("Lottery machine not initialized")
    return machine
