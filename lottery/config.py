"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from lottery.errors import InvalidPrizeSchedule
from lottery.services.lottery_machine import DEFAULT_PRIZE_SCHEDULE, NUM_BALLS


def parse_prize_schedule(raw: str | None) -> tuple[float, ...]:
    """Parse ``"0.75,0.15,0.10"`` into weights.

    Blank input means the default schedule. Whether the weights add up is
    checked when the machine is built.
    """

    if raw is None or not raw.strip():
        return DEFAULT_PRIZE_SCHEDULE

    weights: list[float] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            weights.append(float(token))
        except ValueError as exc:
            raise InvalidPrizeSchedule(
                message="Invalid LOTTERY_PRIZE_SCHEDULE",
                details={"prize_schedule": [f"Not a number: {token!r}"]},
            ) from exc
    return tuple(weights)


def resolve_num_balls() -> int:
    raw = os.getenv("LOTTERY_NUM_BALLS")
    try:
        return int(raw) if raw else NUM_BALLS
    except ValueError:
        return NUM_BALLS


def resolve_random_seed() -> int | None:
    raw = os.getenv("LOTTERY_RANDOM_SEED")
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    LOTTERY_NUM_BALLS: int = resolve_num_balls()
    LOTTERY_PRIZE_SCHEDULE: str = os.getenv("LOTTERY_PRIZE_SCHEDULE", "")
    LOTTERY_RANDOM_SEED: int | None = resolve_random_seed()


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def config_mapping(config: type[BaseConfig]) -> dict[str, Any]:
    """Uppercase settings of a config class, like ``Flask.config.from_object``."""

    return {key: getattr(config, key) for key in dir(config) if key.isupper()}


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
