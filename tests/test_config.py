import pytest

from lottery import config
from lottery.config import (
    DevelopmentConfig,
    ProductionConfig,
    config_mapping,
    get_config,
    parse_prize_schedule,
    resolve_num_balls,
    resolve_random_seed,
)
from lottery.errors import InvalidPrizeSchedule
from lottery.runtime import build_machine
from lottery.services.lottery_machine import DEFAULT_PRIZE_SCHEDULE


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_blank_schedule_means_default(raw):
    assert parse_prize_schedule(raw) == DEFAULT_PRIZE_SCHEDULE


def test_parse_schedule_tolerates_spaces_and_trailing_comma():
    assert parse_prize_schedule(" 0.5, 0.3 ,0.2,") == (0.5, 0.3, 0.2)


def test_parse_schedule_rejects_non_numbers():
    with pytest.raises(InvalidPrizeSchedule) as excinfo:
        parse_prize_schedule("0.5,half")
    assert excinfo.value.code == "invalid_prize_schedule"


@pytest.mark.parametrize(("raw", "expected"), [(None, 50), ("10", 10), ("many", 50)])
def test_resolve_num_balls(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("LOTTERY_NUM_BALLS", raising=False)
    else:
        monkeypatch.setenv("LOTTERY_NUM_BALLS", raw)
    assert resolve_num_balls() == expected


@pytest.mark.parametrize(("raw", "expected"), [(None, None), ("42", 42), ("x", None)])
def test_resolve_random_seed(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("LOTTERY_RANDOM_SEED", raising=False)
    else:
        monkeypatch.setenv("LOTTERY_RANDOM_SEED", raw)
    assert resolve_random_seed() == expected


def test_get_config_by_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "Production ")
    assert get_config() is ProductionConfig
    monkeypatch.setenv("APP_ENV", "staging")
    assert get_config() is DevelopmentConfig


def test_config_mapping_keeps_uppercase_settings():
    mapping = config_mapping(DevelopmentConfig)
    assert mapping["DEBUG"] is True
    assert "LOTTERY_PRIZE_SCHEDULE" in mapping
    assert all(key.isupper() for key in mapping)


def test_build_machine_from_mapping():
    machine = build_machine(
        {"LOTTERY_PRIZE_SCHEDULE": "0.6,0.4", "LOTTERY_NUM_BALLS": 10, "LOTTERY_RANDOM_SEED": 1}
    )
    assert machine.prize_schedule == (0.6, 0.4)
    assert machine.num_balls == 10
    assert all(1 <= n <= 10 for n in machine.draw())


def test_seeded_machines_draw_alike():
    settings = {"LOTTERY_RANDOM_SEED": 99}
    assert build_machine(settings).draw() == build_machine(settings).draw()


def test_build_machine_rejects_bad_schedule():
    with pytest.raises(InvalidPrizeSchedule):
        build_machine({"LOTTERY_PRIZE_SCHEDULE": "0.5,0.2"})


def test_config_module_exposes_classes():
    assert issubclass(config.ProductionConfig, config.BaseConfig)


@pytest.mark.parametrize("num_balls", [0, -3])
def test_build_machine_keeps_explicit_ball_count(num_balls):
    with pytest.raises(InvalidPrizeSchedule) as excinfo:
        build_machine({"LOTTERY_NUM_BALLS": num_balls})
    assert excinfo.value.message == "Invalid ball count"


def test_build_machine_defaults_missing_ball_count():
    assert build_machine({}).num_balls == 50
