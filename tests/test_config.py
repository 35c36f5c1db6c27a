"""Tests for GrowConfig validation."""

import pytest

from marrow_grow import GrowConfig


def test_defaults():
    cfg = GrowConfig()
    assert cfg.speeds == (1, 2, 3)
    assert cfg.water_times == (2, 3, 4)
    assert cfg.period(1) == 1.0
    assert cfg.period(2) == 0.5


def test_frozen():
    cfg = GrowConfig()
    with pytest.raises(AttributeError):
        cfg.hazard_chance = 0.5  # type: ignore[misc]


@pytest.mark.parametrize("kwargs", [
    {"base_interval": 0},
    {"speeds": ()},
    {"speeds": (1, 0)},
    {"water_times": (2, -1, 4)},
    {"hazard_chance": 1.5},
    {"light_failure_chance": -0.1},
    {"optimal_band": (95.0, 30.0)},
    {"penalty_percent": (15, 5)},
    {"log_size": 0},
])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        GrowConfig(**kwargs)
