"""Pure numeric rules for drain, feeding, stress, health, lighting and scoring.

Nothing here touches engine state; every helper takes plain values (and a
random source where a roll is involved) so each rule can be checked alone.
"""
from __future__ import annotations

import math
import random as _random

from marrow_grow.config import GrowConfig


def clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, value))


def drain(level: float, rate: float, speed: int) -> float:
    """Subtract ``rate * speed`` from *level*, flooring at zero."""
    return max(0.0, level - rate * speed)


def feed_interval(stage_duration: int, water_times: int) -> int:
    return max(1, stage_duration // water_times)


def is_feed_tick(ticks_in_stage: int, interval: int) -> bool:
    return ticks_in_stage % interval == 0


def out_of_band(value: float, band: tuple[float, float]) -> bool:
    lo, hi = band
    return value < lo or value > hi


def stress_delta(water: float, nutrients: float, light: float, config: GrowConfig) -> float:
    """Stress change for one tick.

    Each of {water off-band, nutrients off-band, low light} adds one step.
    When none hold, stress relaxes by one step instead.
    """
    hits = sum((
        out_of_band(water, config.optimal_band),
        out_of_band(nutrients, config.optimal_band),
        light < config.low_light,
    ))
    if hits == 0:
        return -config.stress_step
    return hits * config.stress_step


def health_penalty(water: float, nutrients: float, stress: float, config: GrowConfig) -> float:
    hits = sum((
        out_of_band(water, config.optimal_band),
        out_of_band(nutrients, config.optimal_band),
        stress > config.stress_critical,
    ))
    return hits * config.health_step


def light_off_effects(seconds_off: float, config: GrowConfig) -> tuple[float, float]:
    """Return ``(light_ceiling, health_drain)`` after *seconds_off* in the dark."""
    seconds_off = max(0.0, seconds_off)
    ceiling = max(0.0, 100.0 - seconds_off * config.light_decay_per_second)
    drain_rate = min(
        config.light_health_drain_max,
        config.light_health_drain_base + seconds_off / config.light_health_drain_window,
    )
    return ceiling, drain_rate


def penalty_factor(percent: float) -> float:
    return 1.0 - percent / 100.0


def average_health(health_sum: float, health_ticks: int) -> float:
    """Mean recorded health as a fraction of 100; 1.0 when nothing was recorded."""
    if health_ticks <= 0:
        return 1.0
    return health_sum / health_ticks / 100.0


def roll_potency(rng: _random.Random, config: GrowConfig) -> float:
    lo, hi = config.potency_base
    base = rng.uniform(lo, hi)
    if rng.random() < config.potency_high_chance:
        lo, hi = config.potency_high
        base = rng.uniform(lo, hi)
    return base


def roll_yield(rng: _random.Random, config: GrowConfig) -> float:
    lo, hi = config.yield_range
    return rng.uniform(lo, hi)


def roll_penalty_percent(rng: _random.Random, config: GrowConfig) -> int:
    lo, hi = config.penalty_percent
    return rng.randrange(lo, hi)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def score_potency(base: float, potency_boost: float, pest_penalty: float, cap: int) -> int:
    return int(clamp(round_half_up(base * potency_boost * pest_penalty), 0, cap))


def score_yield(base: float, avg_health: float, raider_penalty: float,
                bounds: tuple[float, float]) -> int:
    lo, hi = bounds
    return int(clamp(round_half_up(base * avg_health * raider_penalty), lo, hi))
