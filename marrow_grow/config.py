"""Growth simulation configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GrowConfig:
    """Immutable tuning constants for a growth run.

    Ranges are ``(low, high)`` pairs. Potency, yield and penalty ranges are
    half-open ``[low, high)``; the failed-light reading is inclusive.

    Attributes:
        base_interval: Seconds between ticks at speed 1.
        speeds: Allowed speed multipliers, in cycling order.
        water_times: Scheduled waterings per growth stage.
        optimal_band: Water and nutrient levels outside this band stress
            the plant and cost health.
        light_failure_chance: Per-tick chance that running lights fail.
        hazard_chance: Per-tick chance of a hazard when none is active.
        raider_chance: Share of Flowering hazard rolls that become raiders.
        potency_high_chance: Chance of drawing from ``potency_high``.
    """

    base_interval: float = 1.0
    speeds: tuple[int, ...] = (1, 2, 3)

    initial_health: float = 100.0
    initial_water: float = 80.0
    initial_light: float = 100.0
    initial_nutrients: float = 80.0
    initial_stress: float = 0.0

    base_nutrient_drain: float = 0.5
    water_times: tuple[int, int, int] = (2, 3, 4)
    water_refill: float = 20.0
    default_nutrient_feed: float = 15.0

    optimal_band: tuple[float, float] = (30.0, 95.0)
    low_light: float = 50.0
    stress_step: float = 0.5
    health_step: float = 0.5
    stress_critical: float = 80.0

    light_failure_chance: float = 0.05
    failed_light: tuple[int, int] = (30, 70)
    light_decay_per_second: float = 2.0
    light_health_drain_base: float = 0.1
    light_health_drain_window: float = 300.0
    light_health_drain_max: float = 1.0

    hazard_chance: float = 0.02
    raider_chance: float = 0.5
    penalty_percent: tuple[int, int] = (5, 15)
    blocked_delay: float = 3.0
    penalty_delay: float = 5.0

    potency_base: tuple[float, float] = (20.0, 30.0)
    potency_high: tuple[float, float] = (30.0, 70.0)
    potency_high_chance: float = 0.2
    potency_cap: int = 70
    yield_range: tuple[float, float] = (1.0, 200.0)

    harvest_delay: float = 2.0
    death_delay: float = 3.0
    log_size: int = 10

    def __post_init__(self) -> None:
        if self.base_interval <= 0:
            raise ValueError("base_interval must be positive")
        if not self.speeds or any(s <= 0 for s in self.speeds):
            raise ValueError(f"speeds must be non-empty and positive, got {self.speeds}")
        if any(t < 0 for t in self.water_times):
            raise ValueError(f"water_times must be >= 0, got {self.water_times}")
        for name in ("light_failure_chance", "hazard_chance", "raider_chance",
                     "potency_high_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        for name in ("optimal_band", "failed_light", "penalty_percent",
                     "potency_base", "potency_high", "yield_range"):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ValueError(f"{name} range is inverted: {lo} > {hi}")
        if self.log_size <= 0:
            raise ValueError("log_size must be positive")

    def period(self, speed: int) -> float:
        """Real-time seconds between ticks at *speed*."""
        return self.base_interval / speed


DEFAULT_CONFIG = GrowConfig()
