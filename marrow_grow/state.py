"""GameState aggregate and its construction from player selections."""
from __future__ import annotations

from dataclasses import dataclass

from marrow_grow.catalog import CATALOG, Catalog
from marrow_grow.config import DEFAULT_CONFIG, GrowConfig
from marrow_grow.types import GROWTH_STAGES, Hazard, SelectionError, Selections, Stage


@dataclass
class FeedingPlan:
    """Feeding for one growth stage. ``applied`` marks the mix's potency effect as spent."""

    water_times: int
    nutrient_mix: str | None
    applied: bool = False


@dataclass
class GameState:
    selections: Selections
    total_growth_time: int
    feeding_schedule: tuple[FeedingPlan, FeedingPlan, FeedingPlan]

    health: float = 100.0
    water: float = 80.0
    light: float = 100.0
    nutrients: float = 80.0
    stress: float = 0.0

    growth_stage: Stage = Stage.SPROUT
    stage_time: int = 0
    feed_ticks: int = 0
    ticks: int = 0

    is_growing: bool = False
    is_paused: bool = False
    game_speed: int = 1

    active_event: Hazard | None = None

    lights_on: bool = True
    light_failure_time: float | None = None

    pest_penalty: float = 1.0
    raider_penalty: float = 1.0
    potency_boost: float = 1.0

    health_sum: float = 0.0
    health_ticks: int = 0

    final_potency: int | None = None
    final_yield: int | None = None

    @property
    def seed_type(self) -> str:
        return self.selections.seed  # type: ignore[return-value]

    @property
    def soil_type(self) -> str:
        return self.selections.soil  # type: ignore[return-value]

    @property
    def defense_type(self) -> str:
        return self.selections.defense  # type: ignore[return-value]

    @property
    def harvested(self) -> bool:
        return self.final_potency is not None

    @property
    def dead(self) -> bool:
        return self.health <= 0

    def plan(self, stage: Stage) -> FeedingPlan:
        return self.feeding_schedule[stage]


def validate(selections: Selections, catalog: Catalog = CATALOG) -> None:
    """Raise SelectionError unless every choice is present and known."""
    checks = (
        ("seed", selections.seed, "seeds"),
        ("soil", selections.soil, "soils"),
        ("defense", selections.defense, "defenses"),
    )
    for name, value, table in checks:
        if value is None:
            raise SelectionError(name, f"No {name} selected")
        if not catalog.has(table, value):
            raise SelectionError(name, f"Unknown {name} {value!r}")
    if selections.feeding_schedule is None:
        raise SelectionError("feeding_schedule", "No feeding schedule selected")
    for stage in GROWTH_STAGES:
        mix = selections.mix_for(stage)
        if mix is not None and not catalog.has("mixes", mix):
            raise SelectionError(
                "feeding_schedule",
                f"Unknown nutrient mix {mix!r} for {stage.name.lower()}",
            )


def create(
    selections: Selections,
    config: GrowConfig = DEFAULT_CONFIG,
    catalog: Catalog = CATALOG,
) -> GameState:
    validate(selections, catalog)
    schedule = tuple(
        FeedingPlan(water_times=config.water_times[stage],
                    nutrient_mix=selections.mix_for(stage))
        for stage in GROWTH_STAGES
    )
    return GameState(
        selections=selections,
        total_growth_time=catalog.total_growth_time(),
        feeding_schedule=schedule,  # type: ignore[arg-type]
        health=config.initial_health,
        water=config.initial_water,
        light=config.initial_light,
        nutrients=config.initial_nutrients,
        stress=config.initial_stress,
        game_speed=config.speeds[0],
    )
