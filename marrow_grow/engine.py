"""GrowthEngine - tick loop, hazards, stage progression and harvest for one run."""

from __future__ import annotations

import logging
import os
import random
from functools import partial
from typing import Any, Callable

from marrow_grow import rules
from marrow_grow.catalog import CATALOG, Catalog, StageDef
from marrow_grow.config import DEFAULT_CONFIG, GrowConfig
from marrow_grow.eventlog import EventLog
from marrow_grow.scheduler import TaskHandle, TaskScheduler
from marrow_grow.signals import ALL, Handler, SignalBus
from marrow_grow.state import GameState, create
from marrow_grow.types import (
    GROWTH_STAGES,
    GrowthResult,
    Hazard,
    HazardKind,
    Selections,
    Severity,
    Stage,
)

logger = logging.getLogger(__name__)


class GrowthEngine:
    """Owns a GameState and evolves it tick by tick.

    Ticks, hazard resolutions and the harvest/death notifications all run
    as tasks on a single :class:`TaskScheduler`, so no two mutations of the
    state ever overlap. Deferred callbacks always read ``self.state`` when
    they fire rather than a copy taken when they were scheduled.
    """

    def __init__(
        self,
        selections: Selections,
        on_complete: Callable[[GrowthResult], None] | None = None,
        on_plant_died: Callable[[], None] | None = None,
        config: GrowConfig = DEFAULT_CONFIG,
        catalog: Catalog = CATALOG,
        seed: int | None = None,
        rng: random.Random | None = None,
        scheduler: TaskScheduler | None = None,
    ) -> None:
        self._config = config
        self._catalog = catalog
        self.state: GameState = create(selections, config, catalog)

        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8), "big")
            rng = random.Random(seed)
        self._seed = seed
        self._rng = rng

        self._scheduler = scheduler if scheduler is not None else TaskScheduler()
        self._log = EventLog(config.log_size)
        self._bus = SignalBus()
        self._on_complete = on_complete
        self._on_plant_died = on_plant_died

        self._tick_task: TaskHandle | None = None
        self._tasks: set[TaskHandle] = set()
        self._closed = False

    @property
    def scheduler(self) -> TaskScheduler:
        return self._scheduler

    @property
    def log(self) -> EventLog:
        return self._log

    @property
    def config(self) -> GrowConfig:
        return self._config

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def finished(self) -> bool:
        """True once the run reached harvest or death."""
        return self.state.harvested or self.state.dead

    @property
    def _inert(self) -> bool:
        # Manual controls do nothing once the run is over or torn down.
        return self._closed or self.finished

    # -- Manual controls --

    def start(self) -> None:
        state = self.state
        if self._inert or state.is_growing:
            return
        state.is_growing = True
        self._emit("Game started! Your plant begins to grow.")
        self._schedule_ticks()
        logger.info("run started: %s in %s, speed %d",
                    state.seed_type, state.soil_type, state.game_speed)
        self._bus.flush()

    def pause(self) -> None:
        self._set_paused(True)

    def resume(self) -> None:
        self._set_paused(False)

    def toggle_pause(self) -> None:
        self._set_paused(not self.state.is_paused)

    def set_speed(self, speed: int) -> None:
        """Change tick drain and cadence. The next tick lands one new period from now."""
        if speed not in self._config.speeds:
            raise ValueError(f"speed must be one of {self._config.speeds}, got {speed!r}")
        state = self.state
        if self._inert or speed == state.game_speed:
            return
        state.game_speed = speed
        if self._tick_task is not None:
            self._scheduler.cancel(self._tick_task)
            self._tasks.discard(self._tick_task)
            self._schedule_ticks()
        logger.debug("speed set to %d", speed)
        self._bus.publish("speed", speed=speed)
        self._bus.flush()

    def cycle_speed(self) -> int:
        """Step to the next allowed speed, wrapping around."""
        speeds = self._config.speeds
        current = self.state.game_speed
        index = speeds.index(current) if current in speeds else -1
        self.set_speed(speeds[(index + 1) % len(speeds)])
        return self.state.game_speed

    def fix_lights(self) -> None:
        state = self.state
        if self._inert or state.lights_on:
            return
        state.lights_on = True
        state.light_failure_time = None
        state.light = 100.0
        self._emit("Lights are back on!")
        self._bus.publish("lights", on=True)
        self._bus.flush()

    def close(self) -> None:
        """Tear down: stop ticking and cancel every pending callback."""
        if self._closed:
            return
        self._closed = True
        self.state.is_growing = False
        for task in self._tasks:
            self._scheduler.cancel(task)
        self._tasks.clear()
        self._tick_task = None
        self._bus.clear()
        logger.info("engine closed at tick %d", self.state.ticks)

    def subscribe(self, handler: Handler, signal: str = ALL) -> None:
        self._bus.subscribe(signal, handler)

    def unsubscribe(self, handler: Handler, signal: str = ALL) -> None:
        self._bus.unsubscribe(signal, handler)

    # -- Queries --

    def current_stage(self) -> StageDef:
        return self._catalog.stage(self.state.growth_stage)

    def growth_progress(self) -> int:
        state = self.state
        elapsed = sum(
            self._catalog.stage(s).duration for s in GROWTH_STAGES if s < state.growth_stage
        )
        elapsed += state.stage_time
        return min(100, rules.round_half_up(elapsed / state.total_growth_time * 100))

    def snapshot(self) -> dict[str, Any]:
        state = self.state
        stage = self.current_stage()
        seed = self._catalog.seed(state.seed_type)
        hazard = state.active_event
        return {
            "seed": {"id": seed.id, "name": seed.name, "description": seed.description},
            "soil": state.soil_type,
            "defense": state.defense_type,
            "health": state.health,
            "water": state.water,
            "light": state.light,
            "nutrients": state.nutrients,
            "stress": state.stress,
            "growth_stage": int(state.growth_stage),
            "stage_name": stage.name,
            "stage_time": state.stage_time,
            "progress": self.growth_progress(),
            "tick": state.ticks,
            "is_growing": state.is_growing,
            "is_paused": state.is_paused,
            "game_speed": state.game_speed,
            "active_event": None if hazard is None else {
                "kind": hazard.kind.value,
                "name": hazard.name,
                "blocked": hazard.blocked,
                "resolves_at": hazard.resolves_at,
            },
            "lights_on": state.lights_on,
            "potency_boost": state.potency_boost,
            "pest_penalty": state.pest_penalty,
            "raider_penalty": state.raider_penalty,
            "final_potency": state.final_potency,
            "final_yield": state.final_yield,
            "log": self._log.snapshot(),
        }

    # -- Tick --

    def tick(self) -> None:
        """Advance the simulation by one tick. No-op unless growing and unpaused."""
        state = self.state
        if self._closed or not state.is_growing or state.is_paused:
            return
        state.ticks += 1
        self._drain(state)
        self._feed(state)
        self._lights(state)
        self._stress(state)
        self._health(state)
        self._roll_hazard(state)
        self._progress(state)
        self._check_death(state)
        self._bus.publish("tick", tick=state.ticks)
        self._bus.flush()

    def _drain(self, state: GameState) -> None:
        soil = self._catalog.soil(state.soil_type)
        speed = state.game_speed
        state.water = rules.drain(state.water, soil.water_drain, speed)
        state.nutrients = rules.drain(state.nutrients, self._config.base_nutrient_drain, speed)

    def _feed(self, state: GameState) -> None:
        state.feed_ticks += 1
        plan = state.plan(state.growth_stage)
        if plan.water_times <= 0:
            return
        interval = rules.feed_interval(self.current_stage().duration, plan.water_times)
        if not rules.is_feed_tick(state.feed_ticks, interval):
            return
        state.water = rules.clamp(state.water + self._config.water_refill)
        amount = self._config.default_nutrient_feed
        if plan.nutrient_mix is not None:
            mix = self._catalog.mix(plan.nutrient_mix)
            amount = mix.nutrient_feed
            if not plan.applied:
                state.potency_boost *= mix.potency
                plan.applied = True
        state.nutrients = rules.clamp(state.nutrients + amount)

    def _lights(self, state: GameState) -> None:
        cfg = self._config
        now = self._scheduler.now
        if state.lights_on and self._rng.random() < cfg.light_failure_chance:
            lo, hi = cfg.failed_light
            state.lights_on = False
            state.light_failure_time = now
            state.light = float(self._rng.randint(lo, hi))
            self._emit("Lights have gone out! Click to fix them!", Severity.WARNING)
            self._bus.publish("lights", on=False)
        if not state.lights_on and state.light_failure_time is not None:
            ceiling, health_drain = rules.light_off_effects(now - state.light_failure_time, cfg)
            state.light = ceiling
            state.health = rules.clamp(state.health - health_drain)
            state.stress = rules.clamp(state.stress + cfg.stress_step)

    def _stress(self, state: GameState) -> None:
        delta = rules.stress_delta(state.water, state.nutrients, state.light, self._config)
        state.stress = rules.clamp(state.stress + delta)

    def _health(self, state: GameState) -> None:
        penalty = rules.health_penalty(state.water, state.nutrients, state.stress, self._config)
        state.health = rules.clamp(state.health - penalty)
        state.health_sum += state.health
        state.health_ticks += 1

    def _roll_hazard(self, state: GameState) -> None:
        cfg = self._config
        if state.active_event is not None or self._rng.random() >= cfg.hazard_chance:
            return
        if state.growth_stage == Stage.FLOWERING:
            # Flowering hazards are raiders or nothing.
            if self._rng.random() >= cfg.raider_chance:
                return
            kind = HazardKind.RAIDER
        else:
            kind = HazardKind.PEST
        variant = self._rng.choice(self._catalog.hazards(kind))
        blocked = self._catalog.defense(state.defense_type).blocks is kind
        delay = cfg.blocked_delay if blocked else cfg.penalty_delay
        hazard = Hazard(
            kind=kind,
            name=variant.name,
            message=variant.message,
            blocked=blocked,
            resolves_at=self._scheduler.now + delay,
        )
        state.active_event = hazard
        self._emit(variant.message, Severity.WARNING)
        self._call_later(delay, partial(self._resolve_hazard, hazard), f"hazard:{kind.value}")
        self._bus.publish("hazard", kind=kind.value, name=variant.name, blocked=blocked,
                          stage=int(state.growth_stage))

    def _resolve_hazard(self, hazard: Hazard) -> None:
        state = self.state
        if state.active_event is not hazard:
            return
        if hazard.blocked:
            defense = self._catalog.defense(state.defense_type)
            self._emit(defense.success_message)
        else:
            percent = rules.roll_penalty_percent(self._rng, self._config)
            factor = rules.penalty_factor(percent)
            if hazard.kind is HazardKind.RAIDER:
                state.raider_penalty *= factor
                self._emit(f"Raiders reduced yield by {percent}%", Severity.ERROR)
            else:
                state.pest_penalty *= factor
                self._emit(f"Pests reduced potency by {percent}%", Severity.ERROR)
        state.active_event = None
        self._bus.publish("hazard_resolved", kind=hazard.kind.value, blocked=hazard.blocked)
        self._bus.flush()

    def _progress(self, state: GameState) -> None:
        state.stage_time += 1
        if state.stage_time < self.current_stage().duration:
            return
        if state.growth_stage < Stage.FLOWERING:
            state.growth_stage = Stage(state.growth_stage + 1)
            state.stage_time = 0
            state.feed_ticks = 0
            name = self.current_stage().name
            self._emit(f"Entering {name} stage")
            self._bus.publish("stage", stage=int(state.growth_stage), name=name)
        elif not state.dead:
            self._harvest(state)

    def _harvest(self, state: GameState) -> None:
        cfg = self._config
        avg_health = rules.average_health(state.health_sum, state.health_ticks)
        base_potency = rules.roll_potency(self._rng, cfg)
        base_yield = rules.roll_yield(self._rng, cfg)
        state.final_potency = rules.score_potency(
            base_potency, state.potency_boost, state.pest_penalty, cfg.potency_cap
        )
        state.final_yield = rules.score_yield(
            base_yield, avg_health, state.raider_penalty, cfg.yield_range
        )
        state.growth_stage = Stage.HARVEST
        state.stage_time = 0
        self._stop_ticking()
        self._emit("Plant is ready for harvest!")
        result = GrowthResult(potency=state.final_potency, yield_=state.final_yield)
        self._call_later(cfg.harvest_delay, partial(self._complete, result), "complete")
        self._bus.publish("harvest", **result.as_dict())
        logger.info("harvest at tick %d: potency=%d yield=%d",
                    state.ticks, result.potency, result.yield_)

    def _check_death(self, state: GameState) -> None:
        if not state.dead or state.harvested:
            return
        self._stop_ticking()
        self._emit("Your plant has died from neglect!", Severity.ERROR)
        self._call_later(self._config.death_delay, self._died, "died")
        self._bus.publish("died", tick=state.ticks)
        logger.info("plant died at tick %d", state.ticks)

    def _complete(self, result: GrowthResult) -> None:
        self._bus.publish("complete", **result.as_dict())
        self._bus.flush()
        if self._on_complete is not None:
            self._on_complete(result)

    def _died(self) -> None:
        if self._on_plant_died is not None:
            self._on_plant_died()

    # -- Internals --

    def _set_paused(self, paused: bool) -> None:
        if self._inert or self.state.is_paused == paused:
            return
        self.state.is_paused = paused
        self._bus.publish("pause", paused=paused)
        self._bus.flush()

    def _schedule_ticks(self) -> None:
        period = self._config.period(self.state.game_speed)
        self._tick_task = self._scheduler.every(period, self.tick, "tick")
        self._tasks.add(self._tick_task)

    def _stop_ticking(self) -> None:
        self.state.is_growing = False
        if self._tick_task is not None:
            self._scheduler.cancel(self._tick_task)
            self._tasks.discard(self._tick_task)
            self._tick_task = None

    def _call_later(self, delay: float, callback: Callable[[], None], name: str) -> None:
        handle: TaskHandle

        def run() -> None:
            self._tasks.discard(handle)
            callback()

        handle = self._scheduler.call_later(delay, run, name)
        self._tasks.add(handle)

    def _emit(self, message: str, severity: Severity = Severity.INFO) -> None:
        self._log.emit(self.state.ticks, message, severity, at=self._scheduler.now)
        logger.debug("[%s] %s", severity.value, message)
