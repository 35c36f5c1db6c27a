"""Shared enums, value types and errors for the growth simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Mapping


class Stage(IntEnum):
    SPROUT = 0
    VEGETATIVE = 1
    FLOWERING = 2
    HARVEST = 3


# Stages that carry a duration and a feeding plan.
GROWTH_STAGES: tuple[Stage, ...] = (Stage.SPROUT, Stage.VEGETATIVE, Stage.FLOWERING)


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class HazardKind(str, Enum):
    PEST = "pest"
    RAIDER = "raider"


@dataclass(frozen=True, slots=True)
class Hazard:
    """An outstanding pest or raider visit awaiting its deferred resolution."""

    kind: HazardKind
    name: str
    message: str
    blocked: bool
    resolves_at: float


@dataclass(frozen=True, slots=True)
class GrowthResult:
    potency: int
    yield_: int

    def as_dict(self) -> dict[str, int]:
        return {"potency": self.potency, "yield": self.yield_}


class SelectionError(ValueError):
    """Raised when player selections are incomplete or name unknown ids."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(message)


@dataclass(frozen=True)
class Selections:
    """Choices made on the selection screen before a run starts.

    ``feeding_schedule`` maps ``"sprout"``, ``"vegetative"`` and
    ``"flowering"`` to a nutrient mix id. A stage mapped to ``None`` is
    still watered but fed the plain default amount with no potency effect.
    """

    seed: str | None
    soil: str | None
    defense: str | None
    feeding_schedule: Mapping[str, str | None] | None = field(default=None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Selections:
        """Build from the wire shape (``feedingSchedule`` or ``feeding_schedule``)."""
        schedule = data.get("feedingSchedule", data.get("feeding_schedule"))
        return cls(
            seed=data.get("seed"),
            soil=data.get("soil"),
            defense=data.get("defense"),
            feeding_schedule=dict(schedule) if schedule is not None else None,
        )

    def mix_for(self, stage: Stage) -> str | None:
        if self.feeding_schedule is None:
            return None
        return self.feeding_schedule.get(stage.name.lower())
