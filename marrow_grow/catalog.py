"""Static reference tables: strains, soils, defenses, nutrient mixes, stages, hazards."""
from __future__ import annotations

from dataclasses import dataclass

from marrow_grow.types import GROWTH_STAGES, HazardKind, Stage


@dataclass(frozen=True)
class SeedDef:
    """A strain. Drain coefficients are display metadata; soil drives drain."""

    id: str
    name: str
    water_drain: float
    nutrient_drain: float
    description: str = ""


@dataclass(frozen=True)
class SoilDef:
    id: str
    name: str
    water_drain: float
    nutrient_drain: float
    description: str = ""

    def __post_init__(self) -> None:
        if self.water_drain < 0:
            raise ValueError(f"water_drain must be >= 0, got {self.water_drain}")


@dataclass(frozen=True)
class DefenseDef:
    """A defender. ``blocks`` is the hazard kind it turns away, if any."""

    id: str
    name: str
    description: str
    blocks: HazardKind | None = None
    success_message: str = ""


@dataclass(frozen=True)
class NutrientMixDef:
    """A feed. ``potency`` multiplies the potency boost once per stage."""

    id: str
    name: str
    description: str
    potency: float
    yield_factor: float
    nutrient_feed: float


@dataclass(frozen=True)
class StageDef:
    stage: Stage
    name: str
    duration: int


@dataclass(frozen=True)
class HazardDef:
    """A flavor variant of a pest or raider visit. Damage is cosmetic."""

    kind: HazardKind
    name: str
    damage: tuple[int, int]
    message: str


SEEDS: tuple[SeedDef, ...] = (
    SeedDef("crypt-cookies", "Crypt Cookies", 0.6, 0.5, "Balanced, classic strain."),
    SeedDef("skele-skittlez", "Skele Skittlez", 0.5, 0.7, "Potent, nutrient-hungry."),
    SeedDef("bone-blossom", "Bone Blossom", 0.7, 0.6, "Unpredictable, mid stats."),
)

SOILS: tuple[SoilDef, ...] = (
    SoilDef("bone-dust", "Bone Dust", 0.5, 0.6, "Rich in calcium"),
    SoilDef("magic-moss", "Magic Moss", 0.6, 0.4, "Mystical properties"),
    SoilDef("basic-soil", "Eh.. Not sure", 0.5, 0.5, "Standard growing medium"),
)

DEFENSES: tuple[DefenseDef, ...] = (
    DefenseDef("grower", "Grower", "Defends against pests", HazardKind.PEST,
               "Your Grower defended against the pests!"),
    DefenseDef("hound", "Hound", "Defends against raiders", HazardKind.RAIDER,
               "Your Hound chased off the raiders!"),
    DefenseDef("vault", "Vault", "Protects your seeds"),
)

NUTRIENT_MIXES: tuple[NutrientMixDef, ...] = (
    NutrientMixDef("basic", "Basic Mix", "Standard, reliable feed.", 1.0, 1.0, 10),
    NutrientMixDef("growth", "Growth Boost", "Bigger yields, less potency.", 0.9, 1.2, 25),
    NutrientMixDef("potent", "Potency Plus", "More potent, less yield.", 1.2, 0.9, 15),
    NutrientMixDef("balanced", "Balanced Blend", "Slight boost to both.", 1.1, 1.1, 18),
    NutrientMixDef("cosmic", "Cosmic Compost", "Unpredictable, sometimes amazing.", 1.4, 1.0, 20),
    NutrientMixDef("doomdust", "Doom Dust", "Dangerous, huge yields if you survive.", 0.6, 1.4, 28),
)

STAGES: tuple[StageDef, ...] = (
    StageDef(Stage.SPROUT, "Sprout", 32),
    StageDef(Stage.VEGETATIVE, "Vegetative", 48),
    StageDef(Stage.FLOWERING, "Flowering", 64),
    StageDef(Stage.HARVEST, "Harvest", 0),
)

PEST_EVENTS: tuple[HazardDef, ...] = (
    HazardDef(HazardKind.PEST, "Space Slugs", (4, 12),
              "Space slugs are oozing over your plants!"),
    HazardDef(HazardKind.PEST, "Brain Leeches", (5, 15),
              "Brain leeches are draining your plant's will to live!"),
    HazardDef(HazardKind.PEST, "Crypt Mites", (3, 10),
              "Crypt mites are gnawing at your roots!"),
    HazardDef(HazardKind.PEST, "Phantom Gnats", (2, 8),
              "Phantom gnats are haunting your soil!"),
)

RAIDER_EVENTS: tuple[HazardDef, ...] = (
    HazardDef(HazardKind.RAIDER, "Crypt Bandits", (10, 20),
              "Crypt bandits are sneaking into your garden!"),
    HazardDef(HazardKind.RAIDER, "Mutant Chickens", (8, 18),
              "Mutant chickens are pecking at your stash!"),
    HazardDef(HazardKind.RAIDER, "Alien Harvesters", (15, 25),
              "Alien harvesters are beaming up your buds!"),
    HazardDef(HazardKind.RAIDER, "Corporate Thieves", (20, 30),
              "Corporate security forces are attempting to seize your crop!"),
)


class Catalog:
    """Read-only lookup over the reference tables.

    Lookups of unknown ids raise ``KeyError``.
    """

    def __init__(
        self,
        seeds: tuple[SeedDef, ...] = SEEDS,
        soils: tuple[SoilDef, ...] = SOILS,
        defenses: tuple[DefenseDef, ...] = DEFENSES,
        mixes: tuple[NutrientMixDef, ...] = NUTRIENT_MIXES,
        stages: tuple[StageDef, ...] = STAGES,
        pests: tuple[HazardDef, ...] = PEST_EVENTS,
        raiders: tuple[HazardDef, ...] = RAIDER_EVENTS,
    ) -> None:
        if tuple(s.stage for s in stages) != tuple(Stage):
            raise ValueError("stages must list every Stage in order")
        if any(s.duration <= 0 for s in stages if s.stage in GROWTH_STAGES):
            raise ValueError("growth stage durations must be positive")
        self._seeds = {s.id: s for s in seeds}
        self._soils = {s.id: s for s in soils}
        self._defenses = {d.id: d for d in defenses}
        self._mixes = {m.id: m for m in mixes}
        self._stages = stages
        self._hazards = {HazardKind.PEST: pests, HazardKind.RAIDER: raiders}

    def seed(self, seed_id: str) -> SeedDef:
        return self._seeds[seed_id]

    def soil(self, soil_id: str) -> SoilDef:
        return self._soils[soil_id]

    def defense(self, defense_id: str) -> DefenseDef:
        return self._defenses[defense_id]

    def mix(self, mix_id: str) -> NutrientMixDef:
        return self._mixes[mix_id]

    def stage(self, stage: Stage) -> StageDef:
        return self._stages[stage]

    def hazards(self, kind: HazardKind) -> tuple[HazardDef, ...]:
        return self._hazards[kind]

    def has(self, table: str, item_id: str) -> bool:
        """Check membership in ``"seeds"``, ``"soils"``, ``"defenses"`` or ``"mixes"``."""
        return item_id in self._table(table)

    def names(self, table: str) -> list[str]:
        return list(self._table(table))

    def total_growth_time(self) -> int:
        return sum(self._stages[s].duration for s in GROWTH_STAGES)

    def _table(self, table: str) -> dict:
        tables = {
            "seeds": self._seeds,
            "soils": self._soils,
            "defenses": self._defenses,
            "mixes": self._mixes,
        }
        return tables[table]


CATALOG = Catalog()
