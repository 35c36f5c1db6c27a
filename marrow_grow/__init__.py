"""marrow-grow - Tick-driven plant growth simulation for the Marrow Grow game."""

from marrow_grow.catalog import CATALOG, Catalog
from marrow_grow.config import DEFAULT_CONFIG, GrowConfig
from marrow_grow.engine import GrowthEngine
from marrow_grow.eventlog import EventLog, LogEntry
from marrow_grow.ledger import HarvestLedger
from marrow_grow.scheduler import TaskHandle, TaskScheduler
from marrow_grow.signals import SignalBus
from marrow_grow.state import FeedingPlan, GameState, create
from marrow_grow.types import (
    GrowthResult,
    Hazard,
    HazardKind,
    SelectionError,
    Selections,
    Severity,
    Stage,
)

__all__ = [
    "GrowthEngine",
    "GameState",
    "FeedingPlan",
    "create",
    "Selections",
    "SelectionError",
    "GrowthResult",
    "Stage",
    "Severity",
    "Hazard",
    "HazardKind",
    "GrowConfig",
    "DEFAULT_CONFIG",
    "Catalog",
    "CATALOG",
    "TaskScheduler",
    "TaskHandle",
    "EventLog",
    "LogEntry",
    "SignalBus",
    "HarvestLedger",
]
