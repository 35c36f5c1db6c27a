"""HarvestLedger - running statistics over completed harvests."""
from __future__ import annotations

from typing import Any

from marrow_grow.types import GrowthResult


class HarvestLedger:
    """Records finished runs and summarizes them for the harvest tab."""

    def __init__(self) -> None:
        self._results: list[GrowthResult] = []

    def record(self, result: GrowthResult) -> None:
        self._results.append(result)

    def results(self) -> list[GrowthResult]:
        return list(self._results)

    @property
    def total_games(self) -> int:
        return len(self._results)

    @property
    def total_yield(self) -> int:
        return sum(r.yield_ for r in self._results)

    @property
    def average_potency(self) -> float:
        if not self._results:
            return 0.0
        return sum(r.potency for r in self._results) / len(self._results)

    @property
    def highest_potency(self) -> int:
        return max((r.potency for r in self._results), default=0)

    def best(self) -> GrowthResult | None:
        """Most potent harvest; the earliest wins ties."""
        best: GrowthResult | None = None
        for r in self._results:
            if best is None or r.potency > best.potency:
                best = r
        return best

    def snapshot(self) -> dict[str, Any]:
        return {"results": [r.as_dict() for r in self._results]}

    def restore(self, data: dict[str, Any]) -> None:
        self._results = [
            GrowthResult(potency=d["potency"], yield_=d["yield"])
            for d in data.get("results", [])
        ]

    def __len__(self) -> int:
        return len(self._results)
