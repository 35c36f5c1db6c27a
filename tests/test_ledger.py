"""Tests for HarvestLedger statistics."""

from marrow_grow import GrowthResult, HarvestLedger


def test_empty_ledger():
    ledger = HarvestLedger()
    assert ledger.total_games == 0
    assert ledger.total_yield == 0
    assert ledger.average_potency == 0.0
    assert ledger.highest_potency == 0
    assert ledger.best() is None


def test_statistics():
    ledger = HarvestLedger()
    ledger.record(GrowthResult(potency=25, yield_=120))
    ledger.record(GrowthResult(potency=40, yield_=80))
    ledger.record(GrowthResult(potency=40, yield_=10))
    assert ledger.total_games == 3
    assert ledger.total_yield == 210
    assert ledger.average_potency == 35.0
    assert ledger.highest_potency == 40
    assert ledger.best() == GrowthResult(potency=40, yield_=80)


def test_snapshot_restore():
    ledger = HarvestLedger()
    ledger.record(GrowthResult(potency=30, yield_=150))
    data = ledger.snapshot()
    assert data == {"results": [{"potency": 30, "yield": 150}]}

    other = HarvestLedger()
    other.restore(data)
    assert other.results() == ledger.results()
    assert len(other) == 1
