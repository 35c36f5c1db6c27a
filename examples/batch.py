"""Batch grow -- replay many seeded runs in virtual time.

Demonstrates:
- Building selections from the wire shape
- Driving the engine's scheduler without a real clock
- Fixing the lights from a subscription
- Summarizing finished runs with a HarvestLedger

Run: python examples/batch.py --runs 20
"""

import argparse

from marrow_grow import GrowthEngine, HarvestLedger, Selections

SELECTIONS = {
    "seed": "skele-skittlez",
    "soil": "magic-moss",
    "defense": "hound",
    "feedingSchedule": {"sprout": "balanced", "vegetative": "growth", "flowering": "potent"},
}


def grow_once(seed: int, ledger: HarvestLedger, attentive: bool) -> str:
    outcome = ["abandoned"]

    def on_died() -> None:
        outcome[0] = "died"

    def on_complete(result) -> None:
        ledger.record(result)
        outcome[0] = f"{result.potency}% / {result.yield_}g"

    engine = GrowthEngine(
        Selections.from_dict(SELECTIONS),
        on_complete=on_complete,
        on_plant_died=on_died,
        seed=seed,
    )
    if attentive:
        engine.subscribe(lambda name, data: engine.fix_lights(), "lights")
    engine.start()
    engine.set_speed(3)
    engine.scheduler.advance(120.0)
    engine.close()
    return outcome[0]


def main() -> None:
    p = argparse.ArgumentParser(description="Replay seeded growth runs")
    p.add_argument("--runs", type=int, default=10)
    p.add_argument("--neglect", action="store_true", help="Never fix the lights")
    args = p.parse_args()

    ledger = HarvestLedger()
    for seed in range(args.runs):
        print(f"  run {seed:3d}: {grow_once(seed, ledger, not args.neglect)}")

    print(f"\nHarvests: {ledger.total_games}/{args.runs}")
    if ledger.total_games:
        print(f"Average potency: {ledger.average_potency:.1f}%")
        print(f"Highest potency: {ledger.highest_potency}%")
        print(f"Total yield: {ledger.total_yield}g")


if __name__ == "__main__":
    main()
