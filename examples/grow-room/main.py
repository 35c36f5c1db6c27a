"""Grow-Room - watch one plant grow, in real time.

Controls:
  Space       Pause / Resume
  S           Cycle speed (1x / 2x / 3x)
  L           Fix the lights
  Escape      Leave the grow room

Run: python main.py --seed crypt-cookies --soil bone-dust --defense grower
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from marrow_grow import CATALOG, GrowthEngine, GrowthResult, HarvestLedger, Selections
from ui.constants import COLOR_BG, FPS, LOG_H, PANEL_W, SCREEN_H, SCREEN_W
from ui.panels import draw_bars, draw_log, draw_plant, draw_status


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Grow-Room - marrow-grow visual demo")
    p.add_argument("--seed", choices=CATALOG.names("seeds"), default="crypt-cookies")
    p.add_argument("--soil", choices=CATALOG.names("soils"), default="bone-dust")
    p.add_argument("--defense", choices=CATALOG.names("defenses"), default="grower")
    for stage, default in (("sprout", "basic"), ("vegetative", "growth"), ("flowering", "potent")):
        p.add_argument(f"--{stage}", choices=CATALOG.names("mixes"), default=default,
                       help=f"Nutrient mix for the {stage} stage (default: {default})")
    p.add_argument("--rng-seed", type=int, default=None, help="Random seed for replay")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    selections = Selections(
        seed=args.seed,
        soil=args.soil,
        defense=args.defense,
        feeding_schedule={
            "sprout": args.sprout,
            "vegetative": args.vegetative,
            "flowering": args.flowering,
        },
    )
    ledger = HarvestLedger()
    running = True

    def on_complete(result: GrowthResult) -> None:
        nonlocal running
        ledger.record(result)
        running = False

    def on_plant_died() -> None:
        nonlocal running
        running = False

    engine = GrowthEngine(
        selections,
        on_complete=on_complete,
        on_plant_died=on_plant_died,
        seed=args.rng_seed,
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Grow-Room - marrow-grow demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    small_font = pygame.font.SysFont("monospace", 11)

    engine.start()
    plant_w = SCREEN_W - PANEL_W
    plant_h = SCREEN_H - LOG_H

    while running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    engine.toggle_pause()
                elif event.key == pygame.K_s:
                    engine.cycle_speed()
                elif event.key == pygame.K_l:
                    engine.fix_lights()

        engine.scheduler.advance(dt)

        snap = engine.snapshot()
        screen.fill(COLOR_BG)
        draw_plant(screen, font, snap, 0, 0, plant_w, plant_h)
        draw_bars(screen, font, snap, plant_w, 0, PANEL_W)
        draw_status(screen, font, snap, plant_w + 10, 210)
        draw_log(screen, small_font, snap["log"], 0, plant_h, SCREEN_W, LOG_H)
        pygame.display.flip()

    engine.close()
    pygame.quit()

    best = ledger.best()
    if best is not None:
        print(f"Harvested: {best.potency}% potency, {best.yield_}g")
    else:
        print("No harvest this time.")
    sys.exit()


if __name__ == "__main__":
    main()
