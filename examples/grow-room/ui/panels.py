"""Resource bars, plant sprite, status line and event log."""
from __future__ import annotations

from typing import Any

import pygame

from ui.constants import (
    BAR_COLORS,
    COLOR_BAR_BG,
    COLOR_DARK,
    COLOR_LOG_BG,
    COLOR_PANEL_BG,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    COLOR_TITLE,
    LOG_COLORS,
    STAGE_COLORS,
)


def draw_bars(surface: pygame.Surface, font: pygame.font.Font, snap: dict[str, Any],
              x: int, y: int, w: int) -> None:
    pygame.draw.rect(surface, COLOR_PANEL_BG, (x, y, w, 200))
    ty = y + 10
    for name, color in BAR_COLORS.items():
        value = snap[name]
        label = font.render(f"{name.capitalize():<10}{value:5.1f}", True, COLOR_TEXT)
        surface.blit(label, (x + 10, ty))
        bar_w = w - 20
        pygame.draw.rect(surface, COLOR_BAR_BG, (x + 10, ty + 16, bar_w, 8))
        pygame.draw.rect(surface, color, (x + 10, ty + 16, int(bar_w * value / 100), 8))
        ty += 36


def draw_plant(surface: pygame.Surface, font: pygame.font.Font, snap: dict[str, Any],
               x: int, y: int, w: int, h: int) -> None:
    """Draw a stand-in plant whose size follows growth progress."""
    stage = snap["stage_name"]
    color = STAGE_COLORS.get(stage, COLOR_TEXT)
    cx = x + w // 2
    base = y + h - 30
    height = 20 + int((h - 80) * snap["progress"] / 100)
    pygame.draw.rect(surface, (90, 60, 40), (cx - 40, base, 80, 24))
    pygame.draw.line(surface, (70, 140, 60), (cx, base), (cx, base - height), 4)
    radius = 8 + snap["progress"] // 6
    pygame.draw.circle(surface, color, (cx, base - height), radius)

    title = font.render(f"{snap['seed']['name']}  -  {stage}", True, COLOR_TITLE)
    surface.blit(title, (x + 10, y + 10))
    progress = font.render(f"Growth {snap['progress']}%", True, COLOR_TEXT_DIM)
    surface.blit(progress, (x + 10, y + 28))

    if not snap["lights_on"]:
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill(COLOR_DARK)
        surface.blit(shade, (x, y))
        hint = font.render("LIGHTS OUT - press L", True, LOG_COLORS["warning"])
        surface.blit(hint, hint.get_rect(center=(cx, y + h // 2)))


def draw_status(surface: pygame.Surface, font: pygame.font.Font, snap: dict[str, Any],
                x: int, y: int) -> None:
    parts = [f"Speed x{snap['game_speed']}"]
    if snap["is_paused"]:
        parts.append("PAUSED")
    event = snap["active_event"]
    if event is not None:
        parts.append(f"{event['name']}!")
    if snap["final_potency"] is not None:
        parts.append(f"Potency {snap['final_potency']}%  Yield {snap['final_yield']}g")
    text = font.render("   ".join(parts), True, COLOR_TEXT)
    surface.blit(text, (x, y))


def draw_log(surface: pygame.Surface, font: pygame.font.Font, entries: list[dict[str, Any]],
             x: int, y: int, w: int, h: int) -> None:
    pygame.draw.rect(surface, COLOR_LOG_BG, (x, y, w, h))
    pygame.draw.line(surface, (60, 50, 70), (x, y), (x + w, y))
    line_h = 14
    max_lines = max(1, (h - 8) // line_h)
    ty = y + 4
    for entry in entries[:max_lines]:
        color = LOG_COLORS.get(entry["type"], COLOR_TEXT)
        surface.blit(font.render(entry["message"], True, color), (x + 6, ty))
        ty += line_h
