"""Layout, color, and rendering constants."""
from __future__ import annotations

SCREEN_W = 640
SCREEN_H = 480
PANEL_W = 260
LOG_H = 150
FPS = 60

COLOR_BG = (22, 14, 32)
COLOR_PANEL_BG = (30, 22, 42)
COLOR_LOG_BG = (18, 12, 26)
COLOR_TEXT = (220, 220, 220)
COLOR_TEXT_DIM = (140, 130, 150)
COLOR_TITLE = (250, 220, 90)
COLOR_BAR_BG = (50, 40, 60)
COLOR_DARK = (0, 0, 0, 150)

BAR_COLORS: dict[str, tuple[int, int, int]] = {
    "health": (90, 210, 90),
    "water": (70, 140, 230),
    "light": (240, 220, 80),
    "nutrients": (190, 120, 60),
    "stress": (220, 70, 70),
}

STAGE_COLORS: dict[str, tuple[int, int, int]] = {
    "Sprout": (120, 200, 100),
    "Vegetative": (60, 170, 70),
    "Flowering": (200, 120, 220),
    "Harvest": (240, 200, 80),
}

LOG_COLORS: dict[str, tuple[int, int, int]] = {
    "info": (170, 200, 170),
    "warning": (255, 180, 70),
    "error": (235, 80, 80),
}
