"""Layout, color, and rendering constants."""
from __future__ import annotations

# Layout
SCREEN_W = 480
SCREEN_H = 640
HUD_H = 72
CARD_W = 360
CARD_H = 200
FPS = 60

# Swipe
SWIPE_MIN_PX = 50

# Colors
COLOR_BG = (20, 20, 30)
COLOR_HUD_BG = (30, 30, 45)
COLOR_CARD_BG = (235, 235, 240)
COLOR_CARD_TEXT = (30, 30, 40)
COLOR_TEXT = (200, 200, 210)
COLOR_TEXT_DIM = (120, 120, 140)
COLOR_METER_BG = (50, 50, 70)
COLOR_QUALITY = (60, 200, 120)
COLOR_FRUGALITY = (80, 160, 240)
COLOR_TIMER_BAR = (240, 170, 60)

# Card accent by category kind
KIND_COLORS: dict[str, tuple[int, int, int]] = {
    "essential": (60, 140, 220),
    "discretionary": (220, 90, 120),
}

# Badge label -> color
BADGE_COLORS: dict[str, tuple[int, int, int]] = {
    "Well Allocated": (80, 220, 140),
    "Balanced": (60, 200, 120),
    "Overspent": (230, 80, 80),
    "Too Frugal": (240, 190, 60),
    "Results": (200, 200, 210),
}
