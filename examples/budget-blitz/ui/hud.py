"""HUD bar, control hints and pause overlay."""
from __future__ import annotations

import math

import pygame

from budget_blitz import HudUpdate
from ui.constants import (
    COLOR_FRUGALITY,
    COLOR_HUD_BG,
    COLOR_METER_BG,
    COLOR_QUALITY,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    HUD_H,
    SCREEN_H,
    SCREEN_W,
)


def _meter(surface, font, x: int, y: int, label: str, value: int, color) -> None:
    surface.blit(font.render(f"{label} {value}", True, COLOR_TEXT), (x, y))
    bar = pygame.Rect(x, y + 18, 120, 8)
    pygame.draw.rect(surface, COLOR_METER_BG, bar)
    pygame.draw.rect(surface, color, (bar.x, bar.y, int(bar.w * value / 100), bar.h))


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, hud: HudUpdate | None) -> None:
    pygame.draw.rect(surface, COLOR_HUD_BG, (0, 0, SCREEN_W, HUD_H))
    if hud is None:
        return
    seconds = math.ceil(hud.time_remaining_seconds)
    surface.blit(font.render(f"Time {seconds}s", True, COLOR_TEXT), (12, 10))
    surface.blit(font.render(f"Balance ₹{hud.balance}", True, COLOR_TEXT), (12, 36))
    _meter(surface, font, SCREEN_W - 290, 10, "Quality", hud.quality, COLOR_QUALITY)
    _meter(surface, font, SCREEN_W - 150, 10, "Frugality", hud.frugality, COLOR_FRUGALITY)


def draw_hints(surface: pygame.Surface, font: pygame.font.Font) -> None:
    hint = font.render("A / swipe right: approve   D / swipe left: decline   Space: pause",
                       True, COLOR_TEXT_DIM)
    surface.blit(hint, hint.get_rect(center=(SCREEN_W // 2, SCREEN_H - 24)))


def draw_pause_overlay(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw a semi-transparent pause overlay."""
    overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))
    surface.blit(overlay, (0, 0))

    big_font = pygame.font.SysFont("monospace", 32, bold=True)
    text = big_font.render("PAUSED", True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=(SCREEN_W // 2, SCREEN_H // 2)))
    hint = font.render("Space to resume", True, (180, 180, 180))
    surface.blit(hint, hint.get_rect(center=(SCREEN_W // 2, SCREEN_H // 2 + 30)))
