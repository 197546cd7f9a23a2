"""Current card and next-card preview."""
from __future__ import annotations

import pygame

from budget_blitz import Card, get_category
from ui.constants import (
    CARD_H,
    CARD_W,
    COLOR_CARD_BG,
    COLOR_CARD_TEXT,
    COLOR_METER_BG,
    COLOR_TEXT_DIM,
    COLOR_TIMER_BAR,
    HUD_H,
    KIND_COLORS,
    SCREEN_W,
)


def card_rect(offset_x: float = 0.0) -> pygame.Rect:
    x = (SCREEN_W - CARD_W) // 2 + int(offset_x)
    return pygame.Rect(x, HUD_H + 90, CARD_W, CARD_H)


def draw_card(
    surface: pygame.Surface,
    font: pygame.font.Font,
    big_font: pygame.font.Font,
    card: Card | None,
    window_left: float,
    offset_x: float = 0.0,
) -> None:
    """Draw the shown card. ``window_left`` is the fraction of its window left."""
    if card is None:
        hint = font.render("Waiting for the next expense...", True, COLOR_TEXT_DIM)
        surface.blit(hint, hint.get_rect(center=card_rect().center))
        return

    rect = card_rect(offset_x)
    accent = KIND_COLORS[get_category(card.category_id).kind]
    pygame.draw.rect(surface, COLOR_CARD_BG, rect, border_radius=12)
    pygame.draw.rect(surface, accent, (rect.x, rect.y, rect.w, 10), border_top_left_radius=12,
                     border_top_right_radius=12)

    title = big_font.render(f"{card.label} - ₹{card.amount}", True, COLOR_CARD_TEXT)
    surface.blit(title, (rect.x + 20, rect.y + 40))
    note = font.render(card.note, True, COLOR_CARD_TEXT)
    surface.blit(note, (rect.x + 20, rect.y + 90))

    # Expiry countdown
    bar = pygame.Rect(rect.x + 20, rect.bottom - 30, rect.w - 40, 8)
    pygame.draw.rect(surface, COLOR_METER_BG, bar)
    fill = bar.copy()
    fill.w = int(bar.w * max(0.0, min(1.0, window_left)))
    pygame.draw.rect(surface, COLOR_TIMER_BAR, fill)


def draw_preview(surface: pygame.Surface, font: pygame.font.Font, upcoming: Card | None) -> None:
    if upcoming is None:
        return
    text = font.render(f"Next: {upcoming.label} - ₹{upcoming.amount}", True, COLOR_TEXT_DIM)
    rect = card_rect()
    surface.blit(text, (rect.x, rect.bottom + 20))
