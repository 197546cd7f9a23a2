"""End-of-run results screen."""
from __future__ import annotations

import pygame

from budget_blitz import RunResult
from budget_blitz.results import recommend, result_lines, share_text
from ui.constants import BADGE_COLORS, COLOR_TEXT, COLOR_TEXT_DIM, SCREEN_W


def _wrap(text: str, font: pygame.font.Font, width: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split():
        trial = f"{current} {word}".strip()
        if font.size(trial)[0] > width and current:
            lines.append(current)
            current = word
        else:
            current = trial
    if current:
        lines.append(current)
    return lines


def draw_results(
    surface: pygame.Surface,
    font: pygame.font.Font,
    big_font: pygame.font.Font,
    result: RunResult,
) -> None:
    y = 60
    for line in result_lines(result):
        surface.blit(font.render(line, True, COLOR_TEXT), (40, y))
        y += 28

    badge = recommend(result)
    y += 24
    title = big_font.render(badge.label, True, BADGE_COLORS.get(badge.label, COLOR_TEXT))
    surface.blit(title, (40, y))
    y += 44
    for line in _wrap(badge.description, font, SCREEN_W - 80):
        surface.blit(font.render(line, True, COLOR_TEXT_DIM), (40, y))
        y += 22

    y += 16
    for line in _wrap(share_text(result), font, SCREEN_W - 80):
        surface.blit(font.render(line, True, COLOR_TEXT), (40, y))
        y += 22

    y += 30
    hint = font.render("R: play again    Esc: quit", True, COLOR_TEXT_DIM)
    surface.blit(hint, (40, y))
