"""Budget Blitz -- approve or decline expenses before they expire.

Drives budget_blitz.Run once per frame and renders it with pygame.

Controls:
  A / swipe right   Approve the shown expense
  D / swipe left    Decline it
  Space             Pause / Resume
  R                 Play again (results screen)
  Esc               Quit

Run:
    python main.py [--income N] [--difficulty easy|normal|hard] [--query "income=..&difficulty=.."]
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace

import pygame

from budget_blitz import DIFFICULTIES
from budget_blitz.logging_setup import configure_logging
from budget_blitz.settings import load_settings, parse_query, resolve_config, save_settings

from game.session import Session
from game.swipe import SwipeTracker
from ui.card import draw_card, draw_preview
from ui.constants import COLOR_BG, FPS, SCREEN_H, SCREEN_W
from ui.hud import draw_hints, draw_hud, draw_pause_overlay
from ui.results import draw_results


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Budget Blitz -- pygame front end")
    p.add_argument("--income", type=int, default=None, help="Starting income")
    p.add_argument("--difficulty", choices=DIFFICULTIES, default=None)
    p.add_argument("--query", default="", help="URL query string overrides")
    p.add_argument("--seed", type=int, default=None, help="RNG seed (default: random)")
    p.add_argument("--settings", default=None, metavar="FILE", help="Settings JSON file")
    p.add_argument("--log-level", default=None)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level)

    settings = load_settings(args.settings)
    params = parse_query(args.query)
    if args.income is not None:
        params["income"] = str(args.income)
    if args.difficulty is not None:
        params["difficulty"] = args.difficulty
    config = resolve_config(params, settings)
    save_settings(replace(settings, income=config.income, difficulty=config.difficulty), args.settings)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Budget Blitz")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("monospace", 22, bold=True)

    session = Session(config, seed=args.seed)
    swipe = SwipeTracker()
    session.start()
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif session.ended:
                    if event.key == pygame.K_r:
                        session.restart()
                elif event.key == pygame.K_SPACE:
                    swipe.cancel()
                    session.toggle_pause()
                elif event.key == pygame.K_a:
                    session.decide("approve")
                elif event.key == pygame.K_d:
                    session.decide("decline")

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if not session.ended and not session.paused:
                    swipe.press(event.pos)
            elif event.type == pygame.MOUSEMOTION:
                swipe.move(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                action = swipe.release(event.pos)
                if action is not None:
                    session.decide(action)

        # --- Tick ---
        session.tick()

        # --- Render ---
        screen.fill(COLOR_BG)
        if session.ended and session.result is not None:
            draw_results(screen, font, big_font, session.result)
        else:
            draw_hud(screen, font, session.hud)
            draw_card(screen, font, big_font, session.card, session.window_left(), swipe.drag_x)
            draw_preview(screen, font, session.upcoming)
            draw_hints(screen, font)
            if session.paused:
                draw_pause_overlay(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
