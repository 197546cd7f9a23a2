"""Owns the active Run and the state the renderer reads from it."""
from __future__ import annotations

import logging

from budget_blitz import Card, HudUpdate, Run, RunConfig, RunResult, RunState

log = logging.getLogger("budget_blitz.demo")


class Session:
    """One Run at a time; ``restart`` discards the old one."""

    def __init__(self, config: RunConfig, seed: int | None = None) -> None:
        self.config = config
        self.seed = seed
        self.hud: HudUpdate | None = None
        self.card: Card | None = None
        self.upcoming: Card | None = None
        self.result: RunResult | None = None
        self.run = self._new_run()

    def _new_run(self) -> Run:
        run = Run(self.config, seed=self.seed)
        run.on_update(self._on_update)
        run.on_card(self._on_card)
        run.on_end(self._on_end)
        return run

    def _on_update(self, hud: HudUpdate) -> None:
        self.hud = hud

    def _on_card(self, card: Card, upcoming: Card | None) -> None:
        self.card = card
        self.upcoming = upcoming

    def _on_end(self, result: RunResult) -> None:
        self.result = result
        self.card = None
        self.upcoming = None

    @property
    def paused(self) -> bool:
        return self.run.state is RunState.PAUSED

    @property
    def ended(self) -> bool:
        return self.run.state is RunState.ENDED

    def start(self) -> None:
        self.run.start()

    def restart(self) -> None:
        log.info("starting a new run")
        self.hud = None
        self.card = None
        self.upcoming = None
        self.result = None
        self.run = self._new_run()
        self.run.start()

    def tick(self) -> None:
        self.run.tick()
        # A card resolved with nothing queued leaves the lane empty.
        if self.run.current_card is None:
            self.card = None
            self.upcoming = None

    def decide(self, action: str) -> None:
        if action == "approve":
            self.run.approve()
        elif action == "decline":
            self.run.decline()
        if self.run.current_card is None:
            self.card = None
            self.upcoming = None

    def toggle_pause(self) -> None:
        if self.paused:
            self.run.resume()
        else:
            self.run.pause()

    def window_left(self) -> float:
        """Fraction of the shown card's expiry window still remaining."""
        card = self.run.current_card
        if card is None or card.deadline_ms is None:
            return 0.0
        left = card.deadline_ms - self.run.elapsed_ms
        return left / self.config.card_window_ms
