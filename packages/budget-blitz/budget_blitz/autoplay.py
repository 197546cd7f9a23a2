"""Headless play: scripted decision policies driven by a stepped fake clock."""
from __future__ import annotations

from typing import Callable

from budget_blitz.catalog import get_category
from budget_blitz.config import RunConfig
from budget_blitz.engine import Run
from budget_blitz.types import Card, RunResult, RunState

Policy = Callable[[Card], "str | None"]


class SteppedTime:
    """Callable time source that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


def _essentials(card: Card) -> str:
    return "approve" if get_category(card.category_id).kind == "essential" else "decline"


POLICIES: dict[str, Policy] = {
    "idle": lambda card: None,
    "approve-all": lambda card: "approve",
    "decline-all": lambda card: "decline",
    "essentials": _essentials,
}


def simulate(
    config: RunConfig | None = None,
    policy: str = "essentials",
    seed: int | None = None,
    reaction_ms: int = 400,
    frame_ms: int = 16,
) -> RunResult:
    """Play a whole run as fast as possible and return its result.

    The policy is consulted once a card has been shown for ``reaction_ms``.
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy {policy!r}")
    if frame_ms <= 0:
        raise ValueError("frame_ms must be positive")
    decide = POLICIES[policy]
    clock = SteppedTime()
    run = Run(config, seed=seed, time_source=clock)
    run.start()
    while run.state is not RunState.ENDED:
        clock.advance(frame_ms / 1000.0)
        run.tick()
        card = run.current_card
        if card is None or run.elapsed_ms - card.shown_at_ms < reaction_ms:
            continue
        action = decide(card)
        if action == "approve":
            run.approve()
        elif action == "decline":
            run.decline()
    assert run.result is not None
    return run.result
