"""Run - the game engine: clock, spawn release, card lifecycle and scoring."""
from __future__ import annotations

import itertools
import logging
import os
import random
import time
from collections import deque
from typing import Callable

from budget_blitz.catalog import get_category, sample_amount, sample_note
from budget_blitz.clock import RunClock
from budget_blitz.config import RunConfig
from budget_blitz.ledger import Ledger
from budget_blitz.scoring import frugality_index, quality_index
from budget_blitz.spawns import build_spawn_list
from budget_blitz.types import (
    Card,
    CardState,
    HudUpdate,
    RunResult,
    RunState,
    SpawnEvent,
)

log = logging.getLogger(__name__)

CardHook = Callable[[Card, "Card | None"], None]
UpdateHook = Callable[[HudUpdate], None]
EndHook = Callable[[RunResult], None]


class Run:
    """One timed run. Keeps at most one card shown; the rest wait in a FIFO.

    All work happens synchronously inside ``tick`` and the decision methods.
    Card expiry is a deadline on the run clock, so pausing the clock freezes
    the shown card's countdown with it.
    """

    def __init__(
        self,
        config: RunConfig | None = None,
        seed: int | None = None,
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or RunConfig()
        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)
        self._clock = RunClock(time_source)
        self._state = RunState.IDLE

        self._spawn_list = build_spawn_list(self._config.difficulty, self._rng)
        self._cursor = 0
        self._queue: deque[Card] = deque()
        self._current: Card | None = None
        self._cards: list[Card] = []
        self._card_ids = itertools.count(1)

        self._ledger = Ledger(self._config.income)
        self._quality = 100
        self._frugality = 100
        self._result: RunResult | None = None

        self._card_hooks: list[CardHook] = []
        self._update_hooks: list[UpdateHook] = []
        self._end_hooks: list[EndHook] = []

        # Order matters: a card that expired frees the slot before release
        # and promotion run on the same tick.
        self._systems: list[Callable[[float], None]] = [
            self._expiry_system,
            self._spawn_system,
            self._promote_system,
            self._hud_system,
        ]

    # --- Read-only views ---

    @property
    def config(self) -> RunConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def elapsed_ms(self) -> float:
        return self._clock.elapsed_ms

    @property
    def time_remaining_ms(self) -> float:
        return max(0.0, self._config.duration_ms - self._clock.elapsed_ms)

    @property
    def spawn_list(self) -> tuple[SpawnEvent, ...]:
        return self._spawn_list

    @property
    def pending_spawns(self) -> int:
        return len(self._spawn_list) - self._cursor

    @property
    def current_card(self) -> Card | None:
        return self._current

    @property
    def queue(self) -> tuple[Card, ...]:
        return tuple(self._queue)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Every realized card, in creation order."""
        return tuple(self._cards)

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    @property
    def quality(self) -> int:
        return self._quality

    @property
    def frugality(self) -> int:
        return self._frugality

    @property
    def result(self) -> RunResult | None:
        return self._result

    # --- Hooks ---

    def on_card(self, hook: CardHook) -> None:
        """``hook(card, next_card_or_none)`` whenever a card becomes shown."""
        self._card_hooks.append(hook)

    def on_update(self, hook: UpdateHook) -> None:
        """``hook(HudUpdate)`` on start and once per running tick."""
        self._update_hooks.append(hook)

    def on_end(self, hook: EndHook) -> None:
        """``hook(RunResult)`` exactly once, when the run ends."""
        self._end_hooks.append(hook)

    # --- Lifecycle ---

    def start(self, now: float | None = None) -> bool:
        if self._state is not RunState.IDLE:
            return False
        self._clock.start(now)
        self._state = RunState.RUNNING
        log.info(
            "run started seed=%d income=%d difficulty=%s spawns=%d",
            self._seed, self._config.income, self._config.difficulty, len(self._spawn_list),
        )
        self._emit_update()
        return True

    def tick(self, now: float | None = None) -> None:
        if self._state is not RunState.RUNNING:
            return
        elapsed = self._clock.sample(now)
        if elapsed >= self._config.duration_ms:
            self.end_game()
            return
        for system in self._systems:
            system(elapsed)
            if self._state is RunState.ENDED:
                break

    def pause(self, now: float | None = None) -> bool:
        if self._state is not RunState.RUNNING:
            return False
        self._clock.pause(now)
        self._state = RunState.PAUSED
        log.info("run paused at %.0fms", self._clock.elapsed_ms)
        return True

    def resume(self, now: float | None = None) -> bool:
        if self._state is not RunState.PAUSED:
            return False
        self._clock.resume(now)
        self._state = RunState.RUNNING
        elapsed = self._clock.elapsed_ms
        log.info("run resumed at %.0fms", elapsed)
        card = self._current
        if card is not None:
            shown_for = elapsed - card.shown_at_ms
            remaining = self._config.card_window_ms - shown_for
            if remaining <= 0:
                self.miss_current_card()
            else:
                card.deadline_ms = elapsed + remaining
        return True

    # --- Decisions ---

    def approve(self, now: float | None = None) -> bool:
        card = self._take_for_decision(now)
        if card is None:
            return False
        self._ledger.approve(card)
        self._finish(card, CardState.APPROVED)
        if self._ledger.balance < self._config.overspend_limit:
            log.info(
                "overspend: balance %d below %d, ending run",
                self._ledger.balance, self._config.overspend_limit,
            )
            self.end_game()
            return True
        self._promote()
        return True

    def decline(self, now: float | None = None) -> bool:
        card = self._take_for_decision(now)
        if card is None:
            return False
        self._ledger.decline(card)
        self._finish(card, CardState.DECLINED)
        self._promote()
        return True

    def miss_current_card(self) -> bool:
        card = self._current
        if card is None:
            return False
        self._current = None
        self._ledger.miss(card)
        self._finish(card, CardState.MISSED)
        self._promote()
        return True

    def end_game(self) -> bool:
        if self._state is RunState.ENDED:
            return False
        outstanding = ([self._current] if self._current is not None else []) + list(self._queue)
        self._current = None
        self._queue.clear()
        for card in outstanding:
            self._ledger.miss(card)
            card.state = CardState.MISSED
            card.deadline_ms = None
        self._state = RunState.ENDED
        self._recompute()

        ledger = self._ledger
        self._result = RunResult(
            ending_balance=ledger.balance,
            total_approved=ledger.total_approved,
            total_declined=ledger.total_declined,
            total_missed=ledger.total_missed,
            quality=self._quality,
            frugality=self._frugality,
            income=ledger.income,
            summary=ledger.snapshot(),
        )
        log.info(
            "run ended at %.0fms balance=%d quality=%d frugality=%d unresolved=%d",
            self._clock.elapsed_ms, ledger.balance, self._quality, self._frugality,
            len(outstanding),
        )
        for hook in self._end_hooks:
            hook(self._result)
        return True

    # --- Frame driver ---

    def run_forever(self, fps: int = 60, sleep: Callable[[float], None] = time.sleep) -> RunResult | None:
        """Start and tick at ``fps`` while the run is running. Blocks.

        Returns the result, or None if the run is (or becomes) paused.
        """
        if fps <= 0:
            raise ValueError("fps must be positive")
        self.start()
        dt = 1.0 / fps
        while self._state is RunState.RUNNING:
            frame_start = time.monotonic()
            self.tick()
            if self._state is not RunState.RUNNING:
                break
            sleep_time = dt - (time.monotonic() - frame_start)
            if sleep_time > 0:
                sleep(sleep_time)
        return self._result

    # --- Systems ---

    def _expiry_system(self, elapsed: float) -> None:
        card = self._current
        if card is not None and card.deadline_ms is not None and elapsed >= card.deadline_ms:
            self.miss_current_card()

    def _spawn_system(self, elapsed: float) -> None:
        spawns = self._spawn_list
        while self._cursor < len(spawns) and spawns[self._cursor].offset_ms <= elapsed:
            self._queue.append(self._realize(spawns[self._cursor]))
            self._cursor += 1

    def _promote_system(self, elapsed: float) -> None:
        if self._current is None:
            self._promote()

    def _hud_system(self, elapsed: float) -> None:
        self._emit_update()

    # --- Internals ---

    def _realize(self, event: SpawnEvent) -> Card:
        cid = event.category_id
        card = Card(
            id=f"{cid}-{next(self._card_ids)}",
            category_id=cid,
            label=get_category(cid).label,
            amount=sample_amount(cid, self._rng),
            note=sample_note(cid, self._rng),
        )
        card.state = CardState.QUEUED
        self._cards.append(card)
        return card

    def _promote(self) -> None:
        if self._state is RunState.ENDED or self._current is not None or not self._queue:
            return
        card = self._queue.popleft()
        elapsed = self._clock.elapsed_ms
        card.state = CardState.SHOWN
        card.shown_at_ms = elapsed
        card.deadline_ms = elapsed + self._config.card_window_ms
        self._current = card
        log.debug("card shown %s amount=%d at %.0fms", card.id, card.amount, elapsed)
        upcoming = self._queue[0] if self._queue else None
        for hook in self._card_hooks:
            hook(card, upcoming)

    def _take_for_decision(self, now: float | None) -> Card | None:
        """Detach the shown card for a player decision, or None if not allowed.

        A decision arriving after the card's deadline resolves it as missed.
        """
        card = self._current
        if self._state is not RunState.RUNNING or card is None:
            return None
        elapsed = self._clock.sample(now)
        if card.deadline_ms is not None and elapsed >= card.deadline_ms:
            self.miss_current_card()
            return None
        self._current = None
        return card

    def _finish(self, card: Card, state: CardState) -> None:
        card.state = state
        card.deadline_ms = None
        self._recompute()
        log.debug("card %s %s", card.id, state.value)

    def _recompute(self) -> None:
        summary = self._ledger.summary
        self._quality = quality_index(summary)
        self._frugality = frugality_index(summary)

    def _emit_update(self) -> None:
        update = HudUpdate(
            time_remaining_seconds=self.time_remaining_ms / 1000.0,
            balance=self._ledger.balance,
            quality=self._quality,
            frugality=self._frugality,
        )
        for hook in self._update_hooks:
            hook(update)
