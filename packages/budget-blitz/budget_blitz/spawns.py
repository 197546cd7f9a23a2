"""Spawn scheduling: a time-ordered list of expense events for one run."""
from __future__ import annotations

import random as _random_mod
from dataclasses import dataclass

from budget_blitz.catalog import CATEGORIES
from budget_blitz.config import DIFFICULTIES
from budget_blitz.types import SpawnEvent

RUN_LENGTH_MS = 60000


@dataclass(frozen=True)
class PhaseDef:
    """One density phase of the run. Not serialized."""

    name: str
    start_ms: int
    end_ms: int
    rate: float  # events per second at normal difficulty
    tags: tuple[str, ...]  # spawn tags eligible for random draws


@dataclass(frozen=True)
class PinnedDef:
    """A guaranteed event at a fixed or randomized offset."""

    category_id: str
    window: tuple[int, int]  # [lo, hi); lo == hi pins an exact offset


PHASES: tuple[PhaseDef, ...] = (
    PhaseDef("early", 0, 20000, 1.0, ("fixed-early", "early", "any")),
    PhaseDef("mid", 20000, 45000, 1.5, ("any", "mid", "mid-late", "early")),
    PhaseDef("late", 45000, RUN_LENGTH_MS, 2.0, ("late", "mid-late", "any")),
)

PINNED: tuple[PinnedDef, ...] = (
    PinnedDef("RENT", (5000, 5000)),
    PinnedDef("UTIL", (8000, 14000)),
    PinnedDef("UTIL", (12000, 18000)),
)

DIFFICULTY_DENSITY: dict[str, float] = {
    "easy": 0.75,
    "normal": 1.0,
    "hard": 1.25,
}


def _pool(phase: PhaseDef) -> list[str]:
    return [cid for cid, cat in CATEGORIES.items() if cat.spawn in phase.tags]


def _phase_offsets(phase: PhaseDef, density: float) -> list[int]:
    interval = 1000.0 / (phase.rate * density)
    offsets = []
    i = 0
    while True:
        t = phase.start_ms + i * interval
        if t >= phase.end_ms:
            break
        offsets.append(int(t))
        i += 1
    return offsets


def _pinned_offset(pin: PinnedDef, rng: _random_mod.Random) -> int:
    lo, hi = pin.window
    if lo == hi:
        return lo
    return int(lo + rng.random() * (hi - lo))


def build_spawn_list(
    difficulty: str = "normal", rng: _random_mod.Random | None = None
) -> tuple[SpawnEvent, ...]:
    """Build the run's spawn events, sorted ascending by offset.

    Ties keep generation order: early slots, pinned events, mid, late.
    """
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty {difficulty!r}")
    rng = rng or _random_mod.Random()
    density = DIFFICULTY_DENSITY[difficulty]

    early, *rest = PHASES
    events: list[SpawnEvent] = []

    pool = _pool(early)
    for t in _phase_offsets(early, density):
        events.append(SpawnEvent(t, rng.choice(pool)))

    for pin in PINNED:
        events.append(SpawnEvent(_pinned_offset(pin, rng), pin.category_id, pinned=True))

    for phase in rest:
        pool = _pool(phase)
        for t in _phase_offsets(phase, density):
            events.append(SpawnEvent(t, rng.choice(pool)))

    return tuple(sorted(events, key=lambda e: e.offset_ms))
