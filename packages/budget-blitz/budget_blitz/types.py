"""Core data types for the budget run: categories, spawns, cards, ledger views."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class UnknownCategoryError(KeyError):
    """Raised when a category id is not in the catalog."""

    def __init__(self, category_id: str) -> None:
        self.category_id = category_id
        super().__init__(f"Unknown category {category_id!r}")


class CardState(Enum):
    SPAWNED = "spawned"
    QUEUED = "queued"
    SHOWN = "shown"
    APPROVED = "approved"
    DECLINED = "declined"
    MISSED = "missed"

    @property
    def terminal(self) -> bool:
        return self in (CardState.APPROVED, CardState.DECLINED, CardState.MISSED)


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


@dataclass(frozen=True, slots=True)
class Category:
    """Catalog entry. Never mutated; looked up by id."""

    id: str
    kind: str  # "essential" or "discretionary"
    label: str
    min_amount: int
    max_amount: int
    spawn: str  # fixed-early | early | mid | mid-late | late | any
    notes: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SpawnEvent:
    offset_ms: int
    category_id: str
    pinned: bool = False  # guaranteed event rather than a random slot draw


@dataclass
class Card:
    """A realized expense. Lifecycle: spawned -> queued -> shown -> terminal."""

    id: str
    category_id: str
    label: str
    amount: int
    note: str
    state: CardState = CardState.SPAWNED
    shown_at_ms: float | None = None
    deadline_ms: float | None = None


@dataclass
class Summary:
    """Per-category accumulator. Only approved cards feed it."""

    groceries_total: int = 0
    transport_total: int = 0
    utilities_count: int = 0
    dining_total: int = 0
    impulse_count: int = 0


@dataclass(frozen=True, slots=True)
class HudUpdate:
    time_remaining_seconds: float
    balance: int
    quality: int
    frugality: int


@dataclass(frozen=True)
class RunResult:
    ending_balance: int
    total_approved: int
    total_declined: int
    total_missed: int
    quality: int
    frugality: int
    income: int
    summary: Summary = field(default_factory=Summary)
