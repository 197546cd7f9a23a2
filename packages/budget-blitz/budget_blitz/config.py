"""Run configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

DIFFICULTIES = ("easy", "normal", "hard")


@dataclass(frozen=True)
class RunConfig:
    """Immutable configuration for one run.

    Attributes:
        income: Starting balance in rupees. Must be positive.
        difficulty: One of ``DIFFICULTIES``. Affects spawn density only.
        duration_ms: Length of the run on the pause-aware clock.
        card_window_ms: How long a shown card waits before it is missed.
        overspend_limit: Balance below this ends the run immediately.
    """

    income: int = 50000
    difficulty: str = "normal"
    duration_ms: int = 60000
    card_window_ms: int = 3000
    overspend_limit: int = -10000

    def __post_init__(self) -> None:
        if isinstance(self.income, bool) or not isinstance(self.income, int) or self.income <= 0:
            raise ValueError("income must be a positive integer")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(
                f"difficulty must be one of {', '.join(DIFFICULTIES)}, got {self.difficulty!r}"
            )
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive")
        if self.card_window_ms <= 0:
            raise ValueError("card_window_ms must be positive")
