"""Running financial ledger owned by the engine."""
from __future__ import annotations

from dataclasses import dataclass, field, replace

from budget_blitz.types import Card, Summary

# category id -> (summary field, counts instead of sums)
_ACCUMULATORS: dict[str, tuple[str, bool]] = {
    "GROC": ("groceries_total", False),
    "TRAN": ("transport_total", False),
    "UTIL": ("utilities_count", True),
    "DINE": ("dining_total", False),
    "IMPL": ("impulse_count", True),
}


@dataclass
class Ledger:
    """Balance, decision totals and the per-category summary.

    Only approvals touch ``balance`` and ``summary``; declines and misses
    feed their own running totals.
    """

    income: int
    balance: int = field(init=False)
    total_approved: int = 0
    total_declined: int = 0
    total_missed: int = 0
    summary: Summary = field(default_factory=Summary)

    def __post_init__(self) -> None:
        self.balance = self.income

    def approve(self, card: Card) -> None:
        self.balance -= card.amount
        self.total_approved += card.amount
        acc = _ACCUMULATORS.get(card.category_id)
        if acc is None:
            return
        name, counts = acc
        setattr(self.summary, name, getattr(self.summary, name) + (1 if counts else card.amount))

    def decline(self, card: Card) -> None:
        self.total_declined += card.amount

    def miss(self, card: Card) -> None:
        self.total_missed += card.amount

    def snapshot(self) -> Summary:
        return replace(self.summary)
