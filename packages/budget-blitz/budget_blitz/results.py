"""Result summaries and the end-of-run recommendation badge."""
from __future__ import annotations

from dataclasses import dataclass

from budget_blitz.types import RunResult

GOOD_INDEX = 70
POOR_QUALITY = 60
SAVINGS_RATIO = 0.1


@dataclass(frozen=True)
class Badge:
    label: str
    description: str


def recommend(result: RunResult) -> Badge:
    q, f, bal = result.quality, result.frugality, result.ending_balance
    if q >= GOOD_INDEX and f >= GOOD_INDEX and bal >= result.income * SAVINGS_RATIO:
        return Badge(
            "Well Allocated",
            "All essentials met with low discretionary spend. Nice savings ratio!",
        )
    if q >= GOOD_INDEX and f >= GOOD_INDEX and bal >= 0:
        return Badge(
            "Balanced",
            "You met essentials and stayed within budget. "
            "Keep a weekly dining cap to maintain this.",
        )
    if bal < 0:
        return Badge(
            "Overspent",
            "Overshoot came from Dining and Impulse. "
            "Consider a category cap or cooling-off rule.",
        )
    if q < POOR_QUALITY:
        return Badge(
            "Too Frugal",
            "You saved cash but skipped essentials. "
            "Allocate a baseline for groceries and utilities.",
        )
    return Badge("Results", "")


def result_lines(result: RunResult) -> list[str]:
    return [
        f"Ending Balance: ₹{result.ending_balance}",
        f"Total Approved: ₹{result.total_approved}",
        f"Total Declined: ₹{result.total_declined}",
        f"Total Missed: ₹{result.total_missed}",
        f"Quality Index: {result.quality}",
        f"Frugality Index: {result.frugality}",
    ]


def share_text(result: RunResult) -> str:
    return (
        f"I just played Budget Blitz and finished with "
        f"₹{result.ending_balance}! Try it yourself:"
    )
