"""Quality and frugality indices, recomputed from the full summary each call."""
from __future__ import annotations

from budget_blitz.catalog import ESSENTIAL_TARGETS
from budget_blitz.types import Summary

ESSENTIAL_PENALTY = 15
DINING_ALLOWANCE = 1500
DINING_STEP = 500
DINING_STEP_PENALTY = 10
IMPULSE_FREE = 1
IMPULSE_PENALTY = 20
PENALTY_CAP = 40


def _clamp(score: int) -> int:
    return max(0, min(100, score))


def quality_index(summary: Summary) -> int:
    """100 minus 15 for each unmet essential (groceries, transport, utilities)."""
    score = 100
    if summary.groceries_total < ESSENTIAL_TARGETS["GROC"]:
        score -= ESSENTIAL_PENALTY
    if summary.transport_total < ESSENTIAL_TARGETS["TRAN"]:
        score -= ESSENTIAL_PENALTY
    if summary.utilities_count < ESSENTIAL_TARGETS["UTIL"]:
        score -= ESSENTIAL_PENALTY
    return _clamp(score)


def frugality_index(summary: Summary) -> int:
    """100 minus capped penalties for dining overspend and repeat impulse buys."""
    score = 100
    dining_over = max(0, summary.dining_total - DINING_ALLOWANCE)
    score -= min(PENALTY_CAP, (dining_over // DINING_STEP) * DINING_STEP_PENALTY)
    score -= min(PENALTY_CAP, max(0, summary.impulse_count - IMPULSE_FREE) * IMPULSE_PENALTY)
    return _clamp(score)
