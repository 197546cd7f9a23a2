"""budget-blitz - A timed expense-approval game engine."""

import logging

from budget_blitz.catalog import CATEGORIES, get_category, sample_amount, sample_note
from budget_blitz.clock import RunClock
from budget_blitz.config import DIFFICULTIES, RunConfig
from budget_blitz.engine import Run
from budget_blitz.ledger import Ledger
from budget_blitz.scoring import frugality_index, quality_index
from budget_blitz.spawns import build_spawn_list
from budget_blitz.types import (
    Card,
    CardState,
    Category,
    HudUpdate,
    RunResult,
    RunState,
    SpawnEvent,
    Summary,
    UnknownCategoryError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Run",
    "RunConfig",
    "RunClock",
    "Ledger",
    "DIFFICULTIES",
    "CATEGORIES",
    "get_category",
    "sample_amount",
    "sample_note",
    "build_spawn_list",
    "quality_index",
    "frugality_index",
    "Card",
    "CardState",
    "Category",
    "HudUpdate",
    "RunResult",
    "RunState",
    "SpawnEvent",
    "Summary",
    "UnknownCategoryError",
]
