"""Static expense catalog plus amount and note samplers."""
from __future__ import annotations

import random as _random_mod

from budget_blitz.types import Category, UnknownCategoryError

NOTES: dict[str, tuple[str, ...]] = {
    "RENT": ("Monthly apartment rent",),
    "UTIL": ("Electricity bill", "Water bill", "Internet bill"),
    "GROC": ("Weekly groceries", "Fresh veggies & fruits", "Grocery restock"),
    "TRAN": ("Bus fare", "Taxi ride", "Fuel refill"),
    "DINE": ("Dinner at restaurant", "Quick lunch", "Coffee and snacks"),
    "SUBS": ("Music streaming", "Video subscription", "News subscription"),
    "ENTR": ("Movie ticket", "Concert pass", "Game purchase"),
    "IMPL": ("Flash sale item", "Late night ride", "Limited-time offer"),
}

FALLBACK_NOTE = "Expense"


def _cat(cid: str, kind: str, label: str, lo: int, hi: int, spawn: str) -> Category:
    return Category(
        id=cid, kind=kind, label=label, min_amount=lo, max_amount=hi,
        spawn=spawn, notes=NOTES.get(cid, ()),
    )


# Insertion order is the draw order for spawn pools.
CATEGORIES: dict[str, Category] = {
    c.id: c
    for c in (
        _cat("RENT", "essential", "Rent", 18000, 25000, "fixed-early"),
        _cat("UTIL", "essential", "Utilities", 800, 2500, "early"),
        _cat("GROC", "essential", "Groceries", 700, 2200, "any"),
        _cat("TRAN", "essential", "Transport", 200, 800, "any"),
        _cat("DINE", "discretionary", "Dining", 300, 1500, "mid-late"),
        _cat("SUBS", "discretionary", "Subscription", 99, 999, "mid"),
        _cat("ENTR", "discretionary", "Entertainment", 500, 4000, "late"),
        _cat("IMPL", "discretionary", "Impulse", 500, 4000, "late"),
    )
}

# Essential thresholds used by quality scoring (UTIL is a bill count).
ESSENTIAL_TARGETS: dict[str, int] = {
    "GROC": 2000,
    "TRAN": 1000,
    "UTIL": 1,
}


def get_category(category_id: str) -> Category:
    """Look up a category. Raises UnknownCategoryError if absent."""
    try:
        return CATEGORIES[category_id]
    except KeyError:
        raise UnknownCategoryError(category_id) from None


def sample_amount(category_id: str, rng: _random_mod.Random | None = None) -> int:
    """Uniform integer over the category's inclusive [min, max] bound."""
    cat = get_category(category_id)
    rng = rng or _random_mod
    return rng.randint(cat.min_amount, cat.max_amount)


def sample_note(category_id: str, rng: _random_mod.Random | None = None) -> str:
    """Uniform pick from the category's note pool, or the generic fallback."""
    cat = CATEGORIES.get(category_id)
    if cat is None or not cat.notes:
        return FALLBACK_NOTE
    rng = rng or _random_mod
    return rng.choice(cat.notes)
