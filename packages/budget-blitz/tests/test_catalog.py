"""Tests for the category catalog and samplers."""
from __future__ import annotations

import random
from unittest.mock import Mock

import pytest

from budget_blitz import catalog
from budget_blitz.catalog import (
    CATEGORIES,
    FALLBACK_NOTE,
    NOTES,
    get_category,
    sample_amount,
    sample_note,
)
from budget_blitz.types import Category, UnknownCategoryError


def test_catalog_ids_match_keys():
    for cid, cat in CATEGORIES.items():
        assert cat.id == cid
        assert cat.min_amount <= cat.max_amount
        assert cat.kind in ("essential", "discretionary")


def test_essentials_and_discretionary_split():
    essentials = {c.id for c in CATEGORIES.values() if c.kind == "essential"}
    assert essentials == {"RENT", "UTIL", "GROC", "TRAN"}


def test_category_is_immutable():
    with pytest.raises(AttributeError):
        CATEGORIES["RENT"].min_amount = 0  # type: ignore[misc]


def test_get_category_unknown():
    with pytest.raises(UnknownCategoryError, match="NOPE") as exc:
        get_category("NOPE")
    assert exc.value.category_id == "NOPE"
    assert isinstance(exc.value, KeyError)


class TestSampleAmount:
    def test_within_bounds(self) -> None:
        rng = random.Random(3)
        for cid, cat in CATEGORIES.items():
            for _ in range(200):
                amount = sample_amount(cid, rng)
                assert isinstance(amount, int)
                assert cat.min_amount <= amount <= cat.max_amount

    def test_bounds_are_inclusive(self) -> None:
        rng = Mock()
        rng.randint.return_value = 800
        assert sample_amount("TRAN", rng) == 800
        rng.randint.assert_called_once_with(200, 800)

    def test_unknown_category(self) -> None:
        with pytest.raises(UnknownCategoryError):
            sample_amount("XXXX", random.Random(0))

    def test_seeded_rng_is_deterministic(self) -> None:
        a = [sample_amount("IMPL", random.Random(11)) for _ in range(3)]
        b = [sample_amount("IMPL", random.Random(11)) for _ in range(3)]
        assert a == b


class TestSampleNote:
    def test_from_pool(self) -> None:
        rng = random.Random(5)
        for cid in CATEGORIES:
            assert sample_note(cid, rng) in NOTES[cid]

    def test_unknown_category_falls_back(self) -> None:
        assert sample_note("XXXX", random.Random(0)) == FALLBACK_NOTE

    def test_empty_pool_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        bare = Category("BARE", "discretionary", "Bare", 1, 2, "any")
        monkeypatch.setitem(catalog.CATEGORIES, "BARE", bare)
        assert sample_note("BARE", random.Random(0)) == FALLBACK_NOTE
