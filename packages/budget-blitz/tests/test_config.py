"""Tests for RunConfig validation."""
from __future__ import annotations

import pytest

from budget_blitz.config import DIFFICULTIES, RunConfig


def test_defaults():
    config = RunConfig()
    assert config.income == 50000
    assert config.difficulty == "normal"
    assert config.duration_ms == 60000
    assert config.card_window_ms == 3000
    assert config.overspend_limit == -10000


def test_all_difficulties_accepted():
    for d in DIFFICULTIES:
        assert RunConfig(difficulty=d).difficulty == d


@pytest.mark.parametrize("income", [0, -1, 1.5, True])
def test_bad_income(income):
    with pytest.raises(ValueError, match="income"):
        RunConfig(income=income)


def test_bad_difficulty():
    with pytest.raises(ValueError, match="difficulty must be one of"):
        RunConfig(difficulty="insane")


def test_bad_durations():
    with pytest.raises(ValueError, match="duration_ms"):
        RunConfig(duration_ms=0)
    with pytest.raises(ValueError, match="card_window_ms"):
        RunConfig(card_window_ms=-5)


def test_frozen():
    with pytest.raises(AttributeError):
        RunConfig().income = 1  # type: ignore[misc]
