"""Tests for spawn list construction."""
from __future__ import annotations

import random
from collections import Counter

import pytest

from budget_blitz.spawns import PHASES, build_spawn_list


def _in(events, lo: int, hi: int):
    return [e for e in events if lo <= e.offset_ms < hi]


@pytest.fixture(params=["easy", "normal", "hard"])
def difficulty(request) -> str:
    return request.param


def test_sorted_ascending(difficulty: str):
    events = build_spawn_list(difficulty, random.Random(1))
    offsets = [e.offset_ms for e in events]
    assert offsets == sorted(offsets)


def test_exactly_one_pinned_rent_at_5000(difficulty: str):
    for seed in range(20):
        events = build_spawn_list(difficulty, random.Random(seed))
        rent = [e for e in events if e.pinned and e.category_id == "RENT"]
        assert len(rent) == 1
        assert rent[0].offset_ms == 5000


def test_exactly_two_pinned_early_utilities(difficulty: str):
    for seed in range(20):
        events = build_spawn_list(difficulty, random.Random(seed))
        util = [e for e in events if e.pinned and e.category_id == "UTIL"]
        assert len(util) == 2
        assert all(8000 <= e.offset_ms < 18000 for e in util)


def test_only_rent_and_utilities_are_pinned():
    events = build_spawn_list("normal", random.Random(0))
    pinned = sorted(e.category_id for e in events if e.pinned)
    assert pinned == ["RENT", "UTIL", "UTIL"]


def test_utility_windows():
    for seed in range(50):
        events = build_spawn_list("normal", random.Random(seed))
        util = [e.offset_ms for e in events if e.pinned and e.category_id == "UTIL"]
        assert any(8000 <= t < 14000 for t in util)
        assert any(12000 <= t < 18000 for t in util)


def test_normal_phase_counts():
    events = build_spawn_list("normal", random.Random(0))
    assert len(_in(events, 0, 20000)) == 20 + 3
    assert len(_in(events, 20000, 45000)) == 38
    assert len(_in(events, 45000, 60000)) == 30
    assert len(events) == 91


def test_normal_intervals():
    events = build_spawn_list("normal", random.Random(0))
    late = [e.offset_ms for e in _in(events, 45000, 60000)]
    assert late == list(range(45000, 60000, 500))
    mid = [e.offset_ms for e in _in(events, 20000, 45000)]
    assert mid[:4] == [20000, 20666, 21333, 22000]


def test_hard_is_denser_than_normal_is_denser_than_easy():
    rng = random.Random
    easy = len(build_spawn_list("easy", rng(0)))
    normal = len(build_spawn_list("normal", rng(0)))
    hard = len(build_spawn_list("hard", rng(0)))
    assert easy < normal < hard
    assert hard == 25 + 3 + 47 + 38


def test_phase_category_mix():
    """Random slots draw from every category tagged for the phase."""
    counts: dict[str, Counter] = {p.name: Counter() for p in PHASES}
    for seed in range(30):
        events = build_spawn_list("normal", random.Random(seed))
        for phase in PHASES:
            for e in _in(events, phase.start_ms, phase.end_ms):
                if not e.pinned:
                    counts[phase.name][e.category_id] += 1
    assert set(counts["early"]) == {"RENT", "UTIL", "GROC", "TRAN"}
    assert set(counts["mid"]) <= {"UTIL", "GROC", "TRAN", "DINE", "SUBS"}
    assert "SUBS" in counts["mid"]
    assert set(counts["late"]) <= {"GROC", "TRAN", "DINE", "ENTR", "IMPL"}
    assert "IMPL" in counts["late"]
    assert "RENT" not in counts["mid"] and "RENT" not in counts["late"]


def test_ties_keep_generation_order():
    events = build_spawn_list("normal", random.Random(4))
    at_5000 = [e for e in events if e.offset_ms == 5000]
    assert len(at_5000) == 2
    assert not at_5000[0].pinned
    assert at_5000[0].category_id in ("RENT", "UTIL", "GROC", "TRAN")
    assert at_5000[1].pinned and at_5000[1].category_id == "RENT"


def test_seeded_rng_is_deterministic():
    assert build_spawn_list("hard", random.Random(9)) == build_spawn_list("hard", random.Random(9))


def test_result_is_immutable():
    events = build_spawn_list("normal", random.Random(0))
    assert isinstance(events, tuple)
    with pytest.raises(AttributeError):
        events[0].offset_ms = 1  # type: ignore[misc]


def test_unknown_difficulty():
    with pytest.raises(ValueError, match="Unknown difficulty"):
        build_spawn_list("nightmare")
