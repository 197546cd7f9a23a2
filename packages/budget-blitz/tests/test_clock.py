"""Tests for the pause-aware run clock."""
from __future__ import annotations

from budget_blitz.autoplay import SteppedTime
from budget_blitz.clock import RunClock


def _clock(start: float = 100.0) -> tuple[RunClock, SteppedTime]:
    t = SteppedTime(start)
    return RunClock(t), t


def test_not_started_reads_zero():
    clock, t = _clock()
    t.advance(5.0)
    assert clock.sample() == 0.0
    assert clock.started is False


def test_elapsed_in_milliseconds():
    clock, t = _clock()
    clock.start()
    t.advance(1.5)
    assert clock.sample() == 1500.0
    assert clock.elapsed_ms == 1500.0


def test_explicit_now_overrides_source():
    clock, _ = _clock()
    clock.start(now=10.0)
    assert clock.sample(now=10.25) == 250.0


def test_pause_freezes_elapsed():
    clock, t = _clock()
    clock.start()
    t.advance(1.0)
    clock.pause()
    assert clock.paused is True
    t.advance(30.0)
    assert clock.sample() == 1000.0


def test_resume_excludes_paused_time():
    clock, t = _clock()
    clock.start()
    t.advance(1.0)
    clock.pause()
    t.advance(30.0)
    clock.resume()
    assert clock.sample() == 1000.0
    t.advance(0.5)
    assert clock.sample() == 1500.0


def test_multiple_pauses_accumulate():
    clock, t = _clock()
    clock.start()
    for _ in range(3):
        t.advance(1.0)
        clock.pause()
        t.advance(7.0)
        clock.resume()
    assert clock.sample() == 3000.0


def test_pause_twice_and_resume_unpaused_are_ignored():
    clock, t = _clock()
    clock.start()
    clock.resume()
    t.advance(1.0)
    clock.pause()
    t.advance(1.0)
    clock.pause()
    t.advance(1.0)
    clock.resume()
    assert clock.sample() == 1000.0


def test_elapsed_never_decreases():
    clock, t = _clock()
    clock.start()
    t.advance(2.0)
    clock.sample()
    t.now -= 1.0
    assert clock.sample() == 2000.0


def test_restart_resets():
    clock, t = _clock()
    clock.start()
    t.advance(4.0)
    clock.pause()
    clock.start()
    assert clock.paused is False
    assert clock.sample() == 0.0
