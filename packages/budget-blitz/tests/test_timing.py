"""Wall-clock test: an untouched run ends on time."""
from __future__ import annotations

import time

from budget_blitz.config import RunConfig
from budget_blitz.engine import Run
from budget_blitz.types import RunState

TOLERANCE = 0.2


def test_untouched_run_ends_near_duration():
    duration = 0.3
    run = Run(RunConfig(duration_ms=int(duration * 1000)), seed=1)
    ended = []
    run.on_end(ended.append)

    start = time.monotonic()
    result = run.run_forever(fps=120)
    diff = time.monotonic() - start

    assert run.state is RunState.ENDED
    assert ended == [result]
    assert duration <= diff < duration + TOLERANCE
