"""Pointer drag tracking for swipe decisions."""
from __future__ import annotations

from ui.constants import SWIPE_MIN_PX


class SwipeTracker:
    """Turns a press/release pair into "approve", "decline" or nothing."""

    def __init__(self, min_px: int = SWIPE_MIN_PX) -> None:
        self._min_px = min_px
        self._start: tuple[int, int] | None = None
        self.drag_x = 0.0

    @property
    def dragging(self) -> bool:
        return self._start is not None

    def press(self, pos: tuple[int, int]) -> None:
        self._start = pos
        self.drag_x = 0.0

    def move(self, pos: tuple[int, int]) -> None:
        if self._start is not None:
            self.drag_x = pos[0] - self._start[0]

    def release(self, pos: tuple[int, int]) -> str | None:
        if self._start is None:
            return None
        dx = pos[0] - self._start[0]
        dy = pos[1] - self._start[1]
        self.cancel()
        if abs(dx) > self._min_px and abs(dx) > abs(dy):
            return "approve" if dx > 0 else "decline"
        return None

    def cancel(self) -> None:
        self._start = None
        self.drag_x = 0.0
