# wrapsnake/core/gestures.py
from __future__ import annotations
from typing import Optional

from .interfaces import Direction, RIGHT, LEFT, DOWN, UP


class SwipeTracker:
    """
    Turns a touch/drag stroke into one direction intent.

    The stroke fires once its displacement from the start point passes
    `threshold` on either axis; the dominant axis picks the direction.
    After firing, the tracker waits for a new start().
    """

    def __init__(self, threshold: float = 20):
        if threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {threshold}")
        self.threshold = threshold
        self._start: Optional[tuple[float, float]] = None

    @property
    def active(self) -> bool:
        return self._start is not None

    def start(self, x: float, y: float) -> None:
        self._start = (x, y)

    def cancel(self) -> None:
        self._start = None

    def move(self, x: float, y: float) -> Optional[Direction]:
        if self._start is None:
            return None
        dx = x - self._start[0]
        dy = y - self._start[1]
        ax, ay = abs(dx), abs(dy)
        if max(ax, ay) <= self.threshold:
            return None

        self._start = None
        if ax > ay:
            return RIGHT if dx > 0 else LEFT
        return DOWN if dy > 0 else UP
