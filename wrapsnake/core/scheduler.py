# wrapsnake/core/scheduler.py
from __future__ import annotations
import logging
from typing import Callable, Optional

from .interfaces import GameStatus, Snapshot
from .snake_rules import Rules

logger = logging.getLogger(__name__)

TickCallback = Callable[[Snapshot], None]


class TickScheduler:
    """
    Timer-gated driver for Rules.advance().

    The host calls on_frame(now_ms) from its frame loop with a monotonic
    millisecond clock. At most one tick runs per elapsed `tick_ms` window;
    frames arriving faster are coalesced, never queued.
    """

    def __init__(self, rules: Rules, on_tick: Optional[TickCallback] = None, tick_ms: int = 100):
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.rules = rules
        self.on_tick = on_tick
        self.tick_ms = tick_ms
        self._last_ms: Optional[float] = None
        self.ticks = 0
        self.frames = 0

    @property
    def stopped(self) -> bool:
        return self.rules.status is GameStatus.OVER

    @property
    def running(self) -> bool:
        return not self.stopped

    def on_frame(self, now_ms: float) -> bool:
        """Returns True when this frame advanced the game."""
        self.frames += 1
        if self.stopped:
            return False
        if self._last_ms is None:
            self._last_ms = now_ms
            return False
        if now_ms - self._last_ms < self.tick_ms:
            return False

        snap = self.rules.advance()
        self._last_ms = now_ms
        self.ticks += 1
        if self.on_tick is not None:
            self.on_tick(snap)
        if snap.terminated:
            logger.debug("scheduler stopped after %d ticks", self.ticks)
        return True

    def restart(self) -> Snapshot:
        snap = self.rules.reset()
        self._last_ms = None
        self.ticks = 0
        self.frames = 0
        return snap
