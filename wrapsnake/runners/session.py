# wrapsnake/runners/session.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List
from wrapsnake.core.interfaces import Snapshot

logger = logging.getLogger(__name__)


@dataclass
class GameSummary:
    game: int
    score: int
    length: int
    ticks: int


@dataclass
class SessionStats:
    """GameListener that keeps one summary per finished game."""
    games: List[GameSummary] = field(default_factory=list)

    def on_score(self, score: int) -> None:
        pass

    def on_game_over(self, snap: Snapshot) -> None:
        self.record(snap)

    def record(self, snap: Snapshot) -> GameSummary:
        summary = GameSummary(len(self.games), snap.score, snap.length, snap.tick_count)
        self.games.append(summary)
        logger.debug("recorded %s", summary)
        return summary

    def on_reset(self, snap: Snapshot) -> None:
        pass

    @property
    def best(self) -> int:
        return max((g.score for g in self.games), default=0)
