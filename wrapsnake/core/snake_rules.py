# wrapsnake/core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import logging
import random
from typing import Iterable, List, Optional

from wrapsnake.config import AppConfig
from .interfaces import (
    Cell, Direction, DIRS, RIGHT, GameListener, GameStatus, Snapshot, is_opposite,
)

logger = logging.getLogger(__name__)


class InvalidBoardError(ValueError):
    """Board size / starting length combination that cannot hold a game."""


class Rules:
    """
    Game state of one wrap-around snake session.

    The engine has no clock and no display: whoever drives the loop calls
    advance() once per tick and reads snapshot() to draw.
    """

    def __init__(self, cfg: AppConfig, listeners: Iterable[GameListener] = ()):
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self._listeners: List[GameListener] = list(listeners)
        self.reset()

    def add_listener(self, listener: GameListener) -> None:
        self._listeners.append(listener)

    # ---- lifecycle ----
    def reset(self, board_size: Optional[int] = None,
              initial_length: Optional[int] = None) -> Snapshot:
        """
        Start a new game. Overrides of the board size or starting length are
        kept in `self.cfg`, so later resets (and whoever reads `rules.cfg`)
        follow them.
        """
        n = self.cfg.board_size if board_size is None else board_size
        length = self.cfg.start_len if initial_length is None else initial_length
        _validate(n, length)
        self.cfg = self.cfg.with_(board_size=n, start_len=length)

        self.board_size = n
        c = n // 2
        self.snake: List[Cell] = [((c - i) % n, c) for i in range(length)]
        self.dir: Direction = RIGHT
        self.pending: Direction = RIGHT
        self.score = 0
        self.tick_count = 0
        self.status = GameStatus.RUNNING
        self.food = self._place_food()

        snap = self.snapshot()
        logger.info("new game: board=%dx%d length=%d food=%s", n, n, length, self.food)
        for listener in self._listeners:
            listener.on_reset(snap)
        return snap

    # ---- input ----
    def set_direction(self, intent: Direction) -> bool:
        """Buffer `intent` for the next tick. Returns False when it is ignored."""
        if self.status is GameStatus.OVER:
            return False
        if intent not in DIRS:
            logger.debug("ignored unknown intent %r", intent)
            return False
        # judged against the applied heading, not the pending one
        if is_opposite(intent, self.dir):
            logger.debug("ignored reversal %s while heading %s", intent, self.dir)
            return False
        self.pending = intent
        return True

    # ---- tick ----
    def advance(self) -> Snapshot:
        if self.status is GameStatus.OVER:
            return self.snapshot()

        self.dir = self.pending
        self.tick_count += 1

        n = self.board_size
        hx, hy = self.snake[0]
        dx, dy = self.dir
        new_head = ((hx + dx) % n, (hy + dy) % n)

        # tail is still in place here: running into it ends the game too
        if new_head in self.snake:
            self.status = GameStatus.OVER
            snap = self.snapshot()
            logger.info("game over: score=%d length=%d ticks=%d",
                        self.score, len(self.snake), self.tick_count)
            for listener in self._listeners:
                listener.on_game_over(snap)
            return snap

        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += 1
            self.food = self._place_food()
            logger.debug("ate food at %s, score=%d, next food=%s",
                         new_head, self.score, self.food)
            for listener in self._listeners:
                listener.on_score(self.score)
        else:
            self.snake.pop()
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            dir=self.dir,
            score=self.score,
            status=self.status,
            board_size=self.board_size,
            tick_count=self.tick_count,
        )

    # ---- helpers ----
    def _place_food(self) -> Optional[Cell]:
        n = self.board_size
        occ = set(self.snake)
        for _ in range(n * n):
            cand = (self.rng.randrange(n), self.rng.randrange(n))
            if cand not in occ:
                return cand
        # crowded board: draw from the free cells directly
        free = [(x, y) for x in range(n) for y in range(n) if (x, y) not in occ]
        if not free:
            return None
        return self.rng.choice(free)


def _validate(board_size: int, length: int) -> None:
    if board_size < 1:
        raise InvalidBoardError(f"board_size must be >= 1, got {board_size}")
    if length < 1:
        raise InvalidBoardError(f"initial_length must be >= 1, got {length}")
    # a full row runs into its own tail on the first tick
    if length >= board_size:
        raise InvalidBoardError(
            f"initial_length {length} must be shorter than the {board_size}-wide board")
