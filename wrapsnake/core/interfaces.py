# wrapsnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple

Cell = Tuple[int, int]
Direction = Tuple[int, int]

# screen coordinates: y grows downward
RIGHT: Direction = (1, 0)
LEFT: Direction = (-1, 0)
DOWN: Direction = (0, 1)
UP: Direction = (0, -1)
DIRS: Tuple[Direction, ...] = (RIGHT, DOWN, LEFT, UP)


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class GameStatus(Enum):
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Optional[Cell]      # None only when the board is full
    dir: Direction
    score: int
    status: GameStatus
    board_size: int
    tick_count: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def terminated(self) -> bool:
        return self.status is GameStatus.OVER


class GameListener(Protocol):
    """Receives engine events (score display, restart affordance)."""
    def on_score(self, score: int) -> None: ...
    def on_game_over(self, snap: Snapshot) -> None: ...
    def on_reset(self, snap: Snapshot) -> None: ...


class Policy(Protocol):
    def act(self, snap: Snapshot) -> Direction: ...
