# wrapsnake/core/featurizers.py
from __future__ import annotations
from typing import List
import numpy as np
from .interfaces import Snapshot

# channel layout of grid_frame()
BODY, HEAD, FOOD = 0, 1, 2


def grid_frame(s: Snapshot) -> np.ndarray:
    """
    One-hot occupancy grid of shape (N, N, 3), indexed [y, x]:
      c0 -> snake body excluding head
      c1 -> snake head
      c2 -> food (all zeros when the board is full)
    """
    n = s.board_size
    grid = np.zeros((n, n, 3), dtype=np.float32)
    for (x, y) in s.snake[1:]:
        grid[y, x, BODY] = 1.0
    hx, hy = s.head
    grid[hy, hx, HEAD] = 1.0
    if s.food is not None:
        fx, fy = s.food
        grid[fy, fx, FOOD] = 1.0
    return grid


def text_frame(s: Snapshot) -> List[str]:
    n = s.board_size
    rows = [["." for _ in range(n)] for _ in range(n)]
    if s.food is not None:
        fx, fy = s.food
        rows[fy][fx] = "F"
    for (x, y) in s.snake[1:]:
        rows[y][x] = "o"
    hx, hy = s.head
    rows[hy][hx] = "H"
    return ["".join(r) for r in rows]
