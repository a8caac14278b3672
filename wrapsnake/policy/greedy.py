# wrapsnake/policy/greedy.py
from __future__ import annotations
from typing import List

from wrapsnake.core.interfaces import (
    Cell, Direction, DIRS, RIGHT, LEFT, DOWN, UP, Snapshot, is_opposite,
)


def wrap_delta(a: int, b: int, n: int) -> int:
    """Signed shortest step count from a to b on a ring of size n."""
    d = (b - a) % n
    if d > n // 2:
        d -= n
    return d


def step(cell: Cell, direction: Direction, n: int) -> Cell:
    return ((cell[0] + direction[0]) % n, (cell[1] + direction[1]) % n)


def moves_toward(head: Cell, food: Cell, n: int) -> List[Direction]:
    """
    Preference ordering of moves, longest wrapped axis first.
    Does NOT check collisions; caller should filter unsafe moves.
    """
    dx = wrap_delta(head[0], food[0], n)
    dy = wrap_delta(head[1], food[1], n)
    horiz = RIGHT if dx > 0 else LEFT
    vert = DOWN if dy > 0 else UP

    prefs: List[Direction] = []
    axes = [(abs(dx), horiz), (abs(dy), vert)]
    axes.sort(key=lambda t: t[0], reverse=True)
    for dist, d in axes:
        if dist:
            prefs.append(d)
    for d in DIRS:
        if d not in prefs:
            prefs.append(d)
    return prefs


class GreedyPolicy:
    """
    Greedy on wrapped food distance with simple safety:
    - prefer moves that shorten the toroidal distance to the food
    - never pick the reversal or a cell held by the body (tail included)
    - if nothing is safe, keep heading
    """

    def act(self, snap: Snapshot) -> Direction:
        if snap.food is None:
            return snap.dir
        n = snap.board_size
        body = set(snap.snake)
        for d in moves_toward(snap.head, snap.food, n):
            if is_opposite(d, snap.dir):
                continue
            if step(snap.head, d, n) in body:
                continue
            return d
        return snap.dir
