# tests/conftest.py
import os

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame as pg
import pytest

from wrapsnake.config import AppConfig
from wrapsnake.core.interfaces import Snapshot


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()


@pytest.fixture
def cfg():
    return AppConfig(board_size=20, start_len=3, seed=1234)


class Recorder:
    """GameListener that remembers every event."""
    def __init__(self):
        self.scores = []
        self.overs = []
        self.resets = []

    def on_score(self, score: int) -> None:
        self.scores.append(score)

    def on_game_over(self, snap: Snapshot) -> None:
        self.overs.append(snap)

    def on_reset(self, snap: Snapshot) -> None:
        self.resets.append(snap)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def rules_factory(cfg):
    from wrapsnake.core.snake_rules import Rules

    def make(snake=None, direction=None, food=None, listeners=(), **overrides):
        """Rules with an optional hand-placed snake/heading/food."""
        r = Rules(cfg.with_(**overrides), listeners=listeners)
        if snake is not None:
            r.snake = list(snake)
        if direction is not None:
            r.dir = direction
            r.pending = direction
        if food is not None:
            r.food = food
        return r
    return make
