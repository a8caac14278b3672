# tests/test_featurizers.py
import numpy as np

from wrapsnake.core.featurizers import grid_frame, text_frame, BODY, HEAD, FOOD
from wrapsnake.core.interfaces import UP, GameStatus, Snapshot


def _snap(food=(0, 3)):
    return Snapshot(
        snake=((2, 1), (2, 2), (1, 2)),
        food=food,
        dir=UP,
        score=2,
        status=GameStatus.RUNNING,
        board_size=4,
        tick_count=9,
    )


def test_grid_frame_channels():
    g = grid_frame(_snap())
    assert g.shape == (4, 4, 3)
    assert g.dtype == np.float32
    assert g[1, 2, HEAD] == 1.0
    assert g[2, 2, BODY] == 1.0 and g[2, 1, BODY] == 1.0
    assert g[3, 0, FOOD] == 1.0
    assert g[:, :, HEAD].sum() == 1.0
    assert g[:, :, BODY].sum() == 2.0


def test_grid_frame_without_food():
    g = grid_frame(_snap(food=None))
    assert not g[:, :, FOOD].any()


def test_text_frame():
    assert text_frame(_snap()) == [
        "....",
        "..H.",
        ".oo.",
        "F...",
    ]
