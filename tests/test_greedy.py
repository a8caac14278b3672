# tests/test_greedy.py
import pytest

from wrapsnake.core.interfaces import RIGHT, LEFT, UP, DOWN, GameStatus, Snapshot
from wrapsnake.policy.greedy import GreedyPolicy, moves_toward, step, wrap_delta


def _snap(snake, direction, food, n=20):
    return Snapshot(tuple(snake), food, direction, 0, GameStatus.RUNNING, n, 0)


@pytest.mark.parametrize("a, b, expected", [
    (2, 5, 3),
    (5, 2, -3),
    (19, 0, 1),
    (0, 19, -1),
    (0, 10, 10),
    (7, 7, 0),
])
def test_wrap_delta(a, b, expected):
    assert wrap_delta(a, b, 20) == expected


def test_step_wraps():
    assert step((19, 0), RIGHT, 20) == (0, 0)
    assert step((0, 0), UP, 20) == (0, 19)


def test_moves_toward_prefers_longer_axis_first():
    prefs = moves_toward((10, 10), (12, 5), 20)
    assert prefs[:2] == [UP, RIGHT]
    assert sorted(prefs) == sorted([RIGHT, LEFT, UP, DOWN])


def test_goes_through_the_edge_when_shorter():
    s = _snap([(19, 10), (18, 10), (17, 10)], RIGHT, (1, 10))
    assert GreedyPolicy().act(s) == RIGHT


def test_never_reverses():
    s = _snap([(10, 10), (9, 10), (8, 10)], RIGHT, (5, 10))
    assert GreedyPolicy().act(s) != LEFT


def test_steps_around_the_body():
    # food straight up, but the cell above is body
    s = _snap([(5, 5), (6, 5), (6, 4), (5, 4), (4, 4)], LEFT, (5, 0))
    d = GreedyPolicy().act(s)
    assert step((5, 5), d, 20) not in s.snake


def test_boxed_in_keeps_heading():
    s = _snap([(1, 1), (2, 1), (2, 0), (1, 0), (0, 0), (0, 1), (0, 2), (1, 2), (2, 2)],
              LEFT, (5, 5), n=3)
    assert GreedyPolicy().act(s) == LEFT
