# tests/test_keyboard.py
import pygame as pg
import pytest

from wrapsnake.core.interfaces import RIGHT, LEFT, UP, DOWN
from wrapsnake.viz.keyboard import Keyboard, QUIT, RESTART


@pytest.fixture
def kbd():
    return Keyboard(swipe_threshold=20, window_size=(400, 400))


@pytest.mark.parametrize("key, expected", [
    (pg.K_UP, UP),
    (pg.K_DOWN, DOWN),
    (pg.K_LEFT, LEFT),
    (pg.K_RIGHT, RIGHT),
    (pg.K_r, RESTART),
    (pg.K_ESCAPE, QUIT),
    (pg.K_a, None),
    (pg.K_SPACE, None),
])
def test_keys(kbd, key, expected):
    assert kbd.translate(pg.event.Event(pg.KEYDOWN, key=key)) == expected


def test_window_close_quits(kbd):
    assert kbd.translate(pg.event.Event(pg.QUIT)) == QUIT


def test_finger_swipe_scaled_to_window(kbd):
    assert kbd.translate(pg.event.Event(pg.FINGERDOWN, x=0.5, y=0.5)) is None
    # 0.04 * 400 = 16px: below threshold
    assert kbd.translate(pg.event.Event(pg.FINGERMOTION, x=0.54, y=0.5)) is None
    assert kbd.translate(pg.event.Event(pg.FINGERMOTION, x=0.5, y=0.4)) == UP


def test_finger_up_cancels(kbd):
    kbd.translate(pg.event.Event(pg.FINGERDOWN, x=0.5, y=0.5))
    kbd.translate(pg.event.Event(pg.FINGERUP, x=0.5, y=0.5))
    assert kbd.translate(pg.event.Event(pg.FINGERMOTION, x=0.9, y=0.5)) is None


def test_mouse_drag_swipes(kbd):
    kbd.translate(pg.event.Event(pg.MOUSEBUTTONDOWN, pos=(100, 100), button=1))
    e = pg.event.Event(pg.MOUSEMOTION, pos=(60, 105), rel=(-40, 5), buttons=(1, 0, 0))
    assert kbd.translate(e) == LEFT


def test_mouse_motion_without_button_is_ignored(kbd):
    kbd.translate(pg.event.Event(pg.MOUSEBUTTONDOWN, pos=(100, 100), button=1))
    kbd.translate(pg.event.Event(pg.MOUSEBUTTONUP, pos=(100, 100), button=1))
    e = pg.event.Event(pg.MOUSEMOTION, pos=(200, 100), rel=(100, 0), buttons=(0, 0, 0))
    assert kbd.translate(e) is None


def test_mouse_events_synthesized_from_touch_are_skipped(kbd):
    kbd.translate(pg.event.Event(pg.MOUSEBUTTONDOWN, pos=(100, 100), button=1, touch=True))
    assert not kbd.swipe.active


def test_poll_collects_every_command_in_order(kbd):
    pg.display.set_mode((40, 40))
    pg.event.clear()
    pg.event.post(pg.event.Event(pg.KEYDOWN, key=pg.K_UP))
    pg.event.post(pg.event.Event(pg.KEYDOWN, key=pg.K_a))
    pg.event.post(pg.event.Event(pg.KEYDOWN, key=pg.K_LEFT))
    assert kbd.poll() == [UP, LEFT]
