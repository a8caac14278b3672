# wrapsnake/viz/keyboard.py
from __future__ import annotations
from typing import List, Optional, Tuple, Union
import pygame as pg
from wrapsnake.core.gestures import SwipeTracker
from wrapsnake.core.interfaces import Direction, RIGHT, LEFT, DOWN, UP

QUIT = "quit"
RESTART = "restart"

Command = Union[Direction, str]

_ARROWS = {
    pg.K_UP: UP,
    pg.K_DOWN: DOWN,
    pg.K_LEFT: LEFT,
    pg.K_RIGHT: RIGHT,
}


class Keyboard:
    """
    Maps pygame events to commands: a direction intent, RESTART or QUIT.

    Arrow keys steer; touch swipes and left-button drags go through a
    SwipeTracker. Anything else is ignored.
    """

    def __init__(self, swipe_threshold: float = 20, window_size: Tuple[int, int] = (480, 480)):
        self.swipe = SwipeTracker(swipe_threshold)
        self.window_size = window_size

    def poll(self) -> List[Command]:
        out: List[Command] = []
        for e in pg.event.get():
            cmd = self.translate(e)
            if cmd is not None:
                out.append(cmd)
        return out

    def translate(self, e: pg.event.Event) -> Optional[Command]:
        if e.type == pg.QUIT:
            return QUIT
        if e.type == pg.KEYDOWN:
            if e.key == pg.K_ESCAPE: return QUIT
            if e.key == pg.K_r:      return RESTART
            return _ARROWS.get(e.key)

        # touch: finger coordinates are normalized to [0, 1]
        if e.type == pg.FINGERDOWN:
            self.swipe.start(*self._to_px(e.x, e.y))
        elif e.type == pg.FINGERMOTION:
            return self.swipe.move(*self._to_px(e.x, e.y))
        elif e.type == pg.FINGERUP:
            self.swipe.cancel()

        # mouse drags, skipping the mouse events SDL synthesizes from touches
        elif getattr(e, "touch", False):
            return None
        elif e.type == pg.MOUSEBUTTONDOWN and e.button == 1:
            self.swipe.start(*e.pos)
        elif e.type == pg.MOUSEMOTION and e.buttons[0]:
            return self.swipe.move(*e.pos)
        elif e.type == pg.MOUSEBUTTONUP and e.button == 1:
            self.swipe.cancel()
        return None

    def _to_px(self, x: float, y: float) -> Tuple[float, float]:
        w, h = self.window_size
        return x * w, y * h
