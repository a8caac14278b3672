# wrapsnake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
import numpy as np
from wrapsnake.config import AppConfig
from wrapsnake.core.interfaces import Snapshot
from wrapsnake.core.featurizers import grid_frame, text_frame

class HeadlessRenderer:
    """Keeps the last frame as an array instead of drawing it."""

    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frame: Optional[np.ndarray] = None
        self.last: Optional[Snapshot] = None
        self.frames = 0

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames = 0
        self.frame = np.zeros((cfg.board_size, cfg.board_size, 3), dtype=np.float32)

    def draw(self, snap: Snapshot) -> None:
        assert self.cfg is not None, "Renderer not opened"
        self.frame = grid_frame(snap)
        self.last = snap
        self.frames += 1

    def text(self) -> List[str]:
        return text_frame(self.last) if self.last is not None else []

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        self.cfg = None
