# wrapsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    board_size: int = 20
    start_len: int = 3
    seed: Optional[int] = None

    # pacing
    tick_ms: int = 100          # one advance() per elapsed window
    fps: int = 60               # frame cap of the render loop

    # input
    swipe_threshold: int = 20

    # render
    render_cell: int = 24
    render_title: str = "Snake"
    render_show_hud: bool = True
    render_grid_lines: bool = False

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
