# wrapsnake/viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from wrapsnake.config import AppConfig
from wrapsnake.core.interfaces import Snapshot
import wrapsnake.viz.renderer_colors as theme


class PygameRenderer:
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._font: Optional[pg.font.Font] = None
        self.frames = 0
        self.caption = ""

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        side = cfg.board_size * self.cell
        self.surf = pg.display.set_mode((side, side))
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self.frames = 0

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """
        Draw onto a caller-owned surface; the caller flips and paces.
        Test hook: lets the suite draw without opening a window.
        """
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)
        if self.cfg.render_grid_lines:
            side = s.board_size * c
            for i in range(1, s.board_size):
                pg.draw.line(surf, theme.GRID, (i * c, 0), (i * c, side))
                pg.draw.line(surf, theme.GRID, (0, i * c), (side, i * c))

        if s.food is not None:
            fx, fy = s.food
            pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c, fy * c, c, c))

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))

        if self.cfg.render_show_hud:
            txt = self._get_font().render(f"Score: {s.score}", True, theme.TEXT)
            surf.blit(txt, (6, 4))

        if s.terminated:
            self._draw_game_over(s.score)

        if self._auto_flip:
            pg.display.flip()
        self.frames += 1

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    # GameListener: the window caption carries the score line
    def on_score(self, score: int) -> None:
        self._set_caption(f"Score: {score}")

    def on_game_over(self, snap: Snapshot) -> None:
        self._set_caption(f"Game over, score {snap.score}. Press R to restart")

    def on_reset(self, snap: Snapshot) -> None:
        self._set_caption(f"Score: {snap.score}")

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None

    # internals
    def _set_caption(self, status: str) -> None:
        title = self.cfg.render_title if self.cfg is not None else "Snake"
        self.caption = f"{title} | {status}"
        if self.clock is not None:
            pg.display.set_caption(self.caption)

    def _get_font(self) -> pg.font.Font:
        if self._font is None:
            self._font = pg.font.SysFont(None, 24)
        return self._font

    def _draw_game_over(self, score: int) -> None:
        assert self.surf is not None
        surf = self.surf
        w, h = surf.get_size()

        # Dim with translucent overlay
        overlay = pg.Surface((w, h), pg.SRCALPHA)
        overlay.fill(theme.SHADE)
        surf.blit(overlay, (0, 0))

        font = self._get_font()
        title = font.render("GAME OVER", True, theme.OVER_TEXT)
        sub = font.render("Press R to restart", True, theme.OVER_TEXT)
        sco = font.render(f"Score: {score}", True, theme.OVER_TEXT)
        surf.blit(title, title.get_rect(center=(w // 2, h // 2 - 16)))
        surf.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 16)))
        surf.blit(sco, sco.get_rect(center=(w // 2, h // 2 + 44)))
