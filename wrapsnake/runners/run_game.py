# wrapsnake/runners/run_game.py
from __future__ import annotations
import logging
import pygame as pg
from wrapsnake.config import AppConfig
from wrapsnake.core.snake_rules import Rules
from wrapsnake.core.scheduler import TickScheduler
from wrapsnake.viz.renderer_pygame import PygameRenderer
from wrapsnake.viz.keyboard import Keyboard, QUIT, RESTART
from wrapsnake.runners.session import SessionStats

logger = logging.getLogger(__name__)


def main(cfg: AppConfig) -> SessionStats:
    """Human play in a pygame window until the window is closed."""
    stats = SessionStats()
    rules = Rules(cfg, listeners=[stats])

    rend = PygameRenderer()
    rend.open(rules.cfg)
    rules.add_listener(rend)
    rend.on_reset(rules.snapshot())
    side = rules.cfg.board_size * rules.cfg.render_cell
    kbd = Keyboard(swipe_threshold=cfg.swipe_threshold, window_size=(side, side))
    sched = TickScheduler(rules, on_tick=rend.draw, tick_ms=cfg.tick_ms)

    print("=== Snake ===")
    print(f"board: {cfg.board_size}x{cfg.board_size}  tick: {cfg.tick_ms}ms  seed: {cfg.seed}")
    print("arrows / swipe to steer, R to restart after game over, Esc to quit")

    rend.draw(rules.snapshot())
    try:
        running = True
        while running:
            # 1) input
            for cmd in kbd.poll():
                if cmd == QUIT:
                    running = False
                    break
                if cmd == RESTART:
                    # restart is only offered once the game is over
                    if sched.stopped:
                        rend.draw(sched.restart())
                    continue
                rules.set_direction(cmd)

            # 2) update + render, gated on the tick window
            if running:
                sched.on_frame(pg.time.get_ticks())
                rend.tick(cfg.fps)
    finally:
        rend.close()

    for g in stats.games:
        print(f"[game {g.game}] score={g.score} length={g.length} ticks={g.ticks}")
    logger.info("session finished: games=%d best=%d", len(stats.games), stats.best)
    return stats
