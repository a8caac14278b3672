# wrapsnake/runners/run_headless.py
from __future__ import annotations
import logging
from wrapsnake.config import AppConfig
from wrapsnake.core.snake_rules import Rules
from wrapsnake.core.scheduler import TickScheduler
from wrapsnake.core.interfaces import Policy
from wrapsnake.policy.greedy import GreedyPolicy
from wrapsnake.viz.render_iface import Renderer
from wrapsnake.viz.renderer_headless import HeadlessRenderer
from wrapsnake.runners.session import SessionStats

logger = logging.getLogger(__name__)


def main(cfg: AppConfig, games: int = 5, max_ticks: int = 2000) -> SessionStats:
    """
    Autopilot play without a display. The scheduler is fed a simulated
    clock that moves one tick window per frame, so every frame advances.
    """
    stats = SessionStats()
    rules = Rules(cfg, listeners=[stats])
    rend: Renderer = HeadlessRenderer()
    rend.open(cfg)
    policy: Policy = GreedyPolicy()
    sched = TickScheduler(rules, on_tick=rend.draw, tick_ms=cfg.tick_ms)

    print("=== Snake (headless) ===")
    print(f"board: {cfg.board_size}x{cfg.board_size}  games: {games}  max ticks: {max_ticks}")

    for ep in range(games):
        snap = sched.restart() if ep else rules.snapshot()
        now = 0
        sched.on_frame(now)  # arms the timer
        while sched.running and snap.tick_count < max_ticks:
            rules.set_direction(policy.act(snap))
            now += cfg.tick_ms
            sched.on_frame(now)
            snap = rules.snapshot()
        if not snap.terminated:
            stats.record(snap)  # truncated at max_ticks
        g = stats.games[-1]
        reason = "collision" if snap.terminated else "max_ticks"
        print(f"[game {ep}] score={g.score} length={g.length} ticks={g.ticks} end={reason}")

    rend.close()
    print(f"best score: {stats.best}")
    logger.info("headless session: games=%d best=%d ticks=%d",
                len(stats.games), stats.best, sum(g.ticks for g in stats.games))
    return stats
