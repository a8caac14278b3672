# wrapsnake/main.py
import argparse
import logging

from wrapsnake.config import AppConfig
from wrapsnake.core.snake_rules import InvalidBoardError

_DEFAULTS = AppConfig()


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="wrapsnake", description="Snake on a wrap-around grid.")
    p.add_argument("mode", choices=["play", "headless"])
    p.add_argument("--board-size", type=int, default=_DEFAULTS.board_size)
    p.add_argument("--start-len", type=int, default=_DEFAULTS.start_len)
    p.add_argument("--tick-ms", type=int, default=_DEFAULTS.tick_ms)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell", type=int, default=_DEFAULTS.render_cell, help="cell size in pixels")
    p.add_argument("--games", type=int, default=5, help="headless: games to play")
    p.add_argument("--max-ticks", type=int, default=2000, help="headless: tick cap per game")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def build_config(args) -> AppConfig:
    return AppConfig().with_(
        board_size=args.board_size,
        start_len=args.start_len,
        tick_ms=args.tick_ms,
        seed=args.seed,
        render_cell=args.cell,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)

    try:
        if args.mode == "play":
            from wrapsnake.runners.run_game import main as play
            play(cfg)
        elif args.mode == "headless":
            from wrapsnake.runners.run_headless import main as headless
            headless(cfg, games=args.games, max_ticks=args.max_ticks)
    except InvalidBoardError as e:
        logging.getLogger("wrapsnake").error("invalid board: %s", e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
