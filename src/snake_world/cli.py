"""Command-line launcher for headless snake games."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace

from snake_world.config import GameConfig
from snake_world.interop import direction_from_name
from snake_world.session import GameSession
from snake_world.snake import Direction

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-world",
        description="Run and configure headless snake games.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Run one game without rendering.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    play_p.add_argument("--width", type=int, default=None)
    play_p.add_argument("--spawn", type=int, default=None)
    play_p.add_argument("--length", type=int, default=None)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument(
        "--fps", type=float, default=0.0,
        help="Ticks per second; 0 runs as fast as possible.",
    )
    play_p.add_argument("--max-ticks", type=int, default=100)
    play_p.add_argument(
        "--moves", type=str, default="",
        help="Comma-separated directions, one requested per tick.",
    )

    # --- config ---
    config_p = sub.add_parser("config", help="Write a config file.")
    config_p.add_argument("output", help="Path for the JSON config.")
    config_p.add_argument("--width", type=int, default=None)
    config_p.add_argument("--spawn", type=int, default=None)
    config_p.add_argument("--length", type=int, default=None)
    config_p.add_argument("--fps", type=float, default=None)
    config_p.add_argument("--seed", type=int, default=None)

    return parser


def _config_from_args(args: argparse.Namespace) -> GameConfig:
    config = (
        GameConfig.load(args.config)
        if getattr(args, "config", None) else GameConfig()
    )
    flag_map = {
        "width": "world_size",
        "spawn": "spawn_index",
        "length": "initial_snake_length",
        "fps": "fps",
        "seed": "seed",
    }
    overrides: dict = {}
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    return replace(config, **overrides) if overrides else config


def _parse_moves(raw: str) -> list[Direction]:
    return [direction_from_name(m) for m in raw.split(",") if m.strip()]


def _run_play(args: argparse.Namespace) -> int:
    try:
        config = _config_from_args(args)
        moves = iter(_parse_moves(args.moves))
    except (OSError, TypeError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    session = GameSession(config)

    def _feed_next_move(_state: dict | None = None) -> None:
        move = next(moves, None)
        if move is not None:
            session.request_direction(move)

    _feed_next_move()
    state = asyncio.run(
        session.run(max_ticks=args.max_ticks, on_tick=_feed_next_move),
    )
    print(json.dumps(state))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    try:
        config = _config_from_args(args)
    except (OSError, TypeError, ValueError) as exc:
        logger.error("%s", exc)
        return 2
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-world`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
