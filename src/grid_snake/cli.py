"""Command-line launcher for the snake game."""

from __future__ import annotations

import argparse
import logging
import sys

from grid_snake.config import GameConfig
from grid_snake.engine import GameEngine, GameOutcome

logger = logging.getLogger(__name__)

EXIT_CODES: dict[GameOutcome, int] = {
    GameOutcome.QUIT: 0,
    GameOutcome.GRID_FULL: 0,
    GameOutcome.COLLIDED: 1,
}
EXIT_BAD_CONFIG = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Play snake on a wrapping grid with the arrow keys.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument(
        "--dump-config", type=str, default=None, metavar="PATH",
        help="Write the effective config to PATH and exit.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--columns", type=int, default=None)
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--block-size", type=int, default=None)
    parser.add_argument("--fps", type=int, default=None)
    parser.add_argument("--move-interval-ms", type=int, default=None)
    parser.add_argument("--snake-length", type=int, default=None)
    parser.add_argument(
        "--snake-heading", type=str, default=None,
        choices=["up", "down", "left", "right"],
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log food placement and other debug detail.",
    )
    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    for name in (
        "columns", "rows", "block_size", "fps", "move_interval_ms",
        "snake_length", "snake_heading",
    ):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val

    if overrides:
        config = config.replace(**overrides)
    return config


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = _load_config(args)
    except (OSError, ValueError, TypeError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_BAD_CONFIG

    if args.dump_config:
        config.save(args.dump_config)
        return 0

    from grid_snake.display import run_window

    engine = GameEngine(config, seed=args.seed)
    outcome = run_window(engine)
    return EXIT_CODES[outcome]


if __name__ == "__main__":
    sys.exit(main())
