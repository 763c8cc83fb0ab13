"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence

from seabattle.game.app.coordinator import TurnCoordinator
from seabattle.game.app.loop import run_game
from seabattle.game.core.errors import SeaBattleError
from seabattle.game.infra.config import load_default_env_files, load_game_config
from seabattle.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seabattle", description="Play Sea Battle against the CPU.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible game.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one console game."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    setup_logging()
    try:
        config = load_game_config()
        logger.info(
            "game_config board_size=%d num_ships=%d ship_length=%d seed=%s",
            config.board_size,
            config.num_ships,
            config.ship_length,
            args.seed,
        )
        coordinator = TurnCoordinator(config, random.Random(args.seed))
        run_game(coordinator)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        return 130
    except (SeaBattleError, ValueError):
        logger.exception("game_aborted")
        return 1
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    sys.exit(main())
