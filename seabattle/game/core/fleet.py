"""Random fleet placement."""

from __future__ import annotations

import logging
import random

from seabattle.game.core.board import Board
from seabattle.game.core.errors import FleetConfigurationError, PlacementError, PlacementFailure
from seabattle.game.core.models import Coord, Orientation, cells_for_ship
from seabattle.game.core.settings import GameConfig
from seabattle.game.core.ship import Ship

logger = logging.getLogger(__name__)


def random_ship(
    config: GameConfig,
    rng: random.Random,
    orientation: Orientation | None = None,
) -> Ship:
    """Draw an in-bounds ship with a uniformly random orientation and start."""
    if orientation is None:
        orientation = rng.choice([Orientation.HORIZONTAL, Orientation.VERTICAL])
    size = config.board_size
    length = config.ship_length
    max_row = size if orientation is Orientation.HORIZONTAL else size - length + 1
    max_col = size - length + 1 if orientation is Orientation.HORIZONTAL else size
    bow = Coord(rng.randrange(max_row), rng.randrange(max_col))
    return Ship(locations=tuple(cells_for_ship(bow, length, orientation)))


def place_random_ship(board: Board, config: GameConfig, rng: random.Random, visible: bool = False) -> Ship:
    """Place one ship, redrawing on overlap until the attempt cap is spent."""
    for _ in range(config.max_ship_attempts):
        ship = random_ship(config, rng)
        try:
            board.place_ship(ship, visible=visible)
        except PlacementError:
            continue
        return ship
    raise PlacementFailure(
        f"Could not place ship #{len(board.ships) + 1} after {config.max_ship_attempts} attempts."
    )


def place_fleet(board: Board, config: GameConfig, rng: random.Random, visible: bool = False) -> list[Ship]:
    """Populate ``board`` with ``num_ships`` non-overlapping ships.

    A ship that cannot be placed discards the whole layout and starts over. Running out of
    layout attempts means the configuration cannot fit on the board.
    """
    for attempt in range(1, config.max_layout_attempts + 1):
        board.reset()
        try:
            ships = [place_random_ship(board, config, rng, visible=visible) for _ in range(config.num_ships)]
        except PlacementFailure as exc:
            logger.debug("fleet_layout_retry attempt=%d reason=%s", attempt, exc)
            continue
        logger.debug("fleet_placed ships=%d layout_attempts=%d", len(ships), attempt)
        return ships

    board.reset()
    logger.error(
        "fleet_layout_exhausted size=%d num_ships=%d ship_length=%d",
        config.board_size,
        config.num_ships,
        config.ship_length,
    )
    raise FleetConfigurationError(
        f"Unable to fit {config.num_ships} ships of length {config.ship_length} on a "
        f"{config.board_size}x{config.board_size} board after {config.max_layout_attempts} layouts."
    )
