from __future__ import annotations

import random

import pytest

from seabattle.game.core.board import Board
from seabattle.game.core.models import Coord, Orientation, cells_for_ship
from seabattle.game.core.settings import GameConfig
from seabattle.game.core.ship import Ship


def make_ship(row: int, col: int, orientation: Orientation = Orientation.HORIZONTAL, length: int = 3) -> Ship:
    return Ship(locations=tuple(cells_for_ship(Coord(row, col), length, orientation)))


def make_board(config: GameConfig, *bows: tuple[int, int, Orientation]) -> Board:
    board = Board(config)
    for row, col, orientation in bows:
        board.place_ship(make_ship(row, col, orientation, config.ship_length), visible=True)
    return board


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def ship_factory():
    return make_ship


@pytest.fixture
def board_factory(config: GameConfig):
    def _make(*bows: tuple[int, int, Orientation]) -> Board:
        return make_board(config, *bows)

    return _make
