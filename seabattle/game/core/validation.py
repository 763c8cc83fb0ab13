"""Coordinate text validation for human guesses."""

from __future__ import annotations

from typing import AbstractSet

from seabattle.game.core.errors import DuplicateGuessError, InvalidFormatError, OutOfBoundsError
from seabattle.game.core.models import Coord
from seabattle.game.core.settings import GameConfig


def parse_coordinate(text: str, config: GameConfig) -> Coord:
    """Parse two ASCII digits into an in-bounds coordinate."""
    if len(text) != 2 or not (text.isascii() and text.isdigit()):
        raise InvalidFormatError(config.message("invalid_input"))
    coord = Coord.from_key(text)
    if coord.row >= config.board_size or coord.col >= config.board_size:
        raise OutOfBoundsError(config.message("out_of_bounds", max=config.max_index))
    return coord


def validate_guess(text: str, config: GameConfig, guesses: AbstractSet[Coord]) -> Coord:
    """Run format, bounds and duplicate checks in that order."""
    coord = parse_coordinate(text, config)
    if coord in guesses:
        raise DuplicateGuessError(config.message("duplicate_guess"))
    return coord
