"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seabattle.game.core.ship import Ship


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class CellState(IntEnum):
    """Display state of a single board cell."""

    WATER = 0
    SHIP_VISIBLE = 1
    HIT = 2
    MISS = 3


class ShotResult(StrEnum):
    """Result of a single shot."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"


class Side(StrEnum):
    """Participant in a game."""

    PLAYER = "player"
    CPU = "cpu"

    @property
    def opponent(self) -> Side:
        return Side.CPU if self is Side.PLAYER else Side.PLAYER


@dataclass(frozen=True, slots=True, order=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int

    @property
    def key(self) -> str:
        """Two-digit "RC" text form."""
        return f"{self.row}{self.col}"

    @classmethod
    def from_key(cls, key: str) -> Coord:
        """Parse a two-digit "RC" key without bounds checks."""
        if len(key) != 2 or not (key.isascii() and key.isdigit()):
            raise ValueError(f"Malformed coordinate key: {key!r}.")
        return cls(int(key[0]), int(key[1]))

    def neighbors(self) -> tuple[tuple[Coord, str], ...]:
        """Orthogonal neighbours in north, south, west, east order."""
        return (
            (Coord(self.row - 1, self.col), "north"),
            (Coord(self.row + 1, self.col), "south"),
            (Coord(self.row, self.col - 1), "west"),
            (Coord(self.row, self.col + 1), "east"),
        )

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class AttackResult:
    """Outcome of resolving one attack against a board."""

    coord: Coord
    hit: bool
    sunk: bool = False
    ship: Ship | None = None

    @property
    def outcome(self) -> ShotResult:
        if self.sunk:
            return ShotResult.SUNK
        if self.hit:
            return ShotResult.HIT
        return ShotResult.MISS


def cells_for_ship(bow: Coord, length: int, orientation: Orientation) -> list[Coord]:
    """Compute occupied cells for a ship starting at ``bow``."""
    result: list[Coord] = []
    for i in range(length):
        if orientation is Orientation.HORIZONTAL:
            result.append(Coord(bow.row, bow.col + i))
        else:
            result.append(Coord(bow.row + i, bow.col))
    return result
