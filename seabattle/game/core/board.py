"""Board state representation and attack resolution."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from seabattle.game.core.errors import DuplicateGuessError, OutOfBoundsError, PlacementError
from seabattle.game.core.models import AttackResult, CellState, Coord
from seabattle.game.core.settings import GameConfig
from seabattle.game.core.ship import Ship


@dataclass(frozen=True, slots=True)
class BoardStats:
    """Point-in-time summary of a board."""

    size: int
    total_ships: int
    sunk_ships: int
    remaining_ships: int
    hits: int
    misses: int

    @property
    def accuracy(self) -> float:
        total = self.hits + self.misses
        return self.hits / total * 100 if total else 0.0


class Board:
    """Numpy-backed grid holding one side's fleet and the attacks made against it."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.size = config.board_size
        self.grid = np.full((self.size, self.size), CellState.WATER, dtype=np.int8)
        self.ships: list[Ship] = []
        self.attacked: set[Coord] = set()
        self.hit_count = 0
        self.miss_count = 0

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def ship_at(self, coord: Coord) -> Ship | None:
        for ship in self.ships:
            if ship.occupies(coord):
                return ship
        return None

    def can_place(self, ship: Ship) -> bool:
        """Return whether a ship fits in bounds without overlapping the fleet."""
        for cell in ship.locations:
            if not self.in_bounds(cell):
                return False
            if self.ship_at(cell) is not None:
                return False
        return True

    def place_ship(self, ship: Ship, visible: bool = False) -> None:
        """Add a ship to the fleet; ``visible`` marks its cells for the owner's view."""
        for cell in ship.locations:
            if not self.in_bounds(cell):
                raise PlacementError(f"Ship cell {cell.key} is outside the {self.size}x{self.size} board.")
            if self.ship_at(cell) is not None:
                raise PlacementError(f"Ship cell {cell.key} is already occupied.")
        ship.ship_id = len(self.ships) + 1
        self.ships.append(ship)
        if visible:
            for cell in ship.locations:
                self.grid[cell.row, cell.col] = CellState.SHIP_VISIBLE

    def was_attacked(self, coord: Coord) -> bool:
        return coord in self.attacked

    def attack(self, coord: Coord) -> AttackResult:
        """Resolve an attack and record it on the grid."""
        if not self.in_bounds(coord):
            raise OutOfBoundsError(f"Coordinate {coord.key} is outside the board.")
        if self.was_attacked(coord):
            raise DuplicateGuessError(f"Coordinate {coord.key} was already attacked.")

        self.attacked.add(coord)
        ship = self.ship_at(coord)
        if ship is None:
            self.miss_count += 1
            self.grid[coord.row, coord.col] = CellState.MISS
            return AttackResult(coord=coord, hit=False)

        ship.hit(coord)
        self.hit_count += 1
        self.grid[coord.row, coord.col] = CellState.HIT
        return AttackResult(coord=coord, hit=True, sunk=ship.is_sunk(), ship=ship)

    def cell_state(self, coord: Coord) -> CellState:
        return CellState(int(self.grid[coord.row, coord.col]))

    def all_ships_sunk(self) -> bool:
        """Return whether every ship has been sunk."""
        return all(ship.is_sunk() for ship in self.ships)

    def remaining_ships(self) -> int:
        return sum(1 for ship in self.ships if not ship.is_sunk())

    def untried_coords(self) -> list[Coord]:
        """Row-major list of coordinates not attacked yet."""
        return [
            Coord(row, col)
            for row in range(self.size)
            for col in range(self.size)
            if not self.was_attacked(Coord(row, col))
        ]

    def stats(self) -> BoardStats:
        sunk = sum(1 for ship in self.ships if ship.is_sunk())
        return BoardStats(
            size=self.size,
            total_ships=len(self.ships),
            sunk_ships=sunk,
            remaining_ships=len(self.ships) - sunk,
            hits=self.hit_count,
            misses=self.miss_count,
        )

    def reset(self) -> None:
        """Clear fleet, grid and attack bookkeeping."""
        self.grid.fill(CellState.WATER)
        self.ships.clear()
        self.attacked.clear()
        self.hit_count = 0
        self.miss_count = 0
