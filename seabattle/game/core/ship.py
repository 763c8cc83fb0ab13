"""Ship entity with hit tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from seabattle.game.core.models import Coord


@dataclass(slots=True, eq=False)
class Ship:
    """A placed vessel occupying a contiguous run of cells in one row or column."""

    locations: tuple[Coord, ...]
    hits: set[Coord] = field(default_factory=set)
    ship_id: int = 0

    def __post_init__(self) -> None:
        self.locations = tuple(self.locations)
        if not self.locations:
            raise ValueError("Ship must occupy at least one cell.")
        if len(set(self.locations)) != len(self.locations):
            raise ValueError("Ship locations must be distinct.")
        if not _is_contiguous_line(self.locations):
            raise ValueError("Ship must occupy a contiguous run in a single row or column.")
        self.hits = set(self.hits)
        if not self.hits.issubset(self.locations):
            raise ValueError("Ship hits must be a subset of its locations.")

    @property
    def length(self) -> int:
        return len(self.locations)

    def occupies(self, coord: Coord) -> bool:
        return coord in self.locations

    def hit(self, coord: Coord) -> bool:
        """Register a hit; return False when the coordinate is not part of this ship."""
        if coord not in self.locations:
            return False
        self.hits.add(coord)
        return True

    def is_sunk(self) -> bool:
        return len(self.hits) == len(self.locations)

    def unhit_locations(self) -> list[Coord]:
        return [coord for coord in self.locations if coord not in self.hits]

    def status(self) -> dict[str, object]:
        """Summary used by stats and debugging output."""
        return {
            "id": self.ship_id,
            "locations": [coord.key for coord in self.locations],
            "hits": sorted(coord.key for coord in self.hits),
            "is_sunk": self.is_sunk(),
            "hit_percentage": len(self.hits) / self.length * 100,
            "remaining_hits": self.length - len(self.hits),
        }


def _is_contiguous_line(cells: Iterable[Coord]) -> bool:
    ordered = sorted(cells)
    rows = {cell.row for cell in ordered}
    cols = {cell.col for cell in ordered}
    if len(rows) == 1:
        values = [cell.col for cell in ordered]
    elif len(cols) == 1:
        values = [cell.row for cell in ordered]
    else:
        return False
    return values == list(range(values[0], values[0] + len(values)))
