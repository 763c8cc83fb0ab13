"""Board state capture and restore as plain JSON-compatible payloads."""

from __future__ import annotations

from seabattle.game.core.board import Board
from seabattle.game.core.models import CellState, Coord
from seabattle.game.core.settings import GameConfig
from seabattle.game.core.ship import Ship

SNAPSHOT_VERSION = 1


def capture_board(board: Board) -> dict[str, object]:
    """Convert a board into a JSON-serializable payload."""
    return {
        "version": SNAPSHOT_VERSION,
        "size": board.size,
        "grid": [
            [CellState(int(value)).name for value in row]
            for row in board.grid.tolist()
        ],
        "ships": [
            {
                "id": ship.ship_id,
                "locations": [coord.key for coord in ship.locations],
                "hits": sorted(coord.key for coord in ship.hits),
            }
            for ship in board.ships
        ],
        "attacked": sorted(coord.key for coord in board.attacked),
        "hit_count": board.hit_count,
        "miss_count": board.miss_count,
    }


def restore_board(payload: dict[str, object], config: GameConfig) -> Board:
    """Rebuild a board from a captured payload.

    Raises ``ValueError`` when the payload is malformed or its grid, ships, attacked cells and
    counters disagree with each other.
    """
    if _as_int(payload.get("version", -1), "version") != SNAPSHOT_VERSION:
        raise ValueError("Unsupported snapshot version.")
    if _as_int(payload.get("size", config.board_size), "size") != config.board_size:
        raise ValueError("Snapshot board size mismatch.")

    board = Board(config)
    board.grid[:, :] = _parse_grid(payload.get("grid"), config.board_size)

    raw_attacked = payload.get("attacked", [])
    if not isinstance(raw_attacked, list):
        raise ValueError("Snapshot attacked cells must be a list.")
    try:
        board.attacked = {Coord.from_key(str(key)) for key in raw_attacked}
    except ValueError as exc:
        raise ValueError("Malformed attacked coordinate in snapshot payload.") from exc
    if not all(board.in_bounds(coord) for coord in board.attacked):
        raise ValueError("Snapshot attacked coordinate outside the board.")

    raw_ships = payload.get("ships")
    if not isinstance(raw_ships, list):
        raise ValueError("Snapshot ships must be a list.")
    for item in raw_ships:
        if not isinstance(item, dict):
            raise ValueError("Each snapshot ship must be an object.")
        try:
            locations = tuple(Coord.from_key(str(key)) for key in item["locations"])
            hits = {Coord.from_key(str(key)) for key in item.get("hits", [])}
            ship = Ship(locations=locations, hits=hits)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError("Malformed ship entry in snapshot payload.") from exc
        if not board.can_place(ship):
            raise ValueError("Snapshot ships overlap or leave the board.")
        if not ship.hits <= board.attacked:
            raise ValueError("Snapshot ship hits must all be attacked cells.")
        ship.ship_id = _as_int(item.get("id", len(board.ships) + 1), "ship id")
        board.ships.append(ship)

    board.hit_count = _as_int(payload.get("hit_count", 0), "hit_count")
    board.miss_count = _as_int(payload.get("miss_count", 0), "miss_count")
    _check_consistency(board)
    return board


def _as_int(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Snapshot {label} must be int-compatible.")
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Snapshot {label} must be int-compatible.") from exc


def _check_consistency(board: Board) -> None:
    hits = 0
    for row in range(board.size):
        for col in range(board.size):
            coord = Coord(row, col)
            ship = board.ship_at(coord)
            state = board.cell_state(coord)
            if board.was_attacked(coord):
                expected = {CellState.HIT} if ship is not None else {CellState.MISS}
                if ship is not None:
                    if coord not in ship.hits:
                        raise ValueError(f"Snapshot attacked ship cell {coord.key} is not marked as hit.")
                    hits += 1
            else:
                expected = {CellState.WATER, CellState.SHIP_VISIBLE} if ship is not None else {CellState.WATER}
            if state not in expected:
                raise ValueError(f"Snapshot grid cell {coord.key} is {state.name}, inconsistent with ships.")
    if (board.hit_count, board.miss_count) != (hits, len(board.attacked) - hits):
        raise ValueError("Snapshot hit/miss counters disagree with the attacked cells.")


def _parse_grid(raw_grid: object, size: int) -> list[list[int]]:
    if not isinstance(raw_grid, list) or len(raw_grid) != size:
        raise ValueError("Snapshot grid must be a list of rows matching the board size.")
    rows: list[list[int]] = []
    for raw_row in raw_grid:
        if not isinstance(raw_row, list) or len(raw_row) != size:
            raise ValueError("Snapshot grid rows must match the board size.")
        try:
            rows.append([int(CellState[str(name)]) for name in raw_row])
        except KeyError as exc:
            raise ValueError(f"Unknown cell state in snapshot: {exc}.") from exc
    return rows
