"""Text rendering of boards for the console."""

from __future__ import annotations

from typing import Mapping

from seabattle.game.core.board import Board
from seabattle.game.core.models import CellState

_SYMBOL_KEYS: dict[CellState, str] = {
    CellState.WATER: "water",
    CellState.SHIP_VISIBLE: "ship",
    CellState.HIT: "hit",
    CellState.MISS: "miss",
}


def render_board(board: Board, symbols: Mapping[str, str], reveal_ships: bool) -> list[str]:
    """Header of column indices followed by one line per row."""
    lines = ["  " + " ".join(str(col) for col in range(board.size))]
    for row_index, row in enumerate(board.grid.tolist()):
        cells = [_symbol_for(CellState(value), symbols, reveal_ships) for value in row]
        lines.append(f"{row_index} " + " ".join(cells))
    return lines


def render_side_by_side(opponent: Board, own: Board, symbols: Mapping[str, str]) -> str:
    """Opponent board (ships hidden) next to the viewer's own board."""
    left = render_board(opponent, symbols, reveal_ships=False)
    right = render_board(own, symbols, reveal_ships=True)
    width = max(len(line) for line in left)
    heading = f"{'--- OPPONENT BOARD ---':<{width}}     --- YOUR BOARD ---"
    rows = [f"{lhs:<{width}}     {rhs}" for lhs, rhs in zip(left, right)]
    return "\n".join([heading, *rows])


def _symbol_for(state: CellState, symbols: Mapping[str, str], reveal_ships: bool) -> str:
    if state is CellState.SHIP_VISIBLE and not reveal_ships:
        return symbols["water"]
    return symbols[_SYMBOL_KEYS[state]]
