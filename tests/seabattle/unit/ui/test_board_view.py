from seabattle.game.core.models import Coord, Orientation
from seabattle.game.ui.board_view import render_board, render_side_by_side


def test_header_and_row_labels(board_factory, config) -> None:
    board = board_factory()
    lines = render_board(board, config.symbols, reveal_ships=True)
    assert lines[0] == "  0 1 2 3 4 5 6 7 8 9"
    assert lines[1] == "0 ~ ~ ~ ~ ~ ~ ~ ~ ~ ~"
    assert len(lines) == config.board_size + 1


def test_ships_hidden_unless_revealed(board_factory, config) -> None:
    board = board_factory((2, 3, Orientation.HORIZONTAL))
    hidden = render_board(board, config.symbols, reveal_ships=False)
    shown = render_board(board, config.symbols, reveal_ships=True)
    assert "S" not in "".join(hidden[1:])
    assert shown[3] == "2 ~ ~ ~ S S S ~ ~ ~ ~"


def test_hits_and_misses_always_visible(board_factory, config) -> None:
    board = board_factory((0, 0, Orientation.HORIZONTAL))
    board.attack(Coord(0, 0))
    board.attack(Coord(5, 5))
    lines = render_board(board, config.symbols, reveal_ships=False)
    assert lines[1].startswith("0 X ~ ~")
    assert lines[6] == "5 ~ ~ ~ ~ ~ O ~ ~ ~ ~"


def test_side_by_side_hides_only_opponent(board_factory, config) -> None:
    opponent = board_factory((0, 0, Orientation.HORIZONTAL))
    own = board_factory((0, 0, Orientation.HORIZONTAL))
    lines = render_side_by_side(opponent, own, config.symbols).splitlines()
    assert "--- OPPONENT BOARD ---" in lines[0]
    assert "--- YOUR BOARD ---" in lines[0]
    left, right = lines[2].split("     ", 1)
    assert left == "0 ~ ~ ~ ~ ~ ~ ~ ~ ~ ~"
    assert right == "0 S S S ~ ~ ~ ~ ~ ~ ~"
