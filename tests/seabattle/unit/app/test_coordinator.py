import logging
import random

import pytest

from seabattle.game.app.coordinator import TurnCoordinator
from seabattle.game.app.state_machine import GamePhase
from seabattle.game.core.errors import (
    DuplicateGuessError,
    FleetConfigurationError,
    GameStateError,
    InvalidFormatError,
)
from seabattle.game.core.models import Coord, ShotResult, Side
from seabattle.game.core.settings import GameConfig


def _ready(seed: int = 11, config: GameConfig | None = None) -> TurnCoordinator:
    coordinator = TurnCoordinator(config or GameConfig(), random.Random(seed))
    coordinator.setup()
    return coordinator


def _water(board) -> Coord:
    return next(coord for coord in board.untried_coords() if board.ship_at(coord) is None)


def test_setup_places_both_fleets_and_starts_player_turn() -> None:
    coordinator = _ready()
    assert coordinator.phase is GamePhase.PLAYER_TURN
    assert coordinator.player_num_ships == 3
    assert coordinator.cpu_num_ships == 3
    # Only the player's own fleet is marked visible.
    assert int((coordinator.player_board.grid != 0).sum()) == 9
    assert int((coordinator.cpu_board.grid != 0).sum()) == 0


def test_setup_failure_is_fatal_and_keeps_setup_phase(caplog: pytest.LogCaptureFixture) -> None:
    config = GameConfig(board_size=3, num_ships=4, ship_length=3, max_ship_attempts=5, max_layout_attempts=2)
    coordinator = TurnCoordinator(config, random.Random(1))
    with caplog.at_level(logging.ERROR), pytest.raises(FleetConfigurationError):
        coordinator.setup()
    assert coordinator.phase is GamePhase.SETUP
    # The caller owns the traceback; setup only reports the reason.
    setup_records = [r for r in caplog.records if r.name == "seabattle.game.app.coordinator"]
    assert len(setup_records) == 1
    assert setup_records[0].exc_info is None
    assert "game_setup_failed" in setup_records[0].getMessage()


def test_invalid_input_never_transitions() -> None:
    coordinator = _ready()
    with pytest.raises(InvalidFormatError):
        coordinator.submit_player_guess("abc")
    assert coordinator.phase is GamePhase.PLAYER_TURN
    assert not coordinator.player_guesses
    assert not coordinator.events


def test_player_then_cpu_turn_cycle() -> None:
    coordinator = _ready()
    target = _water(coordinator.cpu_board)
    result = coordinator.submit_player_guess(target.key)
    assert result.outcome is ShotResult.MISS
    assert coordinator.phase is GamePhase.CPU_TURN
    assert coordinator.last_message == "PLAYER MISS."

    cpu_result = coordinator.cpu_turn()
    assert coordinator.phase is GamePhase.PLAYER_TURN
    assert cpu_result.coord in coordinator.cpu_guesses
    assert coordinator.stats.turns_played == 1
    assert coordinator.events[-1].side is Side.CPU
    assert cpu_result.coord.key in coordinator.last_message


def test_duplicate_player_guess_rejected_on_next_turn() -> None:
    coordinator = _ready()
    target = _water(coordinator.cpu_board)
    coordinator.player_fire(target)
    coordinator.cpu_turn()
    with pytest.raises(DuplicateGuessError):
        coordinator.submit_player_guess(target.key)
    assert coordinator.phase is GamePhase.PLAYER_TURN


def test_wrong_phase_calls_raise() -> None:
    coordinator = TurnCoordinator(GameConfig(), random.Random(2))
    with pytest.raises(GameStateError):
        coordinator.cpu_turn()
    coordinator.setup()
    with pytest.raises(GameStateError):
        coordinator.setup()
    with pytest.raises(GameStateError):
        coordinator.cpu_turn()


def test_player_wins_when_cpu_fleet_sunk() -> None:
    coordinator = _ready()
    cells = [cell for ship in coordinator.cpu_board.ships for cell in ship.locations]
    for index, cell in enumerate(cells):
        result = coordinator.player_fire(cell)
        assert result.hit
        if index < len(cells) - 1:
            coordinator.cpu_turn()
    assert coordinator.phase is GamePhase.GAME_OVER
    assert coordinator.winner is Side.PLAYER
    assert coordinator.cpu_num_ships == 0
    assert coordinator.summary is not None
    assert coordinator.summary.stats.player_hits == len(cells)
    assert coordinator.summary.cpu_board.sunk_ships == 3
    assert coordinator.last_message.startswith("*** CONGRATULATIONS!")
    assert any("You sunk an enemy battleship!" in message for message in coordinator.history)
    with pytest.raises(GameStateError):
        coordinator.player_fire(_water(coordinator.cpu_board))


def test_status_reports_progress() -> None:
    coordinator = _ready()
    coordinator.player_fire(_water(coordinator.cpu_board))
    status = coordinator.status()
    assert status["phase"] == "CPU_TURN"
    assert status["player_moves"] == 1
    assert status["cpu_moves"] == 0
    assert status["winner"] is None
