import random

from seabattle.game.ai.engine import TargetingEngine
from seabattle.game.app.coordinator import TurnCoordinator
from seabattle.game.app.state_machine import GamePhase
from seabattle.game.core.models import Coord, Side
from seabattle.game.core.settings import GameConfig


class ScriptedTargeting(TargetingEngine):
    """Fires at a fixed list of cells first, then defers to the adaptive engine."""

    def __init__(self, config: GameConfig, rng: random.Random, script: list[Coord]) -> None:
        super().__init__(config, rng)
        self.script = list(script)

    def choose_shot(self, guesses):
        while self.script:
            coord = self.script.pop(0)
            if coord not in guesses:
                return coord
        return super().choose_shot(guesses)


def _play_out(coordinator: TurnCoordinator) -> None:
    water = [
        coord for coord in coordinator.cpu_board.untried_coords() if coordinator.cpu_board.ship_at(coord) is None
    ]
    while coordinator.phase is not GamePhase.GAME_OVER:
        if coordinator.phase is GamePhase.PLAYER_TURN:
            coordinator.submit_player_guess(water.pop(0).key)
        else:
            coordinator.cpu_turn()


def test_cpu_wins_when_it_fires_at_every_player_ship_cell() -> None:
    config = GameConfig()
    rng = random.Random(2024)
    coordinator = TurnCoordinator(config, rng)
    coordinator.setup()
    ship_cells = [cell for ship in coordinator.player_board.ships for cell in ship.locations]
    coordinator.targeting = ScriptedTargeting(config, rng, ship_cells)

    _play_out(coordinator)

    assert coordinator.player_num_ships == 0
    assert coordinator.cpu_num_ships == 3
    assert coordinator.winner is Side.CPU
    assert coordinator.stats.cpu_hits == 9
    assert coordinator.stats.turns_played == 9
    assert coordinator.last_message == config.message("cpu_win")
    cpu_shots = [event.coord for event in coordinator.events if event.side is Side.CPU]
    assert len(cpu_shots) == len(set(cpu_shots))


def test_adaptive_cpu_finishes_without_repeating_a_cell() -> None:
    config = GameConfig()
    coordinator = TurnCoordinator(config, random.Random(99))
    coordinator.setup()
    # The player only ever fires at water, so the CPU must win.
    _play_out(coordinator)

    assert coordinator.winner is Side.CPU
    assert coordinator.player_board.all_ships_sunk()
    cpu_shots = [event.coord for event in coordinator.events if event.side is Side.CPU]
    assert len(cpu_shots) == len(set(cpu_shots)) == len(coordinator.cpu_guesses)
    assert coordinator.stats.player_hits == 0
    assert coordinator.summary is not None
    assert coordinator.summary.player_board.sunk_ships == 3
