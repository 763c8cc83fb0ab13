"""Turn coordination: setup, alternating attacks, and win detection."""

from __future__ import annotations

import logging
import random

from seabattle.game.ai.engine import TargetingEngine
from seabattle.game.app.state_machine import GamePhase, check_transition
from seabattle.game.app.stats import GameEvent, GameOverSummary, GameStats
from seabattle.game.core.board import Board
from seabattle.game.core.errors import FleetConfigurationError, GameStateError
from seabattle.game.core.fleet import place_fleet
from seabattle.game.core.models import AttackResult, Coord, Side
from seabattle.game.core.settings import GameConfig
from seabattle.game.core.validation import validate_guess

logger = logging.getLogger(__name__)


class TurnCoordinator:
    """Runs one game between the human player and the CPU."""

    def __init__(
        self,
        config: GameConfig,
        rng: random.Random,
        *,
        targeting: TargetingEngine | None = None,
    ) -> None:
        self.config = config
        self._rng = rng
        self.player_board = Board(config)
        self.cpu_board = Board(config)
        self.player_guesses: set[Coord] = set()
        self.cpu_guesses: set[Coord] = set()
        self.targeting = targeting if targeting is not None else TargetingEngine(config, rng)
        self.stats = GameStats()
        self.events: list[GameEvent] = []
        self.history: list[str] = []
        self.phase = GamePhase.SETUP
        self.winner: Side | None = None
        self.summary: GameOverSummary | None = None
        self.last_message = "Boards created."

    @property
    def player_num_ships(self) -> int:
        return self.player_board.remaining_ships()

    @property
    def cpu_num_ships(self) -> int:
        return self.cpu_board.remaining_ships()

    def setup(self) -> None:
        """Place both fleets and hand the first turn to the player."""
        self._require(GamePhase.SETUP)
        try:
            place_fleet(self.player_board, self.config, self._rng, visible=True)
            place_fleet(self.cpu_board, self.config, self._rng)
        except FleetConfigurationError as exc:
            logger.error("game_setup_failed reason=%s", exc)
            raise
        self._message(f"Try to sink the {self.cpu_num_ships} enemy ships.")
        self._transition(GamePhase.PLAYER_TURN)

    def submit_player_guess(self, text: str) -> AttackResult:
        """Validate raw input and fire it; a ValidationError leaves the game untouched."""
        self._require(GamePhase.PLAYER_TURN)
        coord = validate_guess(text, self.config, self.player_guesses)
        return self.player_fire(coord)

    def player_fire(self, coord: Coord) -> AttackResult:
        """Resolve a player shot at the CPU board."""
        self._require(GamePhase.PLAYER_TURN)
        result = self.cpu_board.attack(coord)
        self.player_guesses.add(coord)
        self.stats.record(Side.PLAYER, result)

        message = self.config.message("player_hit" if result.hit else "player_miss", coordinate=coord.key)
        if result.sunk:
            message = f"{message} {self.config.message('ship_sunk')}"
        self._record_event(Side.PLAYER, result, message)

        if self.cpu_board.all_ships_sunk():
            self._finish(Side.PLAYER)
        else:
            self._transition(GamePhase.CPU_TURN)
        return result

    def cpu_turn(self) -> AttackResult:
        """Let the targeting engine pick a shot and resolve it at the player board."""
        self._require(GamePhase.CPU_TURN)
        coord = self.targeting.choose_shot(self.cpu_guesses)
        result = self.player_board.attack(coord)
        self.cpu_guesses.add(coord)
        self.targeting.notify_result(result, self.cpu_guesses)
        self.stats.record(Side.CPU, result)
        self.stats.turns_played += 1

        message = self.config.message("cpu_hit" if result.hit else "cpu_miss", coordinate=coord.key)
        if result.sunk:
            message = f"{message} {self.config.message('cpu_ship_sunk')}"
        self._record_event(Side.CPU, result, message)

        if self.player_board.all_ships_sunk():
            self._finish(Side.CPU)
        else:
            self._transition(GamePhase.PLAYER_TURN)
        return result

    def status(self) -> dict[str, object]:
        """Snapshot of game progress for external monitoring."""
        return {
            "player_ships": self.player_num_ships,
            "cpu_ships": self.cpu_num_ships,
            "phase": self.phase.name,
            "winner": self.winner.value if self.winner else None,
            "total_turns": self.stats.turns_played,
            "player_moves": len(self.player_guesses),
            "cpu_moves": len(self.cpu_guesses),
        }

    def _finish(self, winner: Side) -> None:
        self._transition(GamePhase.GAME_OVER)
        self.winner = winner
        self.summary = GameOverSummary(
            winner=winner,
            stats=self.stats.snapshot(),
            player_board=self.player_board.stats(),
            cpu_board=self.cpu_board.stats(),
        )
        self._message(self.config.message("player_win" if winner is Side.PLAYER else "cpu_win"))
        logger.info(
            "game_over winner=%s turns=%d player_moves=%d cpu_moves=%d",
            winner.value,
            self.stats.turns_played,
            len(self.player_guesses),
            len(self.cpu_guesses),
        )

    def _record_event(self, side: Side, result: AttackResult, message: str) -> None:
        self.events.append(GameEvent(side=side, coord=result.coord, outcome=result.outcome, message=message))
        self._message(message)

    def _message(self, message: str) -> None:
        self.last_message = message
        self.history.append(message)

    def _require(self, phase: GamePhase) -> None:
        if self.phase is not phase:
            raise GameStateError(f"Expected phase {phase.name}, game is in {self.phase.name}.")

    def _transition(self, target: GamePhase) -> None:
        previous = self.phase
        self.phase = check_transition(previous, target)
        logger.debug("game_phase from=%s to=%s", previous.name, target.name)
