"""Game phase transitions for setup, turns, and game over."""

from enum import Enum, auto

from seabattle.game.core.errors import GameStateError


class GamePhase(Enum):
    """Top-level game phases."""

    SETUP = auto()
    PLAYER_TURN = auto()
    CPU_TURN = auto()
    GAME_OVER = auto()


TRANSITIONS: dict[GamePhase, frozenset[GamePhase]] = {
    GamePhase.SETUP: frozenset({GamePhase.PLAYER_TURN}),
    GamePhase.PLAYER_TURN: frozenset({GamePhase.CPU_TURN, GamePhase.GAME_OVER}),
    GamePhase.CPU_TURN: frozenset({GamePhase.PLAYER_TURN, GamePhase.GAME_OVER}),
    GamePhase.GAME_OVER: frozenset(),
}


def check_transition(current: GamePhase, target: GamePhase) -> GamePhase:
    """Return ``target`` when the move is legal, otherwise raise."""
    if target not in TRANSITIONS[current]:
        raise GameStateError(f"Illegal phase transition {current.name} -> {target.name}.")
    return target
