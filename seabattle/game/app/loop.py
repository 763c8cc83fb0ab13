"""Blocking console loop driving a TurnCoordinator."""

from __future__ import annotations

import logging
from typing import Callable

from seabattle.game.app.coordinator import TurnCoordinator
from seabattle.game.app.state_machine import GamePhase
from seabattle.game.app.stats import GameOverSummary, format_summary
from seabattle.game.core.errors import ValidationError
from seabattle.game.ui.board_view import render_side_by_side

logger = logging.getLogger(__name__)

PROMPT = "Enter your guess (e.g., 00): "

Prompt = Callable[[str], str]
Emit = Callable[[str], None]


def run_game(coordinator: TurnCoordinator, prompt: Prompt = input, emit: Emit = print) -> GameOverSummary:
    """Play one game to completion, re-prompting on invalid input."""
    seen = 0
    if coordinator.phase is GamePhase.SETUP:
        coordinator.setup()
        emit(f"{coordinator.config.num_ships} ships placed randomly for each side.")
        emit("\nLet's play Sea Battle!")

    while coordinator.phase is not GamePhase.GAME_OVER:
        seen = _emit_new_messages(coordinator, emit, seen)
        if coordinator.phase is GamePhase.PLAYER_TURN:
            emit(_boards(coordinator))
            raw = prompt(PROMPT).strip()
            try:
                coordinator.submit_player_guess(raw)
            except ValidationError as exc:
                logger.debug("player_input_rejected kind=%s raw=%r", exc.kind, raw)
                emit(str(exc))
        else:
            coordinator.cpu_turn()

    _emit_new_messages(coordinator, emit, seen)
    emit(_boards(coordinator))
    summary = coordinator.summary
    if summary is None:
        raise RuntimeError("Game ended without a summary.")
    for line in format_summary(summary):
        emit(line)
    return summary


def _emit_new_messages(coordinator: TurnCoordinator, emit: Emit, seen: int) -> int:
    for message in coordinator.history[seen:]:
        emit(message)
    return len(coordinator.history)


def _boards(coordinator: TurnCoordinator) -> str:
    return "\n" + render_side_by_side(
        coordinator.cpu_board, coordinator.player_board, coordinator.config.symbols
    ) + "\n"
