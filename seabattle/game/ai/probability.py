"""Probability-density (heatmap) search."""

from __future__ import annotations

import random

import numpy as np

from seabattle.game.ai.hunt import HuntStrategy
from seabattle.game.ai.strategy import AIStrategy, GuessSet, TargetingMode
from seabattle.game.core.models import Coord


def compute_heatmap(size: int, ship_length: int, guesses: GuessSet) -> np.ndarray:
    """Score cells by how many guess-free ship windows cover them, normalised to [0, 1]."""
    blocked = np.zeros((size, size), dtype=bool)
    for coord in guesses:
        if 0 <= coord.row < size and 0 <= coord.col < size:
            blocked[coord.row, coord.col] = True

    heat = np.zeros((size, size), dtype=np.float64)
    for row in range(size):
        for col in range(size - ship_length + 1):
            if not blocked[row, col : col + ship_length].any():
                heat[row, col : col + ship_length] += 1
    for row in range(size - ship_length + 1):
        for col in range(size):
            if not blocked[row : row + ship_length, col].any():
                heat[row : row + ship_length, col] += 1

    heat[blocked] = 0.0
    max_score = heat.max(initial=0.0)
    if max_score <= 0:
        return np.zeros_like(heat)
    return heat / max_score


class ProbabilityStrategy(AIStrategy):
    """Fire at the cell covered by the most still-possible ship placements."""

    mode = TargetingMode.PROBABILITY

    def __init__(self, rng: random.Random, hunt: HuntStrategy, size: int, ship_length: int) -> None:
        self._rng = rng
        self._hunt = hunt
        self._size = size
        self._ship_length = ship_length
        self.scores: np.ndarray = np.zeros((size, size), dtype=np.float64)

    def choose_shot(self, guesses: GuessSet) -> Coord:
        self.scores = compute_heatmap(self._size, self._ship_length, guesses)
        best = self.best_coords()
        if not best:
            return self._hunt.choose_shot(guesses)
        return self._rng.choice(best)

    def best_coords(self) -> list[Coord]:
        """Row-major coordinates tied at the current maximum positive score."""
        max_score = self.scores.max(initial=0.0)
        if max_score <= 0:
            return []
        return [Coord(int(row), int(col)) for row, col in np.argwhere(self.scores == max_score)]

    def score(self, coord: Coord) -> float:
        return float(self.scores[coord.row, coord.col])
