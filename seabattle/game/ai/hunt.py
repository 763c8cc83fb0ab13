"""Uninformed random search."""

from __future__ import annotations

import random

from seabattle.game.ai.strategy import AIStrategy, GuessSet, TargetingMode
from seabattle.game.core.errors import TargetingExhaustion
from seabattle.game.core.models import Coord


class RandomStrategy(AIStrategy):
    """Fire at a uniformly random untried coordinate."""

    mode = TargetingMode.RANDOM

    def __init__(self, rng: random.Random, size: int) -> None:
        self._rng = rng
        self._size = size

    def choose_shot(self, guesses: GuessSet) -> Coord:
        # Row-major candidate order keeps seeded runs reproducible.
        candidates = [
            Coord(row, col)
            for row in range(self._size)
            for col in range(self._size)
            if Coord(row, col) not in guesses
        ]
        if not candidates:
            raise TargetingExhaustion(f"No untried coordinates left on the {self._size}x{self._size} board.")
        return self._rng.choice(candidates)


class HuntStrategy(RandomStrategy):
    """Random search that also remembers its own picks."""

    mode = TargetingMode.HUNT

    def __init__(self, rng: random.Random, size: int) -> None:
        super().__init__(rng, size)
        self.previous_moves: set[Coord] = set()

    def choose_shot(self, guesses: GuessSet) -> Coord:
        coord = super().choose_shot(guesses)
        self.previous_moves.add(coord)
        return coord

    def reset(self) -> None:
        self.previous_moves.clear()
