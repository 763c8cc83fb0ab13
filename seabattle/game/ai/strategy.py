"""AI strategy interface and targeting modes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import AbstractSet

from seabattle.game.core.models import AttackResult, Coord

GuessSet = AbstractSet[Coord]


class TargetingMode(StrEnum):
    """Mode the CPU opponent is searching in."""

    RANDOM = "random"
    HUNT = "hunt"
    TARGET = "target"
    PROBABILITY = "probability"


class AIStrategy(ABC):
    """Interface for CPU shot selection against one board."""

    mode: TargetingMode

    @abstractmethod
    def choose_shot(self, guesses: GuessSet) -> Coord:
        """Return the next coordinate to fire at; never a member of ``guesses``."""

    def notify_result(self, result: AttackResult, guesses: GuessSet) -> None:
        """Update strategy state with a shot result.

        Modes that pick from the guess set alone keep no per-shot state and ignore results.
        """
