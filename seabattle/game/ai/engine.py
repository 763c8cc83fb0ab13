"""CPU targeting context: owns the modes and switches between them."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass

from seabattle.game.ai.hunt import HuntStrategy, RandomStrategy
from seabattle.game.ai.probability import ProbabilityStrategy
from seabattle.game.ai.strategy import AIStrategy, GuessSet, TargetingMode
from seabattle.game.ai.target import TargetStrategy
from seabattle.game.core.errors import TargetingExhaustion
from seabattle.game.core.models import AttackResult, Coord
from seabattle.game.core.settings import GameConfig

logger = logging.getLogger(__name__)

MOVE_HISTORY_LIMIT = 10


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One CPU shot and the mode that picked it."""

    coord: Coord
    mode: TargetingMode
    hit: bool | None = None
    sunk: bool | None = None


class TargetingEngine:
    """Hunt until something is hit, finish it off, escalate to heatmap search on dry spells."""

    def __init__(
        self,
        config: GameConfig,
        rng: random.Random,
        initial_mode: TargetingMode = TargetingMode.HUNT,
    ) -> None:
        if initial_mode not in (TargetingMode.HUNT, TargetingMode.RANDOM):
            raise ValueError("Targeting must start in hunt or random mode.")
        self._config = config
        self._size = config.board_size
        self._adaptive = initial_mode is TargetingMode.HUNT
        self.random = RandomStrategy(rng, self._size)
        self.hunt = HuntStrategy(rng, self._size)
        self.target = TargetStrategy(self.hunt, self._size)
        self.probability = ProbabilityStrategy(rng, self.hunt, self._size, config.ship_length)
        self.mode = initial_mode
        self.consecutive_misses = 0
        self.hits = 0
        self.misses = 0
        self.ships_sunk = 0
        self.move_history: deque[MoveRecord] = deque(maxlen=MOVE_HISTORY_LIMIT)

    @property
    def strategy(self) -> AIStrategy:
        return {
            TargetingMode.RANDOM: self.random,
            TargetingMode.HUNT: self.hunt,
            TargetingMode.TARGET: self.target,
            TargetingMode.PROBABILITY: self.probability,
        }[self.mode]

    def choose_shot(self, guesses: GuessSet) -> Coord:
        """Pick the next coordinate to attack with the active mode."""
        if len(guesses) >= self._size * self._size:
            raise TargetingExhaustion("Targeting asked for a move after every coordinate was tried.")
        coord = self.strategy.choose_shot(guesses)
        if coord in guesses:
            raise TargetingExhaustion(f"{self.mode} mode produced repeated coordinate {coord.key}.")
        self.move_history.append(MoveRecord(coord=coord, mode=self.mode))
        return coord

    def notify_result(self, result: AttackResult, guesses: GuessSet) -> None:
        """Feed an attack outcome back and update the mode."""
        self._record_stats(result)
        if not self._adaptive:
            self.strategy.notify_result(result, guesses)
            return

        # A fresh hit hands the result to Target; a sunk goes to whichever mode fired it.
        if result.hit and not result.sunk:
            self.consecutive_misses = 0
            self._switch(TargetingMode.TARGET)
        self.strategy.notify_result(result, guesses)

        if result.sunk:
            self.consecutive_misses = 0
            self._switch(TargetingMode.HUNT)
        elif not result.hit and self.mode is TargetingMode.HUNT:
            self.consecutive_misses += 1
            if self.consecutive_misses >= self._config.miss_streak_threshold:
                self._switch(TargetingMode.PROBABILITY)

    def stats(self) -> dict[str, object]:
        total = self.hits + self.misses
        return {
            "hits": self.hits,
            "misses": self.misses,
            "ships_sunk": self.ships_sunk,
            "total_moves": total,
            "accuracy": self.hits / total * 100 if total else 0.0,
            "mode": self.mode.value,
            "recent_moves": list(self.move_history),
        }

    def _record_stats(self, result: AttackResult) -> None:
        if result.hit:
            self.hits += 1
            if result.sunk:
                self.ships_sunk += 1
        else:
            self.misses += 1
        if self.move_history and self.move_history[-1].coord == result.coord:
            last = self.move_history.pop()
            self.move_history.append(MoveRecord(last.coord, last.mode, hit=result.hit, sunk=result.sunk))

    def _switch(self, mode: TargetingMode) -> None:
        if mode is self.mode:
            return
        logger.debug(
            "targeting_mode_switch from=%s to=%s misses=%d",
            self.mode,
            mode,
            self.consecutive_misses,
        )
        self.mode = mode
