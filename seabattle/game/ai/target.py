"""Hit-driven directional search."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seabattle.game.ai.hunt import HuntStrategy
from seabattle.game.ai.strategy import AIStrategy, GuessSet, TargetingMode
from seabattle.game.core.models import AttackResult, Coord, Orientation

logger = logging.getLogger(__name__)

BASE_PRIORITY = 1
ALIGNED_PRIORITY = 3


@dataclass(slots=True)
class TargetEntry:
    """Queued candidate next to a known hit."""

    coord: Coord
    direction: str
    priority: int = BASE_PRIORITY


class TargetStrategy(AIStrategy):
    """Probe neighbours of hits, favouring the inferred ship line."""

    mode = TargetingMode.TARGET

    def __init__(self, hunt: HuntStrategy, size: int) -> None:
        self._hunt = hunt
        self._size = size
        self.queue: list[TargetEntry] = []
        self.hit_history: list[Coord] = []
        self.orientation: Orientation | None = None

    def add_targets(self, hit: Coord, guesses: GuessSet) -> None:
        """Queue the untried orthogonal neighbours of ``hit``."""
        queued = {entry.coord for entry in self.queue}
        for coord, direction in hit.neighbors():
            if not (0 <= coord.row < self._size and 0 <= coord.col < self._size):
                continue
            if coord in guesses or coord in queued:
                continue
            self.queue.append(TargetEntry(coord=coord, direction=direction, priority=self._priority_for(coord)))
            queued.add(coord)
        self._sort_queue()

    def record_hit(self, hit: Coord, guesses: GuessSet) -> None:
        """Seed targets from a hit and refine the orientation guess."""
        self.add_targets(hit, guesses)
        self.hit_history.append(hit)
        self._infer_orientation()

    def notify_result(self, result: AttackResult, guesses: GuessSet) -> None:
        """Chase a hit; forget everything once the ship goes down."""
        if result.sunk:
            self.reset()
        elif result.hit:
            self.record_hit(result.coord, guesses)

    def choose_shot(self, guesses: GuessSet) -> Coord:
        while self.queue:
            entry = self.queue.pop(0)
            if entry.coord not in guesses:
                return entry.coord
        # Queue drained: borrow a hunt move without leaving target mode.
        return self._hunt.choose_shot(guesses)

    def reset(self) -> None:
        self.queue.clear()
        self.hit_history.clear()
        self.orientation = None

    def state(self) -> dict[str, object]:
        """Debug view of the queue and recent hits."""
        return {
            "queue_length": len(self.queue),
            "hit_history_length": len(self.hit_history),
            "next_target": self.queue[0].coord.key if self.queue else None,
            "recent_hits": [coord.key for coord in self.hit_history[-3:]],
            "orientation": self.orientation.value if self.orientation else None,
        }

    def _infer_orientation(self) -> None:
        if len(self.hit_history) < 2:
            return
        previous, latest = self.hit_history[-2:]
        if previous.row == latest.row:
            self.orientation = Orientation.HORIZONTAL
        elif previous.col == latest.col:
            self.orientation = Orientation.VERTICAL
        else:
            return
        logger.debug("target_orientation_inferred orientation=%s line=%s", self.orientation, latest.key)
        for entry in self.queue:
            entry.priority = self._priority_for(entry.coord)
        self._sort_queue()

    def _priority_for(self, coord: Coord) -> int:
        if self.orientation is None or not self.hit_history:
            return BASE_PRIORITY
        latest = self.hit_history[-1]
        if self.orientation is Orientation.HORIZONTAL and coord.row == latest.row:
            return ALIGNED_PRIORITY
        if self.orientation is Orientation.VERTICAL and coord.col == latest.col:
            return ALIGNED_PRIORITY
        return BASE_PRIORITY

    def _sort_queue(self) -> None:
        # Stable sort keeps insertion order inside each priority level.
        self.queue.sort(key=lambda entry: entry.priority, reverse=True)
