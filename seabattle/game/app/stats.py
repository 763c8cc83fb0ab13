"""Statistics and event log accumulated from attack results."""

from __future__ import annotations

from dataclasses import dataclass, replace

from seabattle.game.core.board import BoardStats
from seabattle.game.core.models import AttackResult, Coord, ShotResult, Side


@dataclass(frozen=True, slots=True)
class GameEvent:
    """One resolved attack, as shown to the player."""

    side: Side
    coord: Coord
    outcome: ShotResult
    message: str


@dataclass(slots=True)
class GameStats:
    """Per-side hit/miss counters and completed turns."""

    player_hits: int = 0
    player_misses: int = 0
    cpu_hits: int = 0
    cpu_misses: int = 0
    turns_played: int = 0

    def record(self, side: Side, result: AttackResult) -> None:
        if side is Side.PLAYER:
            if result.hit:
                self.player_hits += 1
            else:
                self.player_misses += 1
        elif result.hit:
            self.cpu_hits += 1
        else:
            self.cpu_misses += 1

    def accuracy(self, side: Side) -> float:
        """Hit percentage for ``side``; 0 before any shot."""
        if side is Side.PLAYER:
            hits, misses = self.player_hits, self.player_misses
        else:
            hits, misses = self.cpu_hits, self.cpu_misses
        total = hits + misses
        return hits / total * 100 if total else 0.0

    def snapshot(self) -> GameStats:
        return replace(self)


@dataclass(frozen=True, slots=True)
class GameOverSummary:
    """Final record of a finished game."""

    winner: Side
    stats: GameStats
    player_board: BoardStats
    cpu_board: BoardStats


def format_summary(summary: GameOverSummary) -> list[str]:
    """Human-readable end-of-game statistics."""
    stats = summary.stats
    lines = [
        "Game Statistics:",
        f"Player - Hits: {stats.player_hits}, Misses: {stats.player_misses}",
        f"CPU - Hits: {stats.cpu_hits}, Misses: {stats.cpu_misses}",
        f"Total turns: {stats.turns_played}",
    ]
    if stats.player_hits + stats.player_misses:
        lines.append(f"Player accuracy: {stats.accuracy(Side.PLAYER):.1f}%")
    if stats.cpu_hits + stats.cpu_misses:
        lines.append(f"CPU accuracy: {stats.accuracy(Side.CPU):.1f}%")
    return lines
