"""Immutable game configuration shared by boards, placement and targeting."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Two-digit coordinates ("RC") cap the grid at ten rows and columns.
MAX_BOARD_SIZE = 10

DEFAULT_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        "water": "~",
        "ship": "S",
        "hit": "X",
        "miss": "O",
    }
)

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "player_hit": "PLAYER HIT!",
        "player_miss": "PLAYER MISS.",
        "cpu_hit": "CPU HIT at {coordinate}!",
        "cpu_miss": "CPU MISS at {coordinate}.",
        "ship_sunk": "You sunk an enemy battleship!",
        "cpu_ship_sunk": "CPU sunk your battleship!",
        "player_win": "*** CONGRATULATIONS! You sunk all enemy battleships! ***",
        "cpu_win": "*** GAME OVER! The CPU sunk all your battleships! ***",
        "invalid_input": "Oops, input must be exactly two digits (e.g., 00, 34, 98).",
        "out_of_bounds": "Oops, please enter valid row and column numbers between 0 and {max}.",
        "duplicate_guess": "You already guessed that location!",
    }
)


class _KeepMissing(dict[str, object]):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Game rules and presentation settings."""

    board_size: int = 10
    num_ships: int = 3
    ship_length: int = 3
    miss_streak_threshold: int = 3
    max_ship_attempts: int = 100
    max_layout_attempts: int = 50
    symbols: Mapping[str, str] = field(default_factory=lambda: DEFAULT_SYMBOLS)
    messages: Mapping[str, str] = field(default_factory=lambda: DEFAULT_MESSAGES)

    def __post_init__(self) -> None:
        if not 1 <= self.board_size <= MAX_BOARD_SIZE:
            raise ValueError(f"board_size must be between 1 and {MAX_BOARD_SIZE}.")
        if self.num_ships < 1:
            raise ValueError("num_ships must be at least 1.")
        if not 1 <= self.ship_length <= self.board_size:
            raise ValueError("ship_length must be between 1 and board_size.")
        for name in ("miss_streak_threshold", "max_ship_attempts", "max_layout_attempts"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1.")
        missing = {"water", "ship", "hit", "miss"} - set(self.symbols)
        if missing:
            raise ValueError(f"Missing board symbols: {', '.join(sorted(missing))}.")
        # Freeze caller-supplied mappings so the config stays immutable.
        object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))
        object.__setattr__(self, "messages", MappingProxyType({**DEFAULT_MESSAGES, **self.messages}))

    @property
    def max_index(self) -> int:
        return self.board_size - 1

    def message(self, key: str, **params: object) -> str:
        """Render a message template, leaving unknown placeholders untouched."""
        return self.messages[key].format_map(_KeepMissing(params))
