"""Error hierarchy for game rules, placement and targeting."""

from __future__ import annotations


class SeaBattleError(Exception):
    """Base class for all game errors."""


class ValidationError(SeaBattleError):
    """Recoverable rejection of a guessed coordinate."""

    kind = "validation"


class InvalidFormatError(ValidationError):
    kind = "invalid_format"


class OutOfBoundsError(ValidationError):
    kind = "out_of_bounds"


class DuplicateGuessError(ValidationError):
    kind = "duplicate_guess"


class PlacementError(SeaBattleError):
    """A board refused a single ship placement."""


class PlacementFailure(SeaBattleError):
    """A ship could not be placed within its attempt budget."""


class FleetConfigurationError(PlacementFailure):
    """No fleet layout fits the configured board, even after full regeneration."""


class TargetingExhaustion(SeaBattleError):
    """The CPU was asked to fire with no untried coordinate left."""


class GameStateError(SeaBattleError):
    """An operation was invoked in a phase that does not allow it."""
