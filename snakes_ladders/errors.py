"""Exceptions raised by the engine."""

from __future__ import annotations


class SnakesLaddersError(Exception):
    """Base class for every error the engine raises on purpose."""


class ConfigurationError(SnakesLaddersError):
    """The caller asked for a board, entity, dice or game that cannot exist."""


class GameStateError(SnakesLaddersError):
    """An operation was requested in a state that does not allow it."""


class PlacementExhaustionError(SnakesLaddersError):
    """Random placement ran out of attempts before reaching its count."""

    def __init__(self, kind: str, placed: int, requested: int, attempts: int):
        self.kind = kind
        self.placed = placed
        self.requested = requested
        self.attempts = attempts
        super().__init__(
            f"Could only place {placed} of {requested} {kind}s "
            f"({attempts} attempts for the next one). "
            f"The board is too small for this many entities."
        )
