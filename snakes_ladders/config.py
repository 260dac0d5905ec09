"""Game configuration: which board to build and who plays."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from snakes_ladders.errors import ConfigurationError
from snakes_ladders.layouts import Difficulty

STANDARD_SIDE = 10


@dataclass
class StandardMode:
    """Traditional 10x10 board."""


@dataclass
class RandomMode:
    board_side: int = STANDARD_SIDE
    difficulty: Difficulty = Difficulty.MEDIUM


@dataclass
class CustomMode:
    board_side: int = STANDARD_SIDE
    snake_count: int = 0
    ladder_count: int = 0
    random_placement: bool = True
    snake_positions: list[tuple[int, int]] = field(default_factory=list)
    ladder_positions: list[tuple[int, int]] = field(default_factory=list)


GameMode = StandardMode | RandomMode | CustomMode


@dataclass
class GameConfig:
    mode: GameMode = field(default_factory=StandardMode)
    player_names: list[str] = field(default_factory=list)
    seed: int | None = None

    def validate(self) -> None:
        if len(self.player_names) < 2:
            raise ConfigurationError(
                f"At least 2 player names are required, got {len(self.player_names)}."
            )
        if isinstance(self.mode, (RandomMode, CustomMode)) and self.mode.board_side < 1:
            raise ConfigurationError(
                f"Board side must be positive, got {self.mode.board_side}."
            )

    def make_rng(self) -> random.Random:
        """The one generator for this run; shared by dice and layout."""
        return random.Random(self.seed)


def parse_position(text: str) -> tuple[int, int]:
    """'16:6' → (16, 6)."""
    left, sep, right = text.strip().partition(":")
    if not sep:
        raise ConfigurationError(f"Cannot read {text!r} as START:END.")
    try:
        return int(left), int(right)
    except ValueError:
        raise ConfigurationError(f"Cannot read {text!r} as START:END.") from None


def parse_difficulty(text: str) -> Difficulty:
    try:
        return Difficulty[text.strip().upper()]
    except KeyError:
        choices = ", ".join(d.name.lower() for d in Difficulty)
        raise ConfigurationError(f"Unknown difficulty {text!r}. Pick one of {choices}.") from None
