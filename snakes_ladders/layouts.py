"""Board setup strategies: how a fresh board gets its snakes and ladders.

Every strategy is applied exactly once, right after the board is created.
Three are available:

* ``StandardSetup`` reproduces the traditional 10x10 layout verbatim.
* ``RandomSetup`` scatters about one entity per ten cells, biased towards
  snakes or ladders by difficulty.
* ``CustomCountSetup`` places caller-chosen counts at random, or
  caller-chosen positions exactly.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol, runtime_checkable

from snakes_ladders.board import (
    STANDARD_CELL_COUNT,
    STANDARD_LADDERS,
    STANDARD_SNAKES,
    Board,
    BoardEntity,
    EntityKind,
    ladder,
    snake,
)
from snakes_ladders.dice import default_rng
from snakes_ladders.errors import ConfigurationError, PlacementExhaustionError

logger = logging.getLogger(__name__)

RANDOM_ATTEMPTS = 50
CUSTOM_MAX_ATTEMPTS = 10_000

# Snakes start no lower than cell 10 and ladders no higher than size - 10,
# so random draws need at least this many cells.
MIN_RANDOM_CELLS = 11


@runtime_checkable
class BoardSetupStrategy(Protocol):
    """Anything that can populate an empty board."""

    def apply(self, board: Board) -> None: ...


# ── Random draws ─────────────────────────────────────────────────────

Draw = Callable[[random.Random, int], "BoardEntity | None"]


def draw_snake(rng: random.Random, cells: int) -> BoardEntity | None:
    """Start in [10, cells-1], end anywhere below it."""
    if cells < MIN_RANDOM_CELLS:
        return None
    start = rng.randint(10, cells - 1)
    end = rng.randint(1, start - 1)
    return snake(start, end)


def draw_ladder(rng: random.Random, cells: int) -> BoardEntity | None:
    """Start in [1, cells-10], end above it but short of the final cell.

    The end is drawn up to ``cells`` inclusive and a draw that hits the
    final cell counts as a failed attempt.
    """
    if cells < MIN_RANDOM_CELLS:
        return None
    start = rng.randint(1, cells - 10)
    end = rng.randint(start + 1, cells)
    if end >= cells:
        return None
    return ladder(start, end)


_DRAWS: dict[EntityKind, Draw] = {
    EntityKind.SNAKE: draw_snake,
    EntityKind.LADDER: draw_ladder,
}


def place_with_retries(
    board: Board, kind: EntityKind, rng: random.Random, max_attempts: int,
) -> int | None:
    """Try up to *max_attempts* draws of *kind*.

    Returns the number of attempts it took, or None if every attempt
    collided with an occupied start cell or was otherwise rejected.
    """
    draw = _DRAWS[kind]
    for attempt in range(1, max_attempts + 1):
        candidate = draw(rng, board.size())
        if candidate is None or not board.can_place(candidate.start):
            continue
        board.place(candidate)
        return attempt
    return None


# ── Standard ─────────────────────────────────────────────────────────

@dataclass
class StandardSetup:
    """The traditional layout: 10 snakes and 11 ladders on 100 cells."""

    def apply(self, board: Board) -> None:
        if board.size() != STANDARD_CELL_COUNT:
            raise ConfigurationError(
                f"Standard configuration supports only a 10x10 board "
                f"({STANDARD_CELL_COUNT} cells), got {board.size()} cells."
            )
        for start, end in STANDARD_SNAKES:
            board.place(snake(start, end))
        for start, end in STANDARD_LADDERS:
            board.place(ladder(start, end))
        logger.info("Standard layout placed: %d entities", len(board.entities()))


# ── Random by difficulty ─────────────────────────────────────────────

class Difficulty(Enum):
    """Probability that any one random entity is a snake."""

    EASY = 0.3
    MEDIUM = 0.5
    HARD = 0.7

    @property
    def snake_probability(self) -> float:
        return self.value


@dataclass
class RandomSetup:
    """About size // 10 entities, snakes or ladders by coin flip.

    An entity whose draws keep colliding is dropped after a few dozen
    attempts, so the board may hold fewer than the target.
    """

    difficulty: Difficulty = Difficulty.MEDIUM
    rng: random.Random = field(default_factory=default_rng, repr=False)
    attempts: int = RANDOM_ATTEMPTS

    def apply(self, board: Board) -> None:
        target = board.size() // 10
        placed = 0
        for _ in range(target):
            if self.rng.random() < self.difficulty.snake_probability:
                kind = EntityKind.SNAKE
            else:
                kind = EntityKind.LADDER
            if place_with_retries(board, kind, self.rng, self.attempts) is None:
                logger.debug("Gave up on a %s after %d attempts", kind.value, self.attempts)
            else:
                placed += 1
        logger.info(
            "Random layout (%s) placed %d of %d entities on %d cells",
            self.difficulty.name.lower(), placed, target, board.size(),
        )


# ── Custom counts / positions ────────────────────────────────────────

@dataclass
class CustomCountSetup:
    """Caller-chosen snake and ladder counts.

    With ``random_placement`` the counts are met exactly by random draws,
    up to ``max_attempts`` per entity; running out raises
    PlacementExhaustionError. Otherwise the explicit ``(start, end)`` pairs
    are placed in order and a pair whose start is already taken is skipped.
    """

    snake_count: int = 0
    ladder_count: int = 0
    random_placement: bool = True
    snake_positions: list[tuple[int, int]] = field(default_factory=list)
    ladder_positions: list[tuple[int, int]] = field(default_factory=list)
    rng: random.Random = field(default_factory=default_rng, repr=False)
    max_attempts: int = CUSTOM_MAX_ATTEMPTS

    def __post_init__(self):
        if self.snake_count < 0 or self.ladder_count < 0:
            raise ConfigurationError("Snake and ladder counts cannot be negative.")

    def add_snake_position(self, start: int, end: int) -> None:
        self.snake_positions.append((start, end))

    def add_ladder_position(self, start: int, end: int) -> None:
        self.ladder_positions.append((start, end))

    def apply(self, board: Board) -> None:
        if self.random_placement:
            self._place_random(board, EntityKind.SNAKE, self.snake_count)
            self._place_random(board, EntityKind.LADDER, self.ladder_count)
        else:
            self._place_explicit(board)

    def _place_random(self, board: Board, kind: EntityKind, count: int) -> None:
        if count and board.size() < MIN_RANDOM_CELLS:
            raise PlacementExhaustionError(kind.value, 0, count, 0)
        for placed in range(count):
            if place_with_retries(board, kind, self.rng, self.max_attempts) is None:
                raise PlacementExhaustionError(kind.value, placed, count, self.max_attempts)

    def _place_explicit(self, board: Board) -> None:
        # Build and check everything first so a bad pair leaves the board untouched.
        entities = [snake(s, e) for s, e in self.snake_positions]
        entities += [ladder(s, e) for s, e in self.ladder_positions]
        for entity in entities:
            _check_on_board(entity, board.size())

        for entity in entities:
            if not board.place(entity):
                logger.debug("Skipped %s: start cell already occupied", entity)


def _check_on_board(entity: BoardEntity, cells: int) -> None:
    # A snake on the final cell would make the game unwinnable.
    if entity.start >= cells or entity.end > cells:
        raise ConfigurationError(
            f"{entity} does not fit on a board of {cells} cells."
        )
