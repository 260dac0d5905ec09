"""Board state: snakes, ladders and the cells they start on."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from snakes_ladders.errors import ConfigurationError

logger = logging.getLogger(__name__)

# fmt: off
STANDARD_SNAKES: list[tuple[int, int]] = [
    (99, 54), (95, 75), (92, 88), (89, 68), (74, 53),
    (64, 60), (62, 19), (49, 11), (46, 25), (16,  6),
]

STANDARD_LADDERS: list[tuple[int, int]] = [
    ( 2, 38), ( 7, 14), ( 8, 31), (15, 26), (21, 42), (28, 84),
    (36, 44), (51, 67), (71, 91), (78, 98), (87, 94),
]
# fmt: on

STANDARD_CELL_COUNT = 100


class EntityKind(Enum):
    SNAKE = "snake"
    LADDER = "ladder"


@dataclass(frozen=True)
class BoardEntity:
    """A snake or a ladder linking ``start`` to ``end`` (both 1-based cells).

    Snakes always lead down and ladders always lead up; anything else is a
    configuration mistake and is refused at construction.
    """

    kind: EntityKind
    start: int
    end: int

    def __post_init__(self):
        if self.start < 1 or self.end < 1:
            raise ConfigurationError(
                f"Invalid {self.kind.value} {self.start} -> {self.end}: cells start at 1."
            )
        if self.kind is EntityKind.SNAKE and self.end >= self.start:
            raise ConfigurationError(
                f"Invalid snake {self.start} -> {self.end}: end must be below start."
            )
        if self.kind is EntityKind.LADDER and self.end <= self.start:
            raise ConfigurationError(
                f"Invalid ladder {self.start} -> {self.end}: end must be above start."
            )

    @property
    def is_snake(self) -> bool:
        return self.kind is EntityKind.SNAKE

    @property
    def is_ladder(self) -> bool:
        return self.kind is EntityKind.LADDER

    def __str__(self) -> str:
        return f"{self.kind.value.capitalize()}: {self.start} -> {self.end}"


def snake(start: int, end: int) -> BoardEntity:
    return BoardEntity(EntityKind.SNAKE, start, end)


def ladder(start: int, end: int) -> BoardEntity:
    return BoardEntity(EntityKind.LADDER, start, end)


@dataclass
class Board:
    """A linear board of ``cell_count`` cells; the last cell is the goal.

    Entities are keyed by start cell, so at most one entity starts on any
    cell. End cells are not indexed and may coincide freely.
    """

    cell_count: int
    _entities: dict[int, BoardEntity] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if self.cell_count < 1:
            raise ConfigurationError(
                f"A board needs at least one cell, got {self.cell_count}."
            )

    @classmethod
    def square(cls, side: int) -> Board:
        """Traditional side x side board."""
        if side < 1:
            raise ConfigurationError(f"Board side must be positive, got {side}.")
        return cls(side * side)

    def size(self) -> int:
        return self.cell_count

    def can_place(self, cell: int) -> bool:
        return cell not in self._entities

    def place(self, entity: BoardEntity) -> bool:
        """Insert *entity* unless its start cell is taken. Returns whether it was placed."""
        if not self.can_place(entity.start):
            logger.debug("Cell %d already holds an entity, skipping %s", entity.start, entity)
            return False
        self._entities[entity.start] = entity
        return True

    def entity_at(self, cell: int) -> BoardEntity | None:
        return self._entities.get(cell)

    def entities(self) -> list[BoardEntity]:
        """All entities in placement order."""
        return list(self._entities.values())

    def snakes(self) -> list[BoardEntity]:
        return [e for e in self._entities.values() if e.is_snake]

    def ladders(self) -> list[BoardEntity]:
        return [e for e in self._entities.values() if e.is_ladder]
