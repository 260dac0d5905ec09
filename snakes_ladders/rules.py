"""Movement and win rules."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from snakes_ladders.board import Board


@runtime_checkable
class RuleSet(Protocol):
    """Stateless policy: pure functions of position, roll and board."""

    def is_valid_move(self, position: int, roll: int, board_size: int) -> bool: ...

    def resolve_position(self, position: int, roll: int, board: Board) -> int: ...

    def is_win(self, position: int, board_size: int) -> bool: ...


class StandardRules:
    """Exact landing to win; a roll past the last cell forfeits the turn."""

    def is_valid_move(self, position: int, roll: int, board_size: int) -> bool:
        return position + roll <= board_size

    def resolve_position(self, position: int, roll: int, board: Board) -> int:
        # One entity per move: the destination of a snake or ladder is
        # never checked for a second entity.
        landing = position + roll
        entity = board.entity_at(landing)
        if entity is not None:
            return entity.end
        return landing

    def is_win(self, position: int, board_size: int) -> bool:
        return position == board_size
