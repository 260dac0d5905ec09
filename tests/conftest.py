"""Shared fakes for the engine tests."""

from __future__ import annotations

import pytest

from snakes_ladders.board import Board
from snakes_ladders.game import Game, ListListener, Player
from snakes_ladders.layouts import StandardSetup


class ScriptedDice:
    """Deterministic dice for testing: returns a fixed sequence of rolls."""

    def __init__(self, rolls: list[int]):
        self.rolls = list(rolls)
        self._idx = 0

    def roll(self) -> int:
        value = self.rolls[self._idx]
        self._idx += 1
        return value


@pytest.fixture
def standard_board() -> Board:
    board = Board(100)
    StandardSetup().apply(board)
    return board


def make_game(
    board: Board,
    rolls: list[int],
    names: tuple[str, ...] = ("Alice", "Bob"),
    positions: tuple[int, ...] | None = None,
) -> tuple[Game, ListListener]:
    game = Game(board, ScriptedDice(rolls))
    for i, name in enumerate(names, start=1):
        player = Player(id=i, name=name)
        if positions is not None:
            player.position = positions[i - 1]
        game.add_player(player)
    listener = ListListener()
    game.add_listener(listener)
    return game, listener
