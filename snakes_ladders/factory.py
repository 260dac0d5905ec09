"""Wiring: board + layout + dice + rules → a ready Game."""

from __future__ import annotations

import random

from snakes_ladders.board import Board
from snakes_ladders.config import CustomMode, GameConfig, RandomMode, StandardMode, STANDARD_SIDE
from snakes_ladders.dice import Dice, default_rng
from snakes_ladders.game import Game, Player, make_roster
from snakes_ladders.layouts import (
    BoardSetupStrategy,
    CustomCountSetup,
    Difficulty,
    RandomSetup,
    StandardSetup,
)
from snakes_ladders.rules import StandardRules

DICE_FACES = 6


def _assemble(board_side: int, strategy: BoardSetupStrategy, rng: random.Random) -> Game:
    board = Board.square(board_side)
    strategy.apply(board)
    return Game(board, Dice(DICE_FACES, rng), StandardRules())


def create_standard_game(rng: random.Random | None = None) -> Game:
    return _assemble(STANDARD_SIDE, StandardSetup(), rng or default_rng())


def create_random_game(
    board_side: int,
    difficulty: Difficulty,
    rng: random.Random | None = None,
) -> Game:
    rng = rng or default_rng()
    return _assemble(board_side, RandomSetup(difficulty, rng), rng)


def create_custom_game(
    board_side: int,
    strategy: BoardSetupStrategy,
    rng: random.Random | None = None,
) -> Game:
    return _assemble(board_side, strategy, rng or default_rng())


def create_game(
    config: GameConfig,
    rng: random.Random | None = None,
    players: list[Player] | None = None,
) -> Game:
    """Build the configured game and seat its players.

    Uses ``config.seed`` for the generator unless *rng* is given. Existing
    *players* (e.g. from a previous game, keeping their win counts) are
    moved back to the start and seated instead of a fresh roster.
    """
    config.validate()
    rng = rng or config.make_rng()
    mode = config.mode

    if isinstance(mode, StandardMode):
        game = create_standard_game(rng)
    elif isinstance(mode, RandomMode):
        game = create_random_game(mode.board_side, mode.difficulty, rng)
    elif isinstance(mode, CustomMode):
        strategy = CustomCountSetup(
            snake_count=mode.snake_count,
            ladder_count=mode.ladder_count,
            random_placement=mode.random_placement,
            snake_positions=list(mode.snake_positions),
            ladder_positions=list(mode.ladder_positions),
            rng=rng,
        )
        game = create_custom_game(mode.board_side, strategy, rng)
    else:
        raise TypeError(f"Unknown game mode: {mode!r}")

    if players is None:
        players = make_roster(config.player_names)
    for player in players:
        player.reset_position()
        game.add_player(player)
    return game
