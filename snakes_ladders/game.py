"""Game runner: the turn loop for two or more players on one board."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol, runtime_checkable

from snakes_ladders.board import Board, BoardEntity
from snakes_ladders.dice import Dice
from snakes_ladders.errors import ConfigurationError, GameStateError
from snakes_ladders.rules import RuleSet, StandardRules

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2


# ── Players ──────────────────────────────────────────────────────────

@dataclass
class Player:
    id: int
    name: str
    position: int = 0  # 0 = not yet on the board
    win_count: int = 0

    def reset_position(self) -> None:
        self.position = 0


def make_roster(names: list[str]) -> list[Player]:
    """Players numbered 1..n in the given order."""
    return [Player(id=i, name=name) for i, name in enumerate(names, start=1)]


# ── Events ───────────────────────────────────────────────────────────

class EventKind(Enum):
    GAME_STARTED = auto()
    TURN_FORFEITED = auto()
    ENTITY_ENCOUNTERED = auto()
    MOVE_COMPLETED = auto()
    GAME_WON = auto()


@dataclass(frozen=True)
class GameEvent:
    """One observable occurrence, with a ready-to-show message."""

    kind: EventKind
    message: str
    player: str | None = None
    roll: int | None = None
    landing: int | None = None
    position: int | None = None
    entity: BoardEntity | None = None

    def __str__(self) -> str:
        return self.message


@runtime_checkable
class GameListener(Protocol):
    """Receives every event, in order, as the game is played."""

    def on_event(self, event: GameEvent) -> None: ...


@dataclass
class ListListener:
    """Collects events into a list."""

    events: list[GameEvent] = field(default_factory=list)

    def on_event(self, event: GameEvent) -> None:
        self.events.append(event)

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.events]


# ── Results ──────────────────────────────────────────────────────────

@dataclass
class TurnResult:
    """What happened during one player's turn."""

    player: Player
    roll: int
    start: int
    new_position: int
    landing: int | None = None  # None when the roll overshot
    entity: BoardEntity | None = None
    forfeited: bool = False
    won: bool = False


@dataclass
class GameResult:
    winner: Player | None
    reason: str  # "win" | "max_turns"
    turns: int = 0


class GameStatus(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    OVER = auto()


# ── Runner ───────────────────────────────────────────────────────────

class Game:
    """Play one game on a prepared board.

    The board must already be populated; the game only reads it. Each call
    to ``play_turn`` rolls once for the player at the front of the
    rotation. ``play`` keeps calling it until someone wins.
    """

    def __init__(
        self,
        board: Board,
        dice: Dice,
        rules: RuleSet | None = None,
    ):
        self.board = board
        self.dice = dice
        self.rules = rules or StandardRules()
        self.status = GameStatus.NOT_STARTED
        self.winner: Player | None = None
        self.turn_count = 0
        self._rotation: deque[Player] = deque()
        self._listeners: list[GameListener] = []

    @property
    def players(self) -> list[Player]:
        """Players in the order they will take their turns."""
        return list(self._rotation)

    @property
    def current_player(self) -> Player | None:
        return self._rotation[0] if self._rotation else None

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.OVER

    def add_player(self, player: Player) -> None:
        if self.status is not GameStatus.NOT_STARTED:
            raise ConfigurationError(
                f"Cannot add {player.name!r}: the game has already started."
            )
        if any(p.id == player.id for p in self._rotation):
            raise ConfigurationError(
                f"Player id {player.id} ({player.name!r}) is already in this game."
            )
        self._rotation.append(player)

    def add_listener(self, listener: GameListener) -> None:
        self._listeners.append(listener)

    def start(self) -> None:
        if self.status is not GameStatus.NOT_STARTED:
            raise GameStateError(f"Game cannot be started again. status: {self.status.name}")
        if len(self._rotation) < MIN_PLAYERS:
            raise ConfigurationError(
                f"A minimum of {MIN_PLAYERS} players is required to start the game, "
                f"got {len(self._rotation)}."
            )
        self.status = GameStatus.IN_PROGRESS
        logger.info(
            "Game started: %d players on %d cells",
            len(self._rotation), self.board.size(),
        )
        self._emit(GameEvent(EventKind.GAME_STARTED, "Game initiated."))

    def play_turn(self) -> TurnResult:
        """Roll for the player at the front of the rotation and resolve the move."""
        if self.status is not GameStatus.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status.name}")

        player = self._rotation[0]
        roll = self.dice.roll()
        start = player.position
        board_size = self.board.size()
        self.turn_count += 1

        if not self.rules.is_valid_move(start, roll, board_size):
            self._emit(GameEvent(
                EventKind.TURN_FORFEITED,
                f"{player.name} rolled {roll}. Exact roll required to reach cell "
                f"{board_size}; turn forfeited.",
                player=player.name, roll=roll, position=start,
            ))
            self._rotation.rotate(-1)
            return TurnResult(player, roll, start, new_position=start, forfeited=True)

        landing = start + roll
        new_position = self.rules.resolve_position(start, roll, self.board)

        entity = self.board.entity_at(landing)
        if entity is not None:
            direction = "down" if entity.is_snake else "up"
            self._emit(GameEvent(
                EventKind.ENTITY_ENCOUNTERED,
                f"{player.name} encountered a {entity.kind.value} at {landing} "
                f"and moved {direction} to {new_position}",
                player=player.name, roll=roll, landing=landing,
                position=new_position, entity=entity,
            ))

        self._emit(GameEvent(
            EventKind.MOVE_COMPLETED,
            f"{player.name} completed a move. Current position: {new_position}",
            player=player.name, roll=roll, landing=landing, position=new_position,
        ))
        player.position = new_position

        result = TurnResult(player, roll, start, new_position, landing=landing, entity=entity)

        if self.rules.is_win(new_position, board_size):
            player.win_count += 1
            self.winner = player
            self.status = GameStatus.OVER
            result.won = True
            logger.info("%s won after %d turns", player.name, self.turn_count)
            self._emit(GameEvent(
                EventKind.GAME_WON,
                f"Game concluded. Winner: {player.name}",
                player=player.name, position=new_position,
            ))
            return result

        self._rotation.rotate(-1)
        return result

    def play(self, max_turns: int | None = None) -> GameResult:
        """Run turns until someone wins, or until *max_turns* have been played."""
        if self.status is GameStatus.NOT_STARTED:
            self.start()

        while self.status is GameStatus.IN_PROGRESS:
            if max_turns is not None and self.turn_count >= max_turns:
                logger.info("Stopped after %d turns without a winner", self.turn_count)
                return GameResult(winner=None, reason="max_turns", turns=self.turn_count)
            self.play_turn()

        return GameResult(winner=self.winner, reason="win", turns=self.turn_count)

    def _emit(self, event: GameEvent) -> None:
        logger.debug("event %s: %s", event.kind.name, event.message)
        for listener in self._listeners:
            listener.on_event(event)
