"""Tests for snakes_ladders.game (turn loop)."""

import pytest
from conftest import ScriptedDice, make_game

from snakes_ladders.board import Board, ladder, snake
from snakes_ladders.errors import ConfigurationError, GameStateError
from snakes_ladders.game import (
    EventKind,
    Game,
    GameListener,
    GameStatus,
    ListListener,
    Player,
    make_roster,
)


# ── setup ────────────────────────────────────────────────────────────

def test_roster_ids_and_defaults():
    roster = make_roster(["Ann", "Bob", "Cy"])
    assert [p.id for p in roster] == [1, 2, 3]
    assert all(p.position == 0 and p.win_count == 0 for p in roster)


def test_needs_two_players():
    game = Game(Board(100), ScriptedDice([1]))
    game.add_player(Player(1, "Solo"))
    with pytest.raises(ConfigurationError, match="minimum of 2"):
        game.start()
    assert game.status is GameStatus.NOT_STARTED
    with pytest.raises(GameStateError):
        game.play_turn()


def test_play_without_players_never_starts():
    game = Game(Board(100), ScriptedDice([]))
    listener = ListListener()
    game.add_listener(listener)
    with pytest.raises(ConfigurationError):
        game.play()
    assert listener.events == []


def test_duplicate_player_rejected():
    game = Game(Board(100), ScriptedDice([]))
    alice = Player(1, "Alice")
    game.add_player(alice)
    with pytest.raises(ConfigurationError):
        game.add_player(alice)


def test_no_joining_after_start():
    game, _ = make_game(Board(100), [])
    game.start()
    with pytest.raises(ConfigurationError):
        game.add_player(Player(3, "Late"))


def test_start_emits_event_once():
    game, listener = make_game(Board(100), [])
    game.start()
    assert game.status is GameStatus.IN_PROGRESS
    assert listener.messages == ["Game initiated."]
    with pytest.raises(GameStateError):
        game.start()


def test_list_listener_is_a_listener():
    assert isinstance(ListListener(), GameListener)


# ── scenarios on the standard board ──────────────────────────────────

def test_ladder_from_two(standard_board):
    game, listener = make_game(standard_board, [1, 1, 1])
    game.start()
    game.play_turn()  # Alice → 1
    game.play_turn()  # Bob → 1
    turn = game.play_turn()  # Alice → 2 → ladder to 38
    alice = turn.player
    assert alice.name == "Alice"
    assert turn.landing == 2
    assert turn.entity == ladder(2, 38)
    assert alice.position == 38
    assert "Alice encountered a ladder at 2 and moved up to 38" in listener.messages


def test_snake_at_99(standard_board):
    game, listener = make_game(standard_board, [4], positions=(95, 0))
    game.start()
    turn = game.play_turn()
    assert turn.landing == 99
    assert turn.new_position == 54
    assert turn.player.position == 54
    kinds = [e.kind for e in listener.events]
    assert kinds == [
        EventKind.GAME_STARTED,
        EventKind.ENTITY_ENCOUNTERED,
        EventKind.MOVE_COMPLETED,
    ]
    encounter = listener.events[1]
    assert encounter.entity == snake(99, 54)
    assert encounter.message == "Alice encountered a snake at 99 and moved down to 54"


def test_overshoot_forfeits_turn(standard_board):
    game, listener = make_game(standard_board, [3], positions=(98, 0))
    game.start()
    turn = game.play_turn()
    assert turn.forfeited
    assert turn.landing is None
    assert turn.player.position == 98
    assert listener.events[-1].kind is EventKind.TURN_FORFEITED
    assert "Exact roll required" in listener.events[-1].message
    assert game.current_player.name == "Bob"
    assert game.status is GameStatus.IN_PROGRESS


def test_exact_landing_wins(standard_board):
    game, listener = make_game(standard_board, [4, 6], positions=(96, 50))
    result = game.play()
    alice, bob = game.players
    assert result.reason == "win"
    assert result.winner is alice
    assert result.turns == 1
    assert alice.position == 100
    assert alice.win_count == 1
    assert bob.position == 50  # Bob never rolled
    assert game.status is GameStatus.OVER
    assert listener.events[-1].kind is EventKind.GAME_WON
    assert listener.messages[-1] == "Game concluded. Winner: Alice"


def test_no_turns_after_game_over(standard_board):
    game, _ = make_game(standard_board, [4], positions=(96, 0))
    game.play()
    with pytest.raises(GameStateError):
        game.play_turn()


def test_ladder_to_final_cell_wins():
    board = Board(100)
    board.place(ladder(80, 100))
    game, _ = make_game(board, [3], positions=(77, 0))
    result = game.play()
    assert result.winner.name == "Alice"


def test_move_event_fires_before_position_update(standard_board):
    seen = []

    class Peek:
        def on_event(self, event):
            if event.kind is EventKind.MOVE_COMPLETED:
                seen.append((event.position, game.players[0].position))

    game, _ = make_game(standard_board, [3])
    game.add_listener(Peek())
    game.start()
    game.play_turn()
    assert seen == [(3, 0)]


def test_all_listeners_get_every_event(standard_board):
    game, first = make_game(standard_board, [4], positions=(96, 0))
    second = ListListener()
    game.add_listener(second)
    game.play()
    assert first.messages == second.messages
    assert len(first.events) == 3  # start, move, win


# ── rotation ─────────────────────────────────────────────────────────

def test_round_robin_rotation():
    board = Board(1000)
    game, _ = make_game(board, [1] * 10, names=("A", "B", "C"))
    game.start()
    order = [game.play_turn().player.name for _ in range(10)]
    assert order == ["A", "B", "C", "A", "B", "C", "A", "B", "C", "A"]
    counts = {name: order.count(name) for name in "ABC"}
    assert sorted(counts.values()) == [3, 3, 4]


def test_forfeits_still_rotate():
    game, _ = make_game(Board(10), [6, 6, 6, 6, 1], positions=(5, 5))
    game.start()
    order = [game.play_turn() for _ in range(4)]
    assert all(t.forfeited for t in order)
    assert [t.player.name for t in order] == ["Alice", "Bob", "Alice", "Bob"]
    assert game.current_player.name == "Alice"


def test_winner_is_not_rotated():
    game, _ = make_game(Board(10), [2, 5], names=("A", "B", "C"), positions=(0, 5, 0))
    game.start()
    game.play_turn()  # A → 2
    turn = game.play_turn()  # B → 10, wins
    assert turn.won
    assert game.current_player.name == "B"
    assert [p.name for p in game.players] == ["B", "C", "A"]


# ── max turns ────────────────────────────────────────────────────────

def test_max_turns_stops_without_winner():
    game, listener = make_game(Board(100), [1] * 10)
    result = game.play(max_turns=4)
    assert result.winner is None
    assert result.reason == "max_turns"
    assert result.turns == 4
    assert game.status is GameStatus.IN_PROGRESS
    assert not any(e.kind is EventKind.GAME_WON for e in listener.events)
