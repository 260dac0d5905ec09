"""CLI entry point: python -m snakes_ladders {play,simulate}."""

from __future__ import annotations

import argparse
import logging
import sys

from snakes_ladders.config import (
    CustomMode,
    GameConfig,
    RandomMode,
    StandardMode,
    STANDARD_SIDE,
    parse_difficulty,
    parse_position,
)
from snakes_ladders.console import ConsoleNotifier, render_board, render_positions, render_tally
from snakes_ladders.errors import SnakesLaddersError
from snakes_ladders.factory import create_game
from snakes_ladders.game import Game, make_roster


def _config_from_args(args: argparse.Namespace) -> GameConfig:
    if args.mode == "standard":
        mode = StandardMode()
    elif args.mode == "random":
        mode = RandomMode(board_side=args.side, difficulty=parse_difficulty(args.difficulty))
    else:
        snake_positions = [parse_position(p) for p in args.snake]
        ladder_positions = [parse_position(p) for p in args.ladder]
        explicit = bool(snake_positions or ladder_positions)
        mode = CustomMode(
            board_side=args.side,
            snake_count=len(snake_positions) if explicit else args.snakes,
            ladder_count=len(ladder_positions) if explicit else args.ladders,
            random_placement=not explicit,
            snake_positions=snake_positions,
            ladder_positions=ladder_positions,
        )
    return GameConfig(mode=mode, player_names=args.players, seed=args.seed)


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """One game, rolled turn by turn at the console."""
    config = _config_from_args(args)
    game = create_game(config)
    game.add_listener(ConsoleNotifier())

    print(render_board(game.board))
    game.start()

    while not game.is_over:
        if args.max_turns is not None and game.turn_count >= args.max_turns:
            print(f"\nStopped after {game.turn_count} turns without a winner.")
            return
        player = game.current_player
        if not args.auto:
            input(f"\n{player.name}'s turn. Press Enter to roll the dice...")
        turn = game.play_turn()
        print(f"Dice result: {turn.roll}")
        if not turn.forfeited:
            print(render_positions(game.players))

    print(f"\n{game.winner.name} has won the game.")


# ── simulate ─────────────────────────────────────────────────────────

def cmd_simulate(args: argparse.Namespace) -> None:
    """Play many automatic games with the same roster and tally the wins."""
    config = _config_from_args(args)
    config.validate()
    rng = config.make_rng()
    players = make_roster(config.player_names)

    unfinished = 0
    for _ in range(args.games):
        game: Game = create_game(config, rng=rng, players=players)
        result = game.play(max_turns=args.max_turns)
        if result.winner is None:
            unfinished += 1

    print(f"{args.games} games played")
    if unfinished:
        print(f"{unfinished} stopped at the turn limit without a winner")
    print(render_tally(players))

    if args.chart:
        from snakes_ladders.chart import make_wins_chart

        out = make_wins_chart({p.name: p.win_count for p in players}, output_path=args.chart)
        print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def _add_game_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("players", nargs="+", help="Player names, in turn order (at least 2)")
    parser.add_argument(
        "--mode", choices=["standard", "random", "custom"], default="standard",
        help="Board layout (default standard)",
    )
    parser.add_argument(
        "--side", type=int, default=STANDARD_SIDE,
        help="Board side for random/custom boards; cells = side * side (default 10)",
    )
    parser.add_argument("--difficulty", default="medium", help="easy | medium | hard (random mode)")
    parser.add_argument("--snakes", type=int, default=0, help="Snake count (custom mode)")
    parser.add_argument("--ladders", type=int, default=0, help="Ladder count (custom mode)")
    parser.add_argument(
        "--snake", action="append", default=[], metavar="START:END",
        help="Explicit snake position (custom mode, repeatable)",
    )
    parser.add_argument(
        "--ladder", action="append", default=[], metavar="START:END",
        help="Explicit ladder position (custom mode, repeatable)",
    )
    parser.add_argument("--seed", type=int, help="Seed for dice and random layouts")
    parser.add_argument("--max-turns", type=int, help="Stop a game after this many turns")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Snakes & Ladders",
    )
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play one game at the console")
    _add_game_options(p_play)
    p_play.add_argument("--auto", action="store_true", help="Roll without waiting for Enter")

    p_sim = sub.add_parser("simulate", help="Play many automatic games and count wins")
    _add_game_options(p_sim)
    p_sim.add_argument("--games", type=int, default=100, help="Number of games (default 100)")
    p_sim.add_argument("--chart", "-o", help="Save a win chart to this PNG path")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            cmd_play(args)
        elif args.command == "simulate":
            cmd_simulate(args)
    except SnakesLaddersError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
