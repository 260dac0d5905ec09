"""Plain-text output for the command line."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from snakes_ladders.board import Board
from snakes_ladders.game import GameEvent, Player


@dataclass
class ConsoleNotifier:
    """Listener that prints every event as a game notice."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def on_event(self, event: GameEvent) -> None:
        print(f"[GAME NOTICE] {event.message}", file=self.stream)


def render_board(board: Board) -> str:
    snakes = board.snakes()
    ladders = board.ladders()
    lines = [
        "=== Board Configuration ===",
        f"Total Cells: {board.size()}",
        "",
        f"Snakes: {len(snakes)}",
        *(str(e) for e in snakes),
        "",
        f"Ladders: {len(ladders)}",
        *(str(e) for e in ladders),
        "=" * 27,
    ]
    return "\n".join(lines)


def render_positions(players: list[Player]) -> str:
    lines = ["=== Current Player Positions ==="]
    lines += [f"{p.name}: {p.position}" for p in players]
    lines.append("=" * 32)
    return "\n".join(lines)


def render_tally(players: list[Player]) -> str:
    lines = ["Wins", "=" * 40]
    for p in sorted(players, key=lambda p: p.win_count, reverse=True):
        lines.append(f"  {p.name:30s} {p.win_count:7d}")
    return "\n".join(lines)
