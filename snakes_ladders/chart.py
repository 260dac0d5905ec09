"""Bar chart of win counts from a batch of simulated games."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt


def make_wins_chart(
    tally: dict[str, int],
    output_path: str = "wins.png",
    title: str = "Snakes & Ladders Wins",
) -> str:
    """Create a horizontal bar chart of win counts, most wins on top.

    Returns the path to the saved PNG.
    """
    sorted_items = sorted(tally.items(), key=lambda kv: kv[1], reverse=True)
    names = [name for name, _ in sorted_items]
    wins = [count for _, count in sorted_items]
    total = sum(wins) or 1

    fig, ax = plt.subplots(figsize=(10, max(3, len(names) * 0.7)))
    bars = ax.barh(names, wins, color="#4A90D9", edgecolor="white")

    for bar, count in zip(bars, wins):
        ax.text(
            bar.get_width(), bar.get_y() + bar.get_height() / 2,
            f" {count} ({count / total:.0%})",
            va="center", fontsize=11, fontweight="bold",
        )

    ax.set_xlabel("Games won")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.invert_yaxis()
    ax.set_xlim(left=0, right=max(wins, default=0) * 1.25 + 1)

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
