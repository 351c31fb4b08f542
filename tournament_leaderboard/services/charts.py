"""
Leaderboard charts.

Two layers:
- Dataset functions turn records into plain label/value lists
  (easy to test, independent of the plotting library)
- Plot functions draw those datasets with matplotlib in the current theme

Charts always describe the full tournament, not the filtered table.
"""

import math
from dataclasses import dataclass
from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.ticker as ticker
import numpy as np

from tournament_leaderboard.enums import Theme
from tournament_leaderboard.models import PlayerRecord
from tournament_leaderboard.services.engine import nan_last_descending

TOP_WIN_RATE_COUNT = 10
GAME_STATS_COUNT = 15

# (label, min inclusive, max exclusive)
RATING_BINS = [
    ("0-15", 0, 15),
    ("15-20", 15, 20),
    ("20-25", 20, 25),
    ("25-30", 25, 30),
    ("30-35", 30, 35),
    ("35-40", 35, 40),
    ("40+", 40, math.inf),
]

# Colors for each result type
COLORS = {
    "win_rate": "#3498db",   # Blue
    "rating": "#2ecc71",     # Green
    "wins": "#27ae60",       # Dark green
    "draws": "#f39c12",      # Orange
    "losses": "#e74c3c",     # Red
}

THEME_COLORS = {
    Theme.LIGHT: {"text": "#2c3e50", "grid": "#bdc3c7", "background": "#ffffff"},
    Theme.DARK: {"text": "#eaeaea", "grid": "#2a2a3e", "background": "#1a1a2e"},
}

RESULT_LABELS = ["Wins", "Draws", "Losses"]


@dataclass
class ChartData:
    """
    Labels and one or more named value series.

    Attributes:
        labels: X-axis (or slice) labels
        series: Series name -> values, each the same length as labels
    """
    labels: list[str]
    series: dict[str, list[float]]


# =========================================================================
# Datasets
# =========================================================================

def win_rate_dataset(records: list[PlayerRecord], limit: int = TOP_WIN_RATE_COUNT) -> ChartData:
    """Top players by win rate, as percentages. NaN win rates come last."""
    top = sorted(records, key=lambda r: nan_last_descending(r.win_rate), reverse=True)[:limit]
    return ChartData(
        labels=[r.player for r in top],
        series={"Win Rate (%)": [r.win_rate * 100 for r in top]},
    )


def rating_distribution_dataset(records: list[PlayerRecord]) -> ChartData:
    """
    Number of players per rating_mu bin.

    Ratings below 0 (or NaN) fall in no bin and are not counted.
    """
    counts = [0] * len(RATING_BINS)
    for record in records:
        for i, (_, low, high) in enumerate(RATING_BINS):
            if low <= record.rating_mu < high:
                counts[i] += 1
                break
    return ChartData(
        labels=[label for label, _, _ in RATING_BINS],
        series={"Number of Players": counts},
    )


def game_stats_dataset(records: list[PlayerRecord], limit: int = GAME_STATS_COUNT) -> ChartData:
    """Wins, draws and losses of the first `limit` records in file order."""
    top = records[:limit]
    return ChartData(
        labels=[r.player for r in top],
        series={
            "Wins": [r.wins for r in top],
            "Draws": [r.draws for r in top],
            "Losses": [r.losses for r in top],
        },
    )


def result_breakdown(record: PlayerRecord) -> ChartData:
    """Win / draw / loss split of a single player."""
    return ChartData(
        labels=list(RESULT_LABELS),
        series={"Games": [record.wins, record.draws, record.losses]},
    )


def result_percentages(record: PlayerRecord) -> list[str]:
    """
    Slice labels like "Wins: 9 (75.0%)".

    A player with no games gets 0.0% everywhere.
    """
    values = [record.wins, record.draws, record.losses]
    total = sum(values)
    labels = []
    for label, value in zip(RESULT_LABELS, values):
        percentage = (value / total * 100) if total else 0.0
        labels.append(f"{label}: {value} ({percentage:.1f}%)")
    return labels


# =========================================================================
# Plotting
# =========================================================================

def _style_axes(fig, ax, theme: Theme):
    colors = THEME_COLORS[theme]
    fig.patch.set_facecolor(colors["background"])
    ax.set_facecolor(colors["background"])
    ax.tick_params(colors=colors["text"])
    ax.xaxis.label.set_color(colors["text"])
    ax.yaxis.label.set_color(colors["text"])
    ax.title.set_color(colors["text"])
    for spine in ax.spines.values():
        spine.set_color(colors["grid"])
    ax.grid(True, axis="y", color=colors["grid"], alpha=0.6, linestyle="-")
    ax.set_axisbelow(True)


def plot_win_rate(records: list[PlayerRecord], theme: Theme = Theme.LIGHT):
    """Bar chart of the top 10 win rates."""
    data = win_rate_dataset(records)
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(
        data.labels,
        data.series["Win Rate (%)"],
        color=COLORS["win_rate"],
        edgecolor=COLORS["win_rate"],
        alpha=0.7,
        linewidth=2
    )
    ax.set_ylim(0, 100)
    ax.set_ylabel("Win Rate (%)")
    ax.set_title("Top 10 Win Rates", fontweight="bold")
    ax.tick_params(axis="x", labelrotation=45)
    _style_axes(fig, ax, theme)
    plt.tight_layout()
    return fig


def plot_rating_distribution(records: list[PlayerRecord], theme: Theme = Theme.LIGHT):
    """Histogram-style bar chart of rating_mu bins."""
    data = rating_distribution_dataset(records)
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(
        data.labels,
        data.series["Number of Players"],
        color=COLORS["rating"],
        edgecolor=COLORS["rating"],
        alpha=0.7,
        linewidth=2
    )
    ax.set_xlabel("Rating Range (μ)")
    ax.set_ylabel("Number of Players")
    ax.set_title("Rating Distribution", fontweight="bold")
    ax.yaxis.set_major_locator(ticker.MaxNLocator(integer=True))
    _style_axes(fig, ax, theme)
    plt.tight_layout()
    return fig


def plot_game_stats(records: list[PlayerRecord], theme: Theme = Theme.LIGHT):
    """Grouped bars of wins/draws/losses for the first 15 players."""
    data = game_stats_dataset(records)
    x = np.arange(len(data.labels))
    width = 0.27

    fig, ax = plt.subplots(figsize=(12, 5))
    for offset, name in zip((-width, 0, width), ("Wins", "Draws", "Losses")):
        color = COLORS[name.lower()]
        ax.bar(
            x + offset,
            data.series[name],
            width,
            label=name,
            color=color,
            edgecolor=color,
            alpha=0.7
        )

    ax.set_xticks(x)
    ax.set_xticklabels(data.labels, rotation=45, ha="right")
    ax.set_ylabel("Number of Games")
    ax.set_title("Game Results (Top 15)", fontweight="bold")
    legend = ax.legend(loc="upper right")
    for text in legend.get_texts():
        text.set_color(THEME_COLORS[theme]["text"])
    legend.get_frame().set_facecolor(THEME_COLORS[theme]["background"])
    _style_axes(fig, ax, theme)
    plt.tight_layout()
    return fig


def plot_result_breakdown(
    record: PlayerRecord,
    theme: Theme = Theme.LIGHT,
    title: Optional[str] = None
):
    """Doughnut chart of one player's wins, draws and losses."""
    values = result_breakdown(record).series["Games"]
    fig, ax = plt.subplots(figsize=(4, 4))

    if sum(values) > 0:
        ax.pie(
            values,
            colors=[COLORS["wins"], COLORS["draws"], COLORS["losses"]],
            startangle=90,
            counterclock=False,
            wedgeprops={"width": 0.4, "edgecolor": THEME_COLORS[theme]["background"]}
        )
        legend = ax.legend(
            result_percentages(record),
            loc="upper center",
            bbox_to_anchor=(0.5, 0.0),
            ncol=1,
            frameon=False
        )
        for text in legend.get_texts():
            text.set_color(THEME_COLORS[theme]["text"])
    else:
        ax.text(0.5, 0.5, "No games", ha="center", va="center",
                color=THEME_COLORS[theme]["text"])
        ax.axis("off")

    ax.set_title(title or record.player, fontweight="bold", color=THEME_COLORS[theme]["text"])
    fig.patch.set_facecolor(THEME_COLORS[theme]["background"])
    ax.set_aspect("equal")
    plt.tight_layout()
    return fig


def plot_dashboard(records: list[PlayerRecord], theme: Theme = Theme.LIGHT):
    """All three overview charts in one figure (for the CLI script)."""
    fig, axes = plt.subplots(3, 1, figsize=(12, 16))

    win_rates = win_rate_dataset(records)
    axes[0].bar(win_rates.labels, win_rates.series["Win Rate (%)"],
                color=COLORS["win_rate"], alpha=0.7)
    axes[0].set_ylim(0, 100)
    axes[0].set_ylabel("Win Rate (%)")
    axes[0].set_title("Top 10 Win Rates", fontweight="bold")
    axes[0].tick_params(axis="x", labelrotation=45)

    ratings = rating_distribution_dataset(records)
    axes[1].bar(ratings.labels, ratings.series["Number of Players"],
                color=COLORS["rating"], alpha=0.7)
    axes[1].set_xlabel("Rating Range (μ)")
    axes[1].set_ylabel("Number of Players")
    axes[1].set_title("Rating Distribution", fontweight="bold")
    axes[1].yaxis.set_major_locator(ticker.MaxNLocator(integer=True))

    games = game_stats_dataset(records)
    x = np.arange(len(games.labels))
    width = 0.27
    for offset, name in zip((-width, 0, width), ("Wins", "Draws", "Losses")):
        axes[2].bar(x + offset, games.series[name], width, label=name,
                    color=COLORS[name.lower()], alpha=0.7)
    axes[2].set_xticks(x)
    axes[2].set_xticklabels(games.labels, rotation=45, ha="right")
    axes[2].set_ylabel("Number of Games")
    axes[2].set_title("Game Results (Top 15)", fontweight="bold")
    axes[2].legend(loc="upper right")

    for ax in axes:
        _style_axes(fig, ax, theme)
    plt.tight_layout()
    return fig
