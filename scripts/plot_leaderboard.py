#!/usr/bin/env python3
"""
Script to render the leaderboard charts to an image.

Draws the three overview charts of the dashboard (top 10 win rates,
rating distribution, game results of the top 15) into one figure.

Run from project root:
    python -m scripts.plot_leaderboard data/final_standings.csv -o leaderboard.png
"""

import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from tournament_leaderboard.enums import Theme
from tournament_leaderboard.errors import FatalLoadError
from tournament_leaderboard.services.charts import plot_dashboard
from tournament_leaderboard.services.record_store import RecordStore


def main():
    parser = argparse.ArgumentParser(
        description="Render the tournament leaderboard charts"
    )
    parser.add_argument(
        "csv_file",
        nargs="?",
        default="data/final_standings.csv",
        help="Path to the results CSV (default: data/final_standings.csv)"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output path for the plot image (e.g., leaderboard.png)"
    )
    parser.add_argument(
        "--theme",
        choices=[t.value for t in Theme],
        default=Theme.LIGHT.value,
        help="Colour theme"
    )

    args = parser.parse_args()

    csv_path = Path(args.csv_file)
    if not csv_path.is_absolute() and not csv_path.exists():
        # Try relative to project root
        csv_path = Path(__file__).parent.parent / args.csv_file

    store = RecordStore()
    try:
        records = store.load_csv(csv_path)
    except FatalLoadError as e:
        print(f"Error: {e}")
        return 1

    print(f"Loaded {len(records)} players from: {csv_path}")
    print(store.statistics())

    fig = plot_dashboard(records, Theme(args.theme))

    if args.output:
        fig.savefig(args.output, dpi=150, bbox_inches='tight')
        print(f"Plot saved to: {args.output}")
    else:
        plt.show()

    return 0


if __name__ == "__main__":
    exit(main())
