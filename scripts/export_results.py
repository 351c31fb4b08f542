#!/usr/bin/env python3
"""
Script to export the leaderboard as CSV or JSON.

Applies the same search and filters as the dashboard, so the output
matches what the "Export" buttons would download.

Run from project root:
    python -m scripts.export_results --format json --win-rate high
    python -m scripts.export_results --search gpt -o gpt_players.csv
"""

import argparse
import sys

from config.dashboard_config import DashboardConfig
from tournament_leaderboard.controller import DashboardController
from tournament_leaderboard.enums import GamesFilter, SortKey, WinRateFilter
from tournament_leaderboard.errors import FatalLoadError


def main():
    parser = argparse.ArgumentParser(
        description="Export tournament results"
    )
    parser.add_argument("--format", choices=["csv", "json"], default="csv")
    parser.add_argument("--search", default="", help="Player name substring")
    parser.add_argument(
        "--win-rate",
        choices=[f.value for f in WinRateFilter],
        default=WinRateFilter.ALL.value
    )
    parser.add_argument(
        "--games",
        choices=[f.value for f in GamesFilter],
        default=GamesFilter.ALL.value
    )
    parser.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        default=SortKey.RANK.value
    )
    parser.add_argument("-c", "--config", help="Dashboard config JSON")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")

    args = parser.parse_args()

    controller = DashboardController.from_config(DashboardConfig.from_file(args.config))
    try:
        controller.load()
    except FatalLoadError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    controller.set_search(args.search)
    controller.set_win_rate_filter(args.win_rate)
    controller.set_games_filter(args.games)
    controller.set_sort_key(args.sort)

    content = controller.export_json() if args.format == "json" else controller.export_csv()

    if args.output:
        with open(args.output, "w") as f:
            f.write(content)
        print(f"✅ Exported {len(controller.filtered_records())} players to {args.output}")
    else:
        print(content)

    return 0


if __name__ == "__main__":
    exit(main())
