"""
Command line entry point.

Loads the tournament results and player configs, then prints the
summary statistics and the top of the leaderboard. Useful to check the
data files before starting the dashboard.

Usage:
    python -m tournament_leaderboard.main
    python -m tournament_leaderboard.main --top 20 --sort rating
"""

import argparse
import sys

from config.dashboard_config import DashboardConfig
from tournament_leaderboard.controller import DashboardController
from tournament_leaderboard.enums import SortKey
from tournament_leaderboard.errors import FatalLoadError


def main():
    """Print the leaderboard to the console."""
    parser = argparse.ArgumentParser(description="Tournament leaderboard check")
    parser.add_argument("-c", "--config", help="Dashboard config JSON")
    parser.add_argument("--top", type=int, default=10, help="Rows to print")
    parser.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        default=SortKey.RANK.value
    )
    args = parser.parse_args()

    print("=" * 60)
    print("Tournament Leaderboard")
    print("=" * 60)

    controller = DashboardController.from_config(DashboardConfig.from_file(args.config))
    try:
        stats = controller.load()
    except FatalLoadError as e:
        print(f"❌ Could not load results: {e}")
        sys.exit(1)

    print(f"\n📊 {stats}")
    if controller.config_result is not None:
        print(f"🤖 {controller.config_result}")

    controller.set_sort_key(args.sort)
    print()
    for row in controller.render()[:args.top]:
        cells = row.to_display_dict()
        print(
            f"{cells['Rank']:>5}  {cells['Player']:<30} "
            f"{cells['Rating (μ)']:>8} {cells['Win Rate']:>7}  "
            f"{row.model_info['agent0']}"
        )
    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
