"""Tests for chart datasets and figure builders."""
import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from tournament_leaderboard.enums import Theme
from tournament_leaderboard.services.charts import (
    RATING_BINS,
    game_stats_dataset,
    plot_dashboard,
    plot_result_breakdown,
    plot_win_rate,
    rating_distribution_dataset,
    result_percentages,
    win_rate_dataset,
)

from tests.conftest import make_record


class TestDatasets:
    def test_win_rate_top_ten(self):
        records = [make_record(f"P{i}", win_rate=i / 20) for i in range(15)]
        data = win_rate_dataset(records)

        assert len(data.labels) == 10
        assert data.labels[0] == "P14"
        assert data.series["Win Rate (%)"][0] == pytest.approx(70.0)

    def test_rating_bins(self):
        ratings = [0, 14.99, 15, 27, 40, 55, -1, math.nan]
        records = [make_record(f"P{i}", rating_mu=r) for i, r in enumerate(ratings)]
        data = rating_distribution_dataset(records)

        assert data.labels == [label for label, _, _ in RATING_BINS]
        assert data.series["Number of Players"] == [2, 1, 0, 1, 0, 0, 2]

    def test_game_stats_uses_first_fifteen_in_store_order(self):
        records = [make_record(f"P{i}", wins=i) for i in range(20)]
        data = game_stats_dataset(records)

        assert data.labels == [f"P{i}" for i in range(15)]
        assert data.series["Wins"] == list(range(15))
        assert set(data.series) == {"Wins", "Draws", "Losses"}

    def test_win_rate_nan_comes_last(self):
        records = [
            make_record("Unknown", win_rate=math.nan),
            make_record("Low", win_rate=0.2),
            make_record("High", win_rate=0.9),
        ]
        assert win_rate_dataset(records).labels == ["High", "Low", "Unknown"]

    def test_result_percentages(self):
        record = make_record("Alpha", wins=9, draws=1, losses=2)
        assert result_percentages(record) == ["Wins: 9 (75.0%)", "Draws: 1 (8.3%)", "Losses: 2 (16.7%)"]

    def test_result_percentages_without_games(self):
        record = make_record("Idle", wins=0, draws=0, losses=0, games=0)
        assert result_percentages(record) == ["Wins: 0 (0.0%)", "Draws: 0 (0.0%)", "Losses: 0 (0.0%)"]


class TestPlots:
    def test_figures_build_in_both_themes(self, records):
        for theme in Theme:
            for fig in (
                plot_win_rate(records, theme),
                plot_dashboard(records, theme),
                plot_result_breakdown(records[0], theme),
            ):
                assert fig.axes
                plt.close(fig)

    def test_breakdown_without_games(self):
        fig = plot_result_breakdown(make_record("Idle", wins=0, draws=0, losses=0, games=0))
        assert fig.axes[0].texts[0].get_text() == "No games"
        plt.close(fig)
