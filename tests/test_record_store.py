"""Tests for results decoding, configs side-table and statistics."""
import math

import pytest

from tournament_leaderboard.errors import DecodeError, FatalLoadError
from tournament_leaderboard.models import PlayerConfig
from tournament_leaderboard.services.record_store import RecordStore

from tests.conftest import RESULTS_CSV

HEADER = ["rank", "player", "rating_mu", "rating_sigma", "wins", "draws", "losses", "games", "win_rate"]


class TestLoad:
    def test_decodes_rows_in_file_order(self):
        store = RecordStore()
        records = store.load_text(RESULTS_CSV)

        assert [r.player for r in records] == ["Alpha", "Beta", "Gamma"]
        alpha = records[0]
        assert alpha.rank == 1
        assert alpha.rating_mu == 31.42
        assert alpha.rating_sigma == 1.87
        assert (alpha.wins, alpha.draws, alpha.losses, alpha.games) == (9, 1, 2, 12)
        assert alpha.win_rate == 0.75
        assert isinstance(alpha.games, int)

    def test_header_is_not_validated(self):
        store = RecordStore()
        records = store.load([["whatever"], ["1", "Alpha", "30", "2", "9", "1", "2", "12", "0.75"]])
        assert len(records) == 1

    def test_wrong_field_count_is_fatal(self):
        store = RecordStore()
        with pytest.raises(DecodeError) as exc_info:
            store.load([HEADER, ["1", "Alpha", "30", "2", "9", "1", "2", "12"]])
        assert exc_info.value.line_number == 2
        assert isinstance(exc_info.value, FatalLoadError)

    def test_malformed_numeric_becomes_nan(self):
        store = RecordStore()
        records = store.load([HEADER, ["1", "Alpha", "abc", "2", "x", "1", "2", "12", "0.75"]])

        assert math.isnan(records[0].rating_mu)
        assert math.isnan(records[0].wins)
        assert records[0].games == 12

    def test_duplicate_player_is_fatal(self):
        store = RecordStore()
        with pytest.raises(DecodeError) as exc_info:
            store.load([
                HEADER,
                ["1", "Alpha", "30", "2", "9", "1", "2", "12", "0.75"],
                ["2", "Alpha", "28", "2", "8", "1", "3", "12", "0.66"],
            ])
        assert exc_info.value.line_number == 3

    def test_empty_player_name_is_fatal(self):
        store = RecordStore()
        with pytest.raises(DecodeError):
            store.load([HEADER, ["1", "", "30", "2", "9", "1", "2", "12", "0.75"]])

    def test_blank_lines_are_skipped(self):
        store = RecordStore()
        records = store.load_text(RESULTS_CSV + "\n\n")
        assert len(records) == 3

    def test_missing_file_is_fatal(self, tmp_path):
        store = RecordStore()
        with pytest.raises(FatalLoadError):
            store.load_csv(tmp_path / "missing.csv")

    def test_records_are_immutable(self):
        store = RecordStore()
        record = store.load_text(RESULTS_CSV)[0]
        with pytest.raises(Exception):
            record.rank = 5


class TestConfigs:
    def test_missing_config_is_none(self):
        store = RecordStore()
        store.load_text(RESULTS_CSV)
        assert store.config_for("Alpha") is None

    def test_attach_is_idempotent(self):
        store = RecordStore()
        store.load_text(RESULTS_CSV)
        config = PlayerConfig.model_validate({"agent0": {"model": {"provider": "openai", "name": "gpt-4o"}}})

        store.attach_config("Alpha", config)
        store.attach_config("Alpha", config)

        assert store.config_for("Alpha") == config
        assert list(store.configs) == ["Alpha"]


class TestStatistics:
    def test_summary(self):
        store = RecordStore()
        store.load_text(RESULTS_CSV)
        stats = store.statistics()

        assert stats.total_players == 3
        assert stats.total_games == 34
        assert stats.avg_win_rate == pytest.approx((0.75 + 0.3 + 0.4166666666666667) / 3)
        assert stats.top_rating == 31.42

    def test_empty_store(self):
        stats = RecordStore().statistics()
        assert (stats.total_players, stats.total_games, stats.avg_win_rate, stats.top_rating) == (0, 0, 0.0, 0.0)

    def test_find(self):
        store = RecordStore()
        store.load_text(RESULTS_CSV)
        assert store.find("Beta").rank == 2
        assert store.find("Nobody") is None

    def test_to_dataframe(self):
        store = RecordStore()
        store.load_text(RESULTS_CSV)
        df = store.to_dataframe()
        assert list(df.columns) == HEADER
        assert df["games"].sum() == 34
