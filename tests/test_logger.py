"""Tests for the dashboard logger and duration formatting."""
from datetime import timedelta

from config.dashboard_config import DashboardConfig
from tournament_leaderboard.logging import DashboardLogger
from tournament_leaderboard.services.config_loader import ConfigLoadResult
from tournament_leaderboard.utils.timedelta_format import format_timedelta


class TestFormatTimedelta:
    def test_formats(self):
        assert format_timedelta(timedelta(milliseconds=250)) == "250ms"
        assert format_timedelta(timedelta(seconds=42)) == "42s"
        assert format_timedelta(timedelta(minutes=3, seconds=5)) == "3m 5s"
        assert format_timedelta(timedelta(hours=1, minutes=2, seconds=3)) == "1h 2m 3s"
        assert format_timedelta(timedelta(hours=2)) == "2h 0m 0s"


class TestDashboardLogger:
    def test_writes_run_log(self, tmp_path):
        logger = DashboardLogger(DashboardConfig(log_dir=str(tmp_path)))
        logger.config_summary(ConfigLoadResult(loaded=["Alpha"], missing=["Beta"]))
        logger.config_missing("Beta")
        for handler in logger.logger.handlers:
            handler.flush()

        text = logger.log_file.read_text(encoding="utf-8")

        assert logger.log_file.parent == tmp_path
        assert "Loaded 1 player configurations" in text
        assert "No config file found for Beta" in text

    def test_debug_only_in_verbose_file(self, tmp_path):
        quiet = DashboardLogger(DashboardConfig(log_dir=str(tmp_path / "quiet")))
        quiet.export_written("csv", 3)
        verbose = DashboardLogger(DashboardConfig(log_dir=str(tmp_path / "verbose"), verbose=True))
        verbose.export_written("csv", 3)
        for handler in quiet.logger.handlers + verbose.logger.handlers:
            handler.flush()

        assert "Exported 3 rows" not in quiet.log_file.read_text(encoding="utf-8")
        assert "Exported 3 rows" in verbose.log_file.read_text(encoding="utf-8")
