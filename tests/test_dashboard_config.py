"""Tests for DashboardConfig loading."""
import json
from pathlib import Path

from config.dashboard_config import DashboardConfig


class TestDashboardConfig:
    def test_defaults_when_file_missing(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LEADERBOARD_DATA_DIR", raising=False)
        config = DashboardConfig.from_file(tmp_path / "missing.json")

        assert config == DashboardConfig()
        assert config.results_path == Path("data") / "final_standings.csv"

    def test_reads_json(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LEADERBOARD_DATA_DIR", raising=False)
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"data_dir": "results", "verbose": True}))

        config = DashboardConfig.from_file(path)

        assert config.verbose
        assert config.config_index_path == Path("results") / "player_configs.json"
        assert config.prompt_path == Path("results") / "prompt_collection"

    def test_env_overrides(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"data_dir": "results"}))
        monkeypatch.setenv("LEADERBOARD_CONFIG", str(path))
        monkeypatch.setenv("LEADERBOARD_DATA_DIR", "/srv/tournament")

        config = DashboardConfig.from_file()

        assert config.data_dir == "/srv/tournament"
