from dataclasses import dataclass
from pathlib import Path
import json
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = "config/dashboard_config.json"


@dataclass
class DashboardConfig:
    """Configuration for the leaderboard dashboard."""
    data_dir: str = "data"
    results_file: str = "final_standings.csv"
    config_index_file: str = "player_configs.json"
    prompt_dir: str = "prompt_collection"
    config_extension: str = ".yml"
    theme_file: str = ".leaderboard_theme.json"
    log_dir: str = "logs"
    page_title: str = "Tournament Leaderboard"
    verbose: bool = False

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "DashboardConfig":
        """
        Load config from a JSON file.

        The path defaults to LEADERBOARD_CONFIG, then to
        config/dashboard_config.json. LEADERBOARD_DATA_DIR overrides
        data_dir whatever the file says.
        """
        config_path = Path(path or os.getenv("LEADERBOARD_CONFIG", DEFAULT_CONFIG_PATH))
        if config_path.exists():
            with open(config_path) as f:
                data = json.load(f)
            config = cls(**data)
        else:
            print(f"⚠️  Config file not found at {config_path}, using defaults")
            config = cls()

        data_dir = os.getenv("LEADERBOARD_DATA_DIR")
        if data_dir:
            config.data_dir = data_dir
        return config

    @property
    def results_path(self) -> Path:
        return Path(self.data_dir) / self.results_file

    @property
    def config_index_path(self) -> Path:
        return Path(self.data_dir) / self.config_index_file

    @property
    def prompt_path(self) -> Path:
        return Path(self.data_dir) / self.prompt_dir

    @property
    def theme_path(self) -> Path:
        return Path(self.theme_file)
