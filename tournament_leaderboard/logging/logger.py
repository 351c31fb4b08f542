import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING
from datetime import datetime

from config.dashboard_config import DashboardConfig
from tournament_leaderboard.utils.timedelta_format import format_timedelta

if TYPE_CHECKING:
    from tournament_leaderboard.errors import PartialConfigError
    from tournament_leaderboard.services.config_loader import ConfigLoadResult
    from tournament_leaderboard.services.record_store import SummaryStatistics

RUN_ID_FORMAT = "%Y_%m_%d_%H%M%S"

_logger_instance: Optional['DashboardLogger'] = None


def get_logger(config: Optional[DashboardConfig] = None) -> 'DashboardLogger':
    """
    Get the global logger instance. Creates one if needed.

    Args:
        config: Used only when the logger is created; defaults to
            DashboardConfig.from_file()
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DashboardLogger(config)
    return _logger_instance


class DashboardLogger:
    """Universal dashboard logger - no configuration needed."""

    def __init__(self, config: Optional[DashboardConfig] = None):
        # One log file per dashboard session, named after its start time
        self.run_id = datetime.now().strftime(RUN_ID_FORMAT)
        self.config = config or DashboardConfig.from_file()

        self.logger = logging.getLogger(f"leaderboard.{self.run_id}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        self.logger.propagate = False

        # File handler - always logs everything
        log_dir = Path(self.config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = log_dir / f"{self.run_id}.log"
        file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
        if self.config.verbose:
            file_handler.setLevel(logging.DEBUG)
        else:
            file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
        self.logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        self.logger.addHandler(console_handler)

        self.start_time: datetime = None

    # ─── Semantic Methods (delegate to self.logger) ────────────────

    def info(self, msg: str):
        """General info message (INFO level)."""
        self.logger.info(msg)

    def debug(self, msg: str):
        """Debug message (DEBUG level)."""
        self.logger.debug(msg)

    def warning(self, msg: str):
        """Warning message (WARNING level)."""
        self.logger.warning(f"⚠️  {msg}")

    def error(self, msg: str):
        """Error message (ERROR level)."""
        self.logger.error(f"❌ {msg}")

    def success(self, msg: str):
        """Success message (INFO level)."""
        self.logger.info(f"✅ {msg}")

    def section(self, title: str):
        """Section header with dividers."""
        self.logger.info(f"\n{'='*60}")
        self.logger.info(title)
        self.logger.info(f"{'='*60}\n")

    def detail(self, msg: str):
        """Indented detail message."""
        self.logger.info(f"   {msg}")

    # ─── Loading ────────────────────────────────────────────────────

    def load_start(self, results_path: Path):
        self.start_time = datetime.now()
        self.section(f"""
LEADERBOARD LOAD STARTED

Run ID: {self.run_id}
Results: {results_path}
Data dir: {self.config.data_dir}
Verbose: {self.config.verbose}
""")

    def results_loaded(self, stats: 'SummaryStatistics'):
        self.success(f"Loaded {stats.total_players} players")
        self.debug(f"   Total games: {stats.total_games}")
        self.debug(f"   Avg win rate: {stats.avg_win_rate:.3f}")
        self.debug(f"   Top rating: {stats.top_rating:.2f}")

    def results_failed(self, path: Path, error: Exception):
        self.error(f"Error loading results from {path}: {error}")

    def config_index_loaded(self, filenames: list[str]):
        self.info(f"📋 Found {len(filenames)} config files in index.")
        for i, name in enumerate(filenames, 1):
            self.debug(f"   {i}. {name}")

    def config_index_failed(self, path: Path, error: Exception):
        self.error(f"Error loading player configs index {path}: {error}")

    def config_loaded(self, player: str, filename: str):
        self.debug(f"[{player}] Loaded config {filename}")

    def config_missing(self, player: str):
        self.warning(f"No config file found for {player}")

    def config_failed(self, error: 'PartialConfigError'):
        self.error(f"[{error.player}] Error loading config {error.filename}: {error}")

    def config_summary(self, result: 'ConfigLoadResult'):
        self.info(f"Loaded {len(result.loaded)} player configurations")
        self.detail(f"Missing: {len(result.missing)}")
        self.detail(f"Failed: {len(result.failed)}")

    def load_complete(self):
        if self.start_time is None:
            return
        duration = datetime.now() - self.start_time
        self.success(f"Leaderboard ready in {format_timedelta(duration)}")

    # ─── User actions ───────────────────────────────────────────────

    def export_written(self, fmt: str, rows: int):
        self.debug(f"📤 Exported {rows} rows as {fmt}")

    def theme_changed(self, theme: str):
        self.debug(f"Theme set to {theme}")
