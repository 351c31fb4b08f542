"""
Dashboard Controller

Single owner of the dashboard's application state. The UI never touches
the record store or the view state directly: every user action is a
method here, and every view (table rows, details, comparison, exports)
is derived from a fully updated state.

Usage:
    controller = DashboardController.from_config(DashboardConfig.from_file())
    controller.load()
    controller.set_sort_key("rating")
    controller.toggle_pin("Alpha")
    rows = controller.render()
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from config.dashboard_config import DashboardConfig
from tournament_leaderboard.enums import (
    GamesFilter,
    SortKey,
    Theme,
    WinRateFilter,
    coerce_enum,
)
from tournament_leaderboard.errors import FatalLoadError
from tournament_leaderboard.logging import get_logger
from tournament_leaderboard.models import PlayerRecord, model_info, prompts_info
from tournament_leaderboard.services import charts, engine, export
from tournament_leaderboard.services.config_loader import ConfigLoader, ConfigLoadResult
from tournament_leaderboard.services.record_store import RecordStore, SummaryStatistics
from tournament_leaderboard.services.theme_store import ThemeStore
from tournament_leaderboard.services.view_state import PinManager, SelectionManager, ViewState
from tournament_leaderboard.utils.matching import ConfigMatcher


@dataclass
class PlayerDetails:
    """
    Everything the detail view shows for one player.

    Attributes:
        record: The player's results
        has_config: Whether a config was loaded (model/prompt sections
            are hidden otherwise)
        model_info: agent0/agent1 model labels
        prompts: agent0/agent1 system and step-wise prompts
        results: Win/draw/loss chart data
    """
    record: PlayerRecord
    has_config: bool
    model_info: dict = field(default_factory=dict)
    prompts: dict = field(default_factory=dict)
    results: Optional[charts.ChartData] = None


class DashboardController:
    """
    Owns the record store, view state and theme preference.
    """

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        state: Optional[ViewState] = None,
        theme_store: Optional[ThemeStore] = None,
        config_loader: Optional[ConfigLoader] = None,
        config: Optional[DashboardConfig] = None
    ):
        """
        Initialize the controller.

        Args:
            store: Record store (empty by default)
            state: Initial view state (defaults)
            theme_store: Theme persistence; without one the theme is not saved
            config_loader: Loader for player configs; without one no
                configs are loaded
            config: Dashboard configuration (for file locations); defaults
                to DashboardConfig.from_file()
        """
        self.config = config or DashboardConfig.from_file()
        self.store = store or RecordStore()
        self.state = state or ViewState()
        self.theme_store = theme_store
        self.config_loader = config_loader
        self.selection = SelectionManager(self.state)
        self.pins = PinManager(self.state)
        self.logger = get_logger(self.config)
        self.config_result: Optional[ConfigLoadResult] = None

        if self.theme_store is not None:
            self.state.theme = self.theme_store.load()

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "DashboardController":
        """Build a controller wired to the files named in the config."""
        return cls(
            theme_store=ThemeStore(config.theme_path),
            config_loader=ConfigLoader(
                index_path=config.config_index_path,
                config_dir=config.prompt_path,
                matcher=ConfigMatcher(config.config_extension),
            ),
            config=config,
        )

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self, results_path=None) -> SummaryStatistics:
        """
        Load results, then player configs.

        Args:
            results_path: Results CSV (defaults to the configured path)

        Returns:
            SummaryStatistics of the loaded results

        Raises:
            FatalLoadError: If the results cannot be loaded
        """
        if results_path is None:
            results_path = self.config.results_path
        self.logger.load_start(results_path)

        try:
            self.store.load_csv(results_path)
        except FatalLoadError as e:
            self.logger.results_failed(results_path, e)
            raise

        stats = self.store.statistics()
        self.logger.results_loaded(stats)

        if self.config_loader is not None:
            self.config_result = self.config_loader.load_all_sync(self.store)

        self.logger.load_complete()
        return stats

    # =========================================================================
    # Actions
    # =========================================================================

    def set_search(self, search_term: str) -> None:
        self.state.search_term = search_term or ""

    def set_win_rate_filter(self, value) -> None:
        self.state.win_rate_filter = coerce_enum(WinRateFilter, value, WinRateFilter.ALL)

    def set_games_filter(self, value) -> None:
        self.state.games_filter = coerce_enum(GamesFilter, value, GamesFilter.ALL)

    def set_sort_key(self, value) -> None:
        self.state.sort_key = coerce_enum(SortKey, value, SortKey.RANK)

    def set_highlight_top3(self, enabled: bool) -> None:
        self.state.highlight_top3 = bool(enabled)

    def set_highlight_win_rate(self, enabled: bool) -> None:
        self.state.highlight_win_rate = bool(enabled)

    def set_show_model_column(self, enabled: bool) -> None:
        self.state.show_model_column = bool(enabled)

    def set_show_prompts_column(self, enabled: bool) -> None:
        self.state.show_prompts_column = bool(enabled)

    def toggle_pin(self, player: str) -> None:
        self.pins.toggle_pin(player)

    def toggle_selection(self, player: str) -> None:
        self.selection.toggle(player)

    def select_all(self, checked: bool) -> None:
        """
        The "select all" checkbox: selects the first two visible players,
        or clears the selection when unchecked.
        """
        if checked:
            self.selection.select_first(r.player for r in self.filtered_records())
        else:
            self.selection.clear()

    def set_selection(self, players: Iterable[str]) -> None:
        """
        Sync the selection with a list of checked players, e.g. from a
        multiselect widget. Newly checked players are toggled in the
        given order, so the FIFO eviction still applies.
        """
        players = list(players)
        for player in self.selection.selected:
            if player not in players:
                self.selection.toggle(player)
        for player in players:
            if not self.selection.is_selected(player):
                self.selection.toggle(player)

    def set_theme(self, theme) -> None:
        self.state.theme = coerce_enum(Theme, theme, Theme.LIGHT)
        if self.theme_store is not None:
            self.theme_store.save(self.state.theme)

    def toggle_theme(self) -> Theme:
        """Switch light <-> dark and persist the choice."""
        new_theme = Theme.LIGHT if self.state.theme == Theme.DARK else Theme.DARK
        self.set_theme(new_theme)
        return new_theme

    # =========================================================================
    # Views
    # =========================================================================

    def filtered_records(self) -> list[PlayerRecord]:
        """Records passing the current search and filters, in sort order."""
        records = engine.filter_records(self.store.records, self.state)
        return engine.sort_records(records, self.state.sort_key)

    def render(self) -> list[engine.RenderRow]:
        return engine.render(self.store.records, self.state, self.store.configs)

    def statistics(self) -> SummaryStatistics:
        return self.store.statistics()

    def can_compare(self) -> bool:
        return self.selection.can_compare()

    def player_details(self, player: str) -> Optional[PlayerDetails]:
        """Detail view for a player, or None if there is no such player."""
        record = self.store.find(player)
        if record is None:
            return None
        config = self.store.config_for(player)
        return PlayerDetails(
            record=record,
            has_config=config is not None,
            model_info=model_info(config),
            prompts=prompts_info(config),
            results=charts.result_breakdown(record),
        )

    def comparison(self) -> Optional[tuple[PlayerDetails, PlayerDetails]]:
        """
        Side-by-side view of the two selected players, in selection order.

        Returns None unless exactly two players are selected and both exist.
        """
        if not self.can_compare():
            return None
        first, second = (self.player_details(p) for p in self.selection.selected)
        if first is None or second is None:
            return None
        return first, second

    def export_csv(self) -> str:
        """CSV of the currently filtered records."""
        records = self.filtered_records()
        self.logger.export_written("csv", len(records))
        return export.to_csv(records)

    def export_json(self) -> str:
        """JSON of the currently filtered records, with model info."""
        records = self.filtered_records()
        self.logger.export_written("json", len(records))
        return export.to_json(records, self.store.configs)

    def win_rate_chart(self) -> charts.ChartData:
        return charts.win_rate_dataset(self.store.records)

    def rating_distribution_chart(self) -> charts.ChartData:
        return charts.rating_distribution_dataset(self.store.records)

    def game_stats_chart(self) -> charts.ChartData:
        return charts.game_stats_dataset(self.store.records)
