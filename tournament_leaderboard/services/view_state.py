"""
View State

Mutable UI state of the leaderboard: search, filters, sort order,
highlight and column toggles, the pinned player, the comparison
selection and the theme. Only user actions change it; the render engine
reads it.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from tournament_leaderboard.enums import (
    GamesFilter,
    SortKey,
    Theme,
    WinRateFilter,
)

MAX_COMPARISON = 2


@dataclass
class ViewState:
    """
    Current dashboard settings.

    Attributes:
        search_term: Case-insensitive substring matched against player names
        win_rate_filter: Win rate bucket to keep
        games_filter: Full / partial schedule filter
        sort_key: Sort order of the table
        highlight_top3: Highlight ranks 1-3
        highlight_win_rate: Highlight win rates above 80%
        show_model_column: Show the model column
        show_prompts_column: Show the prompt preview column
        pinned_player: Player forced to the top of the table
        selected_for_comparison: Up to two players, oldest first
        theme: Light or dark
    """
    search_term: str = ""
    win_rate_filter: WinRateFilter = WinRateFilter.ALL
    games_filter: GamesFilter = GamesFilter.ALL
    sort_key: SortKey = SortKey.RANK
    highlight_top3: bool = True
    highlight_win_rate: bool = False
    show_model_column: bool = False
    show_prompts_column: bool = False
    pinned_player: Optional[str] = None
    selected_for_comparison: List[str] = field(default_factory=list)
    theme: Theme = Theme.LIGHT


class SelectionManager:
    """
    Tracks the (at most two) players selected for comparison.

    When a third player is selected, the player selected first is
    dropped (FIFO, not least-recently-used).

    Usage:
        selection = SelectionManager(state)
        selection.toggle("Alpha")
        selection.toggle("Beta")
        selection.can_compare()  # True
    """

    def __init__(self, state: ViewState, limit: int = MAX_COMPARISON):
        self.state = state
        self.limit = limit

    @property
    def selected(self) -> List[str]:
        return list(self.state.selected_for_comparison)

    def is_selected(self, player: str) -> bool:
        return player in self.state.selected_for_comparison

    def toggle(self, player: str) -> None:
        """
        Select or deselect a player.

        Args:
            player: Player name (not validated against the records)
        """
        selected = self.state.selected_for_comparison
        if player in selected:
            selected.remove(player)
            return

        while len(selected) >= self.limit:
            selected.pop(0)
        selected.append(player)

    def select_first(self, players: Iterable[str]) -> None:
        """Replace the selection with the first `limit` of the given players."""
        self.clear()
        for player in players:
            if len(self.state.selected_for_comparison) >= self.limit:
                break
            if player not in self.state.selected_for_comparison:
                self.state.selected_for_comparison.append(player)

    def clear(self) -> None:
        self.state.selected_for_comparison.clear()

    def can_compare(self) -> bool:
        """True when exactly two players are selected."""
        return len(self.state.selected_for_comparison) == self.limit


class PinManager:
    """Keeps at most one pinned player."""

    def __init__(self, state: ViewState):
        self.state = state

    @property
    def pinned(self) -> Optional[str]:
        return self.state.pinned_player

    def toggle_pin(self, player: str) -> None:
        """
        Pin a player, or unpin it if it is already pinned.

        Pinning a new player replaces the previous pin.
        """
        if self.state.pinned_player == player:
            self.state.pinned_player = None
        else:
            self.state.pinned_player = player

    def is_pinned(self, player: str) -> bool:
        return self.state.pinned_player == player
