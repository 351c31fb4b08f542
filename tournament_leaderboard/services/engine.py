"""
Leaderboard render engine.

Pure functions that turn the records plus the current ViewState into the
ordered, annotated rows the table displays:
1. Filter (search AND win rate bucket AND games played)
2. Sort (stable, fixed direction per sort key)
3. Move the pinned player to the top
4. Annotate each row (highlight class, win rate tier, model info,
   prompt preview)

Nothing here mutates its inputs.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from tournament_leaderboard.enums import (
    GamesFilter,
    Highlight,
    SortKey,
    WinRateFilter,
    WinRateTier,
    coerce_enum,
)
from tournament_leaderboard.models import PlayerConfig, PlayerRecord, model_info, prompts_info
from tournament_leaderboard.services.view_state import ViewState

# Filter buckets
HIGH_WIN_RATE_MIN = 0.6
MEDIUM_WIN_RATE_MIN = 0.4
FULL_SCHEDULE_GAMES = 12

# Display tiers use the same breakpoints as the filter but are kept
# separate: filter buckets decide membership, tiers only colour a badge.
TIER_HIGH_MIN = 0.6
TIER_MEDIUM_MIN = 0.4

HIGHLIGHT_WIN_RATE_ABOVE = 0.8
HIGHLIGHT_TOP_RANKS = 3
PROMPT_PREVIEW_LENGTH = 150


@dataclass
class RenderRow:
    """
    One leaderboard row, ready to display.

    Attributes:
        record: The underlying player record
        highlight: Row highlight class
        tier: Win rate badge tier
        model_info: {"agent0": ..., "agent1": ...} model labels
        prompt_preview: Start of agent0's system prompt
        is_pinned: Row is the pinned player
        is_selected: Row is selected for comparison
    """
    record: PlayerRecord
    highlight: Highlight = Highlight.NONE
    tier: WinRateTier = WinRateTier.LOW
    model_info: dict = field(default_factory=dict)
    prompt_preview: str = ""
    is_pinned: bool = False
    is_selected: bool = False

    @property
    def player(self) -> str:
        return self.record.player

    @property
    def rank_class(self) -> str:
        """CSS-style rank badge class: rank-1, rank-2, rank-3 or ''."""
        rank = self.record.rank
        if not math.isnan(rank) and rank <= HIGHLIGHT_TOP_RANKS:
            return f"rank-{rank}"
        return ""

    def to_display_dict(self) -> dict:
        """Formatted cell values keyed by column header."""
        r = self.record
        return {
            "Rank": f"#{r.rank}",
            "Player": r.player,
            "Rating (μ)": format_rating(r.rating_mu),
            "Uncertainty (σ)": format_rating(r.rating_sigma),
            "Games": r.games,
            "Wins": r.wins,
            "Draws": r.draws,
            "Losses": r.losses,
            "Win Rate": format_win_rate(r.win_rate),
            "Model": f"Agent 0: {self.model_info.get('agent0')} | Agent 1: {self.model_info.get('agent1')}",
            "Prompts": self.prompt_preview,
        }


# =========================================================================
# Formatting
# =========================================================================

def format_rating(value: float) -> str:
    return f"{value:.2f}"


def format_win_rate(value: float) -> str:
    return f"{value * 100:.1f}%"


# =========================================================================
# Filtering
# =========================================================================

def matches_search(record: PlayerRecord, search_term: str) -> bool:
    if not search_term:
        return True
    return search_term.lower() in record.player.lower()


def matches_win_rate(record: PlayerRecord, win_rate_filter) -> bool:
    bucket = coerce_enum(WinRateFilter, win_rate_filter, WinRateFilter.ALL)
    win_rate = record.win_rate
    if bucket == WinRateFilter.HIGH:
        return win_rate >= HIGH_WIN_RATE_MIN
    if bucket == WinRateFilter.MEDIUM:
        return MEDIUM_WIN_RATE_MIN <= win_rate < HIGH_WIN_RATE_MIN
    if bucket == WinRateFilter.LOW:
        return win_rate < MEDIUM_WIN_RATE_MIN
    return True


def matches_games(record: PlayerRecord, games_filter) -> bool:
    schedule = coerce_enum(GamesFilter, games_filter, GamesFilter.ALL)
    if schedule == GamesFilter.FULL:
        return record.games == FULL_SCHEDULE_GAMES
    if schedule == GamesFilter.PARTIAL:
        return record.games != FULL_SCHEDULE_GAMES
    return True


def filter_records(records: list[PlayerRecord], state: ViewState) -> list[PlayerRecord]:
    """
    Keep the records that pass search and both filters.

    The three conditions are independent and combined with AND.
    Unrecognised filter values behave like "all".
    """
    return [
        r for r in records
        if matches_search(r, state.search_term)
        and matches_win_rate(r, state.win_rate_filter)
        and matches_games(r, state.games_filter)
    ]


# =========================================================================
# Sorting
# =========================================================================

def nan_last_ascending(value: float) -> float:
    # NaN sorts last in both directions
    return math.inf if math.isnan(value) else value


def nan_last_descending(value: float) -> float:
    return -math.inf if math.isnan(value) else value


# sort key -> (field extractor, descending)
SORT_TABLE: dict[SortKey, tuple[Callable[[PlayerRecord], float], bool]] = {
    SortKey.RANK: (lambda r: nan_last_ascending(r.rank), False),
    SortKey.RATING: (lambda r: nan_last_descending(r.rating_mu), True),
    SortKey.WIN_RATE: (lambda r: nan_last_descending(r.win_rate), True),
    SortKey.GAMES: (lambda r: nan_last_descending(r.games), True),
}


def sort_records(records: list[PlayerRecord], sort_key) -> list[PlayerRecord]:
    """
    Stable sort by the given key.

    Equal keys keep their input order. An unrecognised sort key returns
    the records in input order.
    """
    try:
        key = SortKey(sort_key) if not isinstance(sort_key, SortKey) else sort_key
    except ValueError:
        return list(records)

    extractor, descending = SORT_TABLE[key]
    return sorted(records, key=extractor, reverse=descending)


def pin_to_top(records: list[PlayerRecord], pinned_player: Optional[str]) -> list[PlayerRecord]:
    """
    Move the pinned player to index 0, keeping everyone else in order.

    A pin that matches no record changes nothing.
    """
    if pinned_player is None:
        return list(records)
    pinned = [r for r in records if r.player == pinned_player]
    rest = [r for r in records if r.player != pinned_player]
    return pinned + rest


# =========================================================================
# Row annotations
# =========================================================================

def highlight_for(record: PlayerRecord, state: ViewState) -> Highlight:
    """
    Highlight class of a row. Only the first matching rule applies:
    pinned, then high win rate, then top 3.
    """
    if state.pinned_player is not None and record.player == state.pinned_player:
        return Highlight.PINNED
    if state.highlight_win_rate and record.win_rate > HIGHLIGHT_WIN_RATE_ABOVE:
        return Highlight.HIGH_WIN_RATE
    if state.highlight_top3 and record.rank <= HIGHLIGHT_TOP_RANKS:
        return Highlight.TOP3
    return Highlight.NONE


def win_rate_tier(win_rate: float) -> WinRateTier:
    if win_rate >= TIER_HIGH_MIN:
        return WinRateTier.HIGH
    if win_rate >= TIER_MEDIUM_MIN:
        return WinRateTier.MEDIUM
    return WinRateTier.LOW


def prompt_preview(config: Optional[PlayerConfig]) -> str:
    """
    First 150 characters of agent0's system prompt, plus "...".

    The ellipsis is appended even when the prompt is shorter than the
    preview length (and to "N/A").
    """
    system_prompt = prompts_info(config)["agent0_system"]
    return system_prompt[:PROMPT_PREVIEW_LENGTH] + "..."


def render(
    records: list[PlayerRecord],
    state: ViewState,
    configs: Optional[Mapping[str, PlayerConfig]] = None
) -> list[RenderRow]:
    """
    Derive the displayed leaderboard.

    Args:
        records: All player records
        state: Current view state
        configs: Player configs keyed by player name

    Returns:
        list[RenderRow]: Filtered, sorted, pinned and annotated rows
    """
    configs = configs or {}
    rows = filter_records(records, state)
    rows = sort_records(rows, state.sort_key)
    rows = pin_to_top(rows, state.pinned_player)

    selected = set(state.selected_for_comparison)
    rendered = []
    for record in rows:
        config = configs.get(record.player)
        rendered.append(RenderRow(
            record=record,
            highlight=highlight_for(record, state),
            tier=win_rate_tier(record.win_rate),
            model_info=model_info(config),
            prompt_preview=prompt_preview(config),
            is_pinned=record.player == state.pinned_player,
            is_selected=record.player in selected,
        ))
    return rendered
