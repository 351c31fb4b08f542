"""
Leaderboard enums.

All enum types used by the view state, the render engine and the
presentation layer live here so they can be shared without import cycles.
"""

from enum import Enum as PyEnum


class WinRateFilter(PyEnum):
    """Win rate bucket a user can filter the leaderboard by."""
    ALL = "all"
    HIGH = "high"        # >= 0.6
    MEDIUM = "medium"    # [0.4, 0.6)
    LOW = "low"          # < 0.4


class GamesFilter(PyEnum):
    """Filter on whether a player played the full schedule."""
    ALL = "all"
    FULL = "full"        # games == 12
    PARTIAL = "partial"  # games != 12


class SortKey(PyEnum):
    """
    Leaderboard sort order.

    Each key has a fixed direction: rank ascending, everything else
    descending.
    """
    RANK = "rank"
    RATING = "rating"
    WIN_RATE = "winrate"
    GAMES = "games"


class Highlight(PyEnum):
    """
    Row highlight class.

    Mutually exclusive. Precedence, highest first:
    PINNED > HIGH_WIN_RATE > TOP3 > NONE
    """
    PINNED = "pinned-row"
    HIGH_WIN_RATE = "highlighted-winrate"
    TOP3 = "highlighted-top3"
    NONE = ""


class WinRateTier(PyEnum):
    """Display tier of a player's win rate (colour of the win rate badge)."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Theme(PyEnum):
    """Dashboard colour theme."""
    LIGHT = "light"
    DARK = "dark"


def coerce_enum(enum_cls, value, default):
    """
    Convert a raw value (enum member or its string value) to enum_cls.

    Unrecognised values fall back to `default` instead of raising, so a
    stale or hand-edited UI value never breaks the leaderboard.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return default
