"""
Utils package - Shared utilities.

Contains:
- Duration formatting
- Player -> config file matching
"""

from tournament_leaderboard.utils.matching import ConfigMatcher

__all__ = [
    "ConfigMatcher",
]
