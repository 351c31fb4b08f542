"""
Services package - Leaderboard logic.

Contains:
- Record store (results decoding, configs side-table, statistics)
- Config loader (player YAML configs)
- View state, selection and pin management
- Render engine (filter, sort, pin, highlight)
- Chart datasets and plots
- CSV/JSON export
- Theme persistence
"""

from tournament_leaderboard.services.record_store import RecordStore, SummaryStatistics
from tournament_leaderboard.services.config_loader import ConfigLoader, ConfigLoadResult
from tournament_leaderboard.services.view_state import ViewState, SelectionManager, PinManager
from tournament_leaderboard.services.engine import RenderRow, render
from tournament_leaderboard.services.theme_store import ThemeStore

__all__ = [
    'RecordStore',
    'SummaryStatistics',
    'ConfigLoader',
    'ConfigLoadResult',
    'ViewState',
    'SelectionManager',
    'PinManager',
    'RenderRow',
    'render',
    'ThemeStore',
]
