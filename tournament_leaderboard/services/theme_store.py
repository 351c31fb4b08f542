"""
Theme Store

Persists the one setting that survives between sessions: the colour
theme. Stored as {"theme": "light" | "dark"} in a small JSON file.
"""

import json
from pathlib import Path

from tournament_leaderboard.enums import Theme
from tournament_leaderboard.logging import get_logger

THEME_KEY = "theme"


class ThemeStore:
    """
    Reads and writes the saved theme preference.

    Usage:
        store = ThemeStore(Path(".leaderboard_theme.json"))
        theme = store.load()
        store.save(Theme.DARK)
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.logger = get_logger()

    def load(self) -> Theme:
        """
        Read the saved theme.

        Returns:
            Theme: Saved theme, or LIGHT when nothing valid is saved
        """
        if not self.path.exists():
            return Theme.LIGHT
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.warning(f"Could not read theme preference {self.path}: {e}")
            return Theme.LIGHT

        if isinstance(data, dict) and data.get(THEME_KEY) == Theme.DARK.value:
            return Theme.DARK
        return Theme.LIGHT

    def save(self, theme: Theme) -> None:
        """Write the theme preference."""
        try:
            with open(self.path, "w") as f:
                json.dump({THEME_KEY: theme.value}, f)
        except OSError as e:
            self.logger.warning(f"Could not save theme preference {self.path}: {e}")
            return
        self.logger.theme_changed(theme.value)
