"""
Player config file matching.

Config files are not named exactly after players; the naming contract is
only that a player's config file name starts with the player's name and
ends with the config extension, e.g.:
- "baseline" -> "baseline_v2_gpt4o.yml"
- "greedy" -> "greedy.yml"

Several files can qualify for the same player (a player named "base"
matches "baseline.yml" too). The contract does not say which one wins, so
the matcher picks the lexicographically smallest candidate to keep the
result independent of directory listing order.
"""

from typing import Iterable, Optional


class ConfigMatcher:
    """
    Prefix matcher between player names and config file names.

    Usage:
        matcher = ConfigMatcher(extension=".yml")
        matcher.is_match("Alpha", "Alpha_gpt4.yml")  # True
        matcher.find_match("Alpha", ["Alpha_b.yml", "Alpha_a.yml"])  # "Alpha_a.yml"
    """

    def __init__(self, extension: str = ".yml"):
        """
        Initialize the matcher.

        Args:
            extension: Required file name suffix (case-sensitive)
        """
        self.extension = extension

    def is_match(self, player: str, filename: str) -> bool:
        """
        Determine if a config file belongs to a player.

        Matching is exact and case-sensitive: the file name must start with
        the player name and end with the configured extension.

        Args:
            player: Player name from the results file
            filename: Config file name from the config index

        Returns:
            bool: True if the file is a candidate config for the player
        """
        if not player or not isinstance(filename, str):
            return False
        return filename.startswith(player) and filename.endswith(self.extension)

    def candidates(self, player: str, filenames: Iterable[str]) -> list[str]:
        """All qualifying file names for a player, sorted."""
        return sorted(f for f in filenames if self.is_match(player, f))

    def find_match(self, player: str, filenames: Iterable[str]) -> Optional[str]:
        """
        Find the config file for a player.

        Args:
            player: Player name
            filenames: File names from the config index

        Returns:
            str or None: Lexicographically first qualifying file name
        """
        candidates = self.candidates(player, filenames)
        return candidates[0] if candidates else None

    def match_all(
        self,
        players: Iterable[str],
        filenames: Iterable[str]
    ) -> dict[str, Optional[str]]:
        """
        Match every player against the same file list.

        Returns:
            dict: player name -> matched file name (None when unmatched)
        """
        filenames = list(filenames)
        return {player: self.find_match(player, filenames) for player in players}
