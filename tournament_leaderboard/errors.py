"""
Leaderboard exceptions.

FatalLoadError (and DecodeError) mean there is no base data to show and
the dashboard must stop with a visible message. PartialConfigError only
ever concerns one player's metadata and is logged, never propagated past
the config loader.
"""


class LeaderboardError(Exception):
    """Base class for all leaderboard errors."""


class FatalLoadError(LeaderboardError):
    """The tournament results could not be loaded at all."""


class DecodeError(FatalLoadError):
    """
    The tournament results file is structurally malformed.

    Attributes:
        line_number: 1-based line in the source file (header is line 1)
        row: The offending raw row
    """

    def __init__(self, message: str, line_number: int = None, row: list = None):
        super().__init__(message)
        self.line_number = line_number
        self.row = row


class PartialConfigError(LeaderboardError):
    """
    One player's config file could not be read or decoded.

    Attributes:
        player: Player whose config failed
        filename: Config file that was attempted
    """

    def __init__(self, message: str, player: str, filename: str = None):
        super().__init__(message)
        self.player = player
        self.filename = filename
