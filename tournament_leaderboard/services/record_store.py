"""
Record Store

Holds the decoded tournament results and the per-player config
side-table. Results are loaded once at startup and never change
afterwards; configs are attached later, one player at a time, as the
config loader finishes each file.
"""

import csv
import io
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
from pydantic import ValidationError

from tournament_leaderboard.errors import DecodeError, FatalLoadError
from tournament_leaderboard.models import PlayerConfig, PlayerRecord

# Column order of the results file (and of every export)
RESULT_COLUMNS = [
    "rank",
    "player",
    "rating_mu",
    "rating_sigma",
    "wins",
    "draws",
    "losses",
    "games",
    "win_rate",
]
INT_COLUMNS = {"rank", "wins", "draws", "losses", "games"}
FLOAT_COLUMNS = {"rating_mu", "rating_sigma", "win_rate"}


@dataclass
class SummaryStatistics:
    """
    Headline numbers shown above the leaderboard.

    Attributes:
        total_players: Number of records
        total_games: Sum of games over all records
        avg_win_rate: Mean win rate (0.0 when there are no records)
        top_rating: Highest rating_mu (0.0 when there are no records)
    """
    total_players: int
    total_games: int
    avg_win_rate: float
    top_rating: float

    def __str__(self) -> str:
        return (
            f"{self.total_players} players, {self.total_games} games, "
            f"avg win rate {self.avg_win_rate:.3f}, top rating {self.top_rating:.2f}"
        )


def parse_int(value: str):
    """Parse an integer cell; malformed values become NaN."""
    try:
        return int(value.strip())
    except ValueError:
        return math.nan


def parse_float(value: str) -> float:
    """Parse a float cell; malformed values become NaN."""
    try:
        return float(value.strip())
    except ValueError:
        return math.nan


def decode_row(row: list[str], line_number: int) -> PlayerRecord:
    """
    Decode one CSV row into a PlayerRecord.

    Args:
        row: Raw cells in RESULT_COLUMNS order
        line_number: Line of the row in the source (for error messages)

    Returns:
        PlayerRecord

    Raises:
        DecodeError: If the row has the wrong number of fields or no
            player name
    """
    if len(row) != len(RESULT_COLUMNS):
        raise DecodeError(
            f"Line {line_number}: expected {len(RESULT_COLUMNS)} fields, got {len(row)}",
            line_number=line_number,
            row=row,
        )

    values = {}
    for column, cell in zip(RESULT_COLUMNS, row):
        if column in INT_COLUMNS:
            values[column] = parse_int(cell)
        elif column in FLOAT_COLUMNS:
            values[column] = parse_float(cell)
        else:
            values[column] = cell

    try:
        return PlayerRecord(**values)
    except ValidationError as e:
        raise DecodeError(
            f"Line {line_number}: invalid player row: {e.errors()[0]['msg']}",
            line_number=line_number,
            row=row,
        ) from e


class RecordStore:
    """
    In-memory store of player records and their configs.

    Usage:
        store = RecordStore()
        store.load_csv("data/final_standings.csv")
        store.attach_config("Alpha", config)
        stats = store.statistics()
    """

    def __init__(self):
        """Initialize an empty store."""
        self._records: list[PlayerRecord] = []
        self._by_name: dict[str, PlayerRecord] = {}
        self._configs: dict[str, PlayerConfig] = {}

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self, csv_rows: Iterable[list[str]]) -> list[PlayerRecord]:
        """
        Decode CSV rows into the store.

        The first row is the header and is skipped without validation.
        Blank rows are ignored.

        Args:
            csv_rows: Rows as lists of cells, header first

        Returns:
            list[PlayerRecord]: The decoded records in file order

        Raises:
            DecodeError: If any row is structurally malformed or repeats
                a player name
        """
        records = []
        by_name = {}
        for line_number, row in enumerate(csv_rows, 1):
            if line_number == 1 or not row:
                continue
            record = decode_row(row, line_number)
            if record.player in by_name:
                raise DecodeError(
                    f"Line {line_number}: duplicate player {record.player!r}",
                    line_number,
                    row,
                )
            by_name[record.player] = record
            records.append(record)

        self._records = records
        self._by_name = by_name
        return list(records)

    def load_text(self, csv_text: str) -> list[PlayerRecord]:
        """Decode a whole CSV document."""
        return self.load(csv.reader(io.StringIO(csv_text.strip())))

    def load_csv(self, path: str | Path) -> list[PlayerRecord]:
        """
        Read and decode the results file.

        Raises:
            FatalLoadError: If the file cannot be read
            DecodeError: If the contents are malformed
        """
        path = Path(path)
        try:
            csv_text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise FatalLoadError(f"Could not read results file {path}: {e}") from e
        return self.load_text(csv_text)

    # =========================================================================
    # Configs
    # =========================================================================

    def attach_config(self, player: str, config: PlayerConfig) -> None:
        """
        Attach config metadata to a player.

        Attaching the same config twice is a no-op; a later config for the
        same player replaces the earlier one.
        """
        self._configs[player] = config

    def config_for(self, player: str) -> Optional[PlayerConfig]:
        """Get a player's config, or None when it has none."""
        return self._configs.get(player)

    @property
    def configs(self) -> dict[str, PlayerConfig]:
        return dict(self._configs)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def records(self) -> list[PlayerRecord]:
        return list(self._records)

    @property
    def player_names(self) -> list[str]:
        return [r.player for r in self._records]

    def find(self, player: str) -> Optional[PlayerRecord]:
        """Look up a record by player name."""
        return self._by_name.get(player)

    def __len__(self) -> int:
        return len(self._records)

    def statistics(self) -> SummaryStatistics:
        """
        Summary statistics over the full store.

        Returns:
            SummaryStatistics (all zeros for an empty store)
        """
        if not self._records:
            return SummaryStatistics(0, 0, 0.0, 0.0)

        total_games = sum(r.games for r in self._records)
        avg_win_rate = sum(r.win_rate for r in self._records) / len(self._records)
        top_rating = max(r.rating_mu for r in self._records)

        return SummaryStatistics(
            total_players=len(self._records),
            total_games=total_games,
            avg_win_rate=avg_win_rate,
            top_rating=top_rating,
        )

    def to_dataframe(self, records: Optional[list[PlayerRecord]] = None) -> pd.DataFrame:
        """
        Records as a DataFrame with RESULT_COLUMNS.

        Args:
            records: Subset to convert (defaults to the whole store)
        """
        records = self._records if records is None else records
        return pd.DataFrame([r.to_dict() for r in records], columns=RESULT_COLUMNS)
