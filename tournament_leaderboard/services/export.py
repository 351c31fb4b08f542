"""
Export of the (filtered) leaderboard as CSV or JSON.

Numbers are written in their natural decimal form (Python's shortest
round-trip repr), never with display rounding, so an exported CSV decodes
back to exactly the same values.
"""

import csv
import io
import json
import math
from typing import Mapping, Optional

from tournament_leaderboard.models import PlayerConfig, PlayerRecord, model_info
from tournament_leaderboard.services.record_store import RESULT_COLUMNS

CSV_HEADERS = [
    "Rank",
    "Player",
    "Rating_Mu",
    "Rating_Sigma",
    "Wins",
    "Draws",
    "Losses",
    "Games",
    "Win_Rate",
]
CSV_FILENAME = "tournament_results.csv"
JSON_FILENAME = "tournament_results.json"
CSV_MIME = "text/csv"
JSON_MIME = "application/json"


def to_export_rows(records: list[PlayerRecord]) -> list[tuple]:
    """Flat tuples in results-file column order."""
    return [tuple(getattr(r, column) for column in RESULT_COLUMNS) for r in records]


def to_csv(records: list[PlayerRecord]) -> str:
    """
    Serialize records as CSV.

    Model info is not included in the CSV form.

    Returns:
        str: CSV text with header row, "\\n" line endings
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(to_export_rows(records))
    return buffer.getvalue()


def _json_value(value):
    # NaN and inf are not valid JSON; written as null
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def to_json(
    records: list[PlayerRecord],
    configs: Optional[Mapping[str, PlayerConfig]] = None
) -> str:
    """
    Serialize records as a JSON array.

    Each object carries the record fields plus a nested "model" object
    with agent0/agent1 model labels ("N/A" when unknown). Numbers that
    did not decode (NaN) are written as null.
    """
    configs = configs or {}
    data = []
    for record in records:
        item = {k: _json_value(v) for k, v in record.to_dict().items()}
        item["model"] = model_info(configs.get(record.player))
        data.append(item)
    return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
