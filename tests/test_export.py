"""Tests for CSV/JSON export."""
import json

from tournament_leaderboard.models import PlayerConfig
from tournament_leaderboard.services.export import CSV_HEADERS, to_csv, to_export_rows, to_json
from tournament_leaderboard.services.record_store import RecordStore

from tests.conftest import make_record


class TestExportRows:
    def test_field_order(self):
        record = make_record("Alpha", rank=3, rating_mu=29.5, rating_sigma=1.25,
                             wins=7, draws=2, losses=3, games=12, win_rate=0.5833)
        assert to_export_rows([record]) == [(3, "Alpha", 29.5, 1.25, 7, 2, 3, 12, 0.5833)]


class TestCsv:
    def test_header_and_natural_numbers(self):
        record = make_record("Alpha", win_rate=0.8333333333333334, rating_mu=31.123456789)
        lines = to_csv([record]).splitlines()

        assert lines[0] == ",".join(CSV_HEADERS)
        assert lines[1] == "1,Alpha,31.123456789,2.0,6,0,6,12,0.8333333333333334"

    def test_round_trip_is_exact(self, records):
        store = RecordStore()
        decoded = store.load_text(to_csv(records))

        assert decoded == records

    def test_round_trip_awkward_floats(self):
        records = [make_record("Tricky", rating_mu=0.1 + 0.2, rating_sigma=1e-12, win_rate=1 / 3)]
        decoded = RecordStore().load_text(to_csv(records))
        assert decoded[0].rating_mu == 0.1 + 0.2
        assert decoded[0].rating_sigma == 1e-12
        assert decoded[0].win_rate == 1 / 3

    def test_no_model_info(self, records):
        assert "N/A" not in to_csv(records)


class TestJson:
    def test_nested_model_info(self):
        record = make_record("Alpha")
        config = PlayerConfig.model_validate({"agent1": {"model": {"provider": "meta", "name": "llama"}}})

        data = json.loads(to_json([record], {"Alpha": config}))

        assert data == [{
            "rank": 1,
            "player": "Alpha",
            "rating_mu": 25.0,
            "rating_sigma": 2.0,
            "wins": 6,
            "draws": 0,
            "losses": 6,
            "games": 12,
            "win_rate": 0.5,
            "model": {"agent0": "N/A", "agent1": "meta - llama"},
        }]

    def test_empty(self):
        assert json.loads(to_json([])) == []

    def test_undecodable_numbers_are_null(self):
        records = RecordStore().load_text(
            "rank,player,rating_mu,rating_sigma,wins,draws,losses,games,win_rate\n"
            "1,Alpha,abc,2,x,1,2,12,0.75\n"
        )

        def reject(constant):
            raise ValueError(f"non-standard JSON constant {constant}")

        data = json.loads(to_json(records), parse_constant=reject)

        assert data[0]["rating_mu"] is None
        assert data[0]["wins"] is None
        assert data[0]["games"] == 12
