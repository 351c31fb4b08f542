"""Tests for config file matching and loading."""
import asyncio

import pytest

from tournament_leaderboard.errors import PartialConfigError
from tournament_leaderboard.services.config_loader import ConfigLoader, decode_config
from tournament_leaderboard.services.record_store import RecordStore
from tournament_leaderboard.utils.matching import ConfigMatcher


def loaded_store(data_dir) -> RecordStore:
    store = RecordStore()
    store.load_csv(data_dir / "final_standings.csv")
    return store


def make_loader(data_dir) -> ConfigLoader:
    return ConfigLoader(
        index_path=data_dir / "player_configs.json",
        config_dir=data_dir / "prompt_collection",
    )


# ── Matching ──


class TestConfigMatcher:
    def test_prefix_and_extension(self):
        matcher = ConfigMatcher(".yml")
        assert matcher.is_match("Alpha", "Alpha.yml")
        assert matcher.is_match("Alpha", "Alpha_gpt4o.yml")
        assert not matcher.is_match("Alpha", "alpha.yml")
        assert not matcher.is_match("Alpha", "Alpha.yaml")
        assert not matcher.is_match("Alpha", "xAlpha.yml")

    def test_tie_break_is_lexicographic(self):
        matcher = ConfigMatcher()
        files = ["Alpha_v2.yml", "Alpha_v10.yml", "Alpha_a.yml"]
        assert matcher.find_match("Alpha", files) == "Alpha_a.yml"
        assert matcher.find_match("Alpha", list(reversed(files))) == "Alpha_a.yml"

    def test_no_match(self):
        assert ConfigMatcher().find_match("Alpha", ["Beta.yml"]) is None

    def test_empty_player_never_matches(self):
        assert ConfigMatcher().find_match("", ["Alpha.yml"]) is None

    def test_match_all(self):
        matches = ConfigMatcher().match_all(["base", "baseline"], ["baseline.yml", "base_v1.yml"])
        assert matches == {"base": "base_v1.yml", "baseline": "baseline.yml"}


# ── Decoding ──


class TestDecodeConfig:
    def test_full_document(self):
        config = decode_config(
            "agent0:\n  model:\n    provider: openai\n    name: gpt-4o\n"
            "  prompts:\n    system_prompt: Hi\n    step_wise_prompt: Go\n"
            "extra_key: ignored\n",
            "Alpha",
            "Alpha.yml",
        )
        assert config.agent0.model.provider == "openai"
        assert config.agent0.prompts.step_wise_prompt == "Go"
        assert config.agent1 is None

    def test_invalid_yaml(self):
        with pytest.raises(PartialConfigError) as exc_info:
            decode_config("agent0: [unclosed\n", "Alpha", "Alpha.yml")
        assert exc_info.value.player == "Alpha"
        assert exc_info.value.filename == "Alpha.yml"

    @pytest.mark.parametrize("text", ["", "- a\n- b\n", "just a string\n"])
    def test_non_mapping_document(self, text):
        with pytest.raises(PartialConfigError):
            decode_config(text, "Alpha", "Alpha.yml")

    def test_wrong_structure(self):
        with pytest.raises(PartialConfigError):
            decode_config("agent0:\n  model: [1, 2]\n", "Alpha", "Alpha.yml")


# ── Loading ──


class TestConfigLoader:
    def test_partial_failure_does_not_affect_others(self, data_dir):
        store = loaded_store(data_dir)
        result = asyncio.run(make_loader(data_dir).load_all(store))

        assert result.loaded == ["Alpha"]
        assert result.failed_players == ["Beta"]
        assert result.missing == ["Gamma"]
        assert store.config_for("Alpha").agent0.model.name == "gpt-4o"
        assert store.config_for("Beta") is None
        assert store.config_for("Gamma") is None

    def test_missing_file_listed_in_index(self, data_dir):
        (data_dir / "prompt_collection" / "Alpha_gpt4o.yml").unlink()
        store = loaded_store(data_dir)

        result = make_loader(data_dir).load_all_sync(store)

        assert result.loaded == []
        assert sorted(result.failed_players) == ["Alpha", "Beta"]

    def test_missing_index_loads_nothing(self, data_dir):
        (data_dir / "player_configs.json").unlink()
        store = loaded_store(data_dir)

        result = make_loader(data_dir).load_all_sync(store)

        assert result.loaded == []
        assert result.missing == ["Alpha", "Beta", "Gamma"]
        assert store.configs == {}

    def test_index_must_be_a_list(self, data_dir):
        (data_dir / "player_configs.json").write_text('{"Alpha": "Alpha_gpt4o.yml"}')
        store = loaded_store(data_dir)

        result = make_loader(data_dir).load_all_sync(store)

        assert len(result.missing) == 3

    def test_subset_of_players(self, data_dir):
        store = loaded_store(data_dir)
        result = asyncio.run(make_loader(data_dir).load_all(store, players=["Alpha"]))
        assert result.loaded == ["Alpha"]
        assert result.failed == []
