"""
Player Config Loader

Loads the YAML config of every player on the leaderboard:
1. Read the config index (a JSON list of file names)
2. Match each player to a file name by prefix
3. Read and decode every matched file, concurrently

A failure for one player never affects the others: the error is logged
and that player simply shows "N/A" for model and prompt fields.
"""

import asyncio
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import yaml
from pydantic import ValidationError

from tournament_leaderboard.errors import PartialConfigError
from tournament_leaderboard.logging import get_logger
from tournament_leaderboard.models import PlayerConfig
from tournament_leaderboard.services.record_store import RecordStore
from tournament_leaderboard.utils.matching import ConfigMatcher


@dataclass
class ConfigLoadResult:
    """
    Result of loading configs for all players.

    Attributes:
        loaded: Players whose config was attached
        missing: Players with no matching file in the index
        failed: Errors for players whose file could not be read or decoded
    """
    loaded: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    failed: List[PartialConfigError] = field(default_factory=list)

    @property
    def failed_players(self) -> List[str]:
        return [e.player for e in self.failed]

    def __str__(self) -> str:
        return (
            f"Configs: {len(self.loaded)} loaded, "
            f"{len(self.missing)} missing, {len(self.failed)} failed"
        )


def decode_config(text: str, player: str, filename: str) -> PlayerConfig:
    """
    Decode one YAML config document.

    Args:
        text: YAML source
        player: Player the file belongs to (for error reporting)
        filename: File name (for error reporting)

    Returns:
        PlayerConfig

    Raises:
        PartialConfigError: If the YAML is invalid or not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PartialConfigError(f"Invalid YAML: {e}", player, filename) from e

    if not isinstance(data, dict):
        raise PartialConfigError(
            f"Expected a mapping, got {type(data).__name__}", player, filename
        )

    try:
        return PlayerConfig.model_validate(data)
    except ValidationError as e:
        raise PartialConfigError(f"Invalid config structure: {e}", player, filename) from e


class ConfigLoader:
    """
    Loads player configs from disk into a RecordStore.

    Usage:
        loader = ConfigLoader(
            index_path=Path("data/player_configs.json"),
            config_dir=Path("data/prompt_collection"),
        )
        result = asyncio.run(loader.load_all(store))
        print(result)
    """

    def __init__(
        self,
        index_path: Path,
        config_dir: Path,
        matcher: Optional[ConfigMatcher] = None
    ):
        """
        Initialize the config loader.

        Args:
            index_path: JSON file listing available config file names
            config_dir: Directory holding the config files
            matcher: File name matcher (defaults to ".yml" prefix matching)
        """
        self.index_path = Path(index_path)
        self.config_dir = Path(config_dir)
        self.matcher = matcher or ConfigMatcher()
        self.logger = get_logger()

    def read_index(self) -> list[str]:
        """
        Read the config index.

        A missing or malformed index is logged and treated as empty, so
        the leaderboard still renders with "N/A" everywhere.

        Returns:
            list[str]: Config file names
        """
        try:
            with open(self.index_path) as f:
                filenames = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.config_index_failed(self.index_path, e)
            return []

        if not isinstance(filenames, list):
            self.logger.config_index_failed(
                self.index_path, ValueError("index is not a list of file names")
            )
            return []

        filenames = [f for f in filenames if isinstance(f, str)]
        self.logger.config_index_loaded(filenames)
        return filenames

    async def load_one(self, player: str, filename: str) -> PlayerConfig:
        """
        Read and decode one player's config file.

        Raises:
            PartialConfigError: If the file cannot be read or decoded
        """
        path = self.config_dir / filename
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PartialConfigError(f"Could not read {path}: {e}", player, filename) from e
        return decode_config(text, player, filename)

    async def _load_into(
        self,
        store: RecordStore,
        player: str,
        filename: str,
        result: ConfigLoadResult
    ) -> None:
        try:
            config = await self.load_one(player, filename)
        except PartialConfigError as e:
            self.logger.config_failed(e)
            result.failed.append(e)
            return

        store.attach_config(player, config)
        result.loaded.append(player)
        self.logger.config_loaded(player, filename)

    async def load_all(
        self,
        store: RecordStore,
        players: Optional[Iterable[str]] = None
    ) -> ConfigLoadResult:
        """
        Load configs for every player and attach them to the store.

        All matched files are loaded concurrently. Completion order does
        not matter since configs are keyed by player name.

        Args:
            store: Store whose players should get configs
            players: Subset of players to load (defaults to all)

        Returns:
            ConfigLoadResult
        """
        players = list(store.player_names if players is None else players)
        filenames = self.read_index()
        matches = self.matcher.match_all(players, filenames)

        result = ConfigLoadResult()
        tasks = []
        for player, filename in matches.items():
            if filename is None:
                self.logger.config_missing(player)
                result.missing.append(player)
                continue
            tasks.append(self._load_into(store, player, filename, result))

        await asyncio.gather(*tasks)

        self.logger.config_summary(result)
        return result

    def load_all_sync(self, store: RecordStore) -> ConfigLoadResult:
        """Blocking wrapper around load_all for non-async callers."""
        return asyncio.run(self.load_all(store))
