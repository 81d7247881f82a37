"""
Season loader protocol and errors.

Defines the interface the season store consumes, so the store never
cares whether games come from a static host, local files, or a test fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class LoaderError(Exception):
    """Base exception for loader errors."""
    pass


class ConfigFetchError(LoaderError):
    """Season configuration is unavailable or empty."""

    def __init__(self, year: int, message: str):
        super().__init__(message)
        self.year = year


class GameFetchError(LoaderError):
    """One game's payload is unavailable or unparseable."""

    def __init__(self, date: str, message: str):
        super().__init__(message)
        self.date = date


class SeasonLoaderProtocol(ABC):
    """
    Abstract interface for season data loaders.

    The loader is responsible for:
    1. Resolving a season year to its date -> game file mapping
    2. Fetching the raw payload of a single game file

    The loader is NOT responsible for:
    - Fan-out of game fetches (handled by the season store)
    - Converting failures into GameRecords (handled by the season store)
    - Aggregation (handled by aggregators)
    """

    loader_name: str = ""

    @abstractmethod
    async def fetch_season_config(self, year: int) -> dict[str, str]:
        """
        Fetch the mapping of game date -> game file name for a season.

        Raises:
            ConfigFetchError: If the configuration cannot be retrieved
        """
        ...

    @abstractmethod
    async def fetch_game_payload(
        self,
        year: int,
        date: str,
        filename: str,
    ) -> dict[str, Any]:
        """
        Fetch the raw payload of one game.

        Raises:
            GameFetchError: On transport failure or unparseable payload
        """
        ...
