"""
Season data loaders.

Usage:
    from basketball_stat.providers import get_loader

    async with get_loader() as loader:
        config = await loader.fetch_season_config(2025)
"""

from .base import (
    ConfigFetchError,
    GameFetchError,
    LoaderError,
    SeasonLoaderProtocol,
)
from .github_pages import SeasonDataClient

__all__ = [
    "ConfigFetchError",
    "GameFetchError",
    "LoaderError",
    "SeasonLoaderProtocol",
    "SeasonDataClient",
    "get_loader",
]


def get_loader(loader_name: str = "github_pages") -> SeasonDataClient:
    """
    Get a season loader instance.

    Raises:
        ValueError: If loader not found
    """
    if loader_name == "github_pages":
        return SeasonDataClient()
    raise ValueError(f"Unknown loader: {loader_name}")
