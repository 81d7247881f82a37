"""
basketball-stat: season statistics for a two-team pickup basketball run.

Game box scores are published as one JSON file per game night. This
package loads a season's files, merges players by name across games,
and derives season summaries and per-player histories.

Key Features:
- Parallel per-game fetches that tolerate individual failures
- Name-based identity merge across jersey numbers
- Win/loss inference from team scores, with DNP detection
- Memoized season summary invalidated on every reload

Usage:
    from basketball_stat import SeasonStore, SeasonDataClient

    async with SeasonDataClient() as loader:
        store = SeasonStore(loader)
        await store.load_year_data(2025)
        leaders = store.player_annual_stats
        history = store.get_player_history("张三")
"""

from .aggregators import compute_player_history, compute_season_aggregates
from .core import (
    GameRecord,
    PlayerHistoryEntry,
    PlayerSeasonAggregate,
    Settings,
    get_settings,
)
from .providers import (
    ConfigFetchError,
    GameFetchError,
    SeasonDataClient,
    SeasonLoaderProtocol,
)
from .services import SeasonStore

__all__ = [
    # Aggregation
    "compute_player_history",
    "compute_season_aggregates",
    # Models
    "GameRecord",
    "PlayerHistoryEntry",
    "PlayerSeasonAggregate",
    # Config
    "Settings",
    "get_settings",
    # Loaders
    "ConfigFetchError",
    "GameFetchError",
    "SeasonDataClient",
    "SeasonLoaderProtocol",
    # Store
    "SeasonStore",
]
