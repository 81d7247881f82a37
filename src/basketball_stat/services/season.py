"""
Season state store.

Owns the loaded game records of the current season and derives the
player views from them on demand:
- load_year_data: fetch config, fan out one fetch per game, store the results
- player_annual_stats: memoized season summary over the stored games
- get_player_history: one player's game-by-game rows

Consumers observe changes through subscribe() instead of polling.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date as date_cls
from typing import Callable, Optional, Sequence

from ..aggregators.season import compute_player_history, compute_season_aggregates
from ..core.config import get_settings
from ..core.models import GameRecord, PlayerHistoryEntry, PlayerSeasonAggregate
from ..providers.base import ConfigFetchError, LoaderError, SeasonLoaderProtocol

logger = logging.getLogger(__name__)

Listener = Callable[["SeasonStore"], None]


class SeasonStore:
    """
    State controller for one season at a time.

    Loads replace the stored games wholesale. If a newer load starts
    before an older one finishes, the older one's results are dropped.
    """

    def __init__(
        self,
        loader: SeasonLoaderProtocol,
        *,
        teams: Optional[Sequence[str]] = None,
    ):
        self._loader = loader
        self._teams = tuple(teams) if teams else get_settings().teams
        self._listeners: list[Listener] = []
        self._generation = 0

        self._loading = False
        self.current_year: int = date_cls.today().year
        self._games: tuple[GameRecord, ...] = ()
        self.failed_games: tuple[GameRecord, ...] = ()
        self.files_config: dict[str, str] = {}

        self._stats_source: Optional[tuple[GameRecord, ...]] = None
        self._stats_cache: list[PlayerSeasonAggregate] = []

    # -- Observable state ----------------------------------------------------

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def games_data(self) -> tuple[GameRecord, ...]:
        return self._games

    @property
    def total_games(self) -> int:
        return len(self._games)

    @property
    def player_annual_stats(self) -> list[PlayerSeasonAggregate]:
        """Season summary, recomputed only when the stored games change."""
        if self._stats_source is not self._games:
            self._stats_cache = compute_season_aggregates(self._games, self._teams)
            self._stats_source = self._games
        return list(self._stats_cache)

    def get_player_history(self, name: str) -> list[PlayerHistoryEntry]:
        return compute_player_history(self._games, name, self._teams)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -- Loading -------------------------------------------------------------

    async def _fetch_game(self, year: int, date: str, filename: str) -> GameRecord:
        try:
            payload = await self._loader.fetch_game_payload(year, date, filename)
        except LoaderError as e:
            logger.error(f"Failed to fetch game data ({date}): {e}")
            return GameRecord(date=date, data=None, error=str(e))
        except Exception as e:
            logger.exception(f"Unexpected error fetching game data ({date})")
            return GameRecord(date=date, data=None, error=str(e))
        return GameRecord(date=date, data=payload)

    async def load_year_data(self, year: int) -> None:
        """
        Load every game of a season, replacing whatever was stored.

        Individual game failures are recorded in failed_games and do not
        abort the load.

        Raises:
            ConfigFetchError: If the season config is unavailable or empty
        """
        self._generation += 1
        generation = self._generation

        self._loading = True
        self.current_year = year
        self._games = ()
        self.failed_games = ()
        self._notify()

        try:
            config = await self._loader.fetch_season_config(year)
            if generation != self._generation:
                return
            self.files_config = dict(config or {})
            if not config:
                raise ConfigFetchError(year, f"No game data found for {year}")

            dates = sorted(config)
            results = await asyncio.gather(
                *[self._fetch_game(year, date, config[date]) for date in dates]
            )

            if generation != self._generation:
                logger.info(f"Discarding stale load for {year}")
                return

            self._games = tuple(r for r in results if r.ok)
            self.failed_games = tuple(r for r in results if not r.ok)
            logger.info(
                f"Loaded {len(self._games)} games for {year}"
                f" ({len(self.failed_games)} failed)"
            )

        except ConfigFetchError as e:
            logger.error(f"Failed to load season {year}: {e}")
            raise

        finally:
            if generation == self._generation:
                self._loading = False
                self._notify()
