"""
Season loader backed by statically hosted JSON files.

Layout under the data root:

    {year}/basketball_files_config.json   -> {"2025-01-04": "game_0104.json", ...}
    {year}/{filename}                     -> one game payload

Every request bypasses intermediate caches: the files are republished in
place after each game night, so a cached copy is routinely stale.
"""

import logging
import time
from typing import Any

import httpx

from ..core.config import Settings, get_settings
from ..core.http import BaseApiClient, ExternalAPIError
from .base import ConfigFetchError, GameFetchError, SeasonLoaderProtocol

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


class SeasonDataClient(BaseApiClient, SeasonLoaderProtocol):
    """Static-host season loader."""

    loader_name = "github_pages"

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        backoff_base: float = 1.0,
    ):
        settings = settings or get_settings()
        super().__init__(
            base_url=settings.data_base_url,
            headers=dict(NO_CACHE_HEADERS),
            requests_per_minute=settings.requests_per_minute,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
            backoff_base=backoff_base,
            transport=transport,
        )
        self._config_name = settings.files_config_name

    @staticmethod
    def _cache_buster() -> dict[str, int]:
        return {"t": int(time.time() * 1000)}

    async def fetch_season_config(self, year: int) -> dict[str, str]:
        path = f"/{year}/{self._config_name}"
        logger.info(f"Fetching season config: {path}")
        try:
            config = await self._get(path, params=self._cache_buster())
        except ExternalAPIError as e:
            logger.error(f"Season config fetch failed for {year}: {e.message}")
            raise ConfigFetchError(year, f"Failed to fetch config: {e.message}") from e

        if not isinstance(config, dict):
            raise ConfigFetchError(year, f"Malformed config for {year}")
        return {str(date): str(filename) for date, filename in config.items()}

    async def fetch_game_payload(
        self,
        year: int,
        date: str,
        filename: str,
    ) -> dict[str, Any]:
        path = f"/{year}/{filename}"
        logger.debug(f"Fetching game data ({date}): {path}")
        try:
            payload = await self._get(path, params=self._cache_buster())
        except ExternalAPIError as e:
            raise GameFetchError(date, f"Failed to fetch game data: {e.message}") from e

        if not isinstance(payload, dict):
            raise GameFetchError(date, f"Malformed game payload in {filename}")
        return payload
