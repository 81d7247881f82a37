"""
Async JSON-over-HTTP client used by the season loaders.

BaseApiClient wraps a lazily created httpx.AsyncClient and adds:
- request pacing (RateLimiter)
- retries with exponential backoff on 5xx and transport errors
- 429 handling that honours Retry-After
- a single error type, ExternalAPIError, for every failure mode,
  including bodies that are not valid JSON

Subclasses set BASE_URL (or pass base_url) and call _get():

    class SeasonFiles(BaseApiClient):
        BASE_URL = "https://example.github.io/data"

        async def index(self, year: int) -> dict:
            return await self._get(f"/{year}/index.json")
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER = 60
MAX_RATE_LIMIT_WAIT = 30


class ExternalAPIError(Exception):
    """A remote fetch failed: bad status, transport error, or bad body."""

    def __init__(
        self,
        message: str,
        code: str = "EXTERNAL_API_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class RateLimitError(ExternalAPIError):
    """The host kept answering 429 until retries ran out."""

    def __init__(self, message: str, retry_after: int = DEFAULT_RETRY_AFTER):
        super().__init__(message, code="RATE_LIMITED", status_code=429)
        self.retry_after = retry_after


def parse_retry_after(value: str | None, default: int = DEFAULT_RETRY_AFTER) -> int:
    """Seconds to wait from a Retry-After header.

    Accepts both forms allowed by RFC 9110: delay-seconds and an HTTP-date.
    Dates in the past give 0; anything unparseable gives ``default``.
    """
    if not value:
        return default
    value = value.strip()
    try:
        return max(int(value), 0)
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return default
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(int((when - datetime.now(timezone.utc)).total_seconds()), 0)


class RateLimiter:
    """Spaces out request starts to at most requests_per_minute."""

    def __init__(self, requests_per_minute: int = 600):
        self.delay = 60.0 / requests_per_minute
        self._last_request = 0.0
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            elapsed = time.monotonic() - self._last_request
            if elapsed < self.delay:
                await asyncio.sleep(self.delay - elapsed)
            self._last_request = time.monotonic()


class BaseApiClient:
    """
    Rate-limited, retrying GET client returning decoded JSON.

    Usable as an async context manager, or long-lived with an explicit
    close(); the underlying httpx client is created on first use.
    """

    BASE_URL: str = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        requests_per_minute: int = 600,
        timeout: float = 30.0,
        max_retries: int = 3,
        backoff_base: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._default_headers = headers or {}
        self._default_params = params or {}
        self._rate_limiter = RateLimiter(requests_per_minute)
        self._timeout = timeout
        self._max_retries = max_retries
        self._backoff_base = backoff_base
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BaseApiClient":
        self._client = self._build_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._default_headers,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = self._build_client()
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _backoff(self, attempt: int) -> float:
        return self._backoff_base * 2 ** attempt

    async def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        GET ``path`` and return its JSON body.

        4xx answers (other than 429) fail at once; 429, 5xx and transport
        errors are retried up to max_retries attempts.

        Raises:
            RateLimitError: Still rate limited on the last attempt
            ExternalAPIError: Any other failure, including invalid JSON
        """
        merged_params = {**self._default_params, **(params or {})}
        request_headers = {**self._default_headers, **(headers or {})}
        last_error: ExternalAPIError | None = None

        for attempt in range(self._max_retries):
            is_last = attempt == self._max_retries - 1
            await self._rate_limiter.acquire()

            try:
                response = await self.client.get(
                    path,
                    params=merged_params,
                    headers=request_headers,
                )
            except httpx.RequestError as e:
                last_error = ExternalAPIError(f"Request failed: {e}")
                if not is_last:
                    wait = self._backoff(attempt)
                    logger.warning(f"Request error for {path}, retrying in {wait}s: {e}")
                    await asyncio.sleep(wait)
                continue

            status = response.status_code

            if status == 429:
                retry_after = parse_retry_after(response.headers.get("retry-after"))
                if is_last:
                    raise RateLimitError(
                        f"Rate limit exceeded for {path}. Try again in {retry_after} seconds.",
                        retry_after=retry_after,
                    )
                wait = min(retry_after, MAX_RATE_LIMIT_WAIT)
                logger.warning(f"Rate limited on {path}, waiting {wait}s (attempt {attempt + 1})")
                await asyncio.sleep(wait)
                continue

            if not response.is_success:
                last_error = ExternalAPIError(f"HTTP {status}: {response.text[:200]}", status_code=status)
                if status < 500:
                    raise last_error
                if not is_last:
                    wait = self._backoff(attempt)
                    logger.warning(f"HTTP {status} for {path}, retrying in {wait}s")
                    await asyncio.sleep(wait)
                continue

            try:
                return response.json()
            except ValueError as e:
                raise ExternalAPIError(
                    f"Invalid JSON from {path}: {e}",
                    code="INVALID_PAYLOAD",
                    status_code=status,
                ) from e

        raise last_error or ExternalAPIError(f"Request to {path} failed after retries")
