"""HTTP transport with bounded retries and randomized client identity."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar

import httpx

from vidresolve.core.exceptions import TransportError

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


@dataclass
class TransportRequest:
    """Descriptor for a single HTTP call."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] | None = None
    data: dict[str, Any] | None = None
    json: Any | None = None
    timeout: float | None = None
    follow_redirects: bool = True
    max_retries: int | None = None


class RetryingTransport:
    """
    Wraps provider calls with retries and exponential backoff.

    Each attempt picks a fresh User-Agent from a fixed pool. Between
    attempt i and i+1 (0-indexed) the transport sleeps 2**i seconds.
    Only the last attempt's error is surfaced.

    Does not report to the metrics registry, so it can be shared by
    metered provider calls and unmetered ones (redirect lookups).
    """

    USER_AGENTS: ClassVar[tuple[str, ...]] = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1_2 like Mac OS X) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/17.1.2 Mobile/15E148 Safari/604.1",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/17.2.1 Safari/605.1.15",
        "Mozilla/5.0 (Linux; Android 14; Pixel 7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.6099.43 Mobile Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    )

    DEFAULT_HEADERS: ClassVar[dict[str, str]] = {
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate, br",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }

    def __init__(
        self,
        *,
        max_retries: int = 3,
        timeout: float = 10.0,
        proxy: str | None = None,
        extra_headers: dict[str, str] | None = None,
        sleep: SleepFunc = asyncio.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.max_retries = max(1, max_retries)
        self.timeout = timeout
        self.proxy = proxy
        self.extra_headers = dict(extra_headers or {})
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                proxy=self.proxy,
            )
        return self._client

    def random_user_agent(self) -> str:
        return self._rng.choice(self.USER_AGENTS)

    def build_headers(self, request_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Merge identity, default, engine and request headers. Later wins."""
        headers = {"User-Agent": self.random_user_agent()}
        headers.update(self.DEFAULT_HEADERS)
        headers.update(self.extra_headers)
        if request_headers:
            headers.update(request_headers)
        return headers

    @staticmethod
    def backoff_delay(attempt: int) -> float:
        """Seconds to wait after the given 0-indexed failed attempt."""
        return float(2**attempt)

    async def fetch(self, request: TransportRequest) -> httpx.Response:
        """Perform the request, retrying on any HTTP error or non-2xx status."""
        client = self._get_client()
        attempts = self.max_retries if request.max_retries is None else max(1, request.max_retries)
        last_error: Exception | None = None

        for attempt in range(attempts):
            try:
                logger.debug(f"Attempt {attempt + 1}/{attempts} for {request.url}")
                response = await client.request(
                    request.method,
                    request.url,
                    headers=self.build_headers(request.headers),
                    params=request.params,
                    data=request.data,
                    json=request.json,
                    timeout=request.timeout if request.timeout is not None else self.timeout,
                    follow_redirects=request.follow_redirects,
                )
                response.raise_for_status()
                return response
            except httpx.InvalidURL as e:
                # Malformed URLs fail identically on every attempt
                raise TransportError(
                    message=str(e),
                    url=request.url,
                    attempts=attempt + 1,
                    last_error=e,
                ) from e
            except httpx.HTTPError as e:
                last_error = e
                logger.debug(f"Fetch attempt {attempt + 1} failed: {e}")
                if attempt < attempts - 1:
                    await self._sleep(self.backoff_delay(attempt))

        raise TransportError(
            message=str(last_error),
            url=request.url,
            attempts=attempts,
            last_error=last_error,
        ) from last_error

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> RetryingTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
