"""Resolution engine: cache, fan-out, arbitration and accounting."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from vidresolve.cache.memory import ResultCache
from vidresolve.config import EngineConfig
from vidresolve.core.exceptions import (
    AllProvidersFailedError,
    ConfigurationError,
    InvalidReferenceError,
)
from vidresolve.core.models import ResolvedMedia, StatsSnapshot
from vidresolve.detection.reference import ReferenceDetector
from vidresolve.events import EngineEvents
from vidresolve.metrics.registry import MetricsRegistry
from vidresolve.resolution.arbiter import QualityArbiter
from vidresolve.resolution.base import AbstractProviderAdapter
from vidresolve.resolution.fanout import FanoutResolver
from vidresolve.resolution.registry import ProviderRegistry
from vidresolve.transport.retry import RetryingTransport

logger = logging.getLogger(__name__)


class ResolutionEngine:
    """
    Resolves a video reference into a playable media location.

    Usage:
        async with ResolutionEngine(EngineConfig(timeout_ms=8000)) as engine:
            media = await engine.resolve("https://www.tiktok.com/@user/video/123")
            print(media.media_url)

            stats = engine.snapshot()

    The cache sweeper runs between entering and leaving the context.
    Only InvalidReferenceError and AllProvidersFailedError propagate out
    of `resolve`; individual provider failures are summarized.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        adapters: Sequence[AbstractProviderAdapter] | None = None,
        transport: RetryingTransport | None = None,
        arbiter: QualityArbiter | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the engine.

        Args:
            config: Immutable configuration snapshot. Defaults apply if omitted.
            adapters: Provider adapters to query. Defaults to every shipped adapter.
            transport: Shared transport. Built from the config if omitted.
            arbiter: Candidate selection policy.
            clock: Monotonic clock used for cache ages and uptime.

        Raises:
            ConfigurationError: The adapter list is empty or repeats a name
        """
        self.config = config or EngineConfig()
        self._owns_transport = transport is None
        self._transport = transport or RetryingTransport(
            max_retries=self.config.max_retries,
            timeout=self.config.timeout_seconds,
            proxy=self.config.proxy,
            extra_headers=self.config.extra_headers,
        )

        registry = ProviderRegistry()
        if adapters is None:
            registry = ProviderRegistry.with_defaults(self._transport)
        else:
            if not adapters:
                raise ConfigurationError("At least one provider adapter is required")
            for adapter in adapters:
                try:
                    registry.register(adapter)
                except ValueError as e:
                    raise ConfigurationError(str(e)) from e
        self._registry = registry

        self._clock = clock
        self._metrics = MetricsRegistry(registry.names, clock=clock)
        self._cache = ResultCache(
            self.config.max_cache_age_seconds,
            enabled=self.config.cache_results,
            clock=clock,
        )
        self._fanout = FanoutResolver(
            registry.adapters,
            self._metrics,
            concurrency=self.config.fanout_concurrency,
        )
        self._arbiter = arbiter or QualityArbiter()
        self._detector = ReferenceDetector()
        self.events = EngineEvents()

    async def __aenter__(self) -> ResolutionEngine:
        """Start background work on context entry."""
        self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    def start(self) -> None:
        """Start the cache sweeper."""
        self._cache.start()

    async def close(self) -> None:
        """Stop the sweeper and close the transport if the engine built it."""
        await self._cache.stop()
        if self._owns_transport:
            await self._transport.close()

    @property
    def providers(self) -> list[str]:
        return self._registry.names

    @property
    def cache(self) -> ResultCache:
        return self._cache

    def _debug(self, message: str, level: str = "info") -> None:
        logger.debug(message)
        if self.config.debug:
            self.events.debug_logged(message, level)

    async def resolve(self, reference: str) -> ResolvedMedia:
        """
        Resolve a reference to the best available media.

        Args:
            reference: Video URL in one of the supported shapes

        Returns:
            The arbitration winner

        Raises:
            InvalidReferenceError: No video id could be determined
            AllProvidersFailedError: No provider produced a candidate
        """
        self._metrics.record_resolution_started()
        start = self._clock()
        normalized = self._detector.normalize(reference)
        self.events.started(normalized)

        try:
            media = await self._cache.get(normalized)
            if media is not None:
                self._metrics.record_cache_hit()
                self._debug("Using cached result")
            else:
                media = await self._resolve_uncached(normalized)
                await self._cache.put(normalized, media)
        except (InvalidReferenceError, AllProvidersFailedError) as e:
            self._metrics.record_resolution_failed(e.message, normalized)
            self._debug(f"Error occurred: {e.message}", "error")
            logger.warning(f"Resolution failed for {normalized}: {e.message}")
            self.events.failed(normalized, e.message)
            raise

        elapsed_ms = (self._clock() - start) * 1000
        self._metrics.record_resolution_succeeded(elapsed_ms)
        self.events.succeeded(normalized, media, elapsed_ms)
        return media

    async def _resolve_uncached(self, reference: str) -> ResolvedMedia:
        detection = await self._detector.resolve_video_id(reference, self._transport)
        if not detection.valid:
            raise InvalidReferenceError(reference)

        self.events.progressed(reference, "Fetching video metadata...")
        result = await self._fanout.resolve_all(reference, self.config.timeout_seconds)
        result.raise_if_empty()

        best = self._arbiter.select_best(result.candidates, self.config.preferred_quality)
        self._debug(f"Selected source: {best.provider} with quality: {best.quality.value}")
        return ResolvedMedia.from_candidate(best)

    def snapshot(self) -> StatsSnapshot:
        """Return current statistics."""
        return self._metrics.snapshot()

    def reset_stats(self) -> None:
        """Clear all statistics atomically."""
        self._metrics.reset()


async def resolve_media(
    reference: str,
    config: EngineConfig | None = None,
) -> ResolvedMedia:
    """
    Resolve a reference (convenience function).

    For multiple resolutions, use ResolutionEngine so the cache and
    connection pool are reused.
    """
    async with ResolutionEngine(config) as engine:
        return await engine.resolve(reference)
