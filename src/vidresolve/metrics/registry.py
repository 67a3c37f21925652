"""Process-wide performance accounting for providers and resolutions."""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from vidresolve.core.models import ErrorEvent, ProviderStats, StatsSnapshot

logger = logging.getLogger(__name__)

ENGINE_SOURCE = "engine"


@dataclass
class _ProviderCounters:
    calls: int = 0
    successes: int = 0
    failures: int = 0
    average_response_time_ms: float = 0.0


@dataclass
class _Counters:
    """All mutable state. Replaced wholesale on reset."""

    total: int = 0
    successful: int = 0
    failed: int = 0
    cache_hits: int = 0
    average_resolution_time_ms: float = 0.0
    providers: dict[str, _ProviderCounters] = field(default_factory=dict)


class MetricsRegistry:
    """
    Thread-safe counters for provider calls and top-level resolutions.

    Provider counters are updated by the fan-out for every adapter
    attempt. Resolution counters are updated once per engine resolve
    call. The running mean of response times only moves on success:

        mean' = (mean * (n - 1) + sample) / n

    where n is the success count after incrementing.
    """

    ERROR_LOG_SIZE = 100
    RECENT_ERRORS = 5

    def __init__(
        self,
        provider_names: Iterable[str] = (),
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._lock = threading.Lock()
        self._clock = clock
        self._provider_names = list(provider_names)
        self._counters = self._fresh_counters()
        self._errors: deque[ErrorEvent] = deque(maxlen=self.ERROR_LOG_SIZE)
        self._started_at = clock()

    def _fresh_counters(self) -> _Counters:
        counters = _Counters()
        for name in self._provider_names:
            counters.providers[name] = _ProviderCounters()
        return counters

    def _provider(self, name: str) -> _ProviderCounters:
        # Caller holds the lock
        stats = self._counters.providers.get(name)
        if stats is None:
            stats = self._counters.providers[name] = _ProviderCounters()
        return stats

    # Provider-level accounting

    def record_call(self, name: str) -> None:
        with self._lock:
            self._provider(name).calls += 1

    def record_success(self, name: str, elapsed_ms: float) -> None:
        with self._lock:
            stats = self._provider(name)
            stats.successes += 1
            n = stats.successes
            stats.average_response_time_ms = (
                stats.average_response_time_ms * (n - 1) + elapsed_ms
            ) / n

    def record_failure(self, name: str, reason: str, reference: str | None = None) -> None:
        with self._lock:
            self._provider(name).failures += 1
            self._errors.append(ErrorEvent(source=name, message=reason, reference=reference))

    # Resolution-level accounting

    def record_resolution_started(self) -> None:
        with self._lock:
            self._counters.total += 1

    def record_cache_hit(self) -> None:
        with self._lock:
            self._counters.cache_hits += 1

    def record_resolution_succeeded(self, elapsed_ms: float) -> None:
        with self._lock:
            counters = self._counters
            counters.successful += 1
            n = counters.successful
            counters.average_resolution_time_ms = (
                counters.average_resolution_time_ms * (n - 1) + elapsed_ms
            ) / n

    def record_resolution_failed(self, reason: str, reference: str | None = None) -> None:
        with self._lock:
            self._counters.failed += 1
            self._errors.append(
                ErrorEvent(source=ENGINE_SOURCE, message=reason, reference=reference)
            )

    # Queries

    def snapshot(self) -> StatsSnapshot:
        """Return a consistent copy of all statistics."""
        with self._lock:
            counters = self._counters
            total = counters.total
            return StatsSnapshot(
                total_resolutions=total,
                successful_resolutions=counters.successful,
                failed_resolutions=counters.failed,
                cache_hits=counters.cache_hits,
                success_rate=counters.successful / total if total else None,
                cache_efficiency=counters.cache_hits / total if total else None,
                average_resolution_time_ms=round(counters.average_resolution_time_ms, 3),
                uptime_seconds=self._clock() - self._started_at,
                providers={
                    name: ProviderStats(
                        calls=stats.calls,
                        successes=stats.successes,
                        failures=stats.failures,
                        average_response_time_ms=stats.average_response_time_ms,
                    )
                    for name, stats in counters.providers.items()
                },
                recent_errors=list(self._errors)[-self.RECENT_ERRORS :],
            )

    def reset(self) -> None:
        """Clear every counter and the error log in one step."""
        with self._lock:
            self._provider_names = list(self._counters.providers)
            self._counters = self._fresh_counters()
            self._errors.clear()
            self._started_at = self._clock()
        logger.info("Statistics reset")
