"""In-memory, TTL-bounded cache of resolved media."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from vidresolve.cache.keys import CacheKeys
from vidresolve.core.models import ResolvedMedia

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A stored resolution and the moment it was created."""

    key: str
    value: ResolvedMedia
    created_at: float


class ResultCache:
    """
    Memo of prior resolutions keyed by a hash of the reference.

    `get` never evicts: an expired entry is reported as a miss and left
    in place for the sweeper, which is the only removal path. The
    sweeper runs every `max_age` seconds while started.

    When disabled, `get` always misses and `put` does nothing.
    """

    def __init__(
        self,
        max_age: float,
        *,
        enabled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_age = max_age
        self.enabled = enabled
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()
        self._sweeper: asyncio.Task[None] | None = None

    def __len__(self) -> int:
        return len(self._entries)

    def _is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.created_at < self.max_age

    async def get(self, reference: str) -> ResolvedMedia | None:
        """Return a copy of the cached value, or None on miss or expiry."""
        if not self.enabled:
            return None

        key = CacheKeys.resolution(reference)
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None or not self._is_fresh(entry, self._clock()):
                return None
            return entry.value.model_copy()

    async def put(self, reference: str, value: ResolvedMedia) -> None:
        """Store an independent copy, replacing any previous entry."""
        if not self.enabled:
            return

        key = CacheKeys.resolution(reference)
        async with self._lock:
            self._entries[key] = CacheEntry(
                key=key,
                value=value.model_copy(),
                created_at=self._clock(),
            )

    async def sweep(self) -> int:
        """Delete every expired entry. Returns the number removed."""
        async with self._lock:
            now = self._clock()
            expired = [
                key for key, entry in self._entries.items() if not self._is_fresh(entry, now)
            ]
            for key in expired:
                del self._entries[key]

        if expired:
            logger.debug(f"Swept {len(expired)} expired cache entries")
        return len(expired)

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()

    # Sweeper lifecycle

    @property
    def is_running(self) -> bool:
        return self._sweeper is not None and not self._sweeper.done()

    def start(self) -> None:
        """Start the periodic sweeper on the running loop."""
        if not self.enabled or self.is_running:
            return
        self._sweeper = asyncio.create_task(self._sweep_forever(), name="vidresolve-cache-sweeper")

    async def stop(self) -> None:
        """Cancel the sweeper and wait for it to finish."""
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None

    async def _sweep_forever(self) -> None:
        while True:
            await asyncio.sleep(self.max_age)
            await self.sweep()

    async def __aenter__(self) -> ResultCache:
        self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()
