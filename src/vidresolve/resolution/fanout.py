"""Concurrent fan-out to every registered provider."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field

from vidresolve.core.exceptions import AllProvidersFailedError
from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import ResolutionStatus
from vidresolve.metrics.registry import MetricsRegistry
from vidresolve.resolution.base import AbstractProviderAdapter

logger = logging.getLogger(__name__)

TIMEOUT_REASON = "Timeout"
ABSENT_REASON = "No result"


@dataclass
class ProviderOutcome:
    """How one adapter's attempt ended."""

    provider: str
    status: ResolutionStatus
    candidate: ResolutionCandidate | None = None
    error_message: str | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == ResolutionStatus.SUCCESS and self.candidate is not None

    @property
    def reason(self) -> str:
        return f"{self.provider}: {self.error_message or self.status.value}"


@dataclass
class FanoutResult:
    """Every outcome of one fan-out plus the candidates that came back."""

    outcomes: list[ProviderOutcome] = field(default_factory=list)

    @property
    def candidates(self) -> list[ResolutionCandidate]:
        return [o.candidate for o in self.outcomes if o.success and o.candidate is not None]

    @property
    def failures(self) -> list[ProviderOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def success(self) -> bool:
        return any(o.success for o in self.outcomes)

    def raise_if_empty(self) -> None:
        """Raise AllProvidersFailedError carrying per-provider reasons."""
        if not self.success:
            raise AllProvidersFailedError(
                [o.reason for o in self.failures],
                details={"providers": [o.provider for o in self.outcomes]},
            )


class FanoutResolver:
    """
    Runs every adapter concurrently under one shared deadline.

    Features:
    - each adapter races its call against the deadline
    - every outcome is recorded in the metrics registry
    - waits for all adapters to settle; a fast answer never cancels
      slower ones
    - optional bound on how many adapters run at once
    """

    def __init__(
        self,
        adapters: list[AbstractProviderAdapter],
        metrics: MetricsRegistry,
        *,
        concurrency: int | None = None,
    ) -> None:
        self._adapters = list(adapters)
        self._metrics = metrics
        self.concurrency = concurrency

    @property
    def adapters(self) -> list[AbstractProviderAdapter]:
        return list(self._adapters)

    async def resolve_all(self, reference: str, timeout: float) -> FanoutResult:
        """Query every adapter. Never raises for provider failures."""
        if not self._adapters:
            logger.warning("No provider adapters registered")
            return FanoutResult()

        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        semaphore = asyncio.Semaphore(self.concurrency) if self.concurrency else None

        tasks = [
            self._run_adapter(adapter, reference, deadline, semaphore)
            for adapter in self._adapters
        ]
        outcomes = await asyncio.gather(*tasks)

        result = FanoutResult(outcomes=list(outcomes))
        logger.debug(
            f"Fan-out finished: {len(result.candidates)}/{len(outcomes)} providers answered"
        )
        return result

    async def _run_adapter(
        self,
        adapter: AbstractProviderAdapter,
        reference: str,
        deadline: float,
        semaphore: asyncio.Semaphore | None,
    ) -> ProviderOutcome:
        """Run one adapter with timeout, error isolation and accounting."""
        name = adapter.name
        self._metrics.record_call(name)
        start = time.monotonic()

        try:
            async with asyncio.timeout_at(deadline):
                if semaphore is None:
                    candidate = await adapter.resolve(reference)
                else:
                    async with semaphore:
                        candidate = await adapter.resolve(reference)
        except TimeoutError:
            outcome = ProviderOutcome(
                provider=name,
                status=ResolutionStatus.TIMEOUT,
                error_message=TIMEOUT_REASON,
            )
        except Exception as e:
            logger.warning(f"Provider {name} failed: {e}")
            outcome = ProviderOutcome(
                provider=name,
                status=ResolutionStatus.ERROR,
                error_message=str(e) or type(e).__name__,
            )
        else:
            if candidate is not None:
                outcome = ProviderOutcome(
                    provider=name,
                    status=ResolutionStatus.SUCCESS,
                    candidate=candidate,
                )
            else:
                outcome = ProviderOutcome(
                    provider=name,
                    status=ResolutionStatus.NOT_FOUND,
                    error_message=ABSENT_REASON,
                )

        outcome.duration_ms = (time.monotonic() - start) * 1000

        if outcome.success:
            self._metrics.record_success(name, outcome.duration_ms)
        else:
            self._metrics.record_failure(
                name, outcome.error_message or outcome.status.value, reference
            )

        return outcome
