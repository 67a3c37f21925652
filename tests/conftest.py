"""Shared test fixtures for all tests."""

from __future__ import annotations

import asyncio
from typing import ClassVar

import httpx
import pytest

from vidresolve.config import EngineConfig
from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import QualityTier
from vidresolve.resolution.base import AbstractProviderAdapter
from vidresolve.transport.retry import RetryingTransport, TransportRequest

# ============================================================================
# Test Data Constants
# ============================================================================


VALID_REFERENCE = "https://www.tiktok.com/@creator/video/7234567890123456789"
VALID_REFERENCE_ID = "7234567890123456789"
VALID_SHORT_REFERENCE = "https://vm.tiktok.com/ZMabc123/"
SHORT_LINK_NO_ID = "https://vm.tiktok.com/"
INVALID_REFERENCE = "https://example.com/not-a-video"


# ============================================================================
# Stub Adapter for Testing
# ============================================================================


class StubAdapter(AbstractProviderAdapter):
    """Adapter with scripted behavior that never touches the network."""

    PROVIDER_NAME: ClassVar[str] = "stub"
    ENDPOINT: ClassVar[str] = "https://stub.invalid"

    def __init__(
        self,
        name: str,
        *,
        quality: QualityTier = QualityTier.HIGH,
        media_url: str | None = None,
        absent: bool = False,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        super().__init__(RetryingTransport())
        self._name = name
        self._quality = quality
        self._media_url = media_url or f"https://cdn.example.com/{name}.mp4"
        self._absent = absent
        self._error = error
        self._delay = delay
        self.calls = 0
        self.completed = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def quality(self) -> QualityTier:
        return self._quality

    def build_request(self, reference: str) -> TransportRequest:
        return TransportRequest("GET", self.ENDPOINT)

    def parse_response(self, response: httpx.Response) -> ResolutionCandidate | None:
        return None

    async def resolve(self, reference: str) -> ResolutionCandidate | None:
        self.calls += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        self.completed += 1
        if self._error is not None:
            raise self._error
        if self._absent:
            return None
        return self._candidate(self._media_url, f"author-{self._name}", "a description")


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Sample Data Fixtures
# ============================================================================


def make_candidate(
    provider: str,
    quality: QualityTier = QualityTier.HIGH,
    media_url: str | None = None,
) -> ResolutionCandidate:
    """Create a candidate for the given provider."""
    return ResolutionCandidate(
        media_url=media_url or f"https://cdn.example.com/{provider}.mp4",
        author="creator",
        description="a short video",
        quality=quality,
        provider=provider,
    )


@pytest.fixture
def sample_candidate() -> ResolutionCandidate:
    """Create a fully populated candidate."""
    return make_candidate("snaptik")


@pytest.fixture
def candidate_factory():
    """Factory fixture to build candidates."""
    return make_candidate


@pytest.fixture
def fake_clock() -> FakeClock:
    """Provide a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def stub_adapter():
    """Factory fixture for scripted adapters."""
    return StubAdapter


@pytest.fixture
def references() -> dict[str, str]:
    """Return a dictionary of sample references."""
    return {
        "valid": VALID_REFERENCE,
        "valid_id": VALID_REFERENCE_ID,
        "short": VALID_SHORT_REFERENCE,
        "short_no_id": SHORT_LINK_NO_ID,
        "invalid": INVALID_REFERENCE,
    }


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def engine_config() -> EngineConfig:
    """Engine config with a short deadline for tests."""
    return EngineConfig(
        timeout_ms=500,
        max_retries=1,
        cache_results=True,
        max_cache_age_ms=60_000,
    )


@pytest.fixture
def engine_config_no_cache() -> EngineConfig:
    """Engine config with caching disabled."""
    return EngineConfig(
        timeout_ms=500,
        max_retries=1,
        cache_results=False,
    )
