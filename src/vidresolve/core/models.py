"""Domain models for resolution candidates and statistics."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from .types import QualityTier


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResolutionCandidate(BaseModel):
    """One provider's answer for a reference."""

    model_config = ConfigDict(frozen=True)

    media_url: str = Field(..., description="Direct, playable media location")
    author: str | None = Field(default=None, description="Uploader name")
    description: str | None = Field(default=None, description="Video caption")
    quality: QualityTier = Field(..., description="Quality the provider delivers")
    provider: str = Field(..., description="Name of the provider that answered")


class ResolvedMedia(ResolutionCandidate):
    """The arbitration winner handed back to the caller."""

    @classmethod
    def from_candidate(cls, candidate: ResolutionCandidate) -> ResolvedMedia:
        return cls(**candidate.model_dump())


class ProviderStats(BaseModel):
    """Per-provider call accounting."""

    calls: int = 0
    successes: int = 0
    failures: int = 0
    average_response_time_ms: float = 0.0


class ErrorEvent(BaseModel):
    """An entry in the rolling error log."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=_utcnow)
    source: str = Field(..., description="Provider name, or 'engine' for top-level failures")
    message: str
    reference: str | None = None


class StatsSnapshot(BaseModel):
    """Point-in-time copy of engine statistics."""

    total_resolutions: int = 0
    successful_resolutions: int = 0
    failed_resolutions: int = 0
    cache_hits: int = 0
    success_rate: float | None = Field(
        default=None, description="successful / total, None before the first resolution"
    )
    cache_efficiency: float | None = Field(
        default=None, description="cache hits / total, None before the first resolution"
    )
    average_resolution_time_ms: float = 0.0
    uptime_seconds: float = 0.0
    providers: dict[str, ProviderStats] = Field(default_factory=dict)
    recent_errors: list[ErrorEvent] = Field(default_factory=list)
