"""Response schemas for API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from vidresolve.api.schemas.base import APIBaseSchema
from vidresolve.core.types import QualityTier


class ResolveResponse(APIBaseSchema):
    """Resolved media for a reference."""

    media_url: str
    author: str | None = None
    description: str | None = None
    quality: QualityTier
    provider: str
    resolution_time_ms: float


class ProviderStatsResponse(APIBaseSchema):
    """Accounting for one provider."""

    calls: int
    successes: int
    failures: int
    average_response_time_ms: float


class ErrorEventResponse(APIBaseSchema):
    """One entry of the recent error log."""

    timestamp: datetime
    source: str
    message: str
    reference: str | None = None


class StatsResponse(APIBaseSchema):
    """Engine statistics snapshot."""

    total_resolutions: int
    successful_resolutions: int
    failed_resolutions: int
    cache_hits: int
    success_rate: float | None = None
    cache_efficiency: float | None = None
    average_resolution_time_ms: float
    uptime_seconds: float
    providers: dict[str, ProviderStatsResponse] = Field(default_factory=dict)
    recent_errors: list[ErrorEventResponse] = Field(default_factory=list)


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    providers: list[str] = Field(default_factory=list)
    cache_entries: int = 0
