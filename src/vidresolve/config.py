"""Application configuration using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vidresolve.core.types import QualityTier


class VidresolveSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="VIDRESOLVE_",
    )

    # Resolution
    timeout_ms: int = Field(
        default=10_000,
        gt=0,
        description="Overall fan-out deadline and per-attempt request timeout (ms)",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        description="Attempts per provider request",
    )
    preferred_quality: QualityTier = Field(
        default=QualityTier.HIGH,
        description="Soft quality preference for arbitration",
    )
    fanout_concurrency: int | None = Field(
        default=None,
        ge=1,
        description="Providers queried at once (all when unset)",
    )

    # Cache
    cache_results: bool = Field(
        default=True,
        description="Memoize successful resolutions in memory",
    )
    max_cache_age_ms: int = Field(
        default=3_600_000,
        gt=0,
        description="Cache TTL and sweep period (ms)",
    )

    # Network
    proxy: str | None = Field(
        default=None,
        description="Proxy URL for provider requests",
    )
    extra_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers merged into every provider request",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Emit debug events to subscribers",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed CORS origins for the HTTP API",
    )


class EngineConfig(BaseModel):
    """Immutable configuration snapshot supplied to an engine at construction."""

    model_config = ConfigDict(frozen=True)

    timeout_ms: int = Field(default=10_000, gt=0)
    max_retries: int = Field(default=3, ge=1)
    preferred_quality: QualityTier = QualityTier.HIGH
    cache_results: bool = True
    max_cache_age_ms: int = Field(default=3_600_000, gt=0)
    fanout_concurrency: int | None = Field(default=None, ge=1)
    proxy: str | None = None
    extra_headers: dict[str, str] = Field(default_factory=dict)
    debug: bool = False

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def max_cache_age_seconds(self) -> float:
        return self.max_cache_age_ms / 1000

    @classmethod
    def from_settings(cls, settings: VidresolveSettings) -> EngineConfig:
        """Snapshot the engine-relevant fields of application settings."""
        return cls(
            timeout_ms=settings.timeout_ms,
            max_retries=settings.max_retries,
            preferred_quality=settings.preferred_quality,
            cache_results=settings.cache_results,
            max_cache_age_ms=settings.max_cache_age_ms,
            fanout_concurrency=settings.fanout_concurrency,
            proxy=settings.proxy,
            extra_headers=dict(settings.extra_headers),
            debug=settings.debug,
        )


@lru_cache
def get_settings() -> VidresolveSettings:
    """Get cached settings instance."""
    return VidresolveSettings()
