"""Core types, models, and exceptions."""

from .exceptions import (
    AllProvidersFailedError,
    ConfigurationError,
    InvalidReferenceError,
    ResolutionError,
    TransportError,
    VidresolveError,
)
from .models import (
    ErrorEvent,
    ProviderStats,
    ResolutionCandidate,
    ResolvedMedia,
    StatsSnapshot,
)
from .types import (
    EngineEventType,
    ProviderName,
    QualityTier,
    ResolutionStatus,
)

__all__ = [
    # Types
    "EngineEventType",
    "ProviderName",
    "QualityTier",
    "ResolutionStatus",
    # Models
    "ErrorEvent",
    "ProviderStats",
    "ResolutionCandidate",
    "ResolvedMedia",
    "StatsSnapshot",
    # Exceptions
    "AllProvidersFailedError",
    "ConfigurationError",
    "InvalidReferenceError",
    "ResolutionError",
    "TransportError",
    "VidresolveError",
]
