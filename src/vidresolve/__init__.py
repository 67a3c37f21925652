"""vidresolve - Multi-provider short-form video resolution engine."""

__version__ = "0.1.0"

from vidresolve.config import EngineConfig, VidresolveSettings
from vidresolve.core.exceptions import (
    AllProvidersFailedError,
    InvalidReferenceError,
    ResolutionError,
    TransportError,
    VidresolveError,
)
from vidresolve.core.models import ResolutionCandidate, ResolvedMedia, StatsSnapshot
from vidresolve.core.types import EngineEventType, QualityTier, ResolutionStatus
from vidresolve.engine import ResolutionEngine, resolve_media
from vidresolve.events import EngineEvent

__all__ = [
    # Engine
    "ResolutionEngine",
    "resolve_media",
    # Config
    "EngineConfig",
    "VidresolveSettings",
    # Types
    "EngineEventType",
    "QualityTier",
    "ResolutionStatus",
    # Models
    "EngineEvent",
    "ResolutionCandidate",
    "ResolvedMedia",
    "StatsSnapshot",
    # Errors
    "AllProvidersFailedError",
    "InvalidReferenceError",
    "ResolutionError",
    "TransportError",
    "VidresolveError",
    # Version
    "__version__",
]
