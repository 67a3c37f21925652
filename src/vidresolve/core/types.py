"""Core enums and type definitions."""

from enum import StrEnum


class QualityTier(StrEnum):
    """Quality a provider is known to deliver. Totally ordered by rank."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _QUALITY_RANKS[self]


_QUALITY_RANKS = {
    QualityTier.LOW: 1,
    QualityTier.MEDIUM: 2,
    QualityTier.HIGH: 3,
}


class ProviderName(StrEnum):
    """Known third-party providers."""

    SNAPTIK = "snaptik"
    TIKWM = "tikwm"
    TIKDOWN = "tikdown"
    SAVETT = "savett"
    SSSTIK = "ssstik"
    DLPANDA = "dlpanda"
    WEBSCRAPING = "webscraping"


class ResolutionStatus(StrEnum):
    """Outcome of a single provider attempt."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"
    TIMEOUT = "timeout"


class EngineEventType(StrEnum):
    """Lifecycle moments pushed to event subscribers."""

    STARTED = "started"
    PROGRESSED = "progressed"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    DEBUG_LOGGED = "debug_logged"
