"""Custom exception hierarchy for vidresolve."""

from typing import Any


class VidresolveError(Exception):
    """Base exception for all vidresolve errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(VidresolveError):
    """Engine configuration is invalid."""

    pass


class TransportError(VidresolveError):
    """A network call failed after exhausting its retry budget."""

    def __init__(
        self,
        message: str,
        url: str,
        attempts: int,
        last_error: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
        self.attempts = attempts
        self.last_error = last_error


class ResolutionError(VidresolveError):
    """Failed to resolve a media reference."""

    pass


class AllProvidersFailedError(ResolutionError):
    """Every provider ended in absence, error or timeout."""

    def __init__(
        self,
        reasons: list[str],
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__("All methods failed:\n" + "\n".join(reasons), details)
        self.reasons = reasons


class InvalidReferenceError(ResolutionError):
    """Reference matches no known shape and redirect resolution failed."""

    def __init__(
        self,
        reference: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"Could not extract a video id from: {reference}", details)
        self.reference = reference
