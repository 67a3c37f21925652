"""Abstract provider adapter."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

import httpx

from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import QualityTier
from vidresolve.transport.retry import RetryingTransport, TransportRequest

logger = logging.getLogger(__name__)


class AbstractProviderAdapter(ABC):
    """
    Base class for all provider adapters.

    An adapter turns a reference into one provider-specific request,
    sends it through the shared transport and parses the answer.

    Contract:
    - return a candidate tagged with the adapter's fixed quality
    - return None when the provider answered without a usable result
    - let transport failures propagate; they count as errors
    - never depend on another adapter's outcome
    """

    # Class-level configuration (to be overridden by subclasses)
    PROVIDER_NAME: ClassVar[str]
    ENDPOINT: ClassVar[str]
    QUALITY: ClassVar[QualityTier] = QualityTier.HIGH

    def __init__(self, transport: RetryingTransport) -> None:
        self._transport = transport

    @property
    def name(self) -> str:
        """Name used for metrics attribution and tie-break ordering."""
        return self.PROVIDER_NAME

    @property
    def quality(self) -> QualityTier:
        return self.QUALITY

    @abstractmethod
    def build_request(self, reference: str) -> TransportRequest:
        """Build the provider-specific request for a reference."""
        ...

    @abstractmethod
    def parse_response(self, response: httpx.Response) -> ResolutionCandidate | None:
        """Parse the provider answer, returning None if fields are missing."""
        ...

    async def resolve(self, reference: str) -> ResolutionCandidate | None:
        """Resolve a reference against this provider."""
        response = await self._transport.fetch(self.build_request(reference))
        candidate = self.parse_response(response)
        if candidate is None:
            logger.debug(f"{self.name} returned no usable result")
        return candidate

    def _candidate(
        self,
        media_url: Any,
        author: Any = None,
        description: Any = None,
    ) -> ResolutionCandidate | None:
        """Build a candidate tagged with this adapter's quality and name."""
        if not media_url or not isinstance(media_url, str):
            return None
        return ResolutionCandidate(
            media_url=media_url,
            author=str(author) if author is not None else None,
            description=str(description) if description is not None else None,
            quality=self.quality,
            provider=self.name,
        )

    @staticmethod
    def _json_body(response: httpx.Response) -> dict[str, Any] | None:
        """Decode a JSON object body, or None if it is not one."""
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={str(self.name)!r}, quality={self.quality.value!r})"
