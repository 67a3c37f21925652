"""Snaptik API adapter."""

from __future__ import annotations

from typing import ClassVar

import httpx

from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import ProviderName
from vidresolve.resolution.base import AbstractProviderAdapter
from vidresolve.transport.retry import TransportRequest


class SnaptikAdapter(AbstractProviderAdapter):
    """Snaptik video-details endpoint (reference passed as query parameter)."""

    PROVIDER_NAME: ClassVar[str] = ProviderName.SNAPTIK
    ENDPOINT: ClassVar[str] = "https://api.snaptik.com/video-details"

    def build_request(self, reference: str) -> TransportRequest:
        return TransportRequest("GET", self.ENDPOINT, params={"url": reference})

    def parse_response(self, response: httpx.Response) -> ResolutionCandidate | None:
        data = self._json_body(response)
        if not data or not isinstance(data.get("video"), dict):
            return None

        video = data["video"]
        author = data.get("author") or {}
        return self._candidate(
            video.get("url"),
            author.get("name") if isinstance(author, dict) else None,
            video.get("description"),
        )
