"""TikWM API adapter."""

from __future__ import annotations

from typing import ClassVar

import httpx

from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import ProviderName
from vidresolve.resolution.base import AbstractProviderAdapter
from vidresolve.transport.retry import TransportRequest


class TikwmAdapter(AbstractProviderAdapter):
    """TikWM public API."""

    PROVIDER_NAME: ClassVar[str] = ProviderName.TIKWM
    ENDPOINT: ClassVar[str] = "https://www.tikwm.com/api/"

    def build_request(self, reference: str) -> TransportRequest:
        return TransportRequest("GET", self.ENDPOINT, params={"url": reference})

    def parse_response(self, response: httpx.Response) -> ResolutionCandidate | None:
        data = self._json_body(response)
        payload = data.get("data") if data else None
        if not isinstance(payload, dict):
            return None

        author = payload.get("author") or {}
        return self._candidate(
            payload.get("play"),
            author.get("nickname") if isinstance(author, dict) else None,
            payload.get("title"),
        )
