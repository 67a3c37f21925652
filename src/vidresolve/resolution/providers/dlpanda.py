"""DLPanda API adapter."""

from __future__ import annotations

from typing import ClassVar

import httpx

from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import ProviderName
from vidresolve.resolution.base import AbstractProviderAdapter
from vidresolve.transport.retry import TransportRequest


class DlpandaAdapter(AbstractProviderAdapter):
    PROVIDER_NAME: ClassVar[str] = ProviderName.DLPANDA
    ENDPOINT: ClassVar[str] = "https://dlpanda.com/api/v2/video"

    def build_request(self, reference: str) -> TransportRequest:
        return TransportRequest("POST", self.ENDPOINT, json={"url": reference})

    def parse_response(self, response: httpx.Response) -> ResolutionCandidate | None:
        data = self._json_body(response)
        if not data:
            return None
        return self._candidate(
            data.get("url"),
            data.get("author"),
            data.get("description"),
        )
