"""SaveTT API adapter."""

from __future__ import annotations

from typing import ClassVar

import httpx

from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import ProviderName
from vidresolve.resolution.base import AbstractProviderAdapter
from vidresolve.transport.retry import TransportRequest


class SaveTTAdapter(AbstractProviderAdapter):
    """SaveTT ajax search endpoint (form-encoded body)."""

    PROVIDER_NAME: ClassVar[str] = ProviderName.SAVETT
    ENDPOINT: ClassVar[str] = "https://savett.cc/api/ajaxSearch"

    def build_request(self, reference: str) -> TransportRequest:
        # httpx sets the form content type
        return TransportRequest("POST", self.ENDPOINT, data={"url": reference})

    def parse_response(self, response: httpx.Response) -> ResolutionCandidate | None:
        data = self._json_body(response)
        links = data.get("links") if data else None
        if not links or not isinstance(links, list) or not isinstance(links[0], dict):
            return None
        return self._candidate(
            links[0].get("url"),
            data.get("author") or "Unknown",
            data.get("desc") or "",
        )
