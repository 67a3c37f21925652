"""Markup-scraping fallback adapter."""

from __future__ import annotations

from typing import ClassVar

import httpx
from bs4 import BeautifulSoup

from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import ProviderName, QualityTier
from vidresolve.resolution.base import AbstractProviderAdapter
from vidresolve.transport.retry import TransportRequest


class WebScrapingAdapter(AbstractProviderAdapter):
    """
    Fetches the video page itself and reads the first <video><source>.

    Pages rarely expose the full-quality stream, so results are tagged
    medium quality and lose tie-breaks against the API providers.
    """

    PROVIDER_NAME: ClassVar[str] = ProviderName.WEBSCRAPING
    ENDPOINT: ClassVar[str] = ""
    QUALITY: ClassVar[QualityTier] = QualityTier.MEDIUM

    def build_request(self, reference: str) -> TransportRequest:
        return TransportRequest("GET", reference)

    def parse_response(self, response: httpx.Response) -> ResolutionCandidate | None:
        soup = BeautifulSoup(response.text, "html.parser")

        source = soup.select_one("video source[src]")
        if source is None:
            return None

        return self._candidate(
            source.get("src"),
            self._meta_content(soup, "og:author"),
            self._meta_content(soup, "og:description"),
        )

    @staticmethod
    def _meta_content(soup: BeautifulSoup, prop: str) -> str | None:
        tag = soup.find("meta", attrs={"property": prop})
        if tag is None:
            return None
        content = tag.get("content")
        return content if isinstance(content, str) else None
