"""Video id detection for media references."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import ClassVar

from vidresolve.core.exceptions import TransportError
from vidresolve.transport.retry import RetryingTransport, TransportRequest

logger = logging.getLogger(__name__)


@dataclass
class DetectionResult:
    """Result of reference detection."""

    video_id: str | None
    normalized_reference: str
    is_short_link: bool = False
    redirected_to: str | None = None

    @property
    def valid(self) -> bool:
        return self.video_id is not None


class ReferenceDetector:
    """Extracts the video id from the known reference shapes."""

    # Tried in order; the first match wins
    ID_PATTERNS: ClassVar[tuple[re.Pattern[str], ...]] = (
        re.compile(r"video/(\d+)"),
        re.compile(r"/v/(\d+)"),
        re.compile(r"vm\.tiktok\.com/(\w+)"),
        re.compile(r"vt\.tiktok\.com/(\w+)"),
    )

    SHORT_LINK_HOSTS: ClassVar[tuple[str, ...]] = ("vm.tiktok.com", "vt.tiktok.com")

    @staticmethod
    def normalize(reference: str) -> str:
        return reference.strip()

    def extract_video_id(self, reference: str) -> str | None:
        """Return the id embedded in the reference, if any."""
        for pattern in self.ID_PATTERNS:
            if match := pattern.search(reference):
                return match.group(1)
        return None

    def is_short_link(self, reference: str) -> bool:
        return any(host in reference for host in self.SHORT_LINK_HOSTS)

    def detect(self, reference: str) -> DetectionResult:
        """Detect without touching the network."""
        normalized = self.normalize(reference)
        return DetectionResult(
            video_id=self.extract_video_id(normalized),
            normalized_reference=normalized,
            is_short_link=self.is_short_link(normalized),
        )

    async def resolve_video_id(
        self,
        reference: str,
        transport: RetryingTransport,
    ) -> DetectionResult:
        """
        Detect, following a short-link redirect when no pattern matches.

        The lookup is a single HEAD request. A failed or malformed lookup
        leaves the result invalid rather than raising.
        """
        result = self.detect(reference)
        if result.valid or not result.is_short_link:
            return result

        try:
            response = await transport.fetch(
                TransportRequest(
                    "HEAD",
                    result.normalized_reference,
                    follow_redirects=True,
                    max_retries=1,
                )
            )
        except TransportError as e:
            logger.debug(f"Error following short link: {e}")
            return result

        final_url = str(response.url)
        result.redirected_to = final_url
        result.video_id = self.extract_video_id(final_url)
        return result
