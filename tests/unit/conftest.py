"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import Any

import pytest
import respx
from httpx import Response

from vidresolve.transport.retry import RetryingTransport

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Transport Fixtures
# ============================================================================


class SleepRecorder:
    """Stands in for asyncio.sleep and records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
async def transport(sleep_recorder: SleepRecorder):
    """Transport with three attempts and recorded (instant) backoff."""
    transport = RetryingTransport(max_retries=3, timeout=5.0, sleep=sleep_recorder)
    yield transport
    await transport.close()


@pytest.fixture
async def single_shot_transport():
    """Transport that never retries."""
    transport = RetryingTransport(max_retries=1, timeout=5.0)
    yield transport
    await transport.close()


# ============================================================================
# Mock Response Helpers
# ============================================================================


def mock_json_response(data: dict[str, Any], status_code: int = 200) -> Response:
    """Create a mock JSON response."""
    return Response(
        status_code=status_code,
        json=data,
        headers={"Content-Type": "application/json"},
    )


def mock_html_response(html: str, status_code: int = 200) -> Response:
    """Create a mock HTML response."""
    return Response(
        status_code=status_code,
        text=html,
        headers={"Content-Type": "text/html; charset=utf-8"},
    )


@pytest.fixture
def mock_responses():
    """Provide helper functions for creating mock responses."""
    return {
        "json": mock_json_response,
        "html": mock_html_response,
    }


# ============================================================================
# Provider API Response Fixtures
# ============================================================================


@pytest.fixture
def snaptik_response() -> dict[str, Any]:
    """Sample Snaptik video-details response."""
    return {
        "video": {
            "url": "https://cdn.snaptik.example/v/123.mp4",
            "description": "dance challenge #fyp",
        },
        "author": {"name": "creator"},
    }


@pytest.fixture
def tikwm_response() -> dict[str, Any]:
    """Sample TikWM API response."""
    return {
        "code": 0,
        "msg": "success",
        "data": {
            "id": "7234567890123456789",
            "title": "dance challenge #fyp",
            "play": "https://cdn.tikwm.example/video/123.mp4",
            "author": {"unique_id": "creator", "nickname": "Creator"},
        },
    }


@pytest.fixture
def savett_response() -> dict[str, Any]:
    """Sample SaveTT ajax search response."""
    return {
        "links": [
            {"url": "https://cdn.savett.example/123.mp4", "type": "no-watermark"},
            {"url": "https://cdn.savett.example/123-wm.mp4", "type": "watermark"},
        ],
        "author": "creator",
        "desc": "dance challenge",
    }


@pytest.fixture
def video_page_html() -> str:
    """Video page markup with an embedded <video> element."""
    return """
    <html>
      <head>
        <meta property="og:author" content="creator">
        <meta property="og:description" content="dance challenge">
      </head>
      <body>
        <video autoplay>
          <source src="https://cdn.page.example/123.mp4" type="video/mp4">
          <source src="https://cdn.page.example/123.webm" type="video/webm">
        </video>
      </body>
    </html>
    """
