"""Tests for the retrying transport."""

from __future__ import annotations

import random

import httpx
import pytest
import respx
from httpx import Response

from vidresolve.core.exceptions import TransportError
from vidresolve.transport.retry import RetryingTransport, TransportRequest

URL = "https://api.provider.example/info"


# ============================================================================
# Retry and Backoff Tests
# ============================================================================


class TestRetryBehavior:
    """Tests for attempt counting and backoff."""

    async def test_always_failing_makes_exactly_max_attempts(
        self, transport: RetryingTransport, sleep_recorder, respx_mock: respx.MockRouter
    ):
        """Three attempts, sleeping 1s then 2s, surfacing the third error."""
        route = respx_mock.get(URL).mock(
            side_effect=[
                httpx.ConnectError("first failure"),
                httpx.ConnectError("second failure"),
                httpx.ConnectError("third failure"),
            ]
        )

        with pytest.raises(TransportError) as exc_info:
            await transport.fetch(TransportRequest("GET", URL))

        assert route.call_count == 3
        assert sleep_recorder.delays == pytest.approx([1.0, 2.0])
        assert exc_info.value.message == "third failure"
        assert str(exc_info.value.last_error) == "third failure"
        assert exc_info.value.attempts == 3
        assert exc_info.value.url == URL

    async def test_last_error_is_chained(
        self, transport: RetryingTransport, respx_mock: respx.MockRouter
    ):
        """The terminal error should be the exception's cause."""
        respx_mock.get(URL).mock(side_effect=httpx.ConnectError("down"))

        with pytest.raises(TransportError) as exc_info:
            await transport.fetch(TransportRequest("GET", URL))

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_success_after_failure(
        self, transport: RetryingTransport, sleep_recorder, respx_mock: respx.MockRouter
    ):
        """A later successful attempt should be returned."""
        route = respx_mock.get(URL).mock(
            side_effect=[
                httpx.ConnectError("flaky"),
                Response(200, json={"ok": True}),
            ]
        )

        response = await transport.fetch(TransportRequest("GET", URL))

        assert response.json() == {"ok": True}
        assert route.call_count == 2
        assert sleep_recorder.delays == [1.0]

    async def test_error_status_is_retried(
        self, transport: RetryingTransport, respx_mock: respx.MockRouter
    ):
        """Non-2xx responses count as failed attempts."""
        route = respx_mock.get(URL).mock(
            side_effect=[
                Response(503),
                Response(200, json={"ok": True}),
            ]
        )

        response = await transport.fetch(TransportRequest("GET", URL))

        assert response.status_code == 200
        assert route.call_count == 2

    async def test_error_status_exhausts_retries(
        self, transport: RetryingTransport, respx_mock: respx.MockRouter
    ):
        """Persistent error status should surface as TransportError."""
        respx_mock.get(URL).mock(return_value=Response(404))

        with pytest.raises(TransportError) as exc_info:
            await transport.fetch(TransportRequest("GET", URL))

        assert isinstance(exc_info.value.last_error, httpx.HTTPStatusError)
        assert "404" in exc_info.value.message

    async def test_single_attempt_never_sleeps(self, sleep_recorder, respx_mock: respx.MockRouter):
        """max_retries=1 should fail without backoff."""
        transport = RetryingTransport(max_retries=1, sleep=sleep_recorder)
        route = respx_mock.get(URL).mock(side_effect=httpx.ConnectError("down"))

        with pytest.raises(TransportError):
            await transport.fetch(TransportRequest("GET", URL))

        await transport.close()
        assert route.call_count == 1
        assert sleep_recorder.delays == []

    async def test_five_attempts_backoff_doubles(self, sleep_recorder, respx_mock: respx.MockRouter):
        """Backoff should double with no cap or jitter."""
        transport = RetryingTransport(max_retries=5, sleep=sleep_recorder)
        respx_mock.get(URL).mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(TransportError):
            await transport.fetch(TransportRequest("GET", URL))

        await transport.close()
        assert sleep_recorder.delays == [1.0, 2.0, 4.0, 8.0]

    async def test_request_overrides_attempts(
        self, transport: RetryingTransport, sleep_recorder, respx_mock: respx.MockRouter
    ):
        """A per-request attempt count replaces the transport default."""
        route = respx_mock.get(URL).mock(side_effect=httpx.ConnectError("down"))

        with pytest.raises(TransportError) as exc_info:
            await transport.fetch(TransportRequest("GET", URL, max_retries=2))

        assert route.call_count == 2
        assert sleep_recorder.delays == [1.0]
        assert exc_info.value.attempts == 2

    async def test_invalid_url_not_retried(self, transport: RetryingTransport, sleep_recorder):
        """A malformed URL surfaces as TransportError after one attempt."""
        with pytest.raises(TransportError) as exc_info:
            await transport.fetch(TransportRequest("HEAD", "https://vt.tiktok.com:abc/"))

        assert isinstance(exc_info.value.last_error, httpx.InvalidURL)
        assert exc_info.value.attempts == 1
        assert sleep_recorder.delays == []

    def test_max_retries_floor(self):
        """At least one attempt is always made."""
        assert RetryingTransport(max_retries=0).max_retries == 1

    @pytest.mark.parametrize("attempt,expected", [(0, 1.0), (1, 2.0), (2, 4.0), (5, 32.0)])
    def test_backoff_delay(self, attempt: int, expected: float):
        """Delay after attempt i should be 2**i seconds."""
        assert RetryingTransport.backoff_delay(attempt) == expected


# ============================================================================
# Header Tests
# ============================================================================


class TestHeaders:
    """Tests for client identity and header merging."""

    async def test_user_agent_from_pool(
        self, transport: RetryingTransport, respx_mock: respx.MockRouter
    ):
        """Each attempt should carry a User-Agent from the fixed pool."""
        route = respx_mock.get(URL).mock(
            side_effect=[httpx.ConnectError("x"), httpx.ConnectError("y"), Response(200)]
        )

        await transport.fetch(TransportRequest("GET", URL))

        for call in route.calls:
            assert call.request.headers["User-Agent"] in RetryingTransport.USER_AGENTS

    def test_random_user_agent_uses_rng(self):
        """User-Agent choice should come from the injected generator."""
        first = RetryingTransport(rng=random.Random(42))
        second = RetryingTransport(rng=random.Random(42))

        picks_a = [first.random_user_agent() for _ in range(10)]
        picks_b = [second.random_user_agent() for _ in range(10)]

        assert picks_a == picks_b
        assert set(picks_a) <= set(RetryingTransport.USER_AGENTS)

    def test_caller_headers_win(self):
        """Request headers should override identity and defaults."""
        transport = RetryingTransport(extra_headers={"X-Engine": "1", "Pragma": "engine"})

        headers = transport.build_headers({"User-Agent": "custom/1.0", "X-Engine": "2"})

        assert headers["User-Agent"] == "custom/1.0"
        assert headers["X-Engine"] == "2"
        assert headers["Pragma"] == "engine"
        assert headers["Accept-Language"] == "en-US,en;q=0.9"

    async def test_request_headers_sent(
        self, transport: RetryingTransport, respx_mock: respx.MockRouter
    ):
        """Merged headers should reach the wire."""
        route = respx_mock.post(URL).mock(return_value=Response(200))

        await transport.fetch(
            TransportRequest("POST", URL, headers={"X-Custom": "yes"}, json={"url": "u"})
        )

        request = route.calls.last.request
        assert request.headers["X-Custom"] == "yes"
        assert request.headers["Cache-Control"] == "no-cache"


# ============================================================================
# Lifecycle Tests
# ============================================================================


class TestLifecycle:
    """Tests for client management."""

    async def test_close_is_idempotent(self, respx_mock: respx.MockRouter):
        """Closing twice should not fail."""
        respx_mock.get(URL).mock(return_value=Response(200))
        transport = RetryingTransport()
        await transport.fetch(TransportRequest("GET", URL))

        await transport.close()
        await transport.close()

    async def test_async_context_manager(self, respx_mock: respx.MockRouter):
        """Transport should work as async context manager."""
        respx_mock.get(URL).mock(return_value=Response(200, json={"ok": True}))

        async with RetryingTransport() as transport:
            response = await transport.fetch(TransportRequest("GET", URL))

        assert response.json() == {"ok": True}
        assert transport._client is None
