"""Push-based lifecycle notifications for engine subscribers.

Subscribers are plain callables receiving an `EngineEvent`. The engine
does not know who is listening; a UI, a logger or a test can attach.
A failing subscriber is logged and never affects resolution.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import EngineEventType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineEvent:
    """A lifecycle moment of one resolve call."""

    type: EngineEventType
    reference: str | None = None
    message: str | None = None
    candidate: ResolutionCandidate | None = None
    elapsed_ms: float | None = None
    level: str = "info"
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


EventCallback = Callable[[EngineEvent], None]


class EngineEvents:
    """Registry of event subscribers."""

    def __init__(self) -> None:
        self._subscribers: list[EventCallback] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: EventCallback) -> Callable[[], None]:
        """Attach a subscriber. Returns a function that detaches it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, event: EngineEvent) -> None:
        """Deliver an event to every subscriber."""
        with self._lock:
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                logger.exception(f"Event subscriber failed on {event.type.value}")

    # Convenience emitters

    def started(self, reference: str) -> None:
        self.emit(EngineEvent(EngineEventType.STARTED, reference=reference))

    def progressed(self, reference: str, message: str) -> None:
        self.emit(EngineEvent(EngineEventType.PROGRESSED, reference=reference, message=message))

    def succeeded(self, reference: str, candidate: ResolutionCandidate, elapsed_ms: float) -> None:
        self.emit(
            EngineEvent(
                EngineEventType.SUCCEEDED,
                reference=reference,
                candidate=candidate,
                elapsed_ms=elapsed_ms,
            )
        )

    def failed(self, reference: str, reason: str) -> None:
        self.emit(
            EngineEvent(EngineEventType.FAILED, reference=reference, message=reason, level="error")
        )

    def debug_logged(self, message: str, level: str = "info") -> None:
        self.emit(EngineEvent(EngineEventType.DEBUG_LOGGED, message=message, level=level))
