"""Network transport for provider calls."""

from vidresolve.transport.retry import RetryingTransport, TransportRequest

__all__ = [
    "RetryingTransport",
    "TransportRequest",
]
