"""Provider and resolution statistics."""

from vidresolve.metrics.registry import MetricsRegistry

__all__ = [
    "MetricsRegistry",
]
