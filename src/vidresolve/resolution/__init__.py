"""Resolution layer: provider adapters, fan-out and arbitration."""

from vidresolve.resolution.arbiter import QualityArbiter
from vidresolve.resolution.base import AbstractProviderAdapter
from vidresolve.resolution.fanout import FanoutResolver, FanoutResult, ProviderOutcome
from vidresolve.resolution.registry import ProviderRegistry

__all__ = [
    # Base
    "AbstractProviderAdapter",
    # Fan-out
    "FanoutResolver",
    "FanoutResult",
    "ProviderOutcome",
    # Arbitration
    "QualityArbiter",
    # Registry
    "ProviderRegistry",
]
