"""In-memory result caching."""

from .keys import CacheKeys
from .memory import CacheEntry, ResultCache

__all__ = [
    "CacheEntry",
    "CacheKeys",
    "ResultCache",
]
