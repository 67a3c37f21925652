"""Cache key builders for consistent key formatting."""

import hashlib


class CacheKeys:
    """Cache key builders for consistent key formatting."""

    PREFIX = "vidresolve"

    @classmethod
    def resolution(cls, reference: str) -> str:
        """Key for a resolved reference.

        The reference is hashed as given; callers normalize it first.
        """
        hash_value = hashlib.md5(reference.encode()).hexdigest()
        return f"{cls.PREFIX}:resolve:{hash_value}"
