"""API route modules."""

from vidresolve.api.routes.health import router as health_router
from vidresolve.api.routes.resolve import router as resolve_router
from vidresolve.api.routes.stats import router as stats_router

__all__ = [
    "health_router",
    "resolve_router",
    "stats_router",
]
