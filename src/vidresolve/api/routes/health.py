"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from vidresolve import __version__
from vidresolve.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check that the engine is running and which providers are registered.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        return HealthResponse(status="unhealthy", version=__version__)

    return HealthResponse(
        status="healthy",
        version=__version__,
        providers=engine.providers,
        cache_entries=len(engine.cache),
    )
