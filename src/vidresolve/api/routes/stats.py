"""Statistics endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from vidresolve.api.dependencies import Engine
from vidresolve.api.schemas import StatsResponse

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get(
    "",
    response_model=StatsResponse,
    operation_id="getStats",
    summary="Engine statistics",
    description="Per-provider counters, success rate, cache efficiency and recent errors.",
)
async def get_stats(engine: Engine) -> StatsResponse:
    return StatsResponse.model_validate(engine.snapshot().model_dump())


@router.post(
    "/reset",
    response_model=StatsResponse,
    operation_id="resetStats",
    summary="Reset statistics",
)
async def reset_stats(engine: Engine) -> StatsResponse:
    """Clear every counter and return the fresh snapshot."""
    engine.reset_stats()
    return StatsResponse.model_validate(engine.snapshot().model_dump())
