"""Resolution endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException

from vidresolve.api.dependencies import Engine
from vidresolve.api.schemas import APIError, ErrorDetail, ResolveRequest, ResolveResponse
from vidresolve.core.exceptions import AllProvidersFailedError, InvalidReferenceError

router = APIRouter(prefix="/resolve", tags=["resolve"])


def _error(status_code: int, detail: ErrorDetail) -> HTTPException:
    return HTTPException(status_code=status_code, detail=detail.model_dump(exclude_none=True))


@router.post(
    "",
    response_model=ResolveResponse,
    operation_id="resolveMedia",
    summary="Resolve a video reference",
    description="Query every provider concurrently and return the best playable media URL.",
    responses={
        422: {"model": APIError, "description": "Reference has no recognizable video id"},
        502: {"model": APIError, "description": "No provider produced a result"},
    },
)
async def resolve_media(request: ResolveRequest, engine: Engine) -> ResolveResponse:
    """Resolve a reference through the engine."""
    start = time.monotonic()

    try:
        media = await engine.resolve(request.reference)
    except InvalidReferenceError as e:
        raise _error(422, ErrorDetail(code="invalid_reference", message=e.message)) from e
    except AllProvidersFailedError as e:
        raise _error(
            502,
            ErrorDetail(
                code="all_providers_failed",
                message="All providers failed",
                details={"reasons": e.reasons},
            ),
        ) from e

    return ResolveResponse(
        media_url=media.media_url,
        author=media.author,
        description=media.description,
        quality=media.quality,
        provider=media.provider,
        resolution_time_ms=(time.monotonic() - start) * 1000,
    )
