"""Request schemas for API endpoints."""

from __future__ import annotations

from pydantic import Field

from vidresolve.api.schemas.base import APIBaseSchema


class ResolveRequest(APIBaseSchema):
    """Request to resolve a video reference."""

    reference: str = Field(
        ...,
        min_length=1,
        max_length=2048,
        description="Video URL to resolve",
        examples=["https://www.tiktok.com/@user/video/7234567890123456789"],
    )
