"""Shared schema configuration and the error envelope."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ErrorCode = Literal["invalid_reference", "all_providers_failed"]


class APIBaseSchema(BaseModel):
    """
    Base schema for all API models.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorDetail(APIBaseSchema):
    """Machine-readable reason a resolve request was refused."""

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None


class APIError(APIBaseSchema):
    """Body of a 4xx/5xx resolve response, as raised through HTTPException."""

    detail: ErrorDetail
