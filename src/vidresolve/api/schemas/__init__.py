"""API request and response schemas."""

from vidresolve.api.schemas.base import APIBaseSchema, APIError, ErrorDetail
from vidresolve.api.schemas.requests import ResolveRequest
from vidresolve.api.schemas.responses import (
    ErrorEventResponse,
    HealthResponse,
    ProviderStatsResponse,
    ResolveResponse,
    StatsResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorDetail",
    # Requests
    "ResolveRequest",
    # Responses
    "ErrorEventResponse",
    "HealthResponse",
    "ProviderStatsResponse",
    "ResolveResponse",
    "StatsResponse",
]
