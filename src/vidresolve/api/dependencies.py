"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from vidresolve.engine import ResolutionEngine


def get_engine(request: Request) -> ResolutionEngine:
    """Get the resolution engine from app state."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Engine not initialized")
    return engine


# Type alias for dependency injection
Engine = Annotated[ResolutionEngine, Depends(get_engine)]
