"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vidresolve import __version__
from vidresolve.api.routes import health_router, resolve_router, stats_router
from vidresolve.config import EngineConfig, get_settings
from vidresolve.engine import ResolutionEngine

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the engine from settings, start its sweeper, and close it on shutdown."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    logger.info("Initializing resolution engine...")
    engine = ResolutionEngine(EngineConfig.from_settings(settings))
    engine.start()
    app.state.engine = engine
    logger.info(f"Application startup complete ({len(engine.providers)} providers)")

    yield

    await engine.close()
    app.state.engine = None
    logger.info("Resolution engine closed")


def create_app(
    *,
    title: str = "vidresolve API",
    description: str = "Multi-provider short-form video resolution API",
    version: str = __version__,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create the HTTP app around a lifespan-owned ResolutionEngine.

    `cors_origins` defaults to the configured origins. Every router is
    mounted under API_PREFIX.
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    if cors_origins is None:
        cors_origins = get_settings().cors_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (health_router, resolve_router, stats_router):
        app.include_router(router, prefix=API_PREFIX)

    return app
