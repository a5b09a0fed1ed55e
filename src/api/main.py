"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import asyncio
import logging
import random
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from src.adapters.sessions.memory import InMemorySessionRegistry
from src.adapters.timers.asyncio_scheduler import AsyncioScheduler
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Registration form sessions - Drive the sign-up form through input events",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Binds the timer service to the running event loop
    - Creates the in-memory session registry on startup
    - Closes every session (and its pending timers) on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")

    scheduler = AsyncioScheduler(asyncio.get_running_loop())
    rng = random.Random(settings.random_seed)
    registry = InMemorySessionRegistry(
        scheduler=scheduler,
        rng=rng,
        timing=settings.timing(),
        max_sessions=settings.max_sessions,
    )

    # Store registry in app state for dependency injection
    app.state.registry = registry

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    registry.close()
    logger.info("Form sessions closed")


app = FastAPI(
    title="signupflow",
    description="Registration form engine - Validation, availability checks, and simulated submission",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str | int]:
    """
    Health check endpoint.

    Returns 200 OK with the number of live form sessions.
    """
    registry = request.app.state.registry
    return {"status": "healthy", "sessions": len(registry)}
