"""
Main FastAPI application entry point.

Builds the FastAPI application: middleware (trace, admission control),
RFC 7807 exception handlers, resource routers and the health endpoint.

The lifespan owns the long-lived collaborators built by the container:
on shutdown it drains fire-and-forget sends and closes the Redis pool.

Usage:
    uvicorn exitplans.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from exitplans.core.config import settings
from exitplans.presentation.api.middleware import RateLimitMiddleware, TraceMiddleware
from exitplans.presentation.routers import api_router
from exitplans.presentation.routers.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Log capability flags
    - Shutdown: Drain in-flight dispatches, close the Redis pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from exitplans.core.container import (
        get_capabilities,
        get_dispatcher,
        get_logger,
        get_redis_client,
    )

    logger = get_logger()
    logger.info(
        "Application starting",
        environment=settings.environment.value,
        **get_capabilities().to_dict(),
    )

    yield

    await get_dispatcher().drain()

    redis_client = get_redis_client()
    if redis_client is not None:
        await redis_client.aclose()

    logger.info("Application stopped")


def create_app() -> FastAPI:
    """Build a configured FastAPI application.

    Middleware order matters: Starlette runs the last added middleware
    first, so TraceMiddleware wraps RateLimitMiddleware and 429 responses
    carry X-Trace-Id too.

    Returns:
        FastAPI: Application with middleware, handlers and routers.
    """
    application = FastAPI(
        title=settings.app_name,
        description="Idea validation, coaching and job tracking for ExitPlans",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Admission control (per-IP sliding window)
    application.add_middleware(RateLimitMiddleware)

    # Request correlation (outermost)
    application.add_middleware(TraceMiddleware)

    # Global exception handlers (RFC 7807 error responses)
    register_exception_handlers(application)

    application.include_router(api_router)

    @application.get("/health", tags=["System"])
    async def health() -> dict[str, Any]:
        """
        Health check endpoint for monitoring and load balancers.

        Returns:
            dict: Health status and capability flags.
        """
        from exitplans.core.container import get_capabilities

        return {"status": "healthy", "capabilities": get_capabilities().to_dict()}

    return application


app = create_app()
