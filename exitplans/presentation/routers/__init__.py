"""API routers.

Usage:
    from exitplans.presentation.routers import api_router

    app.include_router(api_router)
"""

from fastapi import APIRouter

from exitplans.presentation.routers.coaching import router as coaching_router
from exitplans.presentation.routers.jobs import router as jobs_router
from exitplans.presentation.routers.validation import router as validation_router
from exitplans.presentation.routers.webhooks import router as webhooks_router

api_router = APIRouter()
api_router.include_router(validation_router)
api_router.include_router(jobs_router)
api_router.include_router(webhooks_router)
api_router.include_router(coaching_router)

__all__ = ["api_router"]
