"""Versioned API route modules."""

from fastapi import APIRouter

from procgen.api.routes.config import router as config_router
from procgen.api.routes.content import router as content_router
from procgen.api.routes.locations import router as locations_router
from procgen.api.routes.metadata import router as metadata_router
from procgen.api.routes.world import router as world_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(config_router, tags=["Config"])
api_router.include_router(world_router, tags=["World"])
api_router.include_router(locations_router, tags=["Locations"])
api_router.include_router(content_router, tags=["Content"])
api_router.include_router(metadata_router)

__all__ = ["api_router"]
