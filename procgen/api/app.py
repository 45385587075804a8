"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from procgen import __version__
from procgen.api.dependencies import set_generation_service
from procgen.api.routes import api_router
from procgen.api.service import GenerationService
from procgen.config import GenerationConfig
from procgen.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GenerationConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GenerationConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        service = GenerationService(_config)
        set_generation_service(service)
        logger.info("API server started, world seed %d.", service.world_seed)
        yield
        set_generation_service(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Procedural Content Generator",
        description=(
            "Deterministic, seed-driven content for a frontier RPG.\n\n"
            "## API Groups\n\n"
            "- **Config**: active configuration and world seed\n"
            "- **World**: whole-world generation\n"
            "- **Locations**: cached per-location NPCs, items, dialogue and shops\n"
            "- **Content**: standalone names and encounters\n"
            "- **Metadata**: registered template ids\n"
        ),
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Config", "description": "Generation configuration; POST /seed re-seeds the location cache."},
            {"name": "World", "description": "Generate regions, settlements, residents and quests from one seed."},
            {"name": "Locations", "description": "Content for host-defined locations, generated once per world seed and cached."},
            {"name": "Content", "description": "Name batches and random encounters for a given seed and context."},
            {"name": "Metadata", "description": "Ids of every registered template, grouped by kind."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
