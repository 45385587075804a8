"""POST /api/v1/world: generate a complete world."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from procgen.api.dependencies import generation_errors, get_generation_service
from procgen.api.schemas import WorldRequest
from procgen.api.service import GenerationService

router = APIRouter()


@router.post("/world")
def generate_world(
    body: WorldRequest,
    service: GenerationService = Depends(get_generation_service),
) -> dict[str, Any]:
    with generation_errors():
        world = service.generate_world(
            seed=body.seed,
            world_name=body.world_name,
            region_count=body.region_count,
            locations_per_region=(body.min_locations, body.max_locations),
        )
    return world.to_dict()
