"""GET /api/v1/config and POST /api/v1/seed: configuration and the active world seed."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from procgen import __version__
from procgen.api.dependencies import get_generation_service
from procgen.api.schemas import ConfigResponse, SeedRequest, SeedResponse
from procgen.api.service import GenerationService

router = APIRouter()


@router.get("/config", response_model=ConfigResponse)
def get_config(
    service: GenerationService = Depends(get_generation_service),
) -> ConfigResponse:
    cfg = service.config
    return ConfigResponse(
        world_seed=service.world_seed,
        world_name=cfg.world_name,
        region_count=cfg.region_count,
        min_locations_per_region=cfg.min_locations_per_region,
        max_locations_per_region=cfg.max_locations_per_region,
        unique_name_max_attempts=cfg.unique_name_max_attempts,
        nickname_chance=cfg.nickname_chance,
        encounter_base_chance=cfg.encounter_base_chance,
        max_encounter_chance=cfg.max_encounter_chance,
        quest_level_scaling=cfg.quest_level_scaling,
        structure_damage_chance=cfg.structure_damage_chance,
        cached_locations=service.cached_locations,
        version=__version__,
    )


@router.post("/seed", response_model=SeedResponse)
def set_seed(
    body: SeedRequest,
    service: GenerationService = Depends(get_generation_service),
) -> SeedResponse:
    if not service.reseed(body.seed):
        return SeedResponse(status="noop", message="Seed unchanged, cache kept.", world_seed=service.world_seed)
    return SeedResponse(status="ok", message="World seed changed, location cache cleared.", world_seed=service.world_seed)
