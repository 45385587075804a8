"""Procedural location content: generate once per (world seed, location id), then read from cache."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from procgen.api.dependencies import generation_errors, get_generation_service
from procgen.api.schemas import LocationContentRequest, StructureStateResponse
from procgen.api.service import GenerationService
from procgen.core.context import LocationRef

router = APIRouter(prefix="/locations")


@router.post("/{location_id}/content")
def location_content(
    location_id: str,
    body: LocationContentRequest,
    service: GenerationService = Depends(get_generation_service),
) -> dict[str, Any]:
    ref = LocationRef(id=location_id, name=body.name, type=body.type, tags=tuple(body.tags))
    npc_counts = None
    if body.npc_background is not None and body.npc_notable is not None:
        npc_counts = (body.npc_background, body.npc_notable)
    with generation_errors():
        content = service.location_content(ref, npc_counts=npc_counts, item_count=body.item_count)
    return content.to_dict()


@router.get("/{location_id}/npcs")
def location_npcs(
    location_id: str,
    service: GenerationService = Depends(get_generation_service),
) -> list[dict[str, Any]]:
    return [npc.to_dict() for npc in service.location_npcs(location_id)]


@router.get("/{location_id}/items")
def location_items(
    location_id: str,
    service: GenerationService = Depends(get_generation_service),
) -> list[dict[str, Any]]:
    return [item.to_dict() for item in service.location_items(location_id)]


@router.get("/{location_id}/dialogue/{npc_id}")
def npc_dialogue(
    location_id: str,
    npc_id: str,
    service: GenerationService = Depends(get_generation_service),
) -> dict[str, Any]:
    tree = service.dialogue(location_id, npc_id)
    if tree is None:
        raise HTTPException(status_code=404, detail=f"No dialogue for NPC {npc_id!r} at {location_id!r}.")
    return tree.to_dict()


@router.get("/{location_id}/shops/{npc_id}")
def npc_shop(
    location_id: str,
    npc_id: str,
    service: GenerationService = Depends(get_generation_service),
) -> dict[str, Any]:
    shop = service.shop(location_id, npc_id)
    if shop is None:
        raise HTTPException(status_code=404, detail=f"No shop for NPC {npc_id!r} at {location_id!r}.")
    return shop.to_dict()


@router.get("/{location_id}/structures/{hex_key}", response_model=StructureStateResponse)
def structure_state(
    location_id: str,
    hex_key: str,
    service: GenerationService = Depends(get_generation_service),
) -> StructureStateResponse:
    state = service.structure_state(location_id, hex_key)
    return StructureStateResponse(location_id=location_id, hex_key=hex_key, state=state)
