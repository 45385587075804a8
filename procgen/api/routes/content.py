"""Standalone content endpoints: name batches, random encounters, loot rolls and NPC schedules."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from procgen.api.dependencies import generation_errors, get_generation_service
from procgen.api.schemas import (
    EncounterRequest,
    EncounterResponse,
    LootRequest,
    LootResponse,
    NamesResponse,
    ScheduleResponse,
)
from procgen.api.service import GenerationService
from procgen.core.context import GenerationContext
from procgen.core.enums import Gender
from procgen.generators.schedules import activity_at, activity_summary

router = APIRouter()


@router.get("/names", response_model=NamesResponse)
def names(
    origin: str = Query("frontier_anglo", description="Name pool origin"),
    seed: int = Query(42),
    count: int = Query(10, ge=1, le=200),
    gender: Gender | None = Query(None),
    service: GenerationService = Depends(get_generation_service),
) -> NamesResponse:
    with generation_errors():
        generated = service.names(origin, seed, count, gender)
    return NamesResponse(origin=origin, seed=seed, names=[n.to_dict() for n in generated])


@router.post("/encounters/random", response_model=EncounterResponse)
def random_encounter(
    body: EncounterRequest,
    service: GenerationService = Depends(get_generation_service),
) -> EncounterResponse:
    context = GenerationContext(
        world_seed=service.world_seed,
        location_name=body.location_name,
        region_name=body.region_name,
        player_level=body.player_level,
        game_hour=body.game_hour,
        faction_tensions=dict(body.faction_tensions),
        active_events=tuple(body.active_events),
    )
    with generation_errors():
        encounter = service.random_encounter(
            body.seed,
            context,
            biome=body.biome,
            location_type=body.location_type,
            min_difficulty=body.min_difficulty,
            max_difficulty=body.max_difficulty,
        )
    return EncounterResponse(
        encounter=encounter.to_dict() if encounter is not None else None,
        encounter_chance=service.encounter_chance(context),
    )


@router.post("/loot", response_model=LootResponse)
def roll_loot(
    body: LootRequest,
    service: GenerationService = Depends(get_generation_service),
) -> LootResponse:
    with generation_errors():
        drops = service.loot(body.seed, body.table_id, body.level)
    return LootResponse(table_id=body.table_id, seed=body.seed, drops=[d.to_dict() for d in drops])


@router.get("/schedules/{role}", response_model=ScheduleResponse)
def npc_schedule(
    role: str,
    hour: int | None = Query(None, ge=0, le=23, description="Report the activity at this hour"),
    service: GenerationService = Depends(get_generation_service),
) -> ScheduleResponse:
    with generation_errors():
        schedule = service.schedule(role)
    if schedule is None:
        raise HTTPException(status_code=404, detail=f"No schedule for role {role!r}.")
    current = None
    if hour is not None:
        entry = activity_at(schedule, hour)
        if entry is not None:
            current = {
                "start_hour": entry.start_hour,
                "end_hour": entry.end_hour,
                "activity": entry.activity.value,
                "location_marker": entry.location_marker,
                "dialogue_override": entry.dialogue_override,
            }
    return ScheduleResponse(
        role=role, schedule_id=schedule.id, hours=activity_summary(schedule), current=current,
    )
