"""Pydantic request and response models for the REST API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


# --- Config / seed ---

class ConfigResponse(BaseModel):
    world_seed: int
    world_name: str
    region_count: int
    min_locations_per_region: int
    max_locations_per_region: int
    unique_name_max_attempts: int
    nickname_chance: float
    encounter_base_chance: float
    max_encounter_chance: float
    quest_level_scaling: float
    structure_damage_chance: float
    cached_locations: list[str] = []
    version: str


class SeedRequest(BaseModel):
    seed: int = Field(..., description="New world seed (folded into unsigned 32-bit)")


class SeedResponse(BaseModel):
    status: str
    message: str
    world_seed: int


# --- World ---

class WorldRequest(BaseModel):
    seed: int | None = None
    world_name: str | None = None
    region_count: int = Field(3, ge=1, le=20)
    min_locations: int = Field(3, ge=1, le=30)
    max_locations: int = Field(6, ge=1, le=30)

    @model_validator(mode="after")
    def _check_range(self) -> WorldRequest:
        if self.min_locations > self.max_locations:
            raise ValueError("min_locations must not exceed max_locations")
        return self


# --- Locations ---

class LocationContentRequest(BaseModel):
    name: str
    type: str | None = None
    tags: list[str] = []
    npc_background: int | None = Field(None, ge=0, le=50)
    npc_notable: int | None = Field(None, ge=0, le=50)
    item_count: int | None = Field(None, ge=0, le=100)

    @model_validator(mode="after")
    def _check_counts(self) -> LocationContentRequest:
        if (self.npc_background is None) != (self.npc_notable is None):
            raise ValueError("npc_background and npc_notable must be given together")
        return self


class StructureStateResponse(BaseModel):
    location_id: str
    hex_key: str
    state: str


# --- Names / encounters ---

class NamesResponse(BaseModel):
    origin: str
    seed: int
    names: list[dict[str, Any]]


class EncounterRequest(BaseModel):
    seed: int
    player_level: int = Field(1, ge=1, le=100)
    game_hour: float = Field(12.0, ge=0.0, lt=24.0)
    biome: str | None = None
    location_type: str | None = None
    location_name: str | None = None
    region_name: str | None = None
    min_difficulty: int = Field(1, ge=1, le=10)
    max_difficulty: int = Field(10, ge=1, le=10)
    faction_tensions: dict[str, float] = {}
    active_events: list[str] = []


class EncounterResponse(BaseModel):
    encounter: dict[str, Any] | None = None
    encounter_chance: float


# --- Loot / schedules ---

class LootRequest(BaseModel):
    seed: int
    table_id: str
    level: int = Field(1, ge=1, le=100)


class LootResponse(BaseModel):
    table_id: str
    seed: int
    drops: list[dict[str, Any]]


class ScheduleResponse(BaseModel):
    role: str
    schedule_id: str
    hours: dict[str, int]
    current: dict[str, Any] | None = None
