"""Generation context: the only channel through which callers feed game state in.

Generators never read ambient game state; time of day, player level,
faction tensions and the reference entities a quest may bind to all
arrive through an immutable ``GenerationContext``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import field

from pydantic.dataclasses import dataclass as pydantic_dataclass

from procgen.core.enums import TimeOfDay


# ---------------------------------------------------------------------------
# Reference records (concrete targets available to quests)
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class NPCRef:
    id: str
    name: str
    role: str = ""
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class ItemRef:
    id: str
    name: str
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class LocationRef:
    """A location known to the host; also the input to the location manager."""

    id: str
    name: str
    type: str | None = None
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class EnemyRef:
    id: str
    name: str
    tags: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class GenerationContext:
    world_seed: int
    region_id: str | None = None
    location_id: str | None = None
    region_name: str | None = None
    location_name: str | None = None
    player_level: int = 1
    game_hour: float = 12.0
    faction_tensions: dict[str, float] = field(default_factory=dict)
    active_events: tuple[str, ...] = ()
    context_tags: tuple[str, ...] = ()
    available_npcs: tuple[NPCRef, ...] = ()
    available_items: tuple[ItemRef, ...] = ()
    available_locations: tuple[LocationRef, ...] = ()
    available_enemies: tuple[EnemyRef, ...] = ()

    def with_overrides(self, **changes) -> GenerationContext:
        """Copy with some fields replaced (the original is left untouched)."""
        return dataclasses.replace(self, **changes)

    @property
    def time_of_day(self) -> TimeOfDay:
        return TimeOfDay.from_hour(self.game_hour)

    def location_label(self, default: str) -> str:
        return self.location_name or self.location_id or default

    def region_label(self, default: str) -> str:
        return self.region_name or self.region_id or default
