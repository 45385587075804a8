"""GenerationService: the registry and location manager behind the HTTP API.

Generators are pure, but the location manager caches content per world
seed, so every call that touches it is serialized on one lock.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from procgen.core.context import GenerationContext, LocationRef
from procgen.core.enums import Gender
from procgen.data import build_default_registry
from procgen.generators.encounters import EncounterGenerator
from procgen.generators.items import ItemGenerator
from procgen.generators.names import NameGenerator
from procgen.generators.world import WorldGenerator
from procgen.systems.location_manager import ProceduralLocationManager
from procgen.systems.rng import SeededRandom

if TYPE_CHECKING:
    from procgen.config import GenerationConfig
    from procgen.core.models import (
        DialogueTree,
        GeneratedEncounter,
        GeneratedName,
        GeneratedWorld,
        LocationContent,
        LootDrop,
        ProceduralNPC,
        ShopInventory,
        WorldItemSpawn,
    )
    from procgen.core.registry import TemplateRegistry
    from procgen.core.templates import ScheduleTemplate

logger = logging.getLogger(__name__)


class GenerationService:
    """Thread-safe facade over one registry and one location manager."""

    def __init__(self, config: GenerationConfig, registry: TemplateRegistry | None = None) -> None:
        self.config = config
        self.registry = registry if registry is not None else build_default_registry()
        self._lock = threading.Lock()
        self._locations = ProceduralLocationManager(self.registry, config.world_seed, config)
        self._names = NameGenerator(self.registry, config)
        self._encounters = EncounterGenerator(self.registry, config)
        self._items = ItemGenerator(self.registry, config)

    # -- world seed --

    @property
    def world_seed(self) -> int:
        return self._locations.world_seed

    @property
    def cached_locations(self) -> list[str]:
        with self._lock:
            return self._locations.cached_location_ids

    def reseed(self, seed: int) -> bool:
        """Re-initialize the location manager; True when the seed actually changed."""
        with self._lock:
            previous = self._locations.world_seed
            self._locations.initialize(seed)
            changed = previous != self._locations.world_seed
        if changed:
            logger.info("World seed set to %d", self._locations.world_seed)
        return changed

    # -- worlds --

    def generate_world(
        self,
        seed: int | None = None,
        world_name: str | None = None,
        region_count: int | None = None,
        locations_per_region: tuple[int, int] | None = None,
    ) -> GeneratedWorld:
        generator = WorldGenerator(
            self.config.world_seed if seed is None else seed,
            world_name=world_name,
            region_count=region_count,
            locations_per_region=locations_per_region,
            config=self.config,
        )
        generator.initialize(self.registry)
        return generator.generate_world()

    # -- locations --

    def location_content(
        self,
        ref: LocationRef,
        npc_counts: tuple[int, int] | None = None,
        item_count: int | None = None,
    ) -> LocationContent:
        with self._lock:
            return self._locations.generate_location_content(ref, npc_counts=npc_counts, item_count=item_count)

    def location_npcs(self, location_id: str) -> list[ProceduralNPC]:
        with self._lock:
            return self._locations.get_or_generate_npcs(location_id)

    def location_items(self, location_id: str) -> list[WorldItemSpawn]:
        with self._lock:
            return self._locations.get_or_generate_items(location_id)

    def dialogue(self, location_id: str, npc_id: str) -> DialogueTree | None:
        with self._lock:
            return self._locations.get_or_generate_dialogue(npc_id, location_id)

    def shop(self, location_id: str, npc_id: str) -> ShopInventory | None:
        with self._lock:
            return self._locations.get_or_generate_shop(npc_id, location_id)

    def structure_state(self, location_id: str, hex_key: str) -> str:
        with self._lock:
            return self._locations.get_or_generate_structure_state(location_id, hex_key).value

    # -- standalone content --

    def names(self, origin: str, seed: int, count: int, gender: Gender | None = None) -> list[GeneratedName]:
        rng = SeededRandom(seed)
        return self._names.generate_batch(rng, origin, count, gender=gender)

    def random_encounter(
        self,
        seed: int,
        context: GenerationContext,
        *,
        biome: str | None = None,
        location_type: str | None = None,
        min_difficulty: int = 1,
        max_difficulty: int = 10,
    ) -> GeneratedEncounter | None:
        rng = SeededRandom(seed)
        return self._encounters.generate_random(
            rng,
            context,
            biome=biome,
            location_type=location_type,
            time_of_day=context.time_of_day,
            min_difficulty=min_difficulty,
            max_difficulty=max_difficulty,
        )

    def loot(self, seed: int, table_id: str, level: int = 1) -> list[LootDrop]:
        return self._items.generate_loot(SeededRandom(seed), table_id, level)

    def schedule(self, role: str) -> ScheduleTemplate | None:
        return self.registry.schedule_for_role(role)

    def template_summary(self) -> dict[str, list[str]]:
        return self.registry.summary()

    def encounter_chance(self, context: GenerationContext) -> float:
        return self._encounters.encounter_chance(context)
