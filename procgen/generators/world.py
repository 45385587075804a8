"""World generator: regions, settlements, their residents and the quests they offer."""

from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from procgen.core.context import GenerationContext, NPCRef
from procgen.core.enums import SizeBucket
from procgen.core.errors import NotInitializedError
from procgen.core.models import (
    GeneratedLocation,
    GeneratedRegion,
    GeneratedWorld,
    GenerationManifest,
    HexCoord,
    WorldStats,
)
from procgen.core.registry import ITEMS, NAME_POOLS, NPC_TEMPLATES, PLACE_NAME_POOLS, QUEST_TEMPLATES
from procgen.core.seeds import MAX_SEED, combine_seeds, hash_string, normalize_seed
from procgen.core.text import substitute_template
from procgen.data.names import LOCATION_NAME_POOL
from procgen.generators.names import NameGenerator
from procgen.generators.npcs import NPCGenerator
from procgen.generators.quests import QuestGenerator
from procgen.systems.rng import SeededRandom

if TYPE_CHECKING:
    from procgen.config import GenerationConfig
    from procgen.core.models import GeneratedNPC, GeneratedQuest
    from procgen.core.registry import TemplateRegistry

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0.0"

LOCATION_TYPES: tuple[str, ...] = (
    "frontier_town",
    "mining_town",
    "cattle_town",
    "outpost",
    "ranch",
    "homestead",
)

LOCATION_SIZES: dict[str, SizeBucket] = {
    "frontier_town": SizeBucket.LARGE,
    "mining_town": SizeBucket.MEDIUM,
    "cattle_town": SizeBucket.MEDIUM,
    "outpost": SizeBucket.SMALL,
    "ranch": SizeBucket.SMALL,
    "homestead": SizeBucket.TINY,
}

# (background, notable) NPCs per settlement size
NPC_COUNTS: dict[SizeBucket, tuple[int, int]] = {
    SizeBucket.TINY: (1, 1),
    SizeBucket.SMALL: (3, 2),
    SizeBucket.MEDIUM: (6, 4),
    SizeBucket.LARGE: (10, 6),
}

REGION_FACTIONS: tuple[str, ...] = (
    "law_enforcement",
    "desperados",
    "railroad_company",
    "mining_consortium",
)

_DEFAULT_PLACE_POOL = "town_names"
_REGION_NAME_POOL = "landmark_names"

_LOCATION_DESCRIPTIONS: dict[str, tuple[str, ...]] = {
    "frontier_town": (
        "{{name}} is a bustling frontier town, where law and outlaws uneasily coexist.",
        "The town of {{name}} rises from the dust, a beacon of civilization in the wilderness.",
    ),
    "mining_town": (
        "{{name}} grew up around the mines, its residents seeking fortune in the earth.",
        "The mining town of {{name}} echoes with the sound of picks and the dreams of prospectors.",
    ),
    "outpost": (
        "{{name}} is little more than a few buildings and determined souls.",
        "The small outpost of {{name}} offers shelter to weary travelers.",
    ),
}
_DEFAULT_DESCRIPTION = ("{{name}} awaits exploration.",)


def size_for_location_type(location_type: str) -> SizeBucket:
    return LOCATION_SIZES.get(location_type, SizeBucket.SMALL)


def npc_counts_for_size(size: SizeBucket) -> tuple[int, int]:
    return NPC_COUNTS.get(size, NPC_COUNTS[SizeBucket.SMALL])


def npc_refs(npcs: Sequence[GeneratedNPC]) -> tuple[NPCRef, ...]:
    """Reference records quests may bind to, one per generated resident."""
    return tuple(NPCRef(id=n.id, name=n.name, role=n.role, tags=tuple(n.tags)) for n in npcs)


def ring_coord(index: int, count: int, radius: float) -> HexCoord:
    """Axial coordinate of slot *index* of *count* evenly spaced on a ring."""
    angle = index / count * math.pi * 2 if count else 0.0
    return HexCoord(q=round(math.cos(angle) * radius), r=round(math.sin(angle) * radius))


class WorldGenerator:
    """Builds a whole world from one master seed.

    Every location and region draws its own seed from the master stream,
    so a fresh generator with the same seed and options reproduces the
    same world.  ``generate_world`` restarts the master stream and can be
    called repeatedly; statistics accumulate until ``reset_stats``.
    """

    __slots__ = (
        "_seed", "_world_name", "_region_count", "_locations_per_region",
        "_context_overrides", "_config", "_master", "_registry",
        "_names", "_npcs", "_quests", "_stats", "_templates_used", "_warnings",
    )

    def __init__(
        self,
        seed: int,
        *,
        world_name: str | None = None,
        region_count: int | None = None,
        locations_per_region: tuple[int, int] | None = None,
        context_overrides: Mapping[str, Any] | None = None,
        config: GenerationConfig | None = None,
    ) -> None:
        if world_name:
            seed = combine_seeds(seed, hash_string(world_name))
        self._seed = normalize_seed(seed)
        self._world_name = world_name or (config.world_name if config else "Dustwater Frontier")
        self._region_count = region_count if region_count is not None else (config.region_count if config else 3)
        if locations_per_region is None:
            locations_per_region = config.locations_per_region if config else (3, 6)
        self._locations_per_region = tuple(sorted(locations_per_region))
        self._context_overrides = dict(context_overrides or {})
        self._config = config

        self._master = SeededRandom(self._seed)
        self._registry: TemplateRegistry | None = None
        self._names: NameGenerator | None = None
        self._npcs: NPCGenerator | None = None
        self._quests: QuestGenerator | None = None
        self._stats = WorldStats()
        self._templates_used: dict[str, None] = {}
        self._warnings: list[str] = []

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def world_name(self) -> str:
        return self._world_name

    def initialize(self, registry: TemplateRegistry) -> None:
        """Bind a registry; it must carry name, place, NPC, quest and item data."""
        registry.require(NAME_POOLS, PLACE_NAME_POOLS, NPC_TEMPLATES, QUEST_TEMPLATES, ITEMS)
        self._registry = registry
        self._names = NameGenerator(registry, self._config)
        self._npcs = NPCGenerator(registry, self._config)
        self._quests = QuestGenerator(registry, self._config)

    def is_initialized(self) -> bool:
        return self._registry is not None

    def _require_initialized(self) -> None:
        if self._registry is None:
            raise NotInitializedError("WorldGenerator not initialized. Call initialize() first.")

    def _context(self, **overrides) -> GenerationContext:
        fields = {"world_seed": self._seed, **self._context_overrides, **overrides}
        return GenerationContext(**fields)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_location(
        self,
        location_type: str,
        region_id: str,
        coord: HexCoord,
        *,
        region_name: str | None = None,
    ) -> GeneratedLocation:
        """One settlement: name, residents sized by type, and their quests."""
        self._require_initialized()

        location_seed = self._master.int(0, MAX_SEED)
        rng = SeededRandom(location_seed)
        location_id = f"loc_{location_seed:x}"

        pool_type = LOCATION_NAME_POOL.get(location_type, _DEFAULT_PLACE_POOL)
        name = self._names.generate_place_name(rng, pool_type)
        context = self._context(
            region_id=region_id,
            region_name=region_name,
            location_id=location_id,
            location_name=name,
        )

        size = size_for_location_type(location_type)
        background, notable = npc_counts_for_size(size)
        npcs: list[GeneratedNPC] = []
        if self._npcs.has_templates_for_location(location_type):
            npcs = self._npcs.generate_for_location(rng, location_type, context, background, notable)
        else:
            self._warn(f"No NPC templates for location type {location_type!r} ({location_id})")
        self._stats.npcs_generated += len(npcs)

        quests = self._generate_quests(rng, npcs, context)

        description = substitute_template(
            rng.pick(_LOCATION_DESCRIPTIONS.get(location_type, _DEFAULT_DESCRIPTION)), {"name": name},
        )

        for npc in npcs:
            self._templates_used.setdefault(npc.template_id, None)
        for quest in quests:
            self._templates_used.setdefault(quest.template_id, None)
        self._stats.locations_generated += 1

        logger.debug("Generated %s %s (%s): %d NPCs, %d quests", location_type, name, location_id, len(npcs), len(quests))
        return GeneratedLocation(
            id=location_id,
            name=name,
            type=location_type,
            size=size,
            description=description,
            coord=coord,
            seed=location_seed,
            npcs=npcs,
            quests=quests,
            tags=[location_type, size.value],
        )

    def _generate_quests(
        self,
        rng: SeededRandom,
        npcs: list[GeneratedNPC],
        context: GenerationContext,
    ) -> list[GeneratedQuest]:
        givers = [npc for npc in npcs if npc.is_quest_giver]
        if not givers:
            return []
        quest_context = context.with_overrides(available_npcs=npc_refs(npcs))
        quests = []
        for giver in givers:
            quest = self._quests.generate_random(rng, quest_context, giver)
            if quest is None:
                logger.debug("No quest template fits giver %s (%s)", giver.id, giver.role)
                continue
            quests.append(quest)
        self._stats.quests_generated += len(quests)
        return quests

    def generate_region(self, region_index: int) -> GeneratedRegion:
        """A named territory holding a ring of settlements."""
        self._require_initialized()

        region_seed = self._master.int(0, MAX_SEED)
        rng = SeededRandom(region_seed)
        region_id = f"region_{region_seed:x}"

        landmark = self._names.generate_place_name(rng, _REGION_NAME_POOL)
        name = f"{landmark} Territory"

        low, high = self._locations_per_region
        count = rng.int(low, high)
        locations = []
        for i in range(count):
            location_type = rng.pick(LOCATION_TYPES)
            radius = 3 + rng.int(0, 3)
            coord = ring_coord(i, count, radius)
            locations.append(self.generate_location(location_type, region_id, coord, region_name=name))

        presence = {faction: rng.float(0, 1) for faction in REGION_FACTIONS}
        self._stats.regions_generated += 1

        logger.info("Generated region %d: %s with %d locations", region_index, name, len(locations))
        return GeneratedRegion(
            id=region_id,
            name=name,
            description=f"The {name} stretches across the frontier, home to {len(locations)} settlements.",
            seed=region_seed,
            locations=locations,
            faction_presence=presence,
        )

    def generate_world(self) -> GeneratedWorld:
        self._require_initialized()
        logger.info("Generating world %r with seed %d", self._world_name, self._seed)

        self._master = SeededRandom(self._seed)
        self._templates_used = {}
        self._warnings = []

        regions = [self.generate_region(i) for i in range(self._region_count)]
        locations = [loc for region in regions for loc in region.locations]

        manifest = GenerationManifest(
            generated_at=time.time(),
            world_seed=self._seed,
            schema_version=SCHEMA_VERSION,
            counts={
                "regions": len(regions),
                "locations": len(locations),
                "npcs": sum(len(loc.npcs) for loc in locations),
                "quests": sum(len(loc.quests) for loc in locations),
            },
            templates_used=sorted(self._templates_used),
            warnings=list(self._warnings),
        )
        logger.info(
            "World complete: %d regions, %d locations, %d NPCs, %d quests",
            manifest.counts["regions"], manifest.counts["locations"],
            manifest.counts["npcs"], manifest.counts["quests"],
        )
        return GeneratedWorld(
            id=f"world_{self._seed:x}",
            name=self._world_name,
            seed=self._seed,
            regions=regions,
            manifest=manifest,
        )

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_stats(self) -> WorldStats:
        """Snapshot of the running counters (later generation does not change it)."""
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = WorldStats()

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self._warnings.append(message)
