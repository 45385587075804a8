"""Procedural location manager: on-demand content for host-defined locations.

Content for a location is a pure function of (world seed, location id).
It is generated on first request, cached, and returned by reference until
the manager is re-seeded with a different world seed.
"""

from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING, Iterable, Sequence, TypeVar

from procgen.core.context import GenerationContext
from procgen.core.enums import SizeBucket, StructureState
from procgen.core.errors import NotInitializedError
from procgen.core.models import HexCoord, LocationContent, ProceduralNPC, ShopInventory, WorldItemSpawn
from procgen.core.registry import ITEM_GENERATION, ITEMS
from procgen.core.seeds import combine_seeds, hash_string, normalize_seed
from procgen.generators.dialogue import DialogueGenerator
from procgen.generators.items import ItemGenerator
from procgen.generators.npcs import NPCGenerator
from procgen.generators.quests import QuestGenerator
from procgen.generators.world import LOCATION_SIZES as WORLD_LOCATION_SIZES
from procgen.generators.world import npc_counts_for_size, npc_refs
from procgen.systems.rng import SeededRandom

if TYPE_CHECKING:
    from procgen.config import GenerationConfig
    from procgen.core.context import LocationRef
    from procgen.core.models import DialogueTree, GeneratedNPC, GeneratedQuest
    from procgen.core.registry import TemplateRegistry

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_TYPE = "town"

LOCATION_SIZES: dict[str, SizeBucket] = {
    "city": SizeBucket.LARGE,
    "town": SizeBucket.MEDIUM,
    "mine": SizeBucket.MEDIUM,
    "ranch": SizeBucket.SMALL,
    "outpost": SizeBucket.SMALL,
    "camp": SizeBucket.TINY,
    "ruin": SizeBucket.TINY,
    # world location types keep the size the world generator gives them
    **WORLD_LOCATION_SIZES,
}

ITEM_COUNTS: dict[str, int] = {
    "city": 12,
    "town": 8,
    "mine": 10,
    "ranch": 6,
    "outpost": 4,
    "camp": 3,
    "ruin": 12,
}
_DEFAULT_ITEM_COUNT = 5

# Tag checks in priority order
_TYPE_TAGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("city", ("city",)),
    ("town", ("town",)),
    ("mine", ("mine", "mining")),
    ("ranch", ("ranch", "cattle")),
    ("outpost", ("outpost",)),
    ("camp", ("camp",)),
    ("ruin", ("ruin", "abandoned")),
)
_TYPE_NAME_HINTS: tuple[tuple[str, str], ...] = (
    ("mine", "mine"),
    ("ranch", "ranch"),
    ("camp", "camp"),
    ("station", "outpost"),
)

_DEFAULT_DAMAGE_CHANCE = 0.2


def infer_location_type(ref: LocationRef) -> str:
    """Explicit type first, then tags, then words in the name; ``town`` otherwise."""
    if ref.type:
        return ref.type
    tags = set(ref.tags)
    for location_type, markers in _TYPE_TAGS:
        if tags.intersection(markers):
            return location_type
    name = ref.name.lower()
    for hint, location_type in _TYPE_NAME_HINTS:
        if hint in name:
            return location_type
    return DEFAULT_LOCATION_TYPE


def location_seed(world_seed: int, location_id: str) -> int:
    return combine_seeds(world_seed, hash_string(location_id))


class ProceduralLocationManager:
    """Generates and caches NPCs, items, dialogue, shops and quests per location.

    One instance per world.  ``initialize`` with the current seed is a
    no-op; a different seed drops every cached location.
    """

    __slots__ = (
        "_registry", "_config", "_world_seed", "_cache", "_structure_states",
        "_npcs", "_quests", "_dialogue", "_items",
    )

    def __init__(
        self,
        registry: TemplateRegistry,
        seed: int | None = None,
        config: GenerationConfig | None = None,
    ) -> None:
        self._registry = registry
        self._config = config
        self._world_seed: int | None = None
        self._cache: dict[str, LocationContent] = {}
        self._structure_states: dict[str, dict[str, StructureState]] = {}
        self._npcs = NPCGenerator(registry, config)
        self._quests = QuestGenerator(registry, config)
        self._dialogue = DialogueGenerator(registry, config)
        self._items = ItemGenerator(registry, config)
        if seed is not None:
            self.initialize(seed)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, seed: int) -> None:
        seed = normalize_seed(seed)
        if seed == self._world_seed:
            logger.debug("Location manager already initialized with seed %d", seed)
            return
        if self._cache:
            logger.info("World seed changed %s -> %d, dropping %d cached locations", self._world_seed, seed, len(self._cache))
        self.clear_cache()
        self._world_seed = seed

    @property
    def world_seed(self) -> int | None:
        return self._world_seed

    @property
    def is_initialized(self) -> bool:
        return self._world_seed is not None

    def clear_cache(self) -> None:
        self._cache.clear()
        self._structure_states.clear()

    def has_generated_content(self, location_id: str) -> bool:
        return location_id in self._cache

    @property
    def cached_location_ids(self) -> list[str]:
        return list(self._cache)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_location_content(
        self,
        ref: LocationRef,
        npc_counts: tuple[int, int] | None = None,
        item_count: int | None = None,
    ) -> LocationContent:
        """Content for *ref*, generated on first call and cached afterwards.

        *npc_counts* is ``(background, notable)``; both overrides default to
        the tables for the inferred location type.  Item and shop data must
        be loaded even when no item or shop ends up being rolled.  A failure
        leaves the cache untouched.
        """
        if self._world_seed is None:
            raise NotInitializedError("ProceduralLocationManager not initialized. Call initialize() first.")
        self._registry.require(ITEMS, ITEM_GENERATION)

        seed = location_seed(self._world_seed, ref.id)
        cached = self._cache.get(ref.id)
        if cached is not None and cached.seed == seed:
            logger.debug("Using cached content for %s", ref.id)
            return cached

        logger.info("Generating content for %s", ref.id)
        rng = SeededRandom(seed)
        location_type = infer_location_type(ref)
        context = GenerationContext(
            world_seed=self._world_seed,
            region_id="unknown",
            location_id=ref.id,
            location_name=ref.name,
            context_tags=tuple(ref.tags),
        )

        if npc_counts is None:
            npc_counts = npc_counts_for_size(LOCATION_SIZES.get(location_type, SizeBucket.SMALL))
        background, notable = npc_counts
        generated = self._npcs.generate_for_location(rng, location_type, context, background, notable)
        npcs = _place_npcs(generated, ref.id)

        if item_count is None:
            item_count = ITEM_COUNTS.get(location_type, _DEFAULT_ITEM_COUNT)
        world_items = self._generate_items(rng, ref.id, location_type, item_count)

        dialogue_trees: dict[str, DialogueTree] = {}
        for npc in npcs:
            tree = self._dialogue.generate_for_npc(rng, npc.npc, context)
            tree.id = npc.primary_dialogue_id
            tree.tags = ["procedural", *tree.tags]
            dialogue_trees[npc.id] = tree

        shops: dict[str, ShopInventory] = {}
        for npc in npcs:
            if npc.shop_id is not None:
                shops[npc.id] = self._generate_shop(rng, npc, context.player_level)

        quests = self._generate_quests(rng, generated, context)

        content = LocationContent(
            location_id=ref.id,
            location_type=location_type,
            seed=seed,
            generated_at=time.time(),
            npcs=npcs,
            world_items=world_items,
            dialogue_trees=dialogue_trees,
            shop_inventories=shops,
            quests=quests,
        )
        self._cache[ref.id] = content
        logger.info(
            "Generated %s (%s): %d NPCs, %d items, %d shops, %d quests",
            ref.id, location_type, len(npcs), len(world_items), len(shops), len(quests),
        )
        return content

    def _generate_items(self, rng: SeededRandom, location_id: str, location_type: str, count: int) -> list[WorldItemSpawn]:
        if count <= 0:
            return []
        pool = self._registry.item_pool(location_type)
        weights = [entry.weight for entry in pool.entries]

        items = []
        for i in range(count):
            entry = rng.weighted_pick(pool.entries, weights)
            angle = rng.float(0, math.pi * 2)
            radius = rng.float(3, 10)
            low, high = sorted(entry.quantity)
            items.append(WorldItemSpawn(
                id=f"proc_item_{location_id}_{i}",
                item_id=entry.item_id,
                coord=HexCoord(q=round(math.cos(angle) * radius), r=round(math.sin(angle) * radius)),
                quantity=rng.int(low, high),
            ))
        return items

    def _generate_shop(self, rng: SeededRandom, npc: ProceduralNPC, level: int) -> ShopInventory:
        template = self._registry.shop_for_role(npc.role)
        stock = self._items.generate_shop_inventory(rng, template, level)
        price_modifier = 1.0 + rng.float(-0.1, 0.2)
        return ShopInventory(npc_id=npc.id, shop_type=template.shop_type, items=stock, price_modifier=price_modifier)

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
                logger.warning("No quest template fits giver %s (%s), skipped", giver.id, giver.role)
                continue
            quests.append(quest)
        return quests

    # ------------------------------------------------------------------
    # Cached lookups
    # ------------------------------------------------------------------

    def get_or_generate_npcs(self, location_id: str, ref: LocationRef | None = None) -> list[ProceduralNPC]:
        """Cached NPCs; generated when *ref* is given, otherwise ``[]``."""
        content = self._lookup(location_id, ref)
        return content.npcs if content is not None else []

    def get_or_generate_items(self, location_id: str, ref: LocationRef | None = None) -> list[WorldItemSpawn]:
        content = self._lookup(location_id, ref)
        return content.world_items if content is not None else []

    def get_or_generate_dialogue(self, npc_id: str, location_id: str) -> DialogueTree | None:
        content = self._cache.get(location_id)
        return content.dialogue_trees.get(npc_id) if content is not None else None

    def get_or_generate_shop(self, npc_id: str, location_id: str) -> ShopInventory | None:
        content = self._cache.get(location_id)
        return content.shop_inventories.get(npc_id) if content is not None else None

    def get_or_generate_structure_state(self, location_id: str, hex_key: str) -> StructureState:
        """Damage state of the structure at *hex_key*, fixed once drawn.

        Locations without generated content report every structure as
        functional.
        """
        content = self._cache.get(location_id)
        if content is None:
            return StructureState.FUNCTIONAL

        states = self._structure_states.setdefault(location_id, {})
        state = states.get(hex_key)
        if state is not None:
            return state

        rng = SeededRandom(combine_seeds(content.seed, hash_string(hex_key)))
        chance = self._config.structure_damage_chance if self._config else _DEFAULT_DAMAGE_CHANCE
        state = StructureState.FUNCTIONAL
        if rng.float(0, 1) < chance:
            state = StructureState.BROKEN if rng.bool() else StructureState.LOCKED
        states[hex_key] = state
        return state

    def _lookup(self, location_id: str, ref: LocationRef | None) -> LocationContent | None:
        content = self._cache.get(location_id)
        if content is None and ref is not None:
            content = self.generate_location_content(ref)
        return content


# ---------------------------------------------------------------------------
# Placement and merging
# ---------------------------------------------------------------------------

def _place_npcs(generated: Sequence[GeneratedNPC], location_id: str) -> list[ProceduralNPC]:
    """Spread NPCs on rings around the location centre, eight per ring."""
    placed = []
    for index, npc in enumerate(generated):
        angle = index / len(generated) * math.pi * 2
        radius = 2 + (index // 8) * 2
        placed.append(ProceduralNPC(
            npc=npc,
            location_id=location_id,
            spawn_coord=HexCoord(q=round(math.cos(angle) * radius), r=round(math.sin(angle) * radius)),
            primary_dialogue_id=f"proc_dialogue_{npc.id}",
            shop_id=f"proc_shop_{npc.id}" if npc.has_shop else None,
        ))
    return placed


T = TypeVar("T")


def _merge_by_id(static: Iterable[T], procedural: Iterable[T]) -> list[T]:
    merged = list(static)
    taken = {entry.id for entry in merged}
    for entry in procedural:
        if entry.id not in taken:
            merged.append(entry)
            taken.add(entry.id)
    return merged


def merge_location_npcs(
    static: Iterable,
    location_id: str,
    manager: ProceduralLocationManager,
    ref: LocationRef | None = None,
) -> list:
    """Hand-authored NPCs first, then procedural ones whose ids do not collide."""
    return _merge_by_id(static, manager.get_or_generate_npcs(location_id, ref))


def merge_location_items(
    static: Iterable,
    location_id: str,
    manager: ProceduralLocationManager,
    ref: LocationRef | None = None,
) -> list:
    """Hand-authored item spawns first, then procedural ones whose ids do not collide."""
    return _merge_by_id(static, manager.get_or_generate_items(location_id, ref))
