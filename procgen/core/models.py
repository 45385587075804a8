"""Generated entities: the output side of every generator.

Plain slotted dataclasses; callers treat them as opaque data and use
``to_dict()`` for transport.  Nothing here draws random numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from procgen.core.enums import Gender, ItemRarity, ItemType, SizeBucket


@dataclass(slots=True, frozen=True)
class HexCoord:
    q: int
    r: int

    @property
    def key(self) -> str:
        return f"{self.q},{self.r}"

    def to_dict(self) -> dict[str, int]:
        return {"q": self.q, "r": self.r}


# ---------------------------------------------------------------------------
# Names and NPCs
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class GeneratedName:
    full_name: str
    first_name: str
    last_name: str
    origin: str
    gender: Gender
    nickname: str | None = None
    title: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "full_name": self.full_name,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "origin": self.origin,
            "gender": self.gender.value,
            "nickname": self.nickname,
            "title": self.title,
        }


@dataclass(slots=True)
class Personality:
    aggression: float
    friendliness: float
    curiosity: float
    greed: float
    honesty: float
    lawfulness: float

    def get(self, trait: str, default: float = 0.5) -> float:
        return getattr(self, trait, default)

    def to_dict(self) -> dict[str, float]:
        return {
            "aggression": self.aggression,
            "friendliness": self.friendliness,
            "curiosity": self.curiosity,
            "greed": self.greed,
            "honesty": self.honesty,
            "lawfulness": self.lawfulness,
        }


@dataclass(slots=True)
class GeneratedNPC:
    id: str
    template_id: str
    name: str
    name_details: GeneratedName
    role: str
    faction: str
    gender: Gender
    personality: Personality
    backstory: str
    description: str
    is_quest_giver: bool
    has_shop: bool
    seed: int
    dialogue_tree_ids: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    location_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "template_id": self.template_id,
            "name": self.name,
            "name_details": self.name_details.to_dict(),
            "role": self.role,
            "faction": self.faction,
            "gender": self.gender.value,
            "personality": self.personality.to_dict(),
            "backstory": self.backstory,
            "description": self.description,
            "is_quest_giver": self.is_quest_giver,
            "has_shop": self.has_shop,
            "dialogue_tree_ids": list(self.dialogue_tree_ids),
            "tags": list(self.tags),
            "location_id": self.location_id,
            "seed": self.seed,
        }


# ---------------------------------------------------------------------------
# Quests
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class QuestObjective:
    id: str
    type: str
    description: str
    target_type: str
    count: int
    optional: bool = False
    target_id: str | None = None
    target_name: str | None = None
    hint: str | None = None
    current_count: int = 0
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "description": self.description,
            "target_type": self.target_type,
            "target_id": self.target_id,
            "target_name": self.target_name,
            "count": self.count,
            "current_count": self.current_count,
            "optional": self.optional,
            "hint": self.hint,
            "completed": self.completed,
        }


@dataclass(slots=True)
class QuestStage:
    id: str
    title: str
    description: str
    objectives: list[QuestObjective]
    on_start_text: str | None = None
    on_complete_text: str | None = None
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "objectives": [o.to_dict() for o in self.objectives],
            "on_start_text": self.on_start_text,
            "on_complete_text": self.on_complete_text,
            "completed": self.completed,
        }


@dataclass(slots=True)
class QuestRewardBundle:
    xp: int
    gold: int
    items: list[str] = field(default_factory=list)
    reputation_changes: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "xp": self.xp,
            "gold": self.gold,
            "items": list(self.items),
            "reputation_changes": dict(self.reputation_changes),
        }


@dataclass(slots=True)
class GeneratedQuest:
    id: str
    template_id: str
    archetype: str
    quest_type: str
    title: str
    description: str
    stages: list[QuestStage]
    rewards: QuestRewardBundle
    level: int
    seed: int
    giver_id: str | None = None
    giver_name: str | None = None
    target_ids: list[str] = field(default_factory=list)
    target_names: dict[str, str] = field(default_factory=dict)
    location_ids: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    repeatable: bool = True
    cooldown_hours: int = 24
    current_stage_index: int = 0
    completed: bool = False
    failed: bool = False

    def iter_texts(self):
        """Yield every player-facing string of the quest."""
        yield self.title
        yield self.description
        for stage in self.stages:
            yield stage.title
            yield stage.description
            if stage.on_start_text:
                yield stage.on_start_text
            if stage.on_complete_text:
                yield stage.on_complete_text
            for obj in stage.objectives:
                yield obj.description
                if obj.hint:
                    yield obj.hint

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "template_id": self.template_id,
            "archetype": self.archetype,
            "quest_type": self.quest_type,
            "title": self.title,
            "description": self.description,
            "stages": [s.to_dict() for s in self.stages],
            "current_stage_index": self.current_stage_index,
            "rewards": self.rewards.to_dict(),
            "giver_id": self.giver_id,
            "giver_name": self.giver_name,
            "target_ids": list(self.target_ids),
            "target_names": dict(self.target_names),
            "location_ids": list(self.location_ids),
            "level": self.level,
            "tags": list(self.tags),
            "repeatable": self.repeatable,
            "cooldown_hours": self.cooldown_hours,
            "completed": self.completed,
            "failed": self.failed,
            "seed": self.seed,
        }


# ---------------------------------------------------------------------------
# Encounters
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class GeneratedEnemy:
    id: str
    enemy_type: str
    template_id: str
    name: str
    level: int
    health: int
    max_health: int
    damage: int
    armor: int
    accuracy: int
    evasion: int
    xp_value: int
    behavior_tags: list[str] = field(default_factory=list)
    combat_tags: list[str] = field(default_factory=list)
    loot_table_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "enemy_type": self.enemy_type,
            "template_id": self.template_id,
            "name": self.name,
            "level": self.level,
            "health": self.health,
            "max_health": self.max_health,
            "damage": self.damage,
            "armor": self.armor,
            "accuracy": self.accuracy,
            "evasion": self.evasion,
            "xp_value": self.xp_value,
            "behavior_tags": list(self.behavior_tags),
            "combat_tags": list(self.combat_tags),
            "loot_table_id": self.loot_table_id,
        }


@dataclass(slots=True)
class GeneratedEncounter:
    id: str
    template_id: str
    name: str
    description: str
    enemies: list[GeneratedEnemy]
    difficulty: int
    xp_reward: int
    gold_reward: int
    seed: int
    loot_table_id: str | None = None
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "template_id": self.template_id,
            "name": self.name,
            "description": self.description,
            "enemies": [e.to_dict() for e in self.enemies],
            "difficulty": self.difficulty,
            "xp_reward": self.xp_reward,
            "gold_reward": self.gold_reward,
            "loot_table_id": self.loot_table_id,
            "tags": list(self.tags),
            "seed": self.seed,
        }


# ---------------------------------------------------------------------------
# Dialogue
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class DialogueChoice:
    id: str
    text: str
    next_node_id: str | None
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "next_node_id": self.next_node_id,
            "tags": list(self.tags),
        }


@dataclass(slots=True)
class DialogueNode:
    id: str
    speaker_text: str
    speaker_id: str
    speaker_name: str
    choices: list[DialogueChoice] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "speaker_text": self.speaker_text,
            "speaker_id": self.speaker_id,
            "speaker_name": self.speaker_name,
            "choices": [c.to_dict() for c in self.choices],
            "tags": list(self.tags),
        }


@dataclass(slots=True)
class DialogueTree:
    id: str
    template_id: str
    root_node_id: str
    nodes: dict[str, DialogueNode]
    npc_id: str
    npc_name: str
    seed: int
    tags: list[str] = field(default_factory=list)

    def dangling_references(self) -> list[str]:
        """Choice ids whose ``next_node_id`` is neither None nor a node of this tree."""
        return [
            choice.id
            for node in self.nodes.values()
            for choice in node.choices
            if choice.next_node_id is not None and choice.next_node_id not in self.nodes
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "template_id": self.template_id,
            "root_node_id": self.root_node_id,
            "nodes": {node_id: n.to_dict() for node_id, n in self.nodes.items()},
            "npc_id": self.npc_id,
            "npc_name": self.npc_name,
            "tags": list(self.tags),
            "seed": self.seed,
        }


# ---------------------------------------------------------------------------
# World structure
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class GeneratedLocation:
    id: str
    name: str
    type: str
    size: SizeBucket
    description: str
    coord: HexCoord
    seed: int
    npcs: list[GeneratedNPC] = field(default_factory=list)
    quests: list[GeneratedQuest] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "size": self.size.value,
            "description": self.description,
            "coord": self.coord.to_dict(),
            "npcs": [n.to_dict() for n in self.npcs],
            "quests": [q.to_dict() for q in self.quests],
            "tags": list(self.tags),
            "seed": self.seed,
        }


@dataclass(slots=True)
class GeneratedRegion:
    id: str
    name: str
    description: str
    seed: int
    locations: list[GeneratedLocation] = field(default_factory=list)
    faction_presence: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "locations": [loc.to_dict() for loc in self.locations],
            "faction_presence": dict(self.faction_presence),
            "seed": self.seed,
        }


@dataclass(slots=True)
class WorldStats:
    npcs_generated: int = 0
    quests_generated: int = 0
    locations_generated: int = 0
    regions_generated: int = 0

    def copy(self) -> WorldStats:
        return WorldStats(
            npcs_generated=self.npcs_generated,
            quests_generated=self.quests_generated,
            locations_generated=self.locations_generated,
            regions_generated=self.regions_generated,
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "npcs": self.npcs_generated,
            "quests": self.quests_generated,
            "locations": self.locations_generated,
            "regions": self.regions_generated,
        }


@dataclass(slots=True)
class GenerationManifest:
    generated_at: float
    world_seed: int
    schema_version: str
    counts: dict[str, int]
    templates_used: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "world_seed": self.world_seed,
            "schema_version": self.schema_version,
            "counts": dict(self.counts),
            "templates_used": list(self.templates_used),
            "warnings": list(self.warnings),
        }


@dataclass(slots=True)
class GeneratedWorld:
    id: str
    name: str
    seed: int
    regions: list[GeneratedRegion]
    manifest: GenerationManifest

    def iter_locations(self):
        for region in self.regions:
            yield from region.locations

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "seed": self.seed,
            "regions": [r.to_dict() for r in self.regions],
            "manifest": self.manifest.to_dict(),
        }


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class GeneratedItem:
    """One procedurally rolled weapon, armor piece or consumable.

    ``stats`` holds the type-specific numbers (damage, defense,
    heal_amount, ...); ``seed`` regenerates the exact same item.
    """

    id: str
    template_id: str
    name: str
    description: str
    item_type: ItemType
    rarity: ItemRarity
    value: int
    weight: float
    material: str
    quality: str
    style: str
    seed: int
    stackable: bool = False
    max_stack: int = 1
    tags: list[str] = field(default_factory=list)
    stats: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "template_id": self.template_id,
            "name": self.name,
            "description": self.description,
            "item_type": self.item_type.value,
            "rarity": self.rarity.value,
            "value": self.value,
            "weight": self.weight,
            "material": self.material,
            "quality": self.quality,
            "style": self.style,
            "seed": self.seed,
            "stackable": self.stackable,
            "max_stack": self.max_stack,
            "tags": list(self.tags),
            "stats": dict(self.stats),
        }


@dataclass(slots=True)
class LootDrop:
    """A loot roll result: a generated item, or a quantity of a catalog item."""

    item_id: str
    quantity: int = 1
    item: GeneratedItem | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "item_id": self.item_id,
            "quantity": self.quantity,
            "item": self.item.to_dict() if self.item is not None else None,
        }


# ---------------------------------------------------------------------------
# Procedural location content
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ProceduralNPC:
    """A generated NPC placed in a location, ready for the host's NPC layer."""

    npc: GeneratedNPC
    location_id: str
    spawn_coord: HexCoord
    primary_dialogue_id: str
    shop_id: str | None = None
    is_procedural: bool = True

    @property
    def id(self) -> str:
        return self.npc.id

    @property
    def name(self) -> str:
        return self.npc.name

    @property
    def role(self) -> str:
        return self.npc.role

    def to_dict(self) -> dict[str, Any]:
        data = self.npc.to_dict()
        data.update(
            location_id=self.location_id,
            spawn_coord=self.spawn_coord.to_dict(),
            primary_dialogue_id=self.primary_dialogue_id,
            shop_id=self.shop_id,
            is_procedural=self.is_procedural,
        )
        return data


@dataclass(slots=True)
class WorldItemSpawn:
    id: str
    item_id: str
    coord: HexCoord
    quantity: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "item_id": self.item_id,
            "coord": self.coord.to_dict(),
            "quantity": self.quantity,
        }


@dataclass(slots=True)
class ShopItem:
    """Shop line; ``base_price`` is what the player pays, ``sell_price`` what the shop pays back.

    ``item`` is set for generated stock and ``None`` for catalog staples.
    """

    item_id: str
    stock: int
    base_price: int
    sell_price: int = 0
    item: GeneratedItem | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "item_id": self.item_id,
            "stock": self.stock,
            "base_price": self.base_price,
            "sell_price": self.sell_price,
            "item": self.item.to_dict() if self.item is not None else None,
        }


@dataclass(slots=True)
class ShopInventory:
    npc_id: str
    shop_type: str
    items: list[ShopItem]
    price_modifier: float
    can_buy: bool = True
    can_sell: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "npc_id": self.npc_id,
            "shop_type": self.shop_type,
            "items": [i.to_dict() for i in self.items],
            "price_modifier": self.price_modifier,
            "can_buy": self.can_buy,
            "can_sell": self.can_sell,
        }


@dataclass(slots=True)
class LocationContent:
    """Cached bundle for one (world seed, location id) pair."""

    location_id: str
    location_type: str
    seed: int
    generated_at: float
    npcs: list[ProceduralNPC]
    world_items: list[WorldItemSpawn]
    dialogue_trees: dict[str, DialogueTree]
    shop_inventories: dict[str, ShopInventory]
    quests: list[GeneratedQuest]

    def to_dict(self) -> dict[str, Any]:
        return {
            "location_id": self.location_id,
            "location_type": self.location_type,
            "seed": self.seed,
            "generated_at": self.generated_at,
            "npcs": [n.to_dict() for n in self.npcs],
            "world_items": [i.to_dict() for i in self.world_items],
            "dialogue_trees": {k: t.to_dict() for k, t in self.dialogue_trees.items()},
            "shop_inventories": {k: s.to_dict() for k, s in self.shop_inventories.items()},
            "quests": [q.to_dict() for q in self.quests],
        }


