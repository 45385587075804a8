"""Registry record types: immutable, author-provided generation data.

Every record is a frozen pydantic dataclass so host applications can hand
raw dicts (e.g. decoded JSON) to the registry and get validated, typed
templates back through ``pydantic.TypeAdapter``.  Sequences are stored as
tuples; templates are never mutated at generation time.

Key types:
  NamePool / PlaceNamePool: personal and place name components
  NPCTemplate: role archetype with trait ranges and chances
  QuestTemplate: stage/objective skeletons with ``{{token}}`` text
  EncounterTemplate: enemy composition and reward ranges
  EnemyTemplate: base stats, level scaling, name parts
  DialogueSnippet: filtered lines of NPC speech
  DialogueTreeTemplate: node/choice structure for conversations
  ItemDef / LocationItemPool / ShopTemplate: item catalog, spawn tables, shop stock
  ItemTemplate / LootTable: generated gear and drop tables
  ScheduleTemplate: daily NPC routines
"""

from __future__ import annotations

from dataclasses import field

from pydantic.dataclasses import dataclass as pydantic_dataclass

from procgen.core.enums import ItemRarity, ItemType, ScheduleActivity, TargetType

PERSONALITY_TRAITS: tuple[str, ...] = (
    "aggression",
    "friendliness",
    "curiosity",
    "greed",
    "honesty",
    "lawfulness",
)


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class NamePool:
    """Personal name components for one cultural origin."""

    origin: str
    male_first: tuple[str, ...] = ()
    female_first: tuple[str, ...] = ()
    neutral_first: tuple[str, ...] = ()
    surnames: tuple[str, ...] = ()
    nicknames: tuple[str, ...] = ()
    titles: tuple[str, ...] = ()
    patterns: tuple[str, ...] = ("{{first}} {{last}}",)
    gender_weights: tuple[float, float, float] = (0.45, 0.45, 0.1)   # male, female, neutral


@pydantic_dataclass(frozen=True)
class PlaceNamePool:
    pool_type: str
    adjectives: tuple[str, ...] = ()
    nouns: tuple[str, ...] = ()
    suffixes: tuple[str, ...] = ()
    possessives: tuple[str, ...] = ()
    patterns: tuple[str, ...] = ("{{adj}} {{noun}}",)
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class NameOriginWeight:
    origin: str
    weight: float = 1.0


# ---------------------------------------------------------------------------
# NPCs
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class PersonalityRanges:
    """Inclusive [min, max] range per personality trait."""

    aggression: tuple[float, float] = (0.2, 0.5)
    friendliness: tuple[float, float] = (0.3, 0.7)
    curiosity: tuple[float, float] = (0.3, 0.7)
    greed: tuple[float, float] = (0.2, 0.5)
    honesty: tuple[float, float] = (0.4, 0.8)
    lawfulness: tuple[float, float] = (0.3, 0.7)


@pydantic_dataclass(frozen=True)
class NPCTemplate:
    id: str
    name: str
    role: str
    description: str = ""
    allowed_factions: tuple[str, ...] = ("neutral",)
    personality: PersonalityRanges = field(default_factory=PersonalityRanges)
    name_origins: tuple[NameOriginWeight, ...] = (NameOriginWeight(origin="frontier_anglo"),)
    gender_distribution: tuple[float, float, float] = (0.5, 0.5, 0.0)
    backstory_templates: tuple[str, ...] = ()
    description_templates: tuple[str, ...] = ()
    dialogue_tree_ids: tuple[str, ...] = ()
    quest_giver_chance: float = 0.0
    shop_chance: float = 0.0
    tags: tuple[str, ...] = ()
    valid_location_types: tuple[str, ...] = ()   # empty = valid everywhere
    min_importance: float = 0.0                  # >= 0.5 marks a "notable" archetype


# ---------------------------------------------------------------------------
# Quests
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class ObjectiveTemplate:
    type: str
    description_template: str
    target_type: TargetType = TargetType.ANY
    target_tags: tuple[str, ...] = ()
    count_range: tuple[int, int] = (1, 1)
    optional: bool = False
    hint_template: str | None = None


@pydantic_dataclass(frozen=True)
class QuestStageTemplate:
    title_template: str
    description_template: str
    objectives: tuple[ObjectiveTemplate, ...] = ()
    on_start_text_template: str | None = None
    on_complete_text_template: str | None = None


@pydantic_dataclass(frozen=True)
class QuestRewards:
    xp_range: tuple[int, int] = (10, 50)
    gold_range: tuple[int, int] = (5, 25)
    item_tags: tuple[str, ...] = ()
    item_chance: float = 0.3
    reputation_impact: dict[str, tuple[int, int]] = field(default_factory=dict)


@pydantic_dataclass(frozen=True)
class QuestTemplate:
    id: str
    name: str
    archetype: str
    quest_type: str
    title_templates: tuple[str, ...]
    description_templates: tuple[str, ...]
    stages: tuple[QuestStageTemplate, ...] = ()
    rewards: QuestRewards = field(default_factory=QuestRewards)
    level_range: tuple[int, int] = (1, 10)
    giver_roles: tuple[str, ...] = ()       # empty = any giver role
    giver_factions: tuple[str, ...] = ()    # empty = any giver faction
    valid_location_types: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    repeatable: bool = True
    cooldown_hours: int = 24


# ---------------------------------------------------------------------------
# Encounters and enemies
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class EncounterEnemy:
    enemy_id_or_tag: str
    count_range: tuple[int, int] = (1, 1)
    level_scale: float = 1.0


@pydantic_dataclass(frozen=True)
class EncounterTemplate:
    id: str
    name: str
    description_template: str
    enemies: tuple[EncounterEnemy, ...]
    difficulty_range: tuple[int, int] = (1, 5)
    valid_biomes: tuple[str, ...] = ()          # empty = valid everywhere
    valid_location_types: tuple[str, ...] = ()
    valid_time_of_day: tuple[str, ...] = ()
    faction_tags: tuple[str, ...] = ()
    loot_table_id: str | None = None
    xp_range: tuple[int, int] = (10, 50)
    gold_range: tuple[int, int] = (0, 20)
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class EnemyStats:
    health: int
    damage: int
    armor: int
    accuracy: int = 70      # 0-100
    evasion: int = 10       # 0-100


@pydantic_dataclass(frozen=True)
class LevelScaling:
    health_per_level: float = 1.15     # multiplicative per level above 1
    damage_per_level: float = 1.12
    armor_per_level: float = 1.08
    accuracy_per_level: float = 2.0    # additive per level above 1
    evasion_per_level: float = 1.0


@pydantic_dataclass(frozen=True)
class EnemyNamePool:
    prefixes: tuple[str, ...] = ()
    titles: tuple[str, ...] = ()
    suffixes: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class EnemyTemplate:
    id: str
    name: str
    base_stats: EnemyStats
    description: str = ""
    scaling: LevelScaling = field(default_factory=LevelScaling)
    name_pool: EnemyNamePool = field(default_factory=EnemyNamePool)
    loot_table_id: str | None = None
    behavior_tags: tuple[str, ...] = ()
    factions: tuple[str, ...] = ()
    combat_tags: tuple[str, ...] = ()
    xp_modifier: float = 1.0
    min_level: int = 1
    max_level: int = 10


# ---------------------------------------------------------------------------
# Dialogue
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class DialogueSnippet:
    id: str
    category: str
    text_templates: tuple[str, ...]
    personality_min: dict[str, float] = field(default_factory=dict)
    personality_max: dict[str, float] = field(default_factory=dict)
    valid_roles: tuple[str, ...] = ()
    valid_factions: tuple[str, ...] = ()
    valid_time_of_day: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class ChoicePattern:
    text_template: str
    next_role: str | None = None     # None ends the conversation
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class NodePattern:
    role: str
    snippet_categories: tuple[str, ...]
    choice_patterns: tuple[ChoicePattern, ...] = ()


@pydantic_dataclass(frozen=True)
class DialogueTreeTemplate:
    id: str
    name: str
    node_patterns: tuple[NodePattern, ...]
    description: str = ""
    entry_conditions: tuple[str, ...] = ()
    valid_roles: tuple[str, ...] = ()
    valid_factions: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Items and shops
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class ItemDef:
    id: str
    name: str
    base_price: int = 1
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class ItemPoolEntry:
    item_id: str
    weight: float
    quantity: tuple[int, int] = (1, 1)


@pydantic_dataclass(frozen=True)
class LocationItemPool:
    """Loose world items that can spawn in one kind of location."""

    location_type: str
    entries: tuple[ItemPoolEntry, ...]


@pydantic_dataclass(frozen=True)
class RarityWeights:
    common: float = 70
    uncommon: float = 25
    rare: float = 4
    legendary: float = 1

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.common, self.uncommon, self.rare, self.legendary)


@pydantic_dataclass(frozen=True)
class ShopStockEntry:
    """A catalog staple every shop of this type carries."""

    item_id: str
    stock: tuple[int, int] = (1, 5)


@pydantic_dataclass(frozen=True)
class ShopItemPool:
    """Generated stock: *count* items rolled from the tag group."""

    tags: tuple[str, ...]
    count: tuple[int, int] = (1, 3)
    rarity_weights: RarityWeights = field(default_factory=RarityWeights)


@pydantic_dataclass(frozen=True)
class ShopTemplate:
    shop_type: str
    entries: tuple[ShopStockEntry, ...] = ()
    pools: tuple[ShopItemPool, ...] = ()
    roles: tuple[str, ...] = ()      # NPC roles that run this kind of shop
    buy_multiplier: float = 1.2      # player pays value * buy_multiplier
    sell_multiplier: float = 0.5     # player receives value * sell_multiplier


# ---------------------------------------------------------------------------
# Item generation
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class ItemMaterial:
    id: str
    name: str
    value_multiplier: float = 1.0
    stat_multiplier: float = 1.0
    min_rarity: ItemRarity = ItemRarity.COMMON
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class ItemQuality:
    id: str
    name: str
    adjective: str = ""
    value_multiplier: float = 1.0
    stat_multiplier: float = 1.0
    rarity: ItemRarity = ItemRarity.COMMON
    weight: float = 1.0


@pydantic_dataclass(frozen=True)
class ItemStyle:
    id: str
    name: str
    description_suffix: str = ""
    value_multiplier: float = 1.0
    tags: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class ItemAffixes:
    """Name parts for generated gear, keyed by weapon type, armor slot or consumable kind."""

    weapon_prefixes: dict[str, tuple[str, ...]] = field(default_factory=dict)
    weapon_suffixes: tuple[str, ...] = ("",)
    armor_prefixes: dict[str, tuple[str, ...]] = field(default_factory=dict)
    armor_suffixes: tuple[str, ...] = ("",)
    consumable_prefixes: dict[str, tuple[str, ...]] = field(default_factory=dict)
    consumable_suffixes: tuple[str, ...] = ("",)


@pydantic_dataclass(frozen=True)
class ItemTemplate:
    """Stat ranges for one family of generated weapons, armor or consumables.

    Only the ranges matching ``item_type`` are read; a missing range falls
    back to a fixed default in the generator.
    """

    id: str
    name: str
    item_type: ItemType
    description_templates: tuple[str, ...]
    rarity_weights: RarityWeights = field(default_factory=RarityWeights)
    value_range: tuple[int, int] = (1, 100)
    weight_range: tuple[float, float] = (0.1, 5.0)
    tags: tuple[str, ...] = ()
    level_range: tuple[int, int] = (1, 10)
    # weapons
    weapon_type: str | None = None
    damage_range: tuple[int, int] | None = None
    accuracy_range: tuple[float, float] | None = None
    range_range: tuple[int, int] | None = None
    fire_rate_range: tuple[float, float] | None = None
    ammo_type: str | None = None
    clip_size_range: tuple[int, int] | None = None
    # armor
    armor_slot: str | None = None
    defense_range: tuple[int, int] | None = None
    movement_penalty_range: tuple[float, float] | None = None
    # consumables
    heal_range: tuple[int, int] | None = None
    stamina_range: tuple[int, int] | None = None
    buff_type: str | None = None
    buff_duration_range: tuple[int, int] | None = None
    buff_strength_range: tuple[int, int] | None = None


@pydantic_dataclass(frozen=True)
class LootEntry:
    """One loot table row: an item template to roll, or a catalog item to hand out."""

    template_id: str | None = None
    item_id: str | None = None
    weight: float = 1.0
    quantity: tuple[int, int] = (1, 1)
    level_range: tuple[int, int] = (1, 10)
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if (self.template_id is None) == (self.item_id is None):
            raise ValueError("Loot entry needs exactly one of template_id or item_id")


@pydantic_dataclass(frozen=True)
class LootTable:
    id: str
    name: str
    entries: tuple[LootEntry, ...]
    rolls: int = 1
    empty_chance: float = 0.0        # chance each roll yields nothing
    tags: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Schedules
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class ScheduleEntry:
    """Activity between two hours; ``start_hour > end_hour`` wraps past midnight."""

    start_hour: int
    end_hour: int
    activity: ScheduleActivity
    location_marker: str             # "{{saloon}}", "{{home}}", ... resolved by the host
    dialogue_override: str | None = None

    def __post_init__(self) -> None:
        if not (0 <= self.start_hour <= 24 and 0 <= self.end_hour <= 24):
            raise ValueError(f"Schedule hours must lie in 0-24, got {self.start_hour}-{self.end_hour}")


@pydantic_dataclass(frozen=True)
class ScheduleTemplate:
    id: str
    entries: tuple[ScheduleEntry, ...]
    valid_roles: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
