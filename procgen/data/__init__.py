"""Built-in frontier content and a one-call registry loader."""

from __future__ import annotations

from procgen.core.registry import TemplateRegistry
from procgen.data.dialogue import DIALOGUE_SNIPPETS, DIALOGUE_TREES
from procgen.data.encounters import DEFAULT_ENEMY_TEMPLATE, ENCOUNTER_TEMPLATES, ENEMY_TEMPLATES
from procgen.data.items import (
    FLAVOR_WORDS,
    ITEM_AFFIXES,
    ITEM_TEMPLATES,
    ITEMS,
    LOCATION_ITEM_POOLS,
    LOOT_TABLES,
    MATERIALS,
    QUALITIES,
    SHOP_TEMPLATES,
    STYLES,
)
from procgen.data.names import LOCATION_NAME_POOL, NAME_POOLS, PLACE_NAME_POOLS
from procgen.data.npcs import NPC_TEMPLATES
from procgen.data.quests import QUEST_TEMPLATES
from procgen.data.schedules import SCHEDULE_TEMPLATES

__all__ = [
    "DEFAULT_ENEMY_TEMPLATE",
    "LOCATION_NAME_POOL",
    "build_default_registry",
]


def build_default_registry() -> TemplateRegistry:
    """Return a registry with every built-in section loaded."""
    registry = TemplateRegistry()
    registry.init_name_pools(NAME_POOLS, PLACE_NAME_POOLS)
    registry.init_npc_templates(NPC_TEMPLATES)
    registry.init_quest_templates(QUEST_TEMPLATES)
    registry.init_encounter_templates(ENCOUNTER_TEMPLATES)
    registry.init_enemy_templates(ENEMY_TEMPLATES)
    registry.init_dialogue_data(DIALOGUE_SNIPPETS, DIALOGUE_TREES)
    registry.init_item_data(ITEMS, LOCATION_ITEM_POOLS, SHOP_TEMPLATES)
    registry.init_item_generation(
        ITEM_TEMPLATES, LOOT_TABLES,
        materials=MATERIALS, qualities=QUALITIES, styles=STYLES, affixes=ITEM_AFFIXES,
    )
    registry.init_schedule_templates(SCHEDULE_TEMPLATES)
    registry.init_flavor(FLAVOR_WORDS)
    return registry
