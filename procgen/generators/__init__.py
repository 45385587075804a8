"""Entity generators: names, NPCs, quests, encounters, dialogue, items, schedules and whole worlds."""

from procgen.generators.names import NameGenerator
from procgen.generators.npcs import NPCGenerator, NPCSlot
from procgen.generators.quests import QuestGenerator, scale_reward
from procgen.generators.encounters import EncounterGenerator, scale_enemy_stats
from procgen.generators.dialogue import DialogueGenerator, validate_tree
from procgen.generators.items import ItemGenerator, calculate_item_value, scale_stat_by_level
from procgen.generators.schedules import activity_at, activity_summary, covers_full_day
from procgen.generators.world import WorldGenerator

__all__ = [
    "DialogueGenerator",
    "EncounterGenerator",
    "ItemGenerator",
    "NPCGenerator",
    "NPCSlot",
    "NameGenerator",
    "QuestGenerator",
    "WorldGenerator",
    "activity_at",
    "activity_summary",
    "calculate_item_value",
    "covers_full_day",
    "scale_enemy_stats",
    "scale_reward",
    "scale_stat_by_level",
    "validate_tree",
]
