"""Built-in encounter and enemy templates."""

from __future__ import annotations

from procgen.core.templates import (
    EncounterEnemy,
    EncounterTemplate,
    EnemyNamePool,
    EnemyStats,
    EnemyTemplate,
    LevelScaling,
)

_ALL_DAY = ("morning", "afternoon", "evening", "night")
_DRY = ("desert", "badlands", "scrubland")

# Stand-in used when an encounter names an enemy id that was never registered
DEFAULT_ENEMY_TEMPLATE = EnemyTemplate(
    id="default",
    name="Unknown Hostile",
    base_stats=EnemyStats(health=25, damage=8, armor=2, accuracy=70, evasion=10),
    scaling=LevelScaling(
        health_per_level=1.15, damage_per_level=1.12, armor_per_level=1.08,
        accuracy_per_level=2.0, evasion_per_level=1.0,
    ),
    name_pool=EnemyNamePool(prefixes=("Hostile", "Aggressive", "Wild")),
    loot_table_id="generic_loot",
    behavior_tags=("aggressive", "melee"),
    factions=("neutral",),
    combat_tags=("unknown",),
    xp_modifier=1.0,
    min_level=1,
    max_level=10,
)


ENEMY_TEMPLATES: list[EnemyTemplate] = [
    # -- outlaws --
    EnemyTemplate(
        id="bandit_thug",
        name="Bandit Thug",
        description="A brute with a club and a grudge.",
        base_stats=EnemyStats(health=25, damage=6, armor=1, accuracy=60, evasion=5),
        scaling=LevelScaling(
            health_per_level=1.15, damage_per_level=1.10, armor_per_level=1.05,
            accuracy_per_level=2.0, evasion_per_level=1.0,
        ),
        name_pool=EnemyNamePool(
            prefixes=("Dirty", "Mean", "Ugly", "Scarred", "One-Eyed", "Drunk"),
            titles=("Thug", "Brute", "Heavy"),
        ),
        loot_table_id="bandit_common",
        behavior_tags=("aggressive", "melee"),
        factions=("desperados",),
        combat_tags=("humanoid", "outlaw", "common"),
        xp_modifier=0.9,
        min_level=1,
        max_level=6,
    ),
    EnemyTemplate(
        id="bandit_gunman",
        name="Bandit Gunman",
        description="A road agent with a pistol and bad intentions.",
        base_stats=EnemyStats(health=30, damage=8, armor=2, accuracy=70, evasion=10),
        name_pool=EnemyNamePool(
            prefixes=("Quick", "Shifty", "Dusty", "Crooked"),
            titles=("Gunman", "Shooter", "Pistolero"),
            suffixes=("the Kid", "Two-Guns"),
        ),
        loot_table_id="bandit_common",
        behavior_tags=("ranged", "cover"),
        factions=("desperados",),
        combat_tags=("humanoid", "outlaw", "gunslinger"),
        xp_modifier=1.0,
        min_level=1,
        max_level=8,
    ),
    EnemyTemplate(
        id="bandit_sharpshooter",
        name="Bandit Sharpshooter",
        description="A rifleman who prefers the high ground.",
        base_stats=EnemyStats(health=25, damage=14, armor=1, accuracy=85, evasion=15),
        scaling=LevelScaling(damage_per_level=1.14, accuracy_per_level=1.5),
        name_pool=EnemyNamePool(
            prefixes=("Hawkeye", "Steady", "Silent"),
            titles=("Rifleman", "Marksman"),
            suffixes=("from the Ridge",),
        ),
        loot_table_id="bandit_rare",
        behavior_tags=("ranged", "sniper", "cautious"),
        factions=("desperados",),
        combat_tags=("humanoid", "outlaw", "sniper"),
        xp_modifier=1.3,
        min_level=2,
        max_level=10,
    ),
    EnemyTemplate(
        id="bandit_leader",
        name="Bandit Leader",
        description="The boss of the outfit, meaner than the rest combined.",
        base_stats=EnemyStats(health=50, damage=12, armor=5, accuracy=75, evasion=12),
        scaling=LevelScaling(health_per_level=1.18, damage_per_level=1.12, armor_per_level=1.10),
        name_pool=EnemyNamePool(
            prefixes=("Black", "Mad", "Bloody", "Iron"),
            titles=("Boss", "Chief", "Captain"),
            suffixes=("the Butcher", "of the Badlands"),
        ),
        loot_table_id="bandit_boss",
        behavior_tags=("leader", "ranged", "aggressive"),
        factions=("desperados",),
        combat_tags=("humanoid", "outlaw", "boss"),
        xp_modifier=2.0,
        min_level=3,
        max_level=10,
    ),
    # -- wildlife --
    EnemyTemplate(
        id="desert_wolf",
        name="Desert Wolf",
        description="A lean, hungry wolf.",
        base_stats=EnemyStats(health=18, damage=6, armor=0, accuracy=75, evasion=20),
        scaling=LevelScaling(health_per_level=1.12, damage_per_level=1.10, armor_per_level=1.0),
        name_pool=EnemyNamePool(prefixes=("Mangy", "Hungry", "Grey", "Scarred")),
        loot_table_id="wildlife_pelt",
        behavior_tags=("pack", "melee", "flanking"),
        factions=("wildlife",),
        combat_tags=("beast", "wildlife"),
        xp_modifier=0.8,
        min_level=1,
        max_level=6,
    ),
    EnemyTemplate(
        id="coyote",
        name="Coyote",
        base_stats=EnemyStats(health=12, damage=4, armor=0, accuracy=70, evasion=25),
        scaling=LevelScaling(health_per_level=1.10, damage_per_level=1.08, armor_per_level=1.0),
        name_pool=EnemyNamePool(prefixes=("Yipping", "Skulking", "Rabid")),
        loot_table_id="wildlife_pelt",
        behavior_tags=("pack", "melee", "cowardly"),
        factions=("wildlife",),
        combat_tags=("beast", "wildlife"),
        xp_modifier=0.6,
        min_level=1,
        max_level=4,
    ),
    EnemyTemplate(
        id="rattlesnake",
        name="Rattlesnake",
        base_stats=EnemyStats(health=8, damage=10, armor=0, accuracy=80, evasion=30),
        scaling=LevelScaling(health_per_level=1.08, damage_per_level=1.12, armor_per_level=1.0),
        name_pool=EnemyNamePool(prefixes=("Diamondback", "Sidewinder", "Coiled")),
        loot_table_id="wildlife_venom",
        behavior_tags=("ambush", "poison"),
        factions=("wildlife",),
        combat_tags=("beast", "wildlife", "venomous"),
        xp_modifier=0.7,
        min_level=1,
        max_level=5,
    ),
    EnemyTemplate(
        id="giant_scorpion",
        name="Giant Scorpion",
        base_stats=EnemyStats(health=20, damage=9, armor=4, accuracy=70, evasion=10),
        name_pool=EnemyNamePool(prefixes=("Bark", "Black", "Sand")),
        loot_table_id="wildlife_venom",
        behavior_tags=("ambush", "poison", "melee"),
        factions=("wildlife",),
        combat_tags=("beast", "wildlife", "venomous"),
        xp_modifier=0.9,
        min_level=2,
        max_level=7,
    ),
    # -- machines --
    EnemyTemplate(
        id="rogue_automaton",
        name="Rogue Automaton",
        description="A clockwork laborer whose governor has long since failed.",
        base_stats=EnemyStats(health=45, damage=10, armor=8, accuracy=65, evasion=3),
        scaling=LevelScaling(health_per_level=1.16, damage_per_level=1.10, armor_per_level=1.12),
        name_pool=EnemyNamePool(
            prefixes=("Rusted", "Sparking", "Broken"),
            suffixes=("Mk. II", "Unit 7"),
        ),
        loot_table_id="scrap_parts",
        behavior_tags=("relentless", "melee"),
        factions=("machines",),
        combat_tags=("construct", "mechanical"),
        xp_modifier=1.4,
        min_level=3,
        max_level=10,
    ),
]


ENCOUNTER_TEMPLATES: list[EncounterTemplate] = [
    EncounterTemplate(
        id="lone_bandit",
        name="Lone Bandit",
        description_template="A {{adjective}} figure steps out from behind {{cover}} on the {{terrain}}, gun drawn.",
        enemies=(EncounterEnemy(enemy_id_or_tag="bandit_gunman", count_range=(1, 1), level_scale=0.8),),
        difficulty_range=(1, 2),
        valid_biomes=("desert", "badlands", "grassland", "scrubland", "mountain"),
        valid_location_types=("wilderness", "trail", "road"),
        valid_time_of_day=_ALL_DAY,
        faction_tags=("desperados",),
        loot_table_id="bandit_common",
        xp_range=(15, 25),
        gold_range=(5, 15),
        tags=("combat", "bandit", "easy"),
    ),
    EncounterTemplate(
        id="bandit_ambush",
        name="Bandit Ambush",
        description_template="{{enemy_count}} bandits in {{clothing}} rise from {{cover}} near {{location}}.",
        enemies=(
            EncounterEnemy(enemy_id_or_tag="bandit_thug", count_range=(1, 2), level_scale=0.9),
            EncounterEnemy(enemy_id_or_tag="bandit_gunman", count_range=(1, 2), level_scale=1.0),
        ),
        difficulty_range=(2, 4),
        valid_biomes=_DRY + ("mountain",),
        valid_location_types=("trail", "road", "canyon"),
        valid_time_of_day=("morning", "afternoon", "evening"),
        faction_tags=("desperados",),
        loot_table_id="bandit_common",
        xp_range=(40, 70),
        gold_range=(15, 35),
        tags=("combat", "bandit", "ambush"),
    ),
    EncounterTemplate(
        id="sharpshooter_nest",
        name="Sharpshooter Nest",
        description_template="A rifle cracks from the {{terrain}}. Someone has the high ground.",
        enemies=(
            EncounterEnemy(enemy_id_or_tag="bandit_sharpshooter", count_range=(1, 2)),
            EncounterEnemy(enemy_id_or_tag="bandit_gunman", count_range=(0, 1)),
        ),
        difficulty_range=(3, 5),
        valid_biomes=("badlands", "mountain", "canyon"),
        valid_location_types=("trail", "canyon"),
        valid_time_of_day=("morning", "afternoon"),
        faction_tags=("desperados",),
        loot_table_id="bandit_rare",
        xp_range=(50, 90),
        gold_range=(20, 40),
        tags=("combat", "bandit", "ranged"),
    ),
    EncounterTemplate(
        id="gang_raid",
        name="Gang Raid",
        description_template="The whole gang rides down on {{location}}: {{enemy_count}} guns and a boss who wants blood.",
        enemies=(
            EncounterEnemy(enemy_id_or_tag="bandit_thug", count_range=(2, 4), level_scale=1.0),
            EncounterEnemy(enemy_id_or_tag="bandit_gunman", count_range=(2, 3), level_scale=1.1),
            EncounterEnemy(enemy_id_or_tag="bandit_leader", count_range=(1, 1), level_scale=1.2),
        ),
        difficulty_range=(5, 7),
        valid_biomes=_DRY + ("grassland",),
        valid_location_types=("town", "ranch", "outpost", "road"),
        valid_time_of_day=("evening", "night"),
        faction_tags=("desperados",),
        loot_table_id="bandit_boss",
        xp_range=(120, 200),
        gold_range=(50, 100),
        tags=("combat", "bandit", "boss", "hard"),
    ),
    EncounterTemplate(
        id="wolf_pack",
        name="Wolf Pack",
        description_template="Yellow eyes circle in the {{terrain}}. {{enemy_count}} wolves, and they are hungry.",
        enemies=(EncounterEnemy(enemy_id_or_tag="desert_wolf", count_range=(2, 4), level_scale=0.9),),
        difficulty_range=(2, 4),
        valid_biomes=("desert", "mountain", "grassland", "forest"),
        valid_location_types=("wilderness", "trail"),
        valid_time_of_day=("evening", "night"),
        faction_tags=("wildlife",),
        loot_table_id="wildlife_pelt",
        xp_range=(30, 55),
        gold_range=(0, 5),
        tags=("combat", "wildlife", "pack"),
    ),
    EncounterTemplate(
        id="coyote_pack",
        name="Coyote Pack",
        description_template="A chorus of yips rises from the {{terrain}}.",
        enemies=(EncounterEnemy(enemy_id_or_tag="coyote", count_range=(2, 5), level_scale=0.8),),
        difficulty_range=(1, 3),
        valid_biomes=_DRY + ("grassland",),
        valid_location_types=("wilderness", "trail", "ranch"),
        valid_time_of_day=("evening", "night"),
        faction_tags=("wildlife",),
        loot_table_id="wildlife_pelt",
        xp_range=(15, 35),
        gold_range=(0, 0),
        tags=("combat", "wildlife", "pack", "easy"),
    ),
    EncounterTemplate(
        id="scorpion_swarm",
        name="Scorpion Swarm",
        description_template="The sand shifts under your boots. Scorpions, {{enemy_count}} of them.",
        enemies=(EncounterEnemy(enemy_id_or_tag="giant_scorpion", count_range=(2, 4), level_scale=0.9),),
        difficulty_range=(2, 4),
        valid_biomes=("desert",),
        valid_location_types=("wilderness",),
        valid_time_of_day=("night",),
        faction_tags=("wildlife",),
        loot_table_id="wildlife_venom",
        xp_range=(25, 45),
        gold_range=(0, 0),
        tags=("combat", "wildlife", "venomous"),
    ),
    EncounterTemplate(
        id="snake_nest",
        name="Snake Nest",
        description_template="A dry rattle sounds from {{cover}}.",
        enemies=(EncounterEnemy(enemy_id_or_tag="rattlesnake", count_range=(1, 3), level_scale=0.8),),
        difficulty_range=(1, 2),
        valid_biomes=_DRY,
        valid_location_types=("wilderness", "trail", "ruin"),
        valid_time_of_day=("morning", "afternoon"),
        faction_tags=("wildlife",),
        loot_table_id="wildlife_venom",
        xp_range=(10, 25),
        gold_range=(0, 0),
        tags=("combat", "wildlife", "easy"),
    ),
    EncounterTemplate(
        id="rogue_machine",
        name="Rogue Machine",
        description_template="Something heavy clanks through the {{terrain}}, trailing steam.",
        enemies=(
            EncounterEnemy(enemy_id_or_tag="rogue_automaton", count_range=(1, 2), level_scale=1.0),
            EncounterEnemy(enemy_id_or_tag="scrap_drone", count_range=(0, 2), level_scale=0.8),
        ),
        difficulty_range=(4, 6),
        valid_location_types=("mine", "ruin", "wilderness"),
        faction_tags=("machines",),
        loot_table_id="scrap_parts",
        xp_range=(60, 110),
        gold_range=(5, 25),
        tags=("combat", "mechanical"),
    ),
]
