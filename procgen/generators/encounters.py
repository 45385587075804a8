"""Encounter generator: level-scaled enemy groups and encounter triggers."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from procgen.core.enums import TimeOfDay
from procgen.core.models import GeneratedEncounter, GeneratedEnemy
from procgen.core.seeds import MAX_SEED
from procgen.core.templates import EnemyStats
from procgen.core.text import extract_template_variables, substitute_template
from procgen.data.encounters import DEFAULT_ENEMY_TEMPLATE
from procgen.systems.rng import SeededRandom

if TYPE_CHECKING:
    from procgen.config import GenerationConfig
    from procgen.core.context import GenerationContext
    from procgen.core.registry import TemplateRegistry
    from procgen.core.templates import EncounterTemplate, EnemyTemplate

logger = logging.getLogger(__name__)

# Description tokens filled from registry flavor word lists
FLAVOR_TOKENS = ("adjective", "terrain", "cover", "clothing")

MAX_DIFFICULTY = 10
_POWER_PER_LEVEL = 50


def _round(value: float) -> int:
    """Round half away from zero for the non-negative values used here."""
    return math.floor(value + 0.5)


def scale_enemy_stats(template: EnemyTemplate, level: int) -> EnemyStats:
    """Stats of *template* at *level*, before per-enemy variation.

    Health, damage and armor grow multiplicatively per level above 1;
    accuracy and evasion grow additively and cap at 100.
    """
    delta = max(0, level - 1)
    base, scaling = template.base_stats, template.scaling
    return EnemyStats(
        health=_round(base.health * scaling.health_per_level ** delta),
        damage=_round(base.damage * scaling.damage_per_level ** delta),
        armor=_round(base.armor * scaling.armor_per_level ** delta),
        accuracy=min(100, _round(base.accuracy + scaling.accuracy_per_level * delta)),
        evasion=min(100, _round(base.evasion + scaling.evasion_per_level * delta)),
    )


class EncounterGenerator:
    """Filters encounter templates and instantiates them for a context."""

    __slots__ = ("_registry", "_config")

    def __init__(self, registry: TemplateRegistry, config: GenerationConfig | None = None) -> None:
        self._registry = registry
        self._config = config

    # ------------------------------------------------------------------
    # Filters (an empty list on a template means "valid everywhere")
    # ------------------------------------------------------------------

    def for_biome(self, biome: str) -> list[EncounterTemplate]:
        return [t for t in self._registry.encounter_templates() if not t.valid_biomes or biome in t.valid_biomes]

    def for_time_of_day(self, time_of_day: TimeOfDay | str) -> list[EncounterTemplate]:
        tod = TimeOfDay(time_of_day).value
        return [t for t in self._registry.encounter_templates() if not t.valid_time_of_day or tod in t.valid_time_of_day]

    def for_location_type(self, location_type: str) -> list[EncounterTemplate]:
        return [
            t for t in self._registry.encounter_templates()
            if not t.valid_location_types or location_type in t.valid_location_types
        ]

    def for_difficulty(self, min_difficulty: int, max_difficulty: int) -> list[EncounterTemplate]:
        """Templates whose difficulty range overlaps [min_difficulty, max_difficulty]."""
        return [
            t for t in self._registry.encounter_templates()
            if min(t.difficulty_range) <= max_difficulty and max(t.difficulty_range) >= min_difficulty
        ]

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_random(
        self,
        rng: SeededRandom,
        context: GenerationContext,
        *,
        biome: str | None = None,
        location_type: str | None = None,
        time_of_day: TimeOfDay | str | None = None,
        min_difficulty: int = 1,
        max_difficulty: int = MAX_DIFFICULTY,
    ) -> GeneratedEncounter | None:
        """Apply every given filter, then pick uniformly. None when nothing survives."""
        candidates = self.for_difficulty(min_difficulty, max_difficulty)
        if biome is not None:
            allowed = {t.id for t in self.for_biome(biome)}
            candidates = [t for t in candidates if t.id in allowed]
        if location_type is not None:
            allowed = {t.id for t in self.for_location_type(location_type)}
            candidates = [t for t in candidates if t.id in allowed]
        if time_of_day is not None:
            allowed = {t.id for t in self.for_time_of_day(time_of_day)}
            candidates = [t for t in candidates if t.id in allowed]

        if not candidates:
            logger.debug(
                "No encounter for biome=%s location=%s time=%s difficulty=%d-%d",
                biome, location_type, time_of_day, min_difficulty, max_difficulty,
            )
            return None
        return self.generate(rng, rng.pick(candidates), context)

    def generate(
        self,
        rng: SeededRandom,
        template: EncounterTemplate | str,
        context: GenerationContext,
    ) -> GeneratedEncounter:
        if isinstance(template, str):
            template = self._registry.encounter_template(template)

        encounter_seed = rng.int(0, MAX_SEED)
        erng = SeededRandom(encounter_seed)
        player_level = max(1, context.player_level)

        enemies: list[GeneratedEnemy] = []
        for entry in template.enemies:
            low, high = sorted(entry.count_range)
            for _ in range(erng.int(low, high)):
                enemies.append(self._generate_enemy(
                    erng, entry.enemy_id_or_tag, entry.level_scale, player_level, len(enemies),
                ))

        power = sum(e.health + e.damage * 3 + e.armor * 2 for e in enemies)
        difficulty = min(MAX_DIFFICULTY, _round(power / (player_level * _POWER_PER_LEVEL)))

        multiplier = 1 + (player_level - 1) * 0.2
        xp_reward = max(0, _round(erng.int(*sorted(template.xp_range)) * multiplier * (1 + difficulty * 0.1)))
        gold_reward = max(0, _round(erng.int(*sorted(template.gold_range)) * multiplier))

        variables: dict[str, object] = {
            "enemy_count": len(enemies),
            "difficulty": difficulty,
            "location": context.location_label("the area"),
            "region": context.region_label("these parts"),
        }
        used_tokens = set(extract_template_variables(template.description_template))
        for token in FLAVOR_TOKENS:
            if token in used_tokens:
                variables[token] = erng.pick(self._registry.flavor_words(token))
        description = substitute_template(template.description_template, variables)

        encounter = GeneratedEncounter(
            id=f"enc_{encounter_seed:x}",
            template_id=template.id,
            name=template.name,
            description=description,
            enemies=enemies,
            difficulty=difficulty,
            xp_reward=xp_reward,
            gold_reward=gold_reward,
            seed=encounter_seed,
            loot_table_id=template.loot_table_id,
            tags=list(template.tags),
        )
        logger.debug("Generated encounter %s with %d enemies (difficulty %d)", encounter.id, len(enemies), difficulty)
        return encounter

    def _generate_enemy(
        self,
        rng: SeededRandom,
        enemy_id: str,
        level_scale: float,
        player_level: int,
        index: int,
    ) -> GeneratedEnemy:
        template = self._registry.enemy_template(enemy_id) or DEFAULT_ENEMY_TEMPLATE

        base_level = max(1, _round(player_level * level_scale))
        level = max(template.min_level, min(template.max_level, base_level))
        stats = scale_enemy_stats(template, level)

        health = _vary(rng, stats.health, 0.1)
        damage = _vary(rng, stats.damage, 0.1)
        armor = _vary(rng, stats.armor, 0.05)
        accuracy = min(100, _vary(rng, stats.accuracy, 0.05))
        evasion = min(100, _vary(rng, stats.evasion, 0.05))

        name = _enemy_name(rng, template)

        base_xp = _round((health * 0.5 + damage * 2 + armor * 1.5) * template.xp_modifier)
        xp_value = _round(base_xp * (1 + (level - 1) * 0.15))

        return GeneratedEnemy(
            id=f"enemy_{index}_{rng.int(0, 0xFFFF):x}",
            enemy_type=enemy_id,
            template_id=template.id,
            name=name[:1].upper() + name[1:],
            level=level,
            health=health,
            max_health=health,
            damage=damage,
            armor=armor,
            accuracy=accuracy,
            evasion=evasion,
            xp_value=xp_value,
            behavior_tags=list(template.behavior_tags),
            combat_tags=list(template.combat_tags),
            loot_table_id=template.loot_table_id,
        )

    # ------------------------------------------------------------------
    # Triggering
    # ------------------------------------------------------------------

    def encounter_chance(self, context: GenerationContext, base_chance: float | None = None) -> float:
        """Probability that travel under *context* triggers an encounter."""
        cfg = self._config
        chance = base_chance if base_chance is not None else (cfg.encounter_base_chance if cfg else 0.15)
        night_start = cfg.night_start_hour if cfg else 20.0
        night_end = cfg.night_end_hour if cfg else 6.0

        if context.game_hour < night_end or context.game_hour > night_start:
            chance *= cfg.night_encounter_multiplier if cfg else 1.5

        for tension in context.faction_tensions.values():
            if tension > 0.5:
                chance *= 1 + (tension - 0.5)

        if "gang_war" in context.active_events:
            chance *= 2
        if "law_crackdown" in context.active_events:
            chance *= 0.5

        return min(chance, cfg.max_encounter_chance if cfg else 0.8)

    def should_trigger(self, rng: SeededRandom, context: GenerationContext, base_chance: float | None = None) -> bool:
        return rng.bool(self.encounter_chance(context, base_chance))


def _vary(rng: SeededRandom, value: int, spread: float) -> int:
    return max(1, _round(value * (1 + rng.float(-spread, spread))))


def _enemy_name(rng: SeededRandom, template: EnemyTemplate) -> str:
    pool = template.name_pool
    parts: list[str] = []
    if pool.prefixes and rng.bool(0.5):
        parts.append(rng.pick(pool.prefixes))
    if not parts and pool.titles and rng.bool(0.3):
        parts.append(rng.pick(pool.titles))
    parts.append(template.name)
    if pool.suffixes and rng.bool(0.2):
        parts.append(rng.pick(pool.suffixes))
    return " ".join(parts)
