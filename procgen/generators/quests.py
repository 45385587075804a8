"""Quest generator: binds template skeletons to concrete targets and rewards."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Sequence

from procgen.core.enums import TargetType
from procgen.core.models import (
    GeneratedQuest,
    QuestObjective,
    QuestRewardBundle,
    QuestStage,
)
from procgen.core.registry import ITEMS
from procgen.core.seeds import MAX_SEED
from procgen.core.text import substitute_template
from procgen.systems.rng import SeededRandom

if TYPE_CHECKING:
    from procgen.config import GenerationConfig
    from procgen.core.context import GenerationContext, NPCRef
    from procgen.core.models import GeneratedNPC
    from procgen.core.registry import TemplateRegistry
    from procgen.core.templates import ObjectiveTemplate, QuestRewards, QuestTemplate

logger = logging.getLogger(__name__)

DEFAULT_LEVEL_SCALING = 0.2

# Text used when the context offers nothing to bind a token to
_TARGET_FALLBACKS: dict[TargetType, str] = {
    TargetType.NPC: "a local",
    TargetType.ENEMY: "the outlaw",
    TargetType.ITEM: "the goods",
    TargetType.LOCATION: "the old site",
    TargetType.ANY: "the mark",
}
_DESTINATION_FALLBACK = "the next town"


def scale_reward(base: int, level: int, scaling: float = DEFAULT_LEVEL_SCALING) -> int:
    """``floor(base * (1 + (level - 1) * scaling))``, never below zero."""
    multiplier = 1 + (level - 1) * scaling
    # epsilon keeps exact products such as 50 * 1.8 from flooring to 89
    return max(0, math.floor(base * multiplier + 1e-9))


class QuestGenerator:
    """Generates quests from registered templates and a generation context."""

    __slots__ = ("_registry", "_config")

    def __init__(self, registry: TemplateRegistry, config: GenerationConfig | None = None) -> None:
        self._registry = registry
        self._config = config

    @property
    def level_scaling(self) -> float:
        return self._config.quest_level_scaling if self._config else DEFAULT_LEVEL_SCALING

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def templates_for_level(self, level: int) -> list[QuestTemplate]:
        return [
            t for t in self._registry.quest_templates()
            if min(t.level_range) <= level <= max(t.level_range)
        ]

    def templates_for_giver(self, role: str, faction: str | None = None) -> list[QuestTemplate]:
        return [t for t in self._registry.quest_templates() if _giver_allowed(t, role, faction)]

    def templates_by_archetype(self, archetype: str) -> list[QuestTemplate]:
        return self._registry.quest_templates_by_archetype(archetype)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_random(
        self,
        rng: SeededRandom,
        context: GenerationContext,
        giver: GeneratedNPC | NPCRef | None = None,
        level: int | None = None,
    ) -> GeneratedQuest | None:
        """Pick a template valid for *level* (default: player level) and *giver*.

        Returns None when no template qualifies.
        """
        level = context.player_level if level is None else level
        candidates = self.templates_for_level(level)
        if giver is not None:
            faction = getattr(giver, "faction", None)
            candidates = [t for t in candidates if _giver_allowed(t, giver.role, faction)]
        if not candidates:
            logger.debug("No quest template for level %d and giver %s", level, giver and giver.role)
            return None
        template = rng.pick(candidates)
        return self.generate(rng, template, context, giver)

    def generate(
        self,
        rng: SeededRandom,
        template: QuestTemplate | str,
        context: GenerationContext,
        giver: GeneratedNPC | NPCRef | None = None,
        *,
        level: int | None = None,
    ) -> GeneratedQuest:
        """Generate a quest from *template*.

        The parent *rng* advances by one draw (the quest seed).  *level*
        pins the quest level (clamped to the template range) instead of
        drawing it.  A template that can reward items needs the item
        catalog loaded.
        """
        if isinstance(template, str):
            template = self._registry.quest_template(template)
        if template.rewards.item_chance > 0:
            self._registry.require(ITEMS)

        quest_seed = rng.int(0, MAX_SEED)
        qrng = SeededRandom(quest_seed)

        used: set[str] = set()
        if giver is not None:
            used.add(giver.id)

        variables: dict[str, Any] = {
            "giver": giver.name if giver is not None else "someone",
            "giver_id": giver.id if giver is not None else "",
            "location": context.location_label("the frontier"),
            "region": context.region_label("these parts"),
            "player": "stranger",
        }
        target_names: dict[str, str] = {}
        location_ids: list[str] = []

        # The primary target follows the first objective so titles like
        # "Wanted: {{target}}" name what the player is sent after.
        lead = _first_objective(template)
        lead_type = lead.target_type if lead else TargetType.ANY
        primary = _pick_target(qrng, context, lead_type, lead.target_tags if lead else (), used)
        _bind(variables, "target", primary, _TARGET_FALLBACKS[lead_type])
        if primary is not None:
            target_names[primary.id] = primary.name

        destination = _pick_target(qrng, context, TargetType.LOCATION, (), used)
        _bind(variables, "destination", destination, _DESTINATION_FALLBACK)
        if destination is not None:
            location_ids.append(destination.id)

        title = substitute_template(qrng.pick(template.title_templates), variables)
        description = substitute_template(qrng.pick(template.description_templates), variables)

        stages: list[QuestStage] = []
        for stage_index, stage_template in enumerate(template.stages):
            objectives = []
            for obj_index, obj_template in enumerate(stage_template.objectives):
                reuse_primary = stage_index == 0 and obj_index == 0
                objective, ref = self._build_objective(
                    qrng, context, obj_template, variables, used,
                    index=stage_index * 100 + obj_index,
                    primary=primary if reuse_primary else None,
                )
                if ref is not None:
                    target_names[ref.id] = ref.name
                    if obj_template.target_type is TargetType.LOCATION and ref.id not in location_ids:
                        location_ids.append(ref.id)
                objectives.append(objective)

            stages.append(QuestStage(
                id=f"stage_{stage_index}_{quest_seed:x}",
                title=substitute_template(stage_template.title_template, variables),
                description=substitute_template(stage_template.description_template, variables),
                objectives=objectives,
                on_start_text=_maybe(stage_template.on_start_text_template, variables),
                on_complete_text=_maybe(stage_template.on_complete_text_template, variables),
            ))

        if level is None:
            low, high = sorted(template.level_range)
            level = qrng.int(low, high)
        else:
            level = max(min(template.level_range), min(level, max(template.level_range)))
        rewards = self._roll_rewards(qrng, template.rewards, level)

        quest = GeneratedQuest(
            id=f"quest_{template.id}_{quest_seed:x}",
            template_id=template.id,
            archetype=template.archetype,
            quest_type=template.quest_type,
            title=title,
            description=description,
            stages=stages,
            rewards=rewards,
            level=level,
            seed=quest_seed,
            giver_id=giver.id if giver is not None else None,
            giver_name=giver.name if giver is not None else None,
            target_ids=list(target_names),
            target_names=target_names,
            location_ids=location_ids,
            tags=list(template.tags),
            repeatable=template.repeatable,
            cooldown_hours=template.cooldown_hours,
        )
        logger.debug("Generated quest %s (%s, level %d)", quest.id, quest.title, level)
        return quest

    def _build_objective(
        self,
        rng: SeededRandom,
        context: GenerationContext,
        template: ObjectiveTemplate,
        quest_vars: dict[str, Any],
        used: set[str],
        *,
        index: int,
        primary=None,
    ):
        obj_vars = dict(quest_vars)
        ref = primary
        if ref is None:
            ref = _pick_target(rng, context, template.target_type, template.target_tags, used)
            _bind(obj_vars, "target", ref, _TARGET_FALLBACKS[template.target_type])

        low, high = sorted(template.count_range)
        count = rng.int(low, high)
        obj_vars["count"] = count

        objective = QuestObjective(
            id=f"obj_{index}",
            type=template.type,
            description=substitute_template(template.description_template, obj_vars),
            target_type=template.target_type.value,
            count=count,
            optional=template.optional,
            target_id=ref.id if ref is not None else None,
            target_name=ref.name if ref is not None else None,
            hint=_maybe(template.hint_template, obj_vars),
        )
        return objective, ref

    def _roll_rewards(self, rng: SeededRandom, rewards: QuestRewards, level: int) -> QuestRewardBundle:
        scaling = self.level_scaling
        xp = scale_reward(rng.int(*sorted(rewards.xp_range)), level, scaling)
        gold = scale_reward(rng.int(*sorted(rewards.gold_range)), level, scaling)

        items: list[str] = []
        if rng.bool(rewards.item_chance):
            candidates = self._reward_items(rewards.item_tags)
            if candidates:
                items.append(rng.pick(candidates))

        reputation = {}
        for faction, bounds in rewards.reputation_impact.items():
            low, high = sorted(bounds)
            reputation[faction] = rng.int(low, high)

        return QuestRewardBundle(xp=xp, gold=gold, items=items, reputation_changes=reputation)

    def _reward_items(self, tags: Sequence[str]) -> list[str]:
        wanted = set(tags)
        return [
            item.id for item in self._registry.items()
            if not wanted or wanted.intersection(item.tags)
        ]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _giver_allowed(template: QuestTemplate, role: str, faction: str | None) -> bool:
    if template.giver_roles and role not in template.giver_roles:
        return False
    if faction is not None and template.giver_factions and faction not in template.giver_factions:
        return False
    return True


def _first_objective(template: QuestTemplate) -> ObjectiveTemplate | None:
    for stage in template.stages:
        if stage.objectives:
            return stage.objectives[0]
    return None


def _candidates(context: GenerationContext, target_type: TargetType) -> list:
    if target_type is TargetType.NPC:
        return list(context.available_npcs)
    if target_type is TargetType.ITEM:
        return list(context.available_items)
    if target_type is TargetType.LOCATION:
        return list(context.available_locations)
    if target_type is TargetType.ENEMY:
        return list(context.available_enemies)
    return [*context.available_npcs, *context.available_items, *context.available_locations]


def _pick_target(
    rng: SeededRandom,
    context: GenerationContext,
    target_type: TargetType,
    tags: Sequence[str],
    used: set[str],
):
    """Bind a reference entity not used yet in this quest, preferring tag matches.

    No draw is made when nothing qualifies.
    """
    pool = [ref for ref in _candidates(context, target_type) if ref.id not in used]
    if tags:
        wanted = set(tags)
        tagged = [ref for ref in pool if wanted.intersection(ref.tags)]
        pool = tagged or pool
    if not pool:
        return None
    ref = rng.pick(pool)
    used.add(ref.id)
    return ref


def _bind(variables: dict[str, Any], key: str, ref, fallback: str) -> None:
    variables[key] = ref.name if ref is not None else fallback
    variables[f"{key}_id"] = ref.id if ref is not None else ""


def _maybe(template: str | None, variables: dict[str, Any]) -> str | None:
    return substitute_template(template, variables) if template else None
