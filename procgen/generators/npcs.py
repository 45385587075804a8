"""NPC generator: instantiates role templates into concrete characters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

from procgen.core.enums import GENDERS, Gender
from procgen.core.errors import UnknownTemplateError
from procgen.core.models import GeneratedNPC, Personality
from procgen.core.seeds import MAX_SEED
from procgen.core.templates import PERSONALITY_TRAITS, NPCTemplate
from procgen.core.text import substitute_template
from procgen.generators.names import NameGenerator
from procgen.systems.rng import SeededRandom

if TYPE_CHECKING:
    from procgen.config import GenerationConfig
    from procgen.core.context import GenerationContext
    from procgen.core.registry import TemplateRegistry

logger = logging.getLogger(__name__)

NOTABLE_IMPORTANCE = 0.5
TITLE_IMPORTANCE = 0.5

_PRONOUNS: dict[Gender, tuple[str, str]] = {
    Gender.MALE: ("he", "his"),
    Gender.FEMALE: ("she", "her"),
    Gender.NEUTRAL: ("they", "their"),
}

# Used when the registry carries no flavor word list for the key
_FLAVOR_FALLBACKS: dict[str, str] = {
    "hometown": "back east",
    "relative": "kin",
    "event": "hard times",
}


@dataclass(frozen=True, slots=True)
class NPCSlot:
    """One staffing requirement of a building: *count* NPCs of *role*."""

    role: str
    count: int = 1
    required: bool = False


class NPCGenerator:
    """Generates NPCs from registered templates."""

    __slots__ = ("_registry", "_config", "_names")

    def __init__(self, registry: TemplateRegistry, config: GenerationConfig | None = None) -> None:
        self._registry = registry
        self._config = config
        self._names = NameGenerator(registry, config)

    @property
    def names(self) -> NameGenerator:
        return self._names

    # ------------------------------------------------------------------
    # Template lookups
    # ------------------------------------------------------------------

    def templates_for_role(self, role: str) -> list[NPCTemplate]:
        return self._registry.npc_templates_for_role(role)

    def templates_for_location(self, location_type: str) -> list[NPCTemplate]:
        return self._registry.npc_templates_for_location(location_type)

    def has_templates_for_location(self, location_type: str) -> bool:
        return bool(self.templates_for_location(location_type))

    # ------------------------------------------------------------------
    # Single NPC
    # ------------------------------------------------------------------

    def generate(
        self,
        rng: SeededRandom,
        template: NPCTemplate | str,
        context: GenerationContext,
        *,
        gender: Gender | None = None,
        used_names: set[str] | None = None,
    ) -> GeneratedNPC | None:
        """Generate one NPC.

        The parent *rng* advances by exactly one draw (the NPC seed); all
        other draws come from a child stream.  Returns None only when
        *used_names* is given and no unique name could be found; the new
        name is added to *used_names* (lower-cased) on success.
        """
        if isinstance(template, str):
            template = self._registry.npc_template(template)

        npc_seed = rng.int(0, MAX_SEED)
        npc_rng = SeededRandom(npc_seed)

        if gender is None:
            gender = npc_rng.weighted_pick(GENDERS, template.gender_distribution)

        nickname_chance = self._config.nickname_chance if self._config else 0.3
        include_nickname = npc_rng.bool(nickname_chance)
        include_title = template.min_importance > TITLE_IMPORTANCE
        name_options = dict(gender=gender, include_nickname=include_nickname, include_title=include_title)

        if used_names is not None:
            name = self._names.generate_unique(npc_rng, template.name_origins, used_names, **name_options)
            if name is None:
                logger.debug("No unique name left for template %s", template.id)
                return None
            used_names.add(name.full_name.lower())
        else:
            name = self._names.generate_weighted(npc_rng, template.name_origins, **name_options)

        faction = npc_rng.pick(template.allowed_factions) if template.allowed_factions else "neutral"

        ranges = template.personality
        traits = {}
        for trait in PERSONALITY_TRAITS:
            low, high = sorted(getattr(ranges, trait))
            traits[trait] = npc_rng.float(low, high)
        personality = Personality(**traits)

        pronoun, possessive = _PRONOUNS[gender]
        variables = {
            "name": name.full_name,
            "first_name": name.first_name,
            "last_name": name.last_name,
            "role": template.role,
            "faction": faction,
            "gender": gender.value,
            "pronoun": pronoun,
            "possessive": possessive,
            "location": context.location_label("the frontier"),
            "region": context.region_label("these parts"),
        }
        variables.update(self._draw_flavor(npc_rng))

        backstory = ""
        if template.backstory_templates:
            backstory = substitute_template(npc_rng.pick(template.backstory_templates), variables)
        description = template.description
        if template.description_templates:
            description = substitute_template(npc_rng.pick(template.description_templates), variables)

        is_quest_giver = npc_rng.bool(template.quest_giver_chance)
        has_shop = npc_rng.bool(template.shop_chance)

        return GeneratedNPC(
            id=f"npc_{template.id}_{npc_seed:x}",
            template_id=template.id,
            name=name.full_name,
            name_details=name,
            role=template.role,
            faction=faction,
            gender=gender,
            personality=personality,
            backstory=backstory,
            description=description,
            is_quest_giver=is_quest_giver,
            has_shop=has_shop,
            seed=npc_seed,
            dialogue_tree_ids=list(template.dialogue_tree_ids),
            tags=list(template.tags),
            location_id=context.location_id,
        )

    def generate_for_role(self, rng: SeededRandom, role: str, context: GenerationContext, **options) -> GeneratedNPC | None:
        """Pick a template registered for *role* and generate from it."""
        templates = self.templates_for_role(role)
        if not templates:
            raise UnknownTemplateError("NPC role", role)
        return self.generate(rng, rng.pick(templates), context, **options)

    def _draw_flavor(self, rng: SeededRandom) -> dict[str, object]:
        flavor: dict[str, object] = {"years": rng.int(2, 30)}
        for key, fallback in _FLAVOR_FALLBACKS.items():
            if self._registry.has_flavor(key):
                flavor[key] = rng.pick(self._registry.flavor_words(key))
            else:
                flavor[key] = fallback
        return flavor

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    def generate_for_location(
        self,
        rng: SeededRandom,
        location_type: str,
        context: GenerationContext,
        background: int,
        notable: int,
        *,
        existing_names: Iterable[str] = (),
    ) -> list[GeneratedNPC]:
        """Populate a location: *notable* important NPCs first, then *background*.

        Full names are unique within the batch (and against *existing_names*).
        A slot whose unique-name search is exhausted is skipped.
        """
        valid = self.templates_for_location(location_type)
        if not valid:
            logger.warning("No NPC templates valid for location type %r", location_type)
            return []

        notable_pool = [t for t in valid if t.min_importance >= NOTABLE_IMPORTANCE] or valid
        background_pool = [t for t in valid if t.min_importance < NOTABLE_IMPORTANCE] or valid

        used_names = {n.lower() for n in existing_names}
        npcs: list[GeneratedNPC] = []
        for pool, count in ((notable_pool, notable), (background_pool, background)):
            npcs.extend(self._fill(rng, pool, count, context, used_names))

        logger.debug(
            "Generated %d NPCs for %s (%d notable, %d background requested)",
            len(npcs), location_type, notable, background,
        )
        return npcs

    def generate_for_building(
        self,
        rng: SeededRandom,
        slots: Sequence[NPCSlot],
        context: GenerationContext,
        *,
        existing_names: Iterable[str] = (),
    ) -> list[GeneratedNPC]:
        """Staff a building from role slots; a required slot with no template raises."""
        used_names = {n.lower() for n in existing_names}
        npcs: list[GeneratedNPC] = []
        for slot in slots:
            templates = self.templates_for_role(slot.role)
            if not templates:
                if slot.required:
                    raise UnknownTemplateError("NPC role", slot.role)
                logger.warning("No NPC template for optional role %r, slot skipped", slot.role)
                continue
            npcs.extend(self._fill(rng, templates, slot.count, context, used_names))
        return npcs

    def _fill(
        self,
        rng: SeededRandom,
        pool: Sequence[NPCTemplate],
        count: int,
        context: GenerationContext,
        used_names: set[str],
    ) -> list[GeneratedNPC]:
        npcs = []
        for _ in range(count):
            template = rng.pick(pool)
            npc = self.generate(rng, template, context, used_names=used_names)
            if npc is None:
                continue
            npcs.append(npc)
        return npcs
