"""Dialogue generator: snippet selection and conversation trees for NPCs.

Every choice in a generated tree either ends the conversation
(``next_node_id is None``) or points at a node of the same tree.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from procgen.core.errors import GenerationError, UnknownTemplateError
from procgen.core.models import DialogueChoice, DialogueNode, DialogueTree
from procgen.core.seeds import MAX_SEED
from procgen.core.text import substitute_template
from procgen.systems.rng import SeededRandom

if TYPE_CHECKING:
    from procgen.config import GenerationConfig
    from procgen.core.context import GenerationContext
    from procgen.core.models import GeneratedNPC
    from procgen.core.registry import TemplateRegistry
    from procgen.core.templates import DialogueSnippet, DialogueTreeTemplate, NodePattern

logger = logging.getLogger(__name__)

ROOT_NODE_ID = "node_greeting"
SIMPLE_TREE_TEMPLATE_ID = "simple"

# NPCs this friendly never use hostile lines, whatever the snippet's own bounds
HOSTILE_FRIENDLINESS_CUTOFF = 0.7

_NODE_FALLBACK_TEXT = {
    "greeting": "Howdy.",
    "farewell": "Be seein' ya.",
    "rumor": "Ain't heard nothin' interesting.",
    "quest": "Got nothin' for ya right now.",
    "shop": "Take a look around.",
}


def node_id_for(role: str) -> str:
    return f"node_{role}"


def validate_tree(tree: DialogueTree) -> list[str]:
    """Ids of choices pointing at nodes missing from *tree* (empty when well-formed)."""
    dangling = tree.dangling_references()
    if tree.root_node_id not in tree.nodes:
        dangling.append(tree.root_node_id)
    return dangling


class DialogueGenerator:
    """Builds dialogue trees from registered snippets and tree templates."""

    __slots__ = ("_registry", "_config")

    def __init__(self, registry: TemplateRegistry, config: GenerationConfig | None = None) -> None:
        self._registry = registry
        self._config = config

    # ------------------------------------------------------------------
    # Snippets
    # ------------------------------------------------------------------

    def snippets_for_npc(
        self, npc: GeneratedNPC, category: str, time_of_day: str | None = None,
    ) -> list[DialogueSnippet]:
        """Snippets of *category* compatible with the NPC's role, faction and personality.

        When *time_of_day* is given, snippets restricted to other times are left out.
        """
        return [
            s for s in self._registry.snippets_by_category(category)
            if _fits(s, npc) and _at_time(s, time_of_day)
        ]

    def select_snippet(
        self,
        rng: SeededRandom,
        category: str,
        npc: GeneratedNPC,
        tags: Sequence[str] = (),
        time_of_day: str | None = None,
    ) -> DialogueSnippet | None:
        """Pick one compatible snippet, preferring any carrying one of *tags*.

        No draw is made when nothing fits.
        """
        candidates = self.snippets_for_npc(npc, category, time_of_day)
        if tags:
            wanted = set(tags)
            tagged = [s for s in candidates if wanted.intersection(s.tags)]
            candidates = tagged or candidates
        if not candidates:
            return None
        return rng.pick(candidates)

    def trees_for_role(self, role: str) -> list[DialogueTreeTemplate]:
        return [t for t in self._registry.dialogue_tree_templates() if not t.valid_roles or role in t.valid_roles]

    # ------------------------------------------------------------------
    # Trees
    # ------------------------------------------------------------------

    def generate_simple_tree(
        self,
        rng: SeededRandom,
        npc: GeneratedNPC,
        context: GenerationContext,
        *,
        include_rumors: bool = True,
        include_quest: bool = True,
        include_shop: bool = True,
    ) -> DialogueTree:
        """Greeting hub with optional rumor, quest and shop branches.

        Quest and shop branches are attached only when the NPC is a quest
        giver or runs a shop.
        """
        tree_seed = rng.int(0, MAX_SEED)
        trng = SeededRandom(tree_seed)
        variables = _variables(npc, context)

        with_quest = include_quest and npc.is_quest_giver
        with_shop = include_shop and npc.has_shop

        greeting = self._speak(trng, "greeting", npc, variables, "Howdy, stranger.")
        choices = []
        if include_rumors:
            choices.append(DialogueChoice("choice_rumor", "Heard any news?", "node_rumor", ["rumor"]))
        if with_quest:
            choices.append(DialogueChoice("choice_quest", "Got any work?", "node_quest", ["quest"]))
        if with_shop:
            choices.append(DialogueChoice("choice_shop", "Let's see what you got.", "node_shop", ["shop"]))
        choices.append(DialogueChoice("choice_farewell", "Goodbye.", None, ["farewell"]))

        nodes = {ROOT_NODE_ID: self._node(ROOT_NODE_ID, greeting, npc, choices, ["greeting"])}

        if include_rumors:
            text = self._speak(trng, "rumor", npc, variables, "Ain't heard nothin' worth repeatin'.")
            nodes["node_rumor"] = self._node("node_rumor", text, npc, [
                DialogueChoice("choice_rumor_back", "Thanks.", ROOT_NODE_ID, ["back"]),
            ], ["rumor"])

        if with_quest:
            text = self._speak(trng, "quest_offer", npc, variables, "I might have somethin' for ya...")
            nodes["node_quest"] = self._node("node_quest", text, npc, [
                DialogueChoice("choice_quest_accept", "I'll do it.", None, ["accept_quest"]),
                DialogueChoice("choice_quest_decline", "Not interested.", ROOT_NODE_ID, ["decline"]),
            ], ["quest"])

        if with_shop:
            text = self._speak(trng, "shop_welcome", npc, variables, "Take a look at what I got.")
            nodes["node_shop"] = self._node("node_shop", text, npc, [
                DialogueChoice("choice_shop_open", "[Open Shop]", None, ["open_shop"]),
                DialogueChoice("choice_shop_back", "Maybe later.", ROOT_NODE_ID, ["back"]),
            ], ["shop"])

        return DialogueTree(
            id=f"dialogue_{tree_seed:x}",
            template_id=SIMPLE_TREE_TEMPLATE_ID,
            root_node_id=ROOT_NODE_ID,
            nodes=nodes,
            npc_id=npc.id,
            npc_name=npc.name,
            seed=tree_seed,
            tags=["simple"],
        )

    def build_tree(
        self,
        rng: SeededRandom,
        template: DialogueTreeTemplate | str,
        npc: GeneratedNPC,
        context: GenerationContext,
    ) -> DialogueTree:
        """Instantiate a tree template for *npc*.

        One node per node pattern, keyed ``node_<role>``.  Choices leading
        to a role the template has no node for are dropped; a node left
        without choices gets a closing "Goodbye." unless it is the farewell.
        """
        if isinstance(template, str):
            template = self._registry.dialogue_tree_template(template)
        if not template.node_patterns:
            raise GenerationError(f"Dialogue tree template {template.id!r} has no node patterns")

        tree_seed = rng.int(0, MAX_SEED)
        trng = SeededRandom(tree_seed)
        variables = _variables(npc, context)
        roles = {pattern.role for pattern in template.node_patterns}

        nodes: dict[str, DialogueNode] = {}
        for index, pattern in enumerate(template.node_patterns):
            node = self._pattern_node(trng, pattern, index, npc, variables, roles)
            nodes[node.id] = node

        root = ROOT_NODE_ID if ROOT_NODE_ID in nodes else next(iter(nodes))
        return DialogueTree(
            id=f"dialogue_{tree_seed:x}",
            template_id=template.id,
            root_node_id=root,
            nodes=nodes,
            npc_id=npc.id,
            npc_name=npc.name,
            seed=tree_seed,
            tags=list(template.tags),
        )

    def generate_for_npc(self, rng: SeededRandom, npc: GeneratedNPC, context: GenerationContext) -> DialogueTree:
        """The NPC's own tree template when one is registered, else a simple tree."""
        for template_id in npc.dialogue_tree_ids:
            try:
                template = self._registry.dialogue_tree_template(template_id)
            except UnknownTemplateError:
                logger.warning("NPC %s names unknown dialogue tree %r", npc.id, template_id)
                continue
            return self.build_tree(rng, template, npc, context)
        return self.generate_simple_tree(rng, npc, context)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _pattern_node(
        self,
        rng: SeededRandom,
        pattern: NodePattern,
        index: int,
        npc: GeneratedNPC,
        variables: dict[str, str],
        roles: set[str],
    ) -> DialogueNode:
        snippet = None
        for category in pattern.snippet_categories:
            snippet = self.select_snippet(rng, category, npc, time_of_day=variables["time_of_day"])
            if snippet is not None:
                break

        if snippet is None:
            text = _NODE_FALLBACK_TEXT.get(pattern.role, "...")
            snippet_tags: list[str] = []
        else:
            text = substitute_template(rng.pick(snippet.text_templates), variables)
            snippet_tags = list(snippet.tags)

        choices = []
        for choice_index, choice in enumerate(pattern.choice_patterns):
            if choice.next_role is not None and choice.next_role not in roles:
                logger.debug("Dropping choice to missing role %r in node %s", choice.next_role, pattern.role)
                continue
            choices.append(DialogueChoice(
                id=f"choice_{index}_{choice_index}",
                text=substitute_template(choice.text_template, variables),
                next_node_id=node_id_for(choice.next_role) if choice.next_role else None,
                tags=list(choice.tags),
            ))
        if not choices and pattern.role != "farewell":
            choices.append(DialogueChoice(f"choice_{index}_farewell", "Goodbye.", None, ["farewell"]))

        return self._node(node_id_for(pattern.role), text, npc, choices, [pattern.role, *snippet_tags])

    def _speak(
        self,
        rng: SeededRandom,
        category: str,
        npc: GeneratedNPC,
        variables: dict[str, str],
        fallback: str,
    ) -> str:
        snippet = self.select_snippet(rng, category, npc, time_of_day=variables["time_of_day"])
        if snippet is None:
            return fallback
        return substitute_template(rng.pick(snippet.text_templates), variables)

    @staticmethod
    def _node(node_id: str, text: str, npc: GeneratedNPC, choices: list[DialogueChoice], tags: list[str]) -> DialogueNode:
        return DialogueNode(
            id=node_id,
            speaker_text=text,
            speaker_id=npc.id,
            speaker_name=npc.name,
            choices=choices,
            tags=tags,
        )


def _fits(snippet: DialogueSnippet, npc: GeneratedNPC) -> bool:
    if snippet.valid_roles and npc.role not in snippet.valid_roles:
        return False
    if snippet.valid_factions and npc.faction not in snippet.valid_factions:
        return False
    for trait, minimum in snippet.personality_min.items():
        if npc.personality.get(trait) < minimum:
            return False
    for trait, maximum in snippet.personality_max.items():
        if npc.personality.get(trait) > maximum:
            return False
    if "hostile" in snippet.tags and npc.personality.friendliness > HOSTILE_FRIENDLINESS_CUTOFF:
        return False
    return True


def _at_time(snippet: DialogueSnippet, time_of_day: str | None) -> bool:
    return time_of_day is None or not snippet.valid_time_of_day or time_of_day in snippet.valid_time_of_day


def _variables(npc: GeneratedNPC, context: GenerationContext) -> dict[str, str]:
    return {
        "npc_name": npc.name,
        "npc_first_name": npc.name_details.first_name,
        "npc_role": npc.role,
        "npc_faction": npc.faction,
        "player_name": "stranger",
        "location": context.location_label("here"),
        "region": context.region_label("these parts"),
        "time_of_day": context.time_of_day.value,
    }
