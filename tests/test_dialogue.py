"""Tests for DialogueGenerator: snippet filters, simple trees, template trees."""

import pytest

from procgen.core.context import GenerationContext
from procgen.core.enums import Gender
from procgen.core.errors import GenerationError, UnknownTemplateError
from procgen.core.models import GeneratedName, GeneratedNPC, Personality
from procgen.core.templates import DialogueTreeTemplate, NodePattern
from procgen.data import build_default_registry
from procgen.generators.dialogue import ROOT_NODE_ID, DialogueGenerator, validate_tree
from procgen.systems.rng import SeededRandom

REGISTRY = build_default_registry()


def _make_npc(
    role: str = "townsfolk",
    faction: str = "neutral",
    friendliness: float = 0.5,
    *,
    is_quest_giver: bool = False,
    has_shop: bool = False,
    dialogue_tree_ids: list[str] | None = None,
) -> GeneratedNPC:
    name = GeneratedName("Wade Holloway", "Wade", "Holloway", "frontier_anglo", Gender.MALE)
    personality = Personality(
        aggression=0.5, friendliness=friendliness, curiosity=0.5,
        greed=0.5, honesty=0.5, lawfulness=0.5,
    )
    return GeneratedNPC(
        id="npc_test_1",
        template_id="test",
        name=name.full_name,
        name_details=name,
        role=role,
        faction=faction,
        gender=Gender.MALE,
        personality=personality,
        backstory="",
        description="",
        is_quest_giver=is_quest_giver,
        has_shop=has_shop,
        seed=1,
        dialogue_tree_ids=dialogue_tree_ids or [],
    )


def _make_context(**overrides) -> GenerationContext:
    defaults = dict(world_seed=42, location_name="Dry Gulch", game_hour=14.0)
    defaults.update(overrides)
    return GenerationContext(**defaults)


# ---------------------------------------------------------------------------
# Snippets
# ---------------------------------------------------------------------------

class TestSnippets:
    def test_role_restricted(self):
        gen = DialogueGenerator(REGISTRY)
        law = {s.id for s in gen.snippets_for_npc(_make_npc(role="sheriff"), "greeting")}
        plain = {s.id for s in gen.snippets_for_npc(_make_npc(), "greeting")}
        assert "greeting_law" in law
        assert "greeting_law" not in plain

    def test_hostile_excluded_for_friendly_npc(self):
        gen = DialogueGenerator(REGISTRY)
        friendly = _make_npc(faction="desperados", friendliness=0.9)
        assert all("hostile" not in s.tags for s in gen.snippets_for_npc(friendly, "greeting"))
        surly = _make_npc(faction="desperados", friendliness=0.2)
        assert any("hostile" in s.tags for s in gen.snippets_for_npc(surly, "greeting"))

    def test_time_of_day_filter(self):
        gen = DialogueGenerator(REGISTRY)
        npc = _make_npc()
        afternoon = {s.id for s in gen.snippets_for_npc(npc, "greeting", "afternoon")}
        night = {s.id for s in gen.snippets_for_npc(npc, "greeting", "night")}
        assert "greeting_night" not in afternoon
        assert "greeting_night" in night
        assert "greeting_neutral" in afternoon and "greeting_neutral" in night

    def test_select_prefers_tags(self):
        gen = DialogueGenerator(REGISTRY)
        for seed in range(10):
            snippet = gen.select_snippet(SeededRandom(seed), "rumor", _make_npc(), tags=("railroad",))
            assert snippet.id == "rumor_railroad"

    def test_select_none_without_draw(self):
        rng = SeededRandom(4)
        assert DialogueGenerator(REGISTRY).select_snippet(rng, "sonnet", _make_npc()) is None
        assert rng.state == SeededRandom(4).state


# ---------------------------------------------------------------------------
# Simple trees
# ---------------------------------------------------------------------------

class TestSimpleTree:
    def test_plain_npc_has_no_quest_or_shop(self):
        tree = DialogueGenerator(REGISTRY).generate_simple_tree(SeededRandom(1), _make_npc(), _make_context())
        assert set(tree.nodes) == {ROOT_NODE_ID, "node_rumor"}
        assert tree.root_node_id == ROOT_NODE_ID
        assert tree.tags == ["simple"]
        assert validate_tree(tree) == []

    def test_branches_follow_npc_flags(self):
        npc = _make_npc(role="merchant", is_quest_giver=True, has_shop=True)
        tree = DialogueGenerator(REGISTRY).generate_simple_tree(SeededRandom(1), npc, _make_context())
        assert set(tree.nodes) == {ROOT_NODE_ID, "node_rumor", "node_quest", "node_shop"}
        assert validate_tree(tree) == []

    def test_branches_can_be_disabled(self):
        npc = _make_npc(role="merchant", is_quest_giver=True, has_shop=True)
        tree = DialogueGenerator(REGISTRY).generate_simple_tree(
            SeededRandom(1), npc, _make_context(), include_rumors=False, include_shop=False,
        )
        assert set(tree.nodes) == {ROOT_NODE_ID, "node_quest"}

    def test_greeting_ends_with_farewell(self):
        tree = DialogueGenerator(REGISTRY).generate_simple_tree(SeededRandom(1), _make_npc(), _make_context())
        last = tree.nodes[ROOT_NODE_ID].choices[-1]
        assert last.next_node_id is None
        assert last.tags == ["farewell"]

    def test_deterministic(self):
        gen = DialogueGenerator(REGISTRY)
        a = gen.generate_simple_tree(SeededRandom(9), _make_npc(), _make_context())
        b = gen.generate_simple_tree(SeededRandom(9), _make_npc(), _make_context())
        assert a.to_dict() == b.to_dict()


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

class TestBuildTree:
    def test_every_template_is_well_formed(self):
        gen = DialogueGenerator(REGISTRY)
        npc = _make_npc(role="merchant", faction="desperados", friendliness=0.2)
        for template in REGISTRY.dialogue_tree_templates():
            tree = gen.build_tree(SeededRandom(2), template, npc, _make_context())
            assert validate_tree(tree) == [], template.id
            for node in tree.nodes.values():
                assert "{{" not in node.speaker_text
                assert node.choices or "farewell" in node.tags

    def test_missing_role_choice_dropped(self):
        npc = _make_npc(faction="desperados", friendliness=0.2)
        tree = DialogueGenerator(REGISTRY).build_tree(SeededRandom(2), "outlaw_dialogue", npc, _make_context())
        greeting = tree.nodes[ROOT_NODE_ID]
        assert len(greeting.choices) == 3
        assert "node_deal" not in {c.next_node_id for c in greeting.choices}

    def test_root_falls_back_to_first_node(self):
        template = DialogueTreeTemplate(
            id="no_greeting",
            name="No Greeting",
            node_patterns=(NodePattern(role="rumor", snippet_categories=("rumor",)),),
        )
        tree = DialogueGenerator(REGISTRY).build_tree(SeededRandom(2), template, _make_npc(), _make_context())
        assert tree.root_node_id == "node_rumor"
        assert tree.nodes["node_rumor"].choices[0].id == "choice_0_farewell"

    def test_empty_template_raises(self):
        template = DialogueTreeTemplate(id="empty", name="Empty", node_patterns=())
        with pytest.raises(GenerationError):
            DialogueGenerator(REGISTRY).build_tree(SeededRandom(2), template, _make_npc(), _make_context())

    def test_unknown_template_raises(self):
        with pytest.raises(UnknownTemplateError):
            DialogueGenerator(REGISTRY).build_tree(SeededRandom(2), "opera", _make_npc(), _make_context())


class TestGenerateForNPC:
    def test_uses_registered_tree(self):
        npc = _make_npc(role="sheriff", faction="law_enforcement", dialogue_tree_ids=["sheriff_dialogue"])
        tree = DialogueGenerator(REGISTRY).generate_for_npc(SeededRandom(3), npc, _make_context())
        assert tree.template_id == "sheriff_dialogue"

    def test_unknown_tree_falls_back_to_simple(self, caplog):
        npc = _make_npc(dialogue_tree_ids=["opera"])
        with caplog.at_level("WARNING"):
            tree = DialogueGenerator(REGISTRY).generate_for_npc(SeededRandom(3), npc, _make_context())
        assert tree.template_id == "simple"
        assert "opera" in caplog.text
