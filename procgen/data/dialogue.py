"""Built-in dialogue snippets and tree templates.

Snippet tokens: npc_name, npc_first_name, npc_role, npc_faction,
player_name, location, region, time_of_day.
"""

from __future__ import annotations

from procgen.core.templates import ChoicePattern, DialogueSnippet, DialogueTreeTemplate, NodePattern

_LAW = ("sheriff", "deputy", "judge")
_SHOPKEEPERS = ("merchant", "gunsmith", "blacksmith", "doctor", "bartender", "innkeeper", "fence", "stable_master")

DIALOGUE_SNIPPETS: list[DialogueSnippet] = [
    # -- greetings --
    DialogueSnippet(
        id="greeting_friendly",
        category="greeting",
        text_templates=(
            "Howdy, {{player_name}}! Welcome to {{location}}.",
            "Well now, a fresh face. Name's {{npc_first_name}}.",
            "Afternoon, friend. What brings you to {{location}}?",
        ),
        personality_min={"friendliness": 0.5},
        tags=("friendly",),
    ),
    DialogueSnippet(
        id="greeting_neutral",
        category="greeting",
        text_templates=("Yeah?", "Something I can do for you?", "Stranger."),
        tags=("neutral",),
    ),
    DialogueSnippet(
        id="greeting_hostile",
        category="greeting",
        text_templates=(
            "Keep walking, {{player_name}}.",
            "You lost? 'Cause you ain't welcome here.",
            "State your business and be quick about it.",
        ),
        personality_max={"friendliness": 0.3},
        tags=("hostile",),
    ),
    DialogueSnippet(
        id="greeting_law",
        category="greeting",
        text_templates=(
            "I'm {{npc_name}}, and I keep the peace in {{location}}. See that you don't disturb it.",
            "Holster stays holstered in my town, understood?",
        ),
        valid_roles=_LAW,
        tags=("authority",),
    ),
    DialogueSnippet(
        id="greeting_morning",
        category="greeting",
        text_templates=("Mornin'. Coffee's still hot if you want some.",),
        personality_min={"friendliness": 0.4},
        valid_time_of_day=("morning",),
        tags=("friendly",),
    ),
    DialogueSnippet(
        id="greeting_night",
        category="greeting",
        text_templates=("Late to be wandering around {{location}}.", "Mighty late, stranger."),
        valid_time_of_day=("evening", "night"),
        tags=("neutral",),
    ),
    DialogueSnippet(
        id="greeting_outlaw",
        category="greeting",
        text_templates=("Easy now. Nobody here's looking for trouble. Yet.",),
        valid_factions=("desperados",),
        tags=("hostile",),
    ),
    # -- farewells --
    DialogueSnippet(
        id="farewell_friendly",
        category="farewell",
        text_templates=("Safe travels, {{player_name}}.", "Come back anytime."),
        personality_min={"friendliness": 0.5},
        tags=("friendly",),
    ),
    DialogueSnippet(
        id="farewell_neutral",
        category="farewell",
        text_templates=("Be seein' ya.", "Mind yourself out there."),
    ),
    DialogueSnippet(
        id="farewell_hostile",
        category="farewell",
        text_templates=("Don't come back.", "Get."),
        personality_max={"friendliness": 0.3},
        tags=("hostile",),
    ),
    # -- rumors --
    DialogueSnippet(
        id="rumor_bandits",
        category="rumor",
        text_templates=(
            "Word is there's a gang working the roads out of {{location}}.",
            "Stage got hit two days back. Nobody's saying who did it.",
        ),
        tags=("bandits",),
    ),
    DialogueSnippet(
        id="rumor_gold",
        category="rumor",
        text_templates=(
            "Old-timer swore he saw color in a creek up in {{region}}.",
            "Folks say there's silver in them hills, if you can stay alive long enough to dig it.",
        ),
        personality_min={"curiosity": 0.4},
        tags=("treasure",),
    ),
    DialogueSnippet(
        id="rumor_railroad",
        category="rumor",
        text_templates=("The railroad's buying up land around {{location}}, and not always asking nice.",),
        tags=("railroad",),
    ),
    DialogueSnippet(
        id="rumor_machines",
        category="rumor",
        text_templates=("Heard one of them clockwork men walked off the job at the mine. Just kept walking.",),
        tags=("machines",),
    ),
    DialogueSnippet(
        id="rumor_law",
        category="rumor",
        text_templates=("Between you and me, there's a warrant coming for somebody important.",),
        valid_roles=_LAW + ("telegraph_operator",),
        tags=("law",),
    ),
    # -- quests --
    DialogueSnippet(
        id="quest_offer_general",
        category="quest_offer",
        text_templates=(
            "You look like you can handle yourself. I might have work for you.",
            "Need someone with a steady hand. Interested?",
        ),
    ),
    DialogueSnippet(
        id="quest_offer_law",
        category="quest_offer",
        text_templates=("There's a bounty that needs collecting, if you're the type.",),
        valid_roles=_LAW + ("bounty_hunter",),
    ),
    DialogueSnippet(
        id="quest_offer_desperate",
        category="quest_offer",
        text_templates=("Please, I've got nobody else to ask.",),
        personality_min={"friendliness": 0.5},
        personality_max={"aggression": 0.3},
    ),
    DialogueSnippet(
        id="quest_update",
        category="quest_update",
        text_templates=("Any progress?", "Well? Don't keep me waiting."),
    ),
    DialogueSnippet(
        id="quest_complete",
        category="quest_complete",
        text_templates=("Much obliged, {{player_name}}.", "Knew I could count on you."),
    ),
    # -- shops --
    DialogueSnippet(
        id="shop_welcome_general",
        category="shop_welcome",
        text_templates=("Take a look at what I got.", "Everything's priced fair. Mostly."),
        valid_roles=_SHOPKEEPERS,
    ),
    DialogueSnippet(
        id="shop_welcome_gunsmith",
        category="shop_welcome",
        text_templates=("Finest iron this side of the river.",),
        valid_roles=("gunsmith",),
    ),
    DialogueSnippet(
        id="shop_welcome_greedy",
        category="shop_welcome",
        text_templates=("Cash on the counter, no credit.",),
        personality_min={"greed": 0.6},
    ),
    DialogueSnippet(id="shop_browse", category="shop_browse", text_templates=("Take your time.",)),
    DialogueSnippet(id="shop_buy", category="shop_buy", text_templates=("Pleasure doing business.",)),
    DialogueSnippet(id="shop_sell", category="shop_sell", text_templates=("I'll give you a fair price for that.",)),
    DialogueSnippet(id="shop_farewell", category="shop_farewell", text_templates=("Come back when your pockets are heavier.",)),
    # -- everything else --
    DialogueSnippet(
        id="small_talk_weather",
        category="small_talk",
        text_templates=("Hot enough to fry an egg on a saddle.", "Rain's overdue this {{time_of_day}}."),
    ),
    DialogueSnippet(id="thanks", category="thanks", text_templates=("Thank you kindly.",)),
    DialogueSnippet(
        id="threat",
        category="threat",
        text_templates=("Keep pushing and see what happens.",),
        personality_min={"aggression": 0.5},
        tags=("hostile",),
    ),
    DialogueSnippet(
        id="insult",
        category="insult",
        text_templates=("You smell like a week on the trail.",),
        personality_max={"friendliness": 0.4},
        tags=("hostile",),
    ),
    DialogueSnippet(
        id="bribe",
        category="bribe",
        text_templates=("Maybe a little something would jog my memory.",),
        personality_min={"greed": 0.5},
        personality_max={"honesty": 0.5},
    ),
    DialogueSnippet(id="question", category="question", text_templates=("What's it to you?",)),
    DialogueSnippet(id="refusal", category="refusal", text_templates=("Not a chance.",)),
    DialogueSnippet(id="agreement", category="agreement", text_templates=("Deal.",)),
    DialogueSnippet(
        id="compliment",
        category="compliment",
        text_templates=("That's a fine hat.",),
        personality_min={"friendliness": 0.6},
    ),
]


DIALOGUE_TREES: list[DialogueTreeTemplate] = [
    DialogueTreeTemplate(
        id="standard_townsfolk",
        name="Townsfolk Conversation",
        description="Greeting, a rumor and goodbye.",
        node_patterns=(
            NodePattern(
                role="greeting",
                snippet_categories=("greeting",),
                choice_patterns=(
                    ChoicePattern(text_template="Heard anything interesting?", next_role="rumor"),
                    ChoicePattern(text_template="Nice weather.", next_role="small_talk"),
                    ChoicePattern(text_template="Goodbye.", next_role="farewell"),
                ),
            ),
            NodePattern(
                role="rumor",
                snippet_categories=("rumor",),
                choice_patterns=(ChoicePattern(text_template="Thanks.", next_role="greeting"),),
            ),
            NodePattern(
                role="small_talk",
                snippet_categories=("small_talk",),
                choice_patterns=(ChoicePattern(text_template="Sure is.", next_role="greeting"),),
            ),
            NodePattern(role="farewell", snippet_categories=("farewell",)),
        ),
        tags=("generic",),
    ),
    DialogueTreeTemplate(
        id="merchant_dialogue",
        name="Merchant Conversation",
        node_patterns=(
            NodePattern(
                role="greeting",
                snippet_categories=("greeting",),
                choice_patterns=(
                    ChoicePattern(text_template="Let's see your wares.", next_role="shop"),
                    ChoicePattern(text_template="Heard any news?", next_role="rumor"),
                    ChoicePattern(text_template="Goodbye.", next_role="farewell"),
                ),
            ),
            NodePattern(
                role="shop",
                snippet_categories=("shop_welcome", "shop_browse"),
                choice_patterns=(
                    ChoicePattern(text_template="[Open Shop]", tags=("open_shop",)),
                    ChoicePattern(text_template="Maybe later.", next_role="greeting"),
                ),
            ),
            NodePattern(
                role="rumor",
                snippet_categories=("rumor",),
                choice_patterns=(ChoicePattern(text_template="Thanks.", next_role="greeting"),),
            ),
            NodePattern(role="farewell", snippet_categories=("shop_farewell", "farewell")),
        ),
        valid_roles=_SHOPKEEPERS,
        tags=("shop",),
    ),
    DialogueTreeTemplate(
        id="sheriff_dialogue",
        name="Sheriff Conversation",
        node_patterns=(
            NodePattern(
                role="greeting",
                snippet_categories=("greeting",),
                choice_patterns=(
                    ChoicePattern(text_template="Any bounties posted?", next_role="quest"),
                    ChoicePattern(text_template="Trouble around here?", next_role="rumor"),
                    ChoicePattern(text_template="Just passing through.", next_role="farewell"),
                ),
            ),
            NodePattern(
                role="quest",
                snippet_categories=("quest_offer",),
                choice_patterns=(
                    ChoicePattern(text_template="I'll do it.", tags=("accept_quest",)),
                    ChoicePattern(text_template="Not interested.", next_role="greeting"),
                ),
            ),
            NodePattern(
                role="rumor",
                snippet_categories=("rumor",),
                choice_patterns=(ChoicePattern(text_template="I'll keep an eye out.", next_role="greeting"),),
            ),
            NodePattern(role="farewell", snippet_categories=("farewell",)),
        ),
        valid_roles=_LAW,
        valid_factions=("law_enforcement",),
        tags=("law",),
    ),
    DialogueTreeTemplate(
        id="outlaw_dialogue",
        name="Outlaw Standoff",
        description="A tense exchange that may end in a fight.",
        node_patterns=(
            NodePattern(
                role="greeting",
                snippet_categories=("greeting",),
                choice_patterns=(
                    ChoicePattern(text_template="I'm not here for trouble.", next_role="bribe"),
                    ChoicePattern(text_template="Draw.", tags=("start_combat",)),
                    ChoicePattern(text_template="Walk away.", next_role="farewell"),
                    # No "deal" node in this tree; the choice is dropped when building.
                    ChoicePattern(text_template="Let's make a deal.", next_role="deal"),
                ),
            ),
            NodePattern(
                role="bribe",
                snippet_categories=("bribe", "threat"),
                choice_patterns=(
                    ChoicePattern(text_template="[Pay]", next_role="farewell", tags=("pay_bribe",)),
                    ChoicePattern(text_template="Not a cent.", tags=("start_combat",)),
                ),
            ),
            NodePattern(role="farewell", snippet_categories=("farewell",)),
        ),
        valid_factions=("desperados",),
        tags=("hostile",),
    ),
]
