"""Built-in quest templates.

Tokens: giver, giver_id, location, region, player, target, target_id,
destination, destination_id.  Objective text may also use ``count``.
"""

from __future__ import annotations

from procgen.core.enums import TargetType
from procgen.core.templates import (
    ObjectiveTemplate,
    QuestRewards,
    QuestStageTemplate,
    QuestTemplate,
)

QUEST_TEMPLATES: list[QuestTemplate] = [
    # -- bounties --
    QuestTemplate(
        id="bounty_basic",
        name="Basic Bounty",
        archetype="bounty",
        quest_type="side",
        title_templates=(
            "Wanted: {{target}}",
            "Bounty on {{target}}",
            "Bring in {{target}}",
        ),
        description_templates=(
            "{{giver}} has posted a bounty on {{target}}, last seen near {{location}}.",
            "There's a price on the head of {{target}}. {{giver}} wants the job done quiet.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Track down {{target}}",
                description_template="Find {{target}} somewhere around {{region}}.",
                objectives=(
                    ObjectiveTemplate(
                        type="kill",
                        description_template="Defeat {{target}}",
                        target_type=TargetType.ENEMY,
                        target_tags=("outlaw", "bandit"),
                        hint_template="Folks say {{target}} hides out past {{location}}.",
                    ),
                ),
                on_start_text_template="The poster is still warm from the printer.",
            ),
            QuestStageTemplate(
                title_template="Collect the bounty",
                description_template="Return to {{giver}} in {{location}} for payment.",
                objectives=(
                    ObjectiveTemplate(
                        type="talk",
                        description_template="Report to {{giver}}",
                        target_type=TargetType.NPC,
                        target_tags=("lawman", "official"),
                    ),
                ),
                on_complete_text_template="{{giver}} counts out the reward without a word.",
            ),
        ),
        rewards=QuestRewards(
            xp_range=(30, 60),
            gold_range=(20, 50),
            item_chance=0.2,
            reputation_impact={"law_enforcement": (5, 15), "desperados": (-5, -15)},
        ),
        level_range=(1, 5),
        giver_roles=("sheriff", "deputy", "bounty_hunter"),
        giver_factions=("law_enforcement",),
        tags=("combat", "bounty", "law"),
        cooldown_hours=48,
    ),
    QuestTemplate(
        id="bounty_gang_leader",
        name="Gang Leader Bounty",
        archetype="bounty",
        quest_type="side",
        title_templates=("Dead or Alive: {{target}}", "The Head of the Snake"),
        description_templates=(
            "{{target}} runs the worst gang in {{region}}. {{giver}} wants them brought down.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Find the hideout",
                description_template="Learn where {{target}} holes up.",
                objectives=(
                    ObjectiveTemplate(
                        type="visit",
                        description_template="Scout {{target}}",
                        target_type=TargetType.LOCATION,
                        target_tags=("hideout", "camp", "ruin"),
                    ),
                ),
            ),
            QuestStageTemplate(
                title_template="Thin the ranks",
                description_template="Deal with the gang before facing the leader.",
                objectives=(
                    ObjectiveTemplate(
                        type="kill",
                        description_template="Defeat {{count}} of {{target}}",
                        target_type=TargetType.ENEMY,
                        target_tags=("bandit",),
                        count_range=(3, 6),
                    ),
                ),
            ),
            QuestStageTemplate(
                title_template="Confront the leader",
                description_template="End the reign of the gang boss.",
                objectives=(
                    ObjectiveTemplate(
                        type="kill",
                        description_template="Defeat {{target}}",
                        target_type=TargetType.ENEMY,
                        target_tags=("leader",),
                    ),
                ),
                on_complete_text_template="{{region}} breathes a little easier tonight.",
            ),
        ),
        rewards=QuestRewards(
            xp_range=(100, 180),
            gold_range=(80, 150),
            item_tags=("weapon",),
            item_chance=0.5,
            reputation_impact={"law_enforcement": (15, 30), "desperados": (-20, -35)},
        ),
        level_range=(3, 8),
        giver_roles=("sheriff", "judge", "mayor"),
        tags=("combat", "bounty", "law", "gang"),
        repeatable=False,
        cooldown_hours=0,
    ),
    # -- clearing --
    QuestTemplate(
        id="clear_bandits",
        name="Clear the Bandits",
        archetype="clear",
        quest_type="side",
        title_templates=("Bandit Trouble", "Clear the Road to {{destination}}"),
        description_templates=(
            "Bandits have been hitting travelers between {{location}} and {{destination}}.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Clear the road",
                description_template="Drive the bandits off the road to {{destination}}.",
                objectives=(
                    ObjectiveTemplate(
                        type="kill",
                        description_template="Defeat {{count}} bandits",
                        target_type=TargetType.ENEMY,
                        target_tags=("bandit",),
                        count_range=(3, 5),
                    ),
                ),
            ),
        ),
        rewards=QuestRewards(
            xp_range=(40, 80), gold_range=(25, 60),
            reputation_impact={"townsfolk": (5, 10)},
        ),
        level_range=(2, 7),
        giver_roles=("sheriff", "mayor", "merchant"),
        tags=("combat", "clear"),
    ),
    QuestTemplate(
        id="clear_wildlife",
        name="Clear Wildlife",
        archetype="clear",
        quest_type="side",
        title_templates=("Varmint Problem", "Wolves at the Door"),
        description_templates=(
            "Something has been killing stock near {{location}}. {{giver}} wants it stopped.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Hunt the predators",
                description_template="Thin out the beasts around {{location}}.",
                objectives=(
                    ObjectiveTemplate(
                        type="kill",
                        description_template="Kill {{count}} predators",
                        target_type=TargetType.ENEMY,
                        target_tags=("wildlife",),
                        count_range=(3, 6),
                    ),
                ),
            ),
        ),
        rewards=QuestRewards(
            xp_range=(25, 50), gold_range=(10, 30), item_chance=0.1,
            reputation_impact={"ranchers": (5, 10)},
        ),
        level_range=(1, 6),
        giver_roles=("rancher", "homesteader", "stable_master"),
        tags=("combat", "wildlife"),
    ),
    # -- fetch and deliver --
    QuestTemplate(
        id="fetch_medicine",
        name="Fetch Medicine",
        archetype="fetch",
        quest_type="side",
        title_templates=("Medicine Run", "Fever in {{location}}"),
        description_templates=(
            "{{giver}} is running out of laudanum and fever bark. Supplies wait in {{destination}}.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Ride to {{destination}}",
                description_template="Pick up the medical supplies.",
                objectives=(
                    ObjectiveTemplate(
                        type="collect",
                        description_template="Collect {{target}}",
                        target_type=TargetType.ITEM,
                        target_tags=("medical",),
                    ),
                ),
            ),
            QuestStageTemplate(
                title_template="Return to {{giver}}",
                description_template="Bring the medicine back before it's too late.",
                objectives=(
                    ObjectiveTemplate(
                        type="deliver",
                        description_template="Deliver the supplies to {{giver}}",
                        target_type=TargetType.NPC,
                        target_tags=("healer",),
                    ),
                ),
            ),
        ),
        rewards=QuestRewards(
            xp_range=(20, 40), gold_range=(15, 35), item_tags=("medical",), item_chance=0.4,
            reputation_impact={"townsfolk": (5, 12)},
        ),
        level_range=(1, 6),
        giver_roles=("doctor", "preacher"),
        tags=("fetch", "medical"),
    ),
    QuestTemplate(
        id="deliver_message",
        name="Deliver a Message",
        archetype="delivery",
        quest_type="side",
        title_templates=("Word to {{target}}", "A Sealed Letter"),
        description_templates=(
            "{{giver}} needs a letter carried to {{target}} in {{destination}}. No reading it.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Carry the letter",
                description_template="Take the letter to {{destination}}.",
                objectives=(
                    ObjectiveTemplate(
                        type="talk",
                        description_template="Hand the letter to {{target}}",
                        target_type=TargetType.NPC,
                    ),
                    ObjectiveTemplate(
                        type="talk",
                        description_template="Bring the reply back to {{giver}}",
                        target_type=TargetType.NPC,
                        optional=True,
                    ),
                ),
            ),
        ),
        rewards=QuestRewards(xp_range=(15, 30), gold_range=(10, 25), item_chance=0.1),
        level_range=(1, 10),
        tags=("delivery",),
        cooldown_hours=12,
    ),
    QuestTemplate(
        id="deliver_package",
        name="Deliver a Package",
        archetype="delivery",
        quest_type="side",
        title_templates=("Freight for {{destination}}", "Handle With Care"),
        description_templates=(
            "{{giver}} has a crate bound for {{destination}} and no driver to take it.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Haul the crate",
                description_template="Get the crate to {{destination}} in one piece.",
                objectives=(
                    ObjectiveTemplate(
                        type="deliver",
                        description_template="Deliver the crate to {{target}}",
                        target_type=TargetType.NPC,
                        target_tags=("merchant",),
                    ),
                ),
            ),
        ),
        rewards=QuestRewards(
            xp_range=(20, 40), gold_range=(20, 45), item_chance=0.15,
            reputation_impact={"townsfolk": (2, 6)},
        ),
        level_range=(1, 8),
        giver_roles=("merchant", "banker", "railroad_worker"),
        tags=("delivery", "trade"),
    ),
    # -- investigation --
    QuestTemplate(
        id="find_missing_person",
        name="Find Missing Person",
        archetype="investigate",
        quest_type="side",
        title_templates=("Missing: {{target}}", "Gone Without a Word"),
        description_templates=(
            "{{target}} left {{location}} three days ago and hasn't come back. {{giver}} fears the worst.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Ask around",
                description_template="Someone in {{location}} saw something.",
                objectives=(
                    ObjectiveTemplate(
                        type="talk",
                        description_template="Question {{target}}",
                        target_type=TargetType.NPC,
                        target_tags=("informant",),
                    ),
                ),
            ),
            QuestStageTemplate(
                title_template="Follow the trail",
                description_template="The tracks lead toward {{destination}}.",
                objectives=(
                    ObjectiveTemplate(
                        type="visit",
                        description_template="Search {{target}}",
                        target_type=TargetType.LOCATION,
                    ),
                ),
                on_complete_text_template="You find what's left of the camp.",
            ),
        ),
        rewards=QuestRewards(
            xp_range=(35, 70), gold_range=(10, 30), item_chance=0.25,
            reputation_impact={"townsfolk": (8, 15)},
        ),
        level_range=(2, 8),
        giver_roles=("homesteader", "sheriff", "preacher", "townsfolk"),
        tags=("investigation",),
    ),
    QuestTemplate(
        id="investigate_crime",
        name="Investigate Crime",
        archetype="investigate",
        quest_type="side",
        title_templates=("Who Robbed {{location}}?", "A Matter of Evidence"),
        description_templates=(
            "Somebody cleaned out the strongbox in {{location}}. {{giver}} suspects {{target}}.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Gather evidence",
                description_template="Look for clues and loose tongues.",
                objectives=(
                    ObjectiveTemplate(
                        type="collect",
                        description_template="Find {{target}}",
                        target_type=TargetType.ITEM,
                        target_tags=("evidence", "document"),
                    ),
                    ObjectiveTemplate(
                        type="talk",
                        description_template="Question {{target}}",
                        target_type=TargetType.NPC,
                        target_tags=("criminal", "informant"),
                    ),
                ),
            ),
            QuestStageTemplate(
                title_template="Report back",
                description_template="Tell {{giver}} what you learned.",
                objectives=(
                    ObjectiveTemplate(
                        type="talk",
                        description_template="Report to {{giver}}",
                        target_type=TargetType.NPC,
                        target_tags=("lawman",),
                    ),
                ),
            ),
        ),
        rewards=QuestRewards(
            xp_range=(40, 75), gold_range=(20, 40),
            reputation_impact={"law_enforcement": (5, 12)},
        ),
        level_range=(2, 9),
        giver_roles=("sheriff", "deputy", "banker", "judge"),
        tags=("investigation", "law"),
    ),
    # -- social --
    QuestTemplate(
        id="mediate_dispute",
        name="Mediate Dispute",
        archetype="social",
        quest_type="side",
        title_templates=("Bad Blood", "Fence Line Feud"),
        description_templates=(
            "A quarrel over water rights outside {{location}} is about to turn to gunplay. {{giver}} asks you to settle it.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Hear both sides",
                description_template="Talk to the feuding parties.",
                objectives=(
                    ObjectiveTemplate(
                        type="talk",
                        description_template="Talk to {{target}}",
                        target_type=TargetType.NPC,
                        target_tags=("rural", "farmer"),
                    ),
                    ObjectiveTemplate(
                        type="talk",
                        description_template="Talk to {{target}}",
                        target_type=TargetType.NPC,
                        target_tags=("rural", "farmer", "cowboy"),
                    ),
                ),
            ),
        ),
        rewards=QuestRewards(
            xp_range=(30, 55), gold_range=(5, 20), item_chance=0.1,
            reputation_impact={"ranchers": (3, 10), "townsfolk": (3, 10)},
        ),
        level_range=(1, 7),
        giver_roles=("mayor", "preacher", "judge", "rancher"),
        tags=("social", "peaceful"),
    ),
    QuestTemplate(
        id="collect_debt",
        name="Collect Debt",
        archetype="social",
        quest_type="side",
        title_templates=("Money Owed", "Settling Accounts"),
        description_templates=(
            "{{target}} owes {{giver}} a tidy sum and keeps finding reasons not to pay.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Pay a visit",
                description_template="Convince the debtor to pay up, one way or another.",
                objectives=(
                    ObjectiveTemplate(
                        type="talk",
                        description_template="Collect from {{target}}",
                        target_type=TargetType.NPC,
                    ),
                ),
            ),
        ),
        rewards=QuestRewards(
            xp_range=(20, 40), gold_range=(30, 60),
            reputation_impact={"townsfolk": (-5, 5)},
        ),
        level_range=(1, 6),
        giver_roles=("banker", "merchant", "fence", "gambler"),
        tags=("social", "money"),
    ),
    QuestTemplate(
        id="explore_ruins",
        name="Explore Ruins",
        archetype="explore",
        quest_type="side",
        title_templates=("The Old Mission", "What Lies in {{destination}}"),
        description_templates=(
            "{{giver}} has a map to {{destination}} and a story about buried silver.",
        ),
        stages=(
            QuestStageTemplate(
                title_template="Reach {{destination}}",
                description_template="Follow the map out past {{location}}.",
                objectives=(
                    ObjectiveTemplate(
                        type="visit",
                        description_template="Explore {{target}}",
                        target_type=TargetType.LOCATION,
                        target_tags=("ruin", "landmark"),
                    ),
                    ObjectiveTemplate(
                        type="collect",
                        description_template="Recover {{target}}",
                        target_type=TargetType.ITEM,
                        target_tags=("valuable",),
                        optional=True,
                    ),
                ),
            ),
        ),
        rewards=QuestRewards(
            xp_range=(45, 90), gold_range=(10, 40), item_tags=("valuable",), item_chance=0.6,
        ),
        level_range=(3, 10),
        giver_roles=("prospector", "gambler", "drifter"),
        tags=("exploration",),
        repeatable=False,
        cooldown_hours=0,
    ),
]
