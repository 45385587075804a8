"""Built-in NPC archetypes.

Text tokens available to backstory/description templates:
name, first_name, last_name, role, faction, gender, pronoun, possessive,
location, region, years, hometown, relative, event.
"""

from __future__ import annotations

from procgen.core.templates import NameOriginWeight, NPCTemplate, PersonalityRanges

# Location type groups
_SETTLED = ("frontier_town", "cattle_town", "mining_town", "town", "city")
_ANY_TOWN = _SETTLED + ("outpost",)
_RURAL = ("ranch", "homestead", "cattle_town")
_LAWLESS = ("hideout", "camp", "ruin", "ruins")


def _origins(*pairs: tuple[str, float]) -> tuple[NameOriginWeight, ...]:
    return tuple(NameOriginWeight(origin=o, weight=w) for o, w in pairs)


_MIXED = _origins(
    ("frontier_anglo", 5), ("frontier_hispanic", 2), ("frontier_european", 2),
    ("frontier_chinese", 1),
)
_ANGLO_LEANING = _origins(("frontier_anglo", 6), ("frontier_hispanic", 2), ("frontier_european", 2))
_OUTLAW = _origins(("outlaw", 6), ("frontier_anglo", 2), ("frontier_hispanic", 2))


NPC_TEMPLATES: list[NPCTemplate] = [
    # -- law and order --
    NPCTemplate(
        id="sheriff",
        name="Sheriff",
        role="sheriff",
        description="The law in town, for better or worse.",
        allowed_factions=("law_enforcement",),
        personality=PersonalityRanges(
            aggression=(0.3, 0.6), friendliness=(0.3, 0.6), honesty=(0.6, 0.9),
            lawfulness=(0.8, 1.0),
        ),
        name_origins=_ANGLO_LEANING,
        gender_distribution=(0.85, 0.15, 0.0),
        backstory_templates=(
            "{{name}} has worn the star in {{location}} for {{years}} years and buried more deputies than {{pronoun}} cares to count.",
            "Before taking the badge, {{name}} rode with the cavalry out of {{hometown}}.",
            "{{name}} came to {{region}} chasing the men who killed {{possessive}} {{relative}}, and stayed to keep the peace.",
        ),
        description_templates=(
            "A weathered lawman with a tin star and a steady gaze.",
            "A tall figure whose hand never strays far from the holster.",
        ),
        dialogue_tree_ids=("sheriff_dialogue",),
        quest_giver_chance=0.85,
        tags=("lawman", "official", "authority"),
        valid_location_types=_ANY_TOWN,
        min_importance=0.7,
    ),
    NPCTemplate(
        id="deputy",
        name="Deputy",
        role="deputy",
        allowed_factions=("law_enforcement",),
        personality=PersonalityRanges(aggression=(0.3, 0.6), lawfulness=(0.6, 0.9)),
        name_origins=_MIXED,
        gender_distribution=(0.75, 0.25, 0.0),
        backstory_templates=(
            "{{name}} pinned on a deputy's badge after {{event}}.",
            "{{name}} grew up in {{hometown}} and dreams of wearing the sheriff's star one day.",
        ),
        description_templates=(
            "A young deputy, eager and a little nervous.",
            "A deputy with a dented badge and a borrowed rifle.",
        ),
        quest_giver_chance=0.4,
        tags=("lawman", "official"),
        valid_location_types=_ANY_TOWN,
        min_importance=0.4,
    ),
    NPCTemplate(
        id="mayor",
        name="Mayor",
        role="mayor",
        allowed_factions=("townsfolk", "railroad_company"),
        personality=PersonalityRanges(greed=(0.4, 0.8), honesty=(0.2, 0.6), friendliness=(0.5, 0.8)),
        name_origins=_ANGLO_LEANING,
        gender_distribution=(0.7, 0.3, 0.0),
        backstory_templates=(
            "{{name}} won the mayor's chair in {{location}} by a handful of votes and a great deal of whiskey.",
            "{{name}} made a modest fortune in {{hometown}} before coming west to build a town of {{possessive}} own.",
        ),
        description_templates=(
            "A well-dressed official with a practiced smile.",
            "A portly figure in a waistcoat, forever shaking hands.",
        ),
        quest_giver_chance=0.7,
        tags=("official", "authority", "wealthy"),
        valid_location_types=_SETTLED,
        min_importance=0.8,
    ),
    NPCTemplate(
        id="judge",
        name="Judge",
        role="judge",
        allowed_factions=("law_enforcement", "townsfolk"),
        personality=PersonalityRanges(lawfulness=(0.7, 1.0), curiosity=(0.4, 0.7)),
        name_origins=_ANGLO_LEANING,
        gender_distribution=(0.8, 0.2, 0.0),
        backstory_templates=(
            "{{name}} rides circuit through {{region}}, hanging the guilty and occasionally the innocent.",
        ),
        description_templates=("A stern figure in a black coat, ledger of sentences under one arm.",),
        quest_giver_chance=0.5,
        tags=("official", "authority", "lawman"),
        valid_location_types=("frontier_town", "city", "town"),
        min_importance=0.7,
    ),
    # -- commerce --
    NPCTemplate(
        id="banker",
        name="Banker",
        role="banker",
        allowed_factions=("townsfolk", "railroad_company"),
        personality=PersonalityRanges(greed=(0.6, 0.9), friendliness=(0.2, 0.5), lawfulness=(0.5, 0.8)),
        name_origins=_origins(("frontier_anglo", 5), ("frontier_european", 3)),
        gender_distribution=(0.8, 0.2, 0.0),
        backstory_templates=(
            "{{name}} holds the mortgage on half of {{location}} and never lets anyone forget it.",
            "{{name}} learned the trade at a counting house in {{hometown}}.",
        ),
        description_templates=("A thin, precise figure with ink-stained cuffs.",),
        quest_giver_chance=0.5,
        tags=("merchant", "wealthy", "official"),
        valid_location_types=("frontier_town", "city", "town", "mining_town"),
        min_importance=0.6,
    ),
    NPCTemplate(
        id="saloon_keeper",
        name="Saloon Keeper",
        role="merchant",
        allowed_factions=("townsfolk", "neutral"),
        personality=PersonalityRanges(friendliness=(0.5, 0.8), greed=(0.4, 0.7), curiosity=(0.5, 0.9)),
        name_origins=_MIXED,
        gender_distribution=(0.55, 0.45, 0.0),
        backstory_templates=(
            "{{name}} won the saloon in a card game and has been pouring drinks in {{location}} ever since.",
            "{{name}} hears every rumor in {{region}} and repeats about half of them.",
        ),
        description_templates=(
            "A barkeep polishing the same glass for the fourth time.",
            "A sharp-eyed proprietor behind a long mahogany bar.",
        ),
        quest_giver_chance=0.5,
        shop_chance=0.9,
        tags=("merchant", "saloon", "informant"),
        valid_location_types=_ANY_TOWN,
        min_importance=0.5,
    ),
    NPCTemplate(
        id="general_store_owner",
        name="General Store Owner",
        role="merchant",
        allowed_factions=("townsfolk",),
        personality=PersonalityRanges(friendliness=(0.5, 0.8), greed=(0.3, 0.7), honesty=(0.5, 0.9)),
        name_origins=_MIXED,
        gender_distribution=(0.5, 0.5, 0.0),
        backstory_templates=(
            "{{name}} freighted the first wagon of goods into {{location}}.",
            "{{name}} keeps the shelves stocked and the credit ledger long.",
        ),
        description_templates=("A shopkeeper in a canvas apron, pencil behind one ear.",),
        quest_giver_chance=0.3,
        shop_chance=1.0,
        tags=("merchant", "shopkeeper"),
        valid_location_types=_ANY_TOWN,
        min_importance=0.5,
    ),
    NPCTemplate(
        id="gunsmith",
        name="Gunsmith",
        role="gunsmith",
        allowed_factions=("townsfolk", "neutral"),
        personality=PersonalityRanges(curiosity=(0.5, 0.8), friendliness=(0.3, 0.6)),
        name_origins=_origins(("frontier_anglo", 4), ("frontier_european", 4)),
        gender_distribution=(0.8, 0.2, 0.0),
        backstory_templates=(
            "{{name}} apprenticed at an armory in {{hometown}} and can hear a bad firing pin from across the street.",
        ),
        description_templates=("A craftsman squinting through a jeweler's loupe at a cylinder.",),
        quest_giver_chance=0.3,
        shop_chance=1.0,
        tags=("merchant", "craftsman", "weapons"),
        valid_location_types=_SETTLED,
        min_importance=0.5,
    ),
    NPCTemplate(
        id="blacksmith",
        name="Blacksmith",
        role="blacksmith",
        allowed_factions=("townsfolk",),
        personality=PersonalityRanges(aggression=(0.2, 0.4), honesty=(0.6, 0.9)),
        name_origins=_MIXED,
        gender_distribution=(0.85, 0.15, 0.0),
        backstory_templates=("{{name}} has shod every horse in {{location}} at least once.",),
        description_templates=("A broad-shouldered smith with soot-blackened forearms.",),
        quest_giver_chance=0.25,
        shop_chance=0.9,
        tags=("merchant", "craftsman"),
        valid_location_types=_ANY_TOWN + _RURAL,
        min_importance=0.4,
    ),
    NPCTemplate(
        id="doctor",
        name="Doctor",
        role="doctor",
        allowed_factions=("townsfolk", "neutral"),
        personality=PersonalityRanges(friendliness=(0.5, 0.8), honesty=(0.6, 0.9), aggression=(0.0, 0.2)),
        name_origins=_origins(("frontier_anglo", 4), ("frontier_european", 3), ("frontier_chinese", 2)),
        gender_distribution=(0.65, 0.35, 0.0),
        backstory_templates=(
            "{{name}} studied medicine back east and has pulled lead out of half of {{region}}.",
            "{{name}} patched soldiers during the war and never quite stopped hearing the guns.",
        ),
        description_templates=("A tired physician with a battered leather bag.",),
        quest_giver_chance=0.5,
        shop_chance=0.6,
        tags=("healer", "professional"),
        valid_location_types=_ANY_TOWN,
        min_importance=0.6,
    ),
    NPCTemplate(
        id="undertaker",
        name="Undertaker",
        role="undertaker",
        allowed_factions=("townsfolk", "neutral"),
        personality=PersonalityRanges(friendliness=(0.2, 0.5), curiosity=(0.3, 0.6)),
        name_origins=_ANGLO_LEANING,
        gender_distribution=(0.75, 0.25, 0.0),
        backstory_templates=("Business in {{location}} is steady for {{name}}. Too steady, some say.",),
        description_templates=("A gaunt figure measuring you with a practiced eye.",),
        quest_giver_chance=0.3,
        tags=("professional", "morbid"),
        valid_location_types=_SETTLED,
        min_importance=0.3,
    ),
    NPCTemplate(
        id="hotel_owner",
        name="Hotel Owner",
        role="innkeeper",
        allowed_factions=("townsfolk",),
        personality=PersonalityRanges(friendliness=(0.6, 0.9), greed=(0.3, 0.6)),
        name_origins=_MIXED,
        gender_distribution=(0.45, 0.55, 0.0),
        backstory_templates=("{{name}} built the hotel board by board after {{event}}.",),
        description_templates=("A host with a ring of keys and a ledger of every guest.",),
        quest_giver_chance=0.3,
        shop_chance=0.5,
        tags=("merchant", "innkeeper"),
        valid_location_types=_SETTLED,
        min_importance=0.4,
    ),
    NPCTemplate(
        id="stable_master",
        name="Stable Master",
        role="stable_master",
        allowed_factions=("townsfolk", "ranchers"),
        personality=PersonalityRanges(friendliness=(0.4, 0.7)),
        name_origins=_MIXED,
        gender_distribution=(0.7, 0.3, 0.0),
        backstory_templates=("{{name}} knows every horse in {{location}} by name, and most of the riders too.",),
        description_templates=("A wiry hand smelling of hay and liniment.",),
        quest_giver_chance=0.25,
        shop_chance=0.7,
        tags=("merchant", "animals"),
        valid_location_types=_ANY_TOWN + _RURAL,
        min_importance=0.3,
    ),
    NPCTemplate(
        id="bartender",
        name="Bartender",
        role="bartender",
        allowed_factions=("townsfolk", "neutral"),
        personality=PersonalityRanges(friendliness=(0.4, 0.8), curiosity=(0.5, 0.9)),
        name_origins=_MIXED,
        gender_distribution=(0.6, 0.4, 0.0),
        backstory_templates=("{{name}} pours drinks and keeps secrets, in that order.",),
        description_templates=("A bartender with rolled sleeves and a sawed-off under the counter.",),
        quest_giver_chance=0.3,
        shop_chance=0.8,
        tags=("merchant", "saloon", "informant"),
        valid_location_types=_ANY_TOWN,
        min_importance=0.3,
    ),
    # -- working folk --
    NPCTemplate(
        id="ranch_hand",
        name="Ranch Hand",
        role="rancher",
        allowed_factions=("ranchers", "neutral"),
        personality=PersonalityRanges(friendliness=(0.4, 0.7), lawfulness=(0.4, 0.7)),
        name_origins=_origins(("frontier_anglo", 4), ("frontier_hispanic", 4), ("frontier_native", 1)),
        gender_distribution=(0.8, 0.2, 0.0),
        backstory_templates=(
            "{{name}} has been driving cattle since {{pronoun}} was tall enough to sit a saddle.",
            "{{name}} left {{hometown}} with nothing but a rope and a borrowed horse.",
        ),
        description_templates=("A sun-browned cowhand in dusty chaps.",),
        quest_giver_chance=0.2,
        tags=("worker", "cowboy", "rural"),
        valid_location_types=_RURAL + ("ranch",),
        min_importance=0.1,
    ),
    NPCTemplate(
        id="miner",
        name="Miner",
        role="miner",
        allowed_factions=("mining_consortium", "neutral"),
        personality=PersonalityRanges(greed=(0.4, 0.7), aggression=(0.3, 0.5)),
        name_origins=_origins(
            ("frontier_european", 4), ("frontier_chinese", 3), ("frontier_anglo", 3),
            ("frontier_hispanic", 2),
        ),
        gender_distribution=(0.9, 0.1, 0.0),
        backstory_templates=(
            "{{name}} has spent {{years}} years underground and coughs like it.",
            "{{name}} sends most of {{possessive}} wages home to {{possessive}} {{relative}} in {{hometown}}.",
        ),
        description_templates=("A miner with a lamp-scorched hat and cracked knuckles.",),
        quest_giver_chance=0.2,
        tags=("worker", "miner"),
        valid_location_types=("mining_town", "mine", "camp"),
        min_importance=0.1,
    ),
    NPCTemplate(
        id="railroad_worker",
        name="Railroad Worker",
        role="railroad_worker",
        allowed_factions=("railroad_company",),
        personality=PersonalityRanges(lawfulness=(0.4, 0.7)),
        name_origins=_origins(("frontier_chinese", 4), ("frontier_european", 3), ("frontier_anglo", 2)),
        gender_distribution=(0.9, 0.1, 0.0),
        backstory_templates=("{{name}} laid track across {{region}} and has the scars to prove it.",),
        description_templates=("A rail worker with a sledge over one shoulder.",),
        quest_giver_chance=0.2,
        tags=("worker", "railroad"),
        valid_location_types=("frontier_town", "cattle_town", "outpost", "city", "town"),
        min_importance=0.1,
    ),
    NPCTemplate(
        id="telegraph_operator",
        name="Telegraph Operator",
        role="telegraph_operator",
        allowed_factions=("townsfolk", "railroad_company"),
        personality=PersonalityRanges(curiosity=(0.6, 0.9), honesty=(0.4, 0.8)),
        name_origins=_ANGLO_LEANING,
        gender_distribution=(0.5, 0.5, 0.0),
        backstory_templates=("{{name}} reads every message that passes through {{location}}, whether {{pronoun}} should or not.",),
        description_templates=("A bespectacled clerk tapping at a brass key.",),
        quest_giver_chance=0.4,
        tags=("professional", "informant"),
        valid_location_types=("frontier_town", "cattle_town", "outpost", "city", "town"),
        min_importance=0.3,
    ),
    # -- outlaws --
    NPCTemplate(
        id="bandit_leader",
        name="Bandit Leader",
        role="gang_leader",
        allowed_factions=("desperados",),
        personality=PersonalityRanges(
            aggression=(0.6, 0.9), friendliness=(0.2, 0.5), greed=(0.7, 1.0),
            honesty=(0.1, 0.4), lawfulness=(0.0, 0.2),
        ),
        name_origins=_OUTLAW,
        gender_distribution=(0.8, 0.2, 0.0),
        backstory_templates=(
            "{{name}} has a price on {{possessive}} head in three territories and the gang to keep it there.",
            "{{name}} turned outlaw after {{event}}.",
        ),
        description_templates=("A hard-eyed outlaw with two guns and no patience.",),
        quest_giver_chance=0.6,
        tags=("outlaw", "bandit", "leader", "dangerous"),
        valid_location_types=_LAWLESS,
        min_importance=0.8,
    ),
    NPCTemplate(
        id="gang_member",
        name="Gang Member",
        role="outlaw",
        allowed_factions=("desperados",),
        personality=PersonalityRanges(aggression=(0.5, 0.8), lawfulness=(0.0, 0.3), greed=(0.5, 0.8)),
        name_origins=_OUTLAW,
        gender_distribution=(0.8, 0.2, 0.0),
        backstory_templates=("{{name}} ran from {{hometown}} one step ahead of a posse.",),
        description_templates=("A sullen gunman cleaning a revolver.",),
        quest_giver_chance=0.1,
        tags=("outlaw", "bandit"),
        valid_location_types=_LAWLESS,
        min_importance=0.2,
    ),
    NPCTemplate(
        id="rustler",
        name="Rustler",
        role="outlaw",
        allowed_factions=("desperados", "neutral"),
        personality=PersonalityRanges(lawfulness=(0.1, 0.3), honesty=(0.1, 0.4)),
        name_origins=_OUTLAW,
        gender_distribution=(0.85, 0.15, 0.0),
        backstory_templates=("{{name}} can change a brand faster than most folks can read one.",),
        description_templates=("A shifty rider with a running iron tied to the saddle.",),
        quest_giver_chance=0.2,
        tags=("outlaw", "thief"),
        valid_location_types=_LAWLESS + ("ranch",),
        min_importance=0.2,
    ),
    NPCTemplate(
        id="fence",
        name="Fence",
        role="fence",
        allowed_factions=("desperados", "neutral"),
        personality=PersonalityRanges(greed=(0.7, 1.0), honesty=(0.1, 0.3)),
        name_origins=_MIXED,
        gender_distribution=(0.6, 0.4, 0.0),
        backstory_templates=("{{name}} buys what others would rather not explain.",),
        description_templates=("A soft-spoken dealer who never asks where things came from.",),
        quest_giver_chance=0.5,
        shop_chance=0.9,
        tags=("merchant", "criminal", "informant"),
        valid_location_types=_LAWLESS + ("frontier_town", "city"),
        min_importance=0.5,
    ),
    # -- drifters and everyone else --
    NPCTemplate(
        id="gambler",
        name="Gambler",
        role="gambler",
        allowed_factions=("neutral",),
        personality=PersonalityRanges(greed=(0.5, 0.8), honesty=(0.2, 0.5), curiosity=(0.4, 0.7)),
        name_origins=_MIXED,
        gender_distribution=(0.6, 0.4, 0.0),
        backstory_templates=("{{name}} lost a fortune in {{hometown}} and means to win it back in {{location}}.",),
        description_templates=("A card sharp in a brocade vest, shuffling one-handed.",),
        quest_giver_chance=0.3,
        tags=("drifter", "gambler"),
        valid_location_types=_SETTLED,
        min_importance=0.2,
    ),
    NPCTemplate(
        id="preacher",
        name="Preacher",
        role="preacher",
        allowed_factions=("townsfolk", "neutral"),
        personality=PersonalityRanges(friendliness=(0.5, 0.8), honesty=(0.5, 0.9), lawfulness=(0.5, 0.8)),
        name_origins=_ANGLO_LEANING,
        gender_distribution=(0.85, 0.15, 0.0),
        backstory_templates=("{{name}} came to {{region}} to save souls and found more sinners than expected.",),
        description_templates=("A preacher with a worn Bible and a louder voice.",),
        quest_giver_chance=0.4,
        tags=("religious", "community"),
        valid_location_types=_SETTLED + ("outpost",),
        min_importance=0.5,
    ),
    NPCTemplate(
        id="prospector",
        name="Prospector",
        role="prospector",
        allowed_factions=("neutral",),
        personality=PersonalityRanges(curiosity=(0.6, 0.9), greed=(0.5, 0.8)),
        name_origins=_MIXED,
        backstory_templates=("{{name}} swears the mother lode is just over the next ridge. Has for {{years}} years.",),
        description_templates=("A grizzled prospector leading a swaybacked mule.",),
        gender_distribution=(0.85, 0.15, 0.0),
        quest_giver_chance=0.4,
        shop_chance=0.2,
        tags=("drifter", "miner"),
        valid_location_types=("mining_town", "mine", "camp", "outpost"),
        min_importance=0.2,
    ),
    NPCTemplate(
        id="bounty_hunter",
        name="Bounty Hunter",
        role="bounty_hunter",
        allowed_factions=("neutral", "law_enforcement"),
        personality=PersonalityRanges(aggression=(0.5, 0.8), greed=(0.5, 0.8), friendliness=(0.1, 0.4)),
        name_origins=_MIXED,
        gender_distribution=(0.75, 0.25, 0.0),
        backstory_templates=("{{name}} has brought in {{years}} men and women, mostly breathing.",),
        description_templates=("A cold-eyed hunter with a sheaf of wanted posters.",),
        quest_giver_chance=0.6,
        tags=("hunter", "mercenary", "dangerous"),
        valid_location_types=_ANY_TOWN,
        min_importance=0.5,
    ),
    NPCTemplate(
        id="drifter",
        name="Drifter",
        role="drifter",
        allowed_factions=("neutral",),
        name_origins=_MIXED,
        gender_distribution=(0.6, 0.35, 0.05),
        backstory_templates=(
            "Nobody in {{location}} knows where {{name}} came from. {{name}} prefers it that way.",
            "{{name}} left {{hometown}} after {{event}} and has not stopped moving since.",
        ),
        description_templates=("A trail-worn stranger nursing a cup of coffee.",),
        quest_giver_chance=0.15,
        tags=("drifter",),
        min_importance=0.1,
    ),
    NPCTemplate(
        id="homesteader",
        name="Homesteader",
        role="homesteader",
        allowed_factions=("townsfolk", "ranchers"),
        personality=PersonalityRanges(friendliness=(0.4, 0.8), lawfulness=(0.5, 0.8)),
        name_origins=_origins(("frontier_european", 4), ("frontier_anglo", 4), ("frontier_hispanic", 2)),
        backstory_templates=("{{name}} staked a claim outside {{location}} with {{possessive}} {{relative}} and a plow.",),
        description_templates=("A farmer with calloused hands and a wary smile.",),
        quest_giver_chance=0.35,
        tags=("farmer", "rural", "community"),
        valid_location_types=_RURAL,
        min_importance=0.2,
    ),
    NPCTemplate(
        id="widow",
        name="Widow",
        role="homesteader",
        allowed_factions=("townsfolk",),
        personality=PersonalityRanges(friendliness=(0.3, 0.7), honesty=(0.6, 0.9)),
        name_origins=_ANGLO_LEANING,
        gender_distribution=(0.1, 0.9, 0.0),
        backstory_templates=("{{name}} has worked the land alone since {{event}}.",),
        description_templates=("A widow in black, stern and unbowed.",),
        quest_giver_chance=0.5,
        tags=("farmer", "community"),
        valid_location_types=_RURAL + ("frontier_town",),
        min_importance=0.3,
    ),
    NPCTemplate(
        id="townsfolk",
        name="Townsfolk",
        role="townsfolk",
        allowed_factions=("townsfolk", "neutral"),
        name_origins=_MIXED,
        gender_distribution=(0.48, 0.48, 0.04),
        backstory_templates=(
            "{{name}} moved to {{location}} from {{hometown}} and never quite unpacked.",
            "{{name}} has lived in {{region}} for {{years}} years and remembers when it was all open range.",
        ),
        description_templates=(
            "An ordinary resident going about the day.",
            "A local in a patched coat, eyeing strangers with mild suspicion.",
        ),
        quest_giver_chance=0.1,
        tags=("civilian",),
        valid_location_types=_ANY_TOWN + _RURAL,
        min_importance=0.0,
    ),
]
