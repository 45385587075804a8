"""Built-in daily schedules. Every template covers all 24 hours.

Location markers such as ``{{saloon}}`` are resolved by the host game
against the NPC's actual buildings.
"""

from __future__ import annotations

from procgen.core.enums import ScheduleActivity as A
from procgen.core.templates import ScheduleEntry, ScheduleTemplate


def _at(start: int, end: int, activity: A, marker: str, dialogue: str | None = None) -> ScheduleEntry:
    return ScheduleEntry(
        start_hour=start, end_hour=end, activity=activity,
        location_marker="{{" + marker + "}}", dialogue_override=dialogue,
    )


SCHEDULE_TEMPLATES: list[ScheduleTemplate] = [
    # -- business owners --
    ScheduleTemplate(
        id="store_owner_schedule",
        valid_roles=("merchant", "innkeeper", "store_owner", "shopkeeper"),
        entries=(
            _at(0, 6, A.SLEEP, "home"),
            _at(6, 7, A.EAT, "home"),
            _at(7, 8, A.TRAVEL, "general_store"),
            _at(8, 12, A.WORK, "general_store", "morning_shopkeep"),
            _at(12, 13, A.EAT, "general_store"),
            _at(13, 18, A.WORK, "general_store"),
            _at(18, 19, A.IDLE, "general_store"),
            _at(19, 20, A.TRAVEL, "home"),
            _at(20, 21, A.EAT, "home"),
            _at(21, 22, A.SOCIALIZE, "saloon"),
            _at(22, 24, A.SLEEP, "home"),
        ),
        tags=("business_owner", "commerce", "regular_hours"),
    ),
    ScheduleTemplate(
        id="craftsman_schedule",
        valid_roles=("blacksmith", "gunsmith", "stable_master", "farrier"),
        entries=(
            _at(0, 5, A.SLEEP, "home"),
            _at(5, 6, A.EAT, "home"),
            _at(6, 10, A.WORK, "workshop", "morning_forge"),
            _at(10, 11, A.IDLE, "workshop"),
            _at(11, 12, A.EAT, "workshop"),
            _at(12, 16, A.WORK, "workshop"),
            _at(16, 17, A.IDLE, "workshop"),
            _at(17, 18, A.WORK, "workshop"),
            _at(18, 19, A.TRAVEL, "home"),
            _at(19, 20, A.EAT, "home"),
            _at(20, 21, A.SOCIALIZE, "saloon"),
            _at(21, 24, A.SLEEP, "home"),
        ),
        tags=("business_owner", "craftsman", "early_riser", "physical_labor"),
    ),
    ScheduleTemplate(
        id="doctor_schedule",
        valid_roles=("doctor", "undertaker", "physician"),
        entries=(
            _at(0, 6, A.SLEEP, "home", "on_call_night"),
            _at(6, 7, A.EAT, "home"),
            _at(7, 8, A.TRAVEL, "doctor"),
            _at(8, 12, A.WORK, "doctor", "morning_patients"),
            _at(12, 13, A.EAT, "doctor"),
            _at(13, 15, A.TRAVEL, "town_center"),
            _at(15, 18, A.WORK, "doctor"),
            _at(18, 19, A.IDLE, "doctor"),
            _at(19, 20, A.EAT, "home"),
            _at(20, 21, A.IDLE, "home"),
            _at(21, 24, A.SLEEP, "home"),
        ),
        tags=("professional", "on_call", "essential_service"),
    ),
    ScheduleTemplate(
        id="office_schedule",
        valid_roles=("banker", "mayor", "judge", "telegraph_operator"),
        entries=(
            _at(0, 6, A.SLEEP, "home"),
            _at(6, 7, A.EAT, "home"),
            _at(7, 8, A.IDLE, "home"),
            _at(8, 9, A.TRAVEL, "office"),
            _at(9, 12, A.WORK, "office", "morning_business"),
            _at(12, 13, A.EAT, "hotel"),
            _at(13, 15, A.WORK, "office"),
            _at(15, 16, A.IDLE, "office"),
            _at(16, 17, A.TRAVEL, "home"),
            _at(17, 18, A.IDLE, "home"),
            _at(18, 19, A.EAT, "home"),
            _at(19, 21, A.IDLE, "home"),
            _at(21, 24, A.SLEEP, "home"),
        ),
        tags=("business_owner", "official", "secure_routine", "short_hours"),
    ),
    # -- workers --
    ScheduleTemplate(
        id="bartender_schedule",
        valid_roles=("bartender", "saloon_worker"),
        entries=(
            _at(0, 3, A.WORK, "saloon", "late_night_service"),
            _at(3, 4, A.IDLE, "saloon"),
            _at(4, 12, A.SLEEP, "home"),
            _at(12, 13, A.EAT, "home"),
            _at(13, 15, A.IDLE, "home"),
            _at(15, 16, A.SHOP, "general_store"),
            _at(16, 17, A.TRAVEL, "saloon"),
            _at(17, 24, A.WORK, "saloon", "evening_service"),
        ),
        tags=("worker", "saloon", "night_shift"),
    ),
    ScheduleTemplate(
        id="ranch_hand_schedule",
        valid_roles=("rancher", "ranch_hand", "cowboy"),
        entries=(
            _at(0, 4, A.SLEEP, "bunkhouse"),
            _at(4, 5, A.EAT, "bunkhouse"),
            _at(5, 8, A.WORK, "ranch", "morning_chores"),
            _at(8, 9, A.EAT, "ranch"),
            _at(9, 12, A.WORK, "pasture"),
            _at(12, 13, A.EAT, "ranch"),
            _at(13, 17, A.WORK, "pasture"),
            _at(17, 18, A.WORK, "stable"),
            _at(18, 19, A.EAT, "bunkhouse"),
            _at(19, 21, A.SOCIALIZE, "bunkhouse"),
            _at(21, 24, A.SLEEP, "bunkhouse"),
        ),
        tags=("worker", "outdoor", "early_riser", "ranch"),
    ),
    ScheduleTemplate(
        id="miner_schedule",
        valid_roles=("miner", "mine_worker"),
        entries=(
            _at(0, 5, A.SLEEP, "home"),
            _at(5, 6, A.EAT, "home"),
            _at(6, 7, A.TRAVEL, "mine_entrance"),
            _at(7, 12, A.WORK, "mine", "mining_shift"),
            _at(12, 13, A.EAT, "mine_entrance"),
            _at(13, 17, A.WORK, "mine"),
            _at(17, 18, A.TRAVEL, "home"),
            _at(18, 19, A.EAT, "home"),
            _at(19, 21, A.SOCIALIZE, "saloon"),
            _at(21, 24, A.SLEEP, "home"),
        ),
        tags=("worker", "mining", "physical_labor", "shift_work"),
    ),
    ScheduleTemplate(
        id="railroad_worker_schedule",
        valid_roles=("railroad_worker", "track_layer"),
        entries=(
            _at(0, 4, A.SLEEP, "camp"),
            _at(4, 5, A.EAT, "camp"),
            _at(5, 6, A.TRAVEL, "rail_line"),
            _at(6, 11, A.WORK, "rail_line", "track_work"),
            _at(11, 12, A.EAT, "rail_line"),
            _at(12, 17, A.WORK, "rail_line"),
            _at(17, 18, A.TRAVEL, "camp"),
            _at(18, 19, A.EAT, "camp"),
            _at(19, 21, A.SOCIALIZE, "camp"),
            _at(21, 24, A.SLEEP, "camp"),
        ),
        tags=("worker", "railroad", "camp_life", "long_shift"),
    ),
    ScheduleTemplate(
        id="prospector_schedule",
        valid_roles=("prospector", "claim_holder"),
        entries=(
            _at(0, 4, A.SLEEP, "camp"),
            _at(4, 5, A.EAT, "camp"),
            _at(5, 6, A.TRAVEL, "claim"),
            _at(6, 12, A.WORK, "claim", "panning_gold"),
            _at(12, 13, A.EAT, "claim"),
            _at(13, 17, A.WORK, "claim"),
            _at(17, 18, A.TRAVEL, "town_center"),
            _at(18, 19, A.SHOP, "assay_office", "selling_gold"),
            _at(19, 22, A.SOCIALIZE, "saloon", "prospector_tales"),
            _at(22, 23, A.TRAVEL, "camp"),
            _at(23, 24, A.SLEEP, "camp"),
        ),
        tags=("worker", "outdoor", "early_riser", "gold_fever"),
    ),
    ScheduleTemplate(
        id="homesteader_schedule",
        valid_roles=("homesteader", "farmer", "settler"),
        entries=(
            _at(0, 5, A.SLEEP, "homestead"),
            _at(5, 6, A.EAT, "homestead"),
            _at(6, 8, A.WORK, "homestead", "morning_chores"),
            _at(8, 12, A.WORK, "fields"),
            _at(12, 13, A.EAT, "homestead"),
            _at(13, 16, A.WORK, "fields"),
            _at(16, 18, A.WORK, "homestead", "evening_chores"),
            _at(18, 19, A.EAT, "homestead"),
            _at(19, 21, A.IDLE, "homestead"),
            _at(21, 24, A.SLEEP, "homestead"),
        ),
        tags=("settler", "farmer", "early_riser", "self_sufficient"),
    ),
    # -- officials --
    ScheduleTemplate(
        id="sheriff_schedule",
        valid_roles=("sheriff", "marshal", "bounty_hunter"),
        entries=(
            _at(0, 2, A.PATROL, "town_center", "night_patrol"),
            _at(2, 6, A.SLEEP, "sheriff_office"),
            _at(6, 7, A.EAT, "sheriff_office"),
            _at(7, 9, A.PATROL, "town_center", "morning_patrol"),
            _at(9, 12, A.WORK, "sheriff_office"),
            _at(12, 13, A.EAT, "saloon"),
            _at(13, 15, A.PATROL, "town_center"),
            _at(15, 18, A.WORK, "sheriff_office"),
            _at(18, 19, A.EAT, "home"),
            _at(19, 21, A.PATROL, "saloon", "evening_patrol"),
            _at(21, 24, A.PATROL, "town_center"),
        ),
        tags=("official", "law_enforcement", "patrol", "authority"),
    ),
    ScheduleTemplate(
        id="deputy_schedule",
        valid_roles=("deputy", "constable"),
        entries=(
            # the night watch runs from 19:00 through 04:00
            _at(19, 4, A.PATROL, "town_center", "night_watch"),
            _at(4, 5, A.WORK, "sheriff_office"),
            _at(5, 12, A.SLEEP, "home"),
            _at(12, 13, A.EAT, "home"),
            _at(13, 14, A.IDLE, "home"),
            _at(14, 15, A.TRAVEL, "sheriff_office"),
            _at(15, 18, A.WORK, "sheriff_office"),
            _at(18, 19, A.EAT, "saloon"),
        ),
        tags=("official", "law_enforcement", "night_shift", "patrol"),
    ),
    ScheduleTemplate(
        id="preacher_schedule",
        valid_roles=("preacher", "pastor", "reverend"),
        entries=(
            _at(0, 5, A.SLEEP, "home"),
            _at(5, 6, A.PRAY, "church", "morning_devotion"),
            _at(6, 7, A.EAT, "home"),
            _at(7, 9, A.WORK, "church"),
            _at(9, 12, A.TRAVEL, "town_center", "pastoral_visit"),
            _at(12, 13, A.EAT, "home"),
            _at(13, 16, A.WORK, "church"),
            _at(16, 18, A.TRAVEL, "town_center", "pastoral_visit"),
            _at(18, 19, A.EAT, "home"),
            _at(19, 20, A.PRAY, "church", "evening_prayer"),
            _at(20, 21, A.IDLE, "home"),
            _at(21, 24, A.SLEEP, "home"),
        ),
        tags=("official", "religious", "community", "pastoral"),
    ),
    # -- transients and criminals --
    ScheduleTemplate(
        id="gambler_schedule",
        valid_roles=("gambler", "fence", "card_sharp"),
        entries=(
            _at(0, 4, A.SOCIALIZE, "saloon", "late_night_cards"),
            _at(4, 5, A.TRAVEL, "hotel"),
            _at(5, 14, A.SLEEP, "hotel"),
            _at(14, 15, A.EAT, "hotel"),
            _at(15, 17, A.IDLE, "hotel"),
            _at(17, 18, A.SHOP, "general_store"),
            _at(18, 19, A.EAT, "saloon"),
            _at(19, 24, A.SOCIALIZE, "saloon", "card_game"),
        ),
        tags=("transient", "night_owl", "saloon_regular", "questionable"),
    ),
    ScheduleTemplate(
        id="drifter_schedule",
        valid_roles=("drifter", "townsfolk", "wanderer"),
        entries=(
            _at(22, 6, A.SLEEP, "camp"),
            _at(6, 7, A.IDLE, "camp"),
            _at(7, 9, A.TRAVEL, "town_center"),
            _at(9, 11, A.IDLE, "town_center", "drifter_talk"),
            _at(11, 12, A.EAT, "saloon"),
            _at(12, 15, A.IDLE, "stable"),
            _at(15, 17, A.TRAVEL, "outskirts"),
            _at(17, 18, A.IDLE, "outskirts"),
            _at(18, 19, A.TRAVEL, "saloon"),
            _at(19, 21, A.SOCIALIZE, "saloon"),
            _at(21, 22, A.TRAVEL, "camp"),
        ),
        tags=("transient", "unpredictable", "wanderer"),
    ),
    ScheduleTemplate(
        id="outlaw_schedule",
        valid_roles=("outlaw", "gang_leader", "bandit", "rustler"),
        entries=(
            _at(0, 4, A.PATROL, "hideout", "outlaw_scheming"),
            _at(4, 5, A.TRAVEL, "hideout"),
            _at(5, 14, A.SLEEP, "hideout"),
            _at(14, 15, A.EAT, "hideout"),
            _at(15, 17, A.IDLE, "hideout"),
            _at(17, 18, A.WORK, "hideout", "planning_job"),
            _at(18, 20, A.TRAVEL, "outskirts"),
            _at(20, 24, A.PATROL, "outskirts", "scouting"),
        ),
        tags=("criminal", "nocturnal", "dangerous", "hidden"),
    ),
]
