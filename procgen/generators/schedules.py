"""Daily schedule lookups: what an NPC is doing at a given hour."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from procgen.core.templates import ScheduleEntry, ScheduleTemplate

HOURS_PER_DAY = 24

# Category name -> schedule tags that place a template in it
SCHEDULE_CATEGORIES: dict[str, tuple[str, ...]] = {
    "business_owner": ("business_owner",),
    "worker": ("worker",),
    "official": ("official",),
    "transient": ("transient", "wanderer"),
    "criminal": ("criminal", "dangerous"),
}


def _hours(entry: ScheduleEntry) -> range | list[int]:
    if entry.start_hour <= entry.end_hour:
        return range(entry.start_hour, entry.end_hour)
    return [*range(entry.start_hour, HOURS_PER_DAY), *range(0, entry.end_hour)]


def activity_at(schedule: ScheduleTemplate, hour: int) -> ScheduleEntry | None:
    """First entry active at *hour*, taken modulo 24; ``None`` for an uncovered hour."""
    hour %= HOURS_PER_DAY
    for entry in schedule.entries:
        if entry.start_hour <= entry.end_hour:
            if entry.start_hour <= hour < entry.end_hour:
                return entry
        elif hour >= entry.start_hour or hour < entry.end_hour:
            return entry
    return None


def covers_full_day(schedule: ScheduleTemplate) -> bool:
    covered: set[int] = set()
    for entry in schedule.entries:
        covered.update(_hours(entry))
    return covered >= set(range(HOURS_PER_DAY))


def activity_summary(schedule: ScheduleTemplate) -> dict[str, int]:
    """Hours spent per activity, in first-seen order."""
    totals: Counter[str] = Counter()
    for entry in schedule.entries:
        totals[entry.activity.value] += len(_hours(entry))
    return dict(totals)


def schedule_ids_by_category(schedules: list[ScheduleTemplate], category: str) -> list[str]:
    tags = SCHEDULE_CATEGORIES.get(category, ())
    return [s.id for s in schedules if any(t in tags for t in s.tags)]
