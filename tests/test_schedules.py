"""Tests for daily schedules: built-in coverage and hour lookups."""

import pytest

from procgen.core.enums import ScheduleActivity
from procgen.core.templates import ScheduleEntry, ScheduleTemplate
from procgen.data import build_default_registry
from procgen.data.npcs import NPC_TEMPLATES
from procgen.data.schedules import SCHEDULE_TEMPLATES
from procgen.generators.schedules import (
    HOURS_PER_DAY,
    activity_at,
    activity_summary,
    covers_full_day,
    schedule_ids_by_category,
)

REGISTRY = build_default_registry()


def _make_schedule(*spans: tuple[int, int, str]) -> ScheduleTemplate:
    entries = tuple(
        ScheduleEntry(start_hour=start, end_hour=end, activity=ScheduleActivity(activity), location_marker="{{home}}")
        for start, end, activity in spans
    )
    return ScheduleTemplate(id="custom", entries=entries)


# ---------------------------------------------------------------------------
# Built-in schedules
# ---------------------------------------------------------------------------

class TestBuiltins:
    @pytest.mark.parametrize("schedule", SCHEDULE_TEMPLATES, ids=lambda s: s.id)
    def test_covers_every_hour(self, schedule):
        assert covers_full_day(schedule)
        assert all(activity_at(schedule, hour) is not None for hour in range(HOURS_PER_DAY))

    @pytest.mark.parametrize("schedule", SCHEDULE_TEMPLATES, ids=lambda s: s.id)
    def test_summary_adds_up_to_a_day(self, schedule):
        assert sum(activity_summary(schedule).values()) == HOURS_PER_DAY

    def test_every_npc_role_has_a_schedule(self):
        for role in {t.role for t in NPC_TEMPLATES}:
            assert REGISTRY.schedule_for_role(role) is not None, role

    def test_location_markers_are_placeholders(self):
        for schedule in SCHEDULE_TEMPLATES:
            for entry in schedule.entries:
                assert entry.location_marker.startswith("{{") and entry.location_marker.endswith("}}")


# ---------------------------------------------------------------------------
# Hour lookups
# ---------------------------------------------------------------------------

class TestActivityAt:
    def test_overnight_entry_wraps(self):
        deputy = REGISTRY.schedule_for_role("deputy")
        assert activity_at(deputy, 2).activity is ScheduleActivity.PATROL
        assert activity_at(deputy, 20).activity is ScheduleActivity.PATROL
        assert activity_at(deputy, 4).activity is ScheduleActivity.WORK

    def test_hour_taken_modulo_day(self):
        deputy = REGISTRY.schedule_for_role("deputy")
        assert activity_at(deputy, 25) == activity_at(deputy, 1)
        assert activity_at(deputy, -1) == activity_at(deputy, 23)

    def test_end_hour_is_exclusive(self):
        schedule = _make_schedule((0, 8, "sleep"), (8, 24, "work"))
        assert activity_at(schedule, 7).activity is ScheduleActivity.SLEEP
        assert activity_at(schedule, 8).activity is ScheduleActivity.WORK

    def test_gap_returns_none(self):
        schedule = _make_schedule((0, 8, "sleep"), (9, 24, "work"))
        assert activity_at(schedule, 8) is None
        assert not covers_full_day(schedule)

    def test_summary_counts_wrapped_hours(self):
        schedule = _make_schedule((22, 6, "sleep"), (6, 22, "work"))
        assert activity_summary(schedule) == {"sleep": 8, "work": 16}


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

class TestCategories:
    def test_category_members_carry_a_category_tag(self):
        ids = schedule_ids_by_category(SCHEDULE_TEMPLATES, "criminal")
        assert ids
        assert "outlaw_schedule" in ids

    def test_unknown_category_is_empty(self):
        assert schedule_ids_by_category(SCHEDULE_TEMPLATES, "astronaut") == []
