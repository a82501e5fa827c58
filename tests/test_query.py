"""Tests for range queries over projected events."""

import pendulum
import pytest

from taskcal.model.task import TaskStatus
from taskcal.service.projection import task_to_calendar_event
from taskcal.service.query import (
    day_range,
    event_interval,
    event_overlaps_range,
    get_events_for_date,
    get_events_for_range,
)


def _dt(*args: int) -> pendulum.DateTime:
    return pendulum.datetime(*args, tz="UTC")


def _ids(events):
    return [event["id"] for event in events]


# ---------------------------------------------------------------------------
# Overlap
# ---------------------------------------------------------------------------

class TestEventOverlapsRange:
    def test_all_day_event_covers_its_whole_day(self, make_task, now):
        event = task_to_calendar_event(make_task(due_date="2024-03-05"), now)
        assert event is not None
        start, end = event_interval(event)
        assert start == _dt(2024, 3, 5)
        assert end.date() == start.date()
        assert event_overlaps_range(
            event, {"start": _dt(2024, 3, 5, 22), "end": _dt(2024, 3, 6, 2)}
        )

    def test_all_day_event_does_not_leak_into_next_day(self, make_task, now):
        event = task_to_calendar_event(make_task(due_date="2024-03-05"), now)
        assert event is not None
        assert not event_overlaps_range(event, day_range(_dt(2024, 3, 6)))

    def test_event_ending_at_range_start_is_excluded(self, make_task, now):
        event = task_to_calendar_event(
            make_task(due_date="2024-03-05T08:00:00", estimated_time=60), now
        )
        assert event is not None
        assert not event_overlaps_range(
            event, {"start": _dt(2024, 3, 5, 9), "end": _dt(2024, 3, 5, 12)}
        )

    def test_event_spanning_midnight_is_in_both_days(self, make_task, now):
        event = task_to_calendar_event(
            make_task(due_date="2024-03-05T23:30:00", estimated_time=90), now
        )
        assert event is not None
        assert event_overlaps_range(event, day_range(_dt(2024, 3, 5)))
        assert event_overlaps_range(event, day_range(_dt(2024, 3, 6)))


# ---------------------------------------------------------------------------
# Range queries
# ---------------------------------------------------------------------------

class TestGetEventsForRange:
    def test_keeps_only_overlapping_events(self, make_task, now):
        tasks = [
            make_task(id="before", due_date="2024-03-01"),
            make_task(id="inside", due_date="2024-03-05T10:00:00"),
            make_task(id="after", due_date="2024-03-09"),
            make_task(id="undated"),
        ]
        events = get_events_for_range(
            tasks, {"start": _dt(2024, 3, 4), "end": _dt(2024, 3, 8)}, now=now
        )
        assert _ids(events) == ["inside"]

    def test_filter_is_applied_after_overlap(self, make_task, now):
        tasks = [
            make_task(id="open", due_date="2024-03-05"),
            make_task(id="done", due_date="2024-03-05", status="DONE"),
        ]
        date_range = day_range(_dt(2024, 3, 5))

        assert _ids(get_events_for_range(tasks, date_range, now=now)) == ["open", "done"]
        assert _ids(get_events_for_range(tasks, date_range, {}, now)) == ["open"]
        assert _ids(
            get_events_for_range(
                tasks, date_range, {"status": [TaskStatus.DONE], "include_completed": True}, now
            )
        ) == ["done"]

    def test_empty_range_at_an_instant(self, make_task, now):
        tasks = [make_task(id="x", due_date="2024-03-05T10:00:00")]
        instant = _dt(2024, 3, 5, 10, 30)
        assert _ids(
            get_events_for_range(tasks, {"start": instant, "end": instant}, now=now)
        ) == ["x"]

    def test_inverted_range_raises(self, make_task, now):
        with pytest.raises(ValueError, match="Invalid date range"):
            get_events_for_range(
                [make_task(due_date="2024-03-05")],
                {"start": _dt(2024, 3, 6), "end": _dt(2024, 3, 5)},
                now=now,
            )

    def test_no_tasks(self, now):
        assert get_events_for_range([], day_range(_dt(2024, 3, 5)), now=now) == []


class TestGetEventsForDate:
    def test_events_of_one_day(self, make_task, now):
        tasks = [
            make_task(id="morning", due_date="2024-03-05T08:00:00"),
            make_task(id="all-day", due_date="2024-03-05"),
            make_task(id="next", due_date="2024-03-06T00:30:00"),
        ]
        events = get_events_for_date(tasks, _dt(2024, 3, 5, 15), now=now)
        assert sorted(_ids(events)) == ["all-day", "morning"]
