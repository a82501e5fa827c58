"""Tests for event filtering."""

import pytest

from taskcal.model.task import Priority, TaskStatus
from taskcal.query.filter import apply_event_filters, generate_filter
from taskcal.service.projection import tasks_to_calendar_events


@pytest.fixture
def events(make_task, now):
    tasks = [
        make_task(
            id="a",
            title="Write report",
            description="Numbers for Q1",
            status="TODO",
            priority="HIGH",
            due_date="2024-03-20",
            list_id="work",
            tags=[{"id": "t-focus", "name": "focus"}],
        ),
        make_task(
            id="b",
            title="Buy milk",
            status="DONE",
            priority="LOW",
            due_date="2024-03-20T18:00:00",
            list_id="home",
        ),
        make_task(
            id="c",
            title="Dentist",
            status="IN_PROGRESS",
            priority="MEDIUM",
            due_date="2024-03-21T09:00:00",
            list_id="home",
            tags=[{"id": "t-health", "name": "health"}],
        ),
        make_task(
            id="d",
            title="Call plumber",
            status="CANCELLED",
            due_date="2024-03-22",
        ),
    ]
    return tasks_to_calendar_events(tasks, now)


def _ids(events):
    return [event["id"] for event in events]


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_no_filter_keeps_everything(self, events):
        assert _ids(apply_event_filters(events, None)) == ["a", "b", "c", "d"]

    def test_empty_filter_hides_completed(self, events):
        assert _ids(apply_event_filters(events, {})) == ["a", "c", "d"]

    def test_include_completed(self, events):
        assert _ids(apply_event_filters(events, {"include_completed": True})) == [
            "a",
            "b",
            "c",
            "d",
        ]

    def test_empty_lists_do_not_constrain(self, events):
        result = apply_event_filters(
            events,
            {"status": [], "priority": [], "list_ids": [], "tag_ids": [], "search": ""},
        )
        assert _ids(result) == ["a", "c", "d"]

    def test_input_is_not_modified(self, events):
        before = list(events)
        apply_event_filters(events, {"status": [TaskStatus.TODO]})
        assert events == before


# ---------------------------------------------------------------------------
# Criteria
# ---------------------------------------------------------------------------

class TestCriteria:
    def test_status(self, events):
        result = apply_event_filters(
            events, {"status": [TaskStatus.TODO, TaskStatus.IN_PROGRESS]}
        )
        assert _ids(result) == ["a", "c"]

    def test_done_status_without_completed_is_empty(self, events):
        result = apply_event_filters(
            events, {"status": [TaskStatus.DONE], "include_completed": False}
        )
        assert result == []

    def test_done_status_with_completed(self, events):
        result = apply_event_filters(
            events, {"status": [TaskStatus.DONE], "include_completed": True}
        )
        assert _ids(result) == ["b"]

    def test_priority(self, events):
        result = apply_event_filters(events, {"priority": [Priority.HIGH, Priority.NONE]})
        assert _ids(result) == ["a", "d"]

    def test_min_priority(self, events):
        result = apply_event_filters(
            events, {"min_priority": Priority.MEDIUM, "include_completed": True}
        )
        assert _ids(result) == ["a", "c"]

    def test_list_ids_skip_tasks_without_list(self, events):
        assert _ids(apply_event_filters(events, {"list_ids": ["home"]})) == ["c"]

    def test_any_tag(self, events):
        result = apply_event_filters(events, {"tag_ids": ["t-health", "t-unknown"]})
        assert _ids(result) == ["c"]

    def test_search_title_case_insensitive(self, events):
        assert _ids(apply_event_filters(events, {"search": "DENT"})) == ["c"]

    def test_search_description(self, events):
        assert _ids(apply_event_filters(events, {"search": "q1"})) == ["a"]

    def test_exclude_all_day(self, events):
        result = apply_event_filters(
            events, {"exclude_all_day": True, "include_completed": True}
        )
        assert _ids(result) == ["b", "c"]

    def test_only_all_day(self, events):
        assert _ids(apply_event_filters(events, {"only_all_day": True})) == ["a", "d"]

    def test_criteria_are_combined(self, events):
        result = apply_event_filters(
            events,
            {
                "status": [TaskStatus.TODO, TaskStatus.IN_PROGRESS],
                "list_ids": ["work", "home"],
                "min_priority": Priority.HIGH,
            },
        )
        assert _ids(result) == ["a"]


class TestGenerateFilter:
    def test_predicate_count(self):
        predicate = generate_filter({"status": [TaskStatus.TODO], "search": "x"})
        # status, search and the implicit completed exclusion
        assert len(predicate.predicates) == 3

    def test_include_completed_adds_nothing(self):
        assert generate_filter({"include_completed": True}).predicates == []
