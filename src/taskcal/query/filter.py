# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

from taskcal.model.event import CalendarEvent
from taskcal.model.filter import CalendarEventFilter
from taskcal.model.task import PRIORITY_ORDER, Priority, TaskStatus


def generate_filter(event_filter: CalendarEventFilter) -> "And":
    """
    Build the conjunction of every criterion set on `event_filter`.

    Empty lists and empty search strings do not constrain anything. Completed
    events are excluded unless `include_completed` is set.
    """
    predicate = And()

    if event_filter.get("status"):
        predicate.add_predicate(StatusIn(event_filter["status"]))
    if event_filter.get("priority"):
        predicate.add_predicate(PriorityIn(event_filter["priority"]))
    if event_filter.get("list_ids"):
        predicate.add_predicate(ListIn(event_filter["list_ids"]))
    if event_filter.get("tag_ids"):
        predicate.add_predicate(AnyTagIn(event_filter["tag_ids"]))
    search = event_filter.get("search")
    if search:
        predicate.add_predicate(Search(search))
    if not event_filter.get("include_completed"):
        predicate.add_predicate(NotCompleted())
    min_priority = event_filter.get("min_priority")
    if min_priority is not None:
        predicate.add_predicate(MinPriority(min_priority))
    if event_filter.get("exclude_all_day"):
        predicate.add_predicate(AllDay(False))
    if event_filter.get("only_all_day"):
        predicate.add_predicate(AllDay(True))

    return predicate


def apply_event_filters(
    events: list[CalendarEvent], event_filter: Optional[CalendarEventFilter]
) -> list[CalendarEvent]:
    if event_filter is None:
        return list(events)
    return generate_filter(event_filter).filter(events)


class Predicate(ABC):
    def filter(self, events: list[CalendarEvent]) -> list[CalendarEvent]:
        return [event for event in events if self.matches(event)]

    @abstractmethod
    def matches(self, event: CalendarEvent) -> bool: ...


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def matches(self, event: CalendarEvent) -> bool:
        return all(predicate.matches(event) for predicate in self.predicates)


class StatusIn(Predicate):
    def __init__(self, statuses: list[TaskStatus]) -> None:
        self.statuses = set(statuses)

    def matches(self, event: CalendarEvent) -> bool:
        return event["status"] in self.statuses


class PriorityIn(Predicate):
    def __init__(self, priorities: list[Priority]) -> None:
        self.priorities = set(priorities)

    def matches(self, event: CalendarEvent) -> bool:
        return event["priority"] in self.priorities


class ListIn(Predicate):
    def __init__(self, list_ids: list[str]) -> None:
        self.list_ids = set(list_ids)

    def matches(self, event: CalendarEvent) -> bool:
        return event["list_id"] in self.list_ids


class AnyTagIn(Predicate):
    def __init__(self, tag_ids: list[str]) -> None:
        self.tag_ids = set(tag_ids)

    def matches(self, event: CalendarEvent) -> bool:
        return any(tag["id"] in self.tag_ids for tag in event["tags"])


class Search(Predicate):
    """Case-insensitive substring match on title or description."""

    def __init__(self, query: str) -> None:
        self.query = query.lower()

    def matches(self, event: CalendarEvent) -> bool:
        if self.query in event["title"].lower():
            return True
        description = event["description"]
        return description is not None and self.query in description.lower()


class NotCompleted(Predicate):
    def matches(self, event: CalendarEvent) -> bool:
        return event["status"] != TaskStatus.DONE


class MinPriority(Predicate):
    def __init__(self, min_priority: Priority) -> None:
        self.min_value = PRIORITY_ORDER[Priority(min_priority)]

    def matches(self, event: CalendarEvent) -> bool:
        return PRIORITY_ORDER[event["priority"]] >= self.min_value


class AllDay(Predicate):
    def __init__(self, all_day: bool) -> None:
        self.all_day = all_day

    def matches(self, event: CalendarEvent) -> bool:
        return event["all_day"] == self.all_day
