# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskcal import time
from taskcal.model.event import CalendarEvent


def get_overlapping_events(
    events: list[CalendarEvent], date: pendulum.DateTime
) -> list[CalendarEvent]:
    """
    Events happening at the instant `date`. All-day events match on the same
    calendar day, timed events when `date` lies within [start, end].
    """
    overlapping = []
    for event in events:
        if event["all_day"]:
            if time.is_same_day(event["start"], date):
                overlapping.append(event)
        elif time.is_within_range(date, event["start"], event["end"]):
            overlapping.append(event)
    return overlapping


def is_time_slot_available(
    events: list[CalendarEvent],
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    exclude_event_id: Optional[str] = None,
) -> bool:
    """
    Check whether [start, end) is free.

    An all-day event on the day of `start` blocks the slot whatever its hours.
    Timed events block it when they overlap, touching endpoints excluded.

    Args:
        events: Existing events
        start: Proposed start
        end: Proposed end
        exclude_event_id: Event to ignore, e.g. the one being rescheduled

    Raises:
        ValueError: If `start` is after `end`
    """
    return not get_blocking_events(events, start, end, exclude_event_id)


def get_conflicting_events(
    events: list[CalendarEvent], event: CalendarEvent
) -> list[CalendarEvent]:
    """The other events that would double-book `event`."""
    if event["all_day"]:
        return [
            other
            for other in events
            if other["id"] != event["id"]
            and time.is_same_day(other["start"], event["start"])
        ]
    return get_blocking_events(events, event["start"], event["end"], event["id"])


def get_blocking_events(
    events: list[CalendarEvent],
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    exclude_event_id: Optional[str] = None,
) -> list[CalendarEvent]:
    """
    Events that make [start, end) unavailable, see `is_time_slot_available`.

    Raises:
        ValueError: If `start` is after `end`
    """
    if start > end:
        raise ValueError(
            f"Invalid time slot: start {time.datetime_to_iso_str(start)} "
            f"is after end {time.datetime_to_iso_str(end)}"
        )
    blocking = []
    for event in events:
        if exclude_event_id is not None and event["id"] == exclude_event_id:
            continue
        if event["all_day"]:
            if time.is_same_day(start, event["start"]):
                blocking.append(event)
        elif time.is_time_overlap(start, end, event["start"], event["end"]):
            blocking.append(event)
    return blocking
