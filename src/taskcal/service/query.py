# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from taskcal import time
from taskcal.model.event import CalendarEvent
from taskcal.model.filter import CalendarEventFilter
from taskcal.model.task import Task
from taskcal.model.view import DateRange
from taskcal.query.filter import apply_event_filters
from taskcal.service.projection import tasks_to_calendar_events
from taskcal.validate import validate_date_range

logger = logging.getLogger(__name__)


def event_interval(
    event: CalendarEvent,
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    The interval an event occupies for overlap checks. All-day events cover
    their whole calendar days, timed events their exact timestamps.
    """
    if event["all_day"]:
        return time.start_of_day(event["start"]), time.end_of_day(event["end"])
    return event["start"], event["end"]


def event_overlaps_range(event: CalendarEvent, date_range: DateRange) -> bool:
    event_start, event_end = event_interval(event)
    return time.is_time_overlap(
        event_start, event_end, date_range["start"], date_range["end"]
    )


def day_range(date: pendulum.DateTime) -> DateRange:
    return {"start": time.start_of_day(date), "end": time.end_of_day(date)}


def get_events_for_range(
    tasks: list[Task],
    date_range: DateRange,
    event_filter: Optional[CalendarEventFilter] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[CalendarEvent]:
    """
    Project tasks and keep the events that overlap `date_range`.

    Args:
        tasks: Validated tasks
        date_range: Inclusive range to query
        event_filter: Optional criteria applied after the overlap check
        now: Current instant for the overdue flag (defaults to now in UTC)

    Raises:
        ValueError: If the range starts after it ends
    """
    validate_date_range(date_range)
    if now is None:
        now = time.now_utc()

    events = [
        event
        for event in tasks_to_calendar_events(tasks, now)
        if event_overlaps_range(event, date_range)
    ]
    filtered_events = apply_event_filters(events, event_filter)

    logger.debug(
        "Range %s..%s: %d of %d tasks matched, %d after filters",
        time.datetime_to_iso_str(date_range["start"]),
        time.datetime_to_iso_str(date_range["end"]),
        len(events),
        len(tasks),
        len(filtered_events),
    )
    return filtered_events


def get_events_for_date(
    tasks: list[Task],
    date: pendulum.DateTime,
    event_filter: Optional[CalendarEventFilter] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[CalendarEvent]:
    """Events overlapping the calendar day of `date`."""
    return get_events_for_range(tasks, day_range(date), event_filter, now)
