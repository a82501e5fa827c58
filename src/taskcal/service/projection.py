# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from taskcal import time
from taskcal.model.event import CalendarEvent
from taskcal.model.task import CLOSED_STATUSES, Task

DEFAULT_EVENT_DURATION_MINUTES = 60
MIN_EVENT_DURATION_MINUTES = 15

logger = logging.getLogger(__name__)


def task_anchor_date(task: Task) -> Optional[pendulum.DateTime]:
    """The date a task is placed on: its due date, else its start date."""
    if task["due_date"] is not None:
        return task["due_date"]
    return task["start_date"]


def has_time_component(date: pendulum.DateTime) -> bool:
    """
    Whether a date carries a time of day. Exactly midnight counts as no time,
    so a timed task due at 00:00 is shown as all-day.
    """
    return (
        date.hour != 0
        or date.minute != 0
        or date.second != 0
        or date.microsecond != 0
    )


def event_duration_minutes(estimated_time: Optional[int]) -> int:
    """
    Minutes a timed event lasts. A missing estimate falls back to an hour,
    zero or negative estimates get the smallest slot a grid can draw.
    """
    if estimated_time is None:
        return DEFAULT_EVENT_DURATION_MINUTES
    if estimated_time > 0:
        return estimated_time
    return MIN_EVENT_DURATION_MINUTES


def task_to_calendar_event(
    task: Task, now: Optional[pendulum.DateTime] = None
) -> Optional[CalendarEvent]:
    """
    Convert a task into a calendar event.

    Args:
        task: The validated task to project
        now: Current instant used for the overdue flag (defaults to now in UTC)

    Returns:
        The event, or None when the task has neither a due date nor a start date
    """
    anchor = task_anchor_date(task)
    if anchor is None:
        return None

    if now is None:
        now = time.now_utc()

    start = anchor
    all_day = not has_time_component(start)
    if all_day:
        end = time.end_of_day(start)
    else:
        end = time.add_minutes(start, event_duration_minutes(task["estimated_time"]))

    is_overdue = task["status"] not in CLOSED_STATUSES and time.is_past(start, now)

    return {
        "id": task["id"],
        "title": task["title"],
        "start": start,
        "end": end,
        "all_day": all_day,
        "status": task["status"],
        "priority": task["priority"],
        "description": task["description"],
        "list_id": task["list_id"],
        "list_color": task["list_color"],
        "tags": [
            {"id": tag["id"], "name": tag["name"], "color": tag["color"]}
            for tag in task["tags"]
        ],
        "is_recurring": bool(task["recurrence_rule"]),
        "estimated_time": task["estimated_time"],
        "is_overdue": is_overdue,
    }


def tasks_to_calendar_events(
    tasks: list[Task], now: Optional[pendulum.DateTime] = None
) -> list[CalendarEvent]:
    """Project every task, dropping the ones that have no date."""
    if now is None:
        now = time.now_utc()
    events: list[CalendarEvent] = []
    for task in tasks:
        event = task_to_calendar_event(task, now)
        if event is None:
            logger.debug("Skipping task %s: no due or start date", task["id"])
            continue
        events.append(event)
    return events
