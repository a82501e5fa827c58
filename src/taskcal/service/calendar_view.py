# SPDX-License-Identifier: MIT

"""
View model generation for the month, week, day and agenda calendars.

Every generator runs the same pipeline: work out the date range the view
covers, query the events overlapping it (projection, overlap and filters in
`taskcal.service.query`), then lay those events out in the view's shape. The
returned records are complete, so a renderer only has to draw them.
"""

import logging
from typing import Optional

import pendulum

from taskcal import time
from taskcal.model.event import CalendarEvent
from taskcal.model.filter import CalendarViewOptions
from taskcal.model.task import Task
from taskcal.model.view import (
    AgendaItem,
    AgendaViewData,
    CalendarDay,
    CalendarViewType,
    CalendarWeek,
    DateRange,
    DayViewData,
    MonthViewData,
    ViewData,
    WeekViewData,
)
from taskcal.service.navigation import DEFAULT_AGENDA_DAYS, view_date_range
from taskcal.service.query import day_range, get_events_for_range

logger = logging.getLogger(__name__)

MAX_MONTH_WEEKS = 6
DAYS_PER_WEEK = 7
HOURS = list(range(24))


def generate_month_view(
    tasks: list[Task],
    current_date: pendulum.DateTime,
    options: Optional[CalendarViewOptions] = None,
    now: Optional[pendulum.DateTime] = None,
) -> MonthViewData:
    """
    Build the month grid containing `current_date`.

    The grid starts on the first day of the week holding the 1st of the month
    and adds whole weeks until the week holding the last day of the month is
    in, never more than six. Each cell lists the events that start on that
    day, so a multi-day event only appears on its first day.
    """
    options, now, week_start = _resolve(options, now)

    month_start = time.start_of_month(current_date)
    month_end = time.end_of_month(current_date)

    week_starts: list[pendulum.DateTime] = []
    week_start_date = time.start_of_week(month_start, week_start)
    while len(week_starts) < MAX_MONTH_WEEKS:
        week_starts.append(week_start_date)
        week_start_date = time.add_days(week_start_date, DAYS_PER_WEEK)
        if week_start_date > month_end:
            break

    grid_range: DateRange = {
        "start": week_starts[0],
        "end": time.end_of_day(time.add_days(week_starts[-1], DAYS_PER_WEEK - 1)),
    }
    events = _query_view_events(tasks, grid_range, options, now)

    weeks: list[CalendarWeek] = []
    for start_date in week_starts:
        days: list[CalendarDay] = []
        for offset in range(DAYS_PER_WEEK):
            date = time.add_days(start_date, offset)
            days.append(
                _build_calendar_day(
                    date,
                    events,
                    now,
                    options,
                    is_current_month=time.is_same_month(date, month_start),
                )
            )
        weeks.append({"start_date": start_date, "days": days})

    logger.debug(
        "Month view %s: %d weeks, %d events",
        month_start.format("YYYY-MM"),
        len(weeks),
        len(events),
    )

    return {
        "first_day": month_start,
        "last_day": month_end,
        "weeks": weeks,
        "total_events": len(events),
    }


def generate_week_view(
    tasks: list[Task],
    current_date: pendulum.DateTime,
    options: Optional[CalendarViewOptions] = None,
    now: Optional[pendulum.DateTime] = None,
) -> WeekViewData:
    """
    Build the seven-day week containing `current_date`. Days list the events
    starting on them; `events` holds every event overlapping the week for
    positioning on the hour axis.
    """
    options, now, week_start = _resolve(options, now)

    week_range: DateRange = {
        "start": time.start_of_week(current_date, week_start),
        "end": time.end_of_week(current_date, week_start),
    }
    events = _query_view_events(tasks, week_range, options, now)

    days = [
        _build_calendar_day(
            time.add_days(week_range["start"], offset),
            events,
            now,
            options,
            is_current_month=True,
        )
        for offset in range(DAYS_PER_WEEK)
    ]

    logger.debug(
        "Week view %s: %d events",
        week_range["start"].to_date_string(),
        len(events),
    )

    return {
        "start_date": week_range["start"],
        "end_date": week_range["end"],
        "days": days,
        "hours": list(HOURS),
        "events": events,
    }


def generate_day_view(
    tasks: list[Task],
    current_date: pendulum.DateTime,
    options: Optional[CalendarViewOptions] = None,
    now: Optional[pendulum.DateTime] = None,
) -> DayViewData:
    """Events overlapping a single day. The caller lays out all-day and timed events separately."""
    options, now, _ = _resolve(options, now)

    events = _query_view_events(tasks, day_range(current_date), options, now)

    logger.debug(
        "Day view %s: %d events", current_date.to_date_string(), len(events)
    )

    return {
        "date": time.start_of_day(current_date),
        "hours": list(HOURS),
        "events": events,
    }


def generate_agenda_view(
    tasks: list[Task],
    start_date: pendulum.DateTime,
    end_date: pendulum.DateTime,
    options: Optional[CalendarViewOptions] = None,
    now: Optional[pendulum.DateTime] = None,
) -> AgendaViewData:
    """
    Group the events of a range by the day they start on.

    Only days with at least one event get an item, in ascending date order.

    Raises:
        ValueError: If `start_date` is after `end_date`
    """
    options, now, _ = _resolve(options, now)

    events = _query_view_events(
        tasks, {"start": start_date, "end": end_date}, options, now
    )

    events_by_date: dict[pendulum.DateTime, list[CalendarEvent]] = {}
    for event in events:
        date_key = time.start_of_day(time.align_tz(event["start"], start_date))
        events_by_date.setdefault(date_key, []).append(event)

    items: list[AgendaItem] = [
        {"date": date_key, "events": events_by_date[date_key]}
        for date_key in sorted(events_by_date)
    ]

    logger.debug(
        "Agenda view %s..%s: %d days, %d events",
        start_date.to_date_string(),
        end_date.to_date_string(),
        len(items),
        len(events),
    )

    return {
        "start_date": start_date,
        "end_date": end_date,
        "items": items,
        "total_events": len(events),
    }


def generate_view(
    tasks: list[Task],
    view_type: CalendarViewType,
    current_date: pendulum.DateTime,
    options: Optional[CalendarViewOptions] = None,
    now: Optional[pendulum.DateTime] = None,
    agenda_days: int = DEFAULT_AGENDA_DAYS,
) -> ViewData:
    """Generate the view model for `view_type`. The agenda covers `agenda_days` days from `current_date`."""
    match CalendarViewType(view_type):
        case CalendarViewType.MONTH:
            return generate_month_view(tasks, current_date, options, now)
        case CalendarViewType.WEEK:
            return generate_week_view(tasks, current_date, options, now)
        case CalendarViewType.DAY:
            return generate_day_view(tasks, current_date, options, now)
        case CalendarViewType.AGENDA:
            agenda_range = view_date_range(
                CalendarViewType.AGENDA, current_date, agenda_days=agenda_days
            )
            return generate_agenda_view(
                tasks, agenda_range["start"], agenda_range["end"], options, now
            )
    raise ValueError(f"Unknown calendar view type '{view_type}'")


def _resolve(
    options: Optional[CalendarViewOptions], now: Optional[pendulum.DateTime]
) -> tuple[CalendarViewOptions, pendulum.DateTime, int]:
    if options is None:
        options = {}
    if now is None:
        now = time.now_utc()
    week_start = time.validate_start_of_week(options.get("start_of_week", 0))
    return options, now, week_start


def _query_view_events(
    tasks: list[Task],
    date_range: DateRange,
    options: CalendarViewOptions,
    now: pendulum.DateTime,
) -> list[CalendarEvent]:
    events = get_events_for_range(tasks, date_range, options, now)
    return sorted(events, key=_chronological_key)


def _chronological_key(event: CalendarEvent) -> tuple[bool, pendulum.DateTime]:
    # All-day events lead their day, timed events follow in start order
    return (not event["all_day"], event["start"])


def _build_calendar_day(
    date: pendulum.DateTime,
    events: list[CalendarEvent],
    now: pendulum.DateTime,
    options: CalendarViewOptions,
    is_current_month: bool,
) -> CalendarDay:
    selected_date = options.get("selected_date")
    return {
        "date": date,
        "is_current_month": is_current_month,
        "is_today": time.is_same_day(date, now),
        "is_selected": selected_date is not None
        and time.is_same_day(date, selected_date),
        "events": [event for event in events if time.is_same_day(date, event["start"])],
    }
