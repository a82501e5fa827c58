# SPDX-License-Identifier: MIT

import pendulum

from taskcal import time
from taskcal.model.view import CalendarViewType, DateRange

DEFAULT_AGENDA_DAYS = 14


def shift_reference_date(
    view_type: CalendarViewType,
    date: pendulum.DateTime,
    step: int,
    agenda_days: int = DEFAULT_AGENDA_DAYS,
) -> pendulum.DateTime:
    """
    Move a reference date by `step` periods of the given view.

    Months land on the first of the month so that stepping from the 31st
    never skips a short month.
    """
    _validate_agenda_days(agenda_days)
    match CalendarViewType(view_type):
        case CalendarViewType.MONTH:
            return time.add_months(time.start_of_month(date), step)
        case CalendarViewType.WEEK:
            return time.add_weeks(date, step)
        case CalendarViewType.DAY:
            return time.add_days(date, step)
        case CalendarViewType.AGENDA:
            return time.add_days(date, step * agenda_days)
    raise ValueError(f"Unknown calendar view type '{view_type}'")


def go_to_today(now: pendulum.DateTime) -> pendulum.DateTime:
    return time.start_of_day(now)


def view_date_range(
    view_type: CalendarViewType,
    date: pendulum.DateTime,
    start_of_week: int = 0,
    agenda_days: int = DEFAULT_AGENDA_DAYS,
) -> DateRange:
    """
    The range a view covers around `date`: the calendar month, the week per
    `start_of_week`, the single day, or `agenda_days` days starting at `date`.
    The month range is the month itself, not the padded grid.
    """
    time.validate_start_of_week(start_of_week)
    _validate_agenda_days(agenda_days)
    match CalendarViewType(view_type):
        case CalendarViewType.MONTH:
            return {"start": time.start_of_month(date), "end": time.end_of_month(date)}
        case CalendarViewType.WEEK:
            return {
                "start": time.start_of_week(date, start_of_week),
                "end": time.end_of_week(date, start_of_week),
            }
        case CalendarViewType.DAY:
            return {"start": time.start_of_day(date), "end": time.end_of_day(date)}
        case CalendarViewType.AGENDA:
            return {
                "start": time.start_of_day(date),
                "end": time.end_of_day(time.add_days(date, agenda_days - 1)),
            }
    raise ValueError(f"Unknown calendar view type '{view_type}'")


def _validate_agenda_days(agenda_days: int) -> None:
    if isinstance(agenda_days, bool) or not isinstance(agenda_days, int) or agenda_days < 1:
        raise ValueError(f"agenda_days must be a positive integer, got {agenda_days!r}")
