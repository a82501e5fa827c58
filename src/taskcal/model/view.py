# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

import pendulum

from taskcal.model.event import CalendarEvent


class CalendarViewType(StrEnum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    AGENDA = "agenda"


class DateRange(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime


class CalendarDay(TypedDict):
    date: pendulum.DateTime
    is_current_month: bool
    is_today: bool
    is_selected: bool
    events: list[CalendarEvent]


class CalendarWeek(TypedDict):
    start_date: pendulum.DateTime
    days: list[CalendarDay]


class MonthViewData(TypedDict):
    first_day: pendulum.DateTime
    last_day: pendulum.DateTime
    weeks: list[CalendarWeek]
    total_events: int


class WeekViewData(TypedDict):
    start_date: pendulum.DateTime
    end_date: pendulum.DateTime
    days: list[CalendarDay]
    hours: list[int]
    events: list[CalendarEvent]


class DayViewData(TypedDict):
    date: pendulum.DateTime
    hours: list[int]
    events: list[CalendarEvent]


class AgendaItem(TypedDict):
    date: pendulum.DateTime
    events: list[CalendarEvent]


class AgendaViewData(TypedDict):
    start_date: pendulum.DateTime
    end_date: pendulum.DateTime
    items: list[AgendaItem]
    total_events: int


ViewData = MonthViewData | WeekViewData | DayViewData | AgendaViewData
