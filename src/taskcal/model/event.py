# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskcal.model.task import Priority, TaskStatus


class EventTag(TypedDict):
    id: str
    name: str
    color: Optional[str]


class CalendarEvent(TypedDict):
    id: str
    title: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    all_day: bool
    status: TaskStatus
    priority: Priority
    description: Optional[str]
    list_id: Optional[str]
    list_color: Optional[str]
    tags: list[EventTag]
    is_recurring: bool
    estimated_time: Optional[int]
    is_overdue: bool
