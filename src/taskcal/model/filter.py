# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskcal.model.task import Priority, TaskStatus


class CalendarEventFilter(TypedDict, total=False):
    """
    Criteria narrowing calendar events. Every key is optional and each present
    key is an independent predicate; an event must satisfy all of them.

    `exclude_all_day` and `only_all_day` are mutually exclusive. Setting both
    is a caller error and the result is undefined.
    """

    status: list[TaskStatus]
    priority: list[Priority]
    list_ids: list[str]
    tag_ids: list[str]
    search: Optional[str]
    include_completed: bool
    min_priority: Priority
    exclude_all_day: bool
    only_all_day: bool


class CalendarViewOptions(CalendarEventFilter, total=False):
    start_of_week: int
    selected_date: Optional[pendulum.DateTime]
