# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum


class TaskStatus(StrEnum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


class Priority(StrEnum):
    NONE = "NONE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


PRIORITY_ORDER: dict[Priority, int] = {
    Priority.NONE: 0,
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
}

CLOSED_STATUSES = (TaskStatus.DONE, TaskStatus.CANCELLED)


class TaskTag(TypedDict):
    id: str
    name: str
    color: Optional[str]


class Task(TypedDict):
    id: str
    title: str
    description: Optional[str]
    status: TaskStatus
    priority: Priority
    due_date: Optional[pendulum.DateTime]
    start_date: Optional[pendulum.DateTime]
    estimated_time: Optional[int]
    list_id: Optional[str]
    list_color: Optional[str]
    recurrence_rule: Optional[str]
    tags: list[TaskTag]
