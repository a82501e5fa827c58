# SPDX-License-Identifier: MIT

"""
Boundary validation for task records handed to the calendar.

Records arrive as loosely shaped mappings (from the task store or any other
caller). They are checked and converted into `Task` records once, here, so
that date arithmetic further down never has to deal with missing keys, strings
where datetimes belong or unknown enum values.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

import pendulum

from taskcal import time
from taskcal.model.task import Priority, Task, TaskStatus, TaskTag
from taskcal.model.view import DateRange


def validate_task_record(record: Mapping[str, Any], tz: str = "UTC") -> Task:
    """
    Validate a raw task record and convert it into a `Task`.

    Args:
        record: Mapping with at least `id`, `title` and `status`
        tz: Timezone applied to naive dates and date strings without an offset

    Raises:
        ValueError: If a field is missing or malformed
    """
    if not isinstance(record, Mapping):
        raise ValueError(f"Task record must be a mapping, got {type(record).__name__}")

    task_id = _require_id(record.get("id"), "Task")
    label = f"Task '{task_id}'"

    title = record.get("title")
    if not isinstance(title, str):
        raise ValueError(f"{label}: 'title' must be a string")

    return {
        "id": task_id,
        "title": title,
        "description": _optional_str(record, "description", label),
        "status": _parse_status(record.get("status"), label),
        "priority": _parse_priority(record.get("priority"), label),
        "due_date": _parse_date(record, "due_date", label, tz),
        "start_date": _parse_date(record, "start_date", label, tz),
        "estimated_time": _parse_estimated_time(record.get("estimated_time"), label),
        "list_id": _optional_id(record.get("list_id"), label, "list_id"),
        "list_color": _list_color(record, label),
        "recurrence_rule": _optional_str(record, "recurrence_rule", label),
        "tags": _parse_tags(record.get("tags"), label),
    }


def validate_task_records(
    records: Iterable[Mapping[str, Any]], tz: str = "UTC"
) -> list[Task]:
    return [validate_task_record(record, tz=tz) for record in records]


def validate_date_range(date_range: DateRange) -> DateRange:
    if date_range["start"] > date_range["end"]:
        raise ValueError(
            "Invalid date range: start "
            f"{time.datetime_to_iso_str(date_range['start'])} is after end "
            f"{time.datetime_to_iso_str(date_range['end'])}"
        )
    return date_range


def _require_id(value: Any, label: str) -> str:
    if isinstance(value, bool) or not isinstance(value, str | int):
        raise ValueError(f"{label}: 'id' must be a string or integer")
    task_id = str(value).strip()
    if not task_id:
        raise ValueError(f"{label}: 'id' must not be empty")
    return task_id


def _optional_id(value: Any, label: str, key: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, str | int):
        raise ValueError(f"{label}: '{key}' must be a string or integer")
    return str(value)


def _optional_str(record: Mapping[str, Any], key: str, label: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{label}: '{key}' must be a string")
    return value


def _list_color(record: Mapping[str, Any], label: str) -> Optional[str]:
    # A joined list relation ({"list": {"color": ...}}) is accepted as well as
    # a flat list_color.
    if record.get("list_color") is not None:
        return _optional_str(record, "list_color", label)
    task_list = record.get("list")
    if isinstance(task_list, Mapping):
        return _optional_str(task_list, "color", label)
    return None


def _parse_status(value: Any, label: str) -> TaskStatus:
    if value is None:
        raise ValueError(f"{label}: 'status' is required")
    try:
        return TaskStatus(str(value).upper())
    except ValueError:
        allowed = ", ".join(status.value for status in TaskStatus)
        raise ValueError(
            f"{label}: unknown status '{value}' (expected one of {allowed})"
        ) from None


def _parse_priority(value: Any, label: str) -> Priority:
    if value is None:
        return Priority.NONE
    try:
        return Priority(str(value).upper())
    except ValueError:
        allowed = ", ".join(priority.value for priority in Priority)
        raise ValueError(
            f"{label}: unknown priority '{value}' (expected one of {allowed})"
        ) from None


def _parse_date(
    record: Mapping[str, Any], key: str, label: str, tz: str
) -> Optional[pendulum.DateTime]:
    try:
        return time.as_datetime_optional(record.get(key), tz=tz)
    except ValueError as e:
        raise ValueError(f"{label}: '{key}' {e}") from e


def _parse_estimated_time(value: Any, label: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label}: 'estimated_time' must be an integer number of minutes")
    return value


def _parse_tags(value: Any, label: str) -> list[TaskTag]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{label}: 'tags' must be a list")

    tags: list[TaskTag] = []
    for raw_tag in value:
        # Tag associations may be wrapped as {"tag": {...}}
        if isinstance(raw_tag, Mapping) and isinstance(raw_tag.get("tag"), Mapping):
            raw_tag = raw_tag["tag"]
        if not isinstance(raw_tag, Mapping):
            raise ValueError(f"{label}: every tag must be a mapping")
        tag_label = f"{label} tag"
        name = raw_tag.get("name")
        if not isinstance(name, str):
            raise ValueError(f"{tag_label}: 'name' must be a string")
        tags.append(
            {
                "id": _require_id(raw_tag.get("id"), tag_label),
                "name": name,
                "color": _optional_str(raw_tag, "color", tag_label),
            }
        )
    return tags
