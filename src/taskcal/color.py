# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from rich.color import Color, ColorParseError

from taskcal.model.event import CalendarEvent
from taskcal.model.task import CLOSED_STATUSES, Priority, TaskStatus

logger = logging.getLogger(__name__)

DEFAULT_EVENT_COLOR = "white"
COMPLETED_EVENT_COLOR = "bright_black"
OVERDUE_COLOR = "red"
TODAY_STYLE = "bold black on bright_cyan"
SELECTED_STYLE = "bold black on plum1"
OUTSIDE_MONTH_STYLE = "dim"
TIME_STYLE = "dim"

PRIORITY_COLORS: dict[Priority, str] = {
    Priority.NONE: "bright_black",
    Priority.LOW: "green",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "red",
}

STATUS_MARKERS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "○",
    TaskStatus.IN_PROGRESS: "◐",
    TaskStatus.DONE: "●",
    TaskStatus.CANCELLED: "✗",
}


def event_color(event: CalendarEvent) -> str:
    """Color an event by its list, greyed out once closed."""
    if event["status"] in CLOSED_STATUSES:
        return COMPLETED_EVENT_COLOR
    return list_color(event["list_color"]) or DEFAULT_EVENT_COLOR


def list_color(color: Optional[str]) -> Optional[str]:
    """A list color usable as a rich style: hex ("#D97757") or a color name."""
    if color is None or color.strip() == "":
        return None
    try:
        Color.parse(color.strip())
    except ColorParseError:
        logger.debug("Ignoring unknown list color %r", color)
        return None
    return color.strip()
