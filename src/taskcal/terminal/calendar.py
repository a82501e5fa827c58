# SPDX-License-Identifier: MIT

import logging
from collections.abc import Callable
from typing import Annotated, Any, Optional, TypeVar

import pendulum
import typer
from rich.console import Console

from taskcal import time
from taskcal.model.filter import CalendarViewOptions
from taskcal.model.task import Priority, Task, TaskStatus
from taskcal.model.view import CalendarViewType
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.service.calendar_view import (
    generate_agenda_view,
    generate_day_view,
    generate_month_view,
    generate_week_view,
)
from taskcal.service.conflict import get_blocking_events
from taskcal.service.navigation import (
    go_to_today,
    shift_reference_date,
    view_date_range,
)
from taskcal.service.query import get_events_for_date
from taskcal.terminal.parse import parse_date, parse_time
from taskcal.terminal.validate import (
    validate_hour,
    validate_positive,
    validate_start_of_week_option,
)
from taskcal.view.calendar import (
    render_agenda_view,
    render_day_view,
    render_month_view,
    render_slot_check,
    render_week_view,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DateArgument = Annotated[
    Optional[pendulum.DateTime],
    typer.Argument(
        parser=parse_date,
        help="Reference date (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
        show_default=False,
    ),
]
OffsetOption = Annotated[
    int,
    typer.Option(
        "--offset", "-n", help="Move by this many periods, e.g. -1 for the previous month"
    ),
]
StatusOption = Annotated[
    Optional[list[TaskStatus]],
    typer.Option("--status", "-s", case_sensitive=False, help="Only these statuses"),
]
PriorityOption = Annotated[
    Optional[list[Priority]],
    typer.Option("--priority", "-p", case_sensitive=False, help="Only these priorities"),
]
MinPriorityOption = Annotated[
    Optional[Priority],
    typer.Option(
        "--min-priority", "-mp", case_sensitive=False, help="Only this priority or higher"
    ),
]
ListOption = Annotated[
    Optional[list[str]], typer.Option("--list", "-l", help="Only tasks in these lists")
]
TagOption = Annotated[
    Optional[list[str]],
    typer.Option("--tag", "-t", help="Only tasks with any of these tag IDs"),
]
SearchOption = Annotated[
    Optional[str],
    typer.Option("--search", "-q", help="Search titles and descriptions"),
]
IncludeCompletedOption = Annotated[
    Optional[bool],
    typer.Option(
        "--include-completed/--exclude-completed",
        help="Show completed tasks (defaults to the include_completed setting)",
        show_default=False,
    ),
]
AllDayOnlyOption = Annotated[
    bool, typer.Option("--all-day-only", help="Only show all-day events")
]
NoAllDayOption = Annotated[
    bool, typer.Option("--no-all-day", help="Hide all-day events")
]
StartOfWeekOption = Annotated[
    Optional[int],
    typer.Option(
        "--start-of-week",
        "-sw",
        callback=validate_start_of_week_option,
        help="First day of the week, 0 = Sunday through 6 = Saturday",
        show_default=False,
    ),
]
SelectedOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option("--select", parser=parse_date, help="Highlight this date"),
]
StartHourOption = Annotated[
    int,
    typer.Option("--start-hour", callback=validate_hour, help="First hour always shown"),
]
EndHourOption = Annotated[
    int,
    typer.Option("--end-hour", callback=validate_hour, help="Last hour always shown"),
]


def month(
    date: DateArgument = None,
    offset: OffsetOption = 0,
    status: StatusOption = None,
    priority: PriorityOption = None,
    min_priority: MinPriorityOption = None,
    list_id: ListOption = None,
    tag: TagOption = None,
    search: SearchOption = None,
    include_completed: IncludeCompletedOption = None,
    all_day_only: AllDayOnlyOption = False,
    no_all_day: NoAllDayOption = False,
    start_of_week: StartOfWeekOption = None,
    select: SelectedOption = None,
    cell_width: Annotated[
        int, typer.Option("--cell-width", "-cw", callback=validate_positive)
    ] = 20,
) -> None:
    """Show a month grid of tasks by due or start date."""
    now = time.now_local()
    options = _build_options(
        status=status,
        priority=priority,
        min_priority=min_priority,
        list_ids=list_id,
        tag_ids=tag,
        search=search,
        include_completed=include_completed,
        all_day_only=all_day_only,
        no_all_day=no_all_day,
        start_of_week=start_of_week,
        selected_date=select,
    )
    reference = shift_reference_date(
        CalendarViewType.MONTH, date or go_to_today(now), offset
    )

    view_data = _run(generate_month_view, _load_tasks(), reference, options, now)
    render_month_view(Console(), view_data, options["start_of_week"], cell_width)


def week(
    date: DateArgument = None,
    offset: OffsetOption = 0,
    status: StatusOption = None,
    priority: PriorityOption = None,
    min_priority: MinPriorityOption = None,
    list_id: ListOption = None,
    tag: TagOption = None,
    search: SearchOption = None,
    include_completed: IncludeCompletedOption = None,
    all_day_only: AllDayOnlyOption = False,
    no_all_day: NoAllDayOption = False,
    start_of_week: StartOfWeekOption = None,
    select: SelectedOption = None,
    start_hour: StartHourOption = 8,
    end_hour: EndHourOption = 18,
) -> None:
    """Show the week as an hour grid."""
    now = time.now_local()
    options = _build_options(
        status=status,
        priority=priority,
        min_priority=min_priority,
        list_ids=list_id,
        tag_ids=tag,
        search=search,
        include_completed=include_completed,
        all_day_only=all_day_only,
        no_all_day=no_all_day,
        start_of_week=start_of_week,
        selected_date=select,
    )
    reference = shift_reference_date(
        CalendarViewType.WEEK, date or go_to_today(now), offset
    )

    view_data = _run(generate_week_view, _load_tasks(), reference, options, now)
    render_week_view(Console(), view_data, start_hour, end_hour)


def day(
    date: DateArgument = None,
    offset: OffsetOption = 0,
    status: StatusOption = None,
    priority: PriorityOption = None,
    min_priority: MinPriorityOption = None,
    list_id: ListOption = None,
    tag: TagOption = None,
    search: SearchOption = None,
    include_completed: IncludeCompletedOption = None,
    all_day_only: AllDayOnlyOption = False,
    no_all_day: NoAllDayOption = False,
    start_hour: StartHourOption = 8,
    end_hour: EndHourOption = 18,
) -> None:
    """Show a single day: all-day tasks, then a timeline."""
    now = time.now_local()
    options = _build_options(
        status=status,
        priority=priority,
        min_priority=min_priority,
        list_ids=list_id,
        tag_ids=tag,
        search=search,
        include_completed=include_completed,
        all_day_only=all_day_only,
        no_all_day=no_all_day,
    )
    reference = shift_reference_date(
        CalendarViewType.DAY, date or go_to_today(now), offset
    )

    view_data = _run(generate_day_view, _load_tasks(), reference, options, now)
    render_day_view(Console(), view_data, start_hour, end_hour)


def agenda(
    date: DateArgument = None,
    offset: OffsetOption = 0,
    days: Annotated[
        Optional[int],
        typer.Option(
            "--days",
            "-d",
            callback=validate_positive,
            help="Number of days to list (defaults to the agenda_days setting)",
            show_default=False,
        ),
    ] = None,
    status: StatusOption = None,
    priority: PriorityOption = None,
    min_priority: MinPriorityOption = None,
    list_id: ListOption = None,
    tag: TagOption = None,
    search: SearchOption = None,
    include_completed: IncludeCompletedOption = None,
    all_day_only: AllDayOnlyOption = False,
    no_all_day: NoAllDayOption = False,
) -> None:
    """List upcoming tasks day by day, skipping empty days."""
    config = CONFIGURATION_REPO.get_config()
    agenda_days = days if days is not None else config["agenda_days"]

    now = time.now_local()
    options = _build_options(
        status=status,
        priority=priority,
        min_priority=min_priority,
        list_ids=list_id,
        tag_ids=tag,
        search=search,
        include_completed=include_completed,
        all_day_only=all_day_only,
        no_all_day=no_all_day,
    )
    reference = shift_reference_date(
        CalendarViewType.AGENDA, date or go_to_today(now), offset, agenda_days
    )
    agenda_range = view_date_range(
        CalendarViewType.AGENDA, reference, agenda_days=agenda_days
    )

    view_data = _run(
        generate_agenda_view,
        _load_tasks(),
        agenda_range["start"],
        agenda_range["end"],
        options,
        now,
    )
    render_agenda_view(Console(), view_data)


def free(
    at: Annotated[
        str, typer.Argument(help="Start of the slot in HH:mm", show_default=False)
    ],
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--date",
            "-dt",
            parser=parse_date,
            help="Day of the slot (defaults to today)",
        ),
    ] = None,
    duration: Annotated[
        int,
        typer.Option(
            "--duration", "-m", callback=validate_positive, help="Slot length in minutes"
        ),
    ] = 60,
    exclude: Annotated[
        Optional[str],
        typer.Option("--exclude", "-x", help="Ignore this task, e.g. when moving it"),
    ] = None,
) -> None:
    """Check whether a time slot is free of other open tasks."""
    hour_minute = parse_time(at)
    if hour_minute is None:
        raise typer.BadParameter("A start time is required")

    now = time.now_local()
    day_date = date or go_to_today(now)
    start = time.start_of_day(day_date).set(hour=hour_minute[0], minute=hour_minute[1])
    end = time.add_minutes(start, duration)

    events = _run(
        get_events_for_date,
        _load_tasks(),
        day_date,
        {"status": [TaskStatus.TODO, TaskStatus.IN_PROGRESS]},
        now,
    )
    conflicts = _run(get_blocking_events, events, start, end, exclude)
    available = not conflicts
    render_slot_check(Console(), start, end, available, conflicts)
    if not available:
        raise typer.Exit(code=1)


def _build_options(
    status: Optional[list[TaskStatus]],
    priority: Optional[list[Priority]],
    min_priority: Optional[Priority],
    list_ids: Optional[list[str]],
    tag_ids: Optional[list[str]],
    search: Optional[str],
    include_completed: Optional[bool],
    all_day_only: bool,
    no_all_day: bool,
    start_of_week: Optional[int] = None,
    selected_date: Optional[pendulum.DateTime] = None,
) -> CalendarViewOptions:
    if all_day_only and no_all_day:
        raise typer.BadParameter("--all-day-only and --no-all-day cannot be combined")

    config = CONFIGURATION_REPO.get_config()
    options: CalendarViewOptions = {
        "start_of_week": (
            start_of_week if start_of_week is not None else config["start_of_week"]
        ),
        "include_completed": (
            include_completed
            if include_completed is not None
            else config["include_completed"]
        ),
        "exclude_all_day": no_all_day,
        "only_all_day": all_day_only,
    }
    if status:
        options["status"] = status
    if priority:
        options["priority"] = priority
    if min_priority is not None:
        options["min_priority"] = min_priority
    if list_ids:
        options["list_ids"] = list_ids
    if tag_ids:
        options["tag_ids"] = tag_ids
    if search:
        options["search"] = search
    if selected_date is not None:
        options["selected_date"] = selected_date
    return options


def _load_tasks() -> list[Task]:
    return _run(TASK_REPO.get_all_tasks)


def _run(func: Callable[..., T], *args: Any) -> T:
    """Call into the calendar, turning contract violations into a CLI error."""
    try:
        return func(*args)
    except ValueError as e:
        logger.debug("Calendar call %s failed", func.__name__, exc_info=True)
        Console(stderr=True).print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
