# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskcal import time
from taskcal.color import (
    OUTSIDE_MONTH_STYLE,
    OVERDUE_COLOR,
    PRIORITY_COLORS,
    SELECTED_STYLE,
    STATUS_MARKERS,
    TIME_STYLE,
    TODAY_STYLE,
    event_color,
)
from taskcal.model.event import CalendarEvent
from taskcal.model.view import (
    AgendaViewData,
    CalendarDay,
    DayViewData,
    MonthViewData,
    WeekViewData,
)
from taskcal.view.header import header

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def weekday_headers(start_of_week: int) -> list[str]:
    return [DAY_NAMES[(start_of_week + offset) % 7] for offset in range(7)]


def render_month_view(
    console: Console,
    view_data: MonthViewData,
    start_of_week: int = 0,
    cell_width: int = 20,
    max_events_per_day: int = 3,
) -> None:
    """
    Display a month grid. Days outside the month are dimmed, today and the
    selected day are highlighted, and each cell lists up to
    `max_events_per_day` events.
    """
    header(console, "month", view_data["first_day"].format("MMMM YYYY"))

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in weekday_headers(start_of_week):
        table.add_column(day_name, style="bold", width=cell_width)

    for week in view_data["weeks"]:
        table.add_row(
            *[
                _render_month_cell(day, cell_width, max_events_per_day)
                for day in week["days"]
            ]
        )

    console.print(table)
    console.print(
        Text(f"{view_data['total_events']} events", style=TIME_STYLE), justify="right"
    )


def render_week_view(
    console: Console,
    view_data: WeekViewData,
    start_hour: int = 8,
    end_hour: int = 18,
    cell_width: int = 18,
) -> None:
    """
    Display a week as an hour grid. All-day events sit in the first row,
    timed events in the row of the hour they start. Hours outside
    [start_hour, end_hour] are only shown when they hold an event.
    """
    start_str = view_data["start_date"].format("MMM D")
    end_str = view_data["end_date"].format("MMM D, YYYY")
    header(console, "week", f"{start_str} - {end_str}")

    table = Table(box=box.SIMPLE_HEAD, show_header=True, padding=(0, 1))
    table.add_column("", style=TIME_STYLE, width=5, justify="right")
    for day in view_data["days"]:
        table.add_column(
            _day_heading(day, day["date"].format("ddd D")), width=cell_width
        )

    all_day_cells = [
        _event_lines([e for e in day["events"] if e["all_day"]], cell_width)
        for day in view_data["days"]
    ]
    if any(cell.plain for cell in all_day_cells):
        table.add_row(Text("all", style=TIME_STYLE), *all_day_cells)
        table.add_section()

    for hour in view_data["hours"]:
        hour_cells = [
            _event_lines(_timed_events_in_hour(day["events"], day["date"], hour), cell_width)
            for day in view_data["days"]
        ]
        has_events = any(cell.plain for cell in hour_cells)
        if not has_events and not (start_hour <= hour <= end_hour):
            continue
        table.add_row(Text(f"{hour:02d}:00"), *hour_cells)

    console.print(table)


def render_day_view(
    console: Console,
    view_data: DayViewData,
    start_hour: int = 8,
    end_hour: int = 18,
) -> None:
    """Display all-day events, then a timeline of timed events by hour."""
    date = view_data["date"]
    header(console, "day", time.datetime_to_display_date_str(date))

    all_day_events = [e for e in view_data["events"] if e["all_day"]]
    timed_events = [e for e in view_data["events"] if not e["all_day"]]

    if all_day_events:
        for event in all_day_events:
            console.print(_event_line(event, show_time=False))
        console.print()

    for hour in view_data["hours"]:
        events = _timed_events_in_hour(timed_events, date, hour)
        if not events and not (start_hour <= hour <= end_hour):
            continue
        line = Text(f"{hour:02d}:00 │ ", style=TIME_STYLE)
        for index, event in enumerate(events):
            if index > 0:
                line.append("\n      │ ", style=TIME_STYLE)
            line.append_text(_event_line(event, show_time=True, show_duration=True))
        console.print(line)

    # Timed events carried over from the previous day
    carried = [e for e in timed_events if e["start"] < date]
    if carried:
        console.print()
        for event in carried:
            console.print(_event_line(event, show_time=True, show_duration=True))


def render_agenda_view(console: Console, view_data: AgendaViewData) -> None:
    start_str = view_data["start_date"].format("MMM D")
    end_str = view_data["end_date"].format("MMM D, YYYY")
    header(console, "agenda", f"{start_str} - {end_str}")

    if not view_data["items"]:
        console.print(Text("No events", style=TIME_STYLE))
        return

    for item in view_data["items"]:
        console.print(
            Text(time.datetime_to_display_date_str(item["date"]), style="bold")
        )
        for event in item["events"]:
            line = Text("  ")
            line.append_text(_event_line(event, show_time=True, show_duration=True))
            console.print(line)
        console.print()

    console.print(Text(f"{view_data['total_events']} events", style=TIME_STYLE))


def render_slot_check(
    console: Console,
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    available: bool,
    conflicts: list[CalendarEvent],
) -> None:
    slot = (
        f"{time.datetime_to_display_date_str(start)} "
        f"{time.datetime_to_display_time_str(start)}-"
        f"{time.datetime_to_display_time_str(end)}"
    )
    if available:
        console.print(Text(f"✓ {slot} is free", style="green"))
        return
    console.print(Text(f"✗ {slot} conflicts with:", style=OVERDUE_COLOR))
    for event in conflicts:
        line = Text("  ")
        line.append_text(_event_line(event, show_time=True, show_duration=True))
        console.print(line)


def _day_heading(day: CalendarDay, label: str) -> str:
    if day["is_today"]:
        return f"[{TODAY_STYLE}]{label}[/]"
    if day["is_selected"]:
        return f"[{SELECTED_STYLE}]{label}[/]"
    return label


def _render_month_cell(day: CalendarDay, cell_width: int, max_events: int) -> Text:
    cell = Text()
    day_num = f"{day['date'].day:2d}"

    if day["is_today"]:
        cell.append(day_num, style=TODAY_STYLE)
    elif day["is_selected"]:
        cell.append(day_num, style=SELECTED_STYLE)
    elif not day["is_current_month"]:
        cell.append(day_num, style=OUTSIDE_MONTH_STYLE)
    else:
        cell.append(day_num, style="bold")
    cell.append("\n")

    cell.append_text(_event_lines(day["events"][:max_events], cell_width))
    if len(day["events"]) > max_events:
        remaining = len(day["events"]) - max_events
        cell.append(f"  +{remaining} more\n", style=TIME_STYLE)
    return cell


def _event_lines(events: list[CalendarEvent], max_len: Optional[int] = None) -> Text:
    lines = Text()
    for event in events:
        lines.append_text(_event_line(event, show_time=not event["all_day"], max_len=max_len))
        lines.append("\n")
    lines.rstrip()
    return lines


def _event_line(
    event: CalendarEvent,
    show_time: bool = True,
    show_duration: bool = False,
    max_len: Optional[int] = None,
) -> Text:
    color = event_color(event)
    line = Text()

    if event["all_day"]:
        line.append("■ ", style=color)
    else:
        line.append(f"{STATUS_MARKERS[event['status']]} ", style=color)
        if show_time:
            line.append(
                f"{time.datetime_to_display_time_str(event['start'])} ", style=TIME_STYLE
            )

    title = event["title"] or "[no title]"
    if max_len is not None:
        # Leave room for the marker and the time
        available = max_len - len(line.plain)
        if len(title) > available > 3:
            title = title[: available - 3] + "..."
    line.append(title, style=OVERDUE_COLOR if event["is_overdue"] else color)

    if show_duration and not event["all_day"] and (event["estimated_time"] or 0) > 0:
        line.append(f" ({time.format_duration(event['estimated_time'])})", style=TIME_STYLE)
    if show_duration:
        line.append(" !", style=PRIORITY_COLORS[event["priority"]])
        if event["is_recurring"]:
            line.append(" ↻", style=TIME_STYLE)
        for tag in event["tags"]:
            line.append(f" #{tag['name']}", style=TIME_STYLE)
    return line


def _timed_events_in_hour(
    events: list[CalendarEvent], date: pendulum.DateTime, hour: int
) -> list[CalendarEvent]:
    hour_start = time.start_of_day(date).add(hours=hour)
    hour_end = hour_start.add(hours=1)
    return [
        event
        for event in events
        if not event["all_day"] and hour_start <= event["start"] < hour_end
    ]
