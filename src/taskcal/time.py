# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, cast

import pendulum
from pendulum.parsing.exceptions import ParserError

MINUTES_PER_HOUR = 60


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def as_datetime(value: Any, tz: str = "UTC") -> pendulum.DateTime:
    """
    Coerce a date-like value into a timezone-aware pendulum.DateTime.

    Aware values keep their own timezone. Naive datetimes, plain dates and
    ISO strings without an offset are placed in `tz`.

    Raises:
        ValueError: If the value cannot be interpreted as a date
    """
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            return pendulum.instance(value, tz=tz)
        return pendulum.instance(value)
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz=tz)
    if isinstance(value, str):
        return datetime_from_str(value, tz=tz)
    raise ValueError(f"Expected a date or datetime, got {type(value).__name__}")


def as_datetime_optional(
    value: Any, tz: str = "UTC"
) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    return as_datetime(value, tz=tz)


def datetime_from_str(value: str, tz: str = "UTC") -> pendulum.DateTime:
    try:
        parsed = pendulum.parse(value, tz=tz)
    except (ValueError, ParserError) as e:
        raise ValueError(f"Invalid date '{value}': {e}") from e
    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz=tz)
    raise ValueError(f"Invalid date '{value}': not a date or datetime")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_display_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd")


def datetime_to_display_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("HH:mm")


def align_tz(
    value: pendulum.DateTime, reference: pendulum.DateTime
) -> pendulum.DateTime:
    """Express `value` in the timezone already carried by `reference`."""
    return cast(pendulum.DateTime, value.astimezone(reference.tzinfo))


def start_of_day(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.start_of("day")


def end_of_day(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.end_of("day")


def weekday_index(date: pendulum.DateTime) -> int:
    """Day of week with Sunday = 0 through Saturday = 6."""
    return date.isoweekday() % 7


def start_of_week(date: pendulum.DateTime, week_start: int = 0) -> pendulum.DateTime:
    """
    Midnight of the first day of the week containing `date`.

    Args:
        date: Any instant inside the week
        week_start: First day of the week, 0 = Sunday through 6 = Saturday
    """
    validate_start_of_week(week_start)
    offset = (weekday_index(date) - week_start) % 7
    return start_of_day(date).subtract(days=offset)


def end_of_week(date: pendulum.DateTime, week_start: int = 0) -> pendulum.DateTime:
    return end_of_day(start_of_week(date, week_start).add(days=6))


def start_of_month(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.start_of("month")


def end_of_month(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.end_of("month")


def start_of_year(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.start_of("year")


def end_of_year(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.end_of("year")


def add_minutes(date: pendulum.DateTime, minutes: int) -> pendulum.DateTime:
    return date.add(minutes=minutes)


def add_hours(date: pendulum.DateTime, hours: int) -> pendulum.DateTime:
    return date.add(hours=hours)


def add_days(date: pendulum.DateTime, days: int) -> pendulum.DateTime:
    return date.add(days=days)


def add_weeks(date: pendulum.DateTime, weeks: int) -> pendulum.DateTime:
    return date.add(weeks=weeks)


def add_months(date: pendulum.DateTime, months: int) -> pendulum.DateTime:
    return date.add(months=months)


def add_years(date: pendulum.DateTime, years: int) -> pendulum.DateTime:
    return date.add(years=years)


def subtract_days(date: pendulum.DateTime, days: int) -> pendulum.DateTime:
    return date.subtract(days=days)


def subtract_weeks(date: pendulum.DateTime, weeks: int) -> pendulum.DateTime:
    return date.subtract(weeks=weeks)


def subtract_months(date: pendulum.DateTime, months: int) -> pendulum.DateTime:
    return date.subtract(months=months)


def is_same_day(date: pendulum.DateTime, other: pendulum.DateTime) -> bool:
    return date.date() == align_tz(other, date).date()


def is_same_month(date: pendulum.DateTime, other: pendulum.DateTime) -> bool:
    other = align_tz(other, date)
    return date.year == other.year and date.month == other.month


def is_within_range(
    date: pendulum.DateTime, start: pendulum.DateTime, end: pendulum.DateTime
) -> bool:
    """Inclusive containment: start <= date <= end."""
    return start <= date <= end


def is_time_overlap(
    start1: pendulum.DateTime,
    end1: pendulum.DateTime,
    start2: pendulum.DateTime,
    end2: pendulum.DateTime,
) -> bool:
    """
    Half-open interval overlap. Intervals that only touch at an endpoint
    (one ends at 09:00, the other starts at 09:00) do not overlap.
    """
    return start1 < end2 and start2 < end1


def is_past(date: pendulum.DateTime, now: pendulum.DateTime) -> bool:
    return date < now


def format_duration(minutes: int) -> str:
    """Format a number of minutes as e.g. '45m', '2h' or '1h 30m'."""
    if minutes < MINUTES_PER_HOUR:
        return f"{minutes}m"
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    if mins > 0:
        return f"{hours}h {mins}m"
    return f"{hours}h"


def format_duration_optional(minutes: Optional[int]) -> Optional[str]:
    if minutes is None:
        return None
    return format_duration(minutes)


def validate_start_of_week(week_start: int) -> int:
    if isinstance(week_start, bool) or not isinstance(week_start, int):
        raise ValueError(
            f"start_of_week must be an integer between 0 and 6, got {week_start!r}"
        )
    if not (0 <= week_start <= 6):
        raise ValueError(
            f"start_of_week must be between 0 (Sunday) and 6 (Saturday), got {week_start}"
        )
    return week_start
