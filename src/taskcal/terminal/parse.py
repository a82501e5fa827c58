# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from taskcal.time import datetime_from_str


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a reference date in local time.

    Accepts YYYY-MM-DD (optionally with a time), today/t, yesterday/y,
    tomorrow/o, or a day offset from today such as 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"\d{4}-\d{2}-\d{2}", date):
        try:
            return datetime_from_str(date, tz="local")
        except ValueError as e:
            raise typer.BadParameter(str(e))

    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date))

    if date == "today" or date == "t":
        return pendulum.today("local")
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local")
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local")
    raise typer.BadParameter("Incorrect date format")


def parse_time(time_str: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse the start of a slot, `H:mm` or `HH:mm`, into (hour, minute).

    Raises:
        typer.BadParameter: If the value is not a valid time of day
    """
    if time_str is None:
        return None

    slot_match = re.fullmatch(r"(\d{1,2}):(\d{2})", time_str.strip())
    if slot_match is None:
        raise typer.BadParameter(f"Expected a time such as 9:00 or 17:30, got '{time_str}'")

    hour, minute = int(slot_match.group(1)), int(slot_match.group(2))
    if hour > 23 or minute > 59:
        raise typer.BadParameter(f"'{time_str}' is not a time of day")
    return hour, minute
