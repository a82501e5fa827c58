# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from taskcal.time import validate_start_of_week


def validate_start_of_week_option(start_of_week: Optional[int]) -> Optional[int]:
    if start_of_week is None:
        return None
    try:
        return validate_start_of_week(start_of_week)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def validate_positive(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value < 1:
        raise typer.BadParameter(f"Must be at least 1, got {value}")
    return value


def validate_hour(hour: Optional[int]) -> Optional[int]:
    if hour is None:
        return None
    if not (0 <= hour <= 23):
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    return hour
