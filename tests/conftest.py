"""Shared fixtures for the taskcal test suite."""

from typing import Any

import pendulum
import pytest

from taskcal.model.task import Task
from taskcal.validate import validate_task_record
from taskcal.view import state as view_state


@pytest.fixture(autouse=True)
def _reset_view_state():
    """Headers are a process-wide switch, restore them between tests."""
    view_state.reset()
    yield
    view_state.reset()


@pytest.fixture
def now() -> pendulum.DateTime:
    """A fixed clock: Friday, March 15 2024, noon UTC."""
    return pendulum.datetime(2024, 3, 15, 12, 0, tz="UTC")


@pytest.fixture
def make_task():
    """Build validated tasks with sensible defaults, overridden per test."""
    counter = iter(range(1, 10_000))

    def _make_task(**overrides: Any) -> Task:
        record: dict[str, Any] = {
            "id": f"task-{next(counter)}",
            "title": "Task",
            "status": "TODO",
            "priority": "NONE",
        }
        record.update(overrides)
        return validate_task_record(record)

    return _make_task
