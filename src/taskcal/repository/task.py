# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional

from yaml import load

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from taskcal import configuration
from taskcal.model.task import Task
from taskcal.validate import validate_task_record

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    Read-only access to the task store.

    The store is a YAML document with a top level `tasks` list. Tasks are
    owned by whatever maintains that file; the calendar only reads them.
    Dates without an offset are taken as local time.
    """

    def __init__(self, tz: str = "local") -> None:
        self._tasks: Optional[list[Task]] = None
        self._tz = tz

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError("Tasks could not be loaded")
        return self._tasks

    def __load_data(self) -> None:
        tasks_path = configuration.DATA_TASKS_PATH
        self._tasks = []

        if not tasks_path.is_file():
            logger.warning("Task store not found: %s", tasks_path)
            return

        raw: Any = load(tasks_path.read_text(), Loader=Loader)
        if raw is None:
            return
        if not isinstance(raw, dict) or not isinstance(raw.get("tasks", []), list):
            raise ValueError(f"Task store {tasks_path} must contain a 'tasks' list")

        for index, raw_task in enumerate(raw.get("tasks") or []):
            try:
                self._tasks.append(validate_task_record(raw_task, tz=self._tz))
            except ValueError as e:
                raise ValueError(f"{tasks_path}: task #{index + 1}: {e}") from e

        logger.info("Loaded %d tasks from %s", len(self._tasks), tasks_path)

    def reload(self) -> None:
        self._tasks = None

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: str) -> Optional[Task]:
        for task in self.tasks:
            if task["id"] == id:
                return deepcopy(task)
        return None


TASK_REPO = TaskRepository()
