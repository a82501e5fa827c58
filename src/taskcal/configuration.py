# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "taskcal"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"


class Configuration(TypedDict):
    show_header: bool
    start_of_week: int
    include_completed: bool
    agenda_days: int
    tasks_path: Optional[str]


DEFAULT_CONFIGURATION: Configuration = {
    "show_header": True,
    "start_of_week": 0,
    "include_completed": False,
    "agenda_days": 14,
    "tasks_path": None,
}


def load_data_path_configuration() -> None:
    """
    Point DATA_TASKS_PATH at the configured task store, if one is set.

    Must run after the config file exists and before the task repository
    loads anything.
    """
    global DATA_TASKS_PATH

    if not APP_CONFIG_PATH.is_file():
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    tasks_path_setting = config.get("tasks_path")

    if tasks_path_setting is not None:
        DATA_TASKS_PATH = Path(tasks_path_setting).expanduser()
