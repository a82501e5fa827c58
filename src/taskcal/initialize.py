# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CSafeDumper as Dumper
except ImportError:
    from yaml import SafeDumper as Dumper  # type: ignore[assignment]

from taskcal import configuration
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.view import state as view_state

logger = logging.getLogger(__name__)


def initialize() -> None:
    """
    Prepare the config file and task store before any command runs.

    The config file is created with defaults on first run. The task store
    location may be overridden by `tasks_path`, so it is resolved only after
    the config file exists.
    """
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_file()

    configuration.load_data_path_configuration()
    configuration.DATA_TASKS_PATH.parent.mkdir(parents=True, exist_ok=True)
    __ensure_task_store()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])


def __ensure_config_file() -> None:
    if configuration.APP_CONFIG_PATH.is_file():
        return
    configuration.APP_CONFIG_PATH.write_text(
        dump(dict(configuration.DEFAULT_CONFIGURATION), Dumper=Dumper)
    )
    logger.info("Created default configuration at %s", configuration.APP_CONFIG_PATH)


def __ensure_task_store() -> None:
    if configuration.DATA_TASKS_PATH.is_file():
        return
    configuration.DATA_TASKS_PATH.write_text(dump({"tasks": []}, Dumper=Dumper))
    logger.info("Created empty task store at %s", configuration.DATA_TASKS_PATH)
