# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CSafeDumper as Dumper
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeDumper as Dumper, SafeLoader as Loader  # type: ignore[assignment]

from taskcal import configuration
from taskcal.time import validate_start_of_week

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError("Configuration could not be loaded")
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        else:
            logger.warning(
                "Config file not found: %s, using defaults",
                configuration.APP_CONFIG_PATH,
            )

        config = deepcopy(configuration.DEFAULT_CONFIGURATION)
        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ValueError(
                    f"Config file {configuration.APP_CONFIG_PATH} must contain a mapping"
                )

            # Keys missing from older config files keep their defaults
            for key in configuration.DEFAULT_CONFIGURATION:
                if key in loaded:
                    config[key] = loaded[key]  # type: ignore[literal-required]

        validate_start_of_week(config["start_of_week"])
        self._config = config

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        start_of_week: Optional[int] = None,
        include_completed: Optional[bool] = None,
        agenda_days: Optional[int] = None,
        tasks_path: Optional[str] = None,
        remove_tasks_path: bool = False,
    ) -> None:
        if start_of_week is not None:
            validate_start_of_week(start_of_week)
        if agenda_days is not None and agenda_days < 1:
            raise ValueError(f"agenda_days must be at least 1, got {agenda_days}")

        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if start_of_week is not None:
            self.config["start_of_week"] = start_of_week
        if include_completed is not None:
            self.config["include_completed"] = include_completed
        if agenda_days is not None:
            self.config["agenda_days"] = agenda_days
        if tasks_path is not None:
            self.config["tasks_path"] = tasks_path
        if remove_tasks_path:
            self.config["tasks_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
