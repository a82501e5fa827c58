# SPDX-License-Identifier: MIT

import atexit
import logging

from taskcal import configuration
from taskcal.repository.configuration import CONFIGURATION_REPO

logger = logging.getLogger(__name__)


def flush_and_sync() -> None:
    # The task store is read-only, only settings changed by `config set` are written
    if CONFIGURATION_REPO.flush():
        logger.debug("Saved configuration to %s", configuration.APP_CONFIG_PATH)


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
