# SPDX-License-Identifier: MIT

import atexit

from wellness_log.repository.configuration import CONFIGURATION_REPO
from wellness_log.repository.entry import ENTRY_REPO
from wellness_log.repository.id_map import ID_MAP_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    ENTRY_REPO.flush()
    ID_MAP_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
