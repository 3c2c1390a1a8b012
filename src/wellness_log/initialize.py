# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from wellness_log import configuration
from wellness_log.log_setup import configure_logging
from wellness_log.repository.configuration import CONFIGURATION_REPO
from wellness_log.view import state as view_state

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.load_config_path_configuration()
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])
    view_state.set_clear_ids(config["clear_ids_on_view"])

    logger.debug("Using data directory %s", configuration.DATA_PATH)


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.write_text(
            dump(configuration.DEFAULT_CONFIGURATION, Dumper=Dumper)
        )
