# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "wellness_log"
CONFIG_DIR_ENV = "WELLNESS_LOG_CONFIG_DIR"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ENTRIES_PATH: Path = DATA_PATH / "entries.yaml"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    clear_ids_on_view: bool
    default_svt_duration: str
    default_medication_dosage: str
    log_level: str


DEFAULT_CONFIGURATION: Configuration = {
    "data_path": None,
    "show_header": True,
    "clear_ids_on_view": True,
    "default_svt_duration": "1 minute",
    "default_medication_dosage": "1/2 tablet",
    "log_level": "WARNING",
}


def load_config_path_configuration() -> None:
    """Honour the config directory override from the environment."""
    global CONFIG_PATH, APP_CONFIG_PATH, DATA_PATH

    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        CONFIG_PATH = Path(override).expanduser()
        # Keep data beside the config unless config.yaml says otherwise
        DATA_PATH = CONFIG_PATH / "data"
    else:
        CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
        DATA_PATH = platformdirs.user_data_path(APP_NAME)
    APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
    __set_data_file_paths()


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repository loads its data.
    """
    global DATA_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
        __set_data_file_paths()


def __set_data_file_paths() -> None:
    global DATA_ENTRIES_PATH, DATA_ID_MAP_PATH

    DATA_ENTRIES_PATH = DATA_PATH / "entries.yaml"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
