# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from wellness_log import configuration

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
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            self._config = deepcopy(configuration.DEFAULT_CONFIGURATION)
            self.is_dirty = True

        # Migration: add any setting introduced after the file was written
        for key, value in configuration.DEFAULT_CONFIGURATION.items():
            if key not in self._config:
                logger.debug("Adding missing configuration key %s", key)
                self._config[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        clear_ids_on_view: Optional[bool] = None,
        default_svt_duration: Optional[str] = None,
        default_medication_dosage: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if clear_ids_on_view is not None:
            self.config["clear_ids_on_view"] = clear_ids_on_view
        if default_svt_duration is not None:
            self.config["default_svt_duration"] = default_svt_duration
        if default_medication_dosage is not None:
            self.config["default_medication_dosage"] = default_medication_dosage
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
