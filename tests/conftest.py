# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import pytest

from wellness_log import configuration
from wellness_log.initialize import initialize
from wellness_log.model.entity_id import generate_entity_id
from wellness_log.model.entry import Entry
from wellness_log.repository.configuration import CONFIGURATION_REPO
from wellness_log.repository.entry import ENTRY_REPO
from wellness_log.repository.id_map import ID_MAP_REPO

# Friday
NOW = pendulum.datetime(2024, 3, 15, 12, 0, tz="local")


def make_entry(
    type: str,
    timestamp: pendulum.DateTime,
    duration: Optional[str] = None,
    dosage: Optional[str] = None,
    comments: Optional[str] = None,
) -> Entry:
    details = {}
    if duration is not None:
        details["duration"] = duration
    if dosage is not None:
        details["dosage"] = dosage
    if comments is not None:
        details["comments"] = comments
    return {
        "id": generate_entity_id(),
        "type": type,
        "timestamp": timestamp.in_tz("UTC"),
        "details": details,  # type: ignore[typeddict-item]
    }


def local(*args: int) -> pendulum.DateTime:
    return pendulum.datetime(*args, tz="local")


def _reset_repositories() -> None:
    CONFIGURATION_REPO.reset()
    ENTRY_REPO.reset()
    ID_MAP_REPO.reset()


@pytest.fixture(autouse=True)
def app_dirs(tmp_path, monkeypatch):
    """Point config and data at a temp directory for every test."""
    monkeypatch.setenv(configuration.CONFIG_DIR_ENV, str(tmp_path / "config"))
    _reset_repositories()
    initialize()
    yield tmp_path
    _reset_repositories()
