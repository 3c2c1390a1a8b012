# SPDX-License-Identifier: MIT

import pytest
from yaml import safe_load

from conftest import NOW, local, make_entry
from wellness_log import configuration
from wellness_log.model.event_type import EventType
from wellness_log.repository.configuration import CONFIGURATION_REPO
from wellness_log.repository.entry import ENTRY_REPO, EntryRepositoryError
from wellness_log.repository.id_map import ID_MAP_REPO

# ---- entries ----


def test_empty_store():
    assert ENTRY_REPO.get_all_entries() == []


def test_saved_entries_survive_reload():
    entry = make_entry(EventType.SVT_EPISODE, local(2024, 3, 14, 21, 5), duration="3 minutes")
    ENTRY_REPO.save_new_entry(entry)
    assert ENTRY_REPO.flush() is True

    ENTRY_REPO.reset()
    stored = ENTRY_REPO.get_all_entries()

    assert len(stored) == 1
    assert stored[0]["id"] == entry["id"]
    assert stored[0]["timestamp"] == entry["timestamp"]
    assert stored[0]["details"] == {"duration": "3 minutes"}


def test_file_holds_iso_timestamps():
    entry = make_entry(EventType.EXERCISE, NOW)
    ENTRY_REPO.save_new_entry(entry)
    ENTRY_REPO.flush()

    raw = safe_load(configuration.DATA_ENTRIES_PATH.read_text(encoding="utf-8"))
    assert raw["entries"][0]["timestamp"] == NOW.in_tz("UTC").isoformat()
    assert raw["entries"][0]["type"] == "Exercise"
    assert not configuration.DATA_ENTRIES_PATH.with_name("entries.yaml.tmp").exists()


def test_flush_without_changes_does_not_write():
    ENTRY_REPO.get_all_entries()
    assert ENTRY_REPO.flush() is False
    assert not configuration.DATA_ENTRIES_PATH.exists()


def test_duplicate_id_is_rejected():
    entry = make_entry(EventType.EXERCISE, NOW)
    ENTRY_REPO.save_new_entry(entry)
    with pytest.raises(ValueError):
        ENTRY_REPO.save_new_entry(entry)


def test_getters_return_copies():
    entry = make_entry(EventType.EXERCISE, NOW, comments="a")
    ENTRY_REPO.save_new_entry(entry)

    copy = ENTRY_REPO.get_entry(entry["id"])
    copy["details"]["comments"] = "changed"

    assert ENTRY_REPO.get_entry(entry["id"])["details"] == {"comments": "a"}


def test_modify_and_delete():
    entry = make_entry(EventType.MEDICATION, NOW, dosage="1 tablet")
    ENTRY_REPO.save_new_entry(entry)

    assert ENTRY_REPO.modify_entry(entry["id"], None, {"dosage": "2 tablets"})
    assert ENTRY_REPO.get_entry(entry["id"])["details"] == {"dosage": "2 tablets"}

    assert ENTRY_REPO.delete_entry(entry["id"])
    assert ENTRY_REPO.get_entry(entry["id"]) is None


def test_missing_ids_are_a_no_op():
    ENTRY_REPO.save_new_entry(make_entry(EventType.EXERCISE, NOW))

    assert ENTRY_REPO.modify_entry("missing", NOW, None) is False
    assert ENTRY_REPO.delete_entry("missing") is False
    assert len(ENTRY_REPO.get_all_entries()) == 1


def test_corrupt_file_is_backed_up():
    configuration.DATA_ENTRIES_PATH.write_text("entries: [unclosed", encoding="utf-8")

    with pytest.raises(EntryRepositoryError, match="corrupt"):
        ENTRY_REPO.get_all_entries()

    backups = list(configuration.DATA_PATH.glob("entries.corrupt-*.yaml"))
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == "entries: [unclosed"


# ---- id map ----


def test_synthetic_ids():
    first = ID_MAP_REPO.associate_id("uuid-a")
    second = ID_MAP_REPO.associate_id("uuid-b")

    assert (first, second) == (1, 2)
    assert ID_MAP_REPO.associate_id("uuid-a") == 1
    assert ID_MAP_REPO.get_real_id(2) == "uuid-b"
    assert ID_MAP_REPO.get_real_id(3) is None


def test_synthetic_ids_survive_reload():
    ID_MAP_REPO.associate_id("uuid-a")
    ID_MAP_REPO.flush()
    ID_MAP_REPO.reset()

    assert ID_MAP_REPO.get_real_id(1) == "uuid-a"

    ID_MAP_REPO.clear_ids()
    assert ID_MAP_REPO.get_real_id(1) is None


# ---- configuration ----


def test_config_file_is_created_with_defaults():
    assert configuration.APP_CONFIG_PATH.is_file()
    assert CONFIGURATION_REPO.get_config() == configuration.DEFAULT_CONFIGURATION


def test_missing_config_keys_are_added():
    configuration.APP_CONFIG_PATH.write_text("show_header: false\n")
    CONFIGURATION_REPO.reset()

    config = CONFIGURATION_REPO.get_config()

    assert config["show_header"] is False
    assert config["default_svt_duration"] == "1 minute"
    assert CONFIGURATION_REPO.is_dirty


def test_update_config_is_persisted():
    CONFIGURATION_REPO.update_config(default_svt_duration="2 minutes", log_level="info")
    CONFIGURATION_REPO.flush()
    CONFIGURATION_REPO.reset()

    config = CONFIGURATION_REPO.get_config()
    assert config["default_svt_duration"] == "2 minutes"
    assert config["log_level"] == "INFO"


def test_category_is_stored_as_plain_label():
    ENTRY_REPO.save_new_entry(make_entry(EventType.SVT_EPISODE, NOW))
    ENTRY_REPO.replace_all_entries(
        ENTRY_REPO.get_all_entries() + [make_entry(EventType.MEDICATION, NOW)]
    )
    ENTRY_REPO.flush()

    raw = safe_load(configuration.DATA_ENTRIES_PATH.read_text(encoding="utf-8"))
    assert [entry["type"] for entry in raw["entries"]] == ["SVT Episode", "Medication"]
    assert all(type(entry["type"]) is str for entry in ENTRY_REPO.get_all_entries())
