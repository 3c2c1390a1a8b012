# SPDX-License-Identifier: MIT

import logging
import os
import time
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from wellness_log import configuration
from wellness_log.model.entity_id import EntityId
from wellness_log.model.entry import Entry, EntryDetails, SerializedEntry
from wellness_log.time import datetime_from_str, datetime_to_iso_str

logger = logging.getLogger(__name__)

DETAIL_KEYS = ("duration", "dosage", "comments")


class EntryRepositoryError(Exception):
    """Raised when the stored entry collection cannot be read."""

    pass


def serialize_entry(entry: Entry) -> SerializedEntry:
    return {
        "id": entry["id"],
        "type": str(entry["type"]),
        "timestamp": datetime_to_iso_str(entry["timestamp"]),
        "details": {
            key: str(value)
            for key, value in entry["details"].items()
            if key in DETAIL_KEYS and value is not None
        },
    }


def deserialize_entry(raw_entry: dict[str, Any]) -> Entry:
    raw_details = raw_entry.get("details") or {}
    details = cast(
        EntryDetails,
        {
            key: str(raw_details[key])
            for key in DETAIL_KEYS
            if raw_details.get(key) is not None
        },
    )
    return {
        "id": str(raw_entry["id"]),
        "type": str(raw_entry["type"]),
        "timestamp": datetime_from_str(str(raw_entry["timestamp"])),
        "details": details,
    }


def _stored_copy(entry: Entry) -> Entry:
    """Deep copy holding the plain string label rather than an EventType member."""
    stored = deepcopy(entry)
    stored["type"] = str(entry["type"])
    return stored


class EntryRepository:
    def __init__(self) -> None:
        self._entries: Optional[list[Entry]] = None
        self.is_dirty = False

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    def __load_data(self) -> None:
        path = configuration.DATA_ENTRIES_PATH
        self._entries = []
        if not path.is_file():
            logger.debug("No entry file at %s, starting empty", path)
            return

        text = path.read_text(encoding="utf-8")
        if not text.strip():
            return

        try:
            raw_data = load(text, Loader=Loader)
            raw_entries = (raw_data or {}).get("entries") or []
            self._entries = [deserialize_entry(raw) for raw in raw_entries]
        except (YAMLError, AttributeError, KeyError, TypeError, ValueError) as e:
            self._entries = None
            backup = self.__backup_corrupt_file(path, text)
            raise EntryRepositoryError(
                f"Could not read {path}: {e}. A copy was saved to {backup}"
            ) from e

        logger.debug("Loaded %d entries from %s", len(self._entries), path)

    def __backup_corrupt_file(self, path: Path, text: str) -> Path:
        backup = path.with_suffix(f".corrupt-{int(time.time())}.yaml")
        backup.write_text(text, encoding="utf-8")
        logger.error("Entry file %s is unreadable, backed up to %s", path, backup)
        return backup

    def __save_data(self) -> None:
        path = configuration.DATA_ENTRIES_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"entries": [serialize_entry(entry) for entry in self.entries]}

        # Write beside the target then swap it in so readers never see a partial file
        tmp = path.with_name(path.name + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(dump(payload, Dumper=Dumper, allow_unicode=True, sort_keys=False))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)

        logger.info("Saved %d entries to %s", len(self.entries), path)

    def flush(self) -> bool:
        if self._entries is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop the cached collection so the next access reloads from disk."""
        self._entries = None
        self.is_dirty = False

    def save_new_entry(self, entry: Entry) -> EntityId:
        if any(existing["id"] == entry["id"] for existing in self.entries):
            raise ValueError(f"Entry id already exists: {entry['id']}")

        self.is_dirty = True
        self.entries.append(_stored_copy(entry))
        logger.info("Added %s entry %s", entry["type"], entry["id"])

        return entry["id"]

    def modify_entry(
        self,
        id: EntityId,
        timestamp: Optional[pendulum.DateTime],
        details: Optional[EntryDetails],
    ) -> bool:
        matches = [entry for entry in self.entries if entry["id"] == id]
        if len(matches) == 0:
            logger.warning("Entry %s not found, nothing modified", id)
            return False

        self.is_dirty = True
        entry = matches[0]
        if timestamp is not None:
            entry["timestamp"] = timestamp
        if details is not None:
            entry["details"] = deepcopy(details)
        logger.info("Modified entry %s", id)

        return True

    def delete_entry(self, id: EntityId) -> bool:
        remaining = [entry for entry in self.entries if entry["id"] != id]
        if len(remaining) == len(self.entries):
            logger.warning("Entry %s not found, nothing deleted", id)
            return False

        self.is_dirty = True
        self._entries = remaining
        logger.info("Deleted entry %s", id)

        return True

    def replace_all_entries(self, entries: list[Entry]) -> None:
        self.is_dirty = True
        self._entries = [_stored_copy(entry) for entry in entries]
        logger.info("Replaced collection with %d entries", len(entries))

    def get_all_entries(self) -> list[Entry]:
        return deepcopy(self.entries)

    def get_entry(self, id: EntityId) -> Optional[Entry]:
        matches = [entry for entry in self.entries if entry["id"] == id]
        if len(matches) == 0:
            return None
        return deepcopy(matches[0])


ENTRY_REPO = EntryRepository()
