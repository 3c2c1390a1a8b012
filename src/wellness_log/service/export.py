# SPDX-License-Identifier: MIT

import csv
import io
import json
import logging
from typing import Any, Optional, TypedDict

import pendulum

from wellness_log.model.entry import Entry, SerializedEntry
from wellness_log.model.event_type import EventType
from wellness_log.model.filter import FilterSpec
from wellness_log.query.filter import get_filter_description
from wellness_log.query.sort import sort_entries
from wellness_log.repository.entry import deserialize_entry, serialize_entry
from wellness_log.time import datetime_to_iso_str, datetime_to_local_date_str, resolve_now

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.1.0"
EXPORT_SOURCE = "cli"

TABLE_HEADERS = ["Date", "Time", "Type", "Duration", "Dosage", "Comments"]
TABLE_DATE_FORMAT = "M/D/YYYY"
TABLE_TIME_FORMAT = "hh:mm A"

REQUIRED_ENTRY_FIELDS = ("id", "type", "timestamp", "details")


class ImportValidationError(Exception):
    """Raised when imported data is not a valid entry collection."""

    pass


class ExportEnvelope(TypedDict):
    version: str
    exportedAt: str
    source: str
    totalEntries: int
    entries: list[SerializedEntry]


def to_table(entries: list[Entry]) -> str:
    """
    Render entries as CSV, oldest first.

    Fields containing a comma, quote or line break are quoted with internal
    quotes doubled.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(TABLE_HEADERS)

    for entry in sort_entries(entries):
        local_timestamp = entry["timestamp"].in_tz("local")
        details = entry["details"]
        writer.writerow(
            [
                local_timestamp.format(TABLE_DATE_FORMAT),
                local_timestamp.format(TABLE_TIME_FORMAT),
                entry["type"],
                details.get("duration", ""),
                details.get("dosage", ""),
                details.get("comments", ""),
            ]
        )

    return output.getvalue()


def to_envelope(
    entries: list[Entry],
    now: Optional[pendulum.DateTime] = None,
) -> ExportEnvelope:
    return {
        "version": EXPORT_VERSION,
        "exportedAt": datetime_to_iso_str(resolve_now(now)),
        "source": EXPORT_SOURCE,
        "totalEntries": len(entries),
        "entries": [serialize_entry(entry) for entry in entries],
    }


def dumps_envelope(
    entries: list[Entry],
    now: Optional[pendulum.DateTime] = None,
) -> str:
    return json.dumps(to_envelope(entries, now), indent=2, ensure_ascii=False) + "\n"


def parse_import(text: str | bytes) -> list[Entry]:
    """
    Parse an exported JSON document into entries.

    Accepts either a bare list of entries or an export envelope with an
    `entries` field. Any invalid entry rejects the whole import. Raw bytes
    must be UTF-8.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ImportValidationError(
                f"Invalid file encoding, expected UTF-8: {e}"
            ) from e

    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise ImportValidationError(f"Invalid JSON: {e}") from e

    if isinstance(data, dict) and "entries" in data:
        logger.info("Export envelope detected, importing its entries")
        data = data["entries"]

    if not isinstance(data, list):
        raise ImportValidationError("Invalid data format: Expected a list of entries")

    entries: list[Entry] = []
    seen_ids: set[str] = set()
    for index, raw_entry in enumerate(data):
        entries.append(__validate_import_entry(index, raw_entry, seen_ids))

    return entries


def __validate_import_entry(index: int, raw_entry: Any, seen_ids: set[str]) -> Entry:
    if not isinstance(raw_entry, dict):
        raise ImportValidationError(f"Invalid entry format at position {index}")

    missing = [
        field
        for field in REQUIRED_ENTRY_FIELDS
        if field not in raw_entry or raw_entry[field] in (None, "")
    ]
    if len(missing) > 0:
        raise ImportValidationError(
            f"Invalid entry format at position {index}: missing {', '.join(missing)}"
        )
    if not isinstance(raw_entry["details"], dict):
        raise ImportValidationError(
            f"Invalid entry format at position {index}: details must be an object"
        )
    if raw_entry["type"] not in [event_type.value for event_type in EventType]:
        raise ImportValidationError(
            f"Invalid entry type at position {index}: {raw_entry['type']!r}"
        )

    try:
        entry = deserialize_entry(raw_entry)
    except (ValueError, TypeError) as e:
        raise ImportValidationError(
            f"Invalid timestamp at position {index}: {raw_entry['timestamp']!r}"
        ) from e

    if entry["id"] in seen_ids:
        raise ImportValidationError(f"Duplicate entry id: {entry['id']}")
    seen_ids.add(entry["id"])

    return entry


def get_export_filename(entries: list[Entry]) -> str:
    ordered = sort_entries(entries)
    start = datetime_to_local_date_str(ordered[0]["timestamp"])
    end = datetime_to_local_date_str(ordered[-1]["timestamp"])
    return f"wellness_log_{start}_to_{end}.csv"


def get_filtered_export_filename(spec: FilterSpec, today: pendulum.Date) -> str:
    return f"wellness_log_filtered_{get_filter_description(spec)}_{today.to_date_string()}.csv"


def get_json_export_filename(today: pendulum.Date) -> str:
    return f"wellness_log_{today.to_date_string()}.json"
