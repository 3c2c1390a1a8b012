# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional, cast

import pendulum

from wellness_log import configuration
from wellness_log.model.entity_id import EntityId
from wellness_log.model.entry import Entry, EntryDetails
from wellness_log.model.event_type import EventType, detail_fields_for
from wellness_log.template.entry import get_entry_template


class EntryValidationError(Exception):
    """Raised when entry validation fails."""

    pass


def validate_detail_fields(type_label: str, details: dict[str, Optional[str]]) -> None:
    """
    Check that only fields carried by the entry's category are being set.

    Raises EntryValidationError naming the first field the category does not
    carry.
    """
    allowed = detail_fields_for(type_label)
    for field, value in details.items():
        if value is not None and field not in allowed:
            raise EntryValidationError(
                f"{type_label} entries have no {field}. "
                f"Valid fields: {', '.join(allowed)}"
            )


def _merge_details(
    details: EntryDetails,
    updates: dict[str, Optional[str]],
) -> EntryDetails:
    merged = cast(dict[str, str], deepcopy(details))
    for field, value in updates.items():
        if value is None:
            continue
        if value == "":
            # An empty value clears the field rather than storing ""
            merged.pop(field, None)
        else:
            merged[field] = value
    return cast(EntryDetails, merged)


def create_quick_log_entry(
    event_type: EventType,
    timestamp: Optional[pendulum.DateTime] = None,
    duration: Optional[str] = None,
    dosage: Optional[str] = None,
    comments: Optional[str] = None,
    config: Optional[configuration.Configuration] = None,
) -> Entry:
    """
    Create an entry from the category preset, overriding preset details with
    any given values.
    """
    updates = {"duration": duration, "dosage": dosage, "comments": comments}
    validate_detail_fields(event_type.value, updates)

    entry = get_entry_template(event_type, config)
    if timestamp is not None:
        entry["timestamp"] = timestamp.in_tz("UTC")
    entry["details"] = _merge_details(entry["details"], updates)

    return entry


def apply_entry_edit(
    entry: Entry,
    timestamp: Optional[pendulum.DateTime] = None,
    duration: Optional[str] = None,
    dosage: Optional[str] = None,
    comments: Optional[str] = None,
) -> Entry:
    """Return an edited copy of the entry; the id and category never change."""
    updates = {"duration": duration, "dosage": dosage, "comments": comments}
    validate_detail_fields(entry["type"], updates)

    edited = deepcopy(entry)
    if timestamp is not None:
        edited["timestamp"] = timestamp.in_tz("UTC")
    edited["details"] = _merge_details(edited["details"], updates)

    return edited


def find_entry(entries: list[Entry], id: EntityId) -> Optional[Entry]:
    for entry in entries:
        if entry["id"] == id:
            return entry
    return None
