# SPDX-License-Identifier: MIT

from typing import NotRequired, TypedDict

import pendulum

from wellness_log.model.entity_id import EntityId


class EntryDetails(TypedDict):
    # Unset fields are absent rather than None
    duration: NotRequired[str]  # SVT Episode, free text like "3 minutes"
    dosage: NotRequired[str]  # Medication, free text like "1/2 tablet"
    comments: NotRequired[str]


class Entry(TypedDict):
    id: EntityId
    type: str  # EventType value: "Exercise", "SVT Episode", "Medication"
    timestamp: pendulum.DateTime
    details: EntryDetails


class SerializedEntry(TypedDict):
    id: str
    type: str
    timestamp: str  # ISO-8601 instant
    details: dict[str, str]
