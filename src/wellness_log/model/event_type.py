# SPDX-License-Identifier: MIT

from enum import StrEnum


class EventType(StrEnum):
    EXERCISE = "Exercise"
    SVT_EPISODE = "SVT Episode"
    MEDICATION = "Medication"


# Detail fields each category carries, in display order
DETAIL_FIELDS: dict[EventType, tuple[str, ...]] = {
    EventType.EXERCISE: ("comments",),
    EventType.SVT_EPISODE: ("duration", "comments"),
    EventType.MEDICATION: ("dosage", "comments"),
}

# Short names accepted on the command line
EVENT_TYPE_ALIASES: dict[str, EventType] = {
    "exercise": EventType.EXERCISE,
    "ex": EventType.EXERCISE,
    "svt": EventType.SVT_EPISODE,
    "svt episode": EventType.SVT_EPISODE,
    "svtepisode": EventType.SVT_EPISODE,
    "medication": EventType.MEDICATION,
    "med": EventType.MEDICATION,
}


def parse_event_type(value: str) -> EventType:
    """Resolve a persisted label or a command-line alias to an EventType."""
    try:
        return EventType(value)
    except ValueError:
        pass
    key = value.strip().lower()
    if key in EVENT_TYPE_ALIASES:
        return EVENT_TYPE_ALIASES[key]
    raise ValueError(
        f"Unknown event type: {value!r}. "
        f"Valid types: {', '.join(event_type.value for event_type in EventType)}"
    )


def detail_fields_for(type_label: str) -> tuple[str, ...]:
    """Detail fields for a stored type label; unknown labels only carry comments."""
    try:
        return DETAIL_FIELDS[EventType(type_label)]
    except ValueError:
        return ("comments",)


def marker_name(type_label: str) -> str:
    """Short lower-case name used for calendar markers."""
    if type_label == EventType.SVT_EPISODE:
        return "svt"
    return type_label.lower().replace(" ", "")
