# SPDX-License-Identifier: MIT

from wellness_log.model.event_type import EventType

EVENT_TYPE_COLORS: dict[str, str] = {
    EventType.EXERCISE: "green",
    EventType.SVT_EPISODE: "red",
    EventType.MEDICATION: "cyan",
}

# Keyed by calendar marker name
MARKER_COLORS: dict[str, str] = {
    "exercise": "green",
    "svt": "red",
    "medication": "cyan",
}

MARKER_SYMBOL = "●"
OTHER_MONTH_COLOR = "bright_black"
TODAY_COLOR = "bold dark_orange"
UNKNOWN_TYPE_COLOR = "white"


def color_for_type(type_label: str) -> str:
    return EVENT_TYPE_COLORS.get(type_label, UNKNOWN_TYPE_COLOR)
