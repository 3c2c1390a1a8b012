# SPDX-License-Identifier: MIT

from typing import Optional

from wellness_log import configuration
from wellness_log.model.entity_id import generate_entity_id
from wellness_log.model.entry import Entry, EntryDetails
from wellness_log.model.event_type import EventType
from wellness_log.time import now_utc


def get_entry_details_template(
    event_type: EventType,
    config: Optional[configuration.Configuration] = None,
) -> EntryDetails:
    """Preset details a quick-log action starts from."""
    if config is None:
        config = configuration.DEFAULT_CONFIGURATION

    match event_type:
        case EventType.SVT_EPISODE:
            return {"duration": config["default_svt_duration"]}
        case EventType.MEDICATION:
            return {"dosage": config["default_medication_dosage"]}
    return {}


def get_entry_template(
    event_type: EventType,
    config: Optional[configuration.Configuration] = None,
) -> Entry:
    return {
        "id": generate_entity_id(),
        "type": event_type.value,
        "timestamp": now_utc(),
        "details": get_entry_details_template(event_type, config),
    }
