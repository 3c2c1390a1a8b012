# SPDX-License-Identifier: MIT

from typing import TypedDict

from wellness_log.model.entity_id import EntityId


class IdMap(TypedDict):
    """
    Synthetic ids are the short integers shown in listings.

    Example:

    Entry with an id of "3f1c...".
    Synthetic id for that entry is 7.

    real_entry_id = id_map["synthetic_to_real"][7]  # returns "3f1c..."
    """

    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
