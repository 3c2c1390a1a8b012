# SPDX-License-Identifier: MIT

from wellness_log.model.entry import Entry


def sort_entries(entries: list[Entry], descending: bool = False) -> list[Entry]:
    """Stable sort by timestamp; the input list is left untouched."""
    return sorted(entries, key=lambda entry: entry["timestamp"], reverse=descending)
