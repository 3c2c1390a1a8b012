# SPDX-License-Identifier: MIT

from wellness_log.model.entry import Entry

NO_DETAILS = "No additional details"


def format_details(entry: Entry) -> str:
    """Summarise the details that are set, e.g. 'Duration: 3 minutes • Comments: ok'."""
    details = entry["details"]
    parts = []
    if details.get("duration"):
        parts.append(f"Duration: {details['duration']}")
    if details.get("dosage"):
        parts.append(f"Dosage: {details['dosage']}")
    if details.get("comments"):
        parts.append(f"Comments: {details['comments']}")
    return " • ".join(parts) if len(parts) > 0 else NO_DETAILS
