# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

import pendulum

from wellness_log.model.entry import Entry
from wellness_log.model.filter import DateRange, FilterSpec, FilterStatus
from wellness_log.query.date_range import get_date_range_boundaries
from wellness_log.time import end_of_local_day, resolve_now, start_of_local_day


def filter_entries(
    entries: list[Entry],
    spec: FilterSpec,
    now: Optional[pendulum.DateTime] = None,
) -> list[Entry]:
    return generate_filter(spec, now).filter(entries)


def generate_filter(
    spec: FilterSpec,
    now: Optional[pendulum.DateTime] = None,
) -> "And":
    """Build the conjunction of every active condition in the spec."""
    filter_obj = And()

    search_text = spec.get("search_text")
    if search_text:
        filter_obj.add_predicate(SearchText(search_text))

    type = spec.get("type")
    if type:
        filter_obj.add_predicate(Type(type))

    date_range = spec.get("date_range")
    if date_range:
        filter_obj.add_predicate(DateRangePredicate(date_range, resolve_now(now)))

    date_from = spec.get("date_from")
    if date_from is not None:
        filter_obj.add_predicate(DateFrom(date_from))

    date_to = spec.get("date_to")
    if date_to is not None:
        filter_obj.add_predicate(DateTo(date_to))

    return filter_obj


def has_active_filters(spec: FilterSpec) -> bool:
    return bool(
        spec.get("search_text")
        or spec.get("type")
        or spec.get("date_range")
        or spec.get("date_from") is not None
        or spec.get("date_to") is not None
    )


class Predicate(ABC):
    @abstractmethod
    def include(self, entry: Entry) -> bool: ...

    def filter(self, entries: list[Entry]) -> list[Entry]:
        return [entry for entry in entries if self.include(entry)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, entry: Entry) -> bool:
        return all(predicate.include(entry) for predicate in self.predicates)


class SearchText(Predicate):
    def __init__(self, search_text: str) -> None:
        self.search_text = search_text.lower()

    def include(self, entry: Entry) -> bool:
        comments = entry["details"].get("comments") or ""
        searchable_text = f"{entry['type']} {comments}".lower()
        return self.search_text in searchable_text


class Type(Predicate):
    def __init__(self, type: str) -> None:
        self.type = type

    def include(self, entry: Entry) -> bool:
        return entry["type"] == self.type


class DateRangePredicate(Predicate):
    def __init__(self, date_range: DateRange, now: pendulum.DateTime) -> None:
        self.start, self.end = get_date_range_boundaries(date_range, now)

    def include(self, entry: Entry) -> bool:
        if entry["timestamp"] < self.start:
            return False
        if self.end is not None and entry["timestamp"] > self.end:
            return False
        return True


class DateFrom(Predicate):
    def __init__(self, date_from: pendulum.Date) -> None:
        self.start = start_of_local_day(date_from)

    def include(self, entry: Entry) -> bool:
        return entry["timestamp"] >= self.start


class DateTo(Predicate):
    def __init__(self, date_to: pendulum.Date) -> None:
        self.end = end_of_local_day(date_to)

    def include(self, entry: Entry) -> bool:
        return entry["timestamp"] <= self.end


# ─────────────────────────────────────────────────────────────
# Filter status
# ─────────────────────────────────────────────────────────────


def get_filter_status(
    filtered_count: int,
    total_count: int,
    has_active_filters: bool,
) -> FilterStatus:
    """
    Classify a filtered view.

    Equal counts alone do not mean no filter is active: a filter can match
    every entry, which is reported as ALL_MATCH rather than NONE.
    """
    if filtered_count == total_count and not has_active_filters:
        return FilterStatus.NONE
    if filtered_count == 0:
        return FilterStatus.NO_RESULTS
    if filtered_count == total_count:
        return FilterStatus.ALL_MATCH
    return FilterStatus.PARTIAL


def get_filter_status_message(
    status: FilterStatus,
    filtered_count: int,
    total_count: int,
) -> Optional[str]:
    match status:
        case FilterStatus.NONE:
            return None
        case FilterStatus.NO_RESULTS:
            return "No entries match your filters"
        case FilterStatus.ALL_MATCH:
            return f"Showing all {total_count} entries"
    return f"Showing {filtered_count} of {total_count} entries"


def can_export_filtered(filtered_count: int, total_count: int) -> bool:
    return 0 < filtered_count < total_count


def get_filter_description(spec: FilterSpec) -> str:
    """Describe the active filters as a filename fragment."""
    parts: list[str] = []

    type = spec.get("type")
    if type:
        parts.append(type.lower().replace(" ", ""))

    date_range = spec.get("date_range")
    date_from = spec.get("date_from")
    date_to = spec.get("date_to")
    if date_range:
        parts.append(str(date_range))
    elif date_from is not None and date_to is not None:
        parts.append(f"{date_from.to_date_string()}_to_{date_to.to_date_string()}")
    elif date_from is not None:
        parts.append(f"from_{date_from.to_date_string()}")
    elif date_to is not None:
        parts.append(f"to_{date_to.to_date_string()}")

    if spec.get("search_text"):
        parts.append("search")

    return "_".join(parts) if len(parts) > 0 else "custom"
