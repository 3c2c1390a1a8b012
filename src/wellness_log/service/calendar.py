# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from wellness_log.model.entry import Entry
from wellness_log.model.event_type import marker_name
from wellness_log.query.sort import sort_entries
from wellness_log.time import datetime_to_local_date_str, resolve_now

MAX_MARKERS_PER_TYPE = 3


class CalendarDay(TypedDict):
    date: pendulum.Date
    in_month: bool
    is_today: bool
    entries: list[Entry]
    markers: dict[str, int]


def date_key(timestamp: pendulum.DateTime) -> str:
    """Local calendar day of a timestamp as 'YYYY-MM-DD'."""
    return datetime_to_local_date_str(timestamp)


def group_by_date(entries: list[Entry]) -> dict[str, list[Entry]]:
    grouped: dict[str, list[Entry]] = {}
    for entry in entries:
        grouped.setdefault(date_key(entry["timestamp"]), []).append(entry)
    return grouped


def get_entries_for_date(entries: list[Entry], date: pendulum.Date) -> list[Entry]:
    """Entries logged on one local day, oldest first."""
    key = date.to_date_string()
    return sort_entries([entry for entry in entries if date_key(entry["timestamp"]) == key])


def count_events_by_type(entries: list[Entry]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for entry in entries:
        name = marker_name(entry["type"])
        counts[name] = counts.get(name, 0) + 1
    return counts


def get_event_markers(
    entries: list[Entry],
    cap: int = MAX_MARKERS_PER_TYPE,
) -> dict[str, int]:
    """Marker count per category for one day; overflow is not shown."""
    return {name: min(count, cap) for name, count in count_events_by_type(entries).items()}


def get_grid_boundaries(year: int, month: int) -> tuple[pendulum.Date, pendulum.Date]:
    """
    Sunday on or before the first of the month, and Saturday on or after
    the last day.
    """
    first_day = pendulum.date(year, month, 1)
    last_day = first_day.end_of("month")
    # isoweekday() % 7 counts days since Sunday
    start = first_day.subtract(days=first_day.isoweekday() % 7)
    end = last_day.add(days=6 - last_day.isoweekday() % 7)
    return start, end


def get_month_grid(
    year: int,
    month: int,
    entries: list[Entry],
    now: Optional[pendulum.DateTime] = None,
) -> list[list[CalendarDay]]:
    """Weeks of the month view, each a list of seven days starting on Sunday."""
    today = resolve_now(now).date()
    entries_by_date = group_by_date(entries)
    start, end = get_grid_boundaries(year, month)

    weeks: list[list[CalendarDay]] = []
    current = start
    while current <= end:
        if len(weeks) == 0 or len(weeks[-1]) == 7:
            weeks.append([])
        day_entries = entries_by_date.get(current.to_date_string(), [])
        weeks[-1].append(
            {
                "date": current,
                "in_month": current.month == month,
                "is_today": current == today,
                "entries": day_entries,
                "markers": get_event_markers(day_entries),
            }
        )
        current = current.add(days=1)

    return weeks


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    shifted = pendulum.date(year, month, 1).add(months=offset)
    return shifted.year, shifted.month
