# SPDX-License-Identifier: MIT

import re
from typing import Literal, Optional, TypedDict, Union

import pendulum

from wellness_log.model.entry import Entry
from wellness_log.model.event_type import EventType
from wellness_log.service.calendar import date_key
from wellness_log.time import resolve_now

PLACEHOLDER = "-"
TODAY = "Today"

DAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]

# (label, first hour, last hour exclusive) in tie-break order
TIME_OF_DAY_BUCKETS: list[tuple[str, int, int]] = [
    ("Morning (6-12)", 6, 12),
    ("Afternoon (12-18)", 12, 18),
    ("Evening (18-24)", 18, 24),
    ("Night (0-6)", 0, 6),
]

TRAILING_WINDOW_DAYS = 30
WEEKS_PER_TRAILING_WINDOW = 4.3

_DIGITS_PATTERN = re.compile(r"(\d+)")

DaysSince = Union[int, Literal["Today", "-"]]


class AnalyticsCards(TypedDict):
    exercise_streak: int
    svt_this_month: int
    medications_this_month: int
    total_entries: int


class MonthlyStats(TypedDict):
    average_svt_per_month: float
    exercise_this_month: int
    most_active_day: str
    common_svt_time: str


class PatternStats(TypedDict):
    svt_last_30: int
    average_svt_duration: str
    days_since_svt: DaysSince
    exercise_last_30: int
    weekly_exercise_average: float
    days_since_exercise: DaysSince


class AnalyticsSummary(TypedDict):
    cards: AnalyticsCards
    monthly: MonthlyStats
    patterns: PatternStats


def _of_type(entries: list[Entry], type: str) -> list[Entry]:
    return [entry for entry in entries if entry["type"] == type]


def _first_maximum(tallies: list[tuple[str, int]]) -> str:
    """Name with the highest positive tally; earlier names win ties."""
    best = PLACEHOLDER
    max_count = 0
    for name, count in tallies:
        if count > max_count:
            max_count = count
            best = name
    return best


def exercise_streak(
    entries: list[Entry],
    now: Optional[pendulum.DateTime] = None,
) -> int:
    """
    Consecutive days with exercise, counting back from today.

    If today has no exercise yet but yesterday does, the count starts from
    yesterday so the streak survives until the end of the day.
    """
    today = resolve_now(now).date()
    exercise_dates = {
        date_key(entry["timestamp"]) for entry in _of_type(entries, EventType.EXERCISE)
    }

    yesterday = today.subtract(days=1)
    if today.to_date_string() in exercise_dates:
        current = today
    elif yesterday.to_date_string() in exercise_dates:
        current = yesterday
    else:
        return 0

    streak = 0
    while current.to_date_string() in exercise_dates:
        streak += 1
        current = current.subtract(days=1)
    return streak


def count_this_month(
    entries: list[Entry],
    type: str,
    now: Optional[pendulum.DateTime] = None,
) -> int:
    start_of_month = resolve_now(now).start_of("month")
    return len(
        [entry for entry in _of_type(entries, type) if entry["timestamp"] >= start_of_month]
    )


def count_in_last_days(
    entries: list[Entry],
    type: str,
    now: Optional[pendulum.DateTime] = None,
    days: int = TRAILING_WINDOW_DAYS,
) -> int:
    start = resolve_now(now).subtract(days=days)
    return len([entry for entry in _of_type(entries, type) if entry["timestamp"] >= start])


def average_per_month(entries: list[Entry], type: str) -> float:
    """Entries per month over the inclusive span of months they cover."""
    typed_entries = _of_type(entries, type)
    if len(typed_entries) == 0:
        return 0.0

    timestamps = [entry["timestamp"].in_tz("local") for entry in typed_entries]
    first = min(timestamps)
    last = max(timestamps)
    months = (last.year - first.year) * 12 + (last.month - first.month) + 1

    return len(typed_entries) / max(months, 1)


def most_active_day(entries: list[Entry]) -> str:
    counts = {name: 0 for name in DAY_NAMES}
    for entry in entries:
        weekday = entry["timestamp"].in_tz("local").isoweekday() % 7
        counts[DAY_NAMES[weekday]] += 1
    return _first_maximum([(name, counts[name]) for name in DAY_NAMES])


def time_of_day_bucket(timestamp: pendulum.DateTime) -> str:
    hour = timestamp.in_tz("local").hour
    for label, start, end in TIME_OF_DAY_BUCKETS:
        if start <= hour < end:
            return label
    raise ValueError(f"Hour out of range: {hour}")


def time_of_day_distribution(entries: list[Entry], type: str) -> dict[str, int]:
    counts = {label: 0 for label, _, _ in TIME_OF_DAY_BUCKETS}
    for entry in _of_type(entries, type):
        counts[time_of_day_bucket(entry["timestamp"])] += 1
    return counts


def most_common_time_of_day(entries: list[Entry], type: str) -> str:
    distribution = time_of_day_distribution(entries, type)
    return _first_maximum([(label, distribution[label]) for label, _, _ in TIME_OF_DAY_BUCKETS])


def parse_duration_minutes(duration: Optional[str]) -> Optional[int]:
    """Leading number in free-text durations like '3 minutes'."""
    if not duration:
        return None
    match = _DIGITS_PATTERN.search(duration)
    if match is None:
        return None
    return int(match.group(1))


def average_duration(entries: list[Entry]) -> str:
    """
    Mean duration in minutes, e.g. '2.0 min'.

    Entries with no duration, or a duration without digits, are left out of
    the average rather than counted as zero.
    """
    durations = [
        minutes
        for minutes in (
            parse_duration_minutes(entry["details"].get("duration")) for entry in entries
        )
        if minutes is not None
    ]
    if len(durations) == 0:
        return PLACEHOLDER
    average = sum(durations) / len(durations)
    return f"{average:.1f} min"


def days_since_last(
    entries: list[Entry],
    type: str,
    now: Optional[pendulum.DateTime] = None,
) -> DaysSince:
    typed_entries = _of_type(entries, type)
    if len(typed_entries) == 0:
        return PLACEHOLDER

    local_now = resolve_now(now)
    last = max(entry["timestamp"] for entry in typed_entries)
    elapsed_days = int((local_now - last).total_seconds() // (24 * 60 * 60))
    # Less than a full day ago reads as today even across midnight
    if elapsed_days <= 0 or date_key(last) == date_key(local_now):
        return TODAY
    return elapsed_days


def format_days_since(value: DaysSince) -> str:
    if isinstance(value, str):
        return value
    if value == 1:
        return "1 day"
    return f"{value} days"


def weekly_average(
    entries: list[Entry],
    type: str,
    now: Optional[pendulum.DateTime] = None,
) -> float:
    """Average per week over the trailing 30 days (30 days ~ 4.3 weeks)."""
    count = count_in_last_days(entries, type, now, TRAILING_WINDOW_DAYS)
    return round(count / WEEKS_PER_TRAILING_WINDOW, 1)


def get_analytics_summary(
    entries: list[Entry],
    now: Optional[pendulum.DateTime] = None,
) -> AnalyticsSummary:
    local_now = resolve_now(now)
    window_start = local_now.subtract(days=TRAILING_WINDOW_DAYS)
    recent_svt = [
        entry
        for entry in _of_type(entries, EventType.SVT_EPISODE)
        if entry["timestamp"] >= window_start
    ]

    return {
        "cards": {
            "exercise_streak": exercise_streak(entries, local_now),
            "svt_this_month": count_this_month(
                entries, EventType.SVT_EPISODE, local_now
            ),
            "medications_this_month": count_this_month(
                entries, EventType.MEDICATION, local_now
            ),
            "total_entries": len(entries),
        },
        "monthly": {
            "average_svt_per_month": average_per_month(entries, EventType.SVT_EPISODE),
            "exercise_this_month": count_this_month(
                entries, EventType.EXERCISE, local_now
            ),
            "most_active_day": most_active_day(entries),
            "common_svt_time": most_common_time_of_day(entries, EventType.SVT_EPISODE),
        },
        "patterns": {
            "svt_last_30": len(recent_svt),
            "average_svt_duration": average_duration(recent_svt),
            "days_since_svt": days_since_last(entries, EventType.SVT_EPISODE, local_now),
            "exercise_last_30": count_in_last_days(
                entries, EventType.EXERCISE, local_now
            ),
            "weekly_exercise_average": weekly_average(
                entries, EventType.EXERCISE, local_now
            ),
            "days_since_exercise": days_since_last(
                entries, EventType.EXERCISE, local_now
            ),
        },
    }
