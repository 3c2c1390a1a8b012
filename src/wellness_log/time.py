# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def resolve_now(now: Optional[pendulum.DateTime]) -> pendulum.DateTime:
    """Return `now` in local time, falling back to the current moment."""
    if now is None:
        return now_local()
    return now.in_tz("local")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("UTC").isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    """Parse an ISO-8601 instant. Naive values are read as local time."""
    parsed = pendulum.parse(datetime, tz="local")
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not an absolute timestamp: {datetime!r}")
    return parsed.in_tz("UTC")


def date_from_str(date_str: str) -> pendulum.Date:
    parsed = pendulum.parse(date_str, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if not isinstance(parsed, pendulum.Date):
        raise ValueError(f"not a calendar date: {date_str!r}")
    return parsed


def start_of_local_day(date: pendulum.Date) -> pendulum.DateTime:
    return pendulum.datetime(date.year, date.month, date.day, tz="local")


def end_of_local_day(date: pendulum.Date) -> pendulum.DateTime:
    return start_of_local_day(date).end_of("day")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd HH:mm")


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("hh:mm A")


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a local date string in 'YYYY-MM-DD' format."""
    return datetime.in_tz("local").format("YYYY-MM-DD")
