# SPDX-License-Identifier: MIT

import logging
import re
from typing import Optional

import pendulum
import typer

from wellness_log.model.event_type import parse_event_type
from wellness_log.model.filter import DateRange, FilterSpec
from wellness_log.time import date_from_str, datetime_from_str

logger = logging.getLogger(__name__)


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime: {e}")

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        return (
            pendulum.today("local")
            .set(hour=hour, minute=minute, second=0, microsecond=0)
            .in_tz("UTC")
        )

    if datetime == "now" or datetime == "n":
        return pendulum.now().in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a calendar day: YYYY-MM-DD, a relative day offset like -1, or one of
    today (t) and yesterday (y).
    """
    if date_param is None:
        return None

    date = str(date_param)

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date)).date()

    if date == "today" or date == "t":
        return pendulum.today("local").date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").date()
    raise typer.BadParameter("Incorrect date format, expected YYYY-MM-DD")


def parse_type_label(type_param: Optional[str]) -> Optional[str]:
    if type_param is None:
        return None
    try:
        return parse_event_type(type_param).value
    except ValueError as e:
        raise typer.BadParameter(str(e))


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse a single ID, comma-separated list of IDs, or ranges of IDs.

    Args:
        id_param: A single ID (e.g., "1"), comma-separated list (e.g., "1,2,3"),
                  range (e.g., "1-5"), or mixed (e.g., "1,3-5,8")

    Returns:
        List of integer IDs (sorted and deduplicated)
    """
    ids: list[int] = []
    for id_str in (s.strip() for s in id_param.split(",")):
        if not id_str:
            continue

        if "-" in id_str:
            range_parts = id_str.split("-")
            if len(range_parts) != 2:
                raise typer.BadParameter(
                    f"Invalid range format: '{id_str}' (expected format: 'start-end')"
                )
            try:
                start = int(range_parts[0].strip())
                end = int(range_parts[1].strip())
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' contains non-integer values"
                )
            if start > end:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' (start must be <= end)"
                )
            ids.extend(range(start, end + 1))
        else:
            try:
                ids.append(int(id_str))
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid ID: '{id_str}' is not a valid integer"
                )

    if len(ids) == 0:
        raise typer.BadParameter("No valid IDs provided")

    return sorted(set(ids))


def build_filter_spec(
    search: Optional[str] = None,
    type: Optional[str] = None,
    date_range: Optional[DateRange] = None,
    date_from: Optional[pendulum.Date] = None,
    date_to: Optional[pendulum.Date] = None,
) -> FilterSpec:
    """Collect filter options; a relative range replaces explicit dates."""
    if date_range is not None and (date_from is not None or date_to is not None):
        logger.warning("--range given, ignoring --from and --to")
        date_from = None
        date_to = None

    return {
        "search_text": search,
        "type": type,
        "date_range": date_range,
        "date_from": date_from,
        "date_to": date_to,
    }
