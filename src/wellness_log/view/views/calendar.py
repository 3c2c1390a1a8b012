# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from wellness_log.model.event_type import EventType, marker_name
from wellness_log.service.calendar import CalendarDay
from wellness_log.view.color import (
    MARKER_COLORS,
    MARKER_SYMBOL,
    OTHER_MONTH_COLOR,
    TODAY_COLOR,
)
from wellness_log.view.views.header import header

WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def format_markers(markers: dict[str, int]) -> str:
    parts = []
    for name, count in markers.items():
        color = MARKER_COLORS.get(name, "white")
        parts.append(f"[{color}]{MARKER_SYMBOL * count}[/{color}]")
    return "".join(parts)


def format_day_cell(day: CalendarDay) -> str:
    day_number = str(day["date"].day)
    if day["is_today"]:
        day_number = f"[{TODAY_COLOR}]{day_number}[/{TODAY_COLOR}]"
    elif not day["in_month"]:
        day_number = f"[{OTHER_MONTH_COLOR}]{day_number}[/{OTHER_MONTH_COLOR}]"

    markers = format_markers(day["markers"])
    if markers == "":
        return day_number
    return f"{day_number}\n{markers}"


def calendar_view(year: int, month: int, weeks: list[list[CalendarDay]]) -> None:
    """Display a month as a Sunday-first grid with per-category markers."""
    header(pendulum.date(year, month, 1).format("MMMM YYYY"))

    calendar_table = Table(box=box.SIMPLE, show_lines=True)
    for weekday in WEEKDAY_HEADERS:
        calendar_table.add_column(weekday, justify="center", min_width=5)

    for week in weeks:
        calendar_table.add_row(*[format_day_cell(day) for day in week])

    console = Console()
    console.print(calendar_table)

    legend = "  ".join(
        f"{marker_for_type(event_type)} {event_type.value}" for event_type in EventType
    )
    console.print(f" {legend}")


def marker_for_type(type_label: str) -> str:
    color = MARKER_COLORS.get(marker_name(type_label), "white")
    return f"[{color}]{MARKER_SYMBOL}[/{color}]"
