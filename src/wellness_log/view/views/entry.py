# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from wellness_log.model.entry import Entry
from wellness_log.model.filter import FilterStatus
from wellness_log.repository.id_map import ID_MAP_REPO
from wellness_log.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_time_str,
)
from wellness_log.view.color import color_for_type
from wellness_log.view.util import format_details
from wellness_log.view.views.header import header


def entries_view(
    report_name: str,
    entries: list[Entry],
    status: FilterStatus = FilterStatus.NONE,
    status_message: Optional[str] = None,
) -> None:
    """Display entries in a table, in the order given."""
    header(report_name)
    console = Console()

    if status_message is not None:
        style = "bold red" if status == FilterStatus.NO_RESULTS else "sandy_brown"
        console.print(Text(f" {status_message}", style=style))

    if len(entries) == 0:
        if status == FilterStatus.NONE:
            console.print(" No entries yet. Start logging your wellness events!")
        else:
            console.print(
                " No entries match your current filters. Try adjusting your search criteria."
            )
        return

    entries_table = Table(box=box.SIMPLE)
    entries_table.add_column("id")
    entries_table.add_column("timestamp")
    entries_table.add_column("type")
    entries_table.add_column("details")

    for entry in entries:
        color = color_for_type(entry["type"])
        entries_table.add_row(
            str(ID_MAP_REPO.associate_id(entry["id"])),
            datetime_to_display_local_datetime_str(entry["timestamp"]),
            f"[{color}]{entry['type']}[/{color}]",
            format_details(entry),
        )

    console.print(entries_table)


def single_entry_view(report_name: str, entry: Entry) -> None:
    """Display detailed view of a single entry."""
    header(report_name)

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    color = color_for_type(entry["type"])
    entry_table.add_row("id", str(ID_MAP_REPO.associate_id(entry["id"])))
    entry_table.add_row("type", f"[{color}]{entry['type']}[/{color}]")
    entry_table.add_row(
        "timestamp", datetime_to_display_local_datetime_str(entry["timestamp"])
    )
    for field in ("duration", "dosage", "comments"):
        entry_table.add_row(field, entry["details"].get(field, ""))

    console = Console()
    console.print(entry_table)


def day_view(date: pendulum.Date, entries: list[Entry]) -> None:
    """Entries of a single day, oldest first."""
    header(f"Entries for {date.format('M/D/YYYY')}")
    console = Console()

    if len(entries) == 0:
        console.print(" No entries for this day.")
        return

    day_table = Table(box=box.SIMPLE)
    day_table.add_column("id")
    day_table.add_column("time")
    day_table.add_column("type")
    day_table.add_column("details")

    for entry in entries:
        color = color_for_type(entry["type"])
        day_table.add_row(
            str(ID_MAP_REPO.associate_id(entry["id"])),
            datetime_to_display_local_time_str(entry["timestamp"]),
            f"[{color}]{entry['type']}[/{color}]",
            format_details(entry),
        )

    console.print(day_table)
