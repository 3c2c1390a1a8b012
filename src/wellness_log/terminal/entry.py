# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from wellness_log.model.filter import DateRange
from wellness_log.query.filter import (
    filter_entries,
    get_filter_status,
    get_filter_status_message,
    has_active_filters,
)
from wellness_log.query.sort import sort_entries
from wellness_log.repository.entry import ENTRY_REPO
from wellness_log.repository.id_map import ID_MAP_REPO
from wellness_log.service.calendar import get_entries_for_date
from wellness_log.service.entry import (
    EntryValidationError,
    apply_entry_edit,
    find_entry,
)
from wellness_log.terminal.load import load_entries
from wellness_log.terminal.parse import (
    build_filter_spec,
    parse_date,
    parse_datetime,
    parse_id_list,
    parse_type_label,
)
from wellness_log.time import now_local
from wellness_log.view.state import get_clear_ids
from wellness_log.view.views import entry as entry_report

SearchOption = Annotated[
    Optional[str],
    typer.Option("--search", "-s", help="Case-insensitive text in type or comments"),
]
TypeOption = Annotated[
    Optional[str],
    typer.Option(
        "--type",
        "-t",
        parser=parse_type_label,
        help="exercise, svt or medication",
    ),
]
RangeOption = Annotated[
    Optional[DateRange],
    typer.Option("--range", "-r", help="Relative date range"),
]
FromOption = Annotated[
    Optional[pendulum.Date],
    typer.Option("--from", "-f", parser=parse_date, help="First day, YYYY-MM-DD"),
]
ToOption = Annotated[
    Optional[pendulum.Date],
    typer.Option("--to", parser=parse_date, help="Last day, YYYY-MM-DD"),
]


def list_entries(
    search: SearchOption = None,
    type: TypeOption = None,
    date_range: RangeOption = None,
    date_from: FromOption = None,
    date_to: ToOption = None,
) -> None:
    """List entries, newest first, optionally filtered."""
    spec = build_filter_spec(search, type, date_range, date_from, date_to)
    entries = load_entries()

    filtered = filter_entries(entries, spec, now_local())
    status = get_filter_status(len(filtered), len(entries), has_active_filters(spec))

    if get_clear_ids():
        ID_MAP_REPO.clear_ids()

    entry_report.entries_view(
        "entries",
        sort_entries(filtered, descending=True),
        status,
        get_filter_status_message(status, len(filtered), len(entries)),
    )


def day(
    date: Annotated[
        pendulum.Date,
        typer.Argument(parser=parse_date, help="YYYY-MM-DD, t, y or a day offset"),
    ],
) -> None:
    """Show the entries logged on one day."""
    entries = load_entries()

    if get_clear_ids():
        ID_MAP_REPO.clear_ids()

    entry_report.day_view(date, get_entries_for_date(entries, date))


def edit(
    id: Annotated[int, typer.Argument(help="id shown by list or day")],
    timestamp: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--timestamp", "-ts", parser=parse_datetime),
    ] = None,
    duration: Annotated[
        Optional[str],
        typer.Option("--duration", "-d", help="empty string clears the field"),
    ] = None,
    dosage: Annotated[
        Optional[str],
        typer.Option("--dosage", "-ds", help="empty string clears the field"),
    ] = None,
    comments: Annotated[
        Optional[str],
        typer.Option("--comments", "-c", help="empty string clears the field"),
    ] = None,
) -> None:
    """Edit the timestamp or details of an entry; its type never changes."""
    real_id = ID_MAP_REPO.get_real_id(id)
    entry = find_entry(load_entries(), real_id) if real_id is not None else None
    if real_id is None or entry is None:
        typer.secho(f"No entry with id {id}, nothing edited", fg=typer.colors.YELLOW)
        return

    try:
        edited = apply_entry_edit(
            entry,
            timestamp=timestamp,
            duration=duration,
            dosage=dosage,
            comments=comments,
        )
    except EntryValidationError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    ENTRY_REPO.modify_entry(real_id, edited["timestamp"], edited["details"])
    entry_report.single_entry_view("entry updated", edited)


def delete(
    ids: Annotated[
        str,
        typer.Argument(help="id, comma-separated ids or a range like 2-4"),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Delete without asking for confirmation"),
    ] = False,
) -> None:
    """Delete entries permanently."""
    entries = load_entries()
    for synthetic_id in parse_id_list(ids):
        real_id = ID_MAP_REPO.get_real_id(synthetic_id)
        if real_id is None or find_entry(entries, real_id) is None:
            typer.secho(
                f"No entry with id {synthetic_id}, nothing deleted",
                fg=typer.colors.YELLOW,
            )
            continue

        if not yes and not typer.confirm(
            f"Delete entry {synthetic_id}? This cannot be undone."
        ):
            continue

        ENTRY_REPO.delete_entry(real_id)
        typer.echo(f"Deleted entry {synthetic_id}")
