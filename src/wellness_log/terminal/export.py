# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from wellness_log.query.filter import can_export_filtered, filter_entries
from wellness_log.repository.entry import ENTRY_REPO
from wellness_log.service.export import (
    ImportValidationError,
    dumps_envelope,
    get_export_filename,
    get_filtered_export_filename,
    get_json_export_filename,
    parse_import,
    to_table,
)
from wellness_log.terminal.custom_typer import AliasedTyperGroup
from wellness_log.terminal.entry import (
    FromOption,
    RangeOption,
    SearchOption,
    ToOption,
    TypeOption,
)
from wellness_log.terminal.load import load_entries
from wellness_log.terminal.parse import build_filter_spec
from wellness_log.time import now_local

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

OutputOption = Annotated[
    Optional[Path],
    typer.Option(
        "--output",
        "-o",
        help="Destination file (defaults to a dated name in the current directory)",
    ),
]


def _write(path: Path, content: str, count: int) -> None:
    path.write_text(content, encoding="utf-8")
    logger.info("Exported %d entries to %s", count, path)
    typer.secho(f"Exported {count} entries to {path}", fg=typer.colors.GREEN)


@app.command("csv")
def csv(
    output: OutputOption = None,
    filtered: Annotated[
        bool,
        typer.Option("--filtered", help="Export only the entries matching the filters"),
    ] = False,
    search: SearchOption = None,
    type: TypeOption = None,
    date_range: RangeOption = None,
    date_from: FromOption = None,
    date_to: ToOption = None,
) -> None:
    """Export entries as a CSV table, oldest first."""
    now = now_local()
    entries = load_entries()

    if len(entries) == 0:
        typer.secho(
            "No data to export. Please add some entries first.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    if not filtered:
        _write(output or Path(get_export_filename(entries)), to_table(entries), len(entries))
        return

    spec = build_filter_spec(search, type, date_range, date_from, date_to)
    matching = filter_entries(entries, spec, now)
    if not can_export_filtered(len(matching), len(entries)):
        typer.secho(
            f"Filters match {len(matching)} of {len(entries)} entries; "
            "a filtered export needs some but not all of them",
            fg=typer.colors.YELLOW,
        )
        raise typer.Exit(1)

    _write(
        output or Path(get_filtered_export_filename(spec, now.date())),
        to_table(matching),
        len(matching),
    )


@app.command("json")
def json(output: OutputOption = None) -> None:
    """Export every entry as a JSON document that import accepts."""
    now = now_local()
    entries = load_entries()

    _write(
        output or Path(get_json_export_filename(now.date())),
        dumps_envelope(entries, now),
        len(entries),
    )


def import_(
    file: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, readable=True),
    ],
) -> None:
    """Replace the stored collection with the entries of a JSON export."""
    try:
        entries = parse_import(file.read_bytes())
    except ImportValidationError as e:
        typer.secho(f"Error importing data: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    ENTRY_REPO.replace_all_entries(entries)
    typer.secho(f"Successfully imported {len(entries)} entries!", fg=typer.colors.GREEN)
