# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer

from wellness_log.model.event_type import EventType
from wellness_log.repository.configuration import CONFIGURATION_REPO
from wellness_log.repository.entry import ENTRY_REPO
from wellness_log.service.entry import EntryValidationError, create_quick_log_entry
from wellness_log.terminal.custom_typer import AliasedTyperGroup
from wellness_log.terminal.parse import parse_datetime
from wellness_log.view.views import entry as entry_report

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

TimestampOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--timestamp",
        "-ts",
        parser=parse_datetime,
        help="YYYY-MM-DD [HH:mm], HH:mm or now (defaults to now)",
    ),
]
CommentsOption = Annotated[Optional[str], typer.Option("--comments", "-c")]


def _log(
    event_type: EventType,
    timestamp: Optional[pendulum.DateTime] = None,
    duration: Optional[str] = None,
    dosage: Optional[str] = None,
    comments: Optional[str] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    try:
        entry = create_quick_log_entry(
            event_type,
            timestamp=timestamp,
            duration=duration,
            dosage=dosage,
            comments=comments,
            config=config,
        )
    except EntryValidationError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    ENTRY_REPO.save_new_entry(entry)
    logger.info("Logged %s entry %s", entry["type"], entry["id"])
    entry_report.single_entry_view(f"{event_type.value} logged", entry)


@app.command("exercise, ex")
def exercise(
    timestamp: TimestampOption = None,
    comments: CommentsOption = None,
) -> None:
    """Log an exercise session."""
    _log(EventType.EXERCISE, timestamp=timestamp, comments=comments)


@app.command("svt, s")
def svt(
    timestamp: TimestampOption = None,
    duration: Annotated[
        Optional[str],
        typer.Option("--duration", "-d", help="e.g. '3 minutes' (defaults to config)"),
    ] = None,
    comments: CommentsOption = None,
) -> None:
    """Log an SVT episode."""
    _log(EventType.SVT_EPISODE, timestamp=timestamp, duration=duration, comments=comments)


@app.command("medication, med, m")
def medication(
    timestamp: TimestampOption = None,
    dosage: Annotated[
        Optional[str],
        typer.Option("--dosage", "-ds", help="e.g. '1 tablet' (defaults to config)"),
    ] = None,
    comments: CommentsOption = None,
) -> None:
    """Log a medication dose."""
    _log(EventType.MEDICATION, timestamp=timestamp, dosage=dosage, comments=comments)
