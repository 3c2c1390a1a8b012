# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from wellness_log.log_setup import configure_logging
from wellness_log.repository.configuration import CONFIGURATION_REPO
from wellness_log.terminal import configuration, export, log
from wellness_log.terminal.calendar import calendar
from wellness_log.terminal.custom_typer import OrderedAliasedTyperGroup
from wellness_log.terminal.entry import day, delete, edit, list_entries
from wellness_log.terminal.stats import stats
from wellness_log.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Wellness Log - exercise, SVT episodes and medication in the CLI",
    no_args_is_help=True,
)
app.add_typer(log.app, name="log, l", help="Log a new event")
app.command(name="list, ls")(list_entries)
app.command(name="day, d")(day)
app.command(name="calendar, cal")(calendar)
app.command(name="stats, st")(stats)
app.command(name="edit, e")(edit)
app.command(name="delete, del")(delete)
app.add_typer(export.app, name="export, ex", help="Export entries to a file")
app.command(name="import, im")(export.import_)
app.add_typer(configuration.app, name="config, c", help="View or change settings")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    Wellness Log - exercise, SVT episodes and medication in the CLI

    Global options that apply to all commands.
    """
    if verbose:
        configure_logging(CONFIGURATION_REPO.get_config()["log_level"], verbose=True)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
