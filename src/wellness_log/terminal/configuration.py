# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from wellness_log import configuration
from wellness_log.repository.configuration import CONFIGURATION_REPO
from wellness_log.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "clear_ids_on_view",
        "✓ Enabled" if config["clear_ids_on_view"] else "✗ Disabled",
    )
    table.add_row("default_svt_duration", config["default_svt_duration"])
    table.add_row("default_medication_dosage", config["default_medication_dosage"])
    table.add_row("log_level", config["log_level"])
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_configuration_table())

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        from yaml import Loader  # type: ignore[assignment] # noqa: F401

        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above reports",
        ),
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids-on-view/--no-clear-ids-on-view",
            help="Enable/disable renumbering ids on every listing",
        ),
    ] = None,
    default_svt_duration: Annotated[
        Optional[str],
        typer.Option(
            "--default-svt-duration",
            help="Duration preset for logged SVT episodes",
        ),
    ] = None,
    default_medication_dosage: Annotated[
        Optional[str],
        typer.Option(
            "--default-medication-dosage",
            help="Dosage preset for logged medication",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=", ".join(LOG_LEVELS)),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        typer.secho(
            f"Invalid log level: {log_level}. Valid options: {', '.join(LOG_LEVELS)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        clear_ids_on_view=clear_ids_on_view,
        default_svt_duration=default_svt_duration,
        default_medication_dosage=default_medication_dosage,
        log_level=log_level,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table("Updated Configuration"))
