# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from wellness_log.service.calendar import get_month_grid, shift_month
from wellness_log.terminal.load import load_entries
from wellness_log.time import now_local
from wellness_log.view.views.calendar import calendar_view


def calendar(
    year: Annotated[Optional[int], typer.Option("--year", "-y")] = None,
    month: Annotated[
        Optional[int],
        typer.Option("--month", "-m", min=1, max=12),
    ] = None,
    offset: Annotated[
        int,
        typer.Option(
            "--offset",
            "-o",
            help="Months to move from the selected month, e.g. -1 for the previous one",
        ),
    ] = 0,
) -> None:
    """Show a month calendar with markers for each logged event."""
    now = now_local()
    year, month = shift_month(year or now.year, month or now.month, offset)

    weeks = get_month_grid(year, month, load_entries(), now)
    calendar_view(year, month, weeks)
