# SPDX-License-Identifier: MIT

import typer

from wellness_log.model.entry import Entry
from wellness_log.repository.entry import ENTRY_REPO, EntryRepositoryError


def load_entries() -> list[Entry]:
    """Snapshot of the stored collection; an unreadable file ends the command."""
    try:
        return ENTRY_REPO.get_all_entries()
    except EntryRepositoryError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
