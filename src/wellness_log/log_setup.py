# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Send log records to stderr through rich, once per process."""
    resolved_level: Optional[int] = logging.DEBUG if verbose else None
    if resolved_level is None:
        resolved_level = logging.getLevelName(level.upper())
        if not isinstance(resolved_level, int):
            resolved_level = logging.WARNING

    root = logging.getLogger("wellness_log")
    root.setLevel(resolved_level)
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
