# SPDX-License-Identifier: MIT

from wellness_log.service.analytics import get_analytics_summary
from wellness_log.terminal.load import load_entries
from wellness_log.time import now_local
from wellness_log.view.views.analytics import analytics_view


def stats() -> None:
    """Show streaks, monthly counts and recent patterns."""
    analytics_view(get_analytics_summary(load_entries(), now_local()))
