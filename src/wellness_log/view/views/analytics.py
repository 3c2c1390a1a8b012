# SPDX-License-Identifier: MIT

from rich import box
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from wellness_log.service.analytics import AnalyticsSummary, format_days_since
from wellness_log.view.views.header import header


def _stats_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("label", style="cyan")
    table.add_column("value", justify="right")
    for label, value in rows:
        table.add_row(label, value)
    return table


def analytics_view(summary: AnalyticsSummary) -> None:
    """Display the summary cards, the monthly overview and the recent patterns."""
    header("analytics")
    console = Console()

    cards = summary["cards"]
    console.print(
        Columns(
            [
                Panel(
                    f"[bold green]{cards['exercise_streak']}[/bold green]",
                    title="Exercise Streak",
                ),
                Panel(
                    f"[bold red]{cards['svt_this_month']}[/bold red]",
                    title="SVT This Month",
                ),
                Panel(
                    f"[bold cyan]{cards['medications_this_month']}[/bold cyan]",
                    title="Medications This Month",
                ),
                Panel(f"[bold]{cards['total_entries']}[/bold]", title="Total Entries"),
            ]
        )
    )

    monthly = summary["monthly"]
    console.print(
        Panel(
            _stats_table(
                [
                    ("Average SVT per month", f"{monthly['average_svt_per_month']:.1f}"),
                    ("Exercise this month", str(monthly["exercise_this_month"])),
                    ("Most active day", monthly["most_active_day"]),
                    ("Common SVT time", monthly["common_svt_time"]),
                ]
            ),
            title="Monthly Overview",
            title_align="left",
        )
    )

    patterns = summary["patterns"]
    console.print(
        Columns(
            [
                Panel(
                    _stats_table(
                        [
                            ("Episodes (30 days)", str(patterns["svt_last_30"])),
                            ("Average duration", patterns["average_svt_duration"]),
                            (
                                "Days since last",
                                format_days_since(patterns["days_since_svt"]),
                            ),
                        ]
                    ),
                    title="SVT Patterns",
                    title_align="left",
                ),
                Panel(
                    _stats_table(
                        [
                            ("Sessions (30 days)", str(patterns["exercise_last_30"])),
                            (
                                "Weekly average",
                                f"{patterns['weekly_exercise_average']:.1f}",
                            ),
                            (
                                "Days since last",
                                format_days_since(patterns["days_since_exercise"]),
                            ),
                        ]
                    ),
                    title="Exercise Patterns",
                    title_align="left",
                ),
            ]
        )
    )
