"""Report generation for tallied subjects."""

import calendar
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from time_tally.core.models import MINUTES_PER_HOUR, Subject, format_duration


def aggregate_total(subjects: Iterable[Subject]) -> tuple[int, int]:
    """Sum the time of all subjects.

    Args:
        subjects: Subjects to sum

    Returns:
        Tuple of (hours, minutes) with minutes in 0-59
    """
    total_minutes = sum(s.hours * MINUTES_PER_HOUR + s.minutes for s in subjects)
    return total_minutes // MINUTES_PER_HOUR, total_minutes % MINUTES_PER_HOUR


class ReportGenerator:
    """Render reports of tallied time."""

    def __init__(
        self,
        console: Optional[Console] = None,
        show_bars: bool = True,
        bar_width: int = 25,
    ):
        """Initialize report generator.

        Args:
            console: Rich console for output. Creates default if None.
            show_bars: Whether to draw a share-of-total bar per subject
            bar_width: Width of the bar in characters
        """
        self.console = console or Console()
        self.show_bars = show_bars
        self.bar_width = bar_width

    def subject_list(self, subjects: Iterable[Subject]) -> None:
        """Display the numbered subject list used to pick a subject."""
        subjects = list(subjects)
        if not subjects:
            self.console.print("[yellow]No subjects yet[/yellow]")
            return

        table = Table(title="Subjects")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Subject", style="bold")
        table.add_column("Time", style="magenta", justify="right")

        for index, subject in enumerate(subjects, start=1):
            table.add_row(str(index), Text(subject.name), subject.display_duration)

        self.console.print(table)

    def subject_report(self, subjects: Iterable[Subject]) -> None:
        """Generate and display the per-subject time report.

        Args:
            subjects: Subjects in display order
        """
        subjects = list(subjects)
        self.console.print("\n[bold cyan]Time Report[/bold cyan]\n")

        if not subjects:
            self.console.print("[yellow]No subjects yet[/yellow]")
            return

        total_minutes = sum(s.total_minutes for s in subjects)

        table = Table()
        table.add_column("Subject", style="bold")
        table.add_column("Time", style="magenta", justify="right")
        table.add_column("% Total", style="green", justify="right")
        if self.show_bars:
            table.add_column("Bar", style="blue")

        for subject in subjects:
            pct = (subject.total_minutes / total_minutes) * 100 if total_minutes > 0 else 0
            row: list = [Text(subject.name), subject.display_duration, f"{pct:.1f}%"]
            if self.show_bars:
                row.append(self._create_bar(pct))
            table.add_row(*row)

        self.console.print(table)

        hours, minutes = aggregate_total(subjects)
        self.console.print(f"\n[dim]Total:[/dim] [bold]{format_duration(hours, minutes)}[/bold]")

    def monthly_report(
        self,
        subjects: Iterable[Subject],
        now: Optional[datetime] = None,
    ) -> None:
        """Generate and display the monthly report.

        The total covers every subject in the session; the heading names
        the current month.

        Args:
            subjects: Subjects to total
            now: Reference time for the month name. Defaults to now.
        """
        if now is None:
            now = datetime.now()

        hours, minutes = aggregate_total(subjects)
        month_name = calendar.month_name[now.month]

        content = (
            f"[dim]Total Time Spent in {month_name}[/dim]\n\n"
            f"[bold]{format_duration(hours, minutes)}[/bold]"
        )
        self.console.print(Panel(content, title="Monthly Report", border_style="cyan"))

    def _create_bar(self, percentage: float) -> Text:
        """Create a visual bar for percentage display.

        Args:
            percentage: Percentage value (0-100)

        Returns:
            Rich Text object with colored bar
        """
        filled = int((percentage / 100) * self.bar_width)
        empty = self.bar_width - filled

        bar = Text()
        bar.append("█" * filled, style="blue")
        bar.append("░" * empty, style="dim")

        return bar
