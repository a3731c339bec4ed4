"""Interactive tally session."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from time_tally.analysis.reports import ReportGenerator
from time_tally.core.models import Subject
from time_tally.core.store import StoreEvent, SubjectStore
from time_tally.export_import import EXPORTERS

logger = logging.getLogger(__name__)

ACTIONS = ["add", "log", "list", "report", "monthly", "export", "quit"]

MAX_HOURS = 23
MAX_MINUTES = 59

DEFAULT_EXPORT_PATHS = {"json": "time-report.json", "markdown": "time-report.md"}


class TallySession:
    """Prompt-driven loop over a subject store.

    Store changes are echoed through a store observer, which also
    redraws the subject list when auto refresh is on.
    """

    def __init__(
        self,
        store: SubjectStore,
        reports: ReportGenerator,
        console: Console,
        error_console: Console,
        auto_refresh: bool = True,
        export_format: str = "json",
        include_metadata: bool = True,
    ):
        """Initialize session.

        Args:
            store: Store the session works on
            reports: Report generator for rendering
            console: Console for normal output
            error_console: Console for errors
            auto_refresh: Redraw the subject list after every change
            export_format: Default export format
            include_metadata: Include metadata in exports
        """
        self.store = store
        self.reports = reports
        self.console = console
        self.error_console = error_console
        self.auto_refresh = auto_refresh
        self.export_format = export_format
        self.include_metadata = include_metadata

    def _on_change(self, event: StoreEvent, subject: Subject) -> None:
        if event is StoreEvent.SUBJECT_ADDED:
            self.console.print(f"[green]✓[/green] Added subject: {escape(subject.name)}")
        elif event is StoreEvent.TIME_LOGGED:
            self.console.print(
                f"[green]✓[/green] Updated: {escape(subject.name)} - {subject.display_duration}"
            )

        if self.auto_refresh:
            self.reports.subject_list(self.store.subjects)

    def run(self) -> None:
        """Run the session until the user quits or input ends."""
        unsubscribe = self.store.subscribe(self._on_change)
        logger.debug("Session started")

        self.console.print(Panel("[bold]TimeTally[/bold]", border_style="green"))
        self.reports.subject_list(self.store.subjects)

        try:
            while True:
                try:
                    action = click.prompt(
                        "Action",
                        type=click.Choice(ACTIONS),
                        default="list",
                    )
                except click.Abort:
                    break

                if action == "quit":
                    break
                handler = getattr(self, f"do_{action}")
                try:
                    handler()
                except click.Abort:
                    break
        finally:
            unsubscribe()

        self.console.print("Bye")
        logger.debug("Session ended")

    def do_add(self) -> None:
        """Add a subject."""
        name = click.prompt("Subject name", default="", show_default=False)
        if self.store.add_subject(name) is None:
            self.console.print("[yellow]Subject name cannot be empty[/yellow]")

    def do_log(self) -> None:
        """Log time against a subject picked by number."""
        subjects = self.store.subjects
        if not subjects:
            self.console.print("[yellow]Add a subject first[/yellow]")
            return

        self.reports.subject_list(subjects)
        number = click.prompt("Subject #", type=click.IntRange(1, len(subjects)))
        hours = click.prompt("Hours", type=click.IntRange(0, MAX_HOURS), default=0)
        minutes = click.prompt("Minutes", type=click.IntRange(0, MAX_MINUTES), default=0)

        self.store.log_time(subjects[number - 1].id, hours, minutes)

    def do_list(self) -> None:
        self.reports.subject_list(self.store.subjects)

    def do_report(self) -> None:
        self.reports.subject_report(self.store.subjects)

    def do_monthly(self) -> None:
        self.reports.monthly_report(self.store.subjects)

    def do_export(self) -> None:
        """Write the current report to a file."""
        fmt = click.prompt(
            "Format",
            type=click.Choice(sorted(EXPORTERS)),
            default=self.export_format,
        )
        output = click.prompt("Output file", default=DEFAULT_EXPORT_PATHS[fmt])

        exporter = EXPORTERS[fmt](Path(output))
        try:
            exporter.export_subjects(
                list(self.store.subjects), include_metadata=self.include_metadata
            )
        except OSError as e:
            logger.error(f"Export to {output} failed: {e}")
            self.error_console.print(f"[red]Error:[/red] Export failed: {escape(str(e))}")
            return

        self.console.print(f"[green]✓[/green] Exported {len(self.store)} subjects to {escape(output)}")
