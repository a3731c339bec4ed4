"""Markdown export functionality."""

import calendar
from datetime import datetime
from typing import Any

from time_tally.analysis.reports import aggregate_total
from time_tally.core.models import Subject, format_duration
from time_tally.export_import.base import Exporter


class MarkdownExporter(Exporter):
    """Export a tally report to Markdown format."""

    def get_file_extension(self) -> str:
        """Get Markdown file extension.

        Returns:
            '.md'
        """
        return ".md"

    def export_subjects(self, subjects: list[Subject], **kwargs: Any) -> None:
        """Export subjects to Markdown file.

        Args:
            subjects: Subjects in display order
            **kwargs: Additional options
                - title (str): Document title (default: "Time Report")
                - include_metadata (bool): Include generation date (default: True)
        """
        self.ensure_output_path()

        title = kwargs.get("title", "Time Report")
        include_metadata = kwargs.get("include_metadata", True)

        markdown_content = self._generate_markdown(subjects, title, include_metadata)

        with open(self.output_path, "w", encoding="utf-8") as f:
            f.write(markdown_content)

    def _generate_markdown(
        self,
        subjects: list[Subject],
        title: str,
        include_metadata: bool,
    ) -> str:
        """Generate markdown content.

        Args:
            subjects: Subjects in display order
            title: Document title
            include_metadata: Whether to include the generation date

        Returns:
            Markdown formatted string
        """
        now = datetime.now()
        lines = [f"# {title}\n"]

        if include_metadata:
            lines.append(f"**Generated:** {now.strftime('%Y-%m-%d %H:%M:%S')}\n")

        lines.append(f"**Subjects:** {len(subjects)}\n")

        lines.append("## Subjects\n")
        if subjects:
            lines.append("| Subject | Time |")
            lines.append("|---------|------|")
            for subject in subjects:
                name = subject.name.replace("|", "\\|")
                lines.append(f"| {name} | {subject.display_duration} |")
            lines.append("")
        else:
            lines.append("*No subjects*\n")

        hours, minutes = aggregate_total(subjects)
        lines.append("## Monthly Report\n")
        lines.append(
            f"**Total Time Spent in {calendar.month_name[now.month]}:** "
            f"{format_duration(hours, minutes)}\n"
        )

        return "\n".join(lines)
