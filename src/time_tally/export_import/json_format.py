"""JSON export functionality."""

import json
from datetime import datetime
from typing import Any

from time_tally.analysis.reports import aggregate_total
from time_tally.core.models import Subject
from time_tally.export_import.base import Exporter


class JSONExporter(Exporter):
    """Export a tally report to JSON format."""

    def get_file_extension(self) -> str:
        """Get JSON file extension.

        Returns:
            '.json'
        """
        return ".json"

    def export_subjects(self, subjects: list[Subject], **kwargs: Any) -> None:
        """Export subjects to JSON file.

        Args:
            subjects: Subjects in display order
            **kwargs: Additional options
                - indent (int): JSON indentation level (default: 2)
                - include_metadata (bool): Include export metadata (default: True)
        """
        self.ensure_output_path()

        hours, minutes = aggregate_total(subjects)
        export_data: dict[str, Any] = {
            "subjects": [subject.to_dict() for subject in subjects],
            "total": {"hours": hours, "minutes": minutes},
        }

        if kwargs.get("include_metadata", True):
            export_data["metadata"] = {
                "export_date": datetime.now().isoformat(),
                "subject_count": len(subjects),
                "format_version": "1.0",
            }

        indent = kwargs.get("indent", 2)
        with open(self.output_path, "w", encoding="utf-8") as f:
            json.dump(export_data, f, indent=indent, ensure_ascii=False)
