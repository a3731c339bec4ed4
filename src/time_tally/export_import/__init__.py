"""Report export for TimeTally."""

from time_tally.export_import.base import Exporter
from time_tally.export_import.json_format import JSONExporter
from time_tally.export_import.markdown_format import MarkdownExporter

EXPORTERS: dict[str, type[Exporter]] = {
    "json": JSONExporter,
    "markdown": MarkdownExporter,
}

__all__ = ["Exporter", "JSONExporter", "MarkdownExporter", "EXPORTERS"]
