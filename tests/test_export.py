"""Tests for JSON and Markdown report export."""

import calendar
import json
from datetime import datetime
from pathlib import Path

import pytest  # type: ignore[import-not-found]

from time_tally.core.models import Subject
from time_tally.export_import import EXPORTERS, JSONExporter, MarkdownExporter


@pytest.fixture
def subjects() -> list[Subject]:
    """Two subjects totalling 2 hr 10 min."""
    return [
        Subject(name="Algebra", hours=1, minutes=50, created_at=datetime(2025, 1, 1, 10, 0)),
        Subject(name="Biology", hours=0, minutes=20, created_at=datetime(2025, 1, 2, 14, 0)),
    ]


class TestJSONExporter:
    """Test JSONExporter."""

    def test_get_file_extension(self) -> None:
        """Test file extension is .json."""
        assert JSONExporter(Path("test.json")).get_file_extension() == ".json"

    def test_export_subjects(self, tmp_path: Path, subjects: list[Subject]) -> None:
        """Test exporting subjects to JSON."""
        output_file = tmp_path / "export.json"

        JSONExporter(output_file).export_subjects(subjects)

        with open(output_file, encoding="utf-8") as f:
            data = json.load(f)

        assert [s["name"] for s in data["subjects"]] == ["Algebra", "Biology"]
        assert data["subjects"][0]["hours"] == 1
        assert data["subjects"][0]["minutes"] == 50
        assert data["subjects"][0]["id"] == str(subjects[0].id)
        assert data["total"] == {"hours": 2, "minutes": 10}
        assert data["metadata"]["subject_count"] == 2
        assert data["metadata"]["format_version"] == "1.0"

    def test_export_without_metadata(self, tmp_path: Path, subjects: list[Subject]) -> None:
        """Test excluding metadata."""
        output_file = tmp_path / "export.json"

        JSONExporter(output_file).export_subjects(subjects, include_metadata=False)

        with open(output_file, encoding="utf-8") as f:
            data = json.load(f)

        assert "metadata" not in data
        assert len(data["subjects"]) == 2

    def test_export_empty(self, tmp_path: Path) -> None:
        """Test exporting with no subjects."""
        output_file = tmp_path / "empty.json"

        JSONExporter(output_file).export_subjects([])

        with open(output_file, encoding="utf-8") as f:
            data = json.load(f)

        assert data["subjects"] == []
        assert data["total"] == {"hours": 0, "minutes": 0}

    def test_creates_parent_directory(self, tmp_path: Path, subjects: list[Subject]) -> None:
        """Test that missing parent directories are created."""
        output_file = tmp_path / "nested" / "dir" / "export.json"

        JSONExporter(output_file).export_subjects(subjects)

        assert output_file.exists()

    def test_unicode_names(self, tmp_path: Path) -> None:
        """Test that non-ASCII names are written as-is."""
        output_file = tmp_path / "export.json"

        JSONExporter(output_file).export_subjects([Subject(name="Mathématiques", minutes=5)])

        assert "Mathématiques" in output_file.read_text(encoding="utf-8")


class TestMarkdownExporter:
    """Test MarkdownExporter."""

    def test_get_file_extension(self) -> None:
        """Test file extension is .md."""
        assert MarkdownExporter(Path("test.md")).get_file_extension() == ".md"

    def test_export_subjects(self, tmp_path: Path, subjects: list[Subject]) -> None:
        """Test exporting subjects to Markdown."""
        output_file = tmp_path / "report.md"

        MarkdownExporter(output_file).export_subjects(subjects)
        content = output_file.read_text(encoding="utf-8")

        assert content.startswith("# Time Report")
        assert "| Algebra | 1 hr 50 min |" in content
        assert "| Biology | 0 hr 20 min |" in content
        assert content.index("Algebra") < content.index("Biology")
        month = calendar.month_name[datetime.now().month]
        assert f"**Total Time Spent in {month}:** 2 hr 10 min" in content
        assert "**Generated:**" in content

    def test_custom_title_without_metadata(self, tmp_path: Path, subjects: list[Subject]) -> None:
        """Test title option and metadata switch."""
        output_file = tmp_path / "report.md"

        MarkdownExporter(output_file).export_subjects(
            subjects, title="Study Log", include_metadata=False
        )
        content = output_file.read_text(encoding="utf-8")

        assert content.startswith("# Study Log")
        assert "**Generated:**" not in content

    def test_export_empty(self, tmp_path: Path) -> None:
        """Test exporting with no subjects."""
        output_file = tmp_path / "report.md"

        MarkdownExporter(output_file).export_subjects([])
        content = output_file.read_text(encoding="utf-8")

        assert "*No subjects*" in content
        assert "0 hr 0 min" in content

    def test_pipe_in_name_is_escaped(self, tmp_path: Path) -> None:
        """Test that table cells stay intact."""
        output_file = tmp_path / "report.md"

        MarkdownExporter(output_file).export_subjects([Subject(name="A|B", hours=1)])

        assert "| A\\|B | 1 hr 0 min |" in output_file.read_text(encoding="utf-8")


def test_exporter_registry() -> None:
    """Test format names map to exporters."""
    assert EXPORTERS["json"] is JSONExporter
    assert EXPORTERS["markdown"] is MarkdownExporter
