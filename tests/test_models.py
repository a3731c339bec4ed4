"""Tests for core data models."""

from datetime import datetime
from uuid import UUID

import pytest  # type: ignore[import-not-found]

from time_tally.core.models import Subject, accumulate, format_duration


class TestAccumulate:
    """Test the carry-normalizing duration merge."""

    def test_carry_into_hours(self) -> None:
        """Test that minutes past 59 carry into hours."""
        assert accumulate(2, 45, 1, 30) == (4, 15)

    def test_no_carry(self) -> None:
        """Test adding without reaching the next hour."""
        assert accumulate(1, 10, 0, 20) == (1, 30)

    def test_exact_hour(self) -> None:
        """Test minutes summing to exactly 60."""
        assert accumulate(0, 30, 0, 30) == (1, 0)

    def test_zero_increment_is_identity(self) -> None:
        """Test that adding nothing changes nothing."""
        assert accumulate(7, 59, 0, 0) == (7, 59)
        assert accumulate(0, 0, 0, 0) == (0, 0)

    def test_largest_picker_values(self) -> None:
        """Test the largest increment the picker offers."""
        assert accumulate(0, 59, 23, 59) == (24, 58)

    @pytest.mark.parametrize("hours", [0, 3, 100])
    @pytest.mark.parametrize("minutes", [0, 1, 30, 59])
    @pytest.mark.parametrize("add_hours", [0, 1, 23])
    @pytest.mark.parametrize("add_minutes", [0, 15, 59])
    def test_matches_div_mod_rule(
        self, hours: int, minutes: int, add_hours: int, add_minutes: int
    ) -> None:
        """Test the result against the div/mod definition."""
        new_hours, new_minutes = accumulate(hours, minutes, add_hours, add_minutes)

        assert new_minutes == (minutes + add_minutes) % 60
        assert new_hours == hours + add_hours + (minutes + add_minutes) // 60
        assert 0 <= new_minutes <= 59


class TestSubject:
    """Test Subject model."""

    def test_new_subject_defaults(self) -> None:
        """Test a freshly created subject."""
        before = datetime.now()
        subject = Subject(name="Math")

        assert subject.name == "Math"
        assert subject.hours == 0
        assert subject.minutes == 0
        assert isinstance(subject.id, UUID)
        assert before <= subject.created_at <= datetime.now()

    def test_ids_are_unique(self) -> None:
        """Test that each subject gets its own id."""
        assert Subject(name="A").id != Subject(name="A").id

    def test_add_time_in_place(self) -> None:
        """Test adding time updates the subject."""
        subject = Subject(name="History", hours=2, minutes=45)

        subject.add_time(1, 30)

        assert subject.hours == 4
        assert subject.minutes == 15

    def test_total_minutes(self) -> None:
        """Test total minutes property."""
        assert Subject(name="A", hours=1, minutes=50).total_minutes == 110

    def test_display_duration(self) -> None:
        """Test display format."""
        assert Subject(name="A", hours=2, minutes=10).display_duration == "2 hr 10 min"
        assert format_duration(0, 0) == "0 hr 0 min"

    def test_to_dict(self) -> None:
        """Test conversion to dictionary."""
        subject = Subject(
            name="Physics",
            hours=3,
            minutes=5,
            created_at=datetime(2025, 11, 16, 9, 0, 0),
        )

        data = subject.to_dict()

        assert data["id"] == str(subject.id)
        assert data["name"] == "Physics"
        assert data["hours"] == 3
        assert data["minutes"] == 5
        assert data["total_minutes"] == 185
        assert data["created_at"] == "2025-11-16T09:00:00"
