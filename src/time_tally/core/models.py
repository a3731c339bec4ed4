"""Core data models for time tallying."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

MINUTES_PER_HOUR = 60


def accumulate(hours: int, minutes: int, add_hours: int, add_minutes: int) -> tuple[int, int]:
    """Add a duration to a running total, carrying whole hours out of the minutes.

    Args:
        hours: Current hours
        minutes: Current minutes (0-59)
        add_hours: Hours to add
        add_minutes: Minutes to add

    Returns:
        Tuple of (hours, minutes) with minutes in 0-59

    Example:
        >>> accumulate(2, 45, 1, 30)
        (4, 15)
    """
    total_minutes = minutes + add_minutes
    return (
        hours + add_hours + total_minutes // MINUTES_PER_HOUR,
        total_minutes % MINUTES_PER_HOUR,
    )


def format_duration(hours: int, minutes: int) -> str:
    """Format hours and minutes the way the tally displays them."""
    return f"{hours} hr {minutes} min"


@dataclass
class Subject:
    """Subject that time is tallied against.

    Attributes:
        name: Display name
        hours: Accumulated whole hours
        minutes: Accumulated minutes past the hour (0-59)
        id: Unique identifier (UUID)
        created_at: When the subject was added
    """

    name: str
    hours: int = 0
    minutes: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def total_minutes(self) -> int:
        """Accumulated duration in minutes."""
        return self.hours * MINUTES_PER_HOUR + self.minutes

    @property
    def display_duration(self) -> str:
        return format_duration(self.hours, self.minutes)

    def add_time(self, hours: int, minutes: int) -> None:
        """Add hours and minutes to this subject in place.

        Args:
            hours: Hours to add
            minutes: Minutes to add
        """
        self.hours, self.minutes = accumulate(self.hours, self.minutes, hours, minutes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": str(self.id),
            "name": self.name,
            "hours": self.hours,
            "minutes": self.minutes,
            "total_minutes": self.total_minutes,
            "created_at": self.created_at.isoformat(),
        }
