"""In-memory subject store with change notification."""

import logging
from enum import Enum
from typing import Callable, Iterator, Optional
from uuid import UUID

from time_tally.core.models import Subject

logger = logging.getLogger(__name__)


class StoreEvent(str, Enum):
    """Kinds of change a store reports to its observers."""

    SUBJECT_ADDED = "subject_added"
    TIME_LOGGED = "time_logged"


Observer = Callable[[StoreEvent, Subject], None]


class SubjectStore:
    """Owns the ordered subject collection for one session.

    Subjects are only ever appended; mutation goes through add_subject()
    and log_time(), and every observer is called after each change.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._subjects: list[Subject] = []
        self._observers: list[Observer] = []

    def __len__(self) -> int:
        return len(self._subjects)

    def __iter__(self) -> Iterator[Subject]:
        return iter(self.subjects)

    @property
    def subjects(self) -> tuple[Subject, ...]:
        """Snapshot of the subjects in insertion order."""
        return tuple(self._subjects)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer for store changes.

        Args:
            observer: Called with (event, subject) after each mutation

        Returns:
            Function that removes the observer again
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, event: StoreEvent, subject: Subject) -> None:
        for observer in list(self._observers):
            observer(event, subject)

    def add_subject(self, name: str) -> Optional[Subject]:
        """Add a new subject with zero time.

        Blank names are ignored without raising.

        Args:
            name: Subject name

        Returns:
            Created subject, or None if the name was blank
        """
        if not name.strip():
            logger.debug("Ignoring subject with blank name")
            return None

        subject = Subject(name=name)
        self._subjects.append(subject)
        logger.debug(f"Added subject: {subject.name} ({subject.id})")

        self._notify(StoreEvent.SUBJECT_ADDED, subject)
        return subject

    def get_subject(self, subject_id: UUID) -> Optional[Subject]:
        """Get subject by ID.

        Args:
            subject_id: Subject ID

        Returns:
            Subject or None if not found
        """
        for subject in self._subjects:
            if subject.id == subject_id:
                return subject
        return None

    def log_time(self, subject_id: UUID, hours: int, minutes: int) -> Subject:
        """Add time spent to a subject.

        Args:
            subject_id: ID of the subject
            hours: Hours spent (0-23, as offered by the picker)
            minutes: Minutes spent (0-59, as offered by the picker)

        Returns:
            Updated subject

        Raises:
            ValueError: If subject not found
        """
        subject = self.get_subject(subject_id)
        if subject is None:
            raise ValueError(f"Subject not found: {subject_id}")

        subject.add_time(hours, minutes)
        logger.info(f"Updated: {subject.name} - {subject.hours} hr {subject.minutes} min")

        self._notify(StoreEvent.TIME_LOGGED, subject)
        return subject
