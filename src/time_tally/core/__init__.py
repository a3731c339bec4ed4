"""Core functionality for time tallying."""

from time_tally.core.models import Subject, accumulate
from time_tally.core.store import StoreEvent, SubjectStore

__all__ = ["Subject", "accumulate", "StoreEvent", "SubjectStore"]
