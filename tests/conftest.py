"""Pytest configuration and shared fixtures."""

import pytest  # type: ignore[import-not-found]

from time_tally.core.store import SubjectStore


@pytest.fixture
def store() -> SubjectStore:
    """Create an empty subject store."""
    return SubjectStore()
