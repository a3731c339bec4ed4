"""TimeTally - tally time spent per subject."""

__version__ = "0.1.0"
