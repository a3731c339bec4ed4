"""Command-line interface for TimeTally."""
