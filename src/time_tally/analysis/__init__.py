"""Reporting over tallied subjects."""

from time_tally.analysis.reports import ReportGenerator, aggregate_total

__all__ = ["ReportGenerator", "aggregate_total"]
