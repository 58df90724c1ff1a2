"""
unity-summary - Aggregate Unity C test result files into a text report.

This package reads the `.testpass` / `.testfail` result files written by
Unity test runners and prints passed, ignored and failed tests together with
overall totals.
"""

from .core.summarizer import UnitySummarizer
from .core.report import format_report
from .models.outcome import Outcome, OutcomeStatus, Malformed
from .models.summary import AggregateReport, FileResult, FileSummary

__version__ = "1.0.0"

__all__ = [
    "UnitySummarizer",
    "format_report",
    "Outcome",
    "OutcomeStatus",
    "Malformed",
    "AggregateReport",
    "FileResult",
    "FileSummary",
]
