"""Data models for unity-summary."""

from .outcome import ClassifiedLine, Malformed, Outcome, OutcomeStatus
from .summary import AggregateReport, FileResult, FileSummary

__all__ = [
    "ClassifiedLine",
    "Malformed",
    "Outcome",
    "OutcomeStatus",
    "AggregateReport",
    "FileResult",
    "FileSummary",
]
