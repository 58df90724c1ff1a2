"""Core components for unity-summary."""

from .classifier import classify_line, format_display_line, split_outcomes
from .config import SummaryConfig
from .discovery import find_result_files
from .errors import EmptyResultFileError, NoResultFilesError, SummaryMissingError, UnitySummaryError
from .report import format_report, save_report
from .summarizer import UnitySummarizer, summarize_lines
from .summary_parser import find_summary, parse_summary

__all__ = [
    "classify_line",
    "format_display_line",
    "split_outcomes",
    "SummaryConfig",
    "find_result_files",
    "EmptyResultFileError",
    "NoResultFilesError",
    "SummaryMissingError",
    "UnitySummaryError",
    "format_report",
    "save_report",
    "UnitySummarizer",
    "summarize_lines",
    "find_summary",
    "parse_summary",
]
