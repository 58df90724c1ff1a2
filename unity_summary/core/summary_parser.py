"""Extraction of the per-file count summary line."""

import re
from typing import Optional, Sequence

from ..models.summary import FileSummary
from .errors import SummaryMissingError

SUMMARY_PATTERN = re.compile(r"(\d+) Tests (\d+) Failures (\d+) Ignored", re.ASCII)


def find_summary(lines: Sequence[str]) -> Optional[FileSummary]:
    """Return counts from the first summary line in `lines`, or None if there is none."""
    for line in lines:
        match = SUMMARY_PATTERN.search(line)
        if match:
            tests, failures, ignored = (int(group) for group in match.groups())
            return FileSummary(tests=tests, failures=failures, ignored=ignored)
    return None


def parse_summary(lines: Sequence[str], source: Optional[str] = None) -> FileSummary:
    """
    Parse the summary line of one result file.

    Raises:
        SummaryMissingError: If no line matches the summary pattern
    """
    summary = find_summary(lines)
    if summary is None:
        raise SummaryMissingError(source if source is not None else repr(list(lines)))
    return summary
