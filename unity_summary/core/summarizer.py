"""Aggregation of Unity result files into a single report."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..models.summary import AggregateReport, FileResult
from .classifier import split_outcomes
from .errors import EmptyResultFileError
from .report import format_report
from .summary_parser import parse_summary

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_result_lines(path: PathLike) -> List[str]:
    """Read every line of a result file, without line terminators.

    Only LF ends a line; form feeds and other Unicode line breaks stay inside it.
    """
    with open(path, "r", encoding="utf-8", errors="replace", newline="\n") as f:
        return [_chomp(line) for line in f]


def _chomp(line: str) -> str:
    """Strip one trailing CRLF, LF or CR."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def summarize_lines(path: str, lines: Sequence[str], root: Optional[str] = None) -> FileResult:
    """
    Classify the lines of one result file and extract its counts.

    Args:
        path: Result file the lines came from
        lines: Lines of the file, in order
        root: Optional prefix for displayed outcome lines

    Returns:
        FileResult for the file

    Raises:
        EmptyResultFileError: If `lines` is empty
        SummaryMissingError: If no summary line is present
    """
    if not lines:
        raise EmptyResultFileError(path)

    successes, failures, ignores, malformed = split_outcomes(lines, root=root, result_file=path)
    summary = parse_summary(lines, source=path)

    if malformed:
        logger.debug("Dropped %d non-outcome lines from %s", malformed, path)

    return FileResult(
        path=path,
        summary=summary,
        successes=tuple(successes),
        failures=tuple(failures),
        ignores=tuple(ignores),
        malformed_count=malformed,
    )


class UnitySummarizer:
    """Summarize a set of Unity result files."""

    def __init__(self, targets: Optional[Sequence[PathLike]] = None, root: Optional[str] = None):
        """
        Initialize summarizer.

        Args:
            targets: Result files, in the order their lines should be reported
            root: Optional prefix for displayed outcome lines
        """
        self.targets: List[PathLike] = list(targets or [])
        self.root = root
        self.aggregate = AggregateReport()
        self.report = ""

    @property
    def total_tests(self) -> int:
        return self.aggregate.total_tests

    @property
    def passed(self) -> int:
        return self.aggregate.total_passed

    @property
    def failures(self) -> int:
        return self.aggregate.total_failures

    @property
    def ignored(self) -> int:
        return self.aggregate.total_ignored

    def run(self) -> str:
        """
        Process every target and render the report.

        The first empty file or file without a summary line aborts the run;
        no report is produced in that case.

        Returns:
            Report text
        """
        aggregate = AggregateReport()

        for target in self.targets:
            path = str(target).replace("\\", "/")
            result = self.summarize_file(path)
            aggregate = aggregate.merge(result)

        self.aggregate = aggregate
        self.report = format_report(aggregate)
        return self.report

    def summarize_file(self, path: str) -> FileResult:
        """Read and summarize one result file."""
        logger.debug("Reading results from %s", path)
        lines = read_result_lines(path)
        result = summarize_lines(path, lines, root=self.root)
        logger.debug(
            "%s: %d tests, %d failures, %d ignored",
            path,
            result.summary.tests,
            result.summary.failures,
            result.summary.ignored,
        )
        return result
