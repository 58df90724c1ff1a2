"""Per-file and aggregate summary models."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field  # type: ignore


class FileSummary(BaseModel):
    """Counts from the `N Tests N Failures N Ignored` line of one result file."""

    model_config = ConfigDict(frozen=True)

    tests: int = Field(..., ge=0)
    failures: int = Field(..., ge=0)
    ignored: int = Field(..., ge=0)

    @property
    def passed(self) -> int:
        """Passed count implied by the summary line.

        Not validated against the other counts, so an inconsistent summary
        line can make this negative.
        """
        return self.tests - self.failures - self.ignored


class FileResult(BaseModel):
    """Everything one result file contributes to the report."""

    model_config = ConfigDict(frozen=True)

    path: str
    summary: FileSummary
    successes: Tuple[str, ...] = ()
    failures: Tuple[str, ...] = ()
    ignores: Tuple[str, ...] = ()
    malformed_count: int = 0


class AggregateReport(BaseModel):
    """Running totals and display lines across all result files."""

    model_config = ConfigDict(frozen=True)

    passed: Tuple[str, ...] = ()
    ignored: Tuple[str, ...] = ()
    failed: Tuple[str, ...] = ()
    total_tests: int = 0
    total_failures: int = 0
    total_ignored: int = 0
    total_passed: int = 0
    files: Tuple[str, ...] = ()

    def merge(self, result: FileResult) -> "AggregateReport":
        """Return a new aggregate with `result` appended after the files already merged."""
        summary = result.summary
        return AggregateReport(
            passed=self.passed + result.successes,
            ignored=self.ignored + result.ignores,
            failed=self.failed + result.failures,
            total_tests=self.total_tests + summary.tests,
            total_failures=self.total_failures + summary.failures,
            total_ignored=self.total_ignored + summary.ignored,
            total_passed=self.total_passed + summary.passed,
            files=self.files + (result.path,),
        )

    def __len__(self) -> int:
        """Return number of merged result files."""
        return len(self.files)
