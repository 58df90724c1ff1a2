"""Errors raised while summarizing Unity result files."""


class UnitySummaryError(ValueError):
    """Base class for fatal summarization errors."""


class EmptyResultFileError(UnitySummaryError):
    """A result file has no lines at all."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Empty test result file: {path}")


class SummaryMissingError(UnitySummaryError):
    """No `N Tests N Failures N Ignored` line was found in a result file."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Couldn't parse test results: {source}")


class NoResultFilesError(UnitySummaryError):
    """Discovery found nothing to summarize."""

    def __init__(self, search: str) -> None:
        self.search = search
        super().__init__(f"No *.testpass, *.testfail, or *.testresults files found in '{search}'")
