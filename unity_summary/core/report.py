"""Plain-text rendering of the aggregate report."""

from typing import List, Sequence

from ..models.summary import AggregateReport

SEPARATOR = "-" * 26

PASSED_TITLE = "UNITY PASSED TEST SUMMARY"
IGNORED_TITLE = "UNITY IGNORED TEST SUMMARY"
FAILED_TITLE = "UNITY FAILED TEST SUMMARY"
OVERALL_TITLE = "OVERALL UNITY TEST SUMMARY"


def format_report(aggregate: AggregateReport) -> str:
    """
    Render the aggregate as the Unity summary text.

    Structure: passed > ignored > failed > overall. The first three sections
    appear only when their total is positive; overall is always present.

    Args:
        aggregate: Totals and display lines from every result file

    Returns:
        Report text, ending with a blank line
    """
    report: List[str] = ["\n"]

    if aggregate.total_passed > 0:
        report.append(_format_section(PASSED_TITLE, aggregate.passed))

    # Later sections always open with a blank line, even when nothing precedes them
    if aggregate.total_ignored > 0:
        report.append("\n" + _format_section(IGNORED_TITLE, aggregate.ignored))

    if aggregate.total_failures > 0:
        report.append("\n" + _format_section(FAILED_TITLE, aggregate.failed))

    report.append("\n" + _format_section(OVERALL_TITLE, [format_totals(aggregate)]))
    report.append("\n")

    return "".join(report)


def format_totals(aggregate: AggregateReport) -> str:
    """Format the single line of the overall section."""
    return (
        f"{aggregate.total_tests} TOTAL TESTS "
        f"{aggregate.total_failures} TOTAL FAILURES "
        f"{aggregate.total_ignored} IGNORED"
    )


def _format_section(title: str, body: Sequence[str]) -> str:
    """Format one titled section."""
    lines = [SEPARATOR, title, SEPARATOR, "\n".join(body)]
    return "\n".join(lines) + "\n"


def save_report(aggregate: AggregateReport, output_path: str) -> None:
    """
    Save the rendered report to a text file.

    Args:
        aggregate: Aggregate to render
        output_path: Path to save the report
    """
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(format_report(aggregate))
