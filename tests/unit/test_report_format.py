"""Unit tests for the text report formatter."""

import pytest

from unity_summary.core.report import format_report, format_totals, save_report
from unity_summary.models.summary import AggregateReport

SEP = "--------------------------"


@pytest.fixture
def mixed_aggregate():
    """Aggregate with passed, ignored and failed tests."""
    return AggregateReport(
        passed=("a\\b.c:1:t1:PASS", "a\\b.c:2:t2:PASS"),
        ignored=("a\\b.c:3:t3:IGNORE",),
        failed=("a\\b.c:4:t4:FAIL:boom",),
        total_tests=4,
        total_failures=1,
        total_ignored=1,
        total_passed=2,
    )


def test_full_report_layout(mixed_aggregate):
    """Test the exact layout when every section is present."""
    expected = (
        "\n"
        f"{SEP}\nUNITY PASSED TEST SUMMARY\n{SEP}\n"
        "a\\b.c:1:t1:PASS\na\\b.c:2:t2:PASS\n"
        "\n"
        f"{SEP}\nUNITY IGNORED TEST SUMMARY\n{SEP}\n"
        "a\\b.c:3:t3:IGNORE\n"
        "\n"
        f"{SEP}\nUNITY FAILED TEST SUMMARY\n{SEP}\n"
        "a\\b.c:4:t4:FAIL:boom\n"
        "\n"
        f"{SEP}\nOVERALL UNITY TEST SUMMARY\n{SEP}\n"
        "4 TOTAL TESTS 1 TOTAL FAILURES 1 IGNORED\n"
        "\n"
    )

    assert format_report(mixed_aggregate) == expected


def test_section_order(mixed_aggregate):
    """Test sections appear as passed, ignored, failed, overall."""
    report = format_report(mixed_aggregate)

    positions = [
        report.index("UNITY PASSED TEST SUMMARY"),
        report.index("UNITY IGNORED TEST SUMMARY"),
        report.index("UNITY FAILED TEST SUMMARY"),
        report.index("OVERALL UNITY TEST SUMMARY"),
    ]
    assert positions == sorted(positions)


def test_ignored_section_omitted():
    """Test failures without ignored tests leave no ignored placeholder."""
    aggregate = AggregateReport(
        passed=("x:1:t:PASS",),
        failed=("x:2:u:FAIL",),
        total_tests=2,
        total_failures=1,
        total_passed=1,
    )

    report = format_report(aggregate)

    assert "UNITY PASSED TEST SUMMARY" in report
    assert "UNITY IGNORED TEST SUMMARY" not in report
    assert "UNITY FAILED TEST SUMMARY" in report
    assert report.index("UNITY FAILED TEST SUMMARY") < report.index("OVERALL UNITY TEST SUMMARY")
    assert report.endswith("2 TOTAL TESTS 1 TOTAL FAILURES 0 IGNORED\n\n")


def test_overall_only():
    """Test an aggregate with nothing to list still has the overall section."""
    report = format_report(AggregateReport())

    assert report == (
        "\n\n"
        f"{SEP}\nOVERALL UNITY TEST SUMMARY\n{SEP}\n"
        "0 TOTAL TESTS 0 TOTAL FAILURES 0 IGNORED\n\n"
    )


def test_sections_follow_counts_not_lines():
    """Test the passed section follows the summary count even without PASS lines."""
    aggregate = AggregateReport(total_tests=3, total_passed=3)

    report = format_report(aggregate)

    assert f"{SEP}\nUNITY PASSED TEST SUMMARY\n{SEP}\n\n" in report


def test_negative_passed_total_hides_section():
    """Test a negative passed total from inconsistent summaries shows no passed section."""
    aggregate = AggregateReport(
        passed=("x:1:t:PASS",),
        total_tests=1,
        total_failures=2,
        total_passed=-1,
        failed=("x:2:u:FAIL",),
    )

    report = format_report(aggregate)

    assert "UNITY PASSED TEST SUMMARY" not in report


def test_format_totals():
    """Test the overall line."""
    aggregate = AggregateReport(total_tests=12, total_failures=3, total_ignored=2, total_passed=7)

    assert format_totals(aggregate) == "12 TOTAL TESTS 3 TOTAL FAILURES 2 IGNORED"


def test_save_report(tmp_path, mixed_aggregate):
    """Test saving the report to a file."""
    output = tmp_path / "summary.txt"

    save_report(mixed_aggregate, str(output))

    assert output.read_text(encoding="utf-8") == format_report(mixed_aggregate)
