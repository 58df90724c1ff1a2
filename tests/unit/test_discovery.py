"""Unit tests for result file discovery."""

import pytest

from unity_summary.core.discovery import find_result_files
from unity_summary.core.errors import NoResultFilesError


def test_finds_result_files_recursively(tmp_path):
    (tmp_path / "nested").mkdir()
    (tmp_path / "b.testfail").write_text("x", encoding="utf-8")
    (tmp_path / "nested" / "a.testpass").write_text("x", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")

    results = find_result_files(tmp_path)

    assert results == sorted([tmp_path / "b.testfail", tmp_path / "nested" / "a.testpass"])


def test_custom_pattern(tmp_path):
    (tmp_path / "a.testpass").write_text("x", encoding="utf-8")
    (tmp_path / "b.testfail").write_text("x", encoding="utf-8")

    assert find_result_files(tmp_path, "*.testfail") == [tmp_path / "b.testfail"]


def test_directories_are_skipped(tmp_path):
    (tmp_path / "dir.testresults").mkdir()

    with pytest.raises(NoResultFilesError):
        find_result_files(tmp_path)


def test_no_files_raises(tmp_path):
    with pytest.raises(NoResultFilesError, match=r"No \*\.testpass, \*\.testfail, or \*\.testresults files found"):
        find_result_files(tmp_path)
