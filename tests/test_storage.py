"""
Tests for report text persistence.
"""

import pytest
from treereport.backends import format_report
from treereport.examples import build_example_queries, build_example_run
from treereport.reporter import report
from treereport.storage import read_report, write_report
from treereport.table_parser import parse_report


def test_write_creates_directory(tmp_path):
    path = write_report("text", tmp_path / "reports" / "daily", "run1")
    assert path == tmp_path / "reports" / "daily" / "run1.txt"
    assert path.is_file()


def test_custom_suffix(tmp_path):
    path = write_report("text", tmp_path, "run1", suffix=".report")
    assert path.name == "run1.report"


def test_passthrough_is_exact(tmp_path):
    """Newlines and box characters survive unchanged."""
    text = "┌───┐\r\n│ a │\n└───┘\n"
    path = write_report(text, tmp_path, "raw")
    assert read_report(path) == text


def test_report_write_read_parse(tmp_path):
    text = format_report(report(build_example_run(), *build_example_queries()))
    path = write_report(text, tmp_path, "inspection")
    assert format_report(parse_report(read_report(str(path)))) == text


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_report(tmp_path / "nope.txt")
