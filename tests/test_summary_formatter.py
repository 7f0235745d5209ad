"""
Tests for the generator's console formatting helpers.
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.summary_formatter import (
    SEPARATOR,
    format_error,
    format_generation_summary,
    format_progress,
)


def test_summary_lists_count_time_and_path():
    summary = format_generation_summary(50, 0.0123, Path("/tmp/data/db.json"))
    lines = summary.splitlines()

    assert lines[0] == ""
    assert lines[1] == SEPARATOR
    assert "Test recipe database generated!" in lines
    assert "Generated: 50 recipes" in lines
    assert "Time: 0.012s" in lines
    assert "Saved to: /tmp/data/db.json" in lines
    assert lines[-1] == SEPARATOR


def test_progress_line():
    assert format_progress(10, 50) == "Generated 10/50 test recipes..."


def test_error_is_framed_by_separators():
    result = format_error("disk full")

    assert "Error: disk full" in result
    assert result.count(SEPARATOR) == 2
    assert len(SEPARATOR) == 60
