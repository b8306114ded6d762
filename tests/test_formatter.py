"""Tests for startup_metrics/formatter.py and startup_metrics/reader.py"""

from datetime import datetime

import pytest

from startup_metrics.formatter import (
    COMBINED_HEADER,
    COMPARISON_HEADER,
    format_counts,
    format_record,
    format_scenario,
    format_table,
)
from startup_metrics.models import ScenarioStop
from startup_metrics.reader import get_lines


class TestFormatter:
    def test_headers(self):
        assert format_record(COMPARISON_HEADER) == "Metric|Index|Angular|React|Change"
        assert format_record(COMBINED_HEADER) == "Metric|Index|Angular|React|Change|Platform"

    def test_pipes_not_escaped(self):
        assert format_record(["a|b", "c"]) == "a|b|c"

    def test_table(self):
        assert format_table([["a", "b"], ["1", "2"]]) == "a|b\n1|2"

    def test_scenario(self):
        stop = ScenarioStop(datetime(2023, 1, 1), "teams_grid_load", 233)
        assert format_scenario(stop) == "teams_grid_load: 233ms"

    def test_counts(self):
        assert format_counts({"a": 3, "b": 1}) == "a: 3\nb: 1"


class TestGetLines:
    def test_lines_trimmed(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_text("  first \r\nsecond\n\n")
        assert get_lines(str(path)) == ["first", "second", "", ""]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_lines(str(tmp_path / "missing.log"))
