"""Tests for startup_metrics/combine.py"""

import pytest

from startup_metrics.combine import combine_tables, infer_platform, tag_records

HEADER = "Metric|Index|Angular|React|Change"


@pytest.fixture()
def table_files(tmp_path):
    desktop = tmp_path / "results-desktop.txt"
    desktop.write_text(f"{HEADER}\nALT|0|100|150|50%\nCST|0|10\n")
    web = tmp_path / "results-browser.txt"
    web.write_text(f"{HEADER}\nAST|4|200|240|20%\n")
    return str(desktop), str(web)


class TestInferPlatform:
    @pytest.mark.parametrize("filename,expected", [
        ("results-desktop.txt", "desktop"),
        ("out/desktop_run2.txt", "desktop"),
        ("results-web.txt", "web"),
        ("results.txt", "web"),
        ("Desktop.txt", "web"),
    ])
    def test_infer(self, filename, expected):
        assert infer_platform(filename) == expected


class TestTagRecords:
    def test_header_skipped_and_platform_appended(self):
        records = tag_records([HEADER, "ALT|0|100|150|50%"], "web")
        assert records == [["ALT", "0", "100", "150", "50%", "web"]]

    @pytest.mark.parametrize("row", [
        "CST|0|10",
        "CST|0|10|20",
        "CST|0|10|20|100%|extra",
        "",
    ])
    def test_malformed_rows_dropped(self, row):
        assert tag_records([HEADER, row], "desktop") == []


class TestCombineTables:
    def test_union_in_argument_order(self, table_files):
        records = combine_tables(table_files)
        assert records == [
            ["Metric", "Index", "Angular", "React", "Change", "Platform"],
            ["ALT", "0", "100", "150", "50%", "desktop"],
            ["AST", "4", "200", "240", "20%", "web"],
        ]

    def test_no_files_gives_header_only(self):
        assert combine_tables([]) == [["Metric", "Index", "Angular", "React", "Change", "Platform"]]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            combine_tables([str(tmp_path / "nope.txt")])
