"""
Unit tests for shared cell formatting.
"""

from json_table_converter.formatting import format_cell_value, view_cells
from json_table_converter.pivot import pivot_table
from json_table_converter.records import MISSING


class TestFormatCellValue:
    def test_null_and_missing(self):
        assert format_cell_value(None) == "null"
        assert format_cell_value(MISSING) == ""

    def test_booleans(self):
        assert format_cell_value(True) == "true"
        assert format_cell_value(False) == "false"

    def test_numbers_are_locale_independent(self):
        assert format_cell_value(30) == "30"
        assert format_cell_value(1234567) == "1234567"
        assert format_cell_value(1234567.25) == "1234567.25"
        assert format_cell_value(-0.5) == "-0.5"
        assert format_cell_value(1e21) == "1e+21"

    def test_floats_render_like_json_numbers(self):
        assert format_cell_value(10.0) == "10"
        assert format_cell_value(1e2) == "100"
        assert format_cell_value(-3.0) == "-3"
        assert format_cell_value(0.0) == "0"
        assert format_cell_value(-0.0) == "0"
        assert format_cell_value(0.000001) == "0.000001"
        assert format_cell_value(1.5e-7) == "1.5e-7"
        assert format_cell_value(1e20) == "100000000000000000000"
        assert format_cell_value(1.23e22) == "1.23e+22"
        assert format_cell_value(0.1) == "0.1"

    def test_non_finite_floats(self):
        assert format_cell_value(float("inf")) == "Infinity"
        assert format_cell_value(float("-inf")) == "-Infinity"

    def test_strings_pass_through(self):
        assert format_cell_value("") == ""
        assert format_cell_value("héllo") == "héllo"

    def test_container_is_compact_json(self):
        assert format_cell_value({"a": [1, None]}) == '{"a":[1,null]}'
        assert format_cell_value(["é"]) == '["é"]'

    def test_empty_container_markers(self):
        assert format_cell_value("[]") == "[]"
        assert format_cell_value("{}") == "{}"


class TestViewCells:
    def test_every_row_gets_every_column(self, ragged_table):
        assert view_cells(ragged_table) == [
            ["1", "", ""],
            ["3", "2", ""],
            ["", "", "null"],
        ]

    def test_pivoted_view(self, people_table):
        assert view_cells(pivot_table(people_table)) == [
            ["name", "Alice", "Bob"],
            ["age", "30", "25"],
        ]
