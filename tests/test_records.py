"""
Unit tests for the table model builder.
"""

from json_table_converter.records import MISSING, build_table, collect_columns, get_cell


class TestCollectColumns:
    """Column ordering is first-seen insertion order, never sorted."""

    def test_first_seen_order(self):
        records = [{"b": 1, "a": 2}, {"c": 3, "a": 4}, {"d": 5, "b": 6}]
        assert collect_columns(records) == ["b", "a", "c", "d"]

    def test_not_alphabetical(self):
        assert collect_columns([{"zeta": 1, "alpha": 2}]) == ["zeta", "alpha"]

    def test_no_duplicates(self):
        columns = collect_columns([{"a": 1}, {"a": 2}, {"a": 3, "b": 4}])
        assert columns == ["a", "b"]

    def test_empty(self):
        assert collect_columns([]) == []


class TestBuildTable:
    def test_end_to_end_columns(self):
        table = build_table([{"a": 1, "b.c": 2}])
        assert table.columns == ["a", "b.c"]
        assert table.rows == [{"a": 1, "b.c": 2}]
        assert table.row_count == 1

    def test_ragged_rows(self, ragged_table):
        assert ragged_table.columns == ["a", "b", "c"]
        assert ragged_table.row_count == 3

    def test_empty(self, empty_table):
        assert empty_table.columns == []
        assert empty_table.rows == []


class TestGetCell:
    def test_present_value(self):
        assert get_cell({"a": 0}, "a") == 0

    def test_null_is_not_missing(self):
        assert get_cell({"a": None}, "a") is None

    def test_missing(self):
        assert get_cell({"a": 1}, "b") is MISSING
        assert not MISSING
