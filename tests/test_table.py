"""Tests for the RawTable model."""

import pandas as pd
import pytest

from level1_ingestion.table import DatasetLoadError, RawTable, TableStructureError


def test_basic_properties(sample_table):
    assert sample_table.columns == ("foo", "bar", "baz", "qux")
    assert sample_table.row_count == 3
    assert sample_table.column_count == 4


def test_column_by_name_and_index(sample_table):
    assert sample_table.column("bar") == ["2", "5", ""]
    assert sample_table.column(3) == ["green", "red", "blue"]


def test_unknown_column(sample_table):
    with pytest.raises(KeyError):
        sample_table.column("nope")
    with pytest.raises(IndexError):
        sample_table.column(4)


def test_duplicate_columns_rejected():
    with pytest.raises(TableStructureError, match="Duplicate column names.*'a'"):
        RawTable(["a", "b", "a"], [])


def test_empty_header_rejected():
    with pytest.raises(TableStructureError, match="no columns"):
        RawTable([], [])


def test_short_row_rejected():
    with pytest.raises(TableStructureError, match="Row 2 has 1 cells, expected 2"):
        RawTable(["a", "b"], [["1", "2"], ["3"]])


def test_long_row_rejected_with_line_number():
    with pytest.raises(TableStructureError, match=r"Row 1 \(line 2\) has 3 cells"):
        RawTable(["a", "b"], [["1", "2", "3"]], line_numbers=[2])


def test_structure_error_is_a_load_error():
    assert issubclass(TableStructureError, DatasetLoadError)


def test_rows_are_immutable(sample_table):
    assert isinstance(sample_table.rows, tuple)
    assert all(isinstance(row, tuple) for row in sample_table.rows)


def test_from_dataframe():
    df = pd.DataFrame({"a": [1, 2], "b": [1.5, None], "c": ["x", None]})
    table = RawTable.from_dataframe(df)

    assert table.columns == ("a", "b", "c")
    assert table.column("a") == ["1", "2"]
    assert table.column("b") == ["1.5", ""]
    assert table.column("c") == ["x", ""]


def test_from_dataframe_stringifies_labels():
    df = pd.DataFrame([[1, 2]], columns=[0, 1])
    assert RawTable.from_dataframe(df).columns == ("0", "1")


def test_from_dataframe_integer_column_with_missing_value():
    # pandas stores this column as float64
    table = RawTable.from_dataframe(pd.DataFrame({"a": [1, None, 3]}))
    assert table.column("a") == ["1", "", "3"]


def test_from_dataframe_keeps_fractional_floats():
    table = RawTable.from_dataframe(pd.DataFrame({"a": [1.0, 2.5, float("inf")]}))
    assert table.column("a") == ["1", "2.5", "inf"]


def test_from_dataframe_without_rows():
    table = RawTable.from_dataframe(pd.DataFrame({"a": [], "b": []}))
    assert table.columns == ("a", "b")
    assert table.row_count == 0
