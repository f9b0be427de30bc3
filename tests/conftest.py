"""Shared fixtures for csv2struct tests."""

import pytest

from level1_ingestion.table import RawTable

SAMPLE_CSV = "foo,bar,baz,qux\n1,2,3,green\n4.4,5,6,red\n7.2,,8,blue\n"

SAMPLE_RUST = """\
#[derive(Debug, Clone, Copy, Eq)]
pub struct Record {
    pub foo: f32,
    pub bar: Option<i32>,
    pub baz: i32,
    pub qux: Qux,
}

#[derive(Debug, Clone, Copy, Eq)]
pub enum Qux {
    Green,
    Red,
    Blue,
}
"""


@pytest.fixture
def sample_table() -> RawTable:
    return RawTable(
        ["foo", "bar", "baz", "qux"],
        [
            ["1", "2", "3", "green"],
            ["4.4", "5", "6", "red"],
            ["7.2", "", "8", "blue"],
        ],
    )


@pytest.fixture
def sample_csv_path(tmp_path):
    path = tmp_path / "test.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
