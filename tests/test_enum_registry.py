"""Tests for factor level collection."""

import pytest

from level1_ingestion.table import RawTable
from level2_inference.enum_registry import (
    EnumDefinition,
    EnumRegistry,
    collect_factor_levels,
    factor_levels,
)
from level2_inference.schema_builder import build_schema


def test_sample_levels(sample_table):
    schema = build_schema(sample_table)
    assert collect_factor_levels(sample_table, schema) == {"qux": ["green", "red", "blue"]}


def test_levels_first_occurrence_order_without_duplicates():
    assert factor_levels(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_levels_skip_empty_cells():
    assert factor_levels(["", "x", "", "y"]) == ["x", "y"]


def test_levels_use_exact_comparison():
    assert factor_levels(["red", "Red", " red", "red"]) == ["red", "Red", " red"]


def test_numeric_cells_in_factor_column_are_levels():
    assert factor_levels(["1", "n/a", "2.5"]) == ["1", "n/a", "2.5"]


def test_identical_level_sets_are_not_merged():
    table = RawTable(["a", "b"], [["x", "x"], ["y", "y"]])
    registry = EnumRegistry.from_table(table, build_schema(table), type_namer=str.upper)

    assert len(registry) == 2
    assert registry["a"] == EnumDefinition("a", "A", ("x", "y"))
    assert registry["b"] == EnumDefinition("b", "B", ("x", "y"))


def test_registry_only_covers_factor_columns(sample_table):
    registry = EnumRegistry.from_table(sample_table, build_schema(sample_table))

    assert "qux" in registry
    assert "foo" not in registry
    assert registry.get("foo") is None
    # Without a namer the column name is used as-is
    assert registry["qux"].type_name == "qux"


def test_registry_iterates_in_schema_order():
    table = RawTable(["z", "n", "a"], [["p", "1", "q"]])
    registry = EnumRegistry.from_table(table, build_schema(table))
    assert [d.column for d in registry] == ["z", "a"]


def test_register_rejects_second_definition_for_column():
    registry = EnumRegistry([EnumDefinition("a", "A", ("x",))])
    with pytest.raises(ValueError, match="already has an enumeration"):
        registry.register(EnumDefinition("a", "Other", ("y",)))
