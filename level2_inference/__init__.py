"""Level 2: Type Inference.

This module classifies every cell, reduces each column to a ColumnType,
assembles the Schema and collects factor levels for categorical columns.
"""

from .column_reducer import reduce_column
from .enum_registry import EnumDefinition, EnumRegistry, collect_factor_levels, factor_levels
from .schema_builder import build_schema, infer_column_type
from .types import (
    BaseType,
    ClassifiedValue,
    ColumnType,
    Schema,
    SchemaField,
    ValueKind,
)
from .value_classifier import classify_value

__all__ = [
    "BaseType",
    "ClassifiedValue",
    "ColumnType",
    "EnumDefinition",
    "EnumRegistry",
    "Schema",
    "SchemaField",
    "ValueKind",
    "build_schema",
    "classify_value",
    "collect_factor_levels",
    "factor_levels",
    "infer_column_type",
    "reduce_column",
]
