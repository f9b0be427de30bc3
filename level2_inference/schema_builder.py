"""Schema building for Level 2 inference.

This module drives the value classifier and column reducer across every
column of a RawTable, producing a Schema in header order.
"""

from level1_ingestion.table import RawTable
from utils import get_logger

from .column_reducer import reduce_column
from .types import ColumnType, Schema, SchemaField
from .value_classifier import classify_value

logger = get_logger(__name__)


def infer_column_type(cells: list[str]) -> ColumnType:
    """Infer the type of a single column from its raw cells."""
    return reduce_column(classify_value(cell) for cell in cells)


def build_schema(table: RawTable) -> Schema:
    """Infer the schema of a table.

    Columns are independent of each other; the output order equals the
    table's header order. The table is not modified.

    Args:
        table: Validated RawTable

    Returns:
        Schema with one field per column
    """
    logger.info(f"Inferring schema for {table.column_count} columns")

    fields = []
    for index, name in enumerate(table.columns):
        column_type = infer_column_type(table.column(index))
        fields.append(SchemaField(name=name, column_type=column_type))
        logger.debug(f"Column '{name}': type={column_type}")

    schema = Schema(fields=tuple(fields))
    logger.info(
        f"Schema inference complete: {len(schema)} columns, "
        f"{len(schema.factor_columns)} factor columns"
    )
    return schema
