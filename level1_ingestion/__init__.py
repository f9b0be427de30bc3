"""Level 1: Table Ingestion.

This module handles reading delimited tabular text into a validated,
read-only RawTable.
"""

from .loader import load_table, read_table
from .table import DatasetLoadError, RawTable, TableStructureError

__all__ = [
    "load_table",
    "read_table",
    "RawTable",
    "DatasetLoadError",
    "TableStructureError",
]
