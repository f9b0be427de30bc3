"""Raw table model for Level 1 ingestion.

A RawTable is the validated, read-only grid of cell text that every later
stage consumes. Structural problems (duplicate headers, ragged rows) are
rejected here, before any inference runs.
"""

from collections import Counter
from typing import Optional, Sequence

import pandas as pd

from utils import get_logger

logger = get_logger(__name__)


class DatasetLoadError(Exception):
    """Raised when a table cannot be loaded."""

    pass


class TableStructureError(DatasetLoadError):
    """Raised when a table's header or rows are structurally malformed."""

    pass


class RawTable:
    """Header names plus rows of raw cell text.

    Args:
        columns: Column names in header order (must be unique)
        rows: Data rows, each aligned positionally with ``columns``
        line_numbers: Optional source line number for each row, used in
            error messages

    Raises:
        TableStructureError: If the header is empty, contains duplicates, or a
            row's cell count differs from the header's
    """

    def __init__(
        self,
        columns: Sequence[str],
        rows: Sequence[Sequence[str]],
        line_numbers: Optional[Sequence[int]] = None,
    ):
        columns = tuple(columns)
        if not columns:
            raise TableStructureError("Table has no columns: header row is empty")

        counts = Counter(columns)
        duplicates = [name for name, count in counts.items() if count > 1]
        if duplicates:
            raise TableStructureError(
                f"Duplicate column names in header: {duplicates}. "
                "Column names must be unique."
            )

        frozen_rows = []
        for index, row in enumerate(rows):
            row = tuple(row)
            if len(row) != len(columns):
                location = f"Row {index + 1}"
                if line_numbers is not None:
                    location += f" (line {line_numbers[index]})"
                raise TableStructureError(
                    f"{location} has {len(row)} cells, expected {len(columns)} "
                    f"to match header {list(columns)}"
                )
            frozen_rows.append(row)

        self._columns = columns
        self._rows = tuple(frozen_rows)
        logger.debug(f"RawTable validated: {len(self._rows)} rows, {len(columns)} columns")

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names in header order."""
        return self._columns

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        """Data rows in input order."""
        return self._rows

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    def column(self, key: int | str) -> list[str]:
        """Return one column's cells in row order.

        Args:
            key: Column index or column name

        Raises:
            KeyError: If no column has the given name
            IndexError: If the index is out of range
        """
        if isinstance(key, str):
            try:
                index = self._columns.index(key)
            except ValueError:
                raise KeyError(f"Unknown column: {key!r}") from None
        else:
            index = key
            if not -len(self._columns) <= index < len(self._columns):
                raise IndexError(f"Column index out of range: {index}")
        return [row[index] for row in self._rows]

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "RawTable":
        """Build a table from a pandas DataFrame.

        Missing values become empty cells; everything else is rendered with
        ``str``. In float columns, integral values are rendered without the
        trailing ``.0`` because pandas promotes integer columns with missing
        values to float. Column labels are converted to strings, so labels
        that only differ in type (``1`` and ``"1"``) are reported as duplicates.
        """
        columns = [str(label) for label in df.columns]
        cells_by_column = []
        for _, series in df.items():
            float_column = pd.api.types.is_float_dtype(series.dtype)
            cells_by_column.append([_cell_text(value, float_column) for value in series])
        rows = [list(row) for row in zip(*cells_by_column)]
        return cls(columns, rows)

    def __repr__(self) -> str:
        return f"RawTable(columns={list(self._columns)}, rows={len(self._rows)} rows)"


def _is_missing(value: object) -> bool:
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Array-like cells: pd.isna returns an array, which is never "missing"
        return False


def _cell_text(value: object, float_column: bool) -> str:
    if _is_missing(value):
        return ""
    if float_column and float(value).is_integer():
        return str(int(value))
    return str(value)
