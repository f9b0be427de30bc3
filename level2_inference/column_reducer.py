"""Per-column reduction for Level 2 inference.

Reduces the classifications of every cell in a column to one ColumnType:

- any Factor among the present values makes the column a Factor;
- otherwise any Real makes it Real;
- otherwise it is Integer;
- if any cell was empty, the result is wrapped as optional.

Empty cells never influence the base type. A column with no present values
at all falls back to Integer (optional if it had empty cells).
"""

from typing import Iterable

from .types import BaseType, ClassifiedValue, ColumnType, ValueKind

# Base type used when a column has no non-empty evidence.
EMPTY_COLUMN_BASE = BaseType.INTEGER


def reduce_column(values: Iterable[ClassifiedValue]) -> ColumnType:
    """Reduce a column's cell classifications to a single ColumnType.

    Args:
        values: Classifications for every cell of the column, in any order

    Returns:
        ColumnType for the column (never fails)
    """
    had_empty = False
    seen_present = False
    has_factor = False
    has_real = False

    for value in values:
        if value.kind is ValueKind.EMPTY:
            had_empty = True
            continue
        seen_present = True
        if value.kind is ValueKind.FACTOR:
            has_factor = True
        elif value.kind is ValueKind.REAL:
            has_real = True
        elif value.kind is not ValueKind.INTEGER:
            raise ValueError(f"Unknown value kind: {value.kind!r}")

    if not seen_present:
        base = EMPTY_COLUMN_BASE
    elif has_factor:
        base = BaseType.FACTOR
    elif has_real:
        base = BaseType.REAL
    else:
        base = BaseType.INTEGER

    return ColumnType(base=base, optional=had_empty)
