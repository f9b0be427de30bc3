"""Type definitions for Level 2 inference.

Two closed variant families drive inference:

- ``ValueKind`` / ``ClassifiedValue`` describe a single cell.
- ``BaseType`` / ``ColumnType`` describe a whole column.

Both are immutable so results can be shared freely between stages.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class ValueKind(str, Enum):
    """Classification of a single cell's text."""

    EMPTY = "empty"
    INTEGER = "integer"
    REAL = "real"
    FACTOR = "factor"


@dataclass(frozen=True)
class ClassifiedValue:
    """Result of classifying one cell.

    ``text`` is only carried for factors; for every other kind the value
    itself is irrelevant to inference.
    """

    kind: ValueKind
    text: Optional[str] = None

    def __post_init__(self):
        if (self.kind is ValueKind.FACTOR) != (self.text is not None):
            raise ValueError(f"text must be given exactly when kind is FACTOR, got {self!r}")

    @classmethod
    def empty(cls) -> "ClassifiedValue":
        return cls(ValueKind.EMPTY)

    @classmethod
    def integer(cls) -> "ClassifiedValue":
        return cls(ValueKind.INTEGER)

    @classmethod
    def real(cls) -> "ClassifiedValue":
        return cls(ValueKind.REAL)

    @classmethod
    def factor(cls, text: str) -> "ClassifiedValue":
        return cls(ValueKind.FACTOR, text)


class BaseType(str, Enum):
    """Column type ignoring optionality."""

    INTEGER = "integer"
    REAL = "real"
    FACTOR = "factor"


@dataclass(frozen=True)
class ColumnType:
    """Inferred type of one column: a base type, optionally wrapped."""

    base: BaseType
    optional: bool = False

    @property
    def is_factor(self) -> bool:
        return self.base is BaseType.FACTOR

    def __str__(self) -> str:
        name = self.base.value.capitalize()
        return f"Optional<{name}>" if self.optional else name


@dataclass(frozen=True)
class SchemaField:
    """One (column name, column type) pair."""

    name: str
    column_type: ColumnType


@dataclass(frozen=True)
class Schema:
    """Ordered column types for a table, in header order."""

    fields: tuple[SchemaField, ...]

    def __iter__(self) -> Iterator[SchemaField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __getitem__(self, name: str) -> ColumnType:
        for schema_field in self.fields:
            if schema_field.name == name:
                return schema_field.column_type
        raise KeyError(name)

    @property
    def names(self) -> list[str]:
        return [schema_field.name for schema_field in self.fields]

    @property
    def factor_columns(self) -> list[str]:
        return [f.name for f in self.fields if f.column_type.is_factor]
