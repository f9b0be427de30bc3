"""Factor level collection for Level 2 inference.

For every Factor column the registry records the distinct non-empty cell
texts in first-occurrence order. Each Factor column gets its own
enumeration, even when two columns observe exactly the same levels.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from level1_ingestion.table import RawTable
from utils import get_logger

from .types import Schema

logger = get_logger(__name__)


@dataclass(frozen=True)
class EnumDefinition:
    """Enumeration derived from one Factor column."""

    column: str
    type_name: str
    levels: tuple[str, ...]


def factor_levels(cells: Iterable[str]) -> list[str]:
    """Distinct non-empty cell texts in first-occurrence order.

    Comparison is exact: no trimming or case folding.
    """
    # dict preserves insertion order
    seen: dict[str, None] = {}
    for cell in cells:
        if cell != "" and cell not in seen:
            seen[cell] = None
    return list(seen)


def collect_factor_levels(table: RawTable, schema: Schema) -> dict[str, list[str]]:
    """Collect factor levels for every Factor column of ``schema``.

    Args:
        table: The table the schema was inferred from
        schema: Inferred schema

    Returns:
        Mapping of column name to levels, in schema order
    """
    return {name: factor_levels(table.column(name)) for name in schema.factor_columns}


class EnumRegistry:
    """Holds one EnumDefinition per Factor column, in schema order.

    Args:
        definitions: Enum definitions to register
    """

    def __init__(self, definitions: Iterable[EnumDefinition] = ()):
        self._definitions: dict[str, EnumDefinition] = {}
        for definition in definitions:
            self.register(definition)

    @classmethod
    def from_table(
        cls,
        table: RawTable,
        schema: Schema,
        type_namer: Optional[Callable[[str], str]] = None,
    ) -> "EnumRegistry":
        """Build the registry for a table and its inferred schema.

        Args:
            table: The table the schema was inferred from
            schema: Inferred schema
            type_namer: Turns a column name into an enum type name; the
                column name is used unchanged when omitted
        """
        registry = cls()
        for column, levels in collect_factor_levels(table, schema).items():
            type_name = type_namer(column) if type_namer else column
            registry.register(EnumDefinition(column, type_name, tuple(levels)))
            logger.debug(f"Enum '{type_name}' for column '{column}': {len(levels)} levels")
        logger.info(f"Enum registry built: {len(registry)} enumerations")
        return registry

    def register(self, definition: EnumDefinition) -> None:
        """Add a definition.

        Raises:
            ValueError: If the column already has a definition
        """
        if definition.column in self._definitions:
            raise ValueError(f"Column '{definition.column}' already has an enumeration")
        self._definitions[definition.column] = definition

    def get(self, column: str) -> Optional[EnumDefinition]:
        return self._definitions.get(column)

    def __getitem__(self, column: str) -> EnumDefinition:
        return self._definitions[column]

    def __contains__(self, column: object) -> bool:
        return column in self._definitions

    def __iter__(self) -> Iterator[EnumDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)
