"""Generation pipeline for coordinating schema inference and rendering.

This module defines the SchemaGenerator class which accepts validated
options and runs a table through every level:

- Level 1: read the table into a validated RawTable
- Level 2: infer the Schema and collect enumerations
- Level 3: render the result as Rust source or JSON
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

import pandas as pd

from level1_ingestion.loader import load_table, read_table
from level1_ingestion.table import RawTable
from level2_inference.enum_registry import EnumRegistry
from level2_inference.schema_builder import build_schema
from level2_inference.types import Schema
from level3_rendering.json_exporter import to_json
from level3_rendering.naming import NamingStrategy, RustNaming
from level3_rendering.rust_renderer import RustRenderer
from options.schema import GeneratorOptions, OutputFormat
from utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Everything produced by one generation run."""

    table: RawTable
    schema: Schema
    registry: EnumRegistry
    output: str


class SchemaGenerator:
    """Runs tables through ingestion, inference and rendering.

    Args:
        options: Validated GeneratorOptions (defaults when omitted)
        naming: Naming strategy for generated identifiers
    """

    def __init__(
        self,
        options: Optional[GeneratorOptions] = None,
        naming: Optional[NamingStrategy] = None,
    ):
        self.options = options or GeneratorOptions()
        self.naming = naming or RustNaming()
        logger.debug(
            f"SchemaGenerator initialized: format={self.options.output_format.value}, "
            f"record={self.options.record_name}"
        )

    def generate_from_path(self, file_path: str | Path) -> GenerationResult:
        """Load a table file and generate definitions for it.

        Raises:
            DatasetLoadError: If the file cannot be read
            TableStructureError: If the table is malformed
        """
        table = load_table(
            file_path, delimiter=self.options.delimiter, encoding=self.options.encoding
        )
        return self.generate_from_table(table)

    def generate_from_stream(self, stream: TextIO) -> GenerationResult:
        """Read a table from a text stream (e.g. stdin) and generate definitions."""
        table = read_table(stream, delimiter=self.options.delimiter or ",")
        return self.generate_from_table(table)

    def generate_from_dataframe(self, df: pd.DataFrame) -> GenerationResult:
        """Generate definitions for an in-memory DataFrame."""
        return self.generate_from_table(RawTable.from_dataframe(df))

    def generate_from_table(self, table: RawTable) -> GenerationResult:
        """Infer and render definitions for an already validated table."""
        logger.info("Level 2: Type Inference")
        schema = build_schema(table)
        registry = EnumRegistry.from_table(table, schema, type_namer=self.naming.type_name)

        logger.info(f"Level 3: Rendering ({self.options.output_format.value})")
        output = self.render(schema, registry)

        return GenerationResult(table=table, schema=schema, registry=registry, output=output)

    def render(self, schema: Schema, registry: EnumRegistry) -> str:
        """Render a schema in the configured output format."""
        if self.options.output_format is OutputFormat.JSON:
            return to_json(schema, registry, self.options)
        return RustRenderer(self.options, naming=self.naming).render(schema, registry)
