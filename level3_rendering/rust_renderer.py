"""Rust source rendering for Level 3.

Renders a Schema and its EnumRegistry as a Rust struct with one field per
column, followed by one enum per Factor column.
"""

from typing import Optional

from level2_inference.enum_registry import EnumDefinition, EnumRegistry
from level2_inference.types import BaseType, ColumnType, Schema
from options.schema import GeneratorOptions
from utils import get_logger

from .naming import NamingStrategy, RustNaming, deduplicate_names

logger = get_logger(__name__)

INDENT = "    "

PRIMITIVE_TYPES = {
    BaseType.INTEGER: "i32",
    BaseType.REAL: "f32",
}

# std types referenced by generated fields
RESERVED_TYPE_NAMES = ("Option",)


class RenderError(Exception):
    """Raised when a schema cannot be rendered."""

    pass


def rust_string_literal(text: str) -> str:
    """Quote text as a Rust string literal."""
    escaped = []
    for char in text:
        if char == "\\":
            escaped.append("\\\\")
        elif char == '"':
            escaped.append('\\"')
        elif char == "\n":
            escaped.append("\\n")
        elif char == "\r":
            escaped.append("\\r")
        elif char == "\t":
            escaped.append("\\t")
        elif not char.isprintable():
            escaped.append(f"\\u{{{ord(char):x}}}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


class RustRenderer:
    """Renders inferred schemas as Rust type definitions.

    Args:
        options: Generator options (record name, derives, visibility)
        naming: Naming strategy; RustNaming when omitted
    """

    def __init__(
        self,
        options: Optional[GeneratorOptions] = None,
        naming: Optional[NamingStrategy] = None,
    ):
        self.options = options or GeneratorOptions()
        self.naming = naming or RustNaming()

    def _visibility(self) -> str:
        return "pub " if self.options.public else ""

    def _derive_line(self) -> list[str]:
        if not self.options.derives:
            return []
        return [f"#[derive({', '.join(self.options.derives)})]"]

    def _rename_line(self, original: str, identifier: str, indent: str) -> list[str]:
        bare = identifier[2:] if identifier.startswith("r#") else identifier
        if not self.options.serde_rename or bare == original:
            return []
        return [f"{indent}#[serde(rename = {rust_string_literal(original)})]"]

    def _enum_type_names(self, registry: EnumRegistry) -> dict[str, str]:
        columns = [definition.column for definition in registry]
        names = deduplicate_names(
            (definition.type_name for definition in registry),
            reserved=[self.options.record_name, *RESERVED_TYPE_NAMES],
        )
        return dict(zip(columns, names))

    def _field_type(self, column: str, column_type: ColumnType, enum_names: dict[str, str]) -> str:
        if column_type.base is BaseType.FACTOR:
            if column not in enum_names:
                raise RenderError(f"Factor column '{column}' has no enumeration registered")
            type_name = enum_names[column]
        else:
            type_name = PRIMITIVE_TYPES[column_type.base]
        return f"Option<{type_name}>" if column_type.optional else type_name

    def render_struct(self, schema: Schema, enum_names: dict[str, str]) -> str:
        """Render the record struct."""
        vis = self._visibility()
        lines = self._derive_line()
        lines.append(f"{vis}struct {self.options.record_name} {{")

        field_names = deduplicate_names(self.naming.field_name(f.name) for f in schema)
        for schema_field, identifier in zip(schema, field_names):
            field_type = self._field_type(schema_field.name, schema_field.column_type, enum_names)
            lines.extend(self._rename_line(schema_field.name, identifier, INDENT))
            lines.append(f"{INDENT}{vis}{identifier}: {field_type},")

        lines.append("}")
        return "\n".join(lines)

    def render_enum(self, definition: EnumDefinition, type_name: Optional[str] = None) -> str:
        """Render one enumeration, one variant per level."""
        lines = self._derive_line()
        lines.append(f"{self._visibility()}enum {type_name or definition.type_name} {{")

        variants = deduplicate_names(self.naming.variant_name(level) for level in definition.levels)
        for level, variant in zip(definition.levels, variants):
            lines.extend(self._rename_line(level, variant, INDENT))
            lines.append(f"{INDENT}{variant},")

        lines.append("}")
        return "\n".join(lines)

    def render(self, schema: Schema, registry: EnumRegistry) -> str:
        """Render the struct followed by every enum, in schema order.

        Raises:
            RenderError: If a Factor column has no registered enumeration
        """
        enum_names = self._enum_type_names(registry)
        blocks = [self.render_struct(schema, enum_names)]
        for column in schema.factor_columns:
            blocks.append(self.render_enum(registry[column], enum_names[column]))

        logger.info(f"Rendered struct {self.options.record_name} and {len(blocks) - 1} enums")
        return "\n\n".join(blocks) + "\n"
