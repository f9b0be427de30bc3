"""JSON export for Level 3 rendering.

Produces a machine-readable description of the inferred schema and its
enumerations. Output is deterministic: fields and enums follow schema order
and levels follow first-occurrence order.
"""

import json
from typing import Any, Optional

from level2_inference.enum_registry import EnumRegistry
from level2_inference.types import Schema
from options.schema import GeneratorOptions


def export_schema(
    schema: Schema,
    registry: EnumRegistry,
    options: Optional[GeneratorOptions] = None,
) -> dict[str, Any]:
    """Describe a schema and its enumerations as plain data.

    Args:
        schema: Inferred schema
        registry: Enumerations for the schema's Factor columns
        options: Generator options (only the record name is used)

    Returns:
        Dictionary ready for ``json.dumps``
    """
    options = options or GeneratorOptions()
    fields = []
    for schema_field in schema:
        column_type = schema_field.column_type
        definition = registry.get(schema_field.name) if column_type.is_factor else None
        fields.append(
            {
                "name": schema_field.name,
                "type": column_type.base.value,
                "optional": column_type.optional,
                "enum": definition.type_name if definition else None,
            }
        )

    enums = [
        {
            "name": registry[column].type_name,
            "column": column,
            "levels": list(registry[column].levels),
        }
        for column in schema.factor_columns
        if column in registry
    ]

    return {"record": options.record_name, "fields": fields, "enums": enums}


def to_json(
    schema: Schema,
    registry: EnumRegistry,
    options: Optional[GeneratorOptions] = None,
    indent: int = 2,
) -> str:
    """Serialize ``export_schema`` output as JSON text."""
    data = export_schema(schema, registry, options)
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
