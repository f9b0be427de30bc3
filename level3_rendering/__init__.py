"""Level 3: Rendering.

This module turns an inferred schema into generated source (Rust) or a
machine-readable JSON description, and writes it to disk.
"""

from .json_exporter import export_schema, to_json
from .naming import (
    NamingStrategy,
    RustNaming,
    deduplicate_names,
    split_words,
    to_pascal_case,
    to_snake_case,
)
from .rust_renderer import RenderError, RustRenderer
from .writer import OutputWriter

__all__ = [
    "NamingStrategy",
    "OutputWriter",
    "RenderError",
    "RustNaming",
    "RustRenderer",
    "deduplicate_names",
    "export_schema",
    "split_words",
    "to_json",
    "to_pascal_case",
    "to_snake_case",
]
