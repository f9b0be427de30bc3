"""Generator options: schema and validation."""

from .schema import GeneratorOptions, OutputFormat
from .validator import (
    OptionsValidationError,
    load_options_file,
    resolve_options,
    validate_options,
)

__all__ = [
    "GeneratorOptions",
    "OutputFormat",
    "OptionsValidationError",
    "load_options_file",
    "resolve_options",
    "validate_options",
]
