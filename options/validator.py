"""Option loading and validation.

This module handles loading YAML/JSON option files and validating them
against GeneratorOptions. It provides clear, user-friendly error messages.
"""

import json
import pathlib
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from options.schema import GeneratorOptions
from utils import (
    PathValidationError,
    get_logger,
    is_supported_config_format,
    validate_path_safe,
)

logger = get_logger(__name__)


class OptionsValidationError(Exception):
    """Raised when option loading or validation fails."""

    pass


def load_options_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load options from a YAML or JSON file.

    Args:
        config_path: Path to options file

    Returns:
        Dictionary containing options

    Raises:
        OptionsValidationError: If file cannot be loaded or parsed
    """
    try:
        config_path = validate_path_safe(config_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise OptionsValidationError(f"Invalid options path: {e}") from e
    except FileNotFoundError as e:
        raise OptionsValidationError(f"Options file not found: {config_path}") from e

    suffix = config_path.suffix.lower()
    if not is_supported_config_format(config_path):
        raise OptionsValidationError(
            f"Unsupported file format: {suffix}. Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise OptionsValidationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise OptionsValidationError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise OptionsValidationError(
            f"Failed to decode options file {config_path}: Encoding error: {e}"
        ) from e
    except OSError as e:
        raise OptionsValidationError(
            f"Failed to read options file {config_path}: I/O error: {e}"
        ) from e

    if config is None:
        raise OptionsValidationError("Options file is empty")

    if not isinstance(config, dict):
        raise OptionsValidationError(
            f"Options must be a dictionary, got {type(config).__name__}"
        )

    logger.debug(f"Options loaded from {config_path}: {sorted(config)}")
    return config


def validate_options(config: dict[str, Any]) -> GeneratorOptions:
    """Validate an options dictionary.

    Args:
        config: Options dictionary

    Returns:
        Validated GeneratorOptions instance

    Raises:
        OptionsValidationError: If validation fails with user-friendly error message
    """
    try:
        return GeneratorOptions(**config)
    except ValidationError as e:
        raise OptionsValidationError(
            f"Options validation failed:\n{_format_validation_error(e)}"
        ) from e


def _format_validation_error(error: ValidationError) -> str:
    errors = []
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err.get("loc", []))
        error_msg = err.get("msg", "Validation error")
        error_type = err.get("type", "unknown")
        errors.append(f"  {field_path}: {error_msg} ({error_type})")
    return "\n".join(errors)


def resolve_options(
    config_path: Optional[Union[str, pathlib.Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> GeneratorOptions:
    """Load options from an optional file and apply overrides on top.

    This is the main entry point for option handling. Override values of
    ``None`` are ignored, so unset CLI flags never mask file values.

    Args:
        config_path: Optional path to YAML or JSON options file
        overrides: Values that take precedence over the file

    Returns:
        Validated GeneratorOptions instance

    Raises:
        OptionsValidationError: If loading or validation fails
    """
    config = load_options_file(config_path) if config_path else {}
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    return validate_options(config)
