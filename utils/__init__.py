"""Shared utilities for csv2struct.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_DERIVES,
    DEFAULT_ENCODING,
    DEFAULT_RECORD_NAME,
    EXIT_INVALID_OPTIONS,
    EXIT_MALFORMED_INPUT,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    RUST_KEYWORDS,
    RUST_NON_RAW_KEYWORDS,
    SUPPORTED_CONFIG_FORMATS,
    SUPPORTED_TABLE_FORMATS,
)
from .file_helpers import (
    get_file_extension,
    is_supported_config_format,
    is_supported_table_format,
    PathValidationError,
    sanitize_path_component,
    validate_output_file,
    validate_path_safe,
)
from .logging import get_logger, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_DERIVES",
    "DEFAULT_ENCODING",
    "DEFAULT_RECORD_NAME",
    "EXIT_INVALID_OPTIONS",
    "EXIT_MALFORMED_INPUT",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "RUST_KEYWORDS",
    "RUST_NON_RAW_KEYWORDS",
    "SUPPORTED_CONFIG_FORMATS",
    "SUPPORTED_TABLE_FORMATS",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "is_supported_table_format",
    "PathValidationError",
    "sanitize_path_component",
    "setup_logging",
    "validate_output_file",
    "validate_path_safe",
]
