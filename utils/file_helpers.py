"""File helper utilities for csv2struct.

This module provides common file operations used across the application.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import SUPPORTED_CONFIG_FORMATS, SUPPORTED_TABLE_FORMATS

logger = logging.getLogger(__name__)


class PathValidationError(Exception):
    """Raised when path validation fails due to security concerns."""

    pass


def get_file_extension(file_path: str | Path) -> str:
    """Get file extension from path.

    Args:
        file_path: File path

    Returns:
        File extension (without dot), empty string if no extension
    """
    path = Path(file_path)
    return path.suffix.lstrip(".").lower()


def is_supported_table_format(file_path: str | Path) -> bool:
    """Check if file is a supported tabular text format."""
    return get_file_extension(file_path) in SUPPORTED_TABLE_FORMATS


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a supported config format."""
    return get_file_extension(file_path) in SUPPORTED_CONFIG_FORMATS


def validate_path_safe(
    file_path: str | Path,
    base_dir: Optional[Path] = None,
    must_exist: bool = False,
    must_be_file: bool = False,
) -> Path:
    """Validate path to prevent directory traversal attacks.

    This function:
    - Checks for directory traversal sequences (..)
    - Resolves paths to prevent symlink attacks
    - Optionally validates paths are within a base directory
    - Validates file existence and type

    Args:
        file_path: Path to validate
        base_dir: Optional base directory to restrict paths within
        must_exist: If True, path must exist
        must_be_file: If True, path must be a file

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path contains traversal or violates constraints
        FileNotFoundError: If must_exist=True and path doesn't exist
    """
    path = Path(file_path).expanduser()

    if ".." in path.parts:
        raise PathValidationError(
            f"Path contains directory traversal sequence: {file_path}"
        )

    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if base_dir is not None:
        base_resolved = Path(base_dir).expanduser().resolve()
        try:
            common = os.path.commonpath([str(resolved), str(base_resolved)])
        except ValueError:
            # Paths on different drives (Windows)
            raise PathValidationError(
                f"Path {file_path} cannot be validated against base directory {base_dir}"
            )
        if common != str(base_resolved):
            raise PathValidationError(
                f"Path {file_path} is outside allowed base directory {base_dir}"
            )

    if must_exist and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    if must_be_file and not resolved.is_file():
        if resolved.exists():
            raise PathValidationError(f"Path is not a file: {file_path}")
        else:
            raise FileNotFoundError(f"File does not exist: {file_path}")

    return resolved


def sanitize_path_component(component: str) -> str:
    """Sanitize a single path component.

    Removes or replaces dangerous characters that could be used for path injection.

    Args:
        component: Path component to sanitize

    Returns:
        Sanitized path component
    """
    sanitized = "".join(
        c
        for c in component
        if c.isprintable()
        and c not in ['\x00', '<', '>', ':', '"', '|', '?', '*']
    )
    # Remove leading/trailing spaces and collapse runs of whitespace
    sanitized = sanitized.strip(' ')
    sanitized = ' '.join(sanitized.split())
    return sanitized


def is_system_directory(path: Path) -> bool:
    """Check if path is (or lies under) a system directory that should not be written to.

    Args:
        path: Path to check

    Returns:
        True if path is a system directory
    """
    original_str = str(path).lower().replace('\\', '/')
    try:
        resolved_str = str(path.resolve()).lower().replace('\\', '/')
    except (OSError, RuntimeError):
        resolved_str = original_str

    critical_system_dirs = [
        '/bin', '/boot', '/dev', '/etc', '/lib', '/lib64', '/proc',
        '/sbin', '/sys', '/usr',
        '/private/etc', '/private/var/lib', '/private/var/log', '/private/var/run',
        'c:/windows', 'c:/system32', 'c:/syswow64',
    ]

    for path_to_check in (original_str, resolved_str):
        for sys_dir in critical_system_dirs:
            if path_to_check == sys_dir or path_to_check.startswith(sys_dir + '/'):
                return True

    return False


def validate_output_file(output_path: str | Path) -> Path:
    """Validate the destination of a generated file.

    This function:
    - Validates path doesn't contain directory traversal
    - Sanitizes the file name
    - Prevents writing into system directories
    - Rejects destinations that are existing directories

    Args:
        output_path: Destination file path

    Returns:
        Resolved, sanitized Path object

    Raises:
        PathValidationError: If path contains traversal, targets a system
            directory, or names an existing directory
    """
    path = Path(output_path).expanduser()
    if ".." in path.parts:
        raise PathValidationError(
            f"Output path contains directory traversal sequence: {output_path}"
        )

    file_name = sanitize_path_component(path.name)
    if not file_name:
        raise PathValidationError(f"Output path has no usable file name: {output_path}")
    path = path.with_name(file_name)

    try:
        validated_path = validate_path_safe(path)
    except PathValidationError as e:
        raise PathValidationError(f"Output path validation failed: {e}") from e

    if is_system_directory(validated_path):
        raise PathValidationError(
            f"Output path cannot be inside a system directory: {validated_path}"
        )

    if validated_path.is_dir():
        raise PathValidationError(
            f"Output path is a directory, expected a file: {validated_path}"
        )

    return validated_path
