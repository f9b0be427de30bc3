"""Table loader for Level 1 ingestion.

This module reads delimited tabular text (CSV, TSV) from disk or from a
stream into a validated RawTable. Cells are kept as raw text; no type
conversion happens here.
"""

import csv
from pathlib import Path
from typing import Optional, TextIO

from utils import (
    DEFAULT_ENCODING,
    SUPPORTED_TABLE_FORMATS,
    PathValidationError,
    get_file_extension,
    get_logger,
    is_supported_table_format,
    validate_path_safe,
)

from .table import DatasetLoadError, RawTable, TableStructureError

logger = get_logger(__name__)


def read_table(stream: TextIO, delimiter: str = ",") -> RawTable:
    """Read a table from an open text stream.

    The first non-blank line is the header. Completely blank lines are
    skipped; any other row must have exactly as many cells as the header.

    Args:
        stream: Text stream (file object, ``sys.stdin``, ``io.StringIO``)
        delimiter: Single-character field delimiter

    Returns:
        Validated RawTable

    Raises:
        DatasetLoadError: If the stream is empty or cannot be parsed
        TableStructureError: If the header or a row is malformed
    """
    if len(delimiter) != 1:
        raise DatasetLoadError(f"Delimiter must be a single character, got {delimiter!r}")

    reader = csv.reader(stream, delimiter=delimiter, strict=True)

    header: Optional[list[str]] = None
    rows: list[list[str]] = []
    line_numbers: list[int] = []
    try:
        for record in reader:
            if not record:
                continue
            if header is None:
                header = record
            else:
                rows.append(record)
                line_numbers.append(reader.line_num)
    except csv.Error as e:
        raise DatasetLoadError(f"Failed to parse table near line {reader.line_num}: {e}") from e

    if header is None:
        raise DatasetLoadError("Table is empty: no header row found")

    # Streams opened without utf-8-sig (stdin) keep the byte-order mark
    header[0] = header[0].removeprefix("\ufeff")

    table = RawTable(header, rows, line_numbers=line_numbers)
    logger.info(f"Table read: {table.row_count} rows, {table.column_count} columns")
    logger.debug(f"Column names: {list(table.columns)}")
    return table


def load_table(
    file_path: str | Path,
    delimiter: Optional[str] = None,
    encoding: str = DEFAULT_ENCODING,
) -> RawTable:
    """Load a table from disk.

    Supports CSV, TSV and plain-text delimited files. The delimiter defaults
    to the one implied by the extension; an explicit delimiter wins.

    Args:
        file_path: Path to the table file
        delimiter: Optional field delimiter override
        encoding: Text encoding (``utf-8-sig`` strips a byte-order mark)

    Returns:
        Validated RawTable

    Raises:
        DatasetLoadError: If the file doesn't exist, format is unsupported, or reading fails
        TableStructureError: If the header or a row is malformed
    """
    try:
        file_path = validate_path_safe(file_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise DatasetLoadError(f"Invalid table path: {e}") from e
    except FileNotFoundError as e:
        raise DatasetLoadError(f"Table file not found: {file_path}") from e

    extension = get_file_extension(file_path)
    if not is_supported_table_format(file_path):
        supported = ", ".join(f".{ext}" for ext in SUPPORTED_TABLE_FORMATS)
        raise DatasetLoadError(
            f"Unsupported file format: .{extension}. Supported formats: {supported}"
        )
    if delimiter is None:
        delimiter = SUPPORTED_TABLE_FORMATS[extension]

    logger.info(f"Loading table from: {file_path}")
    logger.debug(f"Delimiter: {delimiter!r}, encoding: {encoding}")

    try:
        with open(file_path, "r", encoding=encoding, newline="") as f:
            return read_table(f, delimiter=delimiter)
    except TableStructureError as e:
        raise TableStructureError(f"{file_path}: {e}") from e
    except DatasetLoadError:
        raise
    except UnicodeDecodeError as e:
        raise DatasetLoadError(
            f"Failed to decode table file {file_path} as {encoding}: {e}"
        ) from e
    except OSError as e:
        raise DatasetLoadError(f"Failed to read table file {file_path}: I/O error: {e}") from e
