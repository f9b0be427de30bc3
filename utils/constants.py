"""Constants for csv2struct.

This module defines shared constants used across the application.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_OPTIONS = 1
EXIT_MALFORMED_INPUT = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "csv2struct"
APP_VERSION = "0.2.0"

# Supported file formats, mapped to their default delimiter
SUPPORTED_TABLE_FORMATS = {"csv": ",", "tsv": "\t", "txt": ","}
SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]

# Default values
DEFAULT_ENCODING = "utf-8-sig"
DEFAULT_RECORD_NAME = "Record"
DEFAULT_DERIVES = ["Debug", "Clone", "Copy", "Eq"]

# Rust keywords (strict and reserved)
RUST_KEYWORDS = frozenset({
    "as", "async", "await", "break", "const", "continue", "crate", "dyn", "else",
    "enum", "extern", "false", "fn", "for", "if", "impl", "in", "let", "loop",
    "match", "mod", "move", "mut", "pub", "ref", "return", "self", "Self",
    "static", "struct", "super", "trait", "true", "type", "unsafe", "use",
    "where", "while", "abstract", "become", "box", "do", "final", "gen",
    "macro", "override", "priv", "try", "typeof", "unsized", "virtual", "yield",
})

# Keywords that cannot be used even as raw identifiers
RUST_NON_RAW_KEYWORDS = frozenset({"crate", "self", "Self", "super", "_"})
