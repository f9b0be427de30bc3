"""Generator option definitions using Pydantic.

This module defines the immutable options that control how an inferred
schema is rendered. Options can come from a YAML/JSON file, CLI flags, or
both (flags win).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils import (
    DEFAULT_DERIVES,
    DEFAULT_ENCODING,
    DEFAULT_RECORD_NAME,
    RUST_KEYWORDS,
    RUST_NON_RAW_KEYWORDS,
)


class OutputFormat(str, Enum):
    """Supported output formats."""

    RUST = "rust"
    JSON = "json"


def _check_identifier(value: str, what: str) -> str:
    value = value.strip()
    if not value.isidentifier():
        raise ValueError(f"{what} must be a valid identifier, got {value!r}")
    if value in RUST_KEYWORDS or value in RUST_NON_RAW_KEYWORDS:
        raise ValueError(f"{what} cannot be a Rust keyword, got {value!r}")
    return value


class GeneratorOptions(BaseModel):
    """Options for one generation run.

    Once validated, options are read-only.
    """

    record_name: str = Field(
        default=DEFAULT_RECORD_NAME, min_length=1, description="Name of the generated record type"
    )
    derives: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DERIVES),
        description="Traits derived by the generated types",
    )
    public: bool = Field(default=True, description="Emit public items and fields")
    serde_rename: bool = Field(
        default=False, description="Emit serde rename attributes for normalized names"
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.RUST, description="Format of the generated output"
    )
    delimiter: Optional[str] = Field(
        default=None, description="Field delimiter (defaults to the file extension's)"
    )
    encoding: str = Field(default=DEFAULT_ENCODING, min_length=1, description="Input text encoding")

    @field_validator("record_name")
    @classmethod
    def validate_record_name(cls, v: str) -> str:
        """Validate record name."""
        return _check_identifier(v, "record_name")

    @field_validator("derives")
    @classmethod
    def validate_derives(cls, v: list[str]) -> list[str]:
        """Validate derived trait names."""
        return [_check_identifier(name, "derives entry") for name in v]

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: Optional[str]) -> Optional[str]:
        """Validate delimiter."""
        if v is None:
            return v
        if v == "\\t":
            v = "\t"
        if len(v) != 1:
            raise ValueError(f"delimiter must be a single character, got {v!r}")
        if v in ('"', "\r", "\n"):
            raise ValueError(f"delimiter cannot be {v!r}")
        return v

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
