"""Per-cell classification for Level 2 inference.

Every cell is classified, in priority order, as Empty, Integer (fits a
32-bit signed integer), Real (parses as a 32-bit float) or Factor.
Classification is a pure function of the cell text.
"""

import re

from .types import ClassifiedValue

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Plain decimal integer; no whitespace, underscores or radix prefixes.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Decimal float with optional fraction and exponent, plus the special values.
# Anything within this syntax is a valid f32 (large magnitudes round to inf).
_REAL_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def is_int32(text: str) -> bool:
    """Return True if text is a decimal integer that fits in 32 bits."""
    if not _INTEGER_PATTERN.fullmatch(text):
        return False
    # More than 10 significant digits never fits in 32 bits
    if len(text.lstrip("+-").lstrip("0")) > 10:
        return False
    return INT32_MIN <= int(text) <= INT32_MAX


def is_float32(text: str) -> bool:
    """Return True if text parses as a 32-bit float."""
    return _REAL_PATTERN.fullmatch(text) is not None


def classify_value(text: str) -> ClassifiedValue:
    """Classify a single cell.

    Args:
        text: Raw cell text, exactly as read

    Returns:
        ClassifiedValue; factors carry ``text`` verbatim (not trimmed or case-folded)
    """
    if text == "":
        return ClassifiedValue.empty()
    if is_int32(text):
        return ClassifiedValue.integer()
    if is_float32(text):
        return ClassifiedValue.real()
    return ClassifiedValue.factor(text)
