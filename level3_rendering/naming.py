"""Identifier naming for Level 3 rendering.

Column names and factor levels are arbitrary text; generated code needs
identifiers. A NamingStrategy turns one into the other and can be swapped
out per target language.
"""

import re
from abc import ABC, abstractmethod
from typing import Iterable

from utils import RUST_KEYWORDS, RUST_NON_RAW_KEYWORDS


def split_words(text: str) -> list[str]:
    """Split text into words on separators and camelCase boundaries.

    Examples:
        "light blue" -> ["light", "blue"]
        "fooBar" -> ["foo", "Bar"]
        "HTTPServer" -> ["HTTP", "Server"]
        "dark-red!" -> ["dark", "red"]
    """
    # Anything that cannot appear in an identifier separates words
    text = re.sub(r"[\W_]+", " ", text)
    # Insert breaks at camelCase and acronym boundaries
    text = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", text)
    text = re.sub(r"(?<=[A-Z])(?=[A-Z][a-z])", " ", text)
    return text.split()


def to_pascal_case(text: str) -> str:
    """Convert text to PascalCase ("light blue" -> "LightBlue")."""
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(text))


def to_snake_case(text: str) -> str:
    """Convert text to snake_case ("Foo Bar" -> "foo_bar")."""
    return "_".join(word.lower() for word in split_words(text))


def deduplicate_names(names: Iterable[str], reserved: Iterable[str] = ()) -> list[str]:
    """Make names unique by suffixing later collisions with _2, _3, ...

    Args:
        names: Candidate names, in order
        reserved: Names that are already taken

    Returns:
        Names in the same order, all distinct from each other and from reserved
    """
    taken = set(reserved)
    result = []
    for name in names:
        candidate = name
        counter = 2
        while candidate in taken:
            candidate = f"{name}_{counter}"
            counter += 1
        taken.add(candidate)
        result.append(candidate)
    return result


class NamingStrategy(ABC):
    """Turns arbitrary text into identifiers for generated code."""

    @abstractmethod
    def type_name(self, text: str) -> str:
        """Identifier for a type (record or enumeration)."""

    @abstractmethod
    def field_name(self, text: str) -> str:
        """Identifier for a record field."""

    @abstractmethod
    def variant_name(self, text: str) -> str:
        """Identifier for an enumeration variant."""


class RustNaming(NamingStrategy):
    """PascalCase types and variants, snake_case fields."""

    def type_name(self, text: str) -> str:
        name = to_pascal_case(text) or "Unnamed"
        if name[0].isdigit():
            name = "V" + name
        if name in RUST_KEYWORDS:
            name += "_"
        return name

    def variant_name(self, text: str) -> str:
        return self.type_name(text)

    def field_name(self, text: str) -> str:
        name = to_snake_case(text) or "unnamed"
        if name[0].isdigit():
            name = "_" + name
        if name in RUST_NON_RAW_KEYWORDS:
            return name + "_"
        if name in RUST_KEYWORDS:
            return "r#" + name
        return name
