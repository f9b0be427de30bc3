"""Generation pipeline."""

from .generator import GenerationResult, SchemaGenerator

__all__ = ["GenerationResult", "SchemaGenerator"]
