"""Data models for category indexes."""

from mdindex.models.document import (
    Document,
    GenerationResult,
    IndexPage,
    SkippedFile,
)

__all__ = [
    "Document",
    "GenerationResult",
    "IndexPage",
    "SkippedFile",
]
