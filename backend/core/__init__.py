"""
Core business logic module.

Contains the chunking engine and the exception hierarchy.
All business rules and domain-specific logic reside here.
"""

from backend.core.exceptions import (
    DocInsightException,
    ValidationError,
    DocumentProcessingError,
    ChunkingError,
    EmbeddingError,
)

__all__ = [
    "DocInsightException",
    "ValidationError",
    "DocumentProcessingError",
    "ChunkingError",
    "EmbeddingError",
]
