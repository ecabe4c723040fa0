"""Service orchestrators."""

from .chunking_service import ChunkingService

__all__ = [
    "ChunkingService",
]
