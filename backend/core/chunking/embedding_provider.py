"""
Embedding provider contract.

The chunking pipeline only needs text -> vector for similarity comparison.
Concrete providers live in backend.boundary.embeddings.

Dependencies: typing
System role: Collaborator interface for semantic merging
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Maps text to a fixed-length vector; [] means no embedding available."""

    async def get_embedding(self, text: str) -> list[float]:
        ...
