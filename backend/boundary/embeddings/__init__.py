"""
Embedding providers.

Exports: build_embedding_provider, LangChainEmbeddingProvider, NullEmbeddingProvider
"""

from .factory import build_embedding_provider
from .providers import LangChainEmbeddingProvider, NullEmbeddingProvider

__all__ = [
    "build_embedding_provider",
    "LangChainEmbeddingProvider",
    "NullEmbeddingProvider",
]
