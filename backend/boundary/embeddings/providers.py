"""
Embedding providers for the chunking engine.

Adapters from LangChain embedding models to the chunking engine's
text -> vector contract.

Dependencies: langchain_core, backend.core.exceptions
System role: Embedding provider implementations
"""

import logging

from langchain_core.embeddings import Embeddings

from backend.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_CHARS = 2048


class NullEmbeddingProvider:
    """Provider used when no embedding model is configured; always returns []."""

    async def get_embedding(self, text: str) -> list[float]:
        return []


class LangChainEmbeddingProvider:
    """Embedding provider backed by any LangChain Embeddings model."""

    def __init__(
        self,
        embeddings: Embeddings,
        max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
    ) -> None:
        """
        Initialize provider.

        Args:
            embeddings: LangChain embeddings model
            max_input_chars: Text is truncated to this many characters before embedding

        Raises:
            ValueError: When max_input_chars is not positive
        """
        if max_input_chars <= 0:
            raise ValueError("max_input_chars must be positive")
        self._embeddings = embeddings
        self.max_input_chars = max_input_chars

    async def get_embedding(self, text: str) -> list[float]:
        """
        Embed one chunk text.

        Args:
            text: Chunk text

        Returns:
            list[float]: Embedding vector, [] for empty text

        Raises:
            EmbeddingError: When the embedding model call fails
        """
        if not text:
            return []
        try:
            vector = await self._embeddings.aembed_query(text[: self.max_input_chars])
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embedding: {e}",
                details={"model": type(self._embeddings).__name__},
            ) from e
        return [float(value) for value in vector]
