"""
Embedding provider factory.

Selects the embedding provider from EMBEDDING_PROVIDER and credentials.

Dependencies: backend.boundary.embeddings, backend.configs
System role: Embedding provider instantiation and selection
"""

import logging

from backend.boundary.embeddings.providers import (
    LangChainEmbeddingProvider,
    NullEmbeddingProvider,
)
from backend.configs.embedding import EmbeddingSettings
from backend.core.chunking import EmbeddingProvider

logger = logging.getLogger(__name__)


def build_embedding_provider(settings: EmbeddingSettings) -> EmbeddingProvider:
    """
    Build the configured embedding provider.

    Args:
        settings: Embedding settings

    Returns:
        EmbeddingProvider: Google-backed provider, or NullEmbeddingProvider when
            disabled or no API key is set

    Raises:
        ValueError: If EMBEDDING_PROVIDER is invalid
    """
    provider = settings.provider.lower()

    if provider == "none":
        logger.info(f"{__name__}:build_embedding_provider - Embeddings disabled")
        return NullEmbeddingProvider()

    if provider == "google":
        if not settings.google_api_key:
            logger.warning(
                f"{__name__}:build_embedding_provider - No Google API key configured, "
                "semantic merging limited to the token floor"
            )
            return NullEmbeddingProvider()

        from backend.boundary.embeddings.google_embeddings import FixedDimensionEmbeddings

        embeddings = FixedDimensionEmbeddings(
            model=settings.model,
            output_dimensionality=settings.output_dimensionality,
            google_api_key=settings.google_api_key,
        )
        return LangChainEmbeddingProvider(embeddings, max_input_chars=settings.max_input_chars)

    raise ValueError(
        f"Invalid EMBEDDING_PROVIDER: {provider}. Must be 'google' or 'none'."
    )
