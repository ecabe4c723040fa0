"""
Gemini embedding model pinned to one output dimension.

Similarity between neighbouring chunks is only defined for vectors of equal
length, so every query embedding must come back with the configured
dimension. GoogleGenerativeAIEmbeddings drops output_dimensionality given to
its constructor, hence the per-call override below.

Dependencies: langchain_google_genai
System role: Google-backed embedding model for semantic merging
"""

import logging
from typing import List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings whose query calls default to a fixed dimension."""

    _output_dimensionality: int = 768

    def __init__(
        self,
        model: str = "models/text-embedding-004",
        output_dimensionality: int = 768,
        **kwargs,
    ) -> None:
        """
        Args:
            model: Google embedding model ID
            output_dimensionality: Vector length for every query call
            **kwargs: Passed to GoogleGenerativeAIEmbeddings (google_api_key, ...)

        Note:
            text-embedding-004 tops out at 768 dimensions, gemini-embedding-001 at 3072.
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Embedding model {model} pinned to "
            f"{output_dimensionality} dimensions"
        )

    def _dimension(self, override: int | None) -> int:
        return override or self._output_dimensionality

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        """Embed one text at the pinned dimension unless the caller overrides it."""
        return super().embed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=self._dimension(output_dimensionality),
        )

    async def aembed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        """Async embed_query; this is the path the chunking provider uses."""
        return await super().aembed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=self._dimension(output_dimensionality),
        )
