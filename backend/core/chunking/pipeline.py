"""
Chunking pipeline orchestrator.

Composes structural grouping, flattening, budget splitting and semantic
merging into one call. Holds no state between calls.

Dependencies: backend.core.chunking
System role: Entry point of the chunking engine
"""

import logging
from collections.abc import Iterable

from .embedding_provider import EmbeddingProvider
from .flattener import structural_chunks_to_text_chunks
from .models import ChunkingOptions, LayoutBlock, TextChunk
from .semantic_merger import semantic_merge_chunks
from .splitter import split_large_chunks
from .structural_grouper import group_structurally

logger = logging.getLogger(__name__)


async def chunk_document(
    blocks: Iterable[LayoutBlock | dict] | None,
    provider: EmbeddingProvider,
    options: ChunkingOptions | None = None,
    max_concurrency: int | None = None,
) -> list[TextChunk]:
    """
    Turn layout blocks into budget-compliant, semantically merged chunks.

    Args:
        blocks: Ordered layout blocks of one document
        provider: Embedding provider for the merge stage
        options: Token budgets and similarity threshold (defaults 80/400/0.75)
        max_concurrency: Cap on concurrent embedding calls

    Returns:
        list[TextChunk]: Final chunks in document order ([] for no blocks)
    """
    options = options if options is not None else ChunkingOptions()

    groups = group_structurally(blocks)
    if not groups:
        return []

    chunks = structural_chunks_to_text_chunks(groups)
    chunks = split_large_chunks(chunks, options.max_tokens)
    merged = await semantic_merge_chunks(
        chunks,
        provider,
        min_tokens=options.min_tokens,
        similarity_threshold=options.similarity_threshold,
        max_concurrency=max_concurrency,
    )

    logger.info(
        f"Chunked document: {len(groups)} groups -> {len(chunks)} sized chunks "
        f"-> {len(merged)} final chunks"
    )
    return merged
