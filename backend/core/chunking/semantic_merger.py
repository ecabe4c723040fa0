"""
Semantic merging of adjacent chunks.

Walks the chunk sequence left to right and merges a chunk into its
predecessor when either is under the token floor or when their embeddings
are similar enough. Only adjacent chunks are ever merged.

Embeddings are fetched concurrently, re-joined by index, and the merge
fold itself runs strictly in document order. The embedding carried by an
accumulated chunk is the one of its first member; it is not recomputed
after a merge.

Dependencies: asyncio, backend.core.chunking
System role: Final stage of the chunking pipeline
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from backend.observability.log_utils import log_with_context

from .embedding_provider import EmbeddingProvider
from .flattener import SECTION_SEPARATOR
from .models import DEFAULT_MIN_TOKENS, DEFAULT_SIMILARITY_THRESHOLD, TextChunk
from .similarity import cosine_similarity, is_comparable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Candidate:
    """Chunk paired with the embedding it is compared by."""

    chunk: TextChunk
    embedding: list[float]


async def _safe_embedding(
    provider: EmbeddingProvider,
    chunk: TextChunk,
    semaphore: asyncio.Semaphore | None,
) -> list[float]:
    """Fetch one embedding, degrading to [] when the provider fails."""
    try:
        if semaphore is None:
            vector = await provider.get_embedding(chunk.text)
        else:
            async with semaphore:
                vector = await provider.get_embedding(chunk.text)
        embedding = [float(value) for value in vector] if vector is not None else []
    except Exception as e:
        log_with_context(
            logger,
            logging.WARNING,
            f"Embedding failed for {chunk.chunk_id}, falling back to token floor",
            chunk_id=chunk.chunk_id,
            error_type=type(e).__name__,
            error_msg=str(e),
        )
        return []
    return embedding


async def fetch_embeddings(
    provider: EmbeddingProvider,
    chunks: Sequence[TextChunk],
    max_concurrency: int | None = None,
) -> list[list[float]]:
    """
    Fetch embeddings for all chunks concurrently.

    Args:
        provider: Embedding provider
        chunks: Chunks to embed
        max_concurrency: Cap on in-flight provider calls (None = unbounded)

    Returns:
        list[list[float]]: Embeddings aligned with chunks by index
    """
    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None
    return list(
        await asyncio.gather(*(_safe_embedding(provider, chunk, semaphore) for chunk in chunks))
    )


def merge_pair(current: TextChunk, nxt: TextChunk) -> TextChunk:
    """
    Combine two adjacent chunks into one.

    Args:
        current: Accumulated chunk (keeps its id)
        nxt: Following chunk

    Returns:
        TextChunk: Joined text, union of pages, first non-empty heading path,
            concatenated block ids
    """
    text = SECTION_SEPARATOR.join(part for part in (current.text, nxt.text) if part)
    return current.model_copy(
        update={
            "text": text,
            "page_range": sorted(set(current.page_range) | set(nxt.page_range)),
            "heading_path": list(current.heading_path or nxt.heading_path),
            "block_ids": [*current.block_ids, *nxt.block_ids],
        }
    )


def should_merge(
    current: _Candidate,
    nxt: _Candidate,
    min_tokens: int,
    similarity_threshold: float,
) -> bool:
    """Token-floor rule, then similarity rule."""
    if current.chunk.token_count < min_tokens or nxt.chunk.token_count < min_tokens:
        return True
    if not is_comparable(current.embedding, nxt.embedding):
        return False
    return cosine_similarity(current.embedding, nxt.embedding) >= similarity_threshold


async def semantic_merge_chunks(
    chunks: Sequence[TextChunk] | None,
    provider: EmbeddingProvider,
    min_tokens: int = DEFAULT_MIN_TOKENS,
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    max_concurrency: int | None = None,
) -> list[TextChunk]:
    """
    Merge undersized or similar neighbouring chunks.

    Args:
        chunks: Chunks in document order
        provider: Embedding provider used for similarity
        min_tokens: Token floor below which a chunk is always merged
        similarity_threshold: Cosine similarity that triggers a merge
        max_concurrency: Cap on concurrent provider calls

    Returns:
        list[TextChunk]: Merged chunks in document order
    """
    chunks = list(chunks or [])
    if not chunks:
        return []

    embeddings = await fetch_embeddings(provider, chunks, max_concurrency)
    candidates = [_Candidate(chunk, embedding) for chunk, embedding in zip(chunks, embeddings)]

    merged: list[TextChunk] = []
    current = candidates[0]
    for nxt in candidates[1:]:
        if should_merge(current, nxt, min_tokens, similarity_threshold):
            current = _Candidate(merge_pair(current.chunk, nxt.chunk), current.embedding)
        else:
            merged.append(current.chunk)
            current = nxt
    merged.append(current.chunk)

    logger.debug(f"Semantic merge reduced {len(chunks)} chunks to {len(merged)}")
    return merged
