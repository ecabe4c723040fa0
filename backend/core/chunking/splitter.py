"""
Token-budget splitting of oversized chunks.

Splits chunks whose estimated token count exceeds the budget along sentence
boundaries. Text without sentence-ending punctuation cannot be subdivided
and is kept as a single oversized chunk.

Dependencies: backend.core.chunking.models, backend.core.chunking.token_estimator
System role: Third stage of the chunking pipeline
"""

import logging
import re
from collections.abc import Iterable
from typing import Any

from .models import DEFAULT_MAX_TOKENS, TextChunk
from .token_estimator import estimate_tokens

logger = logging.getLogger(__name__)

# Whitespace that follows ., ! or ?
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentences on whitespace after terminal punctuation.

    Args:
        text: Text to split

    Returns:
        list[str]: Non-empty sentences; unterminated text stays one sentence
    """
    return [sentence for sentence in SENTENCE_BOUNDARY.split(text) if sentence]


def split_long_chunk(chunk: TextChunk, max_tokens: int = DEFAULT_MAX_TOKENS) -> list[TextChunk]:
    """
    Split one chunk into sub-chunks within the token budget.

    Sentences are accumulated greedily. The buffer is flushed before a
    sentence that would push it over max_tokens, and as soon as its estimate
    reaches max_tokens. A single sentence over budget becomes its own chunk.
    Sub-chunks inherit heading path, pages and block ids and are numbered
    <chunk_id>_1, <chunk_id>_2, ...

    Args:
        chunk: Chunk to split
        max_tokens: Token budget per chunk

    Returns:
        list[TextChunk]: [chunk] when already within budget, otherwise the sub-chunks
    """
    if not chunk.text or chunk.token_count <= max_tokens:
        return [chunk]

    result: list[TextChunk] = []
    buffer: list[str] = []

    def flush() -> None:
        if not buffer:
            return
        result.append(
            chunk.model_copy(
                update={
                    "chunk_id": f"{chunk.chunk_id}_{len(result) + 1}",
                    "text": " ".join(buffer),
                }
            )
        )
        buffer.clear()

    for sentence in split_sentences(chunk.text):
        if buffer and estimate_tokens(" ".join([*buffer, sentence])) > max_tokens:
            flush()
        buffer.append(sentence)
        if estimate_tokens(" ".join(buffer)) >= max_tokens:
            flush()
    flush()

    if len(result) == 1:
        logger.warning(
            f"Chunk {chunk.chunk_id} could not be subdivided, "
            f"kept at {result[0].token_count} tokens (budget {max_tokens})"
        )
    return result


def split_large_chunks(
    chunks: Iterable[Any] | None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> list[TextChunk]:
    """
    Apply split_long_chunk to every chunk over budget.

    Entries that are not chunks or whose text is not a string are dropped.

    Args:
        chunks: Chunks from the flattener
        max_tokens: Token budget per chunk

    Returns:
        list[TextChunk]: Chunks in original order, oversized ones replaced by their parts
    """
    result: list[TextChunk] = []
    for chunk in chunks or []:
        if not isinstance(chunk, TextChunk) or not isinstance(chunk.text, str):
            continue
        if chunk.token_count > max_tokens:
            result.extend(split_long_chunk(chunk, max_tokens))
        else:
            result.append(chunk)
    return result
