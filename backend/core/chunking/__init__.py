"""
Chunking engine.

Turns ordered layout blocks into token-bounded, semantically coherent text
chunks for embedding and retrieval:

    blocks -> group_structurally -> structural_chunks_to_text_chunks
           -> split_large_chunks -> semantic_merge_chunks -> chunks

Dependencies: pydantic
System role: Core document chunking logic
"""

from .embedding_provider import EmbeddingProvider
from .fallback import DEFAULT_WINDOW_CHARS, blocks_to_text, fixed_window_chunks
from .flattener import structural_chunks_to_text_chunks
from .models import (
    BlockType,
    ChunkingOptions,
    LayoutBlock,
    StructuralGroup,
    TextChunk,
)
from .pipeline import chunk_document
from .semantic_merger import semantic_merge_chunks
from .similarity import cosine_similarity
from .splitter import split_large_chunks, split_long_chunk
from .structural_grouper import group_structurally, normalize_level
from .token_estimator import estimate_tokens

__all__ = [
    "BlockType",
    "ChunkingOptions",
    "EmbeddingProvider",
    "LayoutBlock",
    "StructuralGroup",
    "TextChunk",
    "DEFAULT_WINDOW_CHARS",
    "blocks_to_text",
    "chunk_document",
    "cosine_similarity",
    "estimate_tokens",
    "fixed_window_chunks",
    "group_structurally",
    "normalize_level",
    "semantic_merge_chunks",
    "split_large_chunks",
    "split_long_chunk",
    "structural_chunks_to_text_chunks",
]
