"""
Models for the chunking pipeline.

Exports: LayoutBlock, BlockType, StructuralGroup, TextChunk, ChunkingOptions
"""

from .layout_block import STANDALONE_BLOCK_TYPES, BlockType, LayoutBlock
from .options import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MIN_TOKENS,
    DEFAULT_SIMILARITY_THRESHOLD,
    ChunkingOptions,
)
from .structural_group import StructuralGroup
from .text_chunk import TextChunk

__all__ = [
    "BlockType",
    "LayoutBlock",
    "STANDALONE_BLOCK_TYPES",
    "StructuralGroup",
    "TextChunk",
    "ChunkingOptions",
    "DEFAULT_MIN_TOKENS",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_SIMILARITY_THRESHOLD",
]
