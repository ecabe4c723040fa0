"""
Flattening of structural groups into text chunks.

Dependencies: backend.core.chunking.models
System role: Second stage of the chunking pipeline
"""

from collections.abc import Iterable

from .models import StructuralGroup, TextChunk

SECTION_SEPARATOR = "\n\n"


def structural_chunks_to_text_chunks(groups: Iterable[StructuralGroup] | None) -> list[TextChunk]:
    """
    Convert structural groups into positional text chunks.

    Args:
        groups: Groups produced by group_structurally

    Returns:
        list[TextChunk]: One chunk per group, ids chunk_1, chunk_2, ...
    """
    chunks = []
    for index, group in enumerate(groups or [], start=1):
        text = SECTION_SEPARATOR.join(block.text for block in group.blocks if block.text)
        chunks.append(
            TextChunk(
                chunk_id=f"chunk_{index}",
                text=text,
                heading_path=list(group.heading_path),
                page_range=sorted(group.pages),
                block_ids=[block.id for block in group.blocks if block.id],
            )
        )
    return chunks
