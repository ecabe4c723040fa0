"""
Fixed-window fallback chunking.

Degraded strategy used when the structural pipeline fails: the document
text is cut into consecutive fixed-length character windows.

Dependencies: backend.core.chunking.models
System role: Fallback chunking for the chunking service
"""

from collections.abc import Iterable

from .flattener import SECTION_SEPARATOR
from .models import LayoutBlock, TextChunk

DEFAULT_WINDOW_CHARS = 1000


def blocks_to_text(blocks: Iterable[LayoutBlock | dict] | None) -> str:
    """
    Join the non-empty texts of raw blocks with a blank line.

    Entries that are neither blocks nor dicts are skipped.
    """
    texts = []
    for block in blocks or []:
        if isinstance(block, LayoutBlock):
            text = block.text
        elif isinstance(block, dict):
            text = block.get("text")
        else:
            continue
        if isinstance(text, str) and text:
            texts.append(text)
    return SECTION_SEPARATOR.join(texts)


def fixed_window_chunks(text: str, window_chars: int = DEFAULT_WINDOW_CHARS) -> list[TextChunk]:
    """
    Cut text into fixed-length character windows.

    Args:
        text: Full document text
        window_chars: Window length in characters

    Returns:
        list[TextChunk]: chunk_1, chunk_2, ... without heading or page lineage

    Raises:
        ValueError: When window_chars is not positive
    """
    if window_chars <= 0:
        raise ValueError(f"window_chars must be positive, got {window_chars}")
    if not text:
        return []
    return [
        TextChunk(chunk_id=f"chunk_{n}", text=text[start:start + window_chars])
        for n, start in enumerate(range(0, len(text), window_chars), start=1)
    ]
