"""
Structural grouping of layout blocks.

Partitions an ordered block sequence into structural groups. Headings and
atomic content (lists, tables, figures, captions) act as group boundaries;
paragraphs accumulate until the next boundary.

Dependencies: backend.core.chunking.models
System role: First stage of the chunking pipeline
"""

import logging
from collections.abc import Iterable
from typing import Any

from .models import LayoutBlock, StructuralGroup

logger = logging.getLogger(__name__)

MAX_HEADING_DEPTH = 3
DEFAULT_HEADING_LEVEL = 2


def normalize_level(level: Any) -> int:
    """
    Map a heading level onto 1, 2 or 3.

    Args:
        level: Raw level from the parser

    Returns:
        int: The level itself when it is 1-3, otherwise 2
    """
    if isinstance(level, int) and not isinstance(level, bool) and 1 <= level <= MAX_HEADING_DEPTH:
        return level
    return DEFAULT_HEADING_LEVEL


def _next_heading_path(path: list[str], text: str, level: int) -> list[str]:
    """Heading path after entering a heading of the given level."""
    parents = [path[i] if i < len(path) else None for i in range(level - 1)]
    return [entry for entry in (*parents, text) if entry]


def _as_block(block: Any) -> LayoutBlock | None:
    """Validate a raw entry; anything that is neither a block nor a dict is skipped."""
    if isinstance(block, LayoutBlock):
        return block
    if isinstance(block, dict):
        return LayoutBlock.model_validate(block)
    logger.debug(f"Skipping non-block entry of type {type(block).__name__}")
    return None


class _GroupBuilder:
    """Mutable state for one grouping pass."""

    def __init__(self) -> None:
        self.groups: list[StructuralGroup] = []
        self.heading_path: list[str] = []
        self.blocks: list[LayoutBlock] = []
        self.pages: set[int] = set()

    def add(self, block: LayoutBlock) -> None:
        self.blocks.append(block)
        if block.page is not None:
            self.pages.add(block.page)

    def close(self) -> None:
        if not self.blocks:
            return
        self.groups.append(
            StructuralGroup(
                blocks=self.blocks,
                heading_path=list(self.heading_path),
                pages=set(self.pages),
            )
        )
        self.blocks = []
        self.pages = set()

    def emit_standalone(self, block: LayoutBlock) -> None:
        self.close()
        self.add(block)
        self.close()


def group_structurally(blocks: Iterable[LayoutBlock | dict] | None) -> list[StructuralGroup]:
    """
    Group layout blocks into structural groups in a single pass.

    A heading closes the current group, updates the heading path and becomes
    the first member of the next group. Lists, tables, figures and captions
    are emitted as one-block groups under the current heading path. All other
    blocks join the current group.

    Args:
        blocks: Ordered layout blocks (models or plain dicts; other entries are skipped)

    Returns:
        list[StructuralGroup]: Non-empty groups in document order
    """
    builder = _GroupBuilder()

    for raw in blocks or []:
        block = _as_block(raw)
        if block is None:
            continue

        if block.is_heading:
            builder.close()
            builder.heading_path = _next_heading_path(
                builder.heading_path, block.text, normalize_level(block.level)
            )
            builder.add(block)
            continue

        if block.is_standalone:
            builder.emit_standalone(block)
            continue

        builder.add(block)

    builder.close()
    logger.debug(f"Grouped blocks into {len(builder.groups)} structural groups")
    return builder.groups
