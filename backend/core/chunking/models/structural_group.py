"""
Structural group model.

Intermediate aggregate of layout blocks sharing a heading context, created
and closed inside a single grouping pass.

Dependencies: pydantic
System role: Grouper output, flattener input
"""

from pydantic import BaseModel, Field

from .layout_block import LayoutBlock


class StructuralGroup(BaseModel):
    """Ordered run of blocks under one heading path."""

    blocks: list[LayoutBlock] = Field(default_factory=list)
    heading_path: list[str] = Field(default_factory=list, max_length=3)
    pages: set[int] = Field(default_factory=set)
