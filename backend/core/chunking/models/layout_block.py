"""
Layout block model.

The atomic input unit of the chunking pipeline, produced by an upstream
layout/parsing collaborator (PDF, Word, web page extractors).

Dependencies: pydantic
System role: Chunking pipeline input contract
"""

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlockType(str, enum.Enum):
    """Known layout block types."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    TABLE = "table"
    FIGURE = "figure"
    CAPTION = "caption"


# Block types that always form a group of their own
STANDALONE_BLOCK_TYPES = frozenset(
    {BlockType.LIST, BlockType.TABLE, BlockType.FIGURE, BlockType.CAPTION}
)


class LayoutBlock(BaseModel):
    """Single layout block extracted from a document."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="Block identifier, unique within a document")
    type: str = Field(default=BlockType.PARAGRAPH.value, description="Block type (heading, paragraph, ...)")
    text: str = Field(default="", description="Raw text content, empty for non-text figures")
    level: int | None = Field(default=None, description="Heading level 1-3, headings only")
    page: int | None = Field(default=None, description="Source page number")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> str:
        if isinstance(value, BlockType):
            return value.value
        if not isinstance(value, str) or not value:
            return BlockType.PARAGRAPH.value
        return value.lower()

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        # Malformed text is tolerated as empty rather than rejected
        return value if isinstance(value, str) else ""

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> int | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @field_validator("page", mode="before")
    @classmethod
    def _coerce_page(cls, value: Any) -> int | None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return None
        return value

    @property
    def is_heading(self) -> bool:
        """Whether this block opens a new section."""
        return self.type == BlockType.HEADING.value

    @property
    def is_standalone(self) -> bool:
        """Whether this block is always chunked on its own."""
        return self.type in {t.value for t in STANDALONE_BLOCK_TYPES}
