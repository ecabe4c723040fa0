"""
Text chunk model.

The externally visible unit of the chunking pipeline, ready for embedding
and retrieval.

Dependencies: pydantic
System role: Chunking pipeline output contract
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from backend.core.chunking.token_estimator import estimate_tokens


class TextChunk(BaseModel):
    """Token-bounded span of document text with structural lineage."""

    model_config = ConfigDict(frozen=True)

    chunk_id: str = Field(description="Positional identifier, e.g. chunk_3 or chunk_3_2")
    text: str = Field(default="", description="Chunk text, sections separated by a blank line")
    heading_path: list[str] = Field(default_factory=list, description="Up to 3 enclosing headings")
    page_range: list[int] = Field(default_factory=list, description="Sorted, deduplicated source pages")
    block_ids: list[str] = Field(default_factory=list, description="Originating layout block ids")

    @field_validator("page_range")
    @classmethod
    def _normalize_pages(cls, value: list[int]) -> list[int]:
        return sorted(set(value))

    @computed_field
    @property
    def token_count(self) -> int:
        """Estimated token count, always derived from text."""
        return estimate_tokens(self.text)
