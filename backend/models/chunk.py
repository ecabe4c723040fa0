"""
Chunking domain models and schemas.

Service results and request/response schemas for chunking operations.

Dependencies: pydantic, backend.core.chunking
System role: Chunking API contracts
"""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from backend.core.chunking.models import ChunkingOptions, LayoutBlock, TextChunk


class ChunkingStrategy(str, enum.Enum):
    """How a document was chunked."""

    STRUCTURAL = "structural"
    FIXED_WINDOW = "fixed_window"


class EmbeddedChunk(TextChunk):
    """Final chunk with its persisted embedding attached."""

    embedding: list[float] = Field(default_factory=list, description="Embedding vector, [] if unavailable")


class ChunkingResult(BaseModel):
    """Result of chunking one document."""

    chunks: list[SerializeAsAny[TextChunk]] = Field(default_factory=list)
    strategy: ChunkingStrategy = Field(description="Strategy that produced the chunks")
    degraded: bool = Field(default=False, description="True when the fallback strategy was used")
    processing_time_ms: float = Field(description="Total chunking time in milliseconds")
    document_id: str | None = Field(default=None, description="Document the chunks belong to")

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)


class ChunkDocumentRequest(BaseModel):
    """Request schema for chunking a document's layout blocks."""

    model_config = ConfigDict(extra="forbid")

    blocks: list[LayoutBlock] = Field(description="Ordered layout blocks of one document")
    options: ChunkingOptions | None = Field(
        default=None,
        description="min_tokens, max_tokens, similarity_threshold (server defaults if omitted)",
    )
    document_id: str | None = Field(
        default=None,
        description="When set, the result is parked for review under this id",
    )
    include_embeddings: bool = Field(
        default=False,
        description="Attach an embedding vector to every final chunk",
    )


class PendingDocumentSummary(BaseModel):
    """Summary of a parked chunking result."""

    document_id: str
    chunk_count: int
    strategy: ChunkingStrategy
    degraded: bool
    created_at: datetime
    expires_at: datetime | None = None


class PendingDocumentListResponse(BaseModel):
    """List of parked chunking results."""

    documents: list[PendingDocumentSummary]
    total: int
