"""
Chunking options.

Typed configuration record for one pipeline run. Unrecognized keys are
rejected.

Dependencies: pydantic
System role: Pipeline configuration contract
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MIN_TOKENS = 80
DEFAULT_MAX_TOKENS = 400
DEFAULT_SIMILARITY_THRESHOLD = 0.75


class ChunkingOptions(BaseModel):
    """Token budgets and merge threshold for the chunking pipeline."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_tokens: int = Field(
        default=DEFAULT_MIN_TOKENS,
        ge=0,
        description="Chunks below this floor are merged with a neighbour",
    )
    max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS,
        gt=0,
        description="Chunks above this budget are split on sentence boundaries",
    )
    similarity_threshold: float = Field(
        default=DEFAULT_SIMILARITY_THRESHOLD,
        ge=-1.0,
        le=1.0,
        description="Cosine similarity at or above which neighbours are merged",
    )
