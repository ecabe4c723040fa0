"""
Chunking configuration settings.

Token budgets, merge threshold and fallback window for the chunking engine.

Dependencies: pydantic, pydantic_settings
System role: Chunking pipeline configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.core.chunking.models import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MIN_TOKENS,
    DEFAULT_SIMILARITY_THRESHOLD,
    ChunkingOptions,
)
from backend.core.chunking.fallback import DEFAULT_WINDOW_CHARS


class ChunkingSettings(BaseSettings):
    """Chunking engine defaults, overridable per request."""

    model_config = SettingsConfigDict(
        env_prefix="CHUNKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    min_tokens: int = Field(
        default=DEFAULT_MIN_TOKENS,
        ge=0,
        description="Token floor below which neighbouring chunks are merged",
    )
    max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS,
        gt=0,
        description="Token budget above which chunks are split on sentences",
    )
    similarity_threshold: float = Field(
        default=DEFAULT_SIMILARITY_THRESHOLD,
        ge=-1.0,
        le=1.0,
        description="Cosine similarity at or above which neighbours are merged",
    )
    fallback_window_chars: int = Field(
        default=DEFAULT_WINDOW_CHARS,
        gt=0,
        description="Window length for fixed-window fallback chunking",
    )
    embedding_concurrency: int = Field(
        default=8,
        gt=0,
        description="Maximum concurrent embedding calls per document",
    )
    pending_ttl_seconds: float | None = Field(
        default=3600.0,
        description="Lifetime of parked chunking results (None = no expiry)",
    )

    def to_options(self) -> ChunkingOptions:
        """
        Build default pipeline options from settings.

        Returns:
            ChunkingOptions: Options carrying the configured budgets and threshold
        """
        return ChunkingOptions(
            min_tokens=self.min_tokens,
            max_tokens=self.max_tokens,
            similarity_threshold=self.similarity_threshold,
        )
