"""
Embedding provider configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Embedding provider selection and model configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding provider configuration (Google Gemini or disabled)."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="google",
        description="Embedding provider: 'google' or 'none'",
    )
    model: str = Field(
        default="models/text-embedding-004",
        description="Google embedding model ID",
    )
    output_dimensionality: int = Field(
        default=768,
        gt=0,
        description="Fixed embedding dimension (text-embedding-004 supports max 768)",
    )
    max_input_chars: int = Field(
        default=2048,
        gt=0,
        description="Characters of chunk text sent to the embedding model",
    )
    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("EMBEDDING_GOOGLE_API_KEY", "GOOGLE_API_KEY"),
        description="Google AI API key",
    )
