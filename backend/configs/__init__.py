"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from backend.configs.chunking import ChunkingSettings
from backend.configs.embedding import EmbeddingSettings
from backend.configs.settings import Settings, get_settings

__all__ = ["Settings", "ChunkingSettings", "EmbeddingSettings", "get_settings"]
