"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from backend.application.pending_documents import PendingDocumentStore
from backend.application.services import ChunkingService
from backend.boundary.embeddings import build_embedding_provider
from backend.configs import Settings, get_settings
from backend.core.chunking import EmbeddingProvider


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._embedding_provider = None
        self._pending_store = None

    @property
    def embedding_provider(self) -> EmbeddingProvider:
        """Get cached embedding provider."""
        if self._embedding_provider is None:
            self._embedding_provider = build_embedding_provider(get_settings().embedding)
        return self._embedding_provider

    @property
    def pending_store(self) -> PendingDocumentStore:
        """Get cached pending-document store."""
        if self._pending_store is None:
            self._pending_store = PendingDocumentStore(
                ttl_seconds=get_settings().chunking.pending_ttl_seconds,
            )
        return self._pending_store

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedding_provider = None
        self._pending_store = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_pending_store() -> PendingDocumentStore:
    """
    Get pending-document store.

    Returns:
        PendingDocumentStore: Process-wide store of parked chunking results
    """
    return get_service_cache().pending_store


def get_chunking_service(
    settings: Settings = Depends(get_settings_dependency),
    store: PendingDocumentStore = Depends(get_pending_store),
) -> ChunkingService:
    """
    Get chunking service instance.

    Args:
        settings: Application settings (injected via Depends)
        store: Pending-document store (injected via Depends)

    Returns:
        ChunkingService: Chunking service sharing the cached embedding provider
    """
    return ChunkingService(
        provider=get_service_cache().embedding_provider,
        store=store,
        settings=settings.chunking,
    )
