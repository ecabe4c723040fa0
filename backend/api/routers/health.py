"""
Health check API endpoints.

Routes: GET /health, GET /health/embeddings

Dependencies: backend.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from backend.api.deps import get_service_cache
from backend.api.deps.dependencies import ServiceCache
from backend.boundary.embeddings import NullEmbeddingProvider


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/embeddings", response_model=HealthResponse)
async def health_check_embeddings(
    cache: ServiceCache = Depends(get_service_cache),
) -> HealthResponse:
    """Embedding provider check; degraded when similarity merging is unavailable."""
    if isinstance(cache.embedding_provider, NullEmbeddingProvider):
        return HealthResponse(
            status="degraded",
            message="No embedding provider configured, merging by token floor only",
        )
    return HealthResponse(status="healthy", message="Embedding provider configured")
