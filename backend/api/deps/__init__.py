"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chunking_service,
    get_pending_store,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_chunking_service",
    "get_pending_store",
    "get_service_cache",
    "get_settings_dependency",
]
