"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.api.deps.dependencies import get_service_cache
from backend.configs import get_settings
from backend.core.exceptions import DocInsightException, ValidationError
from backend.models.common import ErrorResponse
from backend.observability.logger import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import chunks_router, health_router

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    # Startup
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    _ = cache.embedding_provider
    _ = cache.pending_store
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


async def handle_domain_error(request: Request, exc: DocInsightException) -> JSONResponse:
    """Render domain exceptions as ErrorResponse bodies (422 for invalid input, else 500)."""
    status_code = 422 if isinstance(exc, ValidationError) else 500
    logger.log(
        logging.WARNING if status_code < 500 else logging.ERROR,
        f"{request.method} {request.url.path} - {type(exc).__name__}: {exc.message}",
        extra={"error_type": type(exc).__name__, "path": request.url.path},
    )
    body = ErrorResponse(error=exc.message, details=exc.details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="DocInsight Chunking API",
        description="Structural and semantic chunking of parsed documents",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(DocInsightException, handle_domain_error)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(chunks_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "backend.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
