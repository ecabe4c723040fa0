"""
Chunking API endpoints.

Routes: POST /chunks, GET /chunks/pending, GET /chunks/pending/{document_id},
DELETE /chunks/pending/{document_id}

Dependencies: backend.application, backend.models
System role: Document chunking HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from backend.api.deps import get_chunking_service, get_pending_store
from backend.application.pending_documents import PendingDocumentStore
from backend.application.services import ChunkingService
from backend.models.chunk import (
    ChunkDocumentRequest,
    ChunkingResult,
    PendingDocumentListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chunks", tags=["chunks"])


@router.post("", response_model=ChunkingResult)
async def chunk_document(
    request: ChunkDocumentRequest,
    chunking_service: ChunkingService = Depends(get_chunking_service),
) -> JSONResponse:
    """
    Chunk a document's layout blocks.

    Blocks are grouped by structure, split to the token budget and merged
    by size and similarity. If the structural pipeline fails, fixed-window
    chunks are returned with degraded=true.

    Args:
        request: Blocks, options and optional document id
        chunking_service: Injected ChunkingService

    Returns:
        ChunkingResult: Final chunks with strategy and timing

    Example Request:
        {
            "blocks": [
                {"id": "b1", "type": "heading", "level": 1, "text": "Intro", "page": 1},
                {"id": "b2", "type": "paragraph", "text": "Short.", "page": 1}
            ],
            "options": {"min_tokens": 80, "max_tokens": 400, "similarity_threshold": 0.75}
        }
    """
    result = await chunking_service.chunk_blocks(
        request.blocks,
        options=request.options,
        document_id=request.document_id,
        include_embeddings=request.include_embeddings,
    )
    # Dumped directly so embedded chunks keep their embedding field
    return JSONResponse(content=result.model_dump(mode="json"))


@router.get("/pending", response_model=PendingDocumentListResponse)
async def list_pending_documents(
    store: PendingDocumentStore = Depends(get_pending_store),
) -> PendingDocumentListResponse:
    """List parked chunking results, oldest first."""
    documents = [entry.to_summary() for entry in store.list_pending()]
    return PendingDocumentListResponse(documents=documents, total=len(documents))


@router.get("/pending/{document_id}", response_model=ChunkingResult)
async def get_pending_document(
    document_id: str,
    store: PendingDocumentStore = Depends(get_pending_store),
) -> JSONResponse:
    """
    Get a parked chunking result.

    Raises:
        HTTPException(404): Document not pending or expired
    """
    entry = store.get(document_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pending document {document_id} not found",
        )
    return JSONResponse(content=entry.result.model_dump(mode="json"))


@router.delete("/pending/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pending_document(
    document_id: str,
    store: PendingDocumentStore = Depends(get_pending_store),
) -> Response:
    """
    Discard a parked chunking result.

    Raises:
        HTTPException(404): Document not pending or expired
    """
    if not store.remove(document_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pending document {document_id} not found",
        )
    logger.info(f"Discarded pending document {document_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
