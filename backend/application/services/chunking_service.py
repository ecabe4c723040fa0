"""
Chunking service orchestrator.

Runs the structural chunking pipeline for a document, falls back to
fixed-window chunking when the pipeline fails, optionally attaches an
embedding to every final chunk, and parks results for review.

Dependencies: backend.core.chunking, backend.application.pending_documents, backend.configs
System role: Document chunking orchestration
"""

import logging
import time
from collections.abc import Sequence

from backend.application.pending_documents import PendingDocumentStore
from backend.configs.chunking import ChunkingSettings
from backend.core.chunking import (
    ChunkingOptions,
    EmbeddingProvider,
    LayoutBlock,
    TextChunk,
    blocks_to_text,
    chunk_document,
    fixed_window_chunks,
)
from backend.core.chunking.semantic_merger import fetch_embeddings
from backend.core.exceptions import ChunkingError
from backend.models.chunk import ChunkingResult, ChunkingStrategy, EmbeddedChunk
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class ChunkingService:
    """
    Chunking service orchestrator.

    Owns the embedding provider and the pending-document store; the
    chunking engine itself stays stateless.
    """

    def __init__(
        self,
        provider: EmbeddingProvider,
        store: PendingDocumentStore | None = None,
        settings: ChunkingSettings | None = None,
    ) -> None:
        """
        Initialize chunking service.

        Args:
            provider: Embedding provider for semantic merging and chunk embeddings
            store: Optional pending-document store (created from settings if None)
            settings: Optional chunking settings (loaded from environment if None)
        """
        self.settings = settings if settings is not None else ChunkingSettings()
        self.provider = provider
        self.store = store if store is not None else PendingDocumentStore(
            ttl_seconds=self.settings.pending_ttl_seconds,
        )

    async def chunk_blocks(
        self,
        blocks: Sequence[LayoutBlock | dict],
        options: ChunkingOptions | None = None,
        document_id: str | None = None,
        include_embeddings: bool = False,
    ) -> ChunkingResult:
        """
        Chunk a document's layout blocks.

        Steps:
        1. Run the structural pipeline (group -> flatten -> split -> merge)
        2. On pipeline failure, log a warning and use fixed-window chunks
        3. Optionally attach embeddings to the final chunks
        4. Park the result under document_id when one is given

        Args:
            blocks: Ordered layout blocks
            options: Pipeline options (settings defaults if None)
            document_id: Optional document id for the pending store
            include_embeddings: Attach an embedding to every chunk

        Returns:
            ChunkingResult: Chunks, strategy and timing

        Raises:
            ChunkingError: If the fallback strategy fails as well
        """
        start_time = time.time()
        options = options if options is not None else self.settings.to_options()

        try:
            chunks = await chunk_document(
                blocks,
                self.provider,
                options,
                max_concurrency=self.settings.embedding_concurrency,
            )
            strategy = ChunkingStrategy.STRUCTURAL
        except Exception as e:
            log_exception_with_context(
                logger,
                "Structural chunking failed, using fixed-window fallback",
                e,
                level=logging.WARNING,
                document_id=document_id,
                block_count=len(blocks or []),
            )
            chunks = self._fallback_chunks(blocks, document_id)
            strategy = ChunkingStrategy.FIXED_WINDOW

        if include_embeddings:
            chunks = await self.embed_chunks(chunks)

        result = ChunkingResult(
            chunks=chunks,
            strategy=strategy,
            degraded=strategy is ChunkingStrategy.FIXED_WINDOW,
            processing_time_ms=(time.time() - start_time) * 1000,
            document_id=document_id,
        )

        if document_id:
            self.store.put(document_id, result)

        logger.info(
            f"Chunked document {document_id or '<anonymous>'}: "
            f"{result.chunk_count} chunks via {strategy.value} "
            f"in {result.processing_time_ms:.1f}ms"
        )
        return result

    async def embed_chunks(self, chunks: Sequence[TextChunk]) -> list[EmbeddedChunk]:
        """
        Attach an embedding to every chunk.

        Provider calls run concurrently; a failed call leaves that chunk
        with an empty embedding.

        Args:
            chunks: Final chunks

        Returns:
            list[EmbeddedChunk]: Chunks with embeddings, same order
        """
        embeddings = await fetch_embeddings(
            self.provider,
            chunks,
            max_concurrency=self.settings.embedding_concurrency,
        )
        return [
            EmbeddedChunk(**chunk.model_dump(exclude={"token_count"}), embedding=embedding)
            for chunk, embedding in zip(chunks, embeddings)
        ]

    def _fallback_chunks(
        self,
        blocks: Sequence[LayoutBlock | dict],
        document_id: str | None,
    ) -> list[TextChunk]:
        try:
            return fixed_window_chunks(
                blocks_to_text(blocks),
                self.settings.fallback_window_chars,
            )
        except Exception as e:
            raise ChunkingError(
                f"Fallback chunking failed: {e}",
                document_id=document_id,
                strategy=ChunkingStrategy.FIXED_WINDOW.value,
            ) from e
