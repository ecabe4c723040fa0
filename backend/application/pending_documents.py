"""
Pending document store.

In-memory holding area for chunking results awaiting review, keyed by
document id, with optional expiry. Injected into the service layer; the
chunking engine never touches it.

Dependencies: backend.models.chunk, backend.core.exceptions
System role: Short-lived storage of chunked documents
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from backend.core.exceptions import ValidationError
from backend.models.chunk import ChunkingResult, PendingDocumentSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingDocument:
    """Chunking result parked under a document id."""

    document_id: str
    result: ChunkingResult
    created_at: float
    expires_at: float | None = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at

    def to_summary(self) -> PendingDocumentSummary:
        """Convert to the API summary schema."""
        return PendingDocumentSummary(
            document_id=self.document_id,
            chunk_count=self.result.chunk_count,
            strategy=self.result.strategy,
            degraded=self.result.degraded,
            created_at=datetime.fromtimestamp(self.created_at, tz=timezone.utc),
            expires_at=(
                datetime.fromtimestamp(self.expires_at, tz=timezone.utc)
                if self.expires_at is not None
                else None
            ),
        )


class PendingDocumentStore:
    """Mapping of document id to pending chunking result with TTL eviction."""

    def __init__(
        self,
        ttl_seconds: float | None = 3600.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize store.

        Args:
            ttl_seconds: Lifetime of entries (None or <= 0 disables expiry)
            clock: Time source in seconds since the epoch
        """
        self.ttl_seconds = ttl_seconds if ttl_seconds and ttl_seconds > 0 else None
        self._clock = clock
        self._documents: dict[str, PendingDocument] = {}

    def put(self, document_id: str, result: ChunkingResult) -> PendingDocument:
        """
        Park a chunking result, replacing any previous entry for the id.

        Args:
            document_id: Document identifier
            result: Chunking result

        Returns:
            PendingDocument: Stored entry

        Raises:
            ValidationError: When document_id is empty
        """
        if not document_id:
            raise ValidationError("document_id must not be empty", field="document_id")

        now = self._clock()
        entry = PendingDocument(
            document_id=document_id,
            result=result,
            created_at=now,
            expires_at=now + self.ttl_seconds if self.ttl_seconds else None,
        )
        self._documents[document_id] = entry
        logger.info(f"Parked document {document_id} with {result.chunk_count} chunks")
        return entry

    def get(self, document_id: str) -> PendingDocument | None:
        """
        Look up a parked result.

        Args:
            document_id: Document identifier

        Returns:
            PendingDocument | None: Entry, or None if missing or expired
        """
        entry = self._documents.get(document_id)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._documents[document_id]
            logger.info(f"Pending document {document_id} expired")
            return None
        return entry

    def remove(self, document_id: str) -> bool:
        """
        Remove a parked result.

        Returns:
            bool: True if a live entry was removed
        """
        entry = self._documents.pop(document_id, None)
        return entry is not None and not entry.is_expired(self._clock())

    def list_pending(self) -> list[PendingDocument]:
        """
        List live entries, oldest first.

        Returns:
            list[PendingDocument]: Unexpired entries
        """
        self.purge_expired()
        return sorted(self._documents.values(), key=lambda entry: entry.created_at)

    def purge_expired(self) -> int:
        """
        Drop expired entries.

        Returns:
            int: Number of entries removed
        """
        now = self._clock()
        expired = [doc_id for doc_id, entry in self._documents.items() if entry.is_expired(now)]
        for doc_id in expired:
            del self._documents[doc_id]
        if expired:
            logger.debug(f"Purged {len(expired)} expired pending documents")
        return len(expired)

    def clear(self) -> None:
        """Remove all entries."""
        self._documents.clear()

    def __len__(self) -> int:
        return len(self._documents)
