"""
Exception hierarchy for the DocInsight chunking service.

Every error carries a message plus a details dict that is logged as context
and returned to API clients in the ErrorResponse body.

Dependencies: None (pure domain layer)
System role: Domain errors shared by the core, boundary and application layers
"""

from typing import Any


def _merge_details(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    """Copy details and add every context value that is set."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class DocInsightException(Exception):
    """Base exception for all DocInsight errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Args:
            message: Human-readable error message
            details: Extra context for logs and API error bodies
        """
        self.message = message
        self.details = dict(details or {})
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class ValidationError(DocInsightException):
    """Invalid input that pydantic did not already reject."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge_details(details, field=field))


class DocumentProcessingError(DocInsightException):
    """Failure while processing one document."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge_details(details, document_id=document_id))


class ChunkingError(DocumentProcessingError):
    """Neither the structural pipeline nor the fallback could chunk a document."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        strategy: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            message: Error message
            document_id: Document being chunked
            strategy: Chunking strategy that failed last
            details: Additional context
        """
        super().__init__(message, document_id, _merge_details(details, strategy=strategy))


class EmbeddingError(DocumentProcessingError):
    """The embedding model call failed."""
