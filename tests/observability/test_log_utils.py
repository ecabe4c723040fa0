"""Tests for structured logging helpers."""

import logging

from backend.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_context,
    safe_log_value,
)


class TestSafeLogValue:
    """Test safe_log_value."""

    def test_collections_are_summarized(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"

    def test_long_values_truncated(self) -> None:
        value = safe_log_value("x" * 20, max_length=5)

        assert value.startswith("xxxxx... (truncated, 20 total)")


class TestSafeContext:
    """Test safe_context."""

    def test_reserved_keys_are_prefixed(self) -> None:
        context = safe_context(message="m", name="n", chunk_id="chunk_1")

        assert context == {"ctx_message": "m", "ctx_name": "n", "chunk_id": "chunk_1"}


class TestLogWithContext:
    """Test log helpers attach context to records."""

    def test_log_with_context(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.INFO, logger="tests.log_utils"):
            log_with_context(logger, logging.INFO, "hello", chunk_id="chunk_1", blocks=[1, 2])

        record = caplog.records[-1]
        assert record.chunk_id == "chunk_1"
        assert record.blocks == "list(2 items)"

    def test_log_exception_with_context(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.WARNING, logger="tests.log_utils"):
            log_exception_with_context(
                logger, "failed", ValueError("bad"), level=logging.WARNING, document_id="doc-1"
            )

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.error_type == "ValueError"
        assert record.error_msg == "bad"
        assert record.document_id == "doc-1"
        assert record.exc_info is not None
