"""
Shared test fixtures and configuration for entire test suite.

Provides: Layout block factories, text generators, fake embedding providers
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import asyncio
from collections.abc import Callable

import pytest

from backend.core.chunking import LayoutBlock, TextChunk


class FakeEmbeddingProvider:
    """
    Deterministic embedding provider for tests.

    Vectors are looked up by the first key contained in the chunk text.
    Texts matching an entry in fail_on raise RuntimeError.
    """

    def __init__(
        self,
        vectors: dict[str, list[float]] | None = None,
        default: list[float] | None = None,
        fail_on: set[str] | None = None,
        delay: Callable[[str], float] | None = None,
    ) -> None:
        self.vectors = vectors or {}
        self.default = default if default is not None else []
        self.fail_on = fail_on or set()
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def get_embedding(self, text: str) -> list[float]:
        self.calls.append(text)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay(text))
            else:
                await asyncio.sleep(0)
            if any(key in text for key in self.fail_on):
                raise RuntimeError(f"provider down for {text[:20]!r}")
            for key, vector in self.vectors.items():
                if key in text:
                    return list(vector)
            return list(self.default)
        finally:
            self.in_flight -= 1


@pytest.fixture
def make_block() -> Callable[..., LayoutBlock]:
    """
    Factory for layout blocks with sequential ids.

    Returns:
        Callable: make_block(type, text, level=None, page=None, id=None)
    """
    counter = {"n": 0}

    def factory(
        type: str = "paragraph",
        text: str = "",
        level: int | None = None,
        page: int | None = None,
        id: str | None = None,
    ) -> LayoutBlock:
        counter["n"] += 1
        return LayoutBlock(
            id=id or f"b{counter['n']}",
            type=type,
            text=text,
            level=level,
            page=page,
        )

    return factory


@pytest.fixture
def words() -> Callable[[int, str], str]:
    """
    Text generator: words(n, word) returns n space-separated words.

    Returns:
        Callable: Generator producing text with an exact word count
    """

    def factory(n: int, word: str = "word") -> str:
        return " ".join([word] * n)

    return factory


@pytest.fixture
def make_chunk() -> Callable[..., TextChunk]:
    """
    Factory for text chunks.

    Returns:
        Callable: make_chunk(chunk_id, text, heading_path=None, page_range=None, block_ids=None)
    """

    def factory(
        chunk_id: str,
        text: str,
        heading_path: list[str] | None = None,
        page_range: list[int] | None = None,
        block_ids: list[str] | None = None,
    ) -> TextChunk:
        return TextChunk(
            chunk_id=chunk_id,
            text=text,
            heading_path=heading_path or [],
            page_range=page_range or [],
            block_ids=block_ids if block_ids is not None else [chunk_id],
        )

    return factory


@pytest.fixture
def fake_provider_factory() -> type[FakeEmbeddingProvider]:
    """Expose FakeEmbeddingProvider to tests without importing conftest."""
    return FakeEmbeddingProvider
