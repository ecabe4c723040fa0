"""End-to-end tests for the chunking pipeline."""

import pytest

from backend.core.chunking import ChunkingOptions, chunk_document

SENTENCE = "The quick brown fox jumps over the lazy dog."


class TestChunkDocument:
    """Test chunk_document orchestration."""

    @pytest.mark.asyncio
    async def test_short_section_becomes_one_chunk(self, fake_provider_factory) -> None:
        """Should keep a heading and its short paragraphs together."""
        blocks = [
            {"type": "heading", "level": 1, "text": "Intro", "page": 1},
            {"type": "paragraph", "text": "Short.", "page": 1},
            {"type": "paragraph", "text": "Also short.", "page": 1},
        ]

        chunks = await chunk_document(blocks, fake_provider_factory())

        assert len(chunks) == 1
        assert "Short." in chunks[0].text
        assert "Also short." in chunks[0].text
        assert chunks[0].page_range == [1]
        assert chunks[0].heading_path == ["Intro"]

    @pytest.mark.asyncio
    async def test_long_paragraph_is_split(self, fake_provider_factory) -> None:
        """Should split a 1000+ token paragraph into budget-sized sub-chunks."""
        blocks = [{"id": "p1", "type": "paragraph", "text": " ".join([SENTENCE] * 84), "page": 4}]

        chunks = await chunk_document(blocks, fake_provider_factory(), ChunkingOptions(max_tokens=400))

        assert [c.chunk_id for c in chunks] == ["chunk_1_1", "chunk_1_2", "chunk_1_3"]
        assert all(c.token_count <= 400 for c in chunks)
        assert all(c.page_range == [4] and c.block_ids == ["p1"] for c in chunks)

    @pytest.mark.asyncio
    async def test_empty_blocks(self, fake_provider_factory) -> None:
        provider = fake_provider_factory()

        assert await chunk_document([], provider) == []
        assert await chunk_document(None, provider) == []
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_dissimilar_sections_stay_apart(self, fake_provider_factory, words) -> None:
        """Should not merge two full sections with similarity 0.2."""
        provider = fake_provider_factory(
            vectors={"alpha": [1.0, 0.0], "bravo": [0.2, 0.9797958971]}
        )
        blocks = [
            {"type": "heading", "level": 1, "text": "First", "page": 1},
            {"type": "paragraph", "text": words(75, "alpha"), "page": 1},
            {"type": "heading", "level": 1, "text": "Second", "page": 2},
            {"type": "paragraph", "text": words(75, "bravo"), "page": 2},
        ]

        chunks = await chunk_document(blocks, provider)

        assert len(chunks) == 2
        assert [c.heading_path for c in chunks] == [["First"], ["Second"]]
        assert [c.page_range for c in chunks] == [[1], [2]]

    @pytest.mark.asyncio
    async def test_similar_sections_merge(self, fake_provider_factory, words) -> None:
        provider = fake_provider_factory(default=[0.5, 0.5])
        blocks = [
            {"type": "heading", "level": 1, "text": "First", "page": 1},
            {"type": "paragraph", "text": words(75, "alpha"), "page": 1},
            {"type": "heading", "level": 1, "text": "Second", "page": 2},
            {"type": "paragraph", "text": words(75, "bravo"), "page": 2},
        ]

        chunks = await chunk_document(blocks, provider)

        assert len(chunks) == 1
        assert chunks[0].heading_path == ["First"]
        assert chunks[0].page_range == [1, 2]

    @pytest.mark.asyncio
    async def test_options_change_behaviour(self, fake_provider_factory, words) -> None:
        """Should honour min_tokens=0 so small sections stay separate."""
        blocks = [
            {"type": "paragraph", "text": "one"},
            {"type": "table", "text": "two"},
            {"type": "paragraph", "text": "three"},
        ]

        chunks = await chunk_document(
            blocks, fake_provider_factory(), ChunkingOptions(min_tokens=0)
        )

        assert [c.text for c in chunks] == ["one", "two", "three"]

    @pytest.mark.asyncio
    async def test_provider_failure_does_not_abort(self, fake_provider_factory, words) -> None:
        provider = fake_provider_factory(fail_on={"alpha", "bravo"})
        blocks = [
            {"type": "heading", "level": 1, "text": "First"},
            {"type": "paragraph", "text": words(75, "alpha")},
            {"type": "heading", "level": 1, "text": "Second"},
            {"type": "paragraph", "text": words(75, "bravo")},
        ]

        chunks = await chunk_document(blocks, provider)

        assert len(chunks) == 2

    @pytest.mark.asyncio
    async def test_concurrency_cap_is_forwarded(self, fake_provider_factory) -> None:
        provider = fake_provider_factory(delay=lambda text: 0.01)
        blocks = [{"type": "table", "text": f"row {i}"} for i in range(8)]

        await chunk_document(blocks, provider, max_concurrency=3)

        assert len(provider.calls) == 8
        assert provider.max_in_flight <= 3

    @pytest.mark.asyncio
    async def test_block_lineage_is_complete(self, fake_provider_factory, words) -> None:
        """Should account for every block id exactly once across chunks."""
        blocks = [
            {"id": "h1", "type": "heading", "level": 1, "text": "A"},
            {"id": "p1", "type": "paragraph", "text": words(100)},
            {"id": "t1", "type": "table", "text": words(90, "cell")},
            {"id": "h2", "type": "heading", "level": 2, "text": "B"},
            {"id": "p2", "type": "paragraph", "text": "tiny"},
        ]

        chunks = await chunk_document(blocks, fake_provider_factory())

        assert [bid for c in chunks for bid in c.block_ids] == ["h1", "p1", "t1", "h2", "p2"]

    @pytest.mark.asyncio
    async def test_junk_entries_do_not_abort(self, fake_provider_factory) -> None:
        blocks = [{"type": "heading", "level": 1, "text": "Intro"}, None, {"type": "paragraph", "text": "Body."}]

        chunks = await chunk_document(blocks, fake_provider_factory())

        assert len(chunks) == 1
        assert chunks[0].text == "Intro\n\nBody."
