"""Tests for structural grouping of layout blocks."""

import pytest

from backend.core.chunking import group_structurally, normalize_level


class TestNormalizeLevel:
    """Test heading level normalisation."""

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_valid_levels_kept(self, level: int) -> None:
        assert normalize_level(level) == level

    @pytest.mark.parametrize("level", [None, 0, 4, 7, -1, "1", 1.0, True])
    def test_invalid_levels_become_two(self, level) -> None:
        """Should treat missing or out-of-range levels as level 2."""
        assert normalize_level(level) == 2


class TestGroupStructurally:
    """Test group_structurally single-pass grouping."""

    def test_empty_input(self) -> None:
        """Should return no groups for empty or missing input."""
        assert group_structurally([]) == []
        assert group_structurally(None) == []

    def test_heading_starts_group_with_following_paragraphs(self, make_block) -> None:
        """Should put the heading and its paragraphs in one group."""
        blocks = [
            make_block("heading", "Intro", level=1, page=1),
            make_block("paragraph", "First.", page=1),
            make_block("paragraph", "Second.", page=2),
        ]

        groups = group_structurally(blocks)

        assert len(groups) == 1
        assert [b.text for b in groups[0].blocks] == ["Intro", "First.", "Second."]
        assert groups[0].heading_path == ["Intro"]
        assert groups[0].pages == {1, 2}

    def test_paragraphs_before_first_heading_have_empty_path(self, make_block) -> None:
        blocks = [
            make_block("paragraph", "Preamble."),
            make_block("heading", "Intro", level=1),
        ]

        groups = group_structurally(blocks)

        assert [g.heading_path for g in groups] == [[], ["Intro"]]

    def test_nested_heading_paths(self, make_block) -> None:
        """Should track the heading path across levels and reset on H1."""
        blocks = [
            make_block("heading", "A", level=1),
            make_block("paragraph", "a"),
            make_block("heading", "B", level=2),
            make_block("paragraph", "b"),
            make_block("heading", "C", level=3),
            make_block("paragraph", "c"),
            make_block("heading", "D", level=1),
            make_block("paragraph", "d"),
        ]

        groups = group_structurally(blocks)

        assert [g.heading_path for g in groups] == [
            ["A"],
            ["A", "B"],
            ["A", "B", "C"],
            ["D"],
        ]

    def test_sibling_heading_replaces_same_level(self, make_block) -> None:
        blocks = [
            make_block("heading", "A", level=1),
            make_block("heading", "B", level=2),
            make_block("heading", "B2", level=2),
        ]

        groups = group_structurally(blocks)

        assert groups[-1].heading_path == ["A", "B2"]

    def test_skipped_level_has_no_placeholder(self, make_block) -> None:
        """Should omit a missing intermediate level from the path."""
        blocks = [
            make_block("heading", "A", level=1),
            make_block("heading", "C", level=3),
        ]

        groups = group_structurally(blocks)

        assert groups[-1].heading_path == ["A", "C"]

    def test_missing_level_is_treated_as_two(self, make_block) -> None:
        blocks = [
            make_block("heading", "A", level=1),
            make_block("heading", "B"),
            make_block("heading", "C", level=9),
        ]

        groups = group_structurally(blocks)

        assert [g.heading_path for g in groups] == [["A"], ["A", "B"], ["A", "C"]]

    def test_heading_path_survives_standalone_blocks(self, make_block) -> None:
        """Should keep the heading path for paragraphs after a table."""
        blocks = [
            make_block("heading", "A", level=1),
            make_block("table", "| x |"),
            make_block("paragraph", "after"),
        ]

        groups = group_structurally(blocks)

        assert [g.heading_path for g in groups] == [["A"], ["A"], ["A"]]
        assert [b.text for b in groups[2].blocks] == ["after"]

    @pytest.mark.parametrize("block_type", ["list", "table", "figure", "caption"])
    def test_standalone_blocks_form_own_group(self, make_block, block_type: str) -> None:
        blocks = [
            make_block("paragraph", "before", page=1),
            make_block(block_type, "atomic", page=2),
            make_block("paragraph", "after", page=3),
        ]

        groups = group_structurally(blocks)

        assert [[b.text for b in g.blocks] for g in groups] == [["before"], ["atomic"], ["after"]]
        assert groups[1].pages == {2}

    def test_caption_after_heading_is_separate(self, make_block) -> None:
        """Should not attach a caption to the preceding heading's group."""
        blocks = [
            make_block("heading", "Results", level=1),
            make_block("caption", "Figure 1"),
        ]

        groups = group_structurally(blocks)

        assert [[b.type for b in g.blocks] for g in groups] == [["heading"], ["caption"]]

    def test_unknown_type_behaves_like_paragraph(self, make_block) -> None:
        blocks = [
            make_block("paragraph", "one"),
            make_block("footnote", "two"),
        ]

        groups = group_structurally(blocks)

        assert len(groups) == 1

    def test_figure_without_text_still_grouped(self, make_block) -> None:
        groups = group_structurally([make_block("figure", "")])

        assert len(groups) == 1
        assert groups[0].blocks[0].text == ""

    def test_pages_ignore_missing_values(self, make_block) -> None:
        blocks = [
            make_block("paragraph", "x", page=2),
            make_block("paragraph", "y"),
        ]

        groups = group_structurally(blocks)

        assert groups[0].pages == {2}

    def test_accepts_plain_dicts(self) -> None:
        """Should validate raw parser dicts, tolerating malformed fields."""
        blocks = [
            {"id": 1, "type": "Heading", "text": "Title", "level": 1, "page": 1},
            {"id": "p", "type": "paragraph", "text": None, "page": "x"},
        ]

        groups = group_structurally(blocks)

        assert len(groups) == 1
        assert groups[0].heading_path == ["Title"]
        assert [b.id for b in groups[0].blocks] == ["1", "p"]
        assert groups[0].blocks[1].text == ""
        assert groups[0].pages == {1}

    def test_every_block_lands_in_exactly_one_group(self, make_block) -> None:
        blocks = [
            make_block("heading", "A", level=1),
            make_block("paragraph", "p1"),
            make_block("list", "l1"),
            make_block("heading", "B", level=2),
            make_block("figure", ""),
            make_block("paragraph", "p2"),
        ]

        groups = group_structurally(blocks)

        grouped_ids = [b.id for g in groups for b in g.blocks]
        assert grouped_ids == [b.id for b in blocks]
        assert all(g.blocks for g in groups)

    @pytest.mark.parametrize("junk", [None, "paragraph text", 42, ["a"]])
    def test_skips_entries_that_are_not_blocks(self, make_block, junk) -> None:
        """Should ignore junk entries instead of failing the whole document."""
        blocks = [{"type": "paragraph", "text": "a"}, junk, make_block("paragraph", "b")]

        groups = group_structurally(blocks)

        assert len(groups) == 1
        assert [b.text for b in groups[0].blocks] == ["a", "b"]

    def test_only_junk_yields_no_groups(self) -> None:
        assert group_structurally([None, 3]) == []
