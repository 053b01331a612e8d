"""
Tests for the heading scanner
"""

from mdpdf.headings import iter_unfenced_lines, parse_heading, scan_headings


class TestParseHeading:
    """Tests for parse_heading()."""

    def test_levels(self):
        assert parse_heading("# One") == (1, "One")
        assert parse_heading("###### Six") == (6, "Six")

    def test_requires_space_after_hashes(self):
        assert parse_heading("#hashtag") is None

    def test_seven_hashes_is_not_a_heading(self):
        assert parse_heading("####### Too deep") is None

    def test_closing_hashes_are_dropped(self):
        assert parse_heading("## Title ##") == (2, "Title")

    def test_indented_line_is_not_a_heading(self):
        assert parse_heading("  # Indented") is None


class TestScanHeadings:
    """Tests for scan_headings()."""

    def test_collects_in_document_order(self):
        text = "# Title\n\nText\n\n## First\n### Deeper\n## Second"
        headings = scan_headings(text, 1, 6)
        assert [(h.level, h.title, h.slug) for h in headings] == [
            (1, "Title", "title"),
            (2, "First", "first"),
            (3, "Deeper", "deeper"),
            (2, "Second", "second"),
        ]

    def test_line_index_points_at_heading(self):
        text = "intro\n\n## Target"
        headings = scan_headings(text, 1, 3)
        assert text.split("\n")[headings[0].line_index] == "## Target"

    def test_level_filter(self):
        text = "# A\n## B\n### C\n#### D"
        assert [h.title for h in scan_headings(text, 2, 3)] == ["B", "C"]

    def test_inverted_range_yields_nothing(self):
        assert scan_headings("# A\n## B\n### C", 4, 2) == []

    def test_duplicate_titles(self):
        text = "## Setup\n## Setup\n## Setup"
        assert [h.slug for h in scan_headings(text, 1, 3)] == ["setup", "setup-2", "setup-3"]

    def test_duplicates_count_only_retained_levels(self):
        text = "# Setup\n## Setup\n## Setup"
        assert [h.slug for h in scan_headings(text, 2, 3)] == ["setup", "setup-2"]

    def test_headings_inside_fences_are_ignored(self):
        text = "```\n# Not a heading\n```\n# Real"
        assert [h.title for h in scan_headings(text, 1, 6)] == ["Real"]

    def test_fence_closes_on_next_backtick_line(self):
        text = "```\n# hidden\n```python\n# shown\n```\n# hidden too"
        assert [h.title for h in scan_headings(text, 1, 6)] == ["shown"]

    def test_toc_marker_is_skipped(self):
        text = "  [[toc]]  \n# Title"
        assert [h.title for h in scan_headings(text, 1, 6)] == ["Title"]

    def test_empty_slug_falls_back_to_position(self):
        text = "## Intro\n## ???\n## !!!"
        assert [h.slug for h in scan_headings(text, 1, 3)] == ["intro", "section-2", "section-3"]


def test_iter_unfenced_lines_skips_delimiters():
    lines = ["a", "```", "b", "```", "c"]
    assert list(iter_unfenced_lines(lines)) == [(0, "a"), (4, "c")]
