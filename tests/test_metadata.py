"""Tests for Markdown metadata extraction."""

from __future__ import annotations

from docmanifest.ingestion.metadata import (
    DEFAULT_TITLE,
    extract_description,
    extract_frontmatter,
    extract_title,
)


class TestExtractFrontmatter:
    """Test extract_frontmatter function."""

    def test_title_and_description(self) -> None:
        content = '---\ntitle: "Fund Factory"\ndescription: Creates funds\n---\n# Other\n'

        assert extract_frontmatter(content) == {
            "title": "Fund Factory",
            "description": "Creates funds",
        }

    def test_single_quotes(self) -> None:
        content = "---\ntitle: 'Risk Engine'\n---\n"

        assert extract_frontmatter(content)["title"] == "Risk Engine"

    def test_block_must_start_the_document(self) -> None:
        """Should ignore horizontal rules further down the page."""
        content = "# Heading\n\n---\ntitle: Nope\n---\n"

        assert extract_frontmatter(content) == {}

    def test_prefixed_keys_are_not_titles(self) -> None:
        content = "---\nsidebar_title: Short\n---\n"

        assert extract_frontmatter(content) == {}

    def test_crlf_newlines(self) -> None:
        content = "---\r\ntitle: Windows\r\n---\r\nbody"

        assert extract_frontmatter(content) == {"title": "Windows"}


class TestExtractTitle:
    """Test extract_title function."""

    def test_frontmatter_wins(self) -> None:
        assert extract_title("---\ntitle: Meta\n---\n# Heading\n") == "Meta"

    def test_first_heading(self) -> None:
        """Should fall back to the first level-1 heading."""
        content = "Intro text\n## Sub\n# Main Title\n# Second\n"

        assert extract_title(content) == "Main Title"

    def test_default_title(self) -> None:
        assert extract_title("no headings here\n## only h2\n") == DEFAULT_TITLE


class TestExtractDescription:
    def test_present(self) -> None:
        assert extract_description("---\ndescription: About\n---\n") == "About"

    def test_absent(self) -> None:
        assert extract_description("# Title\n") is None
