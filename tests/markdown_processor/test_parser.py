"""Tests for markdown parser."""

import tempfile
from pathlib import Path

import pytest

from src.markdown_processor.parser import DocumentReadError, MarkdownParser


class TestMarkdownParser:
    """Test the MarkdownParser component."""

    def test_parse_sample_file_with_frontmatter(self):
        """Test parsing actual sample file with frontmatter."""
        parser = MarkdownParser()
        sample_file = Path(__file__).parent.parent / "samples" / "pages" / "index.mdx"

        document = parser.parse_file(sample_file)

        assert document.has_frontmatter is True
        assert document.frontmatter["title"] == "Security Frameworks"
        assert document.frontmatter["description"] == "Landing page"
        assert document.title == "Security Frameworks"
        assert document.content.startswith("# Security Frameworks")
        assert document.path == str(sample_file)

    def test_parse_markdown_without_frontmatter(self):
        """Test parsing markdown without frontmatter."""
        parser = MarkdownParser()

        content = """# Simple Markdown

This is just regular markdown content without frontmatter.

## Section

Some content here."""

        result = parser.parse_content(content)

        assert result.error is None
        assert result.has_frontmatter is False
        assert result.frontmatter == {}
        assert result.content == content

    def test_parse_markdown_with_frontmatter(self):
        """Test parsing markdown with frontmatter."""
        parser = MarkdownParser()

        content = """---
title: Test Document
tags:
  - test
  - markdown
published: 2024-01-01
---

# Test Document

## Section 1

Some content here."""

        result = parser.parse_content(content)

        assert result.error is None
        assert result.has_frontmatter is True
        assert result.frontmatter["title"] == "Test Document"
        assert result.frontmatter["tags"] == ["test", "markdown"]
        # YAML parser converts date strings to date objects
        assert str(result.frontmatter["published"]) == "2024-01-01"
        assert result.content.startswith("# Test Document")

    def test_parse_empty_frontmatter(self):
        """Test parsing markdown with empty frontmatter."""
        parser = MarkdownParser()

        content = """---
---

# Document

Content without frontmatter data."""

        result = parser.parse_content(content)

        assert result.has_frontmatter is False
        assert result.frontmatter == {}
        assert result.content.startswith("# Document")

    def test_invalid_yaml_frontmatter_falls_back_to_body(self):
        """Invalid YAML keeps the whole text as body instead of failing."""
        parser = MarkdownParser()

        content = """---
title: Test Document
invalid: [unclosed bracket
---

# Content"""

        result = parser.parse_content(content)

        assert "Invalid YAML frontmatter" in result.error
        assert result.frontmatter == {}
        assert result.has_frontmatter is False
        assert result.content == content

    def test_parse_file_with_invalid_frontmatter(self):
        """Files with broken frontmatter still produce a document."""
        parser = MarkdownParser()

        with tempfile.TemporaryDirectory() as temp_dir:
            file_path = Path(temp_dir) / "broken.md"
            file_path.write_text("---\ntitle: [oops\n---\n# Heading\n\nBody\n", encoding="utf-8")

            document = parser.parse_file(file_path)

            assert document.frontmatter == {}
            assert document.title is None
            assert "# Heading" in document.content

    def test_parse_nonexistent_file(self):
        """Missing files are read errors."""
        parser = MarkdownParser()

        with pytest.raises(DocumentReadError, match="File not found"):
            parser.parse_file("/nonexistent/file.md")

    def test_parse_directory_instead_of_file(self):
        """Test error handling when path is directory."""
        parser = MarkdownParser()

        with tempfile.TemporaryDirectory() as temp_dir:
            with pytest.raises(DocumentReadError, match="Path is not a file"):
                parser.parse_file(temp_dir)

    def test_parse_non_utf8_file(self):
        """Undecodable files are read errors, not parse errors."""
        parser = MarkdownParser()

        with tempfile.TemporaryDirectory() as temp_dir:
            file_path = Path(temp_dir) / "binary.md"
            file_path.write_bytes(b"# Title\n\xff\xfe\xfa")

            with pytest.raises(OSError):
                parser.parse_file(file_path)

    def test_blank_title_is_none(self):
        """A blank frontmatter title does not count as a title."""
        parser = MarkdownParser()

        with tempfile.TemporaryDirectory() as temp_dir:
            file_path = Path(temp_dir) / "page.md"
            file_path.write_text("---\ntitle: '  '\n---\n# Page\n", encoding="utf-8")

            assert parser.parse_file(file_path).title is None

    def test_parse_unicode_content(self):
        """Test parsing markdown with unicode content."""
        parser = MarkdownParser()

        content = "---\ntitle: Sécurité\n---\n\n# Übersicht\n\nÜnïcödé text 🔐"

        result = parser.parse_content(content)

        assert result.frontmatter["title"] == "Sécurité"
        assert "🔐" in result.content
