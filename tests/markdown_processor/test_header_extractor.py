"""Tests for markdown header extractor, anchors and breadcrumbs."""

import pytest

from src.markdown_processor.header_extractor import (BreadcrumbTracker, FenceTracker, HeaderExtractor,
                                                     first_heading_title, slugify)


class TestSlugify:
    """Test anchor generation."""

    def test_basic_title(self):
        assert slugify("Getting Started") == "getting-started"

    def test_ampersand_becomes_and(self):
        assert slugify("Threat Modeling & Review") == "threat-modeling-and-review"

    def test_punctuation_removed(self):
        assert slugify("  Hello,  World!  ") == "hello-world"
        assert slugify("C++ / Rust") == "c-rust"

    def test_hyphens_collapsed_and_trimmed(self):
        assert slugify("---A--B---") == "a-b"
        assert slugify("ISO 27001 - Annex A") == "iso-27001-annex-a"

    def test_non_ascii_letters_dropped(self):
        assert slugify("Übersicht der Maßnahmen") == "bersicht-der-manahmen"

    def test_deterministic(self):
        title = "OWASP Top 10 (2021) & ASVS"
        assert slugify(title) == slugify(title) == "owasp-top-10-2021-and-asvs"

    def test_only_symbols(self):
        assert slugify("!!!") == ""


class TestHeaderExtractor:
    """Test the HeaderExtractor component."""

    def test_extract_headers_basic(self):
        """Test basic header extraction."""
        extractor = HeaderExtractor()

        content = """# Main Title

Some content here.

## Section 1

### Subsection 1.1

###### Deepest
"""

        headers = extractor.extract_headers(content)

        assert [(h.level, h.text) for h in headers] == [
            (1, "Main Title"),
            (2, "Section 1"),
            (3, "Subsection 1.1"),
            (6, "Deepest"),
        ]
        assert headers[0].line_number == 1
        assert headers[1].line_number == 5
        assert headers[1].raw_line == "## Section 1"
        assert headers[2].anchor == "subsection-11"

    def test_not_headers(self):
        """Lines without a space after the hashes or with seven hashes are text."""
        extractor = HeaderExtractor()

        content = "#hashtag\n####### seven\n#\n  # indented text\n"

        assert extractor.extract_headers(content) == []

    def test_headers_inside_code_fences_ignored(self):
        """Shell comments in code blocks are not headers."""
        extractor = HeaderExtractor()

        content = """# Real

```bash
# install
pip install tool
```

~~~
## also code
~~~

## Also Real
"""

        headers = extractor.extract_headers(content)

        assert [h.text for h in headers] == ["Real", "Also Real"]

    def test_mixed_fence_characters(self):
        """A tilde line inside a backtick fence neither closes nor reopens it."""
        extractor = HeaderExtractor()

        content = "# Install\n```bash\n~~~\n# comment\n```\n## Configure\n````\n```\n## example\n```\n````\n## Usage\n"

        headers = extractor.extract_headers(content)

        assert [h.text for h in headers] == ["Install", "Configure", "Usage"]

    def test_level_range(self):
        """Only headers within the configured range are matched."""
        extractor = HeaderExtractor(min_level=2, max_level=3)

        assert extractor.match("# Top") is None
        assert extractor.match("## Second").level == 2
        assert extractor.match("### Third\n").text == "Third"
        assert extractor.match("#### Fourth") is None

    def test_trailing_whitespace_trimmed(self):
        extractor = HeaderExtractor()

        assert extractor.match("##   Spaced title   \r\n").text == "Spaced title"

    def test_invalid_level_range(self):
        with pytest.raises(ValueError):
            HeaderExtractor(min_level=3, max_level=2)
        with pytest.raises(ValueError):
            HeaderExtractor(min_level=0, max_level=6)

    def test_first_heading_title(self):
        assert first_heading_title("intro\n\n### Deep First\n\n# Top\n") == "Deep First"
        assert first_heading_title("no headings here") is None


class TestBreadcrumbTracker:
    """Test ancestor title tracking."""

    def test_nested_levels(self):
        tracker = BreadcrumbTracker()

        assert tracker.push(1, "A") == []
        assert tracker.push(2, "B") == ["A"]
        assert tracker.push(3, "C") == ["A", "B"]
        assert tracker.push(2, "D") == ["A"]
        assert tracker.push(3, "E") == ["A", "D"]
        assert tracker.push(1, "F") == []

    def test_skipped_levels(self):
        """Missing intermediate levels are left out of the breadcrumb."""
        tracker = BreadcrumbTracker()

        assert tracker.push(3, "Deep") == []
        assert tracker.push(1, "Top") == []
        assert tracker.push(3, "Child") == ["Top"]

    def test_reset(self):
        tracker = BreadcrumbTracker()
        tracker.push(1, "A")
        tracker.reset()

        assert tracker.push(2, "B") == []


class TestFenceTracker:
    """Test fenced code block tracking."""

    def test_open_and_close(self):
        fences = FenceTracker()

        assert fences.feed("```python\n") is True
        assert fences.in_fence is True
        assert fences.feed("print('hi')\n") is False
        assert fences.feed("```\n") is True
        assert fences.in_fence is False

    def test_closing_needs_same_character(self):
        fences = FenceTracker()

        fences.feed("~~~")
        assert fences.feed("```") is False
        assert fences.in_fence is True
        assert fences.feed("~~~~") is True
        assert fences.in_fence is False

    def test_closing_run_at_least_as_long(self):
        fences = FenceTracker()

        fences.feed("````md")
        assert fences.feed("```js") is False
        assert fences.feed("```") is False
        assert fences.in_fence is True
        assert fences.feed("````") is True

    def test_closing_line_has_no_info_string(self):
        fences = FenceTracker()

        fences.feed("```")
        assert fences.feed("```js") is False
        assert fences.in_fence is True

    def test_backtick_info_string_without_backticks(self):
        fences = FenceTracker()

        assert fences.feed("``` not `a` fence") is False
        assert fences.in_fence is False

    def test_indented_fences(self):
        fences = FenceTracker()

        assert fences.feed("   ```") is True
        assert fences.feed("    ```") is False
        assert fences.feed("```") is True
