"""Markdown Parser for files with frontmatter and content."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import frontmatter
import yaml

logger = logging.getLogger(__name__)


class DocumentReadError(OSError):
    """Raised when a document cannot be read from disk."""


class FrontmatterParseError(ValueError):
    """Raised when a frontmatter block exists but is not valid YAML."""


@dataclass(frozen=True)
class Document:
    """A parsed documentation file."""

    path: str
    content: str
    frontmatter: Dict[str, Any] = field(default_factory=dict)
    has_frontmatter: bool = False

    @property
    def title(self) -> Optional[str]:
        """Title declared in the frontmatter, if any."""
        title = self.frontmatter.get("title")
        if title is None:
            return None
        title = str(title).strip()
        return title or None


@dataclass
class ParseResult:
    """Result of splitting raw text into frontmatter and body."""

    frontmatter: Dict[str, Any] = None
    content: str = None
    has_frontmatter: bool = False
    error: str = None


class MarkdownParser:
    """Parses Markdown/MDX files with optional YAML frontmatter."""

    def parse_file(self, file_path: Union[str, Path]) -> Document:
        """
        Read and parse a Markdown file.

        Args:
            file_path: Path to the Markdown file (.md, .mdx)

        Returns:
            Document with frontmatter and body

        Raises:
            DocumentReadError: If the file is missing, not a file or not UTF-8
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise DocumentReadError(f"File not found: {file_path}")

        if not file_path.is_file():
            raise DocumentReadError(f"Path is not a file: {file_path}")

        try:
            raw = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentReadError(f"Unable to read {file_path} as UTF-8: {e}") from e

        result = self.parse_content(raw)
        if result.error:
            logger.warning(f"Invalid frontmatter in {file_path}, indexing whole file as body: {result.error}")

        return Document(
            path=str(file_path),
            content=result.content,
            frontmatter=result.frontmatter,
            has_frontmatter=result.has_frontmatter,
        )

    def parse_content(self, content_text: str) -> ParseResult:
        """
        Parse markdown content string with optional frontmatter.

        Malformed frontmatter never fails the parse: the whole text is
        returned as body and the problem is reported in ``error``.

        Args:
            content_text: Markdown content as string

        Returns:
            ParseResult with frontmatter and content
        """
        try:
            metadata, content = self._split_frontmatter(content_text)
        except FrontmatterParseError as e:
            return ParseResult(frontmatter={}, content=content_text, has_frontmatter=False, error=str(e))

        return ParseResult(
            frontmatter=metadata,
            content=content,
            has_frontmatter=bool(metadata),
        )

    def _split_frontmatter(self, content_text: str):
        try:
            metadata, content = frontmatter.parse(content_text)
        except yaml.YAMLError as e:
            raise FrontmatterParseError(f"Invalid YAML frontmatter: {e}") from e

        return metadata, content or ""
