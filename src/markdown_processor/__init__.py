"""Markdown processor for splitting documentation files into searchable sections."""

from .header_extractor import BreadcrumbTracker, FenceTracker, Header, HeaderExtractor, first_heading_title, slugify
from .parser import Document, DocumentReadError, FrontmatterParseError, MarkdownParser, ParseResult
from .processor import MarkdownProcessor, ProcessedDocument
from .scanner import DirectoryScanner, ScannerConfig
from .section_extractor import ExtractionConfig, Section, SectionExtractor
from .text_cleaner import clean_section_text, remove_code_fences, render_markdown_text

__all__ = [
    "BreadcrumbTracker",
    "FenceTracker",
    "Header",
    "HeaderExtractor",
    "first_heading_title",
    "slugify",
    "Document",
    "DocumentReadError",
    "FrontmatterParseError",
    "MarkdownParser",
    "ParseResult",
    "MarkdownProcessor",
    "ProcessedDocument",
    "DirectoryScanner",
    "ScannerConfig",
    "ExtractionConfig",
    "Section",
    "SectionExtractor",
    "clean_section_text",
    "remove_code_fences",
    "render_markdown_text",
]
