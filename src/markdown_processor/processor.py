"""Main orchestration for the markdown processor component."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .parser import Document, MarkdownParser
from .scanner import DirectoryScanner, ScannerConfig
from .section_extractor import ExtractionConfig, Section, SectionExtractor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessedDocument:
    """A document together with its retained sections."""

    document: Document
    sections: List[Section]


class MarkdownProcessor:
    """Runs the collect and extract phases over a documentation tree."""

    def __init__(self, extraction_config: ExtractionConfig = None, scanner_config: ScannerConfig = None):
        """
        Initialize the markdown processor.

        Args:
            extraction_config: How bodies are split into sections
            scanner_config: Which files are collected
        """
        self.scanner = DirectoryScanner(scanner_config)
        self.parser = MarkdownParser()
        self.section_extractor = SectionExtractor(extraction_config)

    def process_directory(self, docs_dir: Union[str, Path]) -> List[ProcessedDocument]:
        """
        Collect every markdown file under docs_dir and extract its sections.

        Any file that cannot be read aborts the whole run.

        Args:
            docs_dir: Directory containing markdown files to process

        Returns:
            Processed documents in traversal order
        """
        docs_dir = Path(docs_dir)
        logger.info(f"Starting markdown processing for directory: {docs_dir}")

        markdown_files = list(self.scanner.scan_for_markdown_files(docs_dir))
        logger.info(f"Found {len(markdown_files)} markdown files to process")

        processed = []
        total_sections = 0

        for file_path in markdown_files:
            result = self.process_file(file_path)
            processed.append(result)
            total_sections += len(result.sections)

            if len(processed) % 10 == 0:
                logger.info(f"Processed {len(processed)} files...")

        logger.info(f"Processing complete: {len(processed)} files processed, {total_sections} sections extracted")

        return processed

    def process_file(self, file_path: Union[str, Path]) -> ProcessedDocument:
        """
        Parse a single markdown file and extract its sections.

        Args:
            file_path: Full path to the markdown file

        Returns:
            ProcessedDocument for this file
        """
        logger.debug(f"Processing file: {file_path}")

        document = self.parser.parse_file(file_path)
        sections = self.section_extractor.extract_sections(document.content)

        logger.debug(f"Extracted {len(sections)} sections from {file_path}")
        return ProcessedDocument(document=document, sections=sections)

    def process_content(self, content: str, file_path: Union[str, Path] = "content.md") -> ProcessedDocument:
        """
        Process markdown content directly (without file I/O).

        Args:
            content: Raw markdown, frontmatter included
            file_path: Path to record on the document

        Returns:
            ProcessedDocument for the content
        """
        result = self.parser.parse_content(content)
        if result.error:
            logger.warning(f"Invalid frontmatter in {file_path}, indexing whole text as body: {result.error}")

        document = Document(
            path=str(file_path),
            content=result.content,
            frontmatter=result.frontmatter,
            has_frontmatter=result.has_frontmatter,
        )
        sections = self.section_extractor.extract_sections(document.content)
        return ProcessedDocument(document=document, sections=sections)
