"""Search index pipeline: collect, extract, build records, write."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from src.markdown_processor.processor import MarkdownProcessor
from src.markdown_processor.scanner import ScannerConfig
from src.markdown_processor.section_extractor import LEADING_POLICY_STRICT, ExtractionConfig
from src.markdown_processor.text_cleaner import FENCE_POLICY_CONTENT

from .minisearch import MiniSearchIndex
from .records import PAGE_HREF_ANCHOR, TITLE_SECTION, RecordBuilder, SearchRecord, filter_records
from .routes import RouteAllowList
from .writer import find_index_artifact, mirror, write_text

logger = logging.getLogger(__name__)

INDEX_FIELDS = ["title", "titles", "text"]
INDEX_STORE_FIELDS = ["href", "html", "isPage", "text", "title", "titles"]


@dataclass
class PipelineConfig:
    """Everything one pipeline run needs, passed explicitly to each stage."""

    docs_dir: str = "docs/pages"
    skip_hidden_files: bool = False
    output_paths: List[str] = field(default_factory=list)
    content_cap: Optional[int] = None

    # Section extraction
    min_level: int = 1
    max_level: int = 6
    leading_section_policy: str = LEADING_POLICY_STRICT
    fence_policy: str = FENCE_POLICY_CONTENT
    strip_images: bool = False
    render_markdown: bool = False

    # Record shape
    page_href_policy: str = PAGE_HREF_ANCHOR
    title_policy: str = TITLE_SECTION

    # Route filtering, disabled when neither source is set
    routes_static_dir: Optional[str] = None
    routes_config_file: Optional[str] = None

    # Index patching
    index_dirs: List[str] = field(default_factory=list)
    index_pattern: str = "search-index-*.json"
    mirror_dirs: List[str] = field(default_factory=list)

    @property
    def route_filter_enabled(self) -> bool:
        return bool(self.routes_static_dir or self.routes_config_file)

    def extraction_config(self) -> ExtractionConfig:
        return ExtractionConfig(
            min_level=self.min_level,
            max_level=self.max_level,
            leading_section_policy=self.leading_section_policy,
            fence_policy=self.fence_policy,
            strip_images=self.strip_images,
            render_markdown=self.render_markdown,
        )

    def scanner_config(self) -> ScannerConfig:
        return ScannerConfig(skip_hidden_files=self.skip_hidden_files)


@dataclass
class BuildResult:
    """Summary of a pipeline run."""

    record_count: int = 0
    dropped_count: int = 0
    document_count: int = 0
    written_paths: List[Path] = field(default_factory=list)


class SearchIndexBuilder:
    """Builds the site search index from a documentation tree."""

    def __init__(self, config: PipelineConfig):
        self.config = config
        self.processor = MarkdownProcessor(config.extraction_config(), config.scanner_config())
        self.record_builder = RecordBuilder(
            content_cap=config.content_cap,
            page_href_policy=config.page_href_policy,
            title_policy=config.title_policy,
        )

    def load_allow_list(self) -> Optional[RouteAllowList]:
        """Load published routes from whichever source is configured."""
        if self.config.routes_static_dir:
            return RouteAllowList.from_static_output(self.config.routes_static_dir)
        if self.config.routes_config_file:
            return RouteAllowList.from_config_file(self.config.routes_config_file)
        return None

    def collect_records(self) -> Tuple[List[SearchRecord], int, int]:
        """
        Run collect, extract and record building over the docs directory.

        Returns:
            Tuple of (records, dropped record count, document count)
        """
        allow_list = self.load_allow_list()

        processed_documents = self.processor.process_directory(self.config.docs_dir)

        records = []
        for processed in processed_documents:
            records.extend(self.record_builder.build_records(processed, self.config.docs_dir))

        dropped = 0
        if allow_list is not None:
            records, dropped = filter_records(records, allow_list)

        return records, dropped, len(processed_documents)

    def build_records_json(self) -> BuildResult:
        """
        Write records as a flat JSON array to every configured output path.

        Always writes, even when there are no records.
        """
        if not self.config.output_paths:
            raise ValueError("No output paths configured for the records index")

        records, dropped, document_count = self.collect_records()
        payload = json.dumps([record.to_json_record() for record in records], ensure_ascii=False)

        result = BuildResult(record_count=len(records), dropped_count=dropped, document_count=document_count)
        for output_path in self.config.output_paths:
            result.written_paths.append(write_text(output_path, payload))
            logger.info(f"Generated {len(records)} records at {output_path}")

        return result

    def patch_search_index(self) -> BuildResult:
        """
        Overwrite the static-site search index with a rebuilt MiniSearch index.

        The existing artifact is located before any document is read; its
        absence is fatal.
        """
        target = find_index_artifact(self.config.index_dirs, self.config.index_pattern)
        logger.info(f"Found search index to overwrite: {target}")

        records, dropped, document_count = self.collect_records()

        index = MiniSearchIndex(fields=INDEX_FIELDS, store_fields=INDEX_STORE_FIELDS)
        index.add_all(record.to_index_document() for record in records)
        payload = json.dumps(index.to_dict(), ensure_ascii=False)

        result = BuildResult(record_count=len(records), dropped_count=dropped, document_count=document_count)
        result.written_paths.append(write_text(target, payload))
        logger.info(f"Search index overwritten with {len(records)} sections at {target}")

        result.written_paths.extend(mirror(payload, target.name, self.config.mirror_dirs))
        return result
