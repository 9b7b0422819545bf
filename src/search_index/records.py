"""Search records built from extracted sections."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from src.markdown_processor.header_extractor import first_heading_title
from src.markdown_processor.processor import ProcessedDocument

from .routes import RouteAllowList
from .url_mapper import build_href, compute_base_url, strip_fragment

logger = logging.getLogger(__name__)

PAGE_HREF_ANCHOR = "anchor"
PAGE_HREF_BARE = "bare"

TITLE_SECTION = "section"
TITLE_COMPOSED = "composed"

TITLE_SEPARATOR = " › "


@dataclass(frozen=True)
class SearchRecord:
    """One searchable entry, derived from a single section."""

    href: str
    id: str
    title: str
    text: str
    is_page: bool = False
    titles: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def url(self) -> str:
        """Page URL without the section fragment."""
        return strip_fragment(self.href)

    def to_index_document(self) -> Dict[str, Any]:
        """Document shape fed to the full-text index."""
        return {
            "href": self.href,
            "html": "",
            "id": self.id,
            "isPage": self.is_page,
            "text": self.text,
            "title": self.title,
            "titles": list(self.titles),
        }

    def to_json_record(self) -> Dict[str, Any]:
        """Flat ``{title, content, url}`` shape for the JSON records output."""
        return {"title": self.title, "content": self.text, "url": self.href}


def document_base_title(processed: ProcessedDocument) -> str:
    """Frontmatter title, else the first header, else the file name."""
    document = processed.document
    return document.title or first_heading_title(document.content) or Path(document.path).stem


class RecordBuilder:
    """Assigns URLs, ids and titles to the sections of a document."""

    def __init__(
        self,
        content_cap: Optional[int] = None,
        page_href_policy: str = PAGE_HREF_ANCHOR,
        title_policy: str = TITLE_SECTION,
    ):
        if content_cap is not None and content_cap <= 0:
            raise ValueError(f"content_cap must be positive, got {content_cap}")
        if page_href_policy not in (PAGE_HREF_ANCHOR, PAGE_HREF_BARE):
            raise ValueError(f"Unknown page href policy: {page_href_policy}")
        if title_policy not in (TITLE_SECTION, TITLE_COMPOSED):
            raise ValueError(f"Unknown title policy: {title_policy}")

        self.content_cap = content_cap
        self.page_href_policy = page_href_policy
        self.title_policy = title_policy

    def build_records(self, processed: ProcessedDocument, docs_root: Union[str, Path]) -> List[SearchRecord]:
        """
        Build the records of one document.

        Args:
            processed: Document and its retained sections
            docs_root: Root of the documentation tree

        Returns:
            Records in section order
        """
        if not processed.sections:
            return []

        base_url = compute_base_url(processed.document.path, docs_root)
        base_title = document_base_title(processed) if self.title_policy == TITLE_COMPOSED else None

        records = []
        for index, section in enumerate(processed.sections):
            if section.is_page and self.page_href_policy == PAGE_HREF_BARE:
                href = base_url
            else:
                href = build_href(base_url, section.anchor)

            text = section.text
            if self.content_cap is not None:
                text = text[: self.content_cap]

            records.append(
                SearchRecord(
                    href=href,
                    # Positional suffix keeps ids unique when anchors repeat
                    id=f"{href}::{index}",
                    title=self._compose_title(base_title, section.title),
                    text=text,
                    is_page=section.is_page,
                    titles=tuple(section.titles),
                )
            )

        return records

    def _compose_title(self, base_title: Optional[str], section_title: str) -> str:
        if self.title_policy == TITLE_SECTION:
            return section_title
        if not section_title:
            return base_title
        return f"{base_title}{TITLE_SEPARATOR}{section_title}"


def filter_records(records: List[SearchRecord], allow_list: RouteAllowList) -> Tuple[List[SearchRecord], int]:
    """
    Keep only records whose page URL is published.

    Args:
        records: Candidate records
        allow_list: Published routes

    Returns:
        Tuple of (kept records, number of dropped records)
    """
    kept = [record for record in records if record.url in allow_list]
    dropped = len(records) - len(kept)
    if dropped:
        logger.info(f"Route filter dropped {dropped} records not in the published routes")
    return kept, dropped
