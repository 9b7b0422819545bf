"""Section extractor that splits markdown bodies on header lines."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .header_extractor import BreadcrumbTracker, FenceTracker, HeaderExtractor, slugify
from .text_cleaner import FENCE_POLICIES, FENCE_POLICY_CONTENT, clean_section_text

logger = logging.getLogger(__name__)

LEADING_POLICY_IMPLICIT = "implicit"
LEADING_POLICY_STRICT = "strict"
LEADING_POLICIES = (LEADING_POLICY_IMPLICIT, LEADING_POLICY_STRICT)


@dataclass
class ExtractionConfig:
    """Configuration for section extraction."""

    min_level: int = 1
    max_level: int = 6
    # "implicit": text before the first header becomes its own section
    # "strict": text before the first header is discarded
    leading_section_policy: str = LEADING_POLICY_STRICT
    implicit_section_title: str = "Introduction"
    fence_policy: str = FENCE_POLICY_CONTENT
    strip_images: bool = False
    render_markdown: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.leading_section_policy not in LEADING_POLICIES:
            raise ValueError(f"Unknown leading section policy: {self.leading_section_policy}")
        if self.fence_policy not in FENCE_POLICIES:
            raise ValueError(f"Unknown fence policy: {self.fence_policy}")


@dataclass(frozen=True)
class Section:
    """A titled run of body text between two headers."""

    level: int  # 0 for the implicit leading section
    title: str
    anchor: str
    titles: List[str] = field(default_factory=list)
    is_page: bool = False
    text: str = ""


@dataclass
class _RawSection:
    level: int
    title: str
    titles: List[str]
    lines: List[str] = field(default_factory=list)

    @property
    def body(self) -> str:
        return "".join(self.lines)


class SectionExtractor:
    """Splits a markdown body into cleaned, titled sections."""

    def __init__(self, config: ExtractionConfig = None):
        self.config = config or ExtractionConfig()
        self.header_extractor = HeaderExtractor(self.config.min_level, self.config.max_level)

    def extract_sections(self, content: str) -> List[Section]:
        """
        Split content into sections and clean their text.

        Sections whose cleaned text is empty are dropped. The first retained
        section is marked as the page-level section.

        Args:
            content: Markdown body without frontmatter

        Returns:
            Sections in source order
        """
        sections = []

        for raw in self._split(content):
            text = clean_section_text(
                raw.body,
                fence_policy=self.config.fence_policy,
                strip_images=self.config.strip_images,
                render_markdown=self.config.render_markdown,
            )
            if not text:
                logger.debug(f"Dropping empty section: {raw.title!r}")
                continue

            sections.append(
                Section(
                    level=raw.level,
                    title=raw.title,
                    anchor=slugify(raw.title),
                    titles=list(raw.titles),
                    is_page=not sections,
                    text=text,
                )
            )

        return sections

    def count_raw_sections(self, content: str) -> int:
        """Number of sections found before empty-text filtering."""
        return len(self._split(content))

    def _split(self, content: str) -> List[_RawSection]:
        """Split content on header lines without cleaning."""
        raw_sections: List[_RawSection] = []
        breadcrumbs = BreadcrumbTracker()
        fences = FenceTracker()

        current: Optional[_RawSection] = None
        if self.config.leading_section_policy == LEADING_POLICY_IMPLICIT:
            current = _RawSection(level=0, title=self.config.implicit_section_title, titles=[])

        for line_num, line in enumerate(content.splitlines(keepends=True), 1):
            is_marker = fences.feed(line)
            header = None if is_marker or fences.in_fence else self.header_extractor.match(line, line_num)
            if header is None:
                if current is not None:
                    current.lines.append(line if line.endswith("\n") else line + "\n")
                continue

            if current is not None and self._keep_raw(current):
                raw_sections.append(current)

            current = _RawSection(
                level=header.level,
                title=header.text,
                titles=breadcrumbs.push(header.level, header.text),
            )

        if current is not None and self._keep_raw(current):
            raw_sections.append(current)

        return raw_sections

    def _keep_raw(self, section: _RawSection) -> bool:
        # The implicit leading section only exists if it has any text
        if section.level == 0:
            return bool(section.body.strip())
        return True
