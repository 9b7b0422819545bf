"""Header extraction, anchor generation and breadcrumb tracking."""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

HEADER_PATTERN = re.compile(r"^(#{1,6})\s+(\S.*?)\s*$")
FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")


def slugify(text: str) -> str:
    """
    Convert header text to a URL fragment.

    Args:
        text: Header text

    Returns:
        Lowercase anchor made of [a-z0-9] runs joined by single dashes
    """
    slug = str(text).strip().lower()
    slug = slug.replace("&", "and")
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


class FenceTracker:
    """
    Tracks fenced code blocks line by line.

    A fence opens on a run of three or more backticks or tildes and only
    closes on a line holding a run of the same character that is at least
    as long, with nothing after it.
    """

    def __init__(self):
        self._open: Optional[Tuple[str, int]] = None

    @property
    def in_fence(self) -> bool:
        return self._open is not None

    def feed(self, line: str) -> bool:
        """
        Consume one line and update the fence state.

        Args:
            line: Line of markdown text, with or without trailing newline

        Returns:
            True if the line opened or closed a fence
        """
        match = FENCE_PATTERN.match(line.rstrip("\r\n"))
        if not match:
            return False

        marker, info = match.group(1), match.group(2)

        if self._open is None:
            # Backtick fences cannot carry backticks in their info string
            if marker[0] == "`" and "`" in info:
                return False
            self._open = (marker[0], len(marker))
            return True

        char, length = self._open
        if marker[0] == char and len(marker) >= length and not info.strip():
            self._open = None
            return True
        return False


@dataclass
class Header:
    """Represents a markdown header with position and hierarchy information."""

    level: int  # 1-6 (number of # symbols)
    text: str  # Header text without # symbols
    line_number: int  # Line number (1-based)
    raw_line: str  # Full line including # symbols

    @property
    def anchor(self) -> str:
        return slugify(self.text)


class HeaderExtractor:
    """Recognizes ATX headers within a configured level range."""

    def __init__(self, min_level: int = 1, max_level: int = 6):
        if not 1 <= min_level <= max_level <= 6:
            raise ValueError(f"Invalid header level range: {min_level}-{max_level}")
        self.min_level = min_level
        self.max_level = max_level

    def match(self, line: str, line_number: int = 0) -> Optional[Header]:
        """
        Match a single line against the header pattern.

        Args:
            line: Line of markdown text, with or without trailing newline
            line_number: Line number to record on the header

        Returns:
            Header if the line is a tracked header, otherwise None
        """
        match = HEADER_PATTERN.match(line.rstrip("\r\n"))
        if not match:
            return None

        level = len(match.group(1))
        if level < self.min_level or level > self.max_level:
            return None

        return Header(
            level=level,
            text=match.group(2).strip(),
            line_number=line_number,
            raw_line=line.rstrip("\r\n"),
        )

    def extract_headers(self, content: str) -> List[Header]:
        """
        Extract all tracked headers from markdown content.

        Lines inside fenced code blocks are never treated as headers.

        Args:
            content: Markdown content string

        Returns:
            List of Header objects in document order
        """
        headers = []
        fences = FenceTracker()

        for line_num, line in enumerate(content.splitlines(), 1):
            if fences.feed(line) or fences.in_fence:
                continue

            header = self.match(line, line_num)
            if header:
                headers.append(header)

        return headers


def first_heading_title(content: str) -> Optional[str]:
    """Return the text of the first header of any level, if there is one."""
    headers = HeaderExtractor().extract_headers(content)
    return headers[0].text if headers else None


class BreadcrumbTracker:
    """Carries forward the last-seen title at each header level."""

    def __init__(self):
        self._titles: List[Optional[str]] = []

    def push(self, level: int, title: str) -> List[str]:
        """
        Record a header and return its ancestor titles.

        Args:
            level: Header level (1-6)
            title: Header text

        Returns:
            Titles of the enclosing headers, outermost first
        """
        titles = self._titles[: level - 1]
        titles.extend([None] * (level - 1 - len(titles)))
        ancestors = [t for t in titles if t is not None]

        titles.append(title)
        self._titles = titles
        return ancestors

    def reset(self):
        self._titles = []
