"""Plain-text cleanup for section bodies before indexing.

What gets removed:
  - fenced code blocks (``` or ~~~), either whole blocks or only the fence lines
  - Markdown images ``![alt](src)`` when requested
  - Markdown syntax, by rendering to HTML first, when requested
  - inline HTML/JSX tags ``<...>``
  - whitespace runs, collapsed to a single space

Without rendering, Markdown emphasis and link syntax are kept as written.
"""

import html
import re

from markdown_it import MarkdownIt

from .header_extractor import FenceTracker

FENCE_POLICY_CONTENT = "content"
FENCE_POLICY_MARKERS = "markers"
FENCE_POLICIES = (FENCE_POLICY_CONTENT, FENCE_POLICY_MARKERS)

_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)")
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")

_markdown = MarkdownIt("commonmark", {"html": True})


def remove_code_fences(text: str, policy: str = FENCE_POLICY_CONTENT) -> str:
    """
    Remove fenced code blocks from text.

    With the ``content`` policy the delimiters and everything between them
    are dropped; an unclosed fence swallows the rest of the text. With the
    ``markers`` policy only the delimiter lines are dropped.
    """
    if policy not in FENCE_POLICIES:
        raise ValueError(f"Unknown fence policy: {policy}")

    kept = []
    fences = FenceTracker()

    for line in text.splitlines(keepends=True):
        if fences.feed(line):
            continue
        if fences.in_fence and policy == FENCE_POLICY_CONTENT:
            continue
        kept.append(line)

    return "".join(kept)


def render_markdown_text(text: str) -> str:
    """Render markdown to HTML and return only its text, entities decoded."""
    rendered = _markdown.render(text)
    return html.unescape(_HTML_TAG_RE.sub("", rendered))


def clean_section_text(
    text: str,
    fence_policy: str = FENCE_POLICY_CONTENT,
    strip_images: bool = False,
    render_markdown: bool = False,
) -> str:
    """
    Turn a raw markdown section body into single-line searchable text.

    Args:
        text: Raw section body
        fence_policy: How fenced code blocks are removed
        strip_images: Also remove Markdown image references
        render_markdown: Drop emphasis, code span and link syntax by rendering

    Returns:
        Cleaned text, possibly empty
    """
    text = remove_code_fences(text, fence_policy)
    if strip_images:
        text = _IMAGE_RE.sub("", text)
    if render_markdown:
        text = render_markdown_text(text)
    else:
        text = _HTML_TAG_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
