"""Mapping from documentation file paths to site URLs."""

import re
from pathlib import Path
from typing import Union

_MARKDOWN_SUFFIX_RE = re.compile(r"\.mdx?$", re.IGNORECASE)
_INDEX_SEGMENT_RE = re.compile(r"(^|/)index$", re.IGNORECASE)


def compute_base_url(file_path: Union[str, Path], docs_root: Union[str, Path]) -> str:
    """
    Compute the page URL for a documentation file.

    ``guide/index.mdx`` maps to ``/guide``, ``guide/setup.mdx`` to
    ``/guide/setup`` and a root ``index.mdx`` to ``/``.

    Args:
        file_path: Path to the markdown file
        docs_root: Root of the documentation tree

    Returns:
        URL path starting with a slash
    """
    relative = Path(file_path).resolve().relative_to(Path(docs_root).resolve()).as_posix()
    without_ext = _MARKDOWN_SUFFIX_RE.sub("", relative)
    without_index = _INDEX_SEGMENT_RE.sub("", without_ext)
    return "/" + without_index


def build_href(base_url: str, anchor: str) -> str:
    """Join a page URL and a section anchor."""
    return f"{base_url}#{anchor}"


def strip_fragment(href: str) -> str:
    """Return the page URL of an href, without its fragment."""
    return href.split("#", 1)[0]
