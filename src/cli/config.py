"""Configuration management for the docs search indexer CLI."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from src.search_index.builder import PipelineConfig
from src.search_index.records import PAGE_HREF_ANCHOR, PAGE_HREF_BARE, TITLE_COMPOSED, TITLE_SECTION


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_cap(value: str) -> Optional[int]:
    if value.strip().lower() in ("", "none"):
        return None
    cap = int(value)
    if cap <= 0:
        raise ValueError(f"CONTENT_CAP must be a positive integer or 'none', got {value!r}")
    return cap


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Documentation source
        self.docs_dir = os.getenv("DOCS_DIR", "docs/pages")
        self.skip_hidden_files = os.getenv("SKIP_HIDDEN_FILES", "false").lower() == "true"

        # JSON records output
        self.records_output_paths = _split_list(os.getenv("RECORDS_OUTPUT_PATHS", "public/index.json"))
        self.content_cap = _parse_cap(os.getenv("CONTENT_CAP", "3000"))
        self.records_leading_section_policy = os.getenv("RECORDS_LEADING_SECTION_POLICY", "implicit")

        # Section extraction
        self.leading_section_policy = os.getenv("LEADING_SECTION_POLICY", "strict")
        self.fence_policy = os.getenv("FENCE_POLICY", "content")

        # Search index patching
        self.search_index_dirs = _split_list(os.getenv("SEARCH_INDEX_DIST_DIRS", "docs/dist/.vocs"))
        self.search_index_mirror_dirs = _split_list(
            os.getenv("SEARCH_INDEX_MIRROR_DIRS", ".vercel/output/static/.vocs")
        )
        self.search_index_pattern = os.getenv("SEARCH_INDEX_PATTERN", "search-index-*.json")

        # Route filtering
        self.routes_static_dir = os.getenv("ROUTES_STATIC_DIR") or None
        self.routes_config_file = os.getenv("ROUTES_CONFIG_FILE") or None

    def records_pipeline(self) -> PipelineConfig:
        """Pipeline for the flat JSON records index (## and ### sections)."""
        return PipelineConfig(
            docs_dir=self.docs_dir,
            skip_hidden_files=self.skip_hidden_files,
            output_paths=list(self.records_output_paths),
            content_cap=self.content_cap,
            min_level=2,
            max_level=3,
            leading_section_policy=self.records_leading_section_policy,
            fence_policy=self.fence_policy,
            strip_images=True,
            render_markdown=True,
            page_href_policy=PAGE_HREF_BARE,
            title_policy=TITLE_COMPOSED,
            routes_static_dir=self.routes_static_dir,
            routes_config_file=self.routes_config_file,
        )

    def patch_pipeline(self) -> PipelineConfig:
        """Pipeline that overwrites the static-site MiniSearch index."""
        return PipelineConfig(
            docs_dir=self.docs_dir,
            skip_hidden_files=self.skip_hidden_files,
            content_cap=None,
            min_level=1,
            max_level=6,
            leading_section_policy=self.leading_section_policy,
            fence_policy=self.fence_policy,
            page_href_policy=PAGE_HREF_ANCHOR,
            title_policy=TITLE_SECTION,
            routes_static_dir=self.routes_static_dir,
            routes_config_file=self.routes_config_file,
            index_dirs=list(self.search_index_dirs),
            index_pattern=self.search_index_pattern,
            mirror_dirs=list(self.search_index_mirror_dirs),
        )
