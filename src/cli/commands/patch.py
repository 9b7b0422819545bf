"""Patch command - overwrites the static-site MiniSearch index."""

import logging
import sys

from src.search_index.builder import PipelineConfig, SearchIndexBuilder
from src.search_index.writer import IndexArtifactNotFoundError

logger = logging.getLogger(__name__)


def patch_command(pipeline: PipelineConfig):
    """Rebuild the site search index from markdown sources and overwrite the built one."""
    logger.info("🔄 Patching site search index...")
    logger.info(f"📁 Docs directory: {pipeline.docs_dir}")
    logger.info(f"🔎 Index directories: {', '.join(pipeline.index_dirs) or '(none)'}")

    try:
        result = SearchIndexBuilder(pipeline).patch_search_index()
    except IndexArtifactNotFoundError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        logger.error(f"❌ Patching search index failed: {e}")
        sys.exit(1)

    if result.dropped_count:
        logger.info(f"🚫 Dropped {result.dropped_count} unpublished sections")
    logger.info(
        f"✅ Search index patched with {result.record_count} sections from "
        f"{result.document_count} documents ({len(result.written_paths)} files written)"
    )
    return result
