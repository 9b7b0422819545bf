"""Build command - writes the flat JSON records index."""

import logging
import sys

from src.search_index.builder import PipelineConfig, SearchIndexBuilder

logger = logging.getLogger(__name__)


def build_command(pipeline: PipelineConfig):
    """Build the JSON records index from scratch."""
    logger.info("🔍 Building search index...")
    logger.info(f"📁 Docs directory: {pipeline.docs_dir}")
    logger.info(f"💾 Output: {', '.join(pipeline.output_paths)}")
    if pipeline.route_filter_enabled:
        logger.info(f"🧭 Route filter: {pipeline.routes_static_dir or pipeline.routes_config_file}")

    try:
        result = SearchIndexBuilder(pipeline).build_records_json()
    except (OSError, ValueError) as e:
        logger.error(f"❌ Building search index failed: {e}")
        sys.exit(1)

    if result.dropped_count:
        logger.info(f"🚫 Dropped {result.dropped_count} unpublished records")
    logger.info(f"✅ Done! Generated {result.record_count} records from {result.document_count} documents")
    return result
